# ============================================================================
# RESULTS MODULE
# ============================================================================
# STATUS: Results module initialization
# PURPOSE: Export the operation result classifier
# ============================================================================

from results.classifier import did_op_fail, expected_rc, is_failure

__all__ = ["did_op_fail", "expected_rc", "is_failure"]
