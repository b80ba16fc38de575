# ============================================================================
# OPERATION RESULT MODEL
# ============================================================================
# STATUS: Core model - Executor operation result
# PURPOSE: What the executor reports back for one operation
# EXPORTS: OperationResult
# DEPENDENCIES: pydantic
# ============================================================================
"""
Operation Result Model

The executor reports status + actual rc. The rc the planner wanted is
not in the result itself; it travels inside user_data as a transition key.
"""

from typing import Optional

from pydantic import BaseModel, Field

from core.contracts import OpStatus


class OperationResult(BaseModel):
    """
    Terminal (or pending) state of one executed operation.
    """
    rsc_id: Optional[str] = Field(default=None)
    op_type: Optional[str] = Field(default=None)
    interval_ms: int = Field(default=0, ge=0)

    status: OpStatus = Field(default=OpStatus.DONE)
    rc: int = Field(default=0, description="Actual return code from the agent")

    user_data: Optional[str] = Field(
        default=None,
        description="Transition key passed through the executor untouched"
    )

    model_config = {"frozen": True}

    def op_key(self) -> str:
        """Operation key this result belongs to."""
        from codec.operation_key import op_key
        return op_key(self.rsc_id, self.op_type, self.interval_ms)

    def expected_rc(self) -> int:
        """Return code the planner expected, 0 if unknown."""
        from results.classifier import expected_rc
        return expected_rc(self.user_data)

    def did_fail(self, target_rc: Optional[int] = None) -> bool:
        """
        Check the result against target_rc (default: decoded from user_data).
        """
        from results.classifier import is_failure
        if target_rc is None:
            target_rc = self.expected_rc()
        return is_failure(self.status, self.rc, target_rc)


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = ["OperationResult"]
