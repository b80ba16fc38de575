# ============================================================================
# RESULT CLASSIFIER
# ============================================================================
# STATUS: Results - Decide whether an operation failed
# PURPOSE: Compare executor outcome with the planner's expected rc
# EXPORTS: is_failure, did_op_fail, expected_rc
# ============================================================================
"""
Result Classifier

    CANCELLED, PENDING                    -> not a failure (no outcome yet)
    NOTSUPPORTED, TIMEOUT, ERROR,
    NOT_CONNECTED, INVALID                -> failure
    anything else                         -> failure iff rc != target rc

The target rc normally comes from the transition key the executor passed
through as user data; see expected_rc().
"""

from typing import Optional, Union

from core.contracts import OpStatus
from core.errors import InvalidFormatError
from core.logging import ComponentType, get_logger
from core.models.result import OperationResult
from codec.transition import decode_transition_key

logger = get_logger(__name__, ComponentType.RESULTS)


def _as_status(status: Union[OpStatus, int]) -> Union[OpStatus, int]:
    try:
        return OpStatus(status)
    except ValueError:
        # Unrecognised codes are judged on rc like any other terminal status
        return status


def is_failure(status: Union[OpStatus, int], actual_rc: int, target_rc: int) -> bool:
    """
    Check whether an operation result counts as a failure.

    Args:
        status: Executor status
        actual_rc: Return code the agent produced
        target_rc: Return code the planner expected
    """
    status = _as_status(status)
    if isinstance(status, OpStatus):
        if not status.has_outcome():
            return False
        if status.is_unconditional_failure():
            return True
    return actual_rc != target_rc


def did_op_fail(result: OperationResult, target_rc: int) -> bool:
    """Check an OperationResult against target_rc."""
    return is_failure(result.status, result.rc, target_rc)


def expected_rc(user_data: Optional[str]) -> int:
    """
    Return code the planner expected, from an operation's user data.

    Returns:
        target_rc of the embedded transition key, or 0 if there is none
    """
    if not user_data:
        return 0
    try:
        return decode_transition_key(user_data).target_rc
    except InvalidFormatError:
        logger.debug(f"No transition key in user data '{user_data}', expecting rc 0")
        return 0


__all__ = ["is_failure", "did_op_fail", "expected_rc"]
