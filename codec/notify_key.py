# ============================================================================
# NOTIFY KEY BUILDER
# ============================================================================
# STATUS: Core - Build notification operation keys
# PURPOSE: "<rsc_id>_<pre|post>_notify_<op_type>_0"
# EXPORTS: notify_key
# ============================================================================
"""
Notify Key Builder

There is no dedicated parser: a notify key is an operation key with
interval 0, and codec.operation_key.parse_op_key() recovers the original
rsc_id and base action from it.

    notify_key("db", "pre", "start") == "db_pre_notify_start_0"
    parse_op_key("db_pre_notify_start_0") -> rsc_id="db", op_type="start"
"""

from enum import Enum
from typing import Union

from core.contracts import NotifyType
from core.errors import require

NOTIFY_KEY_FMT = "{rsc_id}_{notify_type}_notify_{op_type}_0"


def notify_key(
    rsc_id: str,
    notify_type: Union[NotifyType, str],
    op_type: str,
) -> str:
    """
    Generate a notification operation key.

    Raises:
        InvalidArgumentError: any argument is None
    """
    require(rsc_id, "rsc_id", "notify_key")
    require(op_type, "op_type", "notify_key")
    require(notify_type, "notify_type", "notify_key")
    if isinstance(notify_type, Enum):
        notify_type = notify_type.value
    return NOTIFY_KEY_FMT.format(rsc_id=rsc_id, notify_type=notify_type, op_type=op_type)


__all__ = ["NOTIFY_KEY_FMT", "notify_key"]
