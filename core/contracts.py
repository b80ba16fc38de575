# ============================================================================
# BASE CONTRACTS & ENUMS
# ============================================================================
# STATUS: Foundation - Wire enums and attribute names
# PURPOSE: Values shared with other cluster manager instances
# EXPORTS: OpStatus, NotifyType, ActionName, attribute constants, meta_name
# DEPENDENCIES: enum
# ============================================================================
"""
Base contracts for the operation key codec.

Everything here crosses a process boundary:
- Executor status codes (integers on the wire)
- Action names embedded in operation keys
- Attribute names found in operation parameter sets

None of these may change independently of the other cluster members.
"""

from enum import Enum


# ============================================================================
# STATUS ENUMS
# ============================================================================

class OpStatus(int, Enum):
    """
    Executor-reported operation status.

    Values are the executor's wire integers. Only PENDING and CANCELLED
    mean "no outcome yet"; the unconditional failures are listed in
    is_unconditional_failure(). Everything else is judged by return code.
    """
    UNKNOWN = -2
    PENDING = -1
    DONE = 0
    CANCELLED = 1
    TIMEOUT = 2
    NOTSUPPORTED = 3
    ERROR = 4
    ERROR_HARD = 5
    ERROR_FATAL = 6
    NOT_INSTALLED = 7
    NOT_CONNECTED = 8
    INVALID = 9

    def has_outcome(self) -> bool:
        """Check if the operation has reached a definitive outcome."""
        return self not in (OpStatus.CANCELLED, OpStatus.PENDING)

    def is_unconditional_failure(self) -> bool:
        """Check if this status is a failure regardless of return code."""
        return self in (
            OpStatus.NOTSUPPORTED,
            OpStatus.TIMEOUT,
            OpStatus.ERROR,
            OpStatus.NOT_CONNECTED,
            OpStatus.INVALID,
        )


class NotifyType(str, Enum):
    """Which side of an action a notification wraps."""
    PRE = "pre"
    POST = "post"


class ActionName(str, Enum):
    """Resource action names as they appear inside operation keys."""
    START = "start"
    STOP = "stop"
    MONITOR = "monitor"          # a.k.a. status
    PROMOTE = "promote"
    DEMOTE = "demote"
    RELOAD = "reload"
    MIGRATE_TO = "migrate_to"
    MIGRATE_FROM = "migrate_from"
    NOTIFY = "notify"


# ============================================================================
# ATTRIBUTE NAMES
# ============================================================================

ATTR_ID = "id"
ATTR_CRM_VERSION = "crm_feature_set"
ATTR_OP_DIGEST = "op-digest"
ATTR_TARGET = "on_node"
ATTR_TARGET_UUID = "on_node_uuid"
ATTR_EXTERNAL_IP = "pcmk_external_ip"
ATTR_INTERVAL = "interval"
ATTR_INTERVAL_MS = "interval"
ATTR_TIMEOUT = "timeout"
ATTR_NAME = "name"

TAG_OP = "op"

# Prefix marking manager-injected parameters. No trailing underscore.
META_PREFIX = "CRM_meta"


def meta_name(field: str) -> str:
    """
    Build the meta-attribute name for a field.

    Dashes become underscores so the result is usable as an environment
    variable name by agents: meta_name("on-fail") == "CRM_meta_on_fail".
    """
    return f"{META_PREFIX}_{field}".replace("-", "_")


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "OpStatus",
    "NotifyType",
    "ActionName",
    "ATTR_ID",
    "ATTR_CRM_VERSION",
    "ATTR_OP_DIGEST",
    "ATTR_TARGET",
    "ATTR_TARGET_UUID",
    "ATTR_EXTERNAL_IP",
    "ATTR_INTERVAL",
    "ATTR_INTERVAL_MS",
    "ATTR_TIMEOUT",
    "ATTR_NAME",
    "TAG_OP",
    "META_PREFIX",
    "meta_name",
]
