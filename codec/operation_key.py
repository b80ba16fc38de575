# ============================================================================
# OPERATION KEY CODEC
# ============================================================================
# STATUS: Core - Build and parse operation keys
# PURPOSE: "<rsc_id>_<op_type>_<interval_ms>" <-> OperationKey
# EXPORTS: op_key, parse_op_key
# ============================================================================
"""
Operation Key Codec

Operation keys are joined with "_" and never escaped, so resource ids may
themselves contain underscores. Parsing therefore works right to left:

    "my_db_monitor_10000"
              ^       ^
              |       interval: trailing digits, must follow "_"
              op_type: back to the previous "_"
    rsc_id:   everything before that

Notify keys ("db_pre_notify_start_0") go through the same parser; a
trailing "_pre_notify" / "_post_notify" on the resource part is dropped.

Resource ids that genuinely end in "_pre_notify" or "_post_notify" cannot
round-trip. That is a property of the wire format, not a parser bug.
"""

from typing import Optional

from core.config import get_defaults
from core.errors import InvalidFormatError, require
from core.logging import ComponentType, get_logger, log_context
from core.models.operation import OperationKey

logger = get_logger(__name__, ComponentType.CODEC)

OP_KEY_FMT = "{rsc_id}_{op_type}_{interval_ms}"

NOTIFY_SUFFIXES = ("_post_notify", "_pre_notify")


def op_key(rsc_id: str, op_type: str, interval_ms: int = 0) -> str:
    """
    Generate an operation key.

    Args:
        rsc_id: ID of resource being operated on
        op_type: Operation name
        interval_ms: Operation interval

    Returns:
        Operation key string

    Raises:
        InvalidArgumentError: rsc_id or op_type is None

    The interval is reduced to 32 bits, so negative or oversized values
    wrap the same way the parser wraps them.
    """
    require(rsc_id, "rsc_id", "op_key")
    require(op_type, "op_type", "op_key")
    interval_ms = int(interval_ms) & get_defaults().wire.interval_mask
    return OP_KEY_FMT.format(rsc_id=rsc_id, op_type=op_type, interval_ms=interval_ms)


def _strip_notify(rsc_id: str) -> str:
    # First occurrence only; strip when it is exactly the suffix
    for suffix in NOTIFY_SUFFIXES:
        found = rsc_id.find(suffix)
        if found != -1 and rsc_id[found:] == suffix:
            rsc_id = rsc_id[:found]
    return rsc_id


def parse_op_key(key: Optional[str]) -> OperationKey:
    """
    Parse an operation key into its constituent parts.

    Args:
        key: Operation key to parse

    Returns:
        OperationKey with rsc_id, op_type and interval_ms

    Raises:
        InvalidFormatError: key is empty or not shaped like an operation key
    """
    if not key:
        raise InvalidFormatError(key, "empty operation key", kind="operation key")

    mask = get_defaults().wire.interval_mask

    with log_context(op_key=key):
        # Trailing digits, never including index 0. Place values stay below
        # 2**32 and reach 0 after 32 digits; later digits add nothing.
        offset = len(key) - 1
        interval_ms = 0
        place = 1
        while offset > 0 and key[offset].isdigit() and key[offset].isascii():
            if place:
                interval_ms = (interval_ms + int(key[offset]) * place) & mask
                place = (place * 10) & mask
            offset -= 1

        logger.debug(f"Operation key '{key}' has interval {interval_ms}ms")

        if offset == len(key) - 1 or key[offset] != "_":
            raise InvalidFormatError(key, "no '_<interval>' suffix", kind="operation key")

        remainder = key[:offset]

        # Action runs back to the previous underscore
        separator = remainder.rfind("_")
        if separator == -1:
            raise InvalidFormatError(key, "no '_' before action", kind="operation key")

        op_type = remainder[separator + 1:]
        rsc_id = _strip_notify(remainder[:separator])

        with log_context(rsc_id=rsc_id):
            logger.debug(f"  Action: {op_type}")
            logger.debug(f"  Resource: {rsc_id}")

    return OperationKey(rsc_id=rsc_id, op_type=op_type, interval_ms=interval_ms)


def is_op_key(key: Optional[str]) -> bool:
    """Check whether a string parses as an operation key."""
    try:
        parse_op_key(key)
    except InvalidFormatError:
        return False
    return True


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = ["OP_KEY_FMT", "op_key", "parse_op_key", "is_op_key"]
