# ============================================================================
# TRANSITION KEY / MAGIC CODEC
# ============================================================================
# STATUS: Core - Encode and decode transition keys and magic strings
# PURPOSE: Correlate executor results with planner intent
# EXPORTS: transition_key, decode_transition_key,
#          transition_magic, decode_transition_magic
# ============================================================================
"""
Transition Key / Magic Codec

Formats (bit-exact, shared with peers):

    key:   "<action_id>:<transition_id>:<target_rc>:<node>"
           node left-justified, space-padded to at least 36 characters
    magic: "<op_status>:<op_rc>;<key>"

Peers decode these with C scanf conversions, so decoding here follows the
same rules rather than a plain split:
- integers may carry leading whitespace and a sign, and saturate at the
  32-bit int range
- ':' and ';' must match exactly
- the node is the first run of non-whitespace, at most 36 characters;
  the padding written by transition_key() is not part of it
- a node that is not exactly 36 characters is only worth a warning

Note the argument order: builders take (transition_id, action_id, ...)
but the key starts with the action id.
"""

import re
from enum import Enum
from typing import List, Optional, Sequence, Tuple, Union

from core.config import get_defaults
from core.errors import InvalidFormatError, require
from core.logging import ComponentType, get_logger, log_context
from core.models.transition import TransitionKey, TransitionMagic

logger = get_logger(__name__, ComponentType.CODEC)


# ============================================================================
# SCANNER
# ============================================================================

SCAN_EOF = -1

_WHITESPACE = " \t\n\v\f\r"
_INT_RE = re.compile(r"[+-]?[0-9]+")

INT_MIN = -(2 ** 31)
INT_MAX = 2 ** 31 - 1


def _skip_ws(text: str, pos: int) -> int:
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    return pos


def _to_int(token: str) -> int:
    """
    Convert a matched integer, saturating at the 32-bit int range.

    Digit runs are never handed to int() whole, so arbitrarily long fields
    cost nothing and cannot trip the interpreter's digit limit.
    """
    negative = token.startswith("-")
    digits = token.lstrip("+-").lstrip("0") or "0"
    if len(digits) > 10:
        return INT_MIN if negative else INT_MAX
    value = -int(digits) if negative else int(digits)
    return max(INT_MIN, min(INT_MAX, value))


def _scan(text: str, pattern: Sequence[str]) -> Tuple[int, List[Union[int, str]]]:
    """
    Match text against a scanf-style pattern.

    Pattern items are "%d", "%s", "%<width>s" or a single literal character.

    Returns:
        (count, values): count is the number of conversions stored, or
        SCAN_EOF if the input ran out before the first one
    """
    values: List[Union[int, str]] = []
    pos = 0

    def ran_out() -> Tuple[int, List[Union[int, str]]]:
        return (len(values) if values else SCAN_EOF), values

    for item in pattern:
        if item == "%d":
            pos = _skip_ws(text, pos)
            if pos >= len(text):
                return ran_out()
            match = _INT_RE.match(text, pos)
            if match is None:
                return len(values), values
            values.append(_to_int(match.group()))
            pos = match.end()

        elif item.startswith("%") and item.endswith("s"):
            width = int(item[1:-1] or 0)
            pos = _skip_ws(text, pos)
            if pos >= len(text):
                return ran_out()
            end = pos
            while end < len(text) and text[end] not in _WHITESPACE:
                if width and end - pos >= width:
                    break
                end += 1
            values.append(text[pos:end])
            pos = end

        else:
            if pos >= len(text):
                return ran_out()
            if text[pos] != item:
                return len(values), values
            pos += 1

    return len(values), values


def _key_pattern() -> Tuple[str, ...]:
    width = get_defaults().wire.node_field_width
    return ("%d", ":", "%d", ":", "%d", ":", f"%{width}s")


MAGIC_PATTERN = ("%d", ":", "%d", ";", "%s")


# ============================================================================
# TRANSITION KEY
# ============================================================================

def _as_int(value: Union[int, Enum]) -> int:
    return int(value.value) if isinstance(value, Enum) else int(value)


def transition_key(
    transition_id: int,
    action_id: int,
    target_rc: int,
    node: str,
) -> str:
    """
    Generate a transition key.

    Args:
        transition_id: Transition the action belongs to
        action_id: Action within the transition
        target_rc: Return code the planner expects
        node: Node identifier (padded to 36 characters, never truncated)

    Raises:
        InvalidArgumentError: node is None
    """
    require(node, "node", "transition_key")
    width = get_defaults().wire.node_field_width
    return (
        f"{_as_int(action_id)}:{_as_int(transition_id)}:{_as_int(target_rc)}:"
        f"{node.ljust(width)}"
    )


def decode_transition_key(key: Optional[str]) -> TransitionKey:
    """
    Parse a transition key into its constituent parts.

    Returns:
        TransitionKey

    Raises:
        InvalidFormatError: fewer than four fields could be read
    """
    if key is None:
        raise InvalidFormatError(key, "no transition key", kind="transition key")

    with log_context(transition_key=key):
        count, values = _scan(key, _key_pattern())
        if count != 4:
            logger.error(f"Invalid transition key '{key}'")
            raise InvalidFormatError(
                key, f"expected 4 fields, read {max(count, 0)}", kind="transition key"
            )

        action_id, transition_id, target_rc, uuid = values

        settings = get_defaults()
        if len(uuid) != settings.wire.node_field_width and settings.logging.warn_uuid_length:
            with log_context(node=uuid):
                logger.warning(f"Invalid UUID '{uuid}' in transition key '{key}'")

    return TransitionKey(
        action_id=action_id,
        transition_id=transition_id,
        target_rc=target_rc,
        uuid=uuid,
    )


# ============================================================================
# TRANSITION MAGIC
# ============================================================================

def transition_magic(
    op_status: int,
    op_rc: int,
    transition_id: int,
    action_id: int,
    target_rc: int,
    node: str,
) -> str:
    """
    Generate a transition magic string.

    Raises:
        InvalidArgumentError: node is None
    """
    key = transition_key(transition_id, action_id, target_rc, node)
    return f"{_as_int(op_status)}:{_as_int(op_rc)};{key}"


def decode_transition_magic(magic: Optional[str]) -> TransitionMagic:
    """
    Parse a transition magic string into its constituent parts.

    Returns:
        TransitionMagic with op_status, op_rc and the embedded key

    Raises:
        InvalidFormatError: the status prefix or the embedded key is malformed
    """
    if magic is None:
        raise InvalidFormatError(magic, "no transition magic", kind="transition magic")

    count, values = _scan(magic, MAGIC_PATTERN)
    if count == SCAN_EOF:
        logger.error(f"Could not decode transition information '{magic}': no data")
        raise InvalidFormatError(magic, "no data", kind="transition magic")
    if count < 3:
        logger.warning(
            f"Transition information '{magic}' incomplete ({count} of 3 expected items)"
        )
        raise InvalidFormatError(
            magic, f"read {count} of 3 expected items", kind="transition magic"
        )

    op_status, op_rc, key = values
    return TransitionMagic(
        op_status=op_status,
        op_rc=op_rc,
        key=decode_transition_key(key),
    )


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "SCAN_EOF",
    "transition_key",
    "decode_transition_key",
    "transition_magic",
    "decode_transition_magic",
]
