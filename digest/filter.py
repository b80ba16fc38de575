# ============================================================================
# DIGEST PARAMETER FILTER
# ============================================================================
# STATUS: Digest - Strip attributes that must not affect parameter digests
# PURPOSE: Make operation digests reproducible across nodes and versions
# EXPORTS: filter_op_for_digest, DIGEST_ATTR_FILTER
# ============================================================================
"""
Digest Parameter Filter

An operation's parameter digest is compared against a freshly computed one
to decide whether configuration changed. Anything the manager injects for
its own bookkeeping has to go first:

1. Fixed identity/bookkeeping attributes (id, feature set, old digest,
   target node name/uuid, external ip)
2. Every meta-attribute (name starts with "CRM_meta", any case)
3. ...except the timeout of a recurring operation, which is put back:
   a changed monitor timeout must still change the digest

The prefix match ignores case. Nothing needs that, but existing digests
were computed that way, so it stays.
"""

import re
import xml.etree.ElementTree as ET
from typing import MutableMapping, Optional, Union

from core.config import get_defaults
from core.contracts import (
    ATTR_CRM_VERSION,
    ATTR_EXTERNAL_IP,
    ATTR_ID,
    ATTR_INTERVAL_MS,
    ATTR_OP_DIGEST,
    ATTR_TARGET,
    ATTR_TARGET_UUID,
    ATTR_TIMEOUT,
    meta_name,
)
from core.logging import ComponentType, get_logger
from digest.attributes import AttributeStore, ElementAttributeStore, ParameterSet

logger = get_logger(__name__, ComponentType.DIGEST)

DIGEST_ATTR_FILTER = (
    ATTR_ID,
    ATTR_CRM_VERSION,
    ATTR_OP_DIGEST,
    ATTR_TARGET,
    ATTR_TARGET_UUID,
    ATTR_EXTERNAL_IP,
)

Params = Union[AttributeStore, ET.Element, MutableMapping[str, str]]

# ASCII digits only; peers parse with strtoll
_MS_RE = re.compile(r"[+-]?[0-9]+")
_WHITESPACE = " \t\n\v\f\r"


def _as_store(params: Params) -> AttributeStore:
    if isinstance(params, AttributeStore):
        return params
    if isinstance(params, ET.Element):
        return ElementAttributeStore(params)
    return ParameterSet.wrap(params)


def value_ms(store: AttributeStore, name: str) -> Optional[int]:
    """
    Read an attribute as unsigned milliseconds.

    Returns:
        The value, or None if absent, malformed or out of range
    """
    value = store.get(name)
    if value is None:
        return None
    match = _MS_RE.fullmatch(value.strip(_WHITESPACE))
    if match is None:
        return None
    digits = match.group().lstrip("+-").lstrip("0")
    if match.group().startswith("-") and digits:
        return None
    if len(digits) > 10:
        return None
    parsed = int(digits or "0")
    if parsed > get_defaults().wire.interval_mask:
        return None
    return parsed


def filter_op_for_digest(params: Optional[Params]) -> None:
    """
    Remove attributes not needed for an operation digest, in place.

    Args:
        params: Operation parameters; an AttributeStore, an ElementTree
            element, or a dict (edited in place). None is ignored.
    """
    if params is None:
        return

    store = _as_store(params)
    meta_prefix = get_defaults().wire.meta_prefix.lower()

    for name in DIGEST_ATTR_FILTER:
        store.remove(name)

    interval_ms = value_ms(store, meta_name(ATTR_INTERVAL_MS)) or 0

    timeout_name = meta_name(ATTR_TIMEOUT)
    timeout = store.get(timeout_name)

    removed = []
    for name in store.names():
        if name.lower().startswith(meta_prefix):
            store.remove(name)
            removed.append(name)

    if interval_ms != 0 and timeout is not None:
        store.set(timeout_name, timeout)

    logger.debug(
        f"Filtered {len(removed)} meta-attributes for digest",
        extra={"interval_ms": interval_ms, "kept_timeout": interval_ms != 0 and timeout is not None},
    )


__all__ = ["DIGEST_ATTR_FILTER", "filter_op_for_digest", "value_ms"]
