# ============================================================================
# METADATA NEED PREDICATE
# ============================================================================
# STATUS: Metadata - Decide when agent meta-data must be fetched
# PURPOSE: Avoid querying agents for meta-data that nothing will use
# EXPORTS: needs_metadata, METADATA_ACTIONS
# ============================================================================
"""
Metadata Need Predicate

Agent meta-data is used to tell whether a reload is possible and to
evaluate versioned parameters. Only classes that take parameters, and
only the actions below, ever need it.
"""

from typing import Callable, Optional

from core.contracts import ActionName
from core.errors import InvalidArgumentError
from core.logging import ComponentType, get_logger
from metadata.capabilities import RaCapability, get_ra_caps

logger = get_logger(__name__, ComponentType.METADATA)

METADATA_ACTIONS = frozenset({
    ActionName.START.value,
    ActionName.MONITOR.value,
    ActionName.PROMOTE.value,
    ActionName.DEMOTE.value,
    ActionName.RELOAD.value,
    ActionName.MIGRATE_TO.value,
    ActionName.MIGRATE_FROM.value,
    ActionName.NOTIFY.value,
})

CapsLookup = Callable[[str], RaCapability]


def needs_metadata(
    rsc_class: Optional[str],
    action: Optional[str],
    caps_lookup: CapsLookup = get_ra_caps,
) -> bool:
    """
    Check whether an operation requires resource agent meta-data.

    Args:
        rsc_class: Resource agent class (or None to skip the class check)
        action: Operation action (or None to skip the action check)
        caps_lookup: Maps a class to its capabilities

    Raises:
        InvalidArgumentError: both rsc_class and action are None
    """
    if rsc_class is None and action is None:
        raise InvalidArgumentError("rsc_class or action", "needs_metadata")

    if rsc_class is not None and not (caps_lookup(rsc_class) & RaCapability.PARAMS):
        logger.debug(f"Resource class '{rsc_class}' takes no parameters")
        return False

    if action is None:
        return True
    if isinstance(action, ActionName):
        action = action.value
    return action in METADATA_ACTIONS


__all__ = ["METADATA_ACTIONS", "needs_metadata"]
