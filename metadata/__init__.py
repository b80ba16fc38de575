# ============================================================================
# METADATA MODULE
# ============================================================================
# STATUS: Metadata module initialization
# PURPOSE: Export capability lookup and the metadata need predicate
# ============================================================================

from metadata.capabilities import RaCapability, ResourceClass, get_ra_caps
from metadata.needs import METADATA_ACTIONS, needs_metadata

__all__ = [
    "RaCapability",
    "ResourceClass",
    "get_ra_caps",
    "METADATA_ACTIONS",
    "needs_metadata",
]
