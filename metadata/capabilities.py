# ============================================================================
# RESOURCE AGENT CAPABILITIES
# ============================================================================
# STATUS: Metadata - Capability flags per resource agent standard
# PURPOSE: Map a resource class (ocf, lsb, ...) to what its agents support
# EXPORTS: RaCapability, ResourceClass, get_ra_caps
# ============================================================================
"""
Resource Agent Capabilities

Class names are matched case-insensitively. Unknown classes get no
capabilities at all.
"""

from enum import Enum, Flag
from typing import Dict, Optional


class RaCapability(Flag):
    """What agents of a resource class support."""
    NONE = 0
    PROVIDER = 1            # Requires a provider (ocf:heartbeat:IPaddr2)
    PARAMS = 2              # Accepts instance parameters
    UNIQUE = 4              # Parameters can be marked unique
    PROMOTABLE = 8          # Can run promoted/unpromoted
    STDIN = 16              # Reads parameters from stdin
    FENCE_PARAMS = 32       # Accepts fencing-specific parameters


class ResourceClass(str, Enum):
    """Known resource agent standards."""
    OCF = "ocf"
    LSB = "lsb"
    SERVICE = "service"
    SYSTEMD = "systemd"
    UPSTART = "upstart"
    NAGIOS = "nagios"
    STONITH = "stonith"


RA_CAPABILITIES: Dict[str, RaCapability] = {
    ResourceClass.OCF.value: (
        RaCapability.PROVIDER | RaCapability.PARAMS
        | RaCapability.UNIQUE | RaCapability.PROMOTABLE
    ),
    ResourceClass.STONITH.value: (
        RaCapability.PARAMS | RaCapability.UNIQUE
        | RaCapability.STDIN | RaCapability.FENCE_PARAMS
    ),
    ResourceClass.NAGIOS.value: RaCapability.PARAMS,
    ResourceClass.LSB.value: RaCapability.NONE,
    ResourceClass.SYSTEMD.value: RaCapability.NONE,
    ResourceClass.SERVICE.value: RaCapability.NONE,
    ResourceClass.UPSTART.value: RaCapability.NONE,
}


def get_ra_caps(standard: Optional[str]) -> RaCapability:
    """Capabilities of a resource agent standard."""
    if not standard:
        return RaCapability.NONE
    return RA_CAPABILITIES.get(standard.lower(), RaCapability.NONE)


__all__ = ["RaCapability", "ResourceClass", "RA_CAPABILITIES", "get_ra_caps"]
