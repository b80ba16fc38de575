# ============================================================================
# CONFIGURATION DEFAULTS
# ============================================================================
# STATUS: Core - Default configuration values
# PURPOSE: Wire-format constants and logging behaviour
# ============================================================================
"""
Configuration Defaults

Two groups of settings:
- WireDefaults: field widths and prefixes shared with every cluster member.
  These are NOT read from the environment; changing them breaks
  correlation with peers running the stock values.
- LoggingDefaults: how loudly the codec reports, overridable via env.

Design:
- Immutable dataclasses for defaults
- Environment variable overrides where safe
- Type-safe access
"""

import os
from dataclasses import dataclass, field
from typing import Optional

from core.contracts import META_PREFIX


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class WireDefaults:
    """
    Fixed properties of the encoded string formats.
    """
    # Transition key node field is padded (never truncated) to this width
    node_field_width: int = 36

    # Operation key interval wraps at this many bits
    interval_bits: int = 32

    # Meta-attribute prefix (compared case-insensitively by the digest filter)
    meta_prefix: str = META_PREFIX

    @property
    def interval_mask(self) -> int:
        return (1 << self.interval_bits) - 1


@dataclass(frozen=True)
class LoggingDefaults:
    """
    Defaults for codec logging.
    """
    level: str = "INFO"
    json_output: bool = False

    # Emit a soft warning when a decoded node is not uuid-sized
    warn_uuid_length: bool = True

    @classmethod
    def from_env(cls) -> "LoggingDefaults":
        """Create from environment variables."""
        return cls(
            level=os.getenv("LOG_LEVEL", "INFO"),
            json_output=os.getenv("LOG_FORMAT", "").lower() == "json",
            warn_uuid_length=_env_flag("CODEC_WARN_UUID_LENGTH", True),
        )


# ============================================================================
# GLOBAL DEFAULTS INSTANCE
# ============================================================================

@dataclass
class Defaults:
    """Container for all default configurations."""
    wire: WireDefaults = field(default_factory=WireDefaults)
    logging: LoggingDefaults = field(default_factory=LoggingDefaults)

    @classmethod
    def from_env(cls) -> "Defaults":
        """Create all defaults from environment variables."""
        return cls(
            wire=WireDefaults(),
            logging=LoggingDefaults.from_env(),
        )


_defaults: Optional[Defaults] = None


def get_defaults() -> Defaults:
    """Get global defaults instance."""
    global _defaults
    if _defaults is None:
        _defaults = Defaults.from_env()
    return _defaults


def reset_defaults() -> None:
    """Reset defaults (for testing)."""
    global _defaults
    _defaults = None


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "WireDefaults",
    "LoggingDefaults",
    "Defaults",
    "get_defaults",
    "reset_defaults",
]
