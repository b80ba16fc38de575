# ============================================================================
# VERSION - OPERATION KEY CODEC
# ============================================================================
"""
Version information for the operation key codec.

This is the single source of truth for the package version.
Updated manually for each release.
"""
# Version format: major.minor.patch.build
__version__ = "0.3.0.0"
__version_info__ = tuple(int(x) for x in __version__.split("."))

# Build metadata
BUILD_DATE = "2026-10-18"

CODENAME = "Operation Key Codec"
