# ============================================================================
# DIGEST MODULE
# ============================================================================
# STATUS: Digest module initialization
# PURPOSE: Export the parameter filter and attribute stores
# ============================================================================
"""
Digest Module

Prepares operation parameters for stable hashing.
"""

from digest.attributes import AttributeStore, ParameterSet, ElementAttributeStore
from digest.filter import DIGEST_ATTR_FILTER, filter_op_for_digest

__all__ = [
    "AttributeStore",
    "ParameterSet",
    "ElementAttributeStore",
    "DIGEST_ATTR_FILTER",
    "filter_op_for_digest",
]
