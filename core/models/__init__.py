# ============================================================================
# MODELS MODULE
# ============================================================================
# STATUS: Model exports
# PURPOSE: Central export point for all Pydantic models
# ============================================================================
"""
Models Module - Central Export Point

Value models for the encoded identifiers and executor results.
"""

from core.models.operation import OperationKey, NotifyKey
from core.models.transition import TransitionKey, TransitionMagic
from core.models.result import OperationResult

__all__ = [
    # Operation keys
    "OperationKey",
    "NotifyKey",
    # Transition keys
    "TransitionKey",
    "TransitionMagic",
    # Results
    "OperationResult",
]
