# ============================================================================
# CORE MODULE
# ============================================================================
# STATUS: Core module initialization
# PURPOSE: Export contracts, errors and models
# ============================================================================

from __version__ import __version__
from core.contracts import ActionName, NotifyType, OpStatus, meta_name
from core.errors import CodecError, InvalidArgumentError, InvalidFormatError
from core.models import (
    OperationKey,
    NotifyKey,
    TransitionKey,
    TransitionMagic,
    OperationResult,
)

__all__ = [
    "__version__",
    # Enums
    "ActionName",
    "NotifyType",
    "OpStatus",
    "meta_name",
    # Errors
    "CodecError",
    "InvalidArgumentError",
    "InvalidFormatError",
    # Models
    "OperationKey",
    "NotifyKey",
    "TransitionKey",
    "TransitionMagic",
    "OperationResult",
]
