# ============================================================================
# CODEC ERRORS
# ============================================================================
# STATUS: Core - Exception taxonomy
# PURPOSE: Typed failures for key building and parsing
# EXPORTS: CodecError, InvalidArgumentError, InvalidFormatError
# ============================================================================
"""
Codec Errors

Two kinds of failure leave this package:
- InvalidArgumentError: a required input was absent (caller bug, don't retry)
- InvalidFormatError: a string failed a parse step (treat source as corrupt)

Soft problems (e.g. odd uuid length in a transition key) are logged only.
"""

from typing import Any, Optional


class CodecError(Exception):
    """Base exception for codec errors."""
    pass


class InvalidArgumentError(CodecError, ValueError):
    """Raised when a required argument is missing."""
    def __init__(self, argument: str, operation: Optional[str] = None):
        self.argument = argument
        self.operation = operation
        where = f" for {operation}" if operation else ""
        super().__init__(f"Missing required argument '{argument}'{where}")


class InvalidFormatError(CodecError, ValueError):
    """Raised when an encoded string cannot be parsed."""
    def __init__(self, value: Any, reason: str, kind: str = "key"):
        self.value = value
        self.reason = reason
        self.kind = kind
        super().__init__(f"Invalid {kind} {value!r}: {reason}")


def require(value: Any, argument: str, operation: Optional[str] = None) -> None:
    """Raise InvalidArgumentError if value is None."""
    if value is None:
        raise InvalidArgumentError(argument, operation)


__all__ = [
    "CodecError",
    "InvalidArgumentError",
    "InvalidFormatError",
    "require",
]
