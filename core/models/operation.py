# ============================================================================
# OPERATION KEY MODELS
# ============================================================================
# STATUS: Core model - Operation and notify key values
# PURPOSE: Typed form of "<rsc_id>_<op_type>_<interval_ms>" strings
# EXPORTS: OperationKey, NotifyKey
# DEPENDENCIES: pydantic
# ============================================================================
"""
Operation Key Models

An operation key names one operation instance: which resource, which
action, and how often it recurs. The scheduler writes it when planning,
the executor tags results with it, and the status layer parses it back.

Two models:
- OperationKey: resource + action + interval (0 = not recurring)
- NotifyKey: pre/post notification wrapped around a base action; it
  encodes to an operation key whose interval is always 0

Models are values. Encoding and parsing live in codec.operation_key and
codec.notify_key; the methods below are shortcuts onto those.
"""

from typing import Union

from pydantic import BaseModel, Field

from core.contracts import NotifyType


class OperationKey(BaseModel):
    """
    Parsed or to-be-encoded operation key.

    Wire form: rsc_id + "_" + op_type + "_" + decimal(interval_ms)
    """
    rsc_id: str = Field(..., description="Resource the operation acts on")
    op_type: str = Field(..., description="Action name, e.g. start or monitor")
    interval_ms: int = Field(default=0, ge=0, description="Recurrence interval, 0 if one-shot")

    model_config = {"frozen": True}

    @property
    def is_recurring(self) -> bool:
        return self.interval_ms != 0

    def encode(self) -> str:
        """Encode to wire form."""
        from codec.operation_key import op_key
        return op_key(self.rsc_id, self.op_type, self.interval_ms)

    @classmethod
    def parse(cls, key: str) -> "OperationKey":
        """Parse wire form. Raises InvalidFormatError."""
        from codec.operation_key import parse_op_key
        return parse_op_key(key)

    def __str__(self) -> str:
        return self.encode()


class NotifyKey(BaseModel):
    """
    Notification wrapped around a base action.

    Wire form: rsc_id + "_" + notify_type + "_notify_" + op_type + "_0"
    """
    rsc_id: str = Field(...)
    notify_type: Union[NotifyType, str] = Field(..., description="pre or post")
    op_type: str = Field(..., description="Action being notified about")

    model_config = {"frozen": True}

    def encode(self) -> str:
        """Encode to wire form."""
        from codec.notify_key import notify_key
        return notify_key(self.rsc_id, self.notify_type, self.op_type)

    def to_operation_key(self) -> OperationKey:
        """What the operation key parser recovers from this notify key."""
        return OperationKey(rsc_id=self.rsc_id, op_type=self.op_type, interval_ms=0)

    def __str__(self) -> str:
        return self.encode()


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = ["OperationKey", "NotifyKey"]
