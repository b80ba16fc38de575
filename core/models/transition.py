# ============================================================================
# TRANSITION KEY MODELS
# ============================================================================
# STATUS: Core model - Transition key and magic values
# PURPOSE: Correlate executor results with the planned action that caused them
# EXPORTS: TransitionKey, TransitionMagic
# DEPENDENCIES: pydantic
# ============================================================================
"""
Transition Key Models

TransitionKey: "<action_id>:<transition_id>:<target_rc>:<node>"
    Written by the scheduler into each dispatched action; the executor
    hands it back untouched as operation user data.

TransitionMagic: "<op_status>:<op_rc>;<transition key>"
    The key plus what actually happened, recorded in the status section.

Fields that could not be decoded are -1, matching what peers expect.
"""

from pydantic import BaseModel, Field


class TransitionKey(BaseModel):
    """
    Which transition and action produced a result, and the rc it expected.
    """
    action_id: int = Field(default=-1)
    transition_id: int = Field(default=-1)
    target_rc: int = Field(default=-1, description="Return code the planner expects")
    uuid: str = Field(..., description="Node identifier, normally a 36-char UUID")

    model_config = {"frozen": True}

    def encode(self) -> str:
        from codec.transition import transition_key
        return transition_key(self.transition_id, self.action_id, self.target_rc, self.uuid)

    @classmethod
    def decode(cls, key: str) -> "TransitionKey":
        from codec.transition import decode_transition_key
        return decode_transition_key(key)

    def __str__(self) -> str:
        return self.encode()


class TransitionMagic(BaseModel):
    """
    Outcome of an operation plus its originating transition key.
    """
    op_status: int = Field(default=-1, description="Executor status code")
    op_rc: int = Field(default=-1, description="Actual return code")
    key: TransitionKey = Field(...)

    model_config = {"frozen": True}

    # Flattened accessors
    @property
    def uuid(self) -> str:
        return self.key.uuid

    @property
    def transition_id(self) -> int:
        return self.key.transition_id

    @property
    def action_id(self) -> int:
        return self.key.action_id

    @property
    def target_rc(self) -> int:
        return self.key.target_rc

    def encode(self) -> str:
        from codec.transition import transition_magic
        return transition_magic(
            self.op_status, self.op_rc,
            self.key.transition_id, self.key.action_id, self.key.target_rc, self.key.uuid,
        )

    @classmethod
    def decode(cls, magic: str) -> "TransitionMagic":
        from codec.transition import decode_transition_magic
        return decode_transition_magic(magic)

    def __str__(self) -> str:
        return self.encode()


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = ["TransitionKey", "TransitionMagic"]
