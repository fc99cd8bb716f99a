"""Timestamped wrapper around a persisted state value."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

StateT = TypeVar("StateT")


class Envelope(BaseModel, Generic[StateT]):
    """A state payload paired with the instant it was serialized.

    The envelope is transient: it is built right before serialization or
    right after deserialization, and callers usually only keep the state.

    Example:
        envelope = Envelope.new(42)
        envelope.into_state()  # 42
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    timestamp: datetime = Field(description="UTC instant at which the state was serialized")
    state: StateT

    @classmethod
    def new(cls, state: StateT) -> Envelope[StateT]:
        """Wrap *state* with the current UTC time."""
        return cls(timestamp=datetime.now(UTC), state=state)

    def into_state(self) -> StateT:
        """Return the wrapped payload."""
        return self.state


__all__ = ["Envelope", "StateT"]
