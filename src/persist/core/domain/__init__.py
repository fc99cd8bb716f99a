"""Domain models: the envelope and the coordinator configuration."""

from persist.core.domain.config import Identity, PersistConfig
from persist.core.domain.envelope import Envelope

__all__ = ["Envelope", "Identity", "PersistConfig"]
