"""Application service layer: the persistence coordinator and its builder."""

from persist.services.builder import PersistBuilder
from persist.services.coordinator import Persist

__all__ = ["Persist", "PersistBuilder"]
