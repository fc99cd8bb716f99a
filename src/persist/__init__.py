"""persist - Store one application state value in the user's config directory.

Public API:
    - Persist: Load/store coordinator
    - PersistBuilder: Immutable builder for Persist

Domain Objects:
    - Envelope: State payload paired with its serialization timestamp
    - Identity, PersistConfig: Coordinator configuration

Errors:
    - PersistError and its subclasses AppDataError, PersistIOError,
      SerializationError
"""

import contextlib
from importlib import metadata

__version__ = "0.1.0"

with contextlib.suppress(metadata.PackageNotFoundError):
    __version__ = metadata.version("persist-state")

# Domain objects
from persist.core.domain.config import Identity, PersistConfig
from persist.core.domain.envelope import Envelope

# Errors
from persist.core.shared.exceptions import (
    AppDataError,
    FormatError,
    PersistError,
    PersistIOError,
    SerializationError,
)

# Services (primary API)
from persist.services import Persist, PersistBuilder

__all__ = [
    # Version
    "__version__",
    # Services
    "Persist",
    "PersistBuilder",
    # Domain
    "Envelope",
    "Identity",
    "PersistConfig",
    # Errors
    "AppDataError",
    "FormatError",
    "PersistError",
    "PersistIOError",
    "SerializationError",
]
