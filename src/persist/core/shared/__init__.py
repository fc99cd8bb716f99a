"""Shared infrastructure: the exception taxonomy."""

from persist.core.shared.exceptions import (
    AppDataError,
    FormatError,
    PersistError,
    PersistIOError,
    SerializationError,
)

__all__ = [
    "AppDataError",
    "FormatError",
    "PersistError",
    "PersistIOError",
    "SerializationError",
]
