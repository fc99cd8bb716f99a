"""Exception taxonomy for persist.

This module defines the closed set of failures a load or store can report.
Every error carries the value that triggered it so callers can inspect the
underlying cause, and the chain is preserved with ``raise ... from``.
"""

from __future__ import annotations

from pathlib import Path


class PersistError(Exception):
    """Base class for all persist-specific exceptions."""


class FormatError(ValueError):
    """Raised by a serialization backend when its reader or writer fails."""

    def __init__(self, backend: str, message: str) -> None:
        super().__init__(f"{backend}: {message}")
        self.backend = backend
        self.message = message


class AppDataError(PersistError):
    """The storage directory could not be resolved for an identity triple."""

    def __init__(
        self,
        qualifier: str,
        organization: str,
        application: str,
        reason: str | None = None,
    ) -> None:
        detail = f": {reason}" if reason else ""
        super().__init__(
            "Could not resolve configuration directory for "
            f"(qualifier={qualifier!r}, organization={organization!r}, "
            f"application={application!r}){detail}"
        )
        self.qualifier = qualifier
        self.organization = organization
        self.application = application


class PersistIOError(PersistError):
    """Filesystem failure while reading, writing or creating the state file."""

    def __init__(self, path: Path, original_exc: OSError) -> None:
        super().__init__(f"I/O error on {path}: {original_exc}")
        self.path = path
        self.original_exc = original_exc

    @classmethod
    def from_os_error(cls, path: Path, exc: OSError) -> PersistIOError:
        return cls(path, exc)


class SerializationError(PersistError):
    """Stored content is malformed, or a value cannot be represented."""

    def __init__(self, original_exc: FormatError, path: Path | None = None) -> None:
        location = f" ({path})" if path is not None else ""
        super().__init__(f"Serialization failed{location}: {original_exc}")
        self.path = path
        self.original_exc = original_exc

    @classmethod
    def from_format_error(cls, exc: FormatError, path: Path | None = None) -> SerializationError:
        return cls(exc, path)


__all__ = [
    "AppDataError",
    "FormatError",
    "PersistError",
    "PersistIOError",
    "SerializationError",
]
