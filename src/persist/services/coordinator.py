"""Persistence coordinator: load and store one state value per identity.

This is the primary API of the package. Applications construct a
``Persist`` once and call ``load``/``store`` whenever they need to.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING, TypeVar

from persist.backends import SerializationBackend, get_backend
from persist.core.constants import DEFAULT_BACKEND, STATE_FILENAME
from persist.core.domain.config import Identity, PersistConfig
from persist.core.domain.envelope import Envelope
from persist.core.shared.exceptions import (
    AppDataError,
    FormatError,
    PersistIOError,
    SerializationError,
)
from persist.io import locations
from persist.ui.logging import log

if TYPE_CHECKING:
    from persist.services.builder import PersistBuilder

StateT = TypeVar("StateT")


class Persist:
    """Stores a single state value in the user's configuration directory.

    The value is written to ``persist.json`` inside the directory derived
    from the identity triple, wrapped in an :class:`Envelope` that records
    when it was serialized.

    Example:
        persist = Persist("demo")
        persist.store(42)
        persist.load(int).state  # 42

    The configuration is fixed at construction; every call resolves the
    directory again and shares no mutable state with other calls.
    """

    def __init__(
        self,
        application: str,
        *,
        qualifier: str = "",
        organization: str = "",
        pretty: bool = True,
        backend: str = DEFAULT_BACKEND,
    ) -> None:
        """Initialize the coordinator.

        Args:
            application: Application name (required part of the identity)
            qualifier: Reverse-domain qualifier
            organization: Organization name
            pretty: Write indented output instead of compact output
            backend: Registered serialization backend name

        Raises:
            ValueError: If *backend* is not registered (raised as a pydantic
                ``ValidationError``, a ``ValueError`` subclass)
        """
        self._config = PersistConfig(
            identity=Identity(
                qualifier=qualifier,
                organization=organization,
                application=application,
            ),
            pretty=pretty,
            backend=backend,
        )
        self._backend: SerializationBackend = get_backend(self._config.backend)

    @classmethod
    def from_config(cls, config: PersistConfig) -> Persist:
        """Build a coordinator from a validated configuration."""
        identity = config.identity
        return cls(
            identity.application,
            qualifier=identity.qualifier,
            organization=identity.organization,
            pretty=config.pretty,
            backend=config.backend,
        )

    @staticmethod
    def builder(application: str) -> PersistBuilder:
        """Return a builder seeded with *application* and default settings."""
        from persist.services.builder import PersistBuilder

        return PersistBuilder(application=application)

    @property
    def config(self) -> PersistConfig:
        return self._config

    @property
    def identity(self) -> Identity:
        return self._config.identity

    @property
    def backend(self) -> SerializationBackend:
        return self._backend

    def config_dir(self) -> Path:
        """Resolve the configuration directory for this identity.

        Raises:
            AppDataError: If no directory can be derived
        """
        try:
            return locations.resolve_config_dir(self.identity)
        except AppDataError:
            log(f"Could not resolve directory for {self.identity.as_tuple()}", level="error")
            raise

    def path(self) -> Path:
        """Return the full path of the state file."""
        return self.config_dir() / STATE_FILENAME

    def exists(self) -> bool:
        """Check whether a state file has been stored."""
        return self.path().is_file()

    def load(
        self,
        state_type: type[StateT],
        default: Callable[[], StateT] | None = None,
    ) -> Envelope[StateT]:
        """Load the stored state, or a fresh default when nothing is stored.

        Args:
            state_type: Type the stored state is validated against
            default: Factory for the fallback value (default: ``state_type``)

        Returns:
            The stored envelope, or a new envelope around the default value
            when the state file does not exist

        Raises:
            AppDataError: If the directory cannot be resolved
            PersistIOError: If the file exists but cannot be read
            SerializationError: If the file content is invalid for the backend
                or does not match *state_type*
        """
        path = self.path()
        if not path.exists():
            log(f"No state at {path}; using default", level="debug")
            factory = default if default is not None else state_type
            return Envelope.new(factory())

        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            error = FormatError(self._backend.name, f"not valid UTF-8 text: {exc.reason}")
            raise SerializationError.from_format_error(error, path) from exc
        except OSError as exc:
            raise PersistIOError.from_os_error(path, exc) from exc

        try:
            envelope = self._backend.deserialize(text, Envelope[state_type])  # type: ignore[valid-type]
        except FormatError as exc:
            log(f"Failed to decode {path}: {exc}", level="warning")
            raise SerializationError.from_format_error(exc, path) from exc

        log(f"Loaded state from {path} (stored {envelope.timestamp.isoformat()})", level="debug")
        return envelope

    def store(self, state: object) -> None:
        """Serialize *state* in a fresh envelope and overwrite the state file.

        The write is not atomic; a failure part-way leaves the previous
        content undefined.

        Raises:
            AppDataError: If the directory cannot be resolved
            PersistIOError: If the directory or file cannot be written
            SerializationError: If the backend cannot represent *state*
        """
        directory = self.config_dir()
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise PersistIOError.from_os_error(directory, exc) from exc

        path = directory / STATE_FILENAME
        envelope = Envelope.new(state)
        try:
            if self._config.pretty:
                text = self._backend.serialize_pretty(envelope)
            else:
                text = self._backend.serialize_compact(envelope)
        except FormatError as exc:
            raise SerializationError.from_format_error(exc, path) from exc

        try:
            path.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise PersistIOError.from_os_error(path, exc) from exc

        log(f"Stored state to {path} ({self._backend.name}, {len(text)} chars)", level="info")

    def clear(self) -> bool:
        """Delete the state file.

        Returns:
            True if a file was removed, False if there was nothing to remove
        """
        path = self.path()
        try:
            path.unlink()
        except FileNotFoundError:
            return False
        except OSError as exc:
            raise PersistIOError.from_os_error(path, exc) from exc

        log(f"Removed {path}", level="info")
        return True

    def __repr__(self) -> str:
        qualifier, organization, application = self.identity.as_tuple()
        return (
            f"Persist(application={application!r}, qualifier={qualifier!r}, "
            f"organization={organization!r}, pretty={self._config.pretty}, "
            f"backend={self._backend.name!r})"
        )


__all__ = ["Persist"]
