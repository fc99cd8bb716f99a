"""Backend registry for interchangeable serialization formats."""

from collections.abc import Callable, Iterable
from typing import Protocol, TypeVar

T = TypeVar("T")


class SerializationBackend(Protocol):
    """Protocol for text serialization backends.

    Implementations raise ``FormatError`` for every reader or writer failure.
    """

    name: str

    def serialize_compact(self, value: object) -> str: ...
    def serialize_pretty(self, value: object) -> str: ...
    def deserialize(self, text: str, target: type[T]) -> T: ...


# Global backend registry
BACKENDS: dict[str, Callable[[], SerializationBackend]] = {}


def register_backend(
    backend_names: str | Iterable[str],
) -> Callable[[type[SerializationBackend]], type[SerializationBackend]]:
    """Decorator to register a backend class.

    Args:
        backend_names: Single name or iterable of names to register the backend under

    Returns:
        Decorator function that registers the backend class

    Example:
        @register_backend("json")
        class JsonBackend:
            ...
    """
    if isinstance(backend_names, str):
        backend_names = [backend_names]

    def decorator(backend_class: type[SerializationBackend]) -> type[SerializationBackend]:
        for name in backend_names:
            BACKENDS[name] = backend_class
        return backend_class

    return decorator


def get_backend(name: str) -> SerializationBackend:
    """Instantiate a backend by name.

    Raises:
        KeyError: If backend name not found in registry
    """
    return BACKENDS[name]()


def list_backends() -> list[str]:
    """List all registered backend names."""
    return list(BACKENDS.keys())
