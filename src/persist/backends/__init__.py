"""Serialization backends.

Importing this package registers the built-in ``json`` and ``toml`` backends.
"""

from persist.backends.registry import (
    BACKENDS,
    SerializationBackend,
    get_backend,
    list_backends,
    register_backend,
)

from persist.backends.json_backend import JsonBackend  # noqa: E402
from persist.backends.toml_backend import TomlBackend  # noqa: E402

__all__ = [
    "BACKENDS",
    "JsonBackend",
    "SerializationBackend",
    "TomlBackend",
    "get_backend",
    "list_backends",
    "register_backend",
]
