"""TOML serialization backend (tomllib for reading, tomli_w for writing)."""

from __future__ import annotations

import tomllib
from typing import Any, TypeVar

import tomli_w
from pydantic import TypeAdapter, ValidationError
from pydantic.errors import PydanticSchemaGenerationError
from pydantic_core import PydanticSerializationError

from persist.backends.errors import describe_validation_error, non_finite_location
from persist.backends.registry import register_backend
from persist.core.constants import TOML_INDENT
from persist.core.shared.exceptions import FormatError

T = TypeVar("T")

_ANY_ADAPTER: TypeAdapter[Any] = TypeAdapter(Any)


@register_backend("toml")
class TomlBackend:
    """Reads and writes TOML documents.

    Values are first reduced to JSON-compatible Python (so datetimes become
    RFC 3339 strings and models become tables), then handed to tomli_w.
    TOML has no null, so ``None`` anywhere in the value is rejected.
    """

    name = "toml"

    def serialize_compact(self, value: object) -> str:
        return self._dump(value, multiline_strings=False)

    def serialize_pretty(self, value: object) -> str:
        """Render newline-bearing strings as multi-line strings.

        A raw newline is shorter than its escape, so the compact rendering is
        returned whenever the multi-line one would come out shorter.
        """
        compact = self._dump(value, multiline_strings=False)
        pretty = self._dump(value, multiline_strings=True)
        return pretty if len(pretty) >= len(compact) else compact

    def deserialize(self, text: str, target: type[T]) -> T:
        """Parse *text* and validate it as *target*."""
        try:
            data = tomllib.loads(text)
        except tomllib.TOMLDecodeError as exc:
            raise FormatError(self.name, str(exc)) from exc

        try:
            adapter: TypeAdapter[T] = TypeAdapter(target)
            return adapter.validate_python(data)
        except ValidationError as exc:
            raise FormatError(self.name, describe_validation_error(exc)) from exc
        except PydanticSchemaGenerationError as exc:
            raise FormatError(self.name, f"unsupported target type {target!r}") from exc

    def _dump(self, value: object, *, multiline_strings: bool) -> str:
        try:
            location = non_finite_location(_ANY_ADAPTER.dump_python(value))
            data = _ANY_ADAPTER.dump_python(value, mode="json")
        except PydanticSerializationError as exc:
            raise FormatError(self.name, str(exc)) from exc

        if location is not None:
            msg = f"{location}: non-finite float is not supported"
            raise FormatError(self.name, msg)

        if not isinstance(data, dict):
            msg = f"top-level value must be a table, got {type(data).__name__}"
            raise FormatError(self.name, msg)

        try:
            return tomli_w.dumps(data, multiline_strings=multiline_strings, indent=TOML_INDENT)
        except (TypeError, ValueError) as exc:
            raise FormatError(self.name, str(exc)) from exc
