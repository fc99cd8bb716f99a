"""JSON serialization backend built on pydantic's JSON engine."""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError
from pydantic.errors import PydanticSchemaGenerationError
from pydantic_core import PydanticSerializationError

from persist.backends.errors import describe_validation_error, non_finite_location
from persist.backends.registry import register_backend
from persist.core.constants import JSON_INDENT
from persist.core.shared.exceptions import FormatError

T = TypeVar("T")

# Serializes by runtime type: models, dataclasses, datetimes, containers
_ANY_ADAPTER: TypeAdapter[Any] = TypeAdapter(Any)


@register_backend("json")
class JsonBackend:
    """Reads and writes JSON text."""

    name = "json"

    def serialize_compact(self, value: object) -> str:
        return self._dump(value, indent=None)

    def serialize_pretty(self, value: object) -> str:
        return self._dump(value, indent=JSON_INDENT)

    def deserialize(self, text: str, target: type[T]) -> T:
        """Parse *text* and validate it as *target*."""
        try:
            adapter: TypeAdapter[T] = TypeAdapter(target)
            return adapter.validate_json(text)
        except ValidationError as exc:
            raise FormatError(self.name, describe_validation_error(exc)) from exc
        except PydanticSchemaGenerationError as exc:
            raise FormatError(self.name, f"unsupported target type {target!r}") from exc

    def _dump(self, value: object, *, indent: int | None) -> str:
        try:
            # pydantic would otherwise write inf and nan as null
            location = non_finite_location(_ANY_ADAPTER.dump_python(value))
            if location is not None:
                msg = f"{location}: non-finite float cannot be represented in JSON"
                raise FormatError(self.name, msg)
            return _ANY_ADAPTER.dump_json(value, indent=indent).decode("utf-8")
        except PydanticSerializationError as exc:
            raise FormatError(self.name, str(exc)) from exc

