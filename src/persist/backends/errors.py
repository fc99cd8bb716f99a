"""Helpers shared by backends for reporting reader and writer failures."""

import math

from pydantic import ValidationError


def describe_validation_error(exc: ValidationError) -> str:
    """Condense a pydantic validation error into one line per problem."""
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"])
        problems.append(f"{location}: {error['msg']}" if location else error["msg"])
    return "; ".join(problems)


def non_finite_location(data: object, location: tuple[str, ...] = ()) -> str | None:
    """Return the dotted location of the first ``inf``/``nan`` float in *data*.

    *data* is expected to be plain Python as produced by ``dump_python``:
    dicts, sequences and scalars. Returns None when every float is finite.
    """
    if isinstance(data, float):
        if math.isfinite(data):
            return None
        return ".".join(location) or "<root>"

    if isinstance(data, dict):
        items = [(str(key), item) for key, item in data.items()]
    elif isinstance(data, list | tuple | set | frozenset):
        items = [(str(index), item) for index, item in enumerate(data)]
    else:
        return None

    for key, item in items:
        found = non_finite_location(item, (*location, key))
        if found is not None:
            return found
    return None
