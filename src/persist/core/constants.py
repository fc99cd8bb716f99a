"""Constants shared across persist modules."""

from typing import Final

# Same literal for every backend, including TOML
STATE_FILENAME: Final[str] = "persist.json"

DEFAULT_BACKEND: Final[str] = "json"

JSON_INDENT: Final[int] = 2
TOML_INDENT: Final[int] = 4
