"""Configuration file loading and saving."""

import tomllib
from pathlib import Path

import tomli_w

from persist.core.domain.config import PersistConfig


def load_config(path: Path) -> PersistConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the TOML configuration file.

    Returns:
        PersistConfig: Validated configuration object.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If the configuration is invalid.
    """
    if not path.exists():
        msg = f"Configuration file not found: {path}"
        raise FileNotFoundError(msg)

    with path.open("rb") as f:
        data = tomllib.load(f)

    return PersistConfig.model_validate(data)


def save_config(config: PersistConfig, path: Path) -> None:
    """Save configuration to a TOML file.

    Args:
        config: Configuration object to save.
        path: Path where to save the TOML file.
    """
    data = config.model_dump(mode="json")

    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("wb") as f:
        tomli_w.dump(data, f)


def generate_default_config(application: str = "myapp") -> str:
    """Generate a default configuration file as a string.

    Returns:
        str: TOML-formatted default configuration.
    """
    return f"""# persist configuration file
# Generated automatically - edit as needed

backend = "json"  # json, toml
pretty = true     # false writes compact output

[identity]
application = "{application}"
# qualifier = "com"            # Reverse-domain qualifier (used on macOS)
# organization = "Example"     # Vendor name (used on macOS and Windows)
"""
