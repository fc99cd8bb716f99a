"""I/O module for persist.

Handles file operations including:
- Configuration directory resolution
- Configuration file loading/saving (TOML)
"""

from persist.io.config import generate_default_config, load_config, save_config
from persist.io.locations import bundle_name, resolve_config_dir

__all__ = [
    "bundle_name",
    "generate_default_config",
    "load_config",
    "resolve_config_dir",
    "save_config",
]
