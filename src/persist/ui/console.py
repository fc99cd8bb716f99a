"""Console configuration and theme for persist log output.

This module provides the console instance shared by the logging handlers.
"""

from rich.console import Console
from rich.theme import Theme

from persist import __version__ as VERSION

PERSIST_THEME = Theme(
    {
        "success": "bold green",
        "warning": "bold yellow",
        "error": "bold red",
        "info": "cyan",
        "path": "blue underline",
        "dim": "dim",
    }
)

# Log output goes to stderr so embedding applications keep stdout
console = Console(theme=PERSIST_THEME, stderr=True)

__all__ = ["PERSIST_THEME", "VERSION", "console"]
