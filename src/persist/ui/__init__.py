"""Console and logging helpers."""

from persist.ui.logging import close_logging, log, setup_logging

__all__ = ["close_logging", "log", "setup_logging"]
