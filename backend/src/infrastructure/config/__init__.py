"""Settings and logging configuration."""

from .settings import Settings, get_settings
from .logger import ROOT_LOGGER_NAME, setup_logger, get_logger

__all__ = ["Settings", "get_settings", "ROOT_LOGGER_NAME", "setup_logger", "get_logger"]
