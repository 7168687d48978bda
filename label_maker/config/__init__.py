"""Configuration management for the label maker."""

from .logging_setup import configure_logging, get_logger
from .settings import Settings, get_settings

__all__ = ["Settings", "get_settings", "configure_logging", "get_logger"]
