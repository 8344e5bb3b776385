"""Configuration management for pathsplitter.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- IdConfig: Identifier assignment settings
- ProcessingConfig: Document analysis settings
- LoggingConfig: Logging settings
- SplitterSettings: Main application settings
"""

from pathsplitter.config.settings import (
    DEFAULT_DRAWABLE_TAGS,
    IdConfig,
    LoggingConfig,
    ProcessingConfig,
    SplitterSettings,
    get_default_settings,
)

__all__ = [
    "DEFAULT_DRAWABLE_TAGS",
    "IdConfig",
    "LoggingConfig",
    "ProcessingConfig",
    "SplitterSettings",
    "get_default_settings",
]
