"""Utility functions for pathsplitter.

This module provides utility functions including:

- Logging setup and configuration
- Processing statistics
"""

from pathsplitter.utils.logging import (
    ProcessingLogger,
    ProcessingStats,
    configure_logging,
)

__all__ = [
    "ProcessingLogger",
    "ProcessingStats",
    "configure_logging",
]
