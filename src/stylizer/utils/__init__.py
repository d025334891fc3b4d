"""Utility functions for stylizer.

This module provides utility functions including:

- Logging setup and configuration
"""

from stylizer.utils.logging import configure_logging

__all__ = [
    "configure_logging",
]
