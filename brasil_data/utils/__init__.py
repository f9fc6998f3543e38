"""Utility modules.

Includes:
- Logging configuration
"""

from .logging_config import JsonFormatter, get_logger, setup_logging

__all__ = [
    "JsonFormatter",
    "get_logger",
    "setup_logging",
]
