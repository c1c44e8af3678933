"""
Logging configuration helpers.
"""

from .logging_config import NullHandler, setup_logging

__all__ = ["NullHandler", "setup_logging"]
