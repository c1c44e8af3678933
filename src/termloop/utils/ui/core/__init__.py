"""
Core terminal helpers.
"""

from .resize_handler import get_terminal_size, setup_resize_handler

__all__ = ["get_terminal_size", "setup_resize_handler"]
