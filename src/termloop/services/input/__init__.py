"""
Event sources feeding the action channel.
"""

from .base import EventSource
from .key_input import KeyInputSource, key_name
from .resize_source import ResizeSource
from .tick_source import TickSource

__all__ = [
    "EventSource",
    "KeyInputSource",
    "ResizeSource",
    "TickSource",
    "key_name",
]
