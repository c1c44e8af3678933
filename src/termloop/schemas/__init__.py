"""
Action, control message and state types.
"""

from .actions import (
    Action,
    ControlMessage,
    Key,
    Quit,
    RenderTick,
    Resize,
    Resume,
    Suspend,
    Tick,
)
from .state import AppState

__all__ = [
    "Action",
    "AppState",
    "ControlMessage",
    "Key",
    "Quit",
    "RenderTick",
    "Resize",
    "Resume",
    "Suspend",
    "Tick",
]
