"""
termloop: a concurrent dispatch/render runtime for terminal applications.

The dispatch loop mutates a shared state while a render task paints it,
with a StateCell guaranteeing the two never overlap.
"""

from .config import RuntimeConfig, get_runtime_config
from .errors import (
    ActionChainError,
    ChannelClosedError,
    ChannelFullError,
    RenderTaskError,
    TermloopError,
)
from .runtime import Application, DispatchLoop, RenderTask, RenderTaskState, run_app
from .schemas import (
    Action,
    AppState,
    ControlMessage,
    Key,
    Quit,
    RenderTick,
    Resize,
    Resume,
    Suspend,
    Tick,
)
from .services import ActionSender, Channel, StateCell
from .utils.ui import Frame, Rect, RichTerminalSurface, TerminalSurface

__version__ = "0.1.0"

__all__ = [
    "Action",
    "ActionChainError",
    "ActionSender",
    "AppState",
    "Application",
    "Channel",
    "ChannelClosedError",
    "ChannelFullError",
    "ControlMessage",
    "DispatchLoop",
    "Frame",
    "Key",
    "Quit",
    "Rect",
    "RenderTask",
    "RenderTaskError",
    "RenderTaskState",
    "RenderTick",
    "Resize",
    "Resume",
    "RichTerminalSurface",
    "StateCell",
    "Suspend",
    "TermloopError",
    "TerminalSurface",
    "Tick",
    "run_app",
]
