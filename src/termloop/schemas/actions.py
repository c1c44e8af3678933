"""
Action and control message types exchanged between the runtime flows.

Actions travel on the action channel towards the dispatch loop. Control
messages travel from the dispatch loop to the render task and carry no
payload beyond their tag.
"""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Action:
    """Base class for every event the dispatch loop consumes."""


@dataclass(frozen=True)
class RenderTick(Action):
    """Request a frame."""


@dataclass(frozen=True)
class Quit(Action):
    """Request shutdown."""


@dataclass(frozen=True)
class Suspend(Action):
    """Hand the terminal back to the shell until the process is continued."""


@dataclass(frozen=True)
class Resume(Action):
    """Re-spawn rendering after a suspend."""


@dataclass(frozen=True)
class Tick(Action):
    """Periodic application tick."""


@dataclass(frozen=True)
class Key(Action):
    """A key press read from the terminal."""

    key: str


@dataclass(frozen=True)
class Resize(Action):
    """The terminal changed size."""

    columns: int
    rows: int


class ControlMessage(Enum):
    """Messages sent from the dispatch loop to the render task."""

    RENDER = "render"
    SUSPEND = "suspend"
    STOP = "stop"
