"""
Counter demo application.

Keys: ``k``/``+``/up increments, ``j``/``-``/down decrements, ``ctrl-z``
suspends, ``q``/``esc``/``ctrl-c`` quits.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from rich.align import Align
from rich.panel import Panel
from rich.text import Text

from ..schemas.actions import Action, Key, Quit, RenderTick, Resize, Suspend, Tick
from ..schemas.state import AppState
from ..utils.ui.surface import Frame
from ..utils.ui.theme import ICONS, THEME, TICK_FRAMES

INCREMENT_KEYS = ("k", "+", "up")
DECREMENT_KEYS = ("j", "-", "down")
QUIT_KEYS = ("q", "escape", "c-c")
SUSPEND_KEYS = ("c-z",)


@dataclass(frozen=True)
class Increment(Action):
    """Add one to the counter."""


@dataclass(frozen=True)
class Decrement(Action):
    """Subtract one from the counter."""


@dataclass
class CounterState(AppState):
    """State of the counter demo."""

    counter: int = 0
    ticks: int = 0
    last_key: Optional[str] = None
    size: Optional[Tuple[int, int]] = None


def update(state: CounterState, action: Action) -> Optional[Action]:
    """Apply one domain action to the counter state."""
    if isinstance(action, Key):
        state.last_key = action.key
        if action.key in INCREMENT_KEYS:
            return Increment()
        if action.key in DECREMENT_KEYS:
            return Decrement()
        if action.key in QUIT_KEYS:
            return Quit()
        if action.key in SUSPEND_KEYS:
            return Suspend()
        return None
    if isinstance(action, Increment):
        state.counter += 1
        return RenderTick()
    if isinstance(action, Decrement):
        state.counter -= 1
        return RenderTick()
    if isinstance(action, Tick):
        state.ticks += 1
        return None
    if isinstance(action, Resize):
        state.size = (action.columns, action.rows)
        return None
    return None


def view(frame: Frame, state: CounterState) -> None:
    """Paint the counter centered in the frame."""
    if state.counter > 0:
        color = THEME["positive"]
    elif state.counter < 0:
        color = THEME["negative"]
    else:
        color = THEME["text"]

    body = Text(justify="center")
    body.append(f"{state.counter}\n", style=f"bold {color}")
    body.append(
        f"{TICK_FRAMES[state.ticks % len(TICK_FRAMES)]} tick {state.ticks}",
        style=THEME["muted"],
    )
    if state.last_key is not None:
        body.append(f"  {ICONS['separator']}  key {state.last_key}", style=THEME["muted"])

    hint = Text(
        f"{ICONS['arrow']} k/j change  {ICONS['separator']}  ctrl-z suspend  "
        f"{ICONS['separator']}  q quit",
        style=THEME["muted"],
    )
    frame.render(
        Panel(
            Align.center(body, vertical="middle"),
            title=Text("Counter", style=f"bold {THEME['header']}"),
            subtitle=hint,
            border_style=THEME["border"],
            height=frame.area.rows,
        )
    )
