"""
Terminal surface used by the render task.

The render task only depends on the TerminalSurface protocol. The default
backend, RichTerminalSurface, paints frames through a Rich Live display on
the alternate screen.
"""

from __future__ import annotations

import logging
import os
import signal
import sys
from dataclasses import dataclass
from typing import Callable, Optional, Protocol

from rich.console import Console, RenderableType
from rich.live import Live
from rich.text import Text

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Rect:
    """Drawable area of a frame, in character cells."""

    columns: int
    rows: int


class Frame:
    """Read/write view of the frame being drawn."""

    def __init__(self, area: Rect) -> None:
        self.area = area
        self._renderable: Optional[RenderableType] = None

    @property
    def renderable(self) -> Optional[RenderableType]:
        return self._renderable

    def render(self, renderable: RenderableType) -> None:
        """Set what this frame shows. The last call wins."""
        self._renderable = renderable


DrawCallback = Callable[[Frame], None]


class TerminalSurface(Protocol):
    """Rendering resource owned by exactly one render task at a time."""

    def enter(self) -> None: ...

    def exit(self) -> None: ...

    def draw(self, callback: DrawCallback) -> None: ...

    def suspend(self) -> None: ...


class RichTerminalSurface:
    """TerminalSurface backed by rich.live.Live."""

    def __init__(
        self,
        console: Optional[Console] = None,
        alt_screen: bool = True,
    ) -> None:
        self.console = console or Console()
        self._alt_screen = alt_screen
        self._live: Optional[Live] = None
        self.frames_drawn = 0

    @property
    def is_entered(self) -> bool:
        return self._live is not None

    def enter(self) -> None:
        """Take over the terminal: alternate screen and hidden cursor."""
        if self._live is not None:
            return
        live = Live(
            Text(""),
            console=self.console,
            screen=self._alt_screen,
            auto_refresh=False,
            transient=False,
            redirect_stdout=False,
            redirect_stderr=False,
        )
        # Registered before start so exit() can undo a partial start
        self._live = live
        live.start()
        logger.debug("Surface entered (alt_screen=%s)", self._alt_screen)

    def exit(self) -> None:
        """Restore the terminal. Safe to call when not entered."""
        live = self._live
        if live is None:
            return
        self._live = None
        live.stop()
        logger.debug("Surface exited after %d frames", self.frames_drawn)

    def draw(self, callback: DrawCallback) -> None:
        """
        Build one frame with ``callback`` and paint it.

        Raises:
            RuntimeError: The surface has not been entered
        """
        live = self._live
        if live is None:
            raise RuntimeError("Cannot draw on a surface that is not entered")
        frame = Frame(Rect(self.console.width, self.console.height))
        callback(frame)
        renderable = frame.renderable if frame.renderable is not None else Text("")
        live.update(renderable, refresh=True)
        self.frames_drawn += 1

    def suspend(self) -> None:
        """
        Stop the process for shell job control and return once continued.

        The surface is exited first. Callers re-enter it afterwards.
        """
        self.exit()
        if sys.platform == "win32" or not hasattr(signal, "SIGTSTP"):
            return
        os.kill(os.getpid(), signal.SIGTSTP)
