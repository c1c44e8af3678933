"""
Render task: sole owner of the terminal surface.

The task enters the surface when started, then consumes control messages
until STOP or SUSPEND arrives (or its channel closes). On RENDER it holds
the state cell for the duration of one draw.
"""

from __future__ import annotations

import asyncio
import logging
from enum import Enum
from typing import Callable, Generic, Optional, TypeVar

from ..schemas.actions import ControlMessage
from ..services.channels import Channel
from ..services.state import StateCell
from ..utils.ui.surface import Frame, TerminalSurface

logger = logging.getLogger(__name__)

S = TypeVar("S")

View = Callable[[Frame, S], None]


class RenderTaskState(Enum):
    """Lifecycle of a render task."""

    PENDING = "pending"
    ENTERED = "entered"
    STOPPED = "stopped"
    SUSPENDED = "suspended"
    FAILED = "failed"


class RenderTask(Generic[S]):
    """Paint the shared state whenever the dispatch loop asks for a frame."""

    def __init__(
        self,
        surface: TerminalSurface,
        cell: StateCell[S],
        view: View,
        control: Optional[Channel[ControlMessage]] = None,
        coalesce_renders: bool = False,
    ) -> None:
        self._surface = surface
        self._cell = cell
        self._view = view
        self._coalesce_renders = coalesce_renders
        self.control: Channel[ControlMessage] = control or Channel("control")
        self.state = RenderTaskState.PENDING
        self.frames = 0
        self._task: Optional[asyncio.Task] = None

    def start(self) -> asyncio.Task:
        """Schedule the task on the running loop."""
        if self._task is not None:
            raise RuntimeError("RenderTask already started")
        self._task = asyncio.create_task(self.run(), name="render-task")
        return self._task

    @property
    def task(self) -> Optional[asyncio.Task]:
        return self._task

    def done(self) -> bool:
        return self._task is not None and self._task.done()

    def send(self, message: ControlMessage) -> None:
        """Queue a control message. Raises ChannelClosedError after exit."""
        self.control.send(message)

    async def join(self) -> RenderTaskState:
        """Wait for termination, re-raising the task's failure if any."""
        if self._task is None:
            raise RuntimeError("RenderTask was never started")
        await self._task
        return self.state

    async def run(self) -> RenderTaskState:
        """Task body. Returns the terminal state."""
        final = RenderTaskState.STOPPED
        try:
            self._surface.enter()
            self.state = RenderTaskState.ENTERED
            while True:
                message = await self.control.recv()
                if message is None:
                    logger.debug("Control channel closed, stopping render task")
                    break
                if message is ControlMessage.STOP:
                    break
                if message is ControlMessage.SUSPEND:
                    final = RenderTaskState.SUSPENDED
                    break
                if message is ControlMessage.RENDER:
                    if self._coalesce_renders:
                        self.control.discard_while(_is_render)
                    await self._render()
        except BaseException:
            final = RenderTaskState.FAILED
            raise
        finally:
            self.control.close()
            self._exit_surface()
            self.state = final
            logger.debug("Render task %s after %d frames", final.value, self.frames)
        return final

    async def _render(self) -> None:
        async with self._cell.acquire() as state:
            self._surface.draw(lambda frame: self._view(frame, state))
        self.frames += 1

    def _exit_surface(self) -> None:
        try:
            self._surface.exit()
        except Exception:
            logger.debug("Ignoring surface exit failure", exc_info=True)


def _is_render(message: ControlMessage) -> bool:
    return message is ControlMessage.RENDER
