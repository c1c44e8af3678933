"""
Timer-driven event source for application ticks and render ticks.

Missed periods are skipped rather than replayed: after a stall (a blocked
loop, or the process stopped for job control) each emitter fires once and
then resumes its normal cadence. A full action channel costs one tick, it
never ends the source.
"""

from __future__ import annotations

import asyncio
import logging
from contextlib import contextmanager
from typing import Callable, Iterator, List

from ...errors import ChannelClosedError, ChannelFullError
from ...schemas.actions import Action, RenderTick, Tick
from ..channels import ActionSender
from .base import EventSource

logger = logging.getLogger(__name__)


class TickSource(EventSource):
    """Emit Tick at ``tick_rate`` Hz and RenderTick at ``frame_rate`` Hz."""

    def __init__(self, tick_rate: float = 4.0, frame_rate: float = 30.0) -> None:
        if tick_rate <= 0 or frame_rate <= 0:
            raise ValueError("tick_rate and frame_rate must be positive")
        self.tick_rate = tick_rate
        self.frame_rate = frame_rate
        self.skipped = 0
        self._paused = False
        self._tasks: List[asyncio.Task] = []

    @property
    def running(self) -> bool:
        return any(not task.done() for task in self._tasks)

    def start(self, sender: ActionSender) -> None:
        if self._tasks:
            raise RuntimeError("TickSource already started")
        self._tasks = [
            asyncio.create_task(
                self._emit(sender, Tick, 1.0 / self.tick_rate), name="tick-source"
            ),
            asyncio.create_task(
                self._emit(sender, RenderTick, 1.0 / self.frame_rate),
                name="frame-source",
            ),
        ]

    async def stop(self) -> None:
        tasks, self._tasks = self._tasks, []
        for task in tasks:
            task.cancel()
        results = await asyncio.gather(*tasks, return_exceptions=True)
        for result in results:
            if isinstance(result, ChannelClosedError):
                logger.debug("Tick source ended by channel close")
            elif isinstance(result, Exception):
                logger.warning("Tick source failed: %r", result)

    @contextmanager
    def paused(self) -> Iterator[None]:
        """Emit nothing for the duration."""
        self._paused = True
        try:
            yield
        finally:
            self._paused = False

    async def _emit(
        self, sender: ActionSender, factory: Callable[[], Action], interval: float
    ) -> None:
        loop = asyncio.get_running_loop()
        deadline = loop.time()
        while True:
            deadline += interval
            now = loop.time()
            if deadline < now:
                # Fell behind: drop the missed periods
                deadline = now + interval
            await asyncio.sleep(deadline - now)
            if self._paused:
                continue
            try:
                sender.send(factory())
            except ChannelFullError:
                self.skipped += 1
                logger.warning("Action channel full, skipped %s", factory.__name__)
