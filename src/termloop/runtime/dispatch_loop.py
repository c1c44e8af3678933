"""
Dispatch loop: sole consumer of the action channel.

Each cycle takes one action, applies it (under the state cell lock when it
touches state), then checks ``should_quit``. The loop owns the shutdown
decision: once ``should_quit`` is set it stops the render task, waits for
it, and returns.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Generic, Optional, Tuple, TypeVar

from ..errors import ActionChainError, RenderTaskError
from ..schemas.actions import Action, ControlMessage, Quit, RenderTick, Resume, Suspend
from ..services.channels import Channel
from ..services.state import StateCell
from .render_task import RenderTask, RenderTaskState

logger = logging.getLogger(__name__)

S = TypeVar("S")

Update = Callable[[S, Action], Optional[Action]]
RenderTaskFactory = Callable[[], RenderTask]


@dataclass(frozen=True)
class _FollowUp:
    """Follow-up action re-enqueued by the loop, tagged with its chain depth."""

    action: Action
    depth: int


class DispatchLoop(Generic[S]):
    """
    Consume actions, mutate state, and drive the render task.

    ``on_suspend`` runs after a suspended render task has exited the surface
    and terminated, so it may use the surface (for job control) until the
    next render task is spawned by Resume.
    """

    def __init__(
        self,
        actions: Channel,
        cell: StateCell[S],
        update: Update,
        render_task: Optional[RenderTask] = None,
        render_task_factory: Optional[RenderTaskFactory] = None,
        on_suspend: Optional[Callable[[], None]] = None,
        max_action_chain: Optional[int] = 64,
    ) -> None:
        self._actions = actions
        self._cell = cell
        self._update = update
        self._render_task = render_task
        self._render_task_factory = render_task_factory
        self._on_suspend = on_suspend
        self._max_action_chain = max_action_chain
        self.cycles = 0

    @property
    def render_task(self) -> Optional[RenderTask]:
        return self._render_task

    async def run(self) -> None:
        """Run until ``should_quit`` is set or the action channel closes."""
        logger.debug("Dispatch loop started")
        try:
            while True:
                self._check_render_task()
                item = await self._actions.recv()
                if item is None:
                    logger.debug("Action channel closed without Quit")
                    break
                action, depth = _unwrap(item)
                await self._handle(action, depth)
                self.cycles += 1
                async with self._cell.acquire() as state:
                    should_quit = state.should_quit
                if should_quit:
                    logger.debug("Quit requested after %d cycles", self.cycles)
                    break
        except BaseException:
            self._actions.close()
            await self._stop_render_task(propagate=False)
            raise
        self._actions.close()
        await self._stop_render_task(propagate=True)
        logger.debug("Dispatch loop finished")

    async def _handle(self, action: Action, depth: int) -> None:
        if isinstance(action, RenderTick):
            self._request_render()
        elif isinstance(action, Quit):
            async with self._cell.acquire() as state:
                state.should_quit = True
        elif isinstance(action, Suspend):
            await self._suspend()
        elif isinstance(action, Resume):
            self._resume()
        else:
            async with self._cell.acquire() as state:
                follow_up = self._update(state, action)
            if follow_up is not None:
                self._enqueue_follow_up(follow_up, depth + 1)

    def _enqueue_follow_up(self, action: Action, depth: int) -> None:
        limit = self._max_action_chain
        if limit is not None and depth > limit:
            raise ActionChainError(action, depth, limit)
        self._actions.send(_FollowUp(action, depth))

    def _live_render_task(self) -> Optional[RenderTask]:
        task = self._render_task
        if task is None or task.done():
            return None
        return task

    def _request_render(self) -> None:
        task = self._live_render_task()
        if task is None:
            logger.debug("No live render task, skipping frame")
            return
        task.send(ControlMessage.RENDER)

    async def _suspend(self) -> None:
        task = self._live_render_task()
        if task is None:
            logger.debug("Suspend requested while not rendering")
            return
        task.send(ControlMessage.SUSPEND)
        await self._join(task)
        if self._on_suspend is not None:
            self._on_suspend()
        self._actions.send(Resume())

    def _resume(self) -> None:
        if self._live_render_task() is not None:
            return
        if self._render_task_factory is None:
            logger.warning("Resume requested but no render task factory is set")
            return
        self._render_task = self._render_task_factory()
        self._render_task.start()
        self._render_task.send(ControlMessage.RENDER)
        logger.debug("Rendering resumed")

    def _check_render_task(self) -> None:
        task = self._render_task
        if task is None or task.task is None or not task.task.done():
            return
        if task.task.cancelled():
            raise RenderTaskError("Render task was cancelled")
        exc = task.task.exception()
        if exc is not None:
            raise RenderTaskError(f"Render task failed: {exc!r}") from exc

    async def _join(self, task: RenderTask) -> RenderTaskState:
        try:
            return await task.join()
        except Exception as exc:
            raise RenderTaskError(f"Render task failed: {exc!r}") from exc

    async def _stop_render_task(self, propagate: bool) -> None:
        task = self._render_task
        if task is None or task.task is None:
            return
        if not task.done():
            task.send(ControlMessage.STOP)
        try:
            await self._join(task)
        except RenderTaskError:
            if propagate:
                raise
            logger.debug("Render task failed during shutdown", exc_info=True)


def _unwrap(item: object) -> Tuple[Action, int]:
    if isinstance(item, _FollowUp):
        return item.action, item.depth
    return item, 0
