"""
Application orchestration.

Application wires the action channel, state cell, render task, dispatch
loop and event sources together once, runs the dispatch loop to
completion, and tears the event sources down again.
"""

from __future__ import annotations

import asyncio
import logging
from contextlib import ExitStack
from typing import Generic, Iterable, Optional, Sequence, TypeVar

from ..config.runtime_config import RuntimeConfig, get_runtime_config
from ..schemas.actions import Action
from ..schemas.state import AppState
from ..services.channels import ActionSender, Channel
from ..services.input.base import EventSource
from ..services.state import StateCell
from ..utils.ui.surface import RichTerminalSurface, TerminalSurface
from .dispatch_loop import DispatchLoop, Update
from .render_task import RenderTask, View

logger = logging.getLogger(__name__)

S = TypeVar("S", bound=AppState)


class Application(Generic[S]):
    """
    One interactive terminal application.

    Args:
        state: Initial application state, shared by the dispatch loop and the
            render task for the lifetime of the run
        update: Called as ``update(state, action)`` for domain actions while
            the state is held; may return a follow-up action
        view: Called as ``view(frame, state)`` to paint a frame
        surface: Rendering resource, a RichTerminalSurface by default
        config: Runtime tunables, read from the environment by default
        sources: Event sources started alongside the dispatch loop
    """

    def __init__(
        self,
        state: S,
        update: Update,
        view: View,
        surface: Optional[TerminalSurface] = None,
        config: Optional[RuntimeConfig] = None,
        sources: Sequence[EventSource] = (),
    ) -> None:
        self.state = state
        self.config = config or get_runtime_config()
        self.surface = surface or RichTerminalSurface(alt_screen=self.config.alt_screen)
        self.sources = list(sources)
        self._update = update
        self._view = view
        self.sender: Optional[ActionSender] = None
        self.dispatch_loop: Optional[DispatchLoop[S]] = None

    async def run(self, initial_actions: Iterable[Action] = ()) -> S:
        """
        Run until the state's ``should_quit`` flag is set.

        Args:
            initial_actions: Actions queued before the dispatch loop starts

        Returns:
            The final application state
        """
        config = self.config
        actions: Channel = Channel(
            "actions",
            capacity=config.action_queue_capacity,
            overflow_policy=config.overflow_policy,
        )
        self.sender = ActionSender(actions, asyncio.get_running_loop())
        self.state.action_tx = self.sender
        cell = StateCell(self.state)
        render_task = self._new_render_task(cell)

        self.dispatch_loop = DispatchLoop(
            actions,
            cell,
            self._update,
            render_task=render_task,
            render_task_factory=lambda: self._new_render_task(cell),
            on_suspend=self._suspend_process,
            max_action_chain=config.max_action_chain,
        )

        for action in initial_actions:
            self.sender.send(action)

        started: list = []
        try:
            for source in self.sources:
                source.start(self.sender)
                started.append(source)
            render_task.start()
            await self.dispatch_loop.run()
        finally:
            await self._stop_sources(started)

        logger.info("Application finished after %d cycles", self.dispatch_loop.cycles)
        return self.state

    def _new_render_task(self, cell: StateCell[S]) -> RenderTask[S]:
        return RenderTask(
            self.surface,
            cell,
            self._view,
            coalesce_renders=self.config.coalesce_renders,
        )

    def _suspend_process(self) -> None:
        # Only called once the render task is done, the surface is free
        with ExitStack() as stack:
            for source in self.sources:
                stack.enter_context(source.paused())
            self.surface.suspend()

    async def _stop_sources(self, sources: Sequence[EventSource]) -> None:
        for source in reversed(sources):
            try:
                await source.stop()
            except Exception:
                logger.warning("Failed to stop %r", source, exc_info=True)


async def run_app(
    state: S,
    update: Update,
    view: View,
    surface: Optional[TerminalSurface] = None,
    config: Optional[RuntimeConfig] = None,
    sources: Sequence[EventSource] = (),
    initial_actions: Iterable[Action] = (),
) -> S:
    """Build an Application and run it to completion."""
    app = Application(state, update, view, surface, config, sources)
    return await app.run(initial_actions)
