"""
Event source that reports terminal resizes as actions.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, Optional

from ...errors import ChannelClosedError, ChannelFullError
from ...schemas.actions import RenderTick, Resize
from ...utils.ui.core.resize_handler import setup_resize_handler
from ..channels import ActionSender
from .base import EventSource

logger = logging.getLogger(__name__)


class ResizeSource(EventSource):
    """Send Resize followed by RenderTick whenever the terminal is resized."""

    def __init__(self) -> None:
        self._sender: Optional[ActionSender] = None
        self._remove: Optional[Callable[[], None]] = None

    def start(self, sender: ActionSender) -> None:
        self._sender = sender
        self._remove = setup_resize_handler(
            self._on_resize, loop=asyncio.get_running_loop()
        )

    async def stop(self) -> None:
        remove, self._remove = self._remove, None
        if remove is not None:
            remove()

    def _on_resize(self, columns: int, rows: int) -> None:
        if self._sender is None:
            return
        try:
            self._sender.send(Resize(columns, rows))
            self._sender.send(RenderTick())
        except ChannelClosedError:
            logger.debug("Resize to %dx%d after shutdown", columns, rows)
        except ChannelFullError:
            logger.warning("Action channel full, dropped resize to %dx%d", columns, rows)
