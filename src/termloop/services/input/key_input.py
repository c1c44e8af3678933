"""
Keyboard event source.

Reads key presses with prompt_toolkit's input layer, which puts the
terminal in raw mode and parses escape sequences, and forwards each one as
a Key action.
"""

from __future__ import annotations

import logging
from contextlib import ExitStack, contextmanager
from typing import Iterator, Optional

from prompt_toolkit.input import Input, create_input
from prompt_toolkit.keys import Keys

from ...errors import ChannelClosedError, ChannelFullError
from ...schemas.actions import Key
from ..channels import ActionSender
from .base import EventSource

logger = logging.getLogger(__name__)


def key_name(key: object) -> str:
    """Normalize a prompt_toolkit key to a plain string such as "q" or "c-c"."""
    if isinstance(key, Keys):
        return key.value
    return str(key)


class KeyInputSource(EventSource):
    """Send a Key action for every key press read from the terminal."""

    def __init__(self, input: Optional[Input] = None) -> None:
        self._input = input
        self._sender: Optional[ActionSender] = None
        self._stack: Optional[ExitStack] = None

    @property
    def running(self) -> bool:
        return self._stack is not None

    def start(self, sender: ActionSender) -> None:
        if self._stack is not None:
            raise RuntimeError("KeyInputSource already started")
        if self._input is None:
            self._input = create_input()
        self._sender = sender
        stack = ExitStack()
        stack.enter_context(self._input.raw_mode())
        stack.enter_context(self._input.attach(self._on_input_ready))
        self._stack = stack

    async def stop(self) -> None:
        stack, self._stack = self._stack, None
        if stack is not None:
            stack.close()

    @contextmanager
    def paused(self) -> Iterator[None]:
        """Stop reading and restore cooked mode for the duration."""
        if self._input is None or self._stack is None:
            yield
            return
        with self._input.detach(), self._input.cooked_mode():
            yield

    def _on_input_ready(self) -> None:
        if self._input is None or self._sender is None:
            return
        key_presses = self._input.read_keys() + self._input.flush_keys()
        for key_press in key_presses:
            try:
                self._sender.send(Key(key_name(key_press.key)))
            except ChannelClosedError:
                logger.debug("Key %r read after shutdown", key_press.key)
                return
            except ChannelFullError:
                logger.warning("Action channel full, dropped key %r", key_press.key)
