"""
Ordered message channels between the runtime flows.

A Channel is a FIFO with an explicit closed state. Items sent before
close() are still delivered in order; once drained, a closed channel
yields None to its consumer, and any further send raises
ChannelClosedError.
"""

from __future__ import annotations

import asyncio
import logging
from collections import deque
from typing import Callable, Deque, Generic, Optional, TypeVar

from ..config.runtime_config import OverflowPolicy
from ..errors import ChannelClosedError, ChannelFullError
from ..schemas.actions import Action

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Channel(Generic[T]):
    """Multi-producer, single-consumer FIFO channel."""

    def __init__(
        self,
        name: str = "channel",
        capacity: Optional[int] = None,
        overflow_policy: OverflowPolicy = "reject",
    ) -> None:
        if capacity is not None and capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.name = name
        self._capacity = capacity
        self._overflow_policy = overflow_policy
        self._items: Deque[T] = deque()
        self._ready = asyncio.Event()
        self._closed = False
        self._dropped = 0

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def dropped(self) -> int:
        """Number of items evicted by the drop_oldest policy."""
        return self._dropped

    def qsize(self) -> int:
        """Number of items waiting to be received."""
        return len(self._items)

    def send(self, item: T) -> None:
        """
        Enqueue an item without blocking.

        Raises:
            ChannelClosedError: The consumer has exited
            ChannelFullError: The channel is bounded, full, and rejecting
        """
        if self._closed:
            raise ChannelClosedError(f"{self.name} is closed, cannot send {item!r}")

        if self._capacity is not None and len(self._items) >= self._capacity:
            if self._overflow_policy == "reject":
                raise ChannelFullError(
                    f"{self.name} is full ({self._capacity} items), cannot send {item!r}"
                )
            evicted = self._items.popleft()
            self._dropped += 1
            logger.warning("%s full, dropped oldest item %r", self.name, evicted)

        self._items.append(item)
        self._ready.set()

    async def recv(self) -> Optional[T]:
        """Wait for the next item. Returns None once closed and drained."""
        while not self._items:
            if self._closed:
                return None
            self._ready.clear()
            await self._ready.wait()
        return self._items.popleft()

    def discard_while(self, predicate: Callable[[T], bool]) -> int:
        """Drop queued items from the front while ``predicate`` holds."""
        count = 0
        while self._items and predicate(self._items[0]):
            self._items.popleft()
            count += 1
        return count

    def close(self) -> None:
        """Refuse further sends. Already queued items remain receivable."""
        if self._closed:
            return
        self._closed = True
        self._ready.set()
        logger.debug("%s closed", self.name)


class ActionSender:
    """
    Sending half of the action channel.

    Handed to application state and event sources so they can enqueue
    actions without being able to consume them.
    """

    def __init__(
        self,
        channel: Channel[Action],
        loop: Optional[asyncio.AbstractEventLoop] = None,
    ) -> None:
        self._channel = channel
        self._loop = loop

    @property
    def closed(self) -> bool:
        return self._channel.closed

    def send(self, action: Action) -> None:
        """Enqueue an action. Must be called on the event loop's thread."""
        self._channel.send(action)

    def send_threadsafe(self, action: Action) -> None:
        """
        Enqueue an action from another thread.

        The send is scheduled on the owning loop. Closure is checked before
        scheduling so a sender racing shutdown still gets ChannelClosedError.
        """
        if self._loop is None:
            raise RuntimeError("ActionSender is not bound to an event loop")
        if self._channel.closed:
            raise ChannelClosedError(
                f"{self._channel.name} is closed, cannot send {action!r}"
            )
        self._loop.call_soon_threadsafe(self._send_if_open, action)

    def _send_if_open(self, action: Action) -> None:
        if self._channel.closed:
            logger.warning("Dropped %r sent from another thread after close", action)
            return
        try:
            self._channel.send(action)
        except ChannelFullError:
            logger.warning("Dropped %r sent from another thread, channel full", action)
