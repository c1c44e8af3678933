"""
Exclusive-access cell around the single shared application state.

The dispatch loop and the render task both reach the state only through
StateCell.acquire(), which makes rendering and mutation strictly
non-overlapping in time.
"""

from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator, Generic, TypeVar

S = TypeVar("S")


class StateCell(Generic[S]):
    """Mutex-guarded holder for one state value."""

    def __init__(self, state: S) -> None:
        self._state = state
        self._lock = asyncio.Lock()

    @asynccontextmanager
    async def acquire(self) -> AsyncIterator[S]:
        """
        Wait for exclusive access and yield the state.

        The lock is released on every exit path of the ``async with`` block,
        including exceptions and cancellation.
        """
        async with self._lock:
            yield self._state

    def locked(self) -> bool:
        """Return True if some flow currently holds the cell."""
        return self._lock.locked()
