"""
Base class for producers that feed actions into the action channel.
"""

from abc import ABC, abstractmethod
from contextlib import nullcontext
from typing import ContextManager

from ..channels import ActionSender


class EventSource(ABC):
    """A producer started alongside the dispatch loop."""

    @abstractmethod
    def start(self, sender: ActionSender) -> None:
        """Begin producing actions into ``sender``."""
        pass

    @abstractmethod
    async def stop(self) -> None:
        """Stop producing. Must be safe to call more than once."""
        pass

    def paused(self) -> ContextManager[None]:
        """Context during which the source releases the terminal, if it holds it."""
        return nullcontext()
