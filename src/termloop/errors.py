"""
Exception hierarchy for the termloop runtime.
"""


class TermloopError(Exception):
    """Base class for all runtime errors raised by termloop."""


class ChannelClosedError(TermloopError):
    """
    Raised when sending into a channel whose consumer has exited.

    This indicates a shutdown race and is not recoverable by the sender.
    """


class ChannelFullError(TermloopError):
    """Raised when a bounded channel with the reject policy is full."""


class ActionChainError(TermloopError):
    """Raised when follow-up actions chain deeper than the configured limit."""

    def __init__(self, action: object, depth: int, limit: int) -> None:
        super().__init__(
            f"Follow-up chain for {action!r} reached depth {depth} (limit {limit})"
        )
        self.action = action
        self.depth = depth
        self.limit = limit


class RenderTaskError(TermloopError):
    """Raised by the dispatch loop when the render task has failed."""
