"""
Terminal resize handling utilities.

This module installs a SIGWINCH handler where available and provides helpers for
querying the current terminal size.
"""

from __future__ import annotations

import asyncio
import os
import signal
import sys
from typing import Callable, Optional, Tuple


def setup_resize_handler(
    callback: Callable[[int, int], None],
    loop: Optional[asyncio.AbstractEventLoop] = None,
) -> Callable[[], None]:
    """
    Install a resize handler that calls the provided callback.

    Args:
        callback: Called with (columns, lines) when the terminal is resized
        loop: Event loop to deliver the signal on; the callback then runs as a
            regular loop callback instead of inside the signal handler

    Returns:
        A function that removes the handler again
    """
    if sys.platform == "win32" or not hasattr(signal, "SIGWINCH"):
        return lambda: None

    def notify() -> None:
        try:
            cols, rows = get_terminal_size()
        except Exception:
            return
        callback(cols, rows)

    if loop is not None:
        loop.add_signal_handler(signal.SIGWINCH, notify)
        return lambda: loop.remove_signal_handler(signal.SIGWINCH)

    previous = signal.getsignal(signal.SIGWINCH)

    def handler(signum: int, frame: object) -> None:
        if callable(previous):
            try:
                previous(signum, frame)
            except Exception:
                pass
        notify()

    signal.signal(signal.SIGWINCH, handler)
    return lambda: signal.signal(signal.SIGWINCH, previous)


def get_terminal_size(fallback: Tuple[int, int] = (80, 24)) -> Tuple[int, int]:
    """
    Get the current terminal size.

    Args:
        fallback: Returned if the terminal size cannot be determined

    Returns:
        Tuple of (columns, rows)
    """
    try:
        size = os.get_terminal_size()
        return (size.columns, size.lines)
    except OSError:
        return fallback
