"""
Tests for terminal resize handling.
"""

from __future__ import annotations

import asyncio
import signal

import pytest

from termloop.schemas.actions import RenderTick, Resize
from termloop.services.channels import ActionSender, Channel
from termloop.services.input import ResizeSource
from termloop.utils.ui.core import resize_handler as resize_module


def test_get_terminal_size_returns_tuple() -> None:
    """Verify terminal size helper returns a stable tuple."""
    cols, rows = resize_module.get_terminal_size()
    assert isinstance(cols, int)
    assert isinstance(rows, int)
    assert cols > 0
    assert rows > 0


def test_setup_resize_handler_installs_handler(monkeypatch) -> None:
    """Verify the resize handler attempts to register SIGWINCH when available."""
    calls = []

    def fake_signal(sig, handler):
        calls.append((sig, handler))

    monkeypatch.setattr(resize_module.signal, "signal", fake_signal)
    monkeypatch.setattr(resize_module.sys, "platform", "linux", raising=False)

    def cb(cols: int, rows: int) -> None:
        _ = cols, rows

    remove = resize_module.setup_resize_handler(cb)
    if not hasattr(signal, "SIGWINCH"):
        assert calls == []
        return
    assert calls
    remove()
    assert len(calls) == 2


def test_handler_reports_current_size(monkeypatch) -> None:
    """Verify the installed handler calls back with the terminal size."""
    if not hasattr(signal, "SIGWINCH"):
        pytest.skip("SIGWINCH not available")
    installed = {}
    seen = []

    monkeypatch.setattr(
        resize_module.signal, "signal", lambda sig, handler: installed.update(h=handler)
    )
    monkeypatch.setattr(resize_module, "get_terminal_size", lambda: (120, 40))

    resize_module.setup_resize_handler(lambda cols, rows: seen.append((cols, rows)))
    installed["h"](signal.SIGWINCH, None)

    assert seen == [(120, 40)]


@pytest.mark.asyncio
async def test_resize_source_sends_resize_then_render_tick(monkeypatch) -> None:
    if not hasattr(signal, "SIGWINCH"):
        pytest.skip("SIGWINCH not available")
    monkeypatch.setattr(resize_module, "get_terminal_size", lambda: (100, 30))
    channel: Channel = Channel()
    source = ResizeSource()

    source.start(ActionSender(channel, asyncio.get_running_loop()))
    try:
        signal.raise_signal(signal.SIGWINCH)
        first = await asyncio.wait_for(channel.recv(), timeout=1.0)
        second = await asyncio.wait_for(channel.recv(), timeout=1.0)
    finally:
        await source.stop()

    assert first == Resize(100, 30)
    assert second == RenderTick()
