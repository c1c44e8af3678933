"""
Tests for the ordered action/control channels.
"""

from __future__ import annotations

import asyncio
import threading

import pytest

from termloop.errors import ChannelClosedError, ChannelFullError
from termloop.schemas.actions import ControlMessage, Key, Quit, RenderTick
from termloop.services.channels import ActionSender, Channel


@pytest.mark.asyncio
async def test_items_are_received_in_send_order() -> None:
    channel: Channel = Channel("actions")
    sent = [Key("a"), RenderTick(), Key("b"), Quit()]
    for action in sent:
        channel.send(action)

    received = [await channel.recv() for _ in sent]
    assert received == sent


@pytest.mark.asyncio
async def test_recv_waits_for_a_send() -> None:
    """Verify recv suspends rather than returning early on an empty channel."""
    channel: Channel = Channel()
    receiver = asyncio.create_task(channel.recv())
    await asyncio.sleep(0.01)
    assert not receiver.done()

    channel.send(Key("x"))
    assert await asyncio.wait_for(receiver, timeout=1.0) == Key("x")


@pytest.mark.asyncio
async def test_closed_channel_drains_then_yields_none() -> None:
    channel: Channel = Channel()
    channel.send(ControlMessage.RENDER)
    channel.close()

    assert await channel.recv() is ControlMessage.RENDER
    assert await channel.recv() is None
    assert await channel.recv() is None


@pytest.mark.asyncio
async def test_close_wakes_a_waiting_receiver() -> None:
    channel: Channel = Channel()
    receiver = asyncio.create_task(channel.recv())
    await asyncio.sleep(0)

    channel.close()
    assert await asyncio.wait_for(receiver, timeout=1.0) is None


def test_send_after_close_raises() -> None:
    channel: Channel = Channel("control")
    channel.close()

    with pytest.raises(ChannelClosedError, match="control is closed"):
        channel.send(ControlMessage.STOP)


def test_bounded_channel_rejects_when_full() -> None:
    channel: Channel = Channel(capacity=2)
    channel.send(Key("a"))
    channel.send(Key("b"))

    with pytest.raises(ChannelFullError):
        channel.send(Key("c"))
    assert channel.qsize() == 2


@pytest.mark.asyncio
async def test_bounded_channel_drops_oldest() -> None:
    channel: Channel = Channel(capacity=2, overflow_policy="drop_oldest")
    for name in "abc":
        channel.send(Key(name))

    assert channel.dropped == 1
    assert await channel.recv() == Key("b")
    assert await channel.recv() == Key("c")


def test_capacity_must_be_positive() -> None:
    with pytest.raises(ValueError):
        Channel(capacity=0)


@pytest.mark.asyncio
async def test_discard_while_only_drops_leading_matches() -> None:
    channel: Channel = Channel()
    for message in (
        ControlMessage.RENDER,
        ControlMessage.RENDER,
        ControlMessage.STOP,
        ControlMessage.RENDER,
    ):
        channel.send(message)

    dropped = channel.discard_while(lambda message: message is ControlMessage.RENDER)

    assert dropped == 2
    assert await channel.recv() is ControlMessage.STOP
    assert await channel.recv() is ControlMessage.RENDER


@pytest.mark.asyncio
async def test_send_threadsafe_delivers_from_another_thread() -> None:
    channel: Channel = Channel()
    sender = ActionSender(channel, asyncio.get_running_loop())

    thread = threading.Thread(target=sender.send_threadsafe, args=(Key("t"),))
    thread.start()
    thread.join()

    assert await asyncio.wait_for(channel.recv(), timeout=1.0) == Key("t")


def test_send_threadsafe_after_close_raises() -> None:
    loop = asyncio.new_event_loop()
    try:
        channel: Channel = Channel()
        sender = ActionSender(channel, loop)
        channel.close()

        with pytest.raises(ChannelClosedError):
            sender.send_threadsafe(Quit())
    finally:
        loop.close()


def test_send_threadsafe_requires_a_loop() -> None:
    sender = ActionSender(Channel())
    with pytest.raises(RuntimeError):
        sender.send_threadsafe(Quit())


@pytest.mark.asyncio
async def test_send_threadsafe_to_full_channel_drops_and_keeps_loop_clean() -> None:
    loop = asyncio.get_running_loop()
    errors = []
    loop.set_exception_handler(lambda loop, context: errors.append(context))
    try:
        channel: Channel = Channel(capacity=1)
        sender = ActionSender(channel, loop)
        channel.send(Key("a"))

        thread = threading.Thread(target=sender.send_threadsafe, args=(Key("b"),))
        thread.start()
        thread.join()
        await asyncio.sleep(0.01)
    finally:
        loop.set_exception_handler(None)

    assert errors == []
    assert channel.qsize() == 1
    assert await channel.recv() == Key("a")
