"""Tests for the async change signal."""

import asyncio

import pytest

from food_diary.services.signals import Signal


def test_emit_awaits_listeners_in_order_and_unsubscribe() -> None:
    signal = Signal()
    calls: list[str] = []

    async def first() -> None:
        calls.append("first")

    async def second() -> None:
        calls.append("second")

    signal.subscribe(first)
    unsubscribe = signal.subscribe(second)
    assert signal.listener_count == 2

    asyncio.run(signal.emit())
    unsubscribe()
    unsubscribe()
    asyncio.run(signal.emit())

    assert calls == ["first", "second", "first"]
    assert signal.listener_count == 1


def test_listener_error_propagates_to_emitter() -> None:
    signal = Signal()

    async def failing() -> None:
        raise RuntimeError("boom")

    signal.subscribe(failing)

    with pytest.raises(RuntimeError):
        asyncio.run(signal.emit())
