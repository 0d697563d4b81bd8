"""Tests for the trailing-edge Debouncer."""

from __future__ import annotations

import asyncio

import pytest

from blog_reader.debounce import Debouncer
from tests.fakes import FakeLoop


@pytest.fixture
def calls() -> list[tuple[float, str]]:
    return []


def _recorder(loop: FakeLoop, calls: list[tuple[float, str]]):
    def action(value: str) -> None:
        calls.append((loop.now, value))

    return action


def test_burst_applies_only_last_value(fake_loop: FakeLoop, calls: list) -> None:
    """Calls at 0, 100 and 150 ms with a 300 ms window fire once, at 450 ms."""
    debounced = Debouncer(_recorder(fake_loop, calls), 300, loop=fake_loop)

    debounced("a")
    fake_loop.advance(0.100)
    debounced("ab")
    fake_loop.advance(0.050)
    debounced("abc")

    fake_loop.advance(0.290)
    assert calls == []
    assert debounced.pending

    fake_loop.advance(0.020)
    assert len(calls) == 1
    fired_at, value = calls[0]
    assert value == "abc"
    assert fired_at == pytest.approx(0.450)
    assert not debounced.pending

    fake_loop.advance(5.0)
    assert len(calls) == 1


def test_at_most_one_timer_outstanding(fake_loop: FakeLoop, calls: list) -> None:
    debounced = Debouncer(_recorder(fake_loop, calls), 300, loop=fake_loop)
    for text in ["r", "re", "rea", "reac", "react"]:
        debounced(text)
        fake_loop.advance(0.010)
    assert len(fake_loop.scheduled) == 1


def test_calls_spaced_beyond_window_each_fire(fake_loop: FakeLoop, calls: list) -> None:
    debounced = Debouncer(_recorder(fake_loop, calls), 300, loop=fake_loop)
    debounced("first")
    fake_loop.advance(0.400)
    debounced("second")
    fake_loop.advance(0.400)
    assert [value for _, value in calls] == ["first", "second"]


def test_cancel_drops_pending(fake_loop: FakeLoop, calls: list) -> None:
    debounced = Debouncer(_recorder(fake_loop, calls), 300, loop=fake_loop)
    debounced("stale")
    assert debounced.cancel() is True
    fake_loop.advance(1.0)
    assert calls == []
    assert debounced.cancel() is False


def test_flush_runs_pending_immediately(fake_loop: FakeLoop, calls: list) -> None:
    debounced = Debouncer(_recorder(fake_loop, calls), 300, loop=fake_loop)
    debounced("now")
    assert debounced.flush() is True
    assert calls == [(0.0, "now")]
    fake_loop.advance(1.0)
    assert len(calls) == 1
    assert debounced.flush() is False


def test_context_manager_cancels_on_exit(fake_loop: FakeLoop, calls: list) -> None:
    with Debouncer(_recorder(fake_loop, calls), 300, loop=fake_loop) as debounced:
        debounced("torn down")
    fake_loop.advance(1.0)
    assert calls == []


@pytest.mark.parametrize("delay_ms", [0, -50])
def test_non_positive_delay_runs_synchronously(
    fake_loop: FakeLoop, calls: list, delay_ms: int
) -> None:
    debounced = Debouncer(_recorder(fake_loop, calls), delay_ms, loop=fake_loop)
    debounced("a")
    debounced("ab")
    assert [value for _, value in calls] == ["a", "ab"]
    assert fake_loop.timers == []
    assert not debounced.pending


def test_none_is_a_valid_value(fake_loop: FakeLoop) -> None:
    received: list[object] = []
    debounced: Debouncer[object] = Debouncer(received.append, 100, loop=fake_loop)
    debounced(None)
    fake_loop.advance(0.2)
    assert received == [None]


async def test_uses_running_loop_by_default() -> None:
    received: list[str] = []
    debounced = Debouncer(received.append, 20)

    debounced("a")
    debounced("ab")
    debounced("abc")
    await asyncio.sleep(0.1)

    assert received == ["abc"]


async def test_cancel_on_running_loop() -> None:
    received: list[str] = []
    debounced = Debouncer(received.append, 20)

    debounced("gone")
    debounced.cancel()
    await asyncio.sleep(0.06)

    assert received == []
