"""Tests for the debounce wrapper and typing indicator (core/timers.py).

All timers run on the :class:`FakeScheduler` fixture from conftest, so
time only moves when a test calls ``scheduler.advance``.
"""

from __future__ import annotations

from unittest.mock import MagicMock

from chat_utils.core.timers import TypingIndicator, debounce

from conftest import FakeScheduler


# ---------------------------------------------------------------------------
# debounce
# ---------------------------------------------------------------------------

class TestDebounce:
    def test_trailing_call_uses_last_arguments(self, scheduler: FakeScheduler) -> None:
        calls: list[tuple[object, ...]] = []
        wrapped = debounce(lambda *args: calls.append(args), 100, scheduler=scheduler)

        wrapped(1)
        scheduler.advance(50)
        wrapped(2)
        scheduler.advance(50)
        wrapped(3)
        assert calls == []

        scheduler.advance(100)
        assert calls == [(3,)]

    def test_keyword_arguments_forwarded(self, scheduler: FakeScheduler) -> None:
        func = MagicMock()
        wrapped = debounce(func, 10, scheduler=scheduler)
        wrapped("a", key="b")
        scheduler.advance(10)
        func.assert_called_once_with("a", key="b")

    def test_only_one_timer_pending(self, scheduler: FakeScheduler) -> None:
        wrapped = debounce(lambda: None, 100, scheduler=scheduler)
        for _ in range(5):
            wrapped()
        assert len(scheduler.pending) == 1

    def test_immediate_fires_on_leading_edge_only(self, scheduler: FakeScheduler) -> None:
        calls: list[int] = []
        wrapped = debounce(calls.append, 100, immediate=True, scheduler=scheduler)

        wrapped(1)
        wrapped(2)
        assert calls == [1]

        scheduler.advance(100)
        assert calls == [1]

        wrapped(3)
        assert calls == [1, 3]

    def test_cancel_drops_pending_call(self, scheduler: FakeScheduler) -> None:
        calls: list[int] = []
        wrapped = debounce(calls.append, 100, scheduler=scheduler)
        wrapped(1)
        wrapped.cancel()
        scheduler.advance(500)
        assert calls == []

    def test_keeps_wrapped_name(self, scheduler: FakeScheduler) -> None:
        def save_draft() -> None:
            """Persist the draft."""

        wrapped = debounce(save_draft, 100, scheduler=scheduler)
        assert wrapped.__name__ == "save_draft"
        assert wrapped.__doc__ == "Persist the draft."


# ---------------------------------------------------------------------------
# TypingIndicator
# ---------------------------------------------------------------------------

def _indicator(scheduler: FakeScheduler, idle_time: float = 1000) -> tuple[TypingIndicator, MagicMock, MagicMock]:
    on_start = MagicMock()
    on_stop = MagicMock()
    indicator = TypingIndicator(on_start, on_stop, idle_time, scheduler=scheduler)
    return indicator, on_start, on_stop


class TestTypingIndicator:
    def test_start_fires_once_while_typing(self, scheduler: FakeScheduler) -> None:
        indicator, on_start, on_stop = _indicator(scheduler)
        indicator.start()
        indicator.start()
        indicator.start()
        on_start.assert_called_once_with()
        on_stop.assert_not_called()
        assert indicator.is_typing

    def test_idle_timeout_stops(self, scheduler: FakeScheduler) -> None:
        indicator, _, on_stop = _indicator(scheduler)
        indicator.start()
        scheduler.advance(999)
        on_stop.assert_not_called()
        scheduler.advance(1)
        on_stop.assert_called_once_with()
        assert not indicator.is_typing

    def test_start_resets_idle_timer(self, scheduler: FakeScheduler) -> None:
        indicator, _, on_stop = _indicator(scheduler)
        indicator.start()
        scheduler.advance(800)
        indicator.start()
        scheduler.advance(800)
        on_stop.assert_not_called()
        scheduler.advance(200)
        on_stop.assert_called_once_with()

    def test_stop_fires_immediately_and_clears_timer(self, scheduler: FakeScheduler) -> None:
        indicator, _, on_stop = _indicator(scheduler)
        indicator.start()
        indicator.stop()
        on_stop.assert_called_once_with()
        assert scheduler.pending == []

        scheduler.advance(5000)
        on_stop.assert_called_once_with()

    def test_stop_when_idle_is_noop(self, scheduler: FakeScheduler) -> None:
        indicator, _, on_stop = _indicator(scheduler)
        indicator.stop()
        on_stop.assert_not_called()

    def test_restart_after_timeout(self, scheduler: FakeScheduler) -> None:
        indicator, on_start, on_stop = _indicator(scheduler, idle_time=10)
        indicator.start()
        scheduler.advance(10)
        indicator.start()
        assert on_start.call_count == 2
        assert on_stop.call_count == 1

    def test_stale_timer_callback_is_ignored(self, scheduler: FakeScheduler) -> None:
        indicator, _, on_stop = _indicator(scheduler)
        indicator.start()
        stale = scheduler.pending[0]
        indicator.start()

        # Simulate a thread that was already firing when it got cancelled.
        stale.callback()
        on_stop.assert_not_called()
        assert indicator.is_typing
