"""Shared pytest fixtures and configuration for the chat-utils test suite.

Guidelines
----------
* Core tests must be pure — no threads, no real clock.
* Timers are driven through :class:`FakeScheduler`; only the infra
  tests start real :class:`threading.Timer` threads.
* Tests must not depend on OS state (timezone, current date).
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date

import pytest


@dataclass
class FakeTimerHandle:
    due_ms: float
    callback: Callable[[], None]
    cancelled: bool = False
    fired: bool = False

    def cancel(self) -> None:
        self.cancelled = True


@dataclass
class FakeScheduler:
    """Manual-time scheduler: nothing fires until :meth:`advance` is called."""

    now_ms: float = 0
    handles: list[FakeTimerHandle] = field(default_factory=list)

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> FakeTimerHandle:
        handle = FakeTimerHandle(due_ms=self.now_ms + delay_ms, callback=callback)
        self.handles.append(handle)
        return handle

    @property
    def pending(self) -> list[FakeTimerHandle]:
        return [h for h in self.handles if not h.cancelled and not h.fired]

    def advance(self, delta_ms: float) -> None:
        """Move time forward and fire every due, uncancelled timer in order."""
        self.now_ms += delta_ms
        while True:
            due = [h for h in self.pending if h.due_ms <= self.now_ms]
            if not due:
                return
            handle = min(due, key=lambda h: h.due_ms)
            handle.fired = True
            handle.callback()


@dataclass(frozen=True)
class FixedClock:
    day: date

    def today(self) -> date:
        return self.day


@pytest.fixture()
def scheduler() -> FakeScheduler:
    return FakeScheduler()


@pytest.fixture()
def clock() -> FixedClock:
    return FixedClock(date(2024, 3, 15))
