"""Protocols (interfaces) consumed by the core layer.

The timer helpers ask a ``Scheduler`` for one-shot callbacks and keep
the returned ``TimerHandle`` to cancel them; ``format_date`` asks a
``Clock`` for today.  Tests plug in a manual scheduler and a fixed
clock; :mod:`chat_utils.infra` supplies the threaded and system ones.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date
from typing import Protocol


class TimerHandle(Protocol):
    """A scheduled callback that can still be cancelled."""

    def cancel(self) -> None:
        """Prevent the callback from running.

        Cancelling a handle that already fired or was already cancelled
        is a no-op.
        """
        ...  # pragma: no cover


class Scheduler(Protocol):
    """Starts one-shot millisecond timers.

    A debounce wrapper or typing indicator holds at most one handle from
    its scheduler at a time and cancels it before asking for the next.
    """

    def call_later(
        self,
        delay_ms: float,
        callback: Callable[[], None],
    ) -> TimerHandle:
        """Run *callback* once, *delay_ms* milliseconds from now.

        Raises
        ------
        SchedulerError
            When *delay_ms* is negative.
        """
        ...  # pragma: no cover


class Clock(Protocol):
    """Source of the current local date."""

    def today(self) -> date:
        ...  # pragma: no cover
