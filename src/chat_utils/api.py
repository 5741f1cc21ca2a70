"""
chat_utils.api
==============

Entry points with production defaults wired in.

The core helpers take their clock and scheduler explicitly.  The
functions here fill them with :class:`~chat_utils.infra.SystemClock` and
:class:`~chat_utils.infra.ThreadingScheduler` unless the caller passes
its own.

Usage::

    from chat_utils.api import create_typing_indicator, debounce

    indicator = create_typing_indicator(send_typing_on, send_typing_off, 3000)
    save_draft = debounce(persist_draft, 500)
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from chat_utils.core import formatting, timers
from chat_utils.core.formatting import DateLike
from chat_utils.core.protocols import Clock, Scheduler
from chat_utils.infra import SystemClock, ThreadingScheduler

F = TypeVar("F", bound=Callable[..., Any])

_DEFAULT_SCHEDULER = ThreadingScheduler()
_DEFAULT_CLOCK = SystemClock()


def debounce(
    func: F,
    wait: float,
    immediate: bool = False,
    *,
    scheduler: Scheduler | None = None,
) -> timers.Debounced[F]:
    """:func:`chat_utils.core.timers.debounce` on daemon timer threads."""
    return timers.debounce(
        func,
        wait,
        immediate,
        scheduler=scheduler or _DEFAULT_SCHEDULER,
    )


def create_typing_indicator(
    on_start_typing: Callable[[], None],
    on_stop_typing: Callable[[], None],
    idle_time: float,
    *,
    scheduler: Scheduler | None = None,
) -> timers.TypingIndicator:
    """Build a :class:`~chat_utils.core.timers.TypingIndicator`.

    *idle_time* is in milliseconds.
    """
    return timers.TypingIndicator(
        on_start_typing,
        on_stop_typing,
        idle_time,
        scheduler=scheduler or _DEFAULT_SCHEDULER,
    )


def format_date(
    value: DateLike,
    today_text: str,
    yesterday_text: str,
    *,
    clock: Clock | None = None,
) -> str | DateLike:
    """:func:`chat_utils.core.formatting.format_date` against the local date."""
    return formatting.format_date(
        value,
        today_text,
        yesterday_text,
        clock=clock or _DEFAULT_CLOCK,
    )
