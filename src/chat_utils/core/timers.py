"""Single-owner timer helpers: debounce and typing indicator.

Each helper owns exactly one pending :class:`TimerHandle` and follows
cancel-and-reschedule semantics.  Timers come from an injected
:class:`~chat_utils.core.protocols.Scheduler`, so the helpers never
touch threads themselves.

Schedulers may fire callbacks on another thread.  A fired callback
carries the generation it was scheduled for and is ignored when the
helper has been rescheduled or stopped since.
"""

from __future__ import annotations

import functools
import logging
import threading
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from chat_utils.core.protocols import Scheduler, TimerHandle

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


class _SingleTimer:
    """Owns at most one pending timer on a scheduler."""

    def __init__(self, scheduler: Scheduler) -> None:
        self._scheduler = scheduler
        self._handle: TimerHandle | None = None
        self._generation = 0
        self.lock = threading.RLock()

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def restart(self, delay_ms: float, callback: Callable[[], None]) -> None:
        """Cancel any pending timer and schedule *callback* after *delay_ms*."""
        with self.lock:
            self.cancel()
            generation = self._generation

            def _fire() -> None:
                with self.lock:
                    if generation != self._generation:
                        return
                    self._handle = None
                    self._generation += 1
                    callback()

            self._handle = self._scheduler.call_later(delay_ms, _fire)

    def cancel(self) -> bool:
        """Cancel the pending timer; return whether one was pending."""
        with self.lock:
            if self._handle is None:
                return False
            self._handle.cancel()
            self._handle = None
            self._generation += 1
            return True


# ---------------------------------------------------------------------------
# Debounce
# ---------------------------------------------------------------------------

class Debounced(Generic[F]):
    """Callable wrapper returned by :func:`debounce`."""

    def __init__(
        self,
        func: F,
        wait: float,
        immediate: bool,
        scheduler: Scheduler,
    ) -> None:
        self._func = func
        self._wait = wait
        self._immediate = immediate
        self._timer = _SingleTimer(scheduler)
        functools.update_wrapper(self, func, updated=())

    def __call__(self, *args: Any, **kwargs: Any) -> None:
        with self._timer.lock:
            call_now = self._immediate and not self._timer.pending

            def _later() -> None:
                if not self._immediate:
                    self._func(*args, **kwargs)

            self._timer.restart(self._wait, _later)
            if call_now:
                self._func(*args, **kwargs)

    def cancel(self) -> None:
        """Drop the pending trailing call, if any."""
        self._timer.cancel()


def debounce(
    func: F,
    wait: float,
    immediate: bool = False,
    *,
    scheduler: Scheduler,
) -> Debounced[F]:
    """Delay *func* until it has not been called for *wait* milliseconds.

    By default the last call's arguments are used once the calls stop
    (trailing edge).  With ``immediate=True`` the function runs on the
    leading edge instead, and again only after a quiet period of *wait*.
    """
    return Debounced(func, wait, immediate, scheduler)


# ---------------------------------------------------------------------------
# Typing indicator
# ---------------------------------------------------------------------------

class TypingIndicator:
    """Report typing activity with an idle timeout.

    Parameters
    ----------
    on_start_typing:
        Called when :meth:`start` is invoked while idle.
    on_stop_typing:
        Called when typing stops, explicitly or after *idle_time*.
    idle_time:
        Milliseconds without a :meth:`start` call before typing is
        considered stopped.
    scheduler:
        Timer backend; see :class:`~chat_utils.core.protocols.Scheduler`.
    """

    def __init__(
        self,
        on_start_typing: Callable[[], None],
        on_stop_typing: Callable[[], None],
        idle_time: float,
        *,
        scheduler: Scheduler,
    ) -> None:
        self._on_start_typing = on_start_typing
        self._on_stop_typing = on_stop_typing
        self._idle_time = idle_time
        self._timer = _SingleTimer(scheduler)

    @property
    def is_typing(self) -> bool:
        return self._timer.pending

    def start(self) -> None:
        """Signal a keystroke; fires ``on_start_typing`` on the first one."""
        with self._timer.lock:
            if not self._timer.pending:
                logger.debug("Typing started")
                self._on_start_typing()
            self._timer.restart(self._idle_time, self._on_idle)

    def stop(self) -> None:
        """Stop immediately; a no-op when not typing."""
        with self._timer.lock:
            if self._timer.cancel():
                logger.debug("Typing stopped")
                self._on_stop_typing()

    def _on_idle(self) -> None:
        logger.debug("Typing idle for %s ms", self._idle_time)
        self._on_stop_typing()
