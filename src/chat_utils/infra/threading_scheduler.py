"""Infrastructure: a :class:`~chat_utils.core.protocols.Scheduler` on threads.

Each scheduled callback runs on its own daemon :class:`threading.Timer`
so a pending debounce or typing timeout never keeps the interpreter
alive at exit.

Rules
-----
* One thread per pending timer; cancelled timers exit without firing.
* Exceptions raised by a callback are logged, not propagated, since
  there is no caller left on the timer thread to receive them.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from chat_utils.exceptions import SchedulerError

logger = logging.getLogger(__name__)


class ThreadingTimerHandle:
    """Cancellable handle around a started :class:`threading.Timer`."""

    def __init__(self, timer: threading.Timer) -> None:
        self._timer = timer

    def cancel(self) -> None:
        self._timer.cancel()


class ThreadingScheduler:
    """Schedule one-shot callbacks on daemon timer threads."""

    def call_later(
        self,
        delay_ms: float,
        callback: Callable[[], None],
    ) -> ThreadingTimerHandle:
        if delay_ms < 0:
            raise SchedulerError(f"Timer delay must not be negative, got {delay_ms} ms.")

        timer = threading.Timer(delay_ms / 1000, self._run, args=(callback,))
        timer.daemon = True
        timer.start()
        logger.debug("Scheduled %r in %s ms", callback, delay_ms)
        return ThreadingTimerHandle(timer)

    @staticmethod
    def _run(callback: Callable[[], None]) -> None:
        try:
            callback()
        except Exception:
            logger.exception("Timer callback %r failed", callback)
