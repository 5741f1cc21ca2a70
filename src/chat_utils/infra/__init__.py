"""Infrastructure layer — threads and the system clock.

Concrete adapters for the protocols in :mod:`chat_utils.core.protocols`.

Rules
-----
* No business logic.
* Imported by :mod:`chat_utils.api` only; ``core`` never imports from here.
"""

from chat_utils.infra.clock import SystemClock
from chat_utils.infra.threading_scheduler import ThreadingScheduler, ThreadingTimerHandle

__all__: list[str] = [
    "SystemClock",
    "ThreadingScheduler",
    "ThreadingTimerHandle",
]
