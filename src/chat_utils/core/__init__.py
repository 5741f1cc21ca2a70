"""Core layer — pure template, statistics and formatting logic.

Rules
-----
* No ``print()`` calls.
* No filesystem, network or thread access.
* No imports from ``infra`` or ``api``.
* Time and timers enter only through :mod:`chat_utils.core.protocols`.
"""

from chat_utils.core.models import (
    Contact,
    Conversation,
    ConversationMeta,
    Person,
    TimeUnit,
    VariableMap,
)
from chat_utils.core.protocols import Clock, Scheduler, TimerHandle

__all__: list[str] = [
    "Clock",
    "Contact",
    "Conversation",
    "ConversationMeta",
    "Person",
    "Scheduler",
    "TimeUnit",
    "TimerHandle",
    "VariableMap",
]
