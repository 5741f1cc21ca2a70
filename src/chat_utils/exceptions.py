"""Custom exception hierarchy for chat-utils.

Every error raised on purpose by this package inherits from
:class:`ChatUtilsError`.  The template-variable helpers never raise on
malformed conversation data; they degrade to empty values instead.
Exceptions are reserved for inputs that have no meaningful answer
(an empty sample set, a NaN percentile, an unparsable colour).

Hierarchy
---------
ChatUtilsError
├── EmptySampleError
├── InvalidIntervalError
├── InvalidColorError
└── SchedulerError
"""

from __future__ import annotations


class ChatUtilsError(Exception):
    """Base exception for all chat-utils errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance for the caller."""


# --- Statistics ------------------------------------------------------------

class EmptySampleError(ChatUtilsError):
    """Raised when a quantile is requested over an empty sample set."""


class InvalidIntervalError(ChatUtilsError):
    """Raised when a quantile interval is not a comparable number (NaN)."""


# --- Formatting ------------------------------------------------------------

class InvalidColorError(ChatUtilsError):
    """Raised when a background colour is not a ``#RRGGBB`` hex string."""


# --- Timers ----------------------------------------------------------------

class SchedulerError(ChatUtilsError):
    """Raised when a timer cannot be scheduled (e.g. negative delay)."""
