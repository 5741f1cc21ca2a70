"""Infrastructure: the system wall clock."""

from __future__ import annotations

from datetime import date


class SystemClock:
    """:class:`~chat_utils.core.protocols.Clock` backed by the local date."""

    def today(self) -> date:
        return date.today()
