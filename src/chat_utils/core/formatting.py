"""Pure display-formatting helpers for dates, durations, text and colours.

Every function in this module is a **pure** transformation with no I/O and
no side effects.  The only environmental input, "today", is injected
through a :class:`~chat_utils.core.protocols.Clock`.
"""

from __future__ import annotations

import json
import math
import re
from collections.abc import Mapping
from datetime import date, datetime, timedelta
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, TypeVar

from chat_utils import settings
from chat_utils.core.models import TimeUnit
from chat_utils.core.protocols import Clock
from chat_utils.exceptions import InvalidColorError

DateLike = TypeVar("DateLike", str, date, datetime, int, float)

_HEX_COLOR = re.compile(r"#?([0-9a-fA-F]{6})(?:[0-9a-fA-F]{2})?")


# ---------------------------------------------------------------------------
# Colour
# ---------------------------------------------------------------------------

def get_contrasting_text_color(bg_color: str) -> str:
    """Pick black or white text for a ``#RRGGBB`` background.

    An optional trailing alpha byte (``#RRGGBBAA``) is ignored.

    Raises
    ------
    InvalidColorError
        If *bg_color* is not a hex colour.
    """
    match = _HEX_COLOR.fullmatch(bg_color.strip())
    if match is None:
        raise InvalidColorError(
            f"Invalid background colour: {bg_color!r}",
            hint="Expected a hex colour such as '#1F93FF'.",
        )
    hex_digits = match.group(1)
    red, green, blue = (int(hex_digits[i:i + 2], 16) for i in (0, 2, 4))
    luminance = red * 0.299 + green * 0.587 + blue * 0.114
    if luminance > settings.CONTRAST_THRESHOLD:
        return settings.DARK_TEXT_COLOR
    return settings.LIGHT_TEXT_COLOR


# ---------------------------------------------------------------------------
# Dates
# ---------------------------------------------------------------------------

def _as_local_date(value: object) -> date | None:
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone()
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        # Epoch milliseconds.
        try:
            return datetime.fromtimestamp(value / 1000).date()
        except (OverflowError, OSError, ValueError):
            return None
    if not isinstance(value, str):
        return None
    try:
        return _as_local_date(datetime.fromisoformat(value.strip()))
    except ValueError:
        return None


def format_date(
    value: DateLike,
    today_text: str,
    yesterday_text: str,
    *,
    clock: Clock,
) -> str | DateLike:
    """Return *today_text* / *yesterday_text* for recent dates.

    Accepts dates, datetimes, ISO-8601 strings and epoch-millisecond
    numbers.  Any other date, and any value that cannot be read as a
    date, is returned unchanged.
    """
    day = _as_local_date(value)
    if day is None:
        return value
    today = clock.today()
    if day == today:
        return today_text
    if day == today - timedelta(days=1):
        return yesterday_text
    return value


# ---------------------------------------------------------------------------
# Durations
# ---------------------------------------------------------------------------

def format_time(time_in_seconds: float) -> str:
    """Render a duration with its two most significant units.

    >>> format_time(3725)
    '1 Hr 2 Min'
    """
    if settings.SECONDS_PER_MINUTE <= time_in_seconds < settings.SECONDS_PER_HOUR:
        minutes = math.floor(time_in_seconds / settings.SECONDS_PER_MINUTE)
        seconds = math.floor(time_in_seconds % settings.SECONDS_PER_MINUTE)
        suffix = f" {seconds} Sec" if seconds > 0 else ""
        return f"{minutes} Min{suffix}"

    if settings.SECONDS_PER_HOUR <= time_in_seconds < settings.SECONDS_PER_DAY:
        hours = math.floor(time_in_seconds / settings.SECONDS_PER_HOUR)
        remainder = time_in_seconds % settings.SECONDS_PER_HOUR
        minutes = (
            0 if remainder < settings.SECONDS_PER_MINUTE
            else math.floor(remainder / settings.SECONDS_PER_MINUTE)
        )
        suffix = f" {minutes} Min" if minutes > 0 else ""
        return f"{hours} Hr{suffix}"

    if time_in_seconds >= settings.SECONDS_PER_DAY:
        days = math.floor(time_in_seconds / settings.SECONDS_PER_DAY)
        remainder = time_in_seconds % settings.SECONDS_PER_DAY
        hours = (
            0 if remainder < settings.SECONDS_PER_HOUR or days >= settings.DAY_HOURS_CUTOFF
            else math.floor(remainder / settings.SECONDS_PER_HOUR)
        )
        suffix = f" {hours} Hr" if hours > 0 else ""
        return f"{days} Day{suffix}"

    return f"{math.floor(time_in_seconds)} Sec"


def _round_one_decimal(value: float) -> float:
    # Half-up, not banker's rounding.
    return float(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def convert_seconds_to_time_unit(
    seconds: float | None,
    unit_names: Mapping[str, str],
) -> TimeUnit:
    """Express *seconds* in minutes, hours or days.

    *unit_names* maps ``minute``, ``hour`` and ``day`` to display
    labels, e.g. ``{"minute": "m", "hour": "h", "day": "d"}``.

    >>> convert_seconds_to_time_unit(90, {"minute": "m", "hour": "h", "day": "d"})
    TimeUnit(time=1.5, unit='m')
    """
    if not seconds:
        return TimeUnit(time=None, unit=unit_names["minute"])
    if seconds < settings.SECONDS_PER_HOUR:
        return TimeUnit(
            time=_round_one_decimal(seconds / settings.SECONDS_PER_MINUTE),
            unit=unit_names["minute"],
        )
    if seconds < settings.SECONDS_PER_DAY:
        return TimeUnit(
            time=_round_one_decimal(seconds / settings.SECONDS_PER_HOUR),
            unit=unit_names["hour"],
        )
    return TimeUnit(
        time=_round_one_decimal(seconds / settings.SECONDS_PER_DAY),
        unit=unit_names["day"],
    )


# ---------------------------------------------------------------------------
# Text
# ---------------------------------------------------------------------------

def trim_content(
    content: str | None = "",
    max_length: int = settings.DEFAULT_TRIM_LENGTH,
    ellipsis: bool = False,
) -> str:
    """Cut *content* to *max_length* characters.

    With ``ellipsis=True`` the ``...`` suffix is appended whether or not
    anything was cut.
    """
    trimmed = (content or "")[:max_length]
    if ellipsis:
        trimmed += settings.ELLIPSIS
    return trimmed


def parse_boolean(candidate: Any) -> bool:
    """Interpret ``"true"``, ``"FALSE"``, ``1``, ``"0"`` and friends.

    The candidate is lower-cased and decoded as JSON; the truthiness of
    the decoded value is returned.  Decoded objects and arrays count as
    ``True`` even when empty.  Anything that is not valid JSON is
    ``False``.
    """
    try:
        parsed = json.loads(str(candidate).lower())
    except ValueError:
        return False
    if isinstance(parsed, (dict, list)):
        return True
    return bool(parsed)
