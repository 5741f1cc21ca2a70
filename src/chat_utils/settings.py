"""Default values used by the formatting helpers.

Colour, duration and trimming thresholds live here instead of inside
the helpers.  Only ``DEFAULT_TRIM_LENGTH`` can be overridden per call,
through the ``max_length`` argument of ``trim_content``.
"""

from __future__ import annotations

DEFAULT_TRIM_LENGTH: int = 1024
"""Maximum content length kept by :func:`~chat_utils.core.formatting.trim_content`."""

ELLIPSIS: str = "..."
"""Suffix appended by ``trim_content`` when ``ellipsis=True``."""

CONTRAST_THRESHOLD: float = 186
"""Perceived-luminance cut-off above which dark text is preferred."""

DARK_TEXT_COLOR: str = "#000000"
LIGHT_TEXT_COLOR: str = "#FFFFFF"

SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 3600
SECONDS_PER_DAY: int = 86400

DAY_HOURS_CUTOFF: int = 364
"""From this many days on, ``format_time`` drops the trailing hours."""
