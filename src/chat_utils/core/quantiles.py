"""Quantile estimation over numeric samples.

Quantiles use linear interpolation between closest ranks (the R-7
method, also the default of NumPy and spreadsheet ``PERCENTILE``):

    pos  = (n - 1) * q
    base = floor(pos)
    q(x) = x[base] + (pos - base) * (x[base + 1] - x[base])

Pipeline order for batch queries (:func:`quantile_intervals`):

1. **Sort** — once, ascending, into a new list.
2. **Query** — one interpolation per requested interval.

Sorting once and querying many times avoids an ``O(n log n)`` re-sort
per interval.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Sequence
from typing import TypeVar

from chat_utils.exceptions import EmptySampleError, InvalidIntervalError

logger = logging.getLogger(__name__)

Number = TypeVar("Number", int, float)


def sort_ascending(samples: Iterable[float]) -> list[float]:
    """Return a new ascending list; *samples* is never mutated."""
    return sorted(samples)


def clamp(minimum: Number, maximum: Number, value: Number) -> Number:
    """Bound *value* to ``[minimum, maximum]``."""
    if value < minimum:
        return minimum
    if value > maximum:
        return maximum
    return value


def _require_samples(samples: Sequence[float]) -> None:
    if not samples:
        logger.debug("Rejected quantile request over an empty sample set")
        raise EmptySampleError(
            "Cannot compute a quantile of an empty sample set.",
            hint="Check that at least one sample was collected before querying.",
        )


def quantile_of_sorted(sorted_samples: Sequence[float], q: float) -> float:
    """Interpolated quantile of an already ascending sequence.

    *q* is clamped to ``[0, 1]``.

    Raises
    ------
    EmptySampleError
        If *sorted_samples* is empty.
    InvalidIntervalError
        If *q* is NaN.
    """
    _require_samples(sorted_samples)
    if math.isnan(q):
        raise InvalidIntervalError("Quantile interval must be a number, got NaN.")

    pos = (len(sorted_samples) - 1) * clamp(0, 1, q)
    base = math.floor(pos)
    rest = pos - base

    if base + 1 < len(sorted_samples):
        lower = sorted_samples[base]
        return lower + rest * (sorted_samples[base + 1] - lower)
    return sorted_samples[base]


def quantile(samples: Iterable[float], q: float) -> float:
    """Sort *samples* and return the interpolated quantile at *q*."""
    return quantile_of_sorted(sort_ascending(samples), q)


def quantile_intervals(
    samples: Iterable[float],
    intervals: Iterable[float],
) -> list[float]:
    """Quantiles of *samples* at each interval, in the order given.

    Raises :class:`EmptySampleError` for an empty sample set even when
    *intervals* is empty.
    """
    ordered = sort_ascending(samples)
    _require_samples(ordered)
    return [quantile_of_sorted(ordered, interval) for interval in intervals]
