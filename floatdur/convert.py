"""Fractional conversions of an Interval to seconds, millis and micros."""

import math
from datetime import timedelta

from floatdur.interval import Interval, SupportsInterval, as_interval

IntervalLike = Interval | SupportsInterval | timedelta


def _whole(secs: int) -> float:
    # Python ints are unbounded; saturate the way a float cast would.
    try:
        return float(secs)
    except OverflowError:
        return math.inf


def as_fractional_secs(value: IntervalLike) -> float:
    """Return the interval in seconds, e.g. 4.123456789."""
    ivl = as_interval(value)
    return _whole(ivl.secs) + ivl.subsec_nanos / 1_000_000_000.0


def as_fractional_millis(value: IntervalLike) -> float:
    """Return the interval in milliseconds, e.g. 4123.456789."""
    ivl = as_interval(value)
    return _whole(ivl.secs) * 1_000.0 + ivl.subsec_nanos / 1_000_000.0


def as_fractional_micros(value: IntervalLike) -> float:
    """Return the interval in microseconds, e.g. 4123456.789."""
    ivl = as_interval(value)
    return _whole(ivl.secs) * 1_000_000.0 + ivl.subsec_nanos / 1_000.0
