from dataclasses import dataclass
from datetime import timedelta
from typing import Protocol, runtime_checkable

from typing_extensions import override

from floatdur.util import MICROSECOND, SECOND


@runtime_checkable
class SupportsInterval(Protocol):
    """Anything that can hand out a read-only view of an Interval."""

    def as_interval(self) -> "Interval": ...


@dataclass(frozen=True, kw_only=True, order=True)
class Interval(SupportsInterval):
    secs: int
    subsec_nanos: int = 0

    def __post_init__(self) -> None:
        for name in ("secs", "subsec_nanos"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(
                    f"Interval {name} must be an int, "
                    f"got {type(value).__name__!r}: {value!r}"
                )
        if self.secs < 0:
            raise ValueError(f"Interval secs ({self.secs}) must be >= 0")
        if not 0 <= self.subsec_nanos < SECOND:
            raise ValueError(
                f"Interval subsec_nanos ({self.subsec_nanos}) must be in "
                f"[0, {SECOND})\n"
                f"Hint: carry whole seconds into secs, or use "
                f"Interval.from_nanos({self.subsec_nanos})"
            )

    @classmethod
    def from_nanos(cls, total: int) -> "Interval":
        """Split a non-negative nanosecond count into seconds and remainder."""
        if total < 0:
            raise ValueError(f"Interval cannot be negative, got {total}ns")
        secs, nanos = divmod(total, SECOND)
        return cls(secs=secs, subsec_nanos=nanos)

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> "Interval":
        if delta < timedelta(0):
            raise ValueError(f"Interval cannot be negative, got {delta!r}")
        return cls(
            secs=delta.days * 86400 + delta.seconds,
            subsec_nanos=delta.microseconds * MICROSECOND,
        )

    @property
    def total_nanos(self) -> int:
        return self.secs * SECOND + self.subsec_nanos

    def to_timedelta(self) -> timedelta:
        """Convert to a timedelta, truncating below microsecond resolution."""
        return timedelta(
            seconds=self.secs, microseconds=self.subsec_nanos // MICROSECOND
        )

    @override
    def as_interval(self) -> "Interval":
        return self

    @override
    def __str__(self) -> str:
        return f"Interval({self.secs}s+{self.subsec_nanos}ns)"


def as_interval(value: "Interval | SupportsInterval | timedelta") -> Interval:
    """Coerce an interval-like value to an Interval.

    Accepts:
    - Interval: returned as-is
    - timedelta: must be non-negative, microsecond resolution
    - any object with an ``as_interval()`` method (SupportsInterval) that
      returns one of the above

    Raises:
        TypeError: If the value cannot produce an Interval
    """
    if isinstance(value, SupportsInterval) and not isinstance(value, Interval):
        value = value.as_interval()
    if isinstance(value, Interval):
        return value
    if isinstance(value, timedelta):
        return Interval.from_timedelta(value)
    raise TypeError(
        f"Expected an Interval, timedelta, or object with as_interval().\n"
        f"Got {type(value).__name__!r}: {value!r}\n"
        f"Examples:\n"
        f"  Interval(secs=4, subsec_nanos=123_456_789)\n"
        f"  timedelta(milliseconds=12)\n"
        f"  Instant.now().elapsed()"
    )
