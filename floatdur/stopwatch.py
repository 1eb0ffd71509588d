"""Monotonic time measurements that plug into the converters and formatter."""

import logging
import time
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from typing_extensions import override

from floatdur.format import TimeFormat, format_interval
from floatdur.interval import Interval, SupportsInterval

logger = logging.getLogger(__name__)


@dataclass(frozen=True, order=True)
class Instant:
    """A reading of the monotonic clock, in nanoseconds."""

    nanos: int

    @classmethod
    def now(cls) -> "Instant":
        return cls(time.monotonic_ns())

    def duration_since(self, earlier: "Instant") -> Interval:
        """Interval from ``earlier`` to this instant, zero if it is later."""
        return Interval.from_nanos(max(self.nanos - earlier.nanos, 0))

    def elapsed(self) -> Interval:
        return Instant.now().duration_since(self)


@dataclass(frozen=True, kw_only=True)
class Measurement(SupportsInterval):
    label: str
    interval: Interval

    @override
    def as_interval(self) -> Interval:
        return self.interval

    @override
    def __str__(self) -> str:
        return f"{self.label}: {TimeFormat(self.interval)}"


class Stopwatch:
    """Start/stop timer producing a labelled Measurement."""

    def __init__(self, label: str):
        self.label: str = label
        self._started: Instant | None = None
        self._measurement: Measurement | None = None

    def start(self) -> "Stopwatch":
        self._started = Instant.now()
        self._measurement = None
        return self

    def stop(self) -> Measurement:
        if self._started is None:
            raise RuntimeError(
                f"Stopwatch {self.label!r} was stopped before it was started.\n"
                f"Hint: call start() first, or use measure({self.label!r})"
            )
        self._measurement = Measurement(
            label=self.label, interval=self._started.elapsed()
        )
        return self._measurement

    @property
    def measurement(self) -> Measurement | None:
        """The last completed measurement, None while running."""
        return self._measurement


@contextmanager
def measure(
    label: str,
    logger: logging.Logger = logger,
    level: int = logging.DEBUG,
    full: bool = False,
) -> Iterator[Stopwatch]:
    """Time the body of a ``with`` block and log how long it took.

    The measurement is recorded and logged even if the body raises.
    """
    watch = Stopwatch(label).start()
    try:
        yield watch
    finally:
        measurement = watch.stop()
        logger.log(
            level, "%s took %s", label, format_interval(measurement, full=full)
        )
