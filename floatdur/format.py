"""Human-readable rendering of intervals for performance measurements.

The unit is picked from the magnitude of the interval:

* ``secs > 0`` => seconds with up to 3 decimal places
* more than 1ms => milliseconds with up to 3 decimal places
* more than 1µs => microseconds with up to 3 decimal places
* otherwise => whole nanoseconds

By default units are abbreviated (``1.234ms``). The alternate flag
(``f"{TimeFormat(ivl):#}"``) switches to full unit names
(``1.234 milliseconds``).
"""

import math
from collections.abc import Callable
from dataclasses import dataclass
from decimal import Decimal
from typing import Protocol

from typing_extensions import override

from floatdur.convert import (
    IntervalLike,
    as_fractional_micros,
    as_fractional_millis,
    as_fractional_secs,
)
from floatdur.errors import FormatWriteError
from floatdur.interval import as_interval
from floatdur.util import MICROSECOND, MILLISECOND


class TextSink(Protocol):
    def write(self, text: str, /) -> object: ...


# (abbreviated suffix, full suffix, converter)
_Unit = tuple[str, str, Callable[[IntervalLike], float]]

_SECONDS: _Unit = ("s", " seconds", as_fractional_secs)
_MILLIS: _Unit = ("ms", " milliseconds", as_fractional_millis)
_MICROS: _Unit = ("µs", " microseconds", as_fractional_micros)


def round_3_decimals(x: float) -> float:
    """Round to 3 decimal places, halves away from zero (unlike ``round()``)."""
    scaled = x * 1000.0
    if not math.isfinite(scaled):
        return scaled / 1000.0
    magnitude = abs(scaled)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return math.copysign(whole, scaled) / 1000.0


def _render_number(x: float) -> str:
    """Shortest decimal form, without exponent or a trailing ``.0``."""
    if math.isinf(x):
        return "inf"
    text = f"{Decimal(repr(x)):f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


@dataclass(frozen=True)
class TimeFormat:
    """Formatting wrapper around an interval-like value.

    >>> from floatdur import Interval
    >>> ivl = Interval(secs=0, subsec_nanos=461_930)
    >>> str(TimeFormat(ivl))
    '461.93µs'
    >>> f"{TimeFormat(ivl):#}"
    '461.93 microseconds'
    """

    value: IntervalLike

    def render(self, full: bool = False) -> str:
        ivl = as_interval(self.value)

        if ivl.secs > 0:
            unit = _SECONDS
        elif ivl.subsec_nanos > MILLISECOND:
            unit = _MILLIS
        elif ivl.subsec_nanos > MICROSECOND:
            unit = _MICROS
        else:
            suffix = " nanoseconds" if full else "ns"
            return f"{ivl.subsec_nanos}{suffix}"

        short, long, convert = unit
        number = _render_number(round_3_decimals(convert(ivl)))
        return f"{number}{long if full else short}"

    def write_to(self, sink: TextSink, full: bool = False) -> None:
        """Write the rendered interval to ``sink``.

        Raises:
            FormatWriteError: If the sink fails to accept the text
        """
        text = self.render(full=full)
        try:
            sink.write(text)
        except (OSError, ValueError) as e:
            raise FormatWriteError(
                f"Failed to write formatted interval {text!r}", wrapped=e
            ) from e

    @override
    def __str__(self) -> str:
        return self.render()

    @override
    def __format__(self, format_spec: str) -> str:
        full = format_spec.startswith("#")
        if full:
            format_spec = format_spec[1:]
        return format(self.render(full=full), format_spec)


def format_interval(value: IntervalLike, full: bool = False) -> str:
    """Shortcut for ``TimeFormat(value).render(full=full)``."""
    return TimeFormat(value).render(full=full)
