from importlib.resources import files

from .convert import as_fractional_micros, as_fractional_millis, as_fractional_secs
from .errors import FormatWriteError
from .format import TimeFormat, format_interval, round_3_decimals
from .interval import Interval, SupportsInterval, as_interval
from .stopwatch import Instant, Measurement, Stopwatch, measure
from .util import MICROSECOND, MILLISECOND, NANOSECOND, SECOND

# Load documentation files for programmatic access by agents and code-aware tools
_docs_path = files(__package__) / "docs"
docs = {
    "readme": (_docs_path / "README.md").read_text(encoding="utf-8"),
}

__all__ = [
    "Interval",
    "SupportsInterval",
    "as_interval",
    "as_fractional_secs",
    "as_fractional_millis",
    "as_fractional_micros",
    "TimeFormat",
    "format_interval",
    "round_3_decimals",
    "FormatWriteError",
    "Instant",
    "Measurement",
    "Stopwatch",
    "measure",
    "NANOSECOND",
    "MICROSECOND",
    "MILLISECOND",
    "SECOND",
    "docs",
]
