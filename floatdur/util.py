"""Utility constants for floatdur.

Unit constants are expressed in nanoseconds, the finest resolution an
Interval carries.
"""

# Time unit constants (all values in nanoseconds)
NANOSECOND = 1
MICROSECOND = 1_000
MILLISECOND = 1_000_000
SECOND = 1_000_000_000
