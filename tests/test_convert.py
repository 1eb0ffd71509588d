"""Tests for fractional second/milli/micro conversions."""

import math
from datetime import timedelta

import pytest

from floatdur import (
    Interval,
    Measurement,
    as_fractional_micros,
    as_fractional_millis,
    as_fractional_secs,
)

SAMPLES = [
    Interval(secs=0),
    Interval(secs=0, subsec_nanos=1),
    Interval(secs=0, subsec_nanos=461_930),
    Interval(secs=0, subsec_nanos=999_999_999),
    Interval(secs=4, subsec_nanos=123_456_789),
    Interval(secs=86_400, subsec_nanos=500_000_000),
]


def test_fractional_values_for_known_interval():
    ivl = Interval(secs=4, subsec_nanos=123_456_789)
    assert as_fractional_secs(ivl) == pytest.approx(4.123456789)
    assert as_fractional_millis(ivl) == pytest.approx(4_123.456789)
    assert as_fractional_micros(ivl) == pytest.approx(4_123_456.789)


def test_zero_interval_is_zero_in_every_unit():
    ivl = Interval(secs=0)
    assert as_fractional_secs(ivl) == 0.0
    assert as_fractional_millis(ivl) == 0.0
    assert as_fractional_micros(ivl) == 0.0


@pytest.mark.parametrize("ivl", SAMPLES, ids=str)
def test_units_scale_by_a_thousand(ivl):
    secs = as_fractional_secs(ivl)
    millis = as_fractional_millis(ivl)
    micros = as_fractional_micros(ivl)
    assert secs * 1000 == pytest.approx(millis)
    assert millis * 1000 == pytest.approx(micros)


def test_secs_are_monotonic_in_each_component():
    """Growing either component never shrinks the result."""
    previous = -1.0
    for nanos in (0, 1, 999, 1_000, 1_000_000, 999_999_999):
        value = as_fractional_secs(Interval(secs=7, subsec_nanos=nanos))
        assert value >= previous
        previous = value

    previous = -1.0
    for secs in (0, 1, 2, 1_000, 10**9, 10**15):
        value = as_fractional_secs(Interval(secs=secs, subsec_nanos=5))
        assert value >= previous
        previous = value


def test_huge_seconds_overflow_to_infinity():
    ivl = Interval(secs=10**400)
    assert as_fractional_secs(ivl) == math.inf
    assert as_fractional_millis(ivl) == math.inf
    assert as_fractional_micros(ivl) == math.inf


def test_accepts_timedelta_and_measurements():
    ivl = Interval(secs=1, subsec_nanos=250_000_000)
    measured = Measurement(label="job", interval=ivl)
    delta = timedelta(seconds=1, milliseconds=250)

    assert as_fractional_secs(measured) == as_fractional_secs(ivl) == 1.25
    assert as_fractional_millis(delta) == as_fractional_millis(ivl) == 1250.0
    assert as_fractional_micros(delta) == 1_250_000.0


def test_rejects_non_intervals():
    with pytest.raises(TypeError):
        as_fractional_secs(3)  # type: ignore[arg-type]
