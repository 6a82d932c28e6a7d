"""Tests for period code and value parsing."""

from datetime import date

import pytest

from bls_data.data.periods import parse_observation, parse_period, parse_value
from bls_data.errors import MalformedValue, UnsupportedFrequency
from bls_data.models import RawObservation


@pytest.mark.parametrize(
    "period, expected",
    [
        ("M01", date(2015, 1, 1)),
        ("M07", date(2015, 7, 1)),
        ("M12", date(2015, 12, 1)),
        ("Q01", date(2015, 1, 1)),
        ("Q02", date(2015, 4, 1)),
        ("Q03", date(2015, 7, 1)),
        ("Q04", date(2015, 10, 1)),
        ("A01", date(2015, 1, 1)),
    ],
)
def test_parse_period(period, expected):
    assert parse_period(2015, period) == expected


@pytest.mark.parametrize("period", ["M13", "X99", "S01", "M00", "Q05", "", "m01"])
def test_unsupported_periods(period):
    with pytest.raises(UnsupportedFrequency) as exc_info:
        parse_period(2015, period)
    assert exc_info.value.period == period


@pytest.mark.parametrize(
    "text, expected", [("3.5", 3.5), ("-0.2", -0.2), ("237", 237.0), (" 1.25 ", 1.25)]
)
def test_parse_value(text, expected):
    assert parse_value(text) == expected


@pytest.mark.parametrize("text", ["", "-", "(NA)", "abc", "nan", "inf"])
def test_malformed_values(text):
    with pytest.raises(MalformedValue) as exc_info:
        parse_value(text)
    assert exc_info.value.value == text


def test_parse_observation():
    obs = RawObservation(year=2016, period="M02", value="4.9")
    assert parse_observation(obs) == (date(2016, 2, 1), 4.9)
