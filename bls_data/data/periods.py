"""Convert BLS period codes and values into dates and floats."""

import re
from datetime import date
from decimal import Decimal, InvalidOperation

from bls_data.errors import MalformedValue, UnsupportedFrequency
from bls_data.models import RawObservation


MONTHLY = re.compile(r"^M(\d\d)$")
QUARTERLY = re.compile(r"^Q(\d\d)$")
ANNUAL = re.compile(r"^A\d\d")

# Annual average, reported alongside monthly data
ANNUAL_AVERAGE = "M13"


def parse_period(year: int, period: str) -> date:
    """
    Map a period code to the first day of the period.

    M01-M12 are months, Q01-Q04 quarters (Q02 -> April) and A01 annual.
    M13 is deliberately not treated as a month.

    Raises:
        UnsupportedFrequency: For any other period code
    """
    monthly = MONTHLY.match(period)
    if monthly and period != ANNUAL_AVERAGE:
        month = int(monthly.group(1))
        if 1 <= month <= 12:
            return date(year, month, 1)

    quarterly = QUARTERLY.match(period)
    if quarterly:
        quarter = int(quarterly.group(1))
        if 1 <= quarter <= 4:
            return date(year, 3 * quarter - 2, 1)

    if ANNUAL.match(period):
        return date(year, 1, 1)

    raise UnsupportedFrequency(period)


def parse_value(text: str) -> float:
    """Parse a decimal string such as '3.5' or '-0.2'."""
    try:
        value = Decimal(text.strip())
    except (InvalidOperation, AttributeError) as e:
        raise MalformedValue(text) from e
    if not value.is_finite():
        raise MalformedValue(text)
    return float(value)


def parse_observation(obs: RawObservation) -> tuple[date, float]:
    return parse_period(obs.year, obs.period), parse_value(obs.value)
