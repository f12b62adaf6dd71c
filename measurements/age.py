"""
Age parsing.

Ages come in as ISO-8601 periods without the leading "P" ("3Y6M", "2W",
"1Y2M1W3D"); a bare number ("10") means years. Only the date part of the
period grammar is accepted: years, months, weeks, days, in that order.
"""

from __future__ import annotations

import math
import re

from .rules import DAYS_PER_MONTH, DAYS_PER_WEEK, MONTHS_PER_YEAR

_NUMBER = r"[-+]?[0-9]+(?:[.,][0-9]+)?"

_PERIOD_RE = re.compile(
    rf"""
    ^P
    (?:(?P<years>{_NUMBER})Y)?
    (?:(?P<months>{_NUMBER})M)?
    (?:(?P<weeks>{_NUMBER})W)?
    (?:(?P<days>{_NUMBER})D)?
    $
    """,
    re.IGNORECASE | re.VERBOSE,
)

_BARE_YEARS_RE = re.compile(r"^[0-9]+$")


class InvalidAgeError(ValueError):
    """Raised when an age string is not a valid period."""

    def __init__(self, age: str):
        self.age = age
        super().__init__(f"Invalid age period: {age!r}")


def _component(match: re.Match, name: str) -> float:
    raw = match.group(name)
    if raw is None:
        return 0.0
    return float(raw.replace(",", "."))


def parse_age_to_months(age: str | None) -> float:
    """
    Get the number of months corresponding to a period string.

    Blank input gives NaN rather than an error. Weeks and days are converted
    with the average month length (365.25 / 12 days).

    Raises InvalidAgeError if the age cannot be parsed.
    """
    if age is None or not age.strip():
        return math.nan

    age = age.strip()
    period = "P" + age
    if _BARE_YEARS_RE.match(age):
        period += "Y"

    match = _PERIOD_RE.match(period)
    if match is None:
        raise InvalidAgeError(age)

    months = _component(match, "years") * MONTHS_PER_YEAR
    months += _component(match, "months")
    months += _component(match, "weeks") * DAYS_PER_WEEK / DAYS_PER_MONTH
    months += _component(match, "days") / DAYS_PER_MONTH
    # Oversized components overflow to inf (or nan once mixed with signs)
    if not math.isfinite(months):
        raise InvalidAgeError(age)
    return months
