"""
Fixed classification rules for measurement values.

Fuzzy labels, their config-file keys and the thresholds used to pick them.
Everything here is built once at import and never mutated.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping


class FuzzyLabel(str, Enum):
    EXTREME_BELOW_NORMAL = "extreme-below-normal"
    BELOW_NORMAL = "below-normal"
    NORMAL = "normal"
    ABOVE_NORMAL = "above-normal"
    EXTREME_ABOVE_NORMAL = "extreme-above-normal"

    def __str__(self) -> str:
        return self.value


# Keys used by the display/threshold config file, one per fuzzy label.
FUZZY_VALUE_TO_CONFIG_KEY: Mapping[FuzzyLabel, str] = MappingProxyType({
    FuzzyLabel.EXTREME_BELOW_NORMAL: "extremeBelowNormal",
    FuzzyLabel.BELOW_NORMAL: "belowNormal",
    FuzzyLabel.NORMAL: "normal",
    FuzzyLabel.ABOVE_NORMAL: "aboveNormal",
    FuzzyLabel.EXTREME_ABOVE_NORMAL: "extremeAboveNormal",
})

# Percentile cut-offs (inclusive)
PERCENTILE_EXTREME_BELOW = 1
PERCENTILE_BELOW = 3
PERCENTILE_ABOVE = 97
PERCENTILE_EXTREME_ABOVE = 99

# Standard deviation cut-offs (inclusive)
DEVIATION_EXTREME_BELOW = -3.0
DEVIATION_BELOW = -2.0
DEVIATION_ABOVE = 2.0
DEVIATION_EXTREME_ABOVE = 3.0

MONTHS_PER_YEAR = 12
DAYS_PER_WEEK = 7
DAYS_PER_MONTH = 30.4375  # 365.25 / 12
