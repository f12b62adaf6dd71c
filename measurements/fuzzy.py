"""Coarse descriptions of percentile and standard deviation values."""

from __future__ import annotations

from typing import Union

from .rules import (
    DEVIATION_ABOVE,
    DEVIATION_BELOW,
    DEVIATION_EXTREME_ABOVE,
    DEVIATION_EXTREME_BELOW,
    FUZZY_VALUE_TO_CONFIG_KEY,
    PERCENTILE_ABOVE,
    PERCENTILE_BELOW,
    PERCENTILE_EXTREME_ABOVE,
    PERCENTILE_EXTREME_BELOW,
    FuzzyLabel,
)


def classify_percentile(percentile: int) -> FuzzyLabel:
    """
    Convert a percentile (0-100) into a label grossly describing the value.

    Out-of-range percentiles are not rejected, they land in the tails.
    """
    if percentile <= PERCENTILE_EXTREME_BELOW:
        return FuzzyLabel.EXTREME_BELOW_NORMAL
    if percentile <= PERCENTILE_BELOW:
        return FuzzyLabel.BELOW_NORMAL
    if percentile >= PERCENTILE_EXTREME_ABOVE:
        return FuzzyLabel.EXTREME_ABOVE_NORMAL
    if percentile >= PERCENTILE_ABOVE:
        return FuzzyLabel.ABOVE_NORMAL
    return FuzzyLabel.NORMAL


def classify_deviation(deviation: float) -> FuzzyLabel:
    """Convert a standard deviation (z-score) into a label grossly describing the value."""
    if deviation <= DEVIATION_EXTREME_BELOW:
        return FuzzyLabel.EXTREME_BELOW_NORMAL
    if deviation <= DEVIATION_BELOW:
        return FuzzyLabel.BELOW_NORMAL
    if deviation >= DEVIATION_EXTREME_ABOVE:
        return FuzzyLabel.EXTREME_ABOVE_NORMAL
    if deviation >= DEVIATION_ABOVE:
        return FuzzyLabel.ABOVE_NORMAL
    return FuzzyLabel.NORMAL


def config_key_for(label: Union[FuzzyLabel, str]) -> str:
    # Plain strings are coerced first; unknown ones raise ValueError here.
    return FUZZY_VALUE_TO_CONFIG_KEY[FuzzyLabel(label)]
