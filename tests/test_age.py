import math

import pytest

from measurements.age import InvalidAgeError, parse_age_to_months


def test_blank_age_is_nan():
    for age in ["", " ", "\t\n", None]:
        assert math.isnan(parse_age_to_months(age))

def test_bare_number_is_years():
    assert parse_age_to_months("10") == 120.0
    assert parse_age_to_months(" 10 ") == 120.0

def test_years_and_months():
    assert parse_age_to_months("3Y6M") == 42.0
    assert parse_age_to_months("3y6m") == 42.0

def test_weeks_and_days_use_average_month():
    assert parse_age_to_months("2W") == pytest.approx(14 / 30.4375)
    assert parse_age_to_months("2W") == pytest.approx(0.46, abs=0.01)
    assert parse_age_to_months("30D") == pytest.approx(30 / 30.4375)

def test_all_components():
    expected = 12 + 2 + 7 / 30.4375 + 3 / 30.4375
    assert parse_age_to_months("1Y2M1W3D") == pytest.approx(expected)

def test_fractional_components():
    assert parse_age_to_months("1.5Y") == 18.0
    assert parse_age_to_months("0,5M") == 0.5

def test_malformed_age_raises():
    for age in ["abc", "3Y6X", "6M3Y", "1Y1Y", "T3H", "1DT2H", "--1Y", "-10", "3 Y", "P3Y", "Y"]:
        with pytest.raises(InvalidAgeError):
            parse_age_to_months(age)

def test_invalid_age_is_value_error():
    with pytest.raises(ValueError) as excinfo:
        parse_age_to_months("abc")
    assert excinfo.value.age == "abc"
    assert "abc" in str(excinfo.value)

def test_signed_components():
    assert parse_age_to_months("-1Y") == -12.0
    assert parse_age_to_months("+1Y-6M") == 6.0

def test_overflowing_age_raises():
    for age in ["9" * 400, "9" * 400 + "D", "9" * 400 + "Y-" + "9" * 400 + "M"]:
        with pytest.raises(InvalidAgeError):
            parse_age_to_months(age)
