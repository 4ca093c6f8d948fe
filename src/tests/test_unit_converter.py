"""
Unit tests for the unit conversion helpers.

Tests cover:
- Exact fraction parsing of user input
- Linear and affine conversion application
- Conversions through a built catalog
- Sign validation per category
- Display formatting
"""

from decimal import Decimal
from fractions import Fraction

import pytest

from unit_catalog.models.enums import CategoryId, UnitId
from unit_catalog.services.dto import Category, ConversionData, IDENTITY_CONVERSION
from unit_catalog.services.exceptions import ConversionNotFound, UnitNotFound, ValidationError
from unit_catalog.services.unit_converter import (
    apply_conversion,
    convert_value,
    format_conversion,
    to_fraction,
    validate_value,
)


# ============================================================================
# Parsing Tests
# ============================================================================


class TestToFraction:
    """Test conversion of input values to exact fractions."""

    def test_float_uses_decimal_repr(self):
        assert to_fraction(0.1) == Fraction(1, 10)

    @pytest.mark.parametrize(
        "value, expected",
        [
            (3, Fraction(3)),
            (Decimal("2.5"), Fraction(5, 2)),
            ("2.5", Fraction(5, 2)),
            ("3/4", Fraction(3, 4)),
            (Fraction(7, 3), Fraction(7, 3)),
        ],
    )
    def test_supported_types(self, value, expected):
        assert to_fraction(value) == expected

    @pytest.mark.parametrize("value", ["abc", None, float("nan"), float("inf")])
    def test_invalid_values_raise(self, value):
        with pytest.raises(ValidationError) as exc_info:
            to_fraction(value)
        assert "Invalid numeric value" in str(exc_info.value)


# ============================================================================
# Arithmetic Tests
# ============================================================================


class TestApplyConversion:
    """Test application of ConversionData."""

    def test_identity(self):
        assert apply_conversion(42, IDENTITY_CONVERSION) == 42

    def test_ratio_then_offset(self):
        celsius_to_fahrenheit = ConversionData(Fraction(9, 5), Fraction(32))
        assert apply_conversion(100, celsius_to_fahrenheit) == 212

    def test_offset_then_ratio(self):
        fahrenheit_to_celsius = ConversionData(Fraction(5, 9), Fraction(-32), offset_first=True)
        assert apply_conversion(212, fahrenheit_to_celsius) == 100

    def test_order_matters(self):
        data = ConversionData(Fraction(2), Fraction(1))
        flipped = ConversionData(Fraction(2), Fraction(1), offset_first=True)
        assert apply_conversion(3, data) == 7
        assert apply_conversion(3, flipped) == 8

    def test_result_is_exact(self):
        result = apply_conversion(0.1, ConversionData(Fraction(3)))
        assert result == Fraction(3, 10)


class TestConvertValue:
    """Test conversions through a built catalog."""

    def test_miles_to_kilometers(self, us_loader):
        result = convert_value(us_loader, 1, UnitId.LENGTH_MILE, UnitId.LENGTH_KILOMETER)
        assert result == Fraction(1609344, 10**6)

    def test_accepts_unit_records(self, us_loader):
        celsius = us_loader.find_unit(UnitId.TEMPERATURE_DEGREES_CELSIUS)
        fahrenheit = us_loader.find_unit(UnitId.TEMPERATURE_DEGREES_FAHRENHEIT)
        assert convert_value(us_loader, 37, celsius, fahrenheit) == Fraction(493, 5)

    def test_same_unit_is_identity(self, us_loader):
        assert convert_value(us_loader, "12.5", UnitId.WEIGHT_GRAM, UnitId.WEIGHT_GRAM) == Fraction(25, 2)

    def test_cross_category_raises(self, us_loader):
        with pytest.raises(ConversionNotFound):
            convert_value(us_loader, 1, UnitId.TIME_HOUR, UnitId.LENGTH_METER)

    def test_unknown_unit_raises(self, us_loader):
        with pytest.raises(UnitNotFound):
            convert_value(us_loader, 1, 9999, UnitId.LENGTH_METER)


# ============================================================================
# Validation Tests
# ============================================================================


class TestValidateValue:
    """Test sign validation against category rules."""

    @pytest.fixture
    def length(self):
        return Category(int(CategoryId.LENGTH), "Length", False)

    @pytest.fixture
    def temperature(self):
        return Category(int(CategoryId.TEMPERATURE), "Temperature", True)

    def test_positive_value_accepted(self, length):
        assert validate_value(length, "1.5") == Fraction(3, 2)

    def test_zero_accepted(self, length):
        assert validate_value(length, 0) == 0

    def test_negative_rejected_when_unsupported(self, length):
        with pytest.raises(ValidationError) as exc_info:
            validate_value(length, -1)
        assert exc_info.value.errors == ["Length values cannot be negative"]

    def test_negative_accepted_for_temperature(self, temperature):
        assert validate_value(temperature, -40) == -40

    def test_non_numeric_rejected(self, temperature):
        with pytest.raises(ValidationError):
            validate_value(temperature, "cold")


# ============================================================================
# Display Tests
# ============================================================================


class TestFormatConversion:
    """Test conversion display formatting."""

    def test_default_precision(self, us_loader):
        mile = us_loader.find_unit(UnitId.LENGTH_MILE)
        kilometer = us_loader.find_unit(UnitId.LENGTH_KILOMETER)
        result = convert_value(us_loader, 1, mile, kilometer)
        assert format_conversion(1, mile, kilometer, result) == "1 mi = 1.61 km"

    def test_custom_precision(self, us_loader):
        celsius = us_loader.find_unit(UnitId.TEMPERATURE_DEGREES_CELSIUS)
        kelvin = us_loader.find_unit(UnitId.TEMPERATURE_KELVIN)
        result = convert_value(us_loader, "-40.25", celsius, kelvin)
        assert format_conversion("-40.25", celsius, kelvin, result, precision=1) == "-40.25 °C = 232.9 K"
