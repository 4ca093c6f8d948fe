"""
Unit conversion helpers for the unit catalog.

This module provides:
- Application of a ConversionData to a value, in the order its flag specifies
- Conversion between two built units through a loader's conversion tables
- Input validation against the category's sign rules
- Conversion display helpers

Conversion Strategy:
- Values are converted to exact fractions before any arithmetic
- Floats are read through their shortest repr, so 0.1 means 1/10
- Rounding happens only when a result is formatted for display
"""

from decimal import Decimal
from fractions import Fraction
from typing import Union

from .dto import Category, ConversionData, Unit
from .exceptions import ValidationError

Number = Union[int, float, Decimal, Fraction, str]


# ============================================================================
# Arithmetic
# ============================================================================


def to_fraction(value: Number) -> Fraction:
    """
    Convert a numeric value to an exact fraction.

    Args:
        value: int, float, Decimal, Fraction or numeric string (e.g., "2.5", "3/4")

    Returns:
        Fraction equal to the decimal value the caller wrote

    Raises:
        ValidationError: If the value is not a finite number
    """
    try:
        if isinstance(value, float):
            return Fraction(repr(value))
        return Fraction(value)
    except (ValueError, TypeError, OverflowError) as e:
        raise ValidationError([f"Invalid numeric value: {value!r}"]) from e


def apply_conversion(value: Number, data: ConversionData) -> Fraction:
    """
    Apply a conversion to a value.

    Args:
        value: Quantity in the source unit
        data: Conversion from the source unit to the target unit

    Returns:
        (value + offset) * ratio when data.offset_first, otherwise
        value * ratio + offset

    Example:
        >>> apply_conversion(100, ConversionData(Fraction(9, 5), Fraction(32)))
        Fraction(212, 1)
    """
    x = to_fraction(value)
    if data.offset_first:
        return (x + data.offset) * data.ratio
    return x * data.ratio + data.offset


def convert_value(loader, value: Number, from_unit: Union[Unit, int], to_unit: Union[Unit, int]) -> Fraction:
    """
    Convert a value between two units of a built catalog.

    Args:
        loader: A built UnitDataLoader
        value: Quantity in from_unit
        from_unit: Source unit (record or id)
        to_unit: Target unit (record or id)

    Returns:
        Quantity in to_unit

    Raises:
        UnitNotFound: If from_unit has no conversion table
        ConversionNotFound: If the units are not in the same category
    """
    return apply_conversion(value, loader.get_conversion(from_unit, to_unit))


# ============================================================================
# Validation
# ============================================================================


def validate_value(category: Category, value: Number) -> Fraction:
    """
    Validate an input value for a category.

    Args:
        category: Category the value is measured in
        value: Value to validate

    Returns:
        The value as an exact fraction

    Raises:
        ValidationError: If the value is not numeric, or negative in a category
            that does not support negative values
    """
    x = to_fraction(value)
    if x < 0 and not category.supports_negative:
        raise ValidationError([f"{category.name} values cannot be negative"])
    return x


# ============================================================================
# Display
# ============================================================================


def format_conversion(value: Number, from_unit: Unit, to_unit: Unit, result: Number, precision: int = 2) -> str:
    """
    Format a unit conversion for display.

    Args:
        value: Source quantity
        from_unit: Source unit
        to_unit: Target unit
        result: Converted quantity
        precision: Decimal places for result

    Returns:
        Formatted string (e.g., "1 mi = 1.61 km")
    """
    source = float(to_fraction(value))
    converted = float(to_fraction(result))
    return f"{source:g} {from_unit.abbreviation} = {converted:.{precision}f} {to_unit.abbreviation}"
