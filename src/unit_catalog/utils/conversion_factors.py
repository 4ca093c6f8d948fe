"""
Static conversion tables for the unit catalog.

This module provides:
- LINEAR_FACTORS: Per-category scale factor of every unit relative to the
  category base unit (the unit whose factor is 1)
- EXPLICIT_CONVERSIONS: Direct affine transforms for categories whose units do
  not share a linear base (temperature)

Conversion Strategy:
- Area converts through square meters
- Data converts through megabytes
- Energy converts through joules
- Length converts through meters
- Power converts through watts
- Time converts through seconds
- Volume converts through milliliters
- Weight converts through kilograms
- Speed converts through centimeters per second
- Angle converts through degrees
- Pressure converts through atmospheres
- Temperature uses explicit unit-to-unit pairs

All values are exact fractions computed once at import time.
"""

from fractions import Fraction
from typing import Dict, List

from ..models.enums import CategoryId, UnitId
from ..services.dto import ExplicitConversion


# ============================================================================
# Shared Constants
# ============================================================================

ONE = Fraction(1)
ZERO = Fraction(0)

MICRO = Fraction(1, 10**6)
MILLI = Fraction(1, 1000)
CENTI = Fraction(1, 100)
DECI = Fraction(1, 10)
KILO = Fraction(1000)
MEGA = Fraction(10**6)

KIBI = 1024
INCH_IN_METERS = Fraction(254, 10000)
SQUARE_INCH_IN_SQUARE_METERS = INCH_IN_METERS**2
CUBIC_INCH_IN_MILLILITERS = Fraction(254, 100) ** 3
POUND_IN_KILOGRAMS = Fraction(45359237, 10**8)
STANDARD_ATMOSPHERE_IN_PASCALS = 101325
BTU_IN_JOULES = Fraction(10550559, 10000)
FOOT_POUND_IN_JOULES = Fraction(13558179483314004, 10**16)
SECONDS_PER_HOUR = 60 * 60
SECONDS_PER_DAY = 24 * SECONDS_PER_HOUR

# Data units are expressed in megabytes; a megabyte holds 8 * 10**6 bits
BITS_PER_MEGABYTE = 8 * 10**6
BYTES_PER_MEGABYTE = 10**6


# ============================================================================
# Linear Factors
# ============================================================================

LINEAR_FACTORS: Dict[CategoryId, Dict[UnitId, Fraction]] = {
    CategoryId.AREA: {
        UnitId.AREA_ACRE: Fraction(40468564224, 10**7),
        UnitId.AREA_SQUARE_METER: ONE,
        UnitId.AREA_SQUARE_FOOT: 144 * SQUARE_INCH_IN_SQUARE_METERS,
        UnitId.AREA_SQUARE_YARD: 1296 * SQUARE_INCH_IN_SQUARE_METERS,
        UnitId.AREA_SQUARE_MILLIMETER: MICRO,
        UnitId.AREA_SQUARE_CENTIMETER: Fraction(1, 10**4),
        UnitId.AREA_SQUARE_INCH: SQUARE_INCH_IN_SQUARE_METERS,
        UnitId.AREA_SQUARE_MILE: 4014489600 * SQUARE_INCH_IN_SQUARE_METERS,
        UnitId.AREA_SQUARE_KILOMETER: MEGA,
        UnitId.AREA_HECTARE: Fraction(10**4),
        UnitId.AREA_HAND: Fraction(12516104, 10**9),
        UnitId.AREA_PAPER: Fraction(6032246, 10**8),
        UnitId.AREA_SOCCER_FIELD: Fraction(1086966, 100),
        UnitId.AREA_CASTLE: Fraction(10**5),
        UnitId.AREA_PYEONG: Fraction(400, 121),
    },
    CategoryId.DATA: {
        UnitId.DATA_BIT: Fraction(1, BITS_PER_MEGABYTE),
        UnitId.DATA_BYTE: Fraction(1, BYTES_PER_MEGABYTE),
        UnitId.DATA_KILOBYTE: MILLI,
        UnitId.DATA_MEGABYTE: ONE,
        UnitId.DATA_GIGABYTE: KILO,
        UnitId.DATA_TERABYTE: MEGA,
        UnitId.DATA_PETABYTE: Fraction(10**9),
        UnitId.DATA_EXABYTES: Fraction(10**12),
        UnitId.DATA_ZETABYTES: Fraction(10**15),
        UnitId.DATA_YOTTABYTE: Fraction(10**18),
        UnitId.DATA_KILOBIT: Fraction(10**3, BITS_PER_MEGABYTE),
        UnitId.DATA_MEGABIT: Fraction(10**6, BITS_PER_MEGABYTE),
        UnitId.DATA_GIGABIT: Fraction(10**9, BITS_PER_MEGABYTE),
        UnitId.DATA_TERABIT: Fraction(10**12, BITS_PER_MEGABYTE),
        UnitId.DATA_PETABIT: Fraction(10**15, BITS_PER_MEGABYTE),
        UnitId.DATA_EXABITS: Fraction(10**18, BITS_PER_MEGABYTE),
        UnitId.DATA_ZETABITS: Fraction(10**21, BITS_PER_MEGABYTE),
        UnitId.DATA_YOTTABIT: Fraction(10**24, BITS_PER_MEGABYTE),
        UnitId.DATA_KIBIBITS: Fraction(KIBI, BITS_PER_MEGABYTE),
        UnitId.DATA_KIBIBYTES: Fraction(KIBI, BYTES_PER_MEGABYTE),
        UnitId.DATA_MEBIBITS: Fraction(KIBI**2, BITS_PER_MEGABYTE),
        UnitId.DATA_MEBIBYTES: Fraction(KIBI**2, BYTES_PER_MEGABYTE),
        UnitId.DATA_GIBIBITS: Fraction(KIBI**3, BITS_PER_MEGABYTE),
        UnitId.DATA_GIBIBYTES: Fraction(KIBI**3, BYTES_PER_MEGABYTE),
        UnitId.DATA_TEBIBITS: Fraction(KIBI**4, BITS_PER_MEGABYTE),
        UnitId.DATA_TEBIBYTES: Fraction(KIBI**4, BYTES_PER_MEGABYTE),
        UnitId.DATA_PEBIBITS: Fraction(KIBI**5, BITS_PER_MEGABYTE),
        UnitId.DATA_PEBIBYTES: Fraction(KIBI**5, BYTES_PER_MEGABYTE),
        UnitId.DATA_EXBIBITS: Fraction(KIBI**6, BITS_PER_MEGABYTE),
        UnitId.DATA_EXBIBYTES: Fraction(KIBI**6, BYTES_PER_MEGABYTE),
        UnitId.DATA_ZEBIBITS: Fraction(KIBI**7, BITS_PER_MEGABYTE),
        UnitId.DATA_ZEBIBYTES: Fraction(KIBI**7, BYTES_PER_MEGABYTE),
        UnitId.DATA_YOBIBITS: Fraction(KIBI**8, BITS_PER_MEGABYTE),
        UnitId.DATA_YOBIBYTES: Fraction(KIBI**8, BYTES_PER_MEGABYTE),
        UnitId.DATA_FLOPPY_DISK: Fraction(144 * KIBI**2, 10**8),
        UnitId.DATA_CD: Fraction(700 * KIBI**2, BYTES_PER_MEGABYTE),
        UnitId.DATA_DVD: Fraction(47 * KIBI**3, 10**7),
    },
    CategoryId.ENERGY: {
        UnitId.ENERGY_CALORIE: Fraction(4184, 1000),
        UnitId.ENERGY_KILOCALORIE: Fraction(4184),
        UnitId.ENERGY_BRITISH_THERMAL_UNIT: BTU_IN_JOULES,
        UnitId.ENERGY_KILOJOULE: KILO,
        UnitId.ENERGY_ELECTRON_VOLT: Fraction(1602176565, 10**28),
        UnitId.ENERGY_JOULE: ONE,
        UnitId.ENERGY_FOOT_POUND: FOOT_POUND_IN_JOULES,
        UnitId.ENERGY_BATTERY: Fraction(9000),
        UnitId.ENERGY_BANANA: Fraction(439614),
        UnitId.ENERGY_SLICE_OF_CAKE: Fraction(1046700),
    },
    CategoryId.LENGTH: {
        UnitId.LENGTH_INCH: INCH_IN_METERS,
        UnitId.LENGTH_FOOT: 12 * INCH_IN_METERS,
        UnitId.LENGTH_YARD: 36 * INCH_IN_METERS,
        UnitId.LENGTH_MILE: 63360 * INCH_IN_METERS,
        UnitId.LENGTH_MICRON: MICRO,
        UnitId.LENGTH_MILLIMETER: MILLI,
        UnitId.LENGTH_NANOMETER: Fraction(1, 10**9),
        UnitId.LENGTH_CENTIMETER: CENTI,
        UnitId.LENGTH_METER: ONE,
        UnitId.LENGTH_KILOMETER: KILO,
        UnitId.LENGTH_NAUTICAL_MILE: Fraction(1852),
        UnitId.LENGTH_PAPERCLIP: Fraction(35052, 10**6),
        UnitId.LENGTH_HAND: Fraction(18669, 10**5),
        UnitId.LENGTH_JUMBO_JET: Fraction(76),
    },
    CategoryId.POWER: {
        UnitId.POWER_BTU_PER_MINUTE: BTU_IN_JOULES / 60,
        UnitId.POWER_FOOT_POUND_PER_MINUTE: FOOT_POUND_IN_JOULES / 60,
        UnitId.POWER_WATT: ONE,
        UnitId.POWER_KILOWATT: KILO,
        UnitId.POWER_HORSEPOWER: Fraction(74569987158227022, 10**14),
        UnitId.POWER_LIGHT_BULB: Fraction(60),
        UnitId.POWER_HORSE: Fraction(7457, 10),
        UnitId.POWER_TRAIN_ENGINE: Fraction(2982799486329081, 10**9),
    },
    CategoryId.TIME: {
        UnitId.TIME_DAY: Fraction(SECONDS_PER_DAY),
        UnitId.TIME_SECOND: ONE,
        UnitId.TIME_WEEK: Fraction(7 * SECONDS_PER_DAY),
        # Julian year of 365.25 days
        UnitId.TIME_YEAR: Fraction(1461 * SECONDS_PER_DAY, 4),
        UnitId.TIME_MILLISECOND: MILLI,
        UnitId.TIME_MICROSECOND: MICRO,
        UnitId.TIME_MINUTE: Fraction(60),
        UnitId.TIME_HOUR: Fraction(SECONDS_PER_HOUR),
    },
    CategoryId.VOLUME: {
        UnitId.VOLUME_CUP_US: Fraction(236588237, 10**6),
        UnitId.VOLUME_PINT_US: Fraction(473176473, 10**6),
        UnitId.VOLUME_PINT_UK: Fraction(56826125, 10**5),
        UnitId.VOLUME_QUART_US: Fraction(946352946, 10**6),
        UnitId.VOLUME_QUART_UK: Fraction(11365225, 10**4),
        UnitId.VOLUME_GALLON_US: Fraction(3785411784, 10**6),
        UnitId.VOLUME_GALLON_UK: Fraction(454609, 100),
        UnitId.VOLUME_LITER: KILO,
        # 231 cubic inches per US gallon, 768 teaspoons per gallon
        UnitId.VOLUME_TEASPOON_US: 231 * CUBIC_INCH_IN_MILLILITERS / 768,
        UnitId.VOLUME_TABLESPOON_US: Fraction(1478676478125, 10**11),
        UnitId.VOLUME_CUBIC_CENTIMETER: ONE,
        UnitId.VOLUME_CUBIC_YARD: 27 * 1728 * CUBIC_INCH_IN_MILLILITERS,
        UnitId.VOLUME_CUBIC_METER: MEGA,
        UnitId.VOLUME_MILLILITER: ONE,
        UnitId.VOLUME_CUBIC_INCH: CUBIC_INCH_IN_MILLILITERS,
        UnitId.VOLUME_CUBIC_FOOT: 1728 * CUBIC_INCH_IN_MILLILITERS,
        UnitId.VOLUME_FLUID_OUNCE_US: Fraction(295735295625, 10**10),
        UnitId.VOLUME_FLUID_OUNCE_UK: Fraction(284130625, 10**7),
        UnitId.VOLUME_TEASPOON_UK: Fraction(1420653125, 240000000),
        UnitId.VOLUME_TABLESPOON_UK: Fraction(177581640625, 10**10),
        UnitId.VOLUME_COFFEE_CUP: Fraction(2365882, 10**4),
        UnitId.VOLUME_BATHTUB: Fraction(400 * 946353, 1000),
        UnitId.VOLUME_SWIMMING_POOL: Fraction(3750000000),
    },
    CategoryId.WEIGHT: {
        UnitId.WEIGHT_KILOGRAM: ONE,
        UnitId.WEIGHT_HECTOGRAM: DECI,
        UnitId.WEIGHT_DECAGRAM: CENTI,
        UnitId.WEIGHT_GRAM: MILLI,
        UnitId.WEIGHT_POUND: POUND_IN_KILOGRAMS,
        UnitId.WEIGHT_OUNCE: POUND_IN_KILOGRAMS / 16,
        UnitId.WEIGHT_MILLIGRAM: MICRO,
        UnitId.WEIGHT_CENTIGRAM: Fraction(1, 10**5),
        UnitId.WEIGHT_DECIGRAM: Fraction(1, 10**4),
        UnitId.WEIGHT_LONG_TON: 2240 * POUND_IN_KILOGRAMS,
        UnitId.WEIGHT_TONNE: KILO,
        UnitId.WEIGHT_STONE: 14 * POUND_IN_KILOGRAMS,
        UnitId.WEIGHT_CARAT: Fraction(2, 10**4),
        UnitId.WEIGHT_SHORT_TON: 2000 * POUND_IN_KILOGRAMS,
        UnitId.WEIGHT_SNOWFLAKE: Fraction(2, 10**6),
        UnitId.WEIGHT_SOCCER_BALL: Fraction(4325, 10**4),
        UnitId.WEIGHT_ELEPHANT: Fraction(4000),
        UnitId.WEIGHT_WHALE: Fraction(90000),
    },
    CategoryId.SPEED: {
        UnitId.SPEED_CENTIMETERS_PER_SECOND: ONE,
        UnitId.SPEED_FEET_PER_SECOND: Fraction(3048, 100),
        UnitId.SPEED_KILOMETERS_PER_HOUR: Fraction(250, 9),
        # One nautical mile per hour
        UnitId.SPEED_KNOT: Fraction(1852 * 100, SECONDS_PER_HOUR),
        UnitId.SPEED_MACH: Fraction(34030),
        UnitId.SPEED_METERS_PER_SECOND: Fraction(100),
        UnitId.SPEED_MILES_PER_HOUR: 63360 * INCH_IN_METERS * 100 / SECONDS_PER_HOUR,
        UnitId.SPEED_TURTLE: Fraction(894, 100),
        UnitId.SPEED_HORSE: Fraction(20115, 10),
        UnitId.SPEED_JET: Fraction(24585),
    },
    CategoryId.ANGLE: {
        UnitId.ANGLE_DEGREE: ONE,
        UnitId.ANGLE_RADIAN: Fraction(5729577951308233, 10**14),
        UnitId.ANGLE_GRADIAN: Fraction(9, 10),
    },
    CategoryId.PRESSURE: {
        UnitId.PRESSURE_ATMOSPHERE: ONE,
        UnitId.PRESSURE_BAR: Fraction(100000, STANDARD_ATMOSPHERE_IN_PASCALS),
        UnitId.PRESSURE_KILOPASCAL: Fraction(1000, STANDARD_ATMOSPHERE_IN_PASCALS),
        UnitId.PRESSURE_MILLIMETER_OF_MERCURY: Fraction(1, 760),
        UnitId.PRESSURE_PASCAL: Fraction(1, STANDARD_ATMOSPHERE_IN_PASCALS),
        UnitId.PRESSURE_PSI: Fraction(10000, 146956),
    },
}


# ============================================================================
# Explicit (Affine) Conversions
# ============================================================================

CELSIUS_TO_FAHRENHEIT_RATIO = Fraction(18, 10)
FAHRENHEIT_TO_CELSIUS_RATIO = Fraction(10, 18)
CELSIUS_KELVIN_OFFSET = Fraction(27315, 100)
FAHRENHEIT_RANKINE_OFFSET = Fraction(45967, 100)
FAHRENHEIT_FREEZING_POINT = Fraction(32)

_CELSIUS = UnitId.TEMPERATURE_DEGREES_CELSIUS
_FAHRENHEIT = UnitId.TEMPERATURE_DEGREES_FAHRENHEIT
_KELVIN = UnitId.TEMPERATURE_KELVIN
_TEMPERATURE = CategoryId.TEMPERATURE

EXPLICIT_CONVERSIONS: List[ExplicitConversion] = [
    ExplicitConversion(_TEMPERATURE, _CELSIUS, _CELSIUS, ONE, ZERO),
    ExplicitConversion(
        _TEMPERATURE, _CELSIUS, _FAHRENHEIT, CELSIUS_TO_FAHRENHEIT_RATIO, FAHRENHEIT_FREEZING_POINT
    ),
    ExplicitConversion(_TEMPERATURE, _CELSIUS, _KELVIN, ONE, CELSIUS_KELVIN_OFFSET),
    ExplicitConversion(
        _TEMPERATURE,
        _FAHRENHEIT,
        _CELSIUS,
        FAHRENHEIT_TO_CELSIUS_RATIO,
        -FAHRENHEIT_FREEZING_POINT,
        offset_first=True,
    ),
    ExplicitConversion(_TEMPERATURE, _FAHRENHEIT, _FAHRENHEIT, ONE, ZERO),
    ExplicitConversion(
        _TEMPERATURE,
        _FAHRENHEIT,
        _KELVIN,
        FAHRENHEIT_TO_CELSIUS_RATIO,
        FAHRENHEIT_RANKINE_OFFSET,
        offset_first=True,
    ),
    ExplicitConversion(_TEMPERATURE, _KELVIN, _CELSIUS, ONE, -CELSIUS_KELVIN_OFFSET, offset_first=True),
    ExplicitConversion(
        _TEMPERATURE, _KELVIN, _FAHRENHEIT, CELSIUS_TO_FAHRENHEIT_RATIO, -FAHRENHEIT_RANKINE_OFFSET
    ),
    ExplicitConversion(_TEMPERATURE, _KELVIN, _KELVIN, ONE, ZERO),
]
