"""
Declarative category and unit tables for the unit catalog.

This module holds data only:
- CATEGORY_DEFINITIONS: Converter categories in navigation order
- UNIT_DEFINITIONS: Units per category with display order and regional flags

Localized strings are referenced by key. A unit with string key "Acre" resolves
"UnitName_Acre" and "UnitAbbreviation_Acre" through the string provider; a
category with key "Length" resolves "CategoryName_Length".

Regional defaults follow one convention: the unit native to the region is the
default "from" unit and its counterpart in the other system is the default "to"
unit. Fixed defaults (Gigabyte -> Megabyte, Hour -> Minute, ...) do not depend
on the region.
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple

from ..models.enums import CategoryId, UnitId
from .region_policy import ALWAYS, NEVER, FlagRule, when, unless


@dataclass(frozen=True)
class CategoryDefinition:
    """Static declaration of a converter category."""

    category_id: CategoryId
    string_key: str
    supports_negative: bool = False

    @property
    def name_string_id(self) -> str:
        return f"CategoryName_{self.string_key}"


@dataclass(frozen=True)
class UnitDefinition:
    """
    Static declaration of a unit.

    Attributes:
        unit_id: Stable unit id
        string_key: Suffix of the UnitName_/UnitAbbreviation_ string ids
        display_order: Sort key inside the category
        default_from: Rule marking the unit as default conversion source
        default_to: Rule marking the unit as default conversion target
        is_whimsical: Novelty unit
        include: Rule deciding whether the unit is part of the catalog at all
    """

    unit_id: UnitId
    string_key: str
    display_order: int
    default_from: FlagRule = NEVER
    default_to: FlagRule = NEVER
    is_whimsical: bool = False
    include: FlagRule = ALWAYS

    @property
    def name_string_id(self) -> str:
        return f"UnitName_{self.string_key}"

    @property
    def abbreviation_string_id(self) -> str:
        return f"UnitAbbreviation_{self.string_key}"


def _whimsical(unit_id: UnitId, string_key: str, display_order: int) -> UnitDefinition:
    return UnitDefinition(unit_id, string_key, display_order, is_whimsical=True)


# ============================================================================
# Categories
# ============================================================================

CATEGORY_DEFINITIONS: Tuple[CategoryDefinition, ...] = (
    CategoryDefinition(CategoryId.CURRENCY, "Currency"),
    CategoryDefinition(CategoryId.VOLUME, "Volume"),
    CategoryDefinition(CategoryId.LENGTH, "Length"),
    CategoryDefinition(CategoryId.WEIGHT, "Weight"),
    CategoryDefinition(CategoryId.TEMPERATURE, "Temperature", supports_negative=True),
    CategoryDefinition(CategoryId.ENERGY, "Energy"),
    CategoryDefinition(CategoryId.AREA, "Area"),
    CategoryDefinition(CategoryId.SPEED, "Speed"),
    CategoryDefinition(CategoryId.TIME, "Time"),
    CategoryDefinition(CategoryId.POWER, "Power"),
    CategoryDefinition(CategoryId.DATA, "Data"),
    CategoryDefinition(CategoryId.PRESSURE, "Pressure"),
    CategoryDefinition(CategoryId.ANGLE, "Angle"),
)

# Units for these categories come from an asynchronous collaborator
EXTERNALLY_POPULATED_CATEGORIES = frozenset({CategoryId.CURRENCY})


# ============================================================================
# Units
# ============================================================================

_SI = "use_si"
_CUSTOMARY = "use_us_customary"

UNIT_DEFINITIONS: Dict[CategoryId, List[UnitDefinition]] = {
    CategoryId.AREA: [
        UnitDefinition(UnitId.AREA_ACRE, "Acre", 9),
        UnitDefinition(UnitId.AREA_HECTARE, "Hectare", 4),
        UnitDefinition(UnitId.AREA_SQUARE_CENTIMETER, "SquareCentimeter", 2),
        UnitDefinition(
            UnitId.AREA_SQUARE_FOOT, "SquareFoot", 7, default_from=when(_CUSTOMARY), default_to=when(_SI)
        ),
        UnitDefinition(UnitId.AREA_SQUARE_INCH, "SquareInch", 6),
        UnitDefinition(UnitId.AREA_SQUARE_KILOMETER, "SquareKilometer", 5),
        UnitDefinition(
            UnitId.AREA_SQUARE_METER, "SquareMeter", 3, default_from=when(_SI), default_to=when(_CUSTOMARY)
        ),
        UnitDefinition(UnitId.AREA_SQUARE_MILE, "SquareMile", 10),
        UnitDefinition(UnitId.AREA_SQUARE_MILLIMETER, "SquareMillimeter", 1),
        UnitDefinition(UnitId.AREA_SQUARE_YARD, "SquareYard", 8),
        _whimsical(UnitId.AREA_HAND, "AreaHand", 11),
        _whimsical(UnitId.AREA_PAPER, "Paper", 12),
        _whimsical(UnitId.AREA_SOCCER_FIELD, "SoccerField", 13),
        _whimsical(UnitId.AREA_CASTLE, "Castle", 14),
        UnitDefinition(UnitId.AREA_PYEONG, "Pyeong", 15, include=when("use_pyeong")),
    ],
    CategoryId.DATA: [
        UnitDefinition(UnitId.DATA_BIT, "Bit", 1),
        UnitDefinition(UnitId.DATA_BYTE, "Byte", 2),
        UnitDefinition(UnitId.DATA_EXABITS, "Exabits", 23),
        UnitDefinition(UnitId.DATA_EXABYTES, "Exabytes", 25),
        UnitDefinition(UnitId.DATA_EXBIBITS, "Exbibits", 24),
        UnitDefinition(UnitId.DATA_EXBIBYTES, "Exbibytes", 26),
        UnitDefinition(UnitId.DATA_GIBIBITS, "Gibibits", 12),
        UnitDefinition(UnitId.DATA_GIBIBYTES, "Gibibytes", 14),
        UnitDefinition(UnitId.DATA_GIGABIT, "Gigabit", 11),
        UnitDefinition(UnitId.DATA_GIGABYTE, "Gigabyte", 13, default_from=ALWAYS),
        UnitDefinition(UnitId.DATA_KIBIBITS, "Kibibits", 4),
        UnitDefinition(UnitId.DATA_KIBIBYTES, "Kibibytes", 6),
        UnitDefinition(UnitId.DATA_KILOBIT, "Kilobit", 3),
        UnitDefinition(UnitId.DATA_KILOBYTE, "Kilobyte", 5),
        UnitDefinition(UnitId.DATA_MEBIBITS, "Mebibits", 8),
        UnitDefinition(UnitId.DATA_MEBIBYTES, "Mebibytes", 10),
        UnitDefinition(UnitId.DATA_MEGABIT, "Megabit", 7),
        UnitDefinition(UnitId.DATA_MEGABYTE, "Megabyte", 9, default_to=ALWAYS),
        UnitDefinition(UnitId.DATA_PEBIBITS, "Pebibits", 20),
        UnitDefinition(UnitId.DATA_PEBIBYTES, "Pebibytes", 22),
        UnitDefinition(UnitId.DATA_PETABIT, "Petabit", 19),
        UnitDefinition(UnitId.DATA_PETABYTE, "Petabyte", 21),
        UnitDefinition(UnitId.DATA_TEBIBITS, "Tebibits", 16),
        UnitDefinition(UnitId.DATA_TEBIBYTES, "Tebibytes", 18),
        UnitDefinition(UnitId.DATA_TERABIT, "Terabit", 15),
        UnitDefinition(UnitId.DATA_TERABYTE, "Terabyte", 17),
        UnitDefinition(UnitId.DATA_YOBIBITS, "Yobibits", 32),
        UnitDefinition(UnitId.DATA_YOBIBYTES, "Yobibytes", 34),
        UnitDefinition(UnitId.DATA_YOTTABIT, "Yottabit", 31),
        UnitDefinition(UnitId.DATA_YOTTABYTE, "Yottabyte", 33),
        UnitDefinition(UnitId.DATA_ZEBIBITS, "Zebibits", 28),
        UnitDefinition(UnitId.DATA_ZEBIBYTES, "Zebibytes", 30),
        UnitDefinition(UnitId.DATA_ZETABITS, "Zetabits", 27),
        UnitDefinition(UnitId.DATA_ZETABYTES, "Zetabytes", 29),
        # Orders 13-15 collide with Gigabyte, Gibibytes and Terabit
        _whimsical(UnitId.DATA_FLOPPY_DISK, "FloppyDisk", 13),
        _whimsical(UnitId.DATA_CD, "CD", 14),
        _whimsical(UnitId.DATA_DVD, "DVD", 15),
    ],
    CategoryId.ENERGY: [
        UnitDefinition(UnitId.ENERGY_BRITISH_THERMAL_UNIT, "BritishThermalUnit", 7),
        UnitDefinition(UnitId.ENERGY_CALORIE, "Calorie", 4),
        UnitDefinition(UnitId.ENERGY_ELECTRON_VOLT, "Electron-Volt", 1),
        UnitDefinition(UnitId.ENERGY_FOOT_POUND, "Foot-Pound", 6),
        UnitDefinition(UnitId.ENERGY_JOULE, "Joule", 2, default_from=ALWAYS),
        UnitDefinition(UnitId.ENERGY_KILOCALORIE, "Kilocalorie", 5, default_to=ALWAYS),
        UnitDefinition(UnitId.ENERGY_KILOJOULE, "Kilojoule", 3),
        _whimsical(UnitId.ENERGY_BATTERY, "Battery", 8),
        _whimsical(UnitId.ENERGY_BANANA, "Banana", 9),
        _whimsical(UnitId.ENERGY_SLICE_OF_CAKE, "SliceOfCake", 10),
    ],
    CategoryId.LENGTH: [
        UnitDefinition(
            UnitId.LENGTH_CENTIMETER, "Centimeter", 4, default_from=when(_SI), default_to=when(_CUSTOMARY)
        ),
        UnitDefinition(UnitId.LENGTH_FOOT, "Foot", 8),
        UnitDefinition(UnitId.LENGTH_INCH, "Inch", 7, default_from=when(_CUSTOMARY), default_to=when(_SI)),
        UnitDefinition(UnitId.LENGTH_KILOMETER, "Kilometer", 6),
        UnitDefinition(UnitId.LENGTH_METER, "Meter", 5),
        UnitDefinition(UnitId.LENGTH_MICRON, "Micron", 2),
        UnitDefinition(UnitId.LENGTH_MILE, "Mile", 10),
        UnitDefinition(UnitId.LENGTH_MILLIMETER, "Millimeter", 3),
        UnitDefinition(UnitId.LENGTH_NANOMETER, "Nanometer", 1),
        UnitDefinition(UnitId.LENGTH_NAUTICAL_MILE, "NauticalMile", 11),
        UnitDefinition(UnitId.LENGTH_YARD, "Yard", 9),
        _whimsical(UnitId.LENGTH_PAPERCLIP, "Paperclip", 12),
        _whimsical(UnitId.LENGTH_HAND, "Hand", 13),
        _whimsical(UnitId.LENGTH_JUMBO_JET, "JumboJet", 14),
    ],
    CategoryId.POWER: [
        UnitDefinition(UnitId.POWER_BTU_PER_MINUTE, "BTUPerMinute", 5),
        UnitDefinition(UnitId.POWER_FOOT_POUND_PER_MINUTE, "Foot-PoundPerMinute", 4),
        UnitDefinition(UnitId.POWER_HORSEPOWER, "Horsepower", 3, default_to=ALWAYS),
        UnitDefinition(
            UnitId.POWER_KILOWATT, "Kilowatt", 2, default_from=unless("use_watt_instead_of_kilowatt")
        ),
        UnitDefinition(UnitId.POWER_WATT, "Watt", 1, default_from=when("use_watt_instead_of_kilowatt")),
        _whimsical(UnitId.POWER_LIGHT_BULB, "LightBulb", 6),
        _whimsical(UnitId.POWER_HORSE, "Horse", 7),
        _whimsical(UnitId.POWER_TRAIN_ENGINE, "TrainEngine", 8),
    ],
    CategoryId.TEMPERATURE: [
        UnitDefinition(
            UnitId.TEMPERATURE_DEGREES_CELSIUS,
            "DegreesCelsius",
            1,
            default_from=unless("use_fahrenheit"),
            default_to=when("use_fahrenheit"),
        ),
        UnitDefinition(
            UnitId.TEMPERATURE_DEGREES_FAHRENHEIT,
            "DegreesFahrenheit",
            2,
            default_from=when("use_fahrenheit"),
            default_to=unless("use_fahrenheit"),
        ),
        UnitDefinition(UnitId.TEMPERATURE_KELVIN, "Kelvin", 3),
    ],
    CategoryId.TIME: [
        UnitDefinition(UnitId.TIME_DAY, "Day", 6),
        UnitDefinition(UnitId.TIME_HOUR, "Hour", 5, default_from=ALWAYS),
        UnitDefinition(UnitId.TIME_MICROSECOND, "Microsecond", 1),
        UnitDefinition(UnitId.TIME_MILLISECOND, "Millisecond", 2),
        UnitDefinition(UnitId.TIME_MINUTE, "Minute", 4, default_to=ALWAYS),
        UnitDefinition(UnitId.TIME_SECOND, "Second", 3),
        UnitDefinition(UnitId.TIME_WEEK, "Week", 7),
        UnitDefinition(UnitId.TIME_YEAR, "Year", 8),
    ],
    CategoryId.SPEED: [
        UnitDefinition(UnitId.SPEED_CENTIMETERS_PER_SECOND, "CentimetersPerSecond", 1),
        UnitDefinition(UnitId.SPEED_FEET_PER_SECOND, "FeetPerSecond", 4),
        UnitDefinition(
            UnitId.SPEED_KILOMETERS_PER_HOUR,
            "KilometersPerHour",
            3,
            default_from=when(_SI),
            default_to=when(_CUSTOMARY),
        ),
        UnitDefinition(UnitId.SPEED_KNOT, "Knot", 6),
        UnitDefinition(UnitId.SPEED_MACH, "Mach", 7),
        UnitDefinition(UnitId.SPEED_METERS_PER_SECOND, "MetersPerSecond", 2),
        UnitDefinition(
            UnitId.SPEED_MILES_PER_HOUR,
            "MilesPerHour",
            5,
            default_from=when(_CUSTOMARY),
            default_to=when(_SI),
        ),
        _whimsical(UnitId.SPEED_TURTLE, "Turtle", 8),
        _whimsical(UnitId.SPEED_HORSE, "SpeedHorse", 9),
        _whimsical(UnitId.SPEED_JET, "Jet", 10),
    ],
    CategoryId.VOLUME: [
        UnitDefinition(UnitId.VOLUME_CUBIC_CENTIMETER, "CubicCentimeter", 2),
        UnitDefinition(UnitId.VOLUME_CUBIC_FOOT, "CubicFoot", 13),
        UnitDefinition(UnitId.VOLUME_CUBIC_INCH, "CubicInch", 12),
        UnitDefinition(UnitId.VOLUME_CUBIC_METER, "CubicMeter", 4),
        UnitDefinition(UnitId.VOLUME_CUBIC_YARD, "CubicYard", 14),
        UnitDefinition(UnitId.VOLUME_CUP_US, "CupUS", 8),
        UnitDefinition(UnitId.VOLUME_FLUID_OUNCE_UK, "FluidOunceUK", 17),
        UnitDefinition(UnitId.VOLUME_FLUID_OUNCE_US, "FluidOunceUS", 7),
        UnitDefinition(UnitId.VOLUME_GALLON_UK, "GallonUK", 20),
        UnitDefinition(UnitId.VOLUME_GALLON_US, "GallonUS", 11),
        UnitDefinition(UnitId.VOLUME_LITER, "Liter", 3),
        UnitDefinition(
            UnitId.VOLUME_MILLILITER, "Milliliter", 1, default_from=when(_SI), default_to=when(_CUSTOMARY)
        ),
        UnitDefinition(UnitId.VOLUME_PINT_UK, "PintUK", 18),
        UnitDefinition(UnitId.VOLUME_PINT_US, "PintUS", 9),
        UnitDefinition(UnitId.VOLUME_TABLESPOON_US, "TablespoonUS", 6),
        UnitDefinition(
            UnitId.VOLUME_TEASPOON_US,
            "TeaspoonUS",
            5,
            default_from=FlagRule(all_of=(_CUSTOMARY,), none_of=("use_uk_spoon_default",)),
            default_to=when(_SI),
        ),
        UnitDefinition(UnitId.VOLUME_QUART_UK, "QuartUK", 19),
        UnitDefinition(UnitId.VOLUME_QUART_US, "QuartUS", 10),
        UnitDefinition(
            UnitId.VOLUME_TEASPOON_UK,
            "TeaspoonUK",
            15,
            default_from=when(_CUSTOMARY, "use_uk_spoon_default"),
        ),
        UnitDefinition(UnitId.VOLUME_TABLESPOON_UK, "TablespoonUK", 16),
        _whimsical(UnitId.VOLUME_COFFEE_CUP, "CoffeeCup", 22),
        _whimsical(UnitId.VOLUME_BATHTUB, "Bathtub", 23),
        _whimsical(UnitId.VOLUME_SWIMMING_POOL, "SwimmingPool", 24),
    ],
    CategoryId.WEIGHT: [
        UnitDefinition(UnitId.WEIGHT_CARAT, "Carat", 1),
        UnitDefinition(UnitId.WEIGHT_CENTIGRAM, "Centigram", 3),
        UnitDefinition(UnitId.WEIGHT_DECIGRAM, "Decigram", 4),
        UnitDefinition(UnitId.WEIGHT_DECAGRAM, "Decagram", 6),
        UnitDefinition(UnitId.WEIGHT_GRAM, "Gram", 5),
        UnitDefinition(UnitId.WEIGHT_HECTOGRAM, "Hectogram", 7),
        UnitDefinition(
            UnitId.WEIGHT_KILOGRAM, "Kilogram", 8, default_from=when(_SI), default_to=when(_CUSTOMARY)
        ),
        UnitDefinition(UnitId.WEIGHT_LONG_TON, "LongTon", 14),
        UnitDefinition(UnitId.WEIGHT_MILLIGRAM, "Milligram", 2),
        UnitDefinition(UnitId.WEIGHT_OUNCE, "Ounce", 10),
        UnitDefinition(UnitId.WEIGHT_POUND, "Pound", 11, default_from=when(_CUSTOMARY), default_to=when(_SI)),
        UnitDefinition(UnitId.WEIGHT_SHORT_TON, "ShortTon", 13),
        UnitDefinition(UnitId.WEIGHT_STONE, "Stone", 12),
        UnitDefinition(UnitId.WEIGHT_TONNE, "Tonne", 9),
        _whimsical(UnitId.WEIGHT_SNOWFLAKE, "Snowflake", 15),
        _whimsical(UnitId.WEIGHT_SOCCER_BALL, "SoccerBall", 16),
        _whimsical(UnitId.WEIGHT_ELEPHANT, "Elephant", 17),
        _whimsical(UnitId.WEIGHT_WHALE, "Whale", 18),
    ],
    CategoryId.PRESSURE: [
        UnitDefinition(UnitId.PRESSURE_ATMOSPHERE, "Atmosphere", 1, default_from=ALWAYS),
        UnitDefinition(UnitId.PRESSURE_BAR, "Bar", 2, default_to=ALWAYS),
        UnitDefinition(UnitId.PRESSURE_KILOPASCAL, "KiloPascal", 3),
        UnitDefinition(UnitId.PRESSURE_MILLIMETER_OF_MERCURY, "MillimeterOfMercury", 4),
        UnitDefinition(UnitId.PRESSURE_PASCAL, "Pascal", 5),
        UnitDefinition(UnitId.PRESSURE_PSI, "PSI", 6),
    ],
    CategoryId.ANGLE: [
        UnitDefinition(UnitId.ANGLE_DEGREE, "Degree", 1, default_from=ALWAYS),
        UnitDefinition(UnitId.ANGLE_RADIAN, "Radian", 2, default_to=ALWAYS),
        UnitDefinition(UnitId.ANGLE_GRADIAN, "Gradian", 3),
    ],
}
