"""
Default English (en-US) display strings for the unit catalog.

Keys follow the resource naming used by the catalog definitions:
- CategoryName_<Key>
- UnitName_<Key>
- UnitAbbreviation_<Key>

Hosting applications with their own localization supply a different
StringProvider; these strings are the fallback used by the CLI and tests.
"""

from typing import Dict


CATEGORY_NAMES: Dict[str, str] = {
    "Currency": "Currency",
    "Volume": "Volume",
    "Length": "Length",
    "Weight": "Weight and mass",
    "Temperature": "Temperature",
    "Energy": "Energy",
    "Area": "Area",
    "Speed": "Speed",
    "Time": "Time",
    "Power": "Power",
    "Data": "Data",
    "Pressure": "Pressure",
    "Angle": "Angle",
}

# Unit key -> (name, abbreviation)
UNIT_NAMES: Dict[str, tuple] = {
    # Area
    "Acre": ("Acres", "ac"),
    "Hectare": ("Hectares", "ha"),
    "SquareCentimeter": ("Square centimeters", "cm²"),
    "SquareFoot": ("Square feet", "ft²"),
    "SquareInch": ("Square inches", "in²"),
    "SquareKilometer": ("Square kilometers", "km²"),
    "SquareMeter": ("Square meters", "m²"),
    "SquareMile": ("Square miles", "mi²"),
    "SquareMillimeter": ("Square millimeters", "mm²"),
    "SquareYard": ("Square yards", "yd²"),
    "AreaHand": ("Hands", "hands"),
    "Paper": ("Sheets of paper", "sheets"),
    "SoccerField": ("Soccer fields", "fields"),
    "Castle": ("Castles", "castles"),
    "Pyeong": ("Pyeong", "pyeong"),
    # Data
    "Bit": ("Bits", "b"),
    "Byte": ("Bytes", "B"),
    "Exabits": ("Exabits", "Eb"),
    "Exabytes": ("Exabytes", "EB"),
    "Exbibits": ("Exbibits", "Eib"),
    "Exbibytes": ("Exbibytes", "EiB"),
    "Gibibits": ("Gibibits", "Gib"),
    "Gibibytes": ("Gibibytes", "GiB"),
    "Gigabit": ("Gigabits", "Gb"),
    "Gigabyte": ("Gigabytes", "GB"),
    "Kibibits": ("Kibibits", "Kib"),
    "Kibibytes": ("Kibibytes", "KiB"),
    "Kilobit": ("Kilobits", "Kb"),
    "Kilobyte": ("Kilobytes", "KB"),
    "Mebibits": ("Mebibits", "Mib"),
    "Mebibytes": ("Mebibytes", "MiB"),
    "Megabit": ("Megabits", "Mb"),
    "Megabyte": ("Megabytes", "MB"),
    "Pebibits": ("Pebibits", "Pib"),
    "Pebibytes": ("Pebibytes", "PiB"),
    "Petabit": ("Petabits", "Pb"),
    "Petabyte": ("Petabytes", "PB"),
    "Tebibits": ("Tebibits", "Tib"),
    "Tebibytes": ("Tebibytes", "TiB"),
    "Terabit": ("Terabits", "Tb"),
    "Terabyte": ("Terabytes", "TB"),
    "Yobibits": ("Yobibits", "Yib"),
    "Yobibytes": ("Yobibytes", "YiB"),
    "Yottabit": ("Yottabits", "Yb"),
    "Yottabyte": ("Yottabytes", "YB"),
    "Zebibits": ("Zebibits", "Zib"),
    "Zebibytes": ("Zebibytes", "ZiB"),
    "Zetabits": ("Zettabits", "Zb"),
    "Zetabytes": ("Zettabytes", "ZB"),
    "FloppyDisk": ("Floppy disks", "floppy disks"),
    "CD": ("CDs", "CDs"),
    "DVD": ("DVDs", "DVDs"),
    # Energy
    "BritishThermalUnit": ("British thermal units", "BTU"),
    "Calorie": ("Thermal calories", "cal"),
    "Electron-Volt": ("Electron volts", "eV"),
    "Foot-Pound": ("Foot-pounds", "ft•lb"),
    "Joule": ("Joules", "J"),
    "Kilocalorie": ("Food calories", "kcal"),
    "Kilojoule": ("Kilojoules", "kJ"),
    "Battery": ("AA batteries", "AA batteries"),
    "Banana": ("Bananas", "bananas"),
    "SliceOfCake": ("Slices of cake", "slices of cake"),
    # Length
    "Centimeter": ("Centimeters", "cm"),
    "Foot": ("Feet", "ft"),
    "Inch": ("Inches", "in"),
    "Kilometer": ("Kilometers", "km"),
    "Meter": ("Meters", "m"),
    "Micron": ("Microns", "µm"),
    "Mile": ("Miles", "mi"),
    "Millimeter": ("Millimeters", "mm"),
    "Nanometer": ("Nanometers", "nm"),
    "NauticalMile": ("Nautical miles", "NM"),
    "Yard": ("Yards", "yd"),
    "Paperclip": ("Paperclips", "paperclips"),
    "Hand": ("Hands", "hands"),
    "JumboJet": ("Jumbo jets", "jumbo jets"),
    # Power
    "BTUPerMinute": ("BTUs/minute", "BTU/min"),
    "Foot-PoundPerMinute": ("Foot-pounds/minute", "ft•lb/min"),
    "Horsepower": ("Horsepower (US)", "hp"),
    "Kilowatt": ("Kilowatts", "kW"),
    "Watt": ("Watts", "W"),
    "LightBulb": ("Light bulbs", "light bulbs"),
    "Horse": ("Horses", "horses"),
    "TrainEngine": ("Train engines", "train engines"),
    # Temperature
    "DegreesCelsius": ("Celsius", "°C"),
    "DegreesFahrenheit": ("Fahrenheit", "°F"),
    "Kelvin": ("Kelvin", "K"),
    # Time
    "Day": ("Days", "d"),
    "Hour": ("Hours", "h"),
    "Microsecond": ("Microseconds", "µs"),
    "Millisecond": ("Milliseconds", "ms"),
    "Minute": ("Minutes", "min"),
    "Second": ("Seconds", "s"),
    "Week": ("Weeks", "wk"),
    "Year": ("Years", "yr"),
    # Speed
    "CentimetersPerSecond": ("Centimeters per second", "cm/s"),
    "FeetPerSecond": ("Feet per second", "ft/s"),
    "KilometersPerHour": ("Kilometers per hour", "km/h"),
    "Knot": ("Knots", "kn"),
    "Mach": ("Mach", "M"),
    "MetersPerSecond": ("Meters per second", "m/s"),
    "MilesPerHour": ("Miles per hour", "mph"),
    "Turtle": ("Turtles", "turtles"),
    "SpeedHorse": ("Horses", "horses"),
    "Jet": ("Jets", "jets"),
    # Volume
    "CubicCentimeter": ("Cubic centimeters", "cm³"),
    "CubicFoot": ("Cubic feet", "ft³"),
    "CubicInch": ("Cubic inches", "in³"),
    "CubicMeter": ("Cubic meters", "m³"),
    "CubicYard": ("Cubic yards", "yd³"),
    "CupUS": ("Cups (US)", "cup (US)"),
    "FluidOunceUK": ("Fluid ounces (UK)", "fl oz (UK)"),
    "FluidOunceUS": ("Fluid ounces (US)", "fl oz (US)"),
    "GallonUK": ("Gallons (UK)", "gal (UK)"),
    "GallonUS": ("Gallons (US)", "gal (US)"),
    "Liter": ("Liters", "L"),
    "Milliliter": ("Milliliters", "mL"),
    "PintUK": ("Pints (UK)", "pt (UK)"),
    "PintUS": ("Pints (US)", "pt (US)"),
    "TablespoonUS": ("Tablespoons (US)", "tbsp (US)"),
    "TeaspoonUS": ("Teaspoons (US)", "tsp (US)"),
    "QuartUK": ("Quarts (UK)", "qt (UK)"),
    "QuartUS": ("Quarts (US)", "qt (US)"),
    "TeaspoonUK": ("Teaspoons (UK)", "tsp (UK)"),
    "TablespoonUK": ("Tablespoons (UK)", "tbsp (UK)"),
    "CoffeeCup": ("Coffee cups", "coffee cups"),
    "Bathtub": ("Bathtubs", "bathtubs"),
    "SwimmingPool": ("Swimming pools", "swimming pools"),
    # Weight
    "Carat": ("Carats", "ct"),
    "Centigram": ("Centigrams", "cg"),
    "Decigram": ("Decigrams", "dg"),
    "Decagram": ("Decagrams", "dag"),
    "Gram": ("Grams", "g"),
    "Hectogram": ("Hectograms", "hg"),
    "Kilogram": ("Kilograms", "kg"),
    "LongTon": ("Long tons (UK)", "ton (UK)"),
    "Milligram": ("Milligrams", "mg"),
    "Ounce": ("Ounces", "oz"),
    "Pound": ("Pounds", "lb"),
    "ShortTon": ("Short tons (US)", "ton (US)"),
    "Stone": ("Stone", "st"),
    "Tonne": ("Metric tonnes", "t"),
    "Snowflake": ("Snowflakes", "snowflakes"),
    "SoccerBall": ("Soccer balls", "soccer balls"),
    "Elephant": ("Elephants", "elephants"),
    "Whale": ("Whales", "whales"),
    # Pressure
    "Atmosphere": ("Atmospheres", "atm"),
    "Bar": ("Bars", "bar"),
    "KiloPascal": ("Kilopascals", "kPa"),
    "MillimeterOfMercury": ("Millimeters of mercury", "mmHg"),
    "Pascal": ("Pascals", "Pa"),
    "PSI": ("Pounds per square inch", "psi"),
    # Angle
    "Degree": ("Degrees", "deg"),
    "Radian": ("Radians", "rad"),
    "Gradian": ("Gradians", "grad"),
}


def build_default_strings() -> Dict[str, str]:
    """
    Flatten the English tables into string-id -> text form.

    Returns:
        Dictionary keyed by full string id (e.g. "UnitName_Acre")
    """
    strings = {f"CategoryName_{key}": name for key, name in CATEGORY_NAMES.items()}
    for key, (name, abbreviation) in UNIT_NAMES.items():
        strings[f"UnitName_{key}"] = name
        strings[f"UnitAbbreviation_{key}"] = abbreviation
    return strings


DEFAULT_STRINGS: Dict[str, str] = build_default_strings()
