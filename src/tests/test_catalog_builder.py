"""
Tests for the unit catalog builder.

Tests cover:
- Category order and negative-value support
- Region-conditioned unit inclusion and default flags
- Stable display-order sorting and duplicate-order warnings
- Currency registered without units
- Localization failures
"""

import logging

import pytest

from unit_catalog.models.enums import CategoryId, UnitId
from unit_catalog.services.catalog_builder import (
    build_categories,
    build_category_units,
    build_units,
)
from unit_catalog.services.exceptions import LocalizationError
from unit_catalog.services.localization import DictStringProvider
from unit_catalog.utils.region_policy import RegionPolicy, when
from unit_catalog.utils.unit_definitions import (
    CATEGORY_DEFINITIONS,
    UNIT_DEFINITIONS,
    UnitDefinition,
)
from unit_catalog.utils.unit_strings import DEFAULT_STRINGS


EXPECTED_CATEGORY_ORDER = [
    CategoryId.CURRENCY,
    CategoryId.VOLUME,
    CategoryId.LENGTH,
    CategoryId.WEIGHT,
    CategoryId.TEMPERATURE,
    CategoryId.ENERGY,
    CategoryId.AREA,
    CategoryId.SPEED,
    CategoryId.TIME,
    CategoryId.POWER,
    CategoryId.DATA,
    CategoryId.PRESSURE,
    CategoryId.ANGLE,
]


def _ids(units):
    return [unit.id for unit in units]


class TestBuildCategories:
    """Tests for build_categories()."""

    def test_thirteen_categories_in_navigation_order(self, strings):
        categories = build_categories(strings)
        assert [c.id for c in categories] == EXPECTED_CATEGORY_ORDER

    def test_only_temperature_supports_negative(self, strings):
        categories = build_categories(strings)
        negative = [c.id for c in categories if c.supports_negative]
        assert negative == [CategoryId.TEMPERATURE]

    def test_names_are_localized(self, strings):
        names = {c.id: c.name for c in build_categories(strings)}
        assert names[CategoryId.LENGTH] == "Length"
        assert names[CategoryId.WEIGHT] == "Weight and mass"

    def test_missing_category_string_raises(self):
        provider = DictStringProvider({})
        with pytest.raises(LocalizationError) as exc_info:
            build_categories(provider)
        assert exc_info.value.string_id == "CategoryName_Currency"


class TestBuildUnits:
    """Tests for build_units()."""

    def test_every_category_is_present(self, strings):
        units = build_units(RegionPolicy.for_region("US"), strings)
        assert set(units) == {int(definition.category_id) for definition in CATEGORY_DEFINITIONS}

    def test_currency_has_no_units(self, strings):
        units = build_units(RegionPolicy.for_region("US"), strings)
        assert units[CategoryId.CURRENCY] == []

    def test_units_sorted_by_display_order(self, strings):
        units = build_units(RegionPolicy.for_region("FR"), strings)
        for category_units in units.values():
            orders = [unit.display_order for unit in category_units]
            assert orders == sorted(orders)

    def test_temperature_order(self, strings):
        units = build_units(RegionPolicy.for_region("FR"), strings)
        assert _ids(units[CategoryId.TEMPERATURE]) == [
            UnitId.TEMPERATURE_DEGREES_CELSIUS,
            UnitId.TEMPERATURE_DEGREES_FAHRENHEIT,
            UnitId.TEMPERATURE_KELVIN,
        ]

    def test_duplicate_orders_keep_declaration_order(self, strings):
        """Gigabyte, Gibibytes and Terabit are declared before the storage media."""
        data_ids = _ids(build_units(RegionPolicy.for_region("US"), strings)[CategoryId.DATA])

        assert data_ids.index(UnitId.DATA_GIGABYTE) + 1 == data_ids.index(UnitId.DATA_FLOPPY_DISK)
        assert data_ids.index(UnitId.DATA_GIBIBYTES) + 1 == data_ids.index(UnitId.DATA_CD)
        assert data_ids.index(UnitId.DATA_TERABIT) + 1 == data_ids.index(UnitId.DATA_DVD)

    def test_duplicate_orders_are_logged(self, strings, caplog):
        with caplog.at_level(logging.WARNING, logger="unit_catalog.services"):
            build_units(RegionPolicy.for_region("US"), strings)

        warnings = [r for r in caplog.records if getattr(r, "outcome", None) == "duplicate_display_order"]
        assert len(warnings) == 1
        assert warnings[0].category_id == CategoryId.DATA
        assert warnings[0].display_orders == [13, 14, 15]

    def test_pyeong_only_in_korea(self, strings):
        kr = build_units(RegionPolicy.for_region("KR"), strings)
        de = build_units(RegionPolicy.for_region("DE"), strings)
        assert UnitId.AREA_PYEONG in _ids(kr[CategoryId.AREA])
        assert UnitId.AREA_PYEONG not in _ids(de[CategoryId.AREA])

    def test_unit_count_matches_definitions(self, strings):
        units = build_units(RegionPolicy.for_region("FR"), strings)
        assert len(units[CategoryId.LENGTH]) == len(UNIT_DEFINITIONS[CategoryId.LENGTH])
        # Pyeong is excluded outside Korea
        assert len(units[CategoryId.AREA]) == len(UNIT_DEFINITIONS[CategoryId.AREA]) - 1

    def test_whimsical_units_flagged(self, strings):
        units = build_units(RegionPolicy.for_region("US"), strings)
        whimsical = [u.id for u in units[CategoryId.WEIGHT] if u.is_whimsical]
        assert whimsical == [
            UnitId.WEIGHT_SNOWFLAKE,
            UnitId.WEIGHT_SOCCER_BALL,
            UnitId.WEIGHT_ELEPHANT,
            UnitId.WEIGHT_WHALE,
        ]

    def test_unit_strings_resolved(self, strings):
        units = build_units(RegionPolicy.for_region("US"), strings)
        celsius = units[CategoryId.TEMPERATURE][0]
        assert celsius.name == "Celsius"
        assert celsius.abbreviation == "°C"
        assert celsius.category_id == CategoryId.TEMPERATURE

    def test_missing_unit_string_raises(self):
        strings = dict(DEFAULT_STRINGS)
        del strings["UnitAbbreviation_Kelvin"]
        with pytest.raises(LocalizationError) as exc_info:
            build_units(RegionPolicy.for_region("US"), DictStringProvider(strings))
        assert exc_info.value.string_id == "UnitAbbreviation_Kelvin"

    def test_fallback_provider_fills_gaps(self):
        strings = dict(DEFAULT_STRINGS)
        del strings["UnitName_Kelvin"]
        provider = DictStringProvider(strings, fallback=DictStringProvider({"UnitName_Kelvin": "Kelvins"}))
        units = build_units(RegionPolicy.for_region("US"), provider)
        assert units[CategoryId.TEMPERATURE][2].name == "Kelvins"


class TestRegionalDefaults:
    """Default-from and default-to flags evaluated per region."""

    @staticmethod
    def _defaults(units, attr):
        return [u.id for u in units if getattr(u, attr)]

    def test_us_temperature_defaults(self, strings):
        temperature = build_units(RegionPolicy.for_region("US"), strings)[CategoryId.TEMPERATURE]
        assert self._defaults(temperature, "is_default_from") == [UnitId.TEMPERATURE_DEGREES_FAHRENHEIT]
        assert self._defaults(temperature, "is_default_to") == [UnitId.TEMPERATURE_DEGREES_CELSIUS]

    def test_france_temperature_defaults(self, strings):
        temperature = build_units(RegionPolicy.for_region("FR"), strings)[CategoryId.TEMPERATURE]
        assert self._defaults(temperature, "is_default_from") == [UnitId.TEMPERATURE_DEGREES_CELSIUS]
        assert self._defaults(temperature, "is_default_to") == [UnitId.TEMPERATURE_DEGREES_FAHRENHEIT]

    def test_us_length_and_speed_defaults(self, strings):
        units = build_units(RegionPolicy.for_region("US"), strings)
        assert self._defaults(units[CategoryId.LENGTH], "is_default_from") == [UnitId.LENGTH_INCH]
        assert self._defaults(units[CategoryId.SPEED], "is_default_from") == [UnitId.SPEED_MILES_PER_HOUR]

    def test_france_metric_defaults(self, strings):
        units = build_units(RegionPolicy.for_region("FR"), strings)
        assert self._defaults(units[CategoryId.LENGTH], "is_default_from") == [UnitId.LENGTH_CENTIMETER]
        assert self._defaults(units[CategoryId.SPEED], "is_default_from") == [
            UnitId.SPEED_KILOMETERS_PER_HOUR
        ]
        assert self._defaults(units[CategoryId.WEIGHT], "is_default_from") == [UnitId.WEIGHT_KILOGRAM]

    def test_gb_power_defaults(self, strings):
        power = build_units(RegionPolicy.for_region("GB"), strings)[CategoryId.POWER]
        assert self._defaults(power, "is_default_from") == [UnitId.POWER_WATT]
        assert self._defaults(power, "is_default_to") == [UnitId.POWER_HORSEPOWER]

    def test_other_regions_power_defaults(self, strings):
        power = build_units(RegionPolicy.for_region("FR"), strings)[CategoryId.POWER]
        assert self._defaults(power, "is_default_from") == [UnitId.POWER_KILOWATT]

    def test_fixed_defaults_ignore_region(self, strings):
        for region_code in ("US", "FR", "GB", "KR"):
            units = build_units(RegionPolicy.for_region(region_code), strings)
            assert self._defaults(units[CategoryId.DATA], "is_default_from") == [UnitId.DATA_GIGABYTE]
            assert self._defaults(units[CategoryId.DATA], "is_default_to") == [UnitId.DATA_MEGABYTE]
            assert self._defaults(units[CategoryId.TIME], "is_default_from") == [UnitId.TIME_HOUR]
            assert self._defaults(units[CategoryId.TIME], "is_default_to") == [UnitId.TIME_MINUTE]

    def test_us_volume_defaults(self, strings):
        volume = build_units(RegionPolicy.for_region("US"), strings)[CategoryId.VOLUME]
        assert self._defaults(volume, "is_default_from") == [UnitId.VOLUME_TEASPOON_US]
        assert self._defaults(volume, "is_default_to") == [UnitId.VOLUME_MILLILITER]


class TestBuildCategoryUnits:
    """Tests for build_category_units() with small fixture tables."""

    def test_optional_unit_excluded_by_rule(self, strings):
        definitions = [
            UnitDefinition(UnitId.AREA_SQUARE_METER, "SquareMeter", 1),
            UnitDefinition(UnitId.AREA_PYEONG, "Pyeong", 2, include=when("use_pyeong")),
        ]
        units = build_category_units(CategoryId.AREA, definitions, RegionPolicy.for_region("JP"), strings)
        assert _ids(units) == [UnitId.AREA_SQUARE_METER]

    def test_ties_keep_declaration_order(self, strings):
        definitions = [
            UnitDefinition(UnitId.LENGTH_METER, "Meter", 2),
            UnitDefinition(UnitId.LENGTH_FOOT, "Foot", 1),
            UnitDefinition(UnitId.LENGTH_INCH, "Inch", 1),
        ]
        units = build_category_units(CategoryId.LENGTH, definitions, RegionPolicy.for_region("US"), strings)
        assert _ids(units) == [UnitId.LENGTH_FOOT, UnitId.LENGTH_INCH, UnitId.LENGTH_METER]
