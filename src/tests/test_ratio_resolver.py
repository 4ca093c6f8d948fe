"""
Tests for the conversion ratio resolver.

Tests cover:
- Linear ratios from factors, exactly
- Affine tables copied from explicit conversions
- Skipping data for units that were not built
- Configuration invariant violations
- Model selection per category
"""

from fractions import Fraction

import pytest

from unit_catalog.models.enums import CategoryId, UnitId
from unit_catalog.services.dto import ConversionData, ExplicitConversion, Unit
from unit_catalog.services.exceptions import ConfigurationInvariantError
from unit_catalog.services.ratio_resolver import (
    AffineCategory,
    LinearCategory,
    group_explicit_conversions,
    resolve_all_ratios,
    resolve_category_ratios,
    select_category_models,
)
from unit_catalog.utils.conversion_factors import EXPLICIT_CONVERSIONS, LINEAR_FACTORS


def make_unit(unit_id, category_id, order=1):
    return Unit(
        id=int(unit_id),
        category_id=int(category_id),
        name=f"Unit {int(unit_id)}",
        abbreviation=str(int(unit_id)),
        display_order=order,
    )


@pytest.fixture
def length_units():
    return [
        make_unit(UnitId.LENGTH_METER, CategoryId.LENGTH, 1),
        make_unit(UnitId.LENGTH_CENTIMETER, CategoryId.LENGTH, 2),
        make_unit(UnitId.LENGTH_INCH, CategoryId.LENGTH, 3),
    ]


@pytest.fixture
def length_model():
    return LinearCategory(
        CategoryId.LENGTH,
        {
            UnitId.LENGTH_METER: Fraction(1),
            UnitId.LENGTH_CENTIMETER: Fraction(1, 100),
            UnitId.LENGTH_INCH: Fraction(254, 10000),
            # Not built in these tests
            UnitId.LENGTH_MILE: Fraction(1609344, 1000),
        },
    )


@pytest.fixture
def temperature_units():
    return [
        make_unit(UnitId.TEMPERATURE_DEGREES_CELSIUS, CategoryId.TEMPERATURE, 1),
        make_unit(UnitId.TEMPERATURE_DEGREES_FAHRENHEIT, CategoryId.TEMPERATURE, 2),
        make_unit(UnitId.TEMPERATURE_KELVIN, CategoryId.TEMPERATURE, 3),
    ]


@pytest.fixture
def temperature_model():
    grouped = group_explicit_conversions(EXPLICIT_CONVERSIONS)
    return AffineCategory(CategoryId.TEMPERATURE, grouped[CategoryId.TEMPERATURE])


class TestLinearResolution:
    """Tests for linear categories."""

    def test_ratio_is_factor_quotient(self, length_units, length_model):
        meter, centimeter, inch = length_units
        table = resolve_category_ratios(length_units, length_model)

        assert table[meter][centimeter].ratio == Fraction(100)
        assert table[centimeter][meter].ratio == Fraction(1, 100)
        assert table[inch][centimeter].ratio == Fraction(254, 100)

    def test_offsets_are_zero(self, length_units, length_model):
        table = resolve_category_ratios(length_units, length_model)
        for conversions in table.values():
            for data in conversions.values():
                assert data.offset == 0
                assert data.offset_first is False

    def test_identity_entries(self, length_units, length_model):
        table = resolve_category_ratios(length_units, length_model)
        for unit in length_units:
            assert table[unit][unit] == ConversionData(Fraction(1), Fraction(0))

    def test_reciprocal_product_is_one(self, length_units, length_model):
        table = resolve_category_ratios(length_units, length_model)
        for u in length_units:
            for v in length_units:
                assert table[u][v].ratio * table[v][u].ratio == 1

    def test_unbuilt_units_are_skipped(self, length_units, length_model):
        table = resolve_category_ratios(length_units, length_model)
        assert set(table) == set(length_units)
        for conversions in table.values():
            assert set(conversions) == set(length_units)

    def test_targets_follow_display_order(self, length_units, length_model):
        table = resolve_category_ratios(length_units, length_model)
        assert list(table[length_units[0]]) == length_units

    def test_missing_factor_raises(self, length_units):
        model = LinearCategory(CategoryId.LENGTH, {UnitId.LENGTH_METER: Fraction(1)})
        with pytest.raises(ConfigurationInvariantError) as exc_info:
            resolve_category_ratios(length_units, model)
        assert exc_info.value.category_id == CategoryId.LENGTH
        assert "no linear factor" in str(exc_info.value)

    @pytest.mark.parametrize("bad_factor", [Fraction(0), Fraction(-1, 2)])
    def test_non_positive_factor_raises(self, length_units, length_model, bad_factor):
        factors = dict(length_model.factors)
        factors[UnitId.LENGTH_INCH] = bad_factor
        with pytest.raises(ConfigurationInvariantError, match="non-positive factor"):
            resolve_category_ratios(length_units, LinearCategory(CategoryId.LENGTH, factors))

    def test_bad_factor_of_unbuilt_unit_is_ignored(self, length_units, length_model):
        factors = dict(length_model.factors)
        factors[UnitId.LENGTH_MILE] = Fraction(0)
        table = resolve_category_ratios(length_units, LinearCategory(CategoryId.LENGTH, factors))
        assert len(table) == 3


class TestAffineResolution:
    """Tests for explicit (temperature) categories."""

    def test_entries_copied_verbatim(self, temperature_units, temperature_model):
        celsius, fahrenheit, kelvin = temperature_units
        table = resolve_category_ratios(temperature_units, temperature_model)

        assert table[celsius][fahrenheit] == ConversionData(Fraction(9, 5), Fraction(32), False)
        assert table[fahrenheit][celsius] == ConversionData(Fraction(5, 9), Fraction(-32), True)
        assert table[kelvin][celsius] == ConversionData(Fraction(1), Fraction(-27315, 100), True)

    def test_table_is_closed(self, temperature_units, temperature_model):
        table = resolve_category_ratios(temperature_units, temperature_model)
        for unit in temperature_units:
            assert set(table[unit]) == set(temperature_units)
            assert table[unit][unit].is_identity

    def test_missing_pair_raises(self, temperature_units):
        partial = [c for c in EXPLICIT_CONVERSIONS if not (
            c.source_unit_id == UnitId.TEMPERATURE_KELVIN
            and c.target_unit_id == UnitId.TEMPERATURE_KELVIN
        )]
        grouped = group_explicit_conversions(partial)
        model = AffineCategory(CategoryId.TEMPERATURE, grouped[CategoryId.TEMPERATURE])

        with pytest.raises(ConfigurationInvariantError, match="do not cover"):
            resolve_category_ratios(temperature_units, model)

    def test_unit_without_entries_raises(self, temperature_units):
        partial = [c for c in EXPLICIT_CONVERSIONS if c.source_unit_id != UnitId.TEMPERATURE_KELVIN]
        grouped = group_explicit_conversions(partial)
        model = AffineCategory(CategoryId.TEMPERATURE, grouped[CategoryId.TEMPERATURE])

        with pytest.raises(ConfigurationInvariantError, match="no explicit conversions"):
            resolve_category_ratios(temperature_units, model)

    def test_targets_for_unbuilt_units_are_skipped(self, temperature_units, temperature_model):
        celsius, fahrenheit, _ = temperature_units
        table = resolve_category_ratios([celsius, fahrenheit], temperature_model)
        assert set(table[celsius]) == {celsius, fahrenheit}


class TestModelSelection:
    """Tests for select_category_models() and resolve_all_ratios()."""

    def test_temperature_is_affine_others_linear(self):
        models = select_category_models(
            [CategoryId.TEMPERATURE, CategoryId.LENGTH], LINEAR_FACTORS, EXPLICIT_CONVERSIONS
        )
        assert isinstance(models[CategoryId.TEMPERATURE], AffineCategory)
        assert isinstance(models[CategoryId.LENGTH], LinearCategory)

    def test_category_without_data_is_left_out(self):
        models = select_category_models([CategoryId.CURRENCY], LINEAR_FACTORS, EXPLICIT_CONVERSIONS)
        assert models == {}

    def test_later_explicit_entry_wins(self):
        first = ExplicitConversion(7, 701, 702, Fraction(1))
        second = ExplicitConversion(7, 701, 702, Fraction(2))
        grouped = group_explicit_conversions([first, second])
        assert grouped[7][701][702].ratio == 2

    def test_resolve_all_skips_empty_categories(self, length_units, temperature_units):
        units_by_category = {
            CategoryId.CURRENCY: [],
            CategoryId.LENGTH: length_units,
            CategoryId.TEMPERATURE: temperature_units,
        }
        ratios = resolve_all_ratios(units_by_category, LINEAR_FACTORS, EXPLICIT_CONVERSIONS)
        assert set(ratios) == set(length_units) | set(temperature_units)

    def test_resolve_all_requires_data_for_populated_category(self):
        units_by_category = {CategoryId.CURRENCY: [make_unit(1601, CategoryId.CURRENCY)]}
        with pytest.raises(ConfigurationInvariantError, match="no conversion factors"):
            resolve_all_ratios(units_by_category, LINEAR_FACTORS, EXPLICIT_CONVERSIONS)

    def test_resolution_is_deterministic(self, length_units, temperature_units):
        units_by_category = {CategoryId.LENGTH: length_units, CategoryId.TEMPERATURE: temperature_units}
        first = resolve_all_ratios(units_by_category, LINEAR_FACTORS, EXPLICIT_CONVERSIONS)
        second = resolve_all_ratios(units_by_category, LINEAR_FACTORS, EXPLICIT_CONVERSIONS)
        assert first == second
