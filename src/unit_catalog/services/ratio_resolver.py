"""Conversion Ratio Resolver - pairwise conversion tables for built units.

Each category converts either linearly or affinely:

- LinearCategory: every unit has a scale factor relative to the category base
  unit, and ratio(u -> v) = factor(u) / factor(v). Offsets are always zero.
- AffineCategory: every ordered pair of units has an explicit ConversionData
  (ratio, offset, offset order). Used for temperature, where scales do not
  share a zero point.

The model of a category is chosen once per build by select_category_models().
A category with explicit conversions is affine; the explicit table then
governs every pair of its units and is never mixed with derived ratios.

Factors and explicit targets for units that were not built (optional units
excluded by the region) are skipped. Gaps among the built units are
configuration errors and raise ConfigurationInvariantError.
"""

from dataclasses import dataclass
from fractions import Fraction
from typing import Dict, Iterable, Mapping, Sequence, Union

from .dto import ConversionData, ExplicitConversion, Unit
from .exceptions import ConfigurationInvariantError


# ============================================================================
# Category Models
# ============================================================================


@dataclass(frozen=True)
class LinearCategory:
    """Category whose units scale against a common base unit.

    Attributes:
        category_id: Category the factors belong to
        factors: Unit id -> factor relative to the base unit
    """

    category_id: int
    factors: Mapping[int, Fraction]


@dataclass(frozen=True)
class AffineCategory:
    """Category whose unit pairs are listed explicitly.

    Attributes:
        category_id: Category the pairs belong to
        pairs: Source unit id -> target unit id -> ConversionData
    """

    category_id: int
    pairs: Mapping[int, Mapping[int, ConversionData]]


CategoryModel = Union[LinearCategory, AffineCategory]

ConversionTable = Dict[Unit, Dict[Unit, ConversionData]]


def group_explicit_conversions(
    explicit_conversions: Iterable[ExplicitConversion],
) -> Dict[int, Dict[int, Dict[int, ConversionData]]]:
    """
    Group explicit conversions by category, then source unit, then target unit.

    A later entry for the same pair replaces an earlier one.
    """
    grouped: Dict[int, Dict[int, Dict[int, ConversionData]]] = {}
    for conversion in explicit_conversions:
        by_source = grouped.setdefault(int(conversion.category_id), {})
        by_source.setdefault(int(conversion.source_unit_id), {})[
            int(conversion.target_unit_id)
        ] = conversion.to_conversion_data()
    return grouped


def select_category_models(
    category_ids: Iterable[int],
    linear_factors: Mapping[int, Mapping[int, Fraction]],
    explicit_conversions: Iterable[ExplicitConversion],
) -> Dict[int, CategoryModel]:
    """
    Choose the conversion model of each category.

    Args:
        category_ids: Categories to resolve
        linear_factors: Category id -> unit id -> factor
        explicit_conversions: Direct unit-to-unit conversions

    Returns:
        Category id -> model. Categories with neither factors nor explicit
        conversions are left out.
    """
    explicit_by_category = group_explicit_conversions(explicit_conversions)
    models: Dict[int, CategoryModel] = {}
    for category_id in category_ids:
        category_id = int(category_id)
        if category_id in explicit_by_category:
            models[category_id] = AffineCategory(category_id, explicit_by_category[category_id])
        elif category_id in linear_factors:
            factors = {int(unit_id): factor for unit_id, factor in linear_factors[category_id].items()}
            models[category_id] = LinearCategory(category_id, factors)
    return models


# ============================================================================
# Resolution
# ============================================================================


def resolve_category_ratios(units: Sequence[Unit], model: CategoryModel) -> ConversionTable:
    """
    Build the conversion table for the units of one category.

    Args:
        units: Built units of the category, in display order
        model: The category's conversion model

    Returns:
        Unit -> target unit -> ConversionData, covering every ordered pair of
        the given units (self-pairs included).

    Raises:
        ConfigurationInvariantError: If a factor is missing or not positive, or
            the explicit table does not cover every pair

    Example:
        >>> model = LinearCategory(5, {505: Fraction(1), 501: Fraction(1, 100)})
        >>> table = resolve_category_ratios([meter, centimeter], model)
        >>> table[meter][centimeter].ratio
        Fraction(100, 1)
    """
    if isinstance(model, AffineCategory):
        return _resolve_affine(units, model)
    return _resolve_linear(units, model)


def resolve_all_ratios(
    units_by_category: Mapping[int, Sequence[Unit]],
    linear_factors: Mapping[int, Mapping[int, Fraction]],
    explicit_conversions: Iterable[ExplicitConversion],
) -> ConversionTable:
    """
    Resolve the conversion tables of every category.

    Categories without units (Currency) contribute nothing.

    Raises:
        ConfigurationInvariantError: If a category with units has no conversion
            data, or its data is invalid
    """
    models = select_category_models(units_by_category, linear_factors, explicit_conversions)
    ratios: ConversionTable = {}
    for category_id, units in units_by_category.items():
        if not units:
            continue
        model = models.get(int(category_id))
        if model is None:
            raise ConfigurationInvariantError(category_id, "no conversion factors declared")
        ratios.update(resolve_category_ratios(units, model))
    return ratios


def _resolve_linear(units: Sequence[Unit], model: LinearCategory) -> ConversionTable:
    # Factors of units that were not built are never read
    factors: Dict[int, Fraction] = {}
    for unit in units:
        factor = model.factors.get(unit.id)
        if factor is None:
            raise ConfigurationInvariantError(model.category_id, f"unit {unit.id} has no linear factor")
        if factor <= 0:
            raise ConfigurationInvariantError(
                model.category_id, f"unit {unit.id} has non-positive factor {factor}"
            )
        factors[unit.id] = Fraction(factor)

    table: ConversionTable = {}
    for unit in units:
        table[unit] = {
            target: ConversionData(ratio=factors[unit.id] / factors[target.id]) for target in units
        }
    return table


def _resolve_affine(units: Sequence[Unit], model: AffineCategory) -> ConversionTable:
    table: ConversionTable = {}
    for unit in units:
        pairs = model.pairs.get(unit.id)
        if pairs is None:
            raise ConfigurationInvariantError(
                model.category_id, f"unit {unit.id} has no explicit conversions"
            )
        missing = [target.id for target in units if target.id not in pairs]
        if missing:
            raise ConfigurationInvariantError(
                model.category_id,
                f"explicit conversions from unit {unit.id} do not cover units {missing}",
            )
        table[unit] = {target: pairs[target.id] for target in units}
    return table
