"""Unit Data Loader - the region-aware unit catalog.

The loader owns the built catalog for one region:

1. build() derives the region policy, builds categories and ordered units,
   then resolves every category's pairwise conversion table.
2. The result is stored as one immutable CatalogSnapshot. A rebuild assembles
   a complete new snapshot before replacing the reference, so readers holding
   the old snapshot never observe a partial catalog.
3. Queries read the current snapshot and return copies.

Currency is registered as a category but never populated here; its units come
from an external rate source.

Example Usage:
    >>> from unit_catalog.services.unit_data_loader import UnitDataLoader
    >>> from unit_catalog.models.enums import CategoryId
    >>>
    >>> loader = UnitDataLoader("US")
    >>> loader.build()
    >>> from_unit, to_unit = loader.default_units(CategoryId.TEMPERATURE)
    >>> from_unit.name, to_unit.name
    ('Fahrenheit', 'Celsius')
"""

import logging
from dataclasses import dataclass
from fractions import Fraction
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from ..models.enums import CategoryId
from ..utils.conversion_factors import EXPLICIT_CONVERSIONS, LINEAR_FACTORS
from ..utils.region_policy import RegionPolicy
from ..utils.unit_definitions import (
    CATEGORY_DEFINITIONS,
    EXTERNALLY_POPULATED_CATEGORIES,
    UNIT_DEFINITIONS,
    CategoryDefinition,
    UnitDefinition,
)
from .catalog_builder import build_categories, build_units
from .dto import Category, ConversionData, ExplicitConversion, Unit
from .exceptions import (
    CatalogBuildError,
    CategoryNotFound,
    ConversionNotFound,
    UnitNotFound,
)
from .localization import DictStringProvider, StringProvider
from .logging_utils import get_service_logger, log_operation
from .ratio_resolver import resolve_all_ratios

logger = get_service_logger(__name__)

CategoryRef = Union[Category, int]
UnitRef = Union[Unit, int]


@dataclass(frozen=True)
class CatalogSnapshot:
    """One complete, read-only build of the catalog.

    Attributes:
        region_code: Region the snapshot was built for
        policy: Region policy used for the build
        categories: Categories in navigation order
        units_by_category: Category id -> units in display order
        conversions_by_unit: Unit id -> target unit -> ConversionData
    """

    region_code: str
    policy: RegionPolicy
    categories: Tuple[Category, ...]
    units_by_category: Mapping[int, Tuple[Unit, ...]]
    conversions_by_unit: Mapping[int, Mapping[Unit, ConversionData]]

    @property
    def unit_count(self) -> int:
        return sum(len(units) for units in self.units_by_category.values())

    @property
    def pair_count(self) -> int:
        return sum(len(table) for table in self.conversions_by_unit.values())


def _category_id(category: CategoryRef) -> int:
    return int(category.id if isinstance(category, Category) else category)


def _unit_id(unit: UnitRef) -> int:
    return int(unit.id if isinstance(unit, Unit) else unit)


class UnitDataLoader:
    """
    Builds and serves the unit catalog for one region.

    Args:
        region_code: Two-letter region code (e.g. "US", "GB", "KR"), matched exactly
        strings: String provider for display text. Defaults to the bundled
            English strings.
        linear_factors: Category -> unit -> linear factor. Defaults to LINEAR_FACTORS.
        explicit_conversions: Direct conversions. Defaults to EXPLICIT_CONVERSIONS.
        category_definitions: Registered categories. Defaults to CATEGORY_DEFINITIONS.
        unit_definitions: Category -> unit declarations. Defaults to UNIT_DEFINITIONS.

    The tables are injectable so tests can build catalogs from small fixtures.
    """

    def __init__(
        self,
        region_code: str,
        strings: Optional[StringProvider] = None,
        linear_factors: Optional[Mapping[int, Mapping[int, Fraction]]] = None,
        explicit_conversions: Optional[Iterable[ExplicitConversion]] = None,
        category_definitions: Optional[Sequence[CategoryDefinition]] = None,
        unit_definitions: Optional[Mapping[CategoryId, Sequence[UnitDefinition]]] = None,
    ):
        self._region_code = region_code
        self._strings = strings if strings is not None else DictStringProvider()
        self._linear_factors = LINEAR_FACTORS if linear_factors is None else linear_factors
        self._explicit_conversions = list(
            EXPLICIT_CONVERSIONS if explicit_conversions is None else explicit_conversions
        )
        self._category_definitions = tuple(
            CATEGORY_DEFINITIONS if category_definitions is None else category_definitions
        )
        self._unit_definitions = UNIT_DEFINITIONS if unit_definitions is None else unit_definitions
        self._snapshot: Optional[CatalogSnapshot] = None

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def region_code(self) -> str:
        return self._region_code

    @property
    def policy(self) -> RegionPolicy:
        """Policy of the current build, or of the configured region before any build."""
        snapshot = self._snapshot
        if snapshot is not None:
            return snapshot.policy
        return RegionPolicy.for_region(self._region_code)

    @property
    def is_built(self) -> bool:
        return self._snapshot is not None

    @property
    def snapshot(self) -> Optional[CatalogSnapshot]:
        """The current snapshot, or None before the first build."""
        return self._snapshot

    # =========================================================================
    # Build
    # =========================================================================

    def build(self) -> None:
        """
        Build the catalog for the configured region, replacing any previous build.

        Raises:
            ConfigurationInvariantError: If the static conversion data is invalid
            LocalizationError: If a display string cannot be resolved
        """
        self._snapshot = self._build_snapshot(self._region_code)

    def rebuild_for_region(self, region_code: str) -> None:
        """
        Switch to another region and rebuild.

        The region changes only if the build succeeds; on failure the previous
        region and snapshot stay in place.
        """
        snapshot = self._build_snapshot(region_code)
        self._region_code = region_code
        self._snapshot = snapshot

    def _build_snapshot(self, region_code: str) -> CatalogSnapshot:
        try:
            policy = RegionPolicy.for_region(region_code)
            categories = build_categories(self._strings, self._category_definitions)
            units_by_category = build_units(
                policy, self._strings, self._unit_definitions, self._category_definitions
            )
            ratios = resolve_all_ratios(
                units_by_category, self._linear_factors, self._explicit_conversions
            )
        except CatalogBuildError as e:
            log_operation(
                logger,
                operation="build_catalog",
                outcome="error",
                level=logging.ERROR,
                region_code=region_code,
                error=str(e),
            )
            raise

        snapshot = CatalogSnapshot(
            region_code=region_code,
            policy=policy,
            categories=tuple(categories),
            units_by_category=MappingProxyType(
                {category_id: tuple(units) for category_id, units in units_by_category.items()}
            ),
            conversions_by_unit=MappingProxyType(
                {unit.id: MappingProxyType(dict(table)) for unit, table in ratios.items()}
            ),
        )
        log_operation(
            logger,
            operation="build_catalog",
            outcome="success",
            region_code=region_code,
            category_count=len(snapshot.categories),
            unit_count=snapshot.unit_count,
            pair_count=snapshot.pair_count,
        )
        return snapshot

    # =========================================================================
    # Queries
    # =========================================================================

    def list_categories(self) -> List[Category]:
        """
        Get the categories in navigation order.

        Returns:
            List of Category records; empty before the first build.
        """
        snapshot = self._snapshot
        if snapshot is None:
            return []
        return list(snapshot.categories)

    def list_units(self, category: CategoryRef) -> List[Unit]:
        """
        Get the units of a category in display order.

        Args:
            category: Category record or category id

        Returns:
            List of Unit records. Currency returns an empty list.

        Raises:
            CategoryNotFound: If the category is not registered or no build ran
        """
        category_id = _category_id(category)
        snapshot = self._snapshot
        if snapshot is None or category_id not in snapshot.units_by_category:
            raise CategoryNotFound(category_id)
        return list(snapshot.units_by_category[category_id])

    def conversion_table(self, unit: UnitRef) -> Dict[Unit, ConversionData]:
        """
        Get the conversions from a unit to every unit of its category.

        Args:
            unit: Unit record or unit id

        Returns:
            Target unit -> ConversionData, the unit itself included

        Raises:
            UnitNotFound: If the unit is unknown or its ratios were never built
        """
        unit_id = _unit_id(unit)
        snapshot = self._snapshot
        if snapshot is None or unit_id not in snapshot.conversions_by_unit:
            raise UnitNotFound(unit_id)
        return dict(snapshot.conversions_by_unit[unit_id])

    def get_conversion(self, from_unit: UnitRef, to_unit: UnitRef) -> ConversionData:
        """
        Get the conversion between two units.

        Raises:
            UnitNotFound: If from_unit has no conversion table
            ConversionNotFound: If to_unit is not in from_unit's table
        """
        to_unit_id = _unit_id(to_unit)
        for target, data in self.conversion_table(from_unit).items():
            if target.id == to_unit_id:
                return data
        raise ConversionNotFound(_unit_id(from_unit), to_unit_id)

    def find_unit(self, unit_id: int) -> Unit:
        """
        Look up a built unit by id.

        Raises:
            UnitNotFound: If no unit with that id was built
        """
        snapshot = self._snapshot
        if snapshot is not None:
            for units in snapshot.units_by_category.values():
                for unit in units:
                    if unit.id == unit_id:
                        return unit
        raise UnitNotFound(unit_id)

    def category_is_supported(self, category: CategoryRef) -> bool:
        """
        Check whether the static catalog serves a category.

        Returns:
            True if the category is registered in the built catalog and its
            units are not populated externally (Currency)
        """
        category_id = _category_id(category)
        snapshot = self._snapshot
        if snapshot is None or category_id not in snapshot.units_by_category:
            return False
        return category_id not in EXTERNALLY_POPULATED_CATEGORIES

    def default_units(self, category: CategoryRef) -> Tuple[Optional[Unit], Optional[Unit]]:
        """
        Get the pre-selected source and target units of a category.

        Returns the first unit flagged default-from and the first flagged
        default-to. When no unit carries a flag the first unit of the list is
        used. Both are None for an empty category (Currency).

        Raises:
            CategoryNotFound: If the category is not registered or no build ran
        """
        units = self.list_units(category)
        if not units:
            return None, None
        from_unit = next((unit for unit in units if unit.is_default_from), units[0])
        to_unit = next((unit for unit in units if unit.is_default_to), units[0])
        return from_unit, to_unit
