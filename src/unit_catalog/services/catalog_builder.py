"""Unit Catalog Builder - ordered categories and units for a region.

This module turns the declarative tables in ``unit_catalog.utils.unit_definitions``
into the Category and Unit records served by the loader.

Build rules:
- Categories keep their declared navigation order
- Optional units are included only when their region rule holds
- Default-from/default-to flags are evaluated against the region policy
- Units are sorted by display order with a stable sort, so units sharing an
  order keep their declaration order
- Currency is registered with no units; its units come from an external
  rate collaborator

Example Usage:
    >>> from unit_catalog.models.enums import CategoryId
    >>> from unit_catalog.services.catalog_builder import build_units
    >>> from unit_catalog.services.localization import DictStringProvider
    >>> from unit_catalog.utils.region_policy import RegionPolicy
    >>>
    >>> units = build_units(RegionPolicy.for_region("KR"), DictStringProvider())
    >>> [u.name for u in units[CategoryId.TEMPERATURE]]
    ['Celsius', 'Fahrenheit', 'Kelvin']
"""

import logging
from collections import Counter
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from ..models.enums import CategoryId
from ..utils.region_policy import RegionPolicy
from ..utils.unit_definitions import (
    CATEGORY_DEFINITIONS,
    EXTERNALLY_POPULATED_CATEGORIES,
    UNIT_DEFINITIONS,
    CategoryDefinition,
    UnitDefinition,
)
from .dto import Category, Unit
from .localization import StringProvider
from .logging_utils import get_service_logger, log_operation

logger = get_service_logger(__name__)


def build_categories(
    strings: StringProvider,
    definitions: Sequence[CategoryDefinition] = CATEGORY_DEFINITIONS,
) -> List[Category]:
    """Build the ordered category list.

    Args:
        strings: Provider used to resolve category names.
        definitions: Category declarations in navigation order.

    Returns:
        List of Category records in declaration order.

    Raises:
        LocalizationError: If a category name cannot be resolved.
    """
    return [
        Category(
            id=int(definition.category_id),
            name=strings.resolve(definition.name_string_id),
            supports_negative=definition.supports_negative,
        )
        for definition in definitions
    ]


def build_unit(definition: UnitDefinition, category_id: int, policy: RegionPolicy, strings: StringProvider) -> Unit:
    """Resolve one unit declaration against a region policy."""
    return Unit(
        id=int(definition.unit_id),
        category_id=int(category_id),
        name=strings.resolve(definition.name_string_id),
        abbreviation=strings.resolve(definition.abbreviation_string_id),
        display_order=definition.display_order,
        is_default_from=definition.default_from.evaluate(policy),
        is_default_to=definition.default_to.evaluate(policy),
        is_whimsical=definition.is_whimsical,
    )


def build_category_units(
    category_id: int,
    definitions: Iterable[UnitDefinition],
    policy: RegionPolicy,
    strings: StringProvider,
) -> List[Unit]:
    """Build the ordered unit list of one category.

    Args:
        category_id: Category the units belong to.
        definitions: Unit declarations, in declaration order.
        policy: Region policy deciding optional units and defaults.
        strings: Provider used to resolve names and abbreviations.

    Returns:
        Units sorted by display order (stable).
    """
    units = [
        build_unit(definition, category_id, policy, strings)
        for definition in definitions
        if definition.include.evaluate(policy)
    ]
    # sorted() is stable: ties keep declaration order
    units = sorted(units, key=lambda unit: unit.display_order)
    _report_duplicate_orders(category_id, units)
    return units


def build_units(
    policy: RegionPolicy,
    strings: StringProvider,
    unit_definitions: Optional[Mapping[CategoryId, Sequence[UnitDefinition]]] = None,
    category_definitions: Sequence[CategoryDefinition] = CATEGORY_DEFINITIONS,
) -> Dict[int, List[Unit]]:
    """Build the ordered unit lists of every registered category.

    Args:
        policy: Region policy for this build.
        strings: Provider used to resolve names and abbreviations.
        unit_definitions: Category -> unit declarations. Defaults to UNIT_DEFINITIONS.
        category_definitions: Registered categories.

    Returns:
        Category id -> ordered units. Externally populated categories (Currency)
        map to an empty list.

    Raises:
        LocalizationError: If a unit name or abbreviation cannot be resolved.
    """
    if unit_definitions is None:
        unit_definitions = UNIT_DEFINITIONS

    units_by_category: Dict[int, List[Unit]] = {}
    for category in category_definitions:
        category_id = int(category.category_id)
        if category.category_id in EXTERNALLY_POPULATED_CATEGORIES:
            units_by_category[category_id] = []
            continue
        units_by_category[category_id] = build_category_units(
            category_id, unit_definitions.get(category.category_id, ()), policy, strings
        )
    return units_by_category


def _report_duplicate_orders(category_id: int, units: List[Unit]) -> None:
    counts = Counter(unit.display_order for unit in units)
    duplicates = sorted(order for order, count in counts.items() if count > 1)
    if not duplicates:
        return
    log_operation(
        logger,
        operation="build_units",
        outcome="duplicate_display_order",
        level=logging.WARNING,
        category_id=category_id,
        display_orders=duplicates,
    )
