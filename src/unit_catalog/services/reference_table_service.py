"""Reference Table Service - persist and query a built unit catalog.

This module stores a loader's current catalog snapshot in the unit reference
tables and answers queries from them, so other services can look up units and
conversions without building the catalog themselves.

All functions accept an optional session parameter to support being called from
other service functions that need to maintain transactional atomicity.

Example Usage:
    >>> from unit_catalog.services.unit_data_loader import UnitDataLoader
    >>> from unit_catalog.models.enums import CategoryId, UnitId
    >>> from unit_catalog.services.reference_table_service import (
    ...     seed_reference_tables, get_units_by_category, get_conversion,
    ... )
    >>>
    >>> loader = UnitDataLoader("US")
    >>> loader.build()
    >>> seed_reference_tables(loader)["categories"]
    13
    >>>
    >>> [u.name for u in get_units_by_category(CategoryId.TEMPERATURE)]
    ['Celsius', 'Fahrenheit', 'Kelvin']
    >>> get_conversion(UnitId.TEMPERATURE_DEGREES_CELSIUS, UnitId.TEMPERATURE_DEGREES_FAHRENHEIT)
    ConversionData(ratio=Fraction(9, 5), offset=Fraction(32, 1), offset_first=False)
"""

from typing import Dict, List, Optional

from sqlalchemy.orm import Session

from ..models.unit_reference import (
    Unit,
    UnitCategory,
    UnitConversion,
    fraction_to_text,
    text_to_fraction,
)
from .database import session_scope
from .dto import ConversionData
from .exceptions import CatalogNotBuilt, ConversionNotFound
from .logging_utils import get_service_logger, log_operation

logger = get_service_logger(__name__)


# ============================================================================
# Seeding
# ============================================================================


def seed_reference_tables(loader, session: Optional[Session] = None) -> Dict[str, object]:
    """Replace the reference tables with the loader's current catalog.

    Existing rows are deleted and the snapshot is inserted in the same
    transaction, so seeding twice leaves the same rows behind.

    Args:
        loader: A built UnitDataLoader
        session: Optional database session. If None, creates a new session.

    Returns:
        Dict with the region code and the number of categories, units and
        conversions written.

    Raises:
        CatalogNotBuilt: If the loader has not been built
    """
    snapshot = loader.snapshot
    if snapshot is None:
        raise CatalogNotBuilt(loader.region_code)

    def _impl(sess: Session) -> Dict[str, object]:
        # Children first so foreign keys hold at every step
        sess.query(UnitConversion).delete()
        sess.query(Unit).delete()
        sess.query(UnitCategory).delete()
        sess.flush()

        unit_count = 0
        for sort_order, category in enumerate(snapshot.categories):
            sess.add(
                UnitCategory(
                    id=category.id,
                    name=category.name,
                    supports_negative=category.supports_negative,
                    sort_order=sort_order,
                    region_code=snapshot.region_code,
                )
            )
        sess.flush()

        for category in snapshot.categories:
            for position, unit in enumerate(snapshot.units_by_category.get(category.id, ())):
                sess.add(
                    Unit(
                        id=unit.id,
                        category_id=unit.category_id,
                        name=unit.name,
                        abbreviation=unit.abbreviation,
                        display_order=unit.display_order,
                        position=position,
                        is_default_from=unit.is_default_from,
                        is_default_to=unit.is_default_to,
                        is_whimsical=unit.is_whimsical,
                    )
                )
                unit_count += 1
        sess.flush()

        conversion_count = 0
        for from_unit_id, table in snapshot.conversions_by_unit.items():
            for target, data in table.items():
                sess.add(
                    UnitConversion(
                        from_unit_id=from_unit_id,
                        to_unit_id=target.id,
                        ratio=fraction_to_text(data.ratio),
                        offset_amount=fraction_to_text(data.offset),
                        offset_first=data.offset_first,
                    )
                )
                conversion_count += 1
        sess.flush()

        counts = {
            "region_code": snapshot.region_code,
            "categories": len(snapshot.categories),
            "units": unit_count,
            "conversions": conversion_count,
        }
        log_operation(logger, operation="seed_reference_tables", outcome="success", **counts)
        return counts

    if session is not None:
        return _impl(session)
    with session_scope() as sess:
        return _impl(sess)


# ============================================================================
# Queries
# ============================================================================


def get_all_categories(session: Optional[Session] = None) -> List[UnitCategory]:
    """Get all categories in navigation order.

    Args:
        session: Optional database session. If None, creates a new session.

    Returns:
        List of UnitCategory objects ordered by sort_order.
    """

    def _impl(sess: Session) -> List[UnitCategory]:
        return sess.query(UnitCategory).order_by(UnitCategory.sort_order).all()

    if session is not None:
        return _impl(session)
    with session_scope() as sess:
        return _impl(sess)


def get_units_by_category(category_id: int, session: Optional[Session] = None) -> List[Unit]:
    """Get the units of a category in display order.

    Args:
        category_id: Category to filter by.
        session: Optional database session. If None, creates a new session.

    Returns:
        List of Unit objects, empty for an unknown category.
    """

    def _impl(sess: Session) -> List[Unit]:
        return (
            sess.query(Unit)
            .filter(Unit.category_id == int(category_id))
            .order_by(Unit.position)
            .all()
        )

    if session is not None:
        return _impl(session)
    with session_scope() as sess:
        return _impl(sess)


def get_unit_by_id(unit_id: int, session: Optional[Session] = None) -> Optional[Unit]:
    """Get a unit by its id.

    Args:
        unit_id: The unit id to look up.
        session: Optional database session. If None, creates a new session.

    Returns:
        Unit object if found, None otherwise.
    """

    def _impl(sess: Session) -> Optional[Unit]:
        return sess.query(Unit).filter(Unit.id == int(unit_id)).first()

    if session is not None:
        return _impl(session)
    with session_scope() as sess:
        return _impl(sess)


def get_conversion(from_unit_id: int, to_unit_id: int, session: Optional[Session] = None) -> ConversionData:
    """Get the stored conversion between two units.

    Args:
        from_unit_id: Source unit.
        to_unit_id: Target unit.
        session: Optional database session. If None, creates a new session.

    Returns:
        ConversionData with exact ratio and offset.

    Raises:
        ConversionNotFound: If no row exists for the pair
    """

    def _impl(sess: Session) -> ConversionData:
        row = (
            sess.query(UnitConversion)
            .filter(
                UnitConversion.from_unit_id == int(from_unit_id),
                UnitConversion.to_unit_id == int(to_unit_id),
            )
            .first()
        )
        if row is None:
            raise ConversionNotFound(int(from_unit_id), int(to_unit_id))
        return ConversionData(
            ratio=text_to_fraction(row.ratio),
            offset=text_to_fraction(row.offset_amount),
            offset_first=row.offset_first,
        )

    if session is not None:
        return _impl(session)
    with session_scope() as sess:
        return _impl(sess)


def get_units_for_dropdown(category_ids: List[int], session: Optional[Session] = None) -> List[str]:
    """Get units formatted for a dropdown with category headers.

    Returns a list of strings where category headers are formatted as
    "-- Category --" and unit values are the unit abbreviations. Items
    starting with "--" are non-selectable headers. Unknown categories are
    skipped.

    Args:
        category_ids: Categories to include, in the order to show them.
        session: Optional database session. If None, creates a new session.

    Returns:
        List of strings formatted for dropdown display.

    Example:
        >>> get_units_for_dropdown([CategoryId.TEMPERATURE, CategoryId.ANGLE])
        ['-- Temperature --', '°C', '°F', 'K', '-- Angle --', 'deg', 'rad', 'grad']
    """

    def _impl(sess: Session) -> List[str]:
        result = []
        for category_id in category_ids:
            category = sess.get(UnitCategory, int(category_id))
            if category is None:
                logger.debug(f"Skipping unknown category {category_id} in dropdown")
                continue
            result.append(f"-- {category.name} --")
            for unit in get_units_by_category(category.id, session=sess):
                result.append(unit.abbreviation)
        return result

    if session is not None:
        return _impl(session)
    with session_scope() as sess:
        return _impl(sess)
