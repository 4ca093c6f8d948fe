"""
Unit Catalog CLI

Command-line interface for browsing the unit catalog of a region, converting
values and seeding the reference database.

Usage Examples:
    # List categories
    unit-catalog categories

    # List the units of a category for a region
    unit-catalog --region GB units power

    # Print a unit's conversion table
    unit-catalog table temperature_degrees_celsius

    # Convert a value
    unit-catalog convert 100 temperature_degrees_celsius temperature_degrees_fahrenheit

    # Store the catalog in the reference database
    unit-catalog --region KR seed
"""

import argparse
import logging
import sys
from typing import List, Optional

from .models.enums import CategoryId, UnitId
from .services.exceptions import ServiceError
from .services.unit_converter import (
    apply_conversion,
    format_conversion,
    validate_value,
)
from .services.unit_data_loader import UnitDataLoader
from .utils.config import get_config
from .utils.constants import DEFAULT_PRECISION

logger = logging.getLogger(__name__)


# ============================================================================
# Argument Types
# ============================================================================


def category_argument(text: str) -> int:
    """Parse a category given as id or name (e.g. "5", "length")."""
    if text.isdigit():
        return int(text)
    try:
        return int(CategoryId[text.strip().upper()])
    except KeyError:
        raise argparse.ArgumentTypeError(f"unknown category: {text}") from None


def unit_argument(text: str) -> int:
    """Parse a unit given as id or name (e.g. "501", "length_meter")."""
    if text.isdigit():
        return int(text)
    try:
        return int(UnitId[text.strip().upper()])
    except KeyError:
        raise argparse.ArgumentTypeError(f"unknown unit: {text}") from None


# ============================================================================
# Commands
# ============================================================================


def list_categories(loader: UnitDataLoader) -> int:
    for category in loader.list_categories():
        marker = "" if loader.category_is_supported(category) else " (external)"
        print(f"{category.id:>3}  {category.name}{marker}")
    return 0


def list_units(loader: UnitDataLoader, category_id: int) -> int:
    units = loader.list_units(category_id)
    if not units:
        print("No units (populated externally)")
        return 0
    for unit in units:
        flags = []
        if unit.is_default_from:
            flags.append("from")
        if unit.is_default_to:
            flags.append("to")
        if unit.is_whimsical:
            flags.append("whimsical")
        suffix = f"  [{', '.join(flags)}]" if flags else ""
        print(f"{unit.id:>5}  {unit}{suffix}")
    return 0


def print_table(loader: UnitDataLoader, unit_id: int) -> int:
    source = loader.find_unit(unit_id)
    print(f"Conversions from {source}:")
    for target, data in loader.conversion_table(unit_id).items():
        if data.offset:
            order = "offset first" if data.offset_first else "ratio first"
            print(f"  {target}: x {data.ratio}, offset {data.offset} ({order})")
        else:
            print(f"  {target}: x {data.ratio}")
    return 0


def convert(loader: UnitDataLoader, value: str, from_unit_id: int, to_unit_id: int, precision: int) -> int:
    from_unit = loader.find_unit(from_unit_id)
    to_unit = loader.find_unit(to_unit_id)
    category = next(c for c in loader.list_categories() if c.id == from_unit.category_id)
    amount = validate_value(category, value)
    result = apply_conversion(amount, loader.get_conversion(from_unit, to_unit))
    print(format_conversion(amount, from_unit, to_unit, result, precision=precision))
    return 0


def seed_database(loader: UnitDataLoader) -> int:
    # Imported here so browsing commands never touch the database
    from .services.database import init_database
    from .services.reference_table_service import seed_reference_tables

    init_database()
    counts = seed_reference_tables(loader)
    print(
        f"Seeded {counts['categories']} categories, {counts['units']} units and "
        f"{counts['conversions']} conversions for region {counts['region_code']}"
    )
    return 0


# ============================================================================
# Entry Point
# ============================================================================


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="unit-catalog",
        description="Region-aware unit catalog and converter",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  unit-catalog categories
  unit-catalog --region GB units power
  unit-catalog table length_meter
  unit-catalog convert 100 temperature_degrees_celsius temperature_degrees_fahrenheit
  unit-catalog --region KR seed
""",
    )
    parser.add_argument(
        "--region",
        help="Two-letter region code (default: UNIT_CATALOG_REGION or US)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    subparsers.add_parser("categories", help="List categories")

    units_parser = subparsers.add_parser("units", help="List the units of a category")
    units_parser.add_argument("category", type=category_argument, help="Category id or name")

    table_parser = subparsers.add_parser("table", help="Print a unit's conversion table")
    table_parser.add_argument("unit", type=unit_argument, help="Unit id or name")

    convert_parser = subparsers.add_parser("convert", help="Convert a value between two units")
    convert_parser.add_argument("value", help="Value to convert (e.g. 2.5 or 3/4)")
    convert_parser.add_argument("from_unit", type=unit_argument, help="Source unit id or name")
    convert_parser.add_argument("to_unit", type=unit_argument, help="Target unit id or name")
    convert_parser.add_argument(
        "-p", "--precision", type=int, default=DEFAULT_PRECISION, help="Decimal places in the result"
    )

    subparsers.add_parser("seed", help="Store the catalog in the reference database")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    config = get_config()
    logging.basicConfig(
        level=config.log_level_value,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    region_code = args.region.strip().upper() if args.region else config.region_code
    loader = UnitDataLoader(region_code)

    try:
        loader.build()
        if args.command == "categories":
            return list_categories(loader)
        elif args.command == "units":
            return list_units(loader, args.category)
        elif args.command == "table":
            return print_table(loader, args.unit)
        elif args.command == "convert":
            return convert(loader, args.value, args.from_unit, args.to_unit, args.precision)
        elif args.command == "seed":
            return seed_database(loader)
    except ServiceError as e:
        logger.debug("Command failed", exc_info=True)
        print(f"ERROR: {e}")
        return 1

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
