"""Services package - Catalog construction and query layer for the unit catalog.

Architecture:
- Builders: Pure functions turning the static tables into categories, units
  and conversion tables
- Loader: UnitDataLoader owns one immutable catalog snapshot per region
- Persistence: Reference tables managed via session_scope() context manager
- Exceptions: Consistent error handling via ServiceError hierarchy

Service Modules:
- catalog_builder: Ordered categories and units for a region
- ratio_resolver: Linear and affine pairwise conversion tables
- unit_data_loader: Build, rebuild and query the catalog
- unit_converter: Apply conversions, validate and format values
- reference_table_service: Seed and query the reference tables

Infrastructure:
- exceptions: Custom exception classes for service layer errors
- database: Session management and database utilities
- localization: Display string providers
- logging_utils: Structured operation logging
"""

from .exceptions import (
    ServiceError,
    CatalogBuildError,
    ConfigurationInvariantError,
    LocalizationError,
    CatalogLookupError,
    CatalogNotBuilt,
    CategoryNotFound,
    UnitNotFound,
    ConversionNotFound,
    ValidationError,
)

__all__ = [
    "ServiceError",
    "CatalogBuildError",
    "ConfigurationInvariantError",
    "LocalizationError",
    "CatalogLookupError",
    "CatalogNotBuilt",
    "CategoryNotFound",
    "UnitNotFound",
    "ConversionNotFound",
    "ValidationError",
]
