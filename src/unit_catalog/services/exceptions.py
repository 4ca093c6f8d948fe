"""Service layer exception classes for the unit catalog.

This module defines all custom exceptions used by the service layer to provide
consistent error handling across the catalog.

Exception Hierarchy:
    ServiceError (base)
    ├── CatalogBuildError (fatal, raised while building)
    │   ├── ConfigurationInvariantError
    │   └── LocalizationError
    ├── CatalogLookupError (recoverable, raised by queries; also a LookupError)
    │   ├── CatalogNotBuilt
    │   ├── CategoryNotFound
    │   ├── UnitNotFound
    │   └── ConversionNotFound
    └── ValidationError
"""


class ServiceError(Exception):
    """Base exception for all service layer errors.

    All service-specific exceptions should inherit from this class.
    """

    pass


# ============================================================================
# Build-time failures
# ============================================================================


class CatalogBuildError(ServiceError):
    """Raised when the catalog cannot be constructed.

    Build errors stem from static data or missing resources and are never
    recovered locally.
    """

    pass


class ConfigurationInvariantError(CatalogBuildError):
    """Raised when the static conversion tables violate an invariant.

    Args:
        category_id: Category whose data is invalid
        message: Description of the violated invariant

    Example:
        >>> raise ConfigurationInvariantError(5, "unit 505 has non-positive factor 0")
        ConfigurationInvariantError: Invalid conversion data for category 5: unit 505 has non-positive factor 0
    """

    def __init__(self, category_id: int, message: str):
        self.category_id = category_id
        self.detail = message
        super().__init__(f"Invalid conversion data for category {category_id}: {message}")


class LocalizationError(CatalogBuildError):
    """Raised when a display string cannot be resolved.

    Args:
        string_id: The string id that has no translation

    Example:
        >>> raise LocalizationError("UnitName_Acre")
        LocalizationError: No localized string for 'UnitName_Acre'
    """

    def __init__(self, string_id: str):
        self.string_id = string_id
        super().__init__(f"No localized string for '{string_id}'")


# ============================================================================
# Query failures
# ============================================================================


class CatalogLookupError(ServiceError, LookupError):
    """Base class for recoverable query errors.

    Callers are expected to check category_is_supported() and to build the
    catalog before querying.
    """

    pass


class CatalogNotBuilt(CatalogLookupError):
    """Raised when a built catalog is required but build() never ran."""

    def __init__(self, region_code: str):
        self.region_code = region_code
        super().__init__(f"Unit catalog for region '{region_code}' has not been built")


class CategoryNotFound(CatalogLookupError):
    """Raised when a category is not registered in the built catalog.

    Args:
        category_id: The category id that was not found

    Example:
        >>> raise CategoryNotFound(99)
        CategoryNotFound: Category with ID 99 not found
    """

    def __init__(self, category_id: int):
        self.category_id = category_id
        super().__init__(f"Category with ID {category_id} not found")


class UnitNotFound(CatalogLookupError):
    """Raised when a unit has no conversion table in the built catalog.

    Args:
        unit_id: The unit id that was not found

    Example:
        >>> raise UnitNotFound(701)
        UnitNotFound: Unit with ID 701 not found
    """

    def __init__(self, unit_id: int):
        self.unit_id = unit_id
        super().__init__(f"Unit with ID {unit_id} not found")


class ConversionNotFound(CatalogLookupError):
    """Raised when no conversion exists between two units.

    Args:
        from_unit_id: Source unit id
        to_unit_id: Target unit id
    """

    def __init__(self, from_unit_id: int, to_unit_id: int):
        self.from_unit_id = from_unit_id
        self.to_unit_id = to_unit_id
        super().__init__(f"No conversion from unit {from_unit_id} to unit {to_unit_id}")


# ============================================================================
# Input validation
# ============================================================================


class ValidationError(ServiceError):
    """Raised when data validation fails."""

    def __init__(self, errors: list):
        self.errors = errors
        error_msg = "; ".join(errors)
        super().__init__(f"Validation failed: {error_msg}")
