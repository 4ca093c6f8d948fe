"""Service layer logging utilities.

Provides structured logging functions for catalog operations, enabling a
consistent log format and context across the builder, the resolver and the
reference table service.

Usage:
    from unit_catalog.services.logging_utils import get_service_logger, log_operation

    logger = get_service_logger(__name__)

    # Log successful operation
    log_operation(
        logger,
        operation="build_catalog",
        outcome="success",
        region_code="US",
        unit_count=152,
    )

    # Log a data-quality finding
    log_operation(
        logger,
        operation="build_units",
        outcome="duplicate_display_order",
        level=logging.WARNING,
        category_id=13,
        display_order=13,
    )
"""

import logging
from typing import Any


def get_service_logger(name: str) -> logging.Logger:
    """
    Get a logger configured for service operations.

    Args:
        name: Logger name (typically __name__ of the calling module)

    Returns:
        Logger instance with the 'unit_catalog.services' prefix.

    Example:
        >>> logger = get_service_logger(__name__)
        >>> logger.name
        'unit_catalog.services.unit_data_loader'
    """
    # Extract just the module name if full path is provided
    if "." in name:
        name = name.split(".")[-1]
    return logging.getLogger(f"unit_catalog.services.{name}")


def log_operation(
    logger: logging.Logger,
    operation: str,
    outcome: str,
    level: int = logging.INFO,
    **context: Any,
) -> None:
    """
    Log a service operation with structured context.

    The context is passed via the 'extra' parameter for structured logging, so
    handlers can read e.g. record.region_code.

    Args:
        logger: Logger instance to use
        operation: Operation name (e.g., "build_catalog", "seed_reference_tables")
        outcome: Outcome description (e.g., "success", "error")
        level: Log level (default: INFO). Use DEBUG for verbose/frequent logs.
        **context: Additional context fields (region code, counts, error details)
    """
    extra = {
        "operation": operation,
        "outcome": outcome,
        **context,
    }
    logger.log(level, f"{operation}: {outcome}", extra=extra)
