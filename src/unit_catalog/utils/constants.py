"""
Constants for the unit catalog application.

This module defines system-wide constants including:
- Application metadata
- Configuration defaults
- Database settings
"""

from typing import List

# ============================================================================
# Application Metadata
# ============================================================================

APP_NAME = "Unit Catalog"
APP_VERSION = "0.1.0"
DATABASE_VERSION = "1.0"

# ============================================================================
# Configuration Defaults
# ============================================================================

# Environment variable names
ENV_ENVIRONMENT = "UNIT_CATALOG_ENV"
ENV_REGION = "UNIT_CATALOG_REGION"
ENV_LOG_LEVEL = "UNIT_CATALOG_LOG_LEVEL"
ENV_DATABASE_URL = "UNIT_CATALOG_DATABASE_URL"

DEFAULT_ENVIRONMENT = "production"
DEFAULT_REGION = "US"
DEFAULT_LOG_LEVEL = "INFO"

ENVIRONMENTS: List[str] = ["production", "development"]
LOG_LEVELS: List[str] = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# ============================================================================
# Database Settings
# ============================================================================

DATABASE_FILENAME = "unit_catalog.db"
# Production data directory, created under the user's home directory
USER_DATA_DIRNAME = ".unit_catalog"

# Ratios and offsets are stored as "numerator/denominator" strings
FRACTION_COLUMN_LENGTH = 200

# ============================================================================
# Display
# ============================================================================

DEFAULT_PRECISION = 2
