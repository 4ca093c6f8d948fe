"""
Database models package.

This package contains the catalog enumerations and the SQLAlchemy ORM models
for the unit reference tables.
"""

from .base import Base, BaseModel
from .enums import CategoryId, UnitId
from .unit_reference import Unit, UnitCategory, UnitConversion

__all__ = [
    "Base",
    "BaseModel",
    "CategoryId",
    "UnitId",
    "Unit",
    "UnitCategory",
    "UnitConversion",
]
