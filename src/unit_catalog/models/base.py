"""
Declarative base for the unit reference tables.

Every reference table shares:
- An integer primary key holding the catalog id of the row
- created_at / updated_at timestamps
- to_dict() for export and debugging
"""

from datetime import datetime
from typing import Any, Dict

from sqlalchemy import Column, DateTime, Integer
from sqlalchemy.orm import declarative_base

from ..utils.datetime_utils import utc_now

Base = declarative_base()


class BaseModel(Base):
    """
    Abstract base for reference tables.

    Rows are inserted with explicit catalog ids (CategoryId, UnitId values) so
    ids stay stable across reseeds; conversion rows use generated ids.
    """

    __abstract__ = True

    id = Column(Integer, primary_key=True, autoincrement=True)
    created_at = Column(DateTime, nullable=False, default=utc_now)
    updated_at = Column(DateTime, nullable=False, default=utc_now, onupdate=utc_now)

    def to_dict(self, include_relationships: bool = False) -> Dict[str, Any]:
        """
        Convert the row to a dictionary keyed by column name.

        Args:
            include_relationships: Also convert loaded related rows

        Returns:
            Column values with datetimes as ISO strings
        """
        result: Dict[str, Any] = {}
        for column in self.__table__.columns:
            value = getattr(self, column.key)
            result[column.key] = value.isoformat() if isinstance(value, datetime) else value

        if include_relationships:
            for relationship in self.__mapper__.relationships:
                related = getattr(self, relationship.key)
                if related is None:
                    result[relationship.key] = None
                elif isinstance(related, list):
                    result[relationship.key] = [item.to_dict() for item in related]
                else:
                    result[relationship.key] = related.to_dict()
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id})"
