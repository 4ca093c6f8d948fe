"""
Unit reference models for the unit catalog.

These tables hold a built catalog for one region so other services can query
units and conversions without rebuilding. They are replaced wholesale by
reference_table_service.seed_reference_tables() and should not be edited by
hand.

Exact values are kept exact: ratios and offsets are stored as
"numerator/denominator" strings.
"""

from fractions import Fraction

from sqlalchemy import Boolean, Column, ForeignKey, Index, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship

from ..utils.constants import FRACTION_COLUMN_LENGTH
from .base import BaseModel


def fraction_to_text(value: Fraction) -> str:
    """Serialize a fraction as "numerator/denominator"."""
    value = Fraction(value)
    return f"{value.numerator}/{value.denominator}"


def text_to_fraction(text: str) -> Fraction:
    """Parse a stored "numerator/denominator" string."""
    return Fraction(text)


class UnitCategory(BaseModel):
    """
    Reference table for converter categories.

    Attributes:
        id: Catalog category id (see CategoryId)
        name: Localized display name
        supports_negative: True if values may be negative (Temperature)
        sort_order: Position in the navigation order
        region_code: Region the catalog was built for
    """

    __tablename__ = "unit_categories"

    name = Column(String(100), nullable=False)
    supports_negative = Column(Boolean, nullable=False, default=False)
    sort_order = Column(Integer, nullable=False, default=0)
    region_code = Column(String(8), nullable=False)

    units = relationship(
        "Unit",
        back_populates="category",
        cascade="all, delete-orphan",
        order_by="Unit.position",
    )


class Unit(BaseModel):
    """
    Reference table for measurement units.

    Attributes:
        id: Catalog unit id (see UnitId)
        category_id: Owning category
        name: Localized unit name
        abbreviation: Localized abbreviation
        display_order: Declared display order (may repeat inside a category)
        position: Index in the category's sorted unit list; unique per category
        is_default_from: Pre-selected conversion source
        is_default_to: Pre-selected conversion target
        is_whimsical: Novelty unit
    """

    __tablename__ = "units"

    category_id = Column(
        Integer, ForeignKey("unit_categories.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name = Column(String(100), nullable=False)
    abbreviation = Column(String(50), nullable=False)
    display_order = Column(Integer, nullable=False, default=0)
    position = Column(Integer, nullable=False, default=0)
    is_default_from = Column(Boolean, nullable=False, default=False)
    is_default_to = Column(Boolean, nullable=False, default=False)
    is_whimsical = Column(Boolean, nullable=False, default=False)

    category = relationship("UnitCategory", back_populates="units")

    def __repr__(self) -> str:
        return f"Unit(id={self.id}, name='{self.name}', category_id={self.category_id})"


class UnitConversion(BaseModel):
    """
    Reference table for pairwise conversions.

    Example:
        from_unit_id: 701 (Celsius)
        to_unit_id: 702 (Fahrenheit)
        ratio: "9/5"
        offset_amount: "32/1"
        offset_first: False
        Meaning: F = C * 9/5 + 32

    Attributes:
        from_unit_id: Source unit
        to_unit_id: Target unit
        ratio: Exact ratio as "numerator/denominator"
        offset_amount: Exact offset as "numerator/denominator"
        offset_first: Apply the offset before the ratio
    """

    __tablename__ = "unit_conversions"

    from_unit_id = Column(Integer, ForeignKey("units.id", ondelete="CASCADE"), nullable=False)
    to_unit_id = Column(Integer, ForeignKey("units.id", ondelete="CASCADE"), nullable=False)
    ratio = Column(String(FRACTION_COLUMN_LENGTH), nullable=False)
    offset_amount = Column(String(FRACTION_COLUMN_LENGTH), nullable=False, default="0/1")
    offset_first = Column(Boolean, nullable=False, default=False)

    from_unit = relationship("Unit", foreign_keys=[from_unit_id])
    to_unit = relationship("Unit", foreign_keys=[to_unit_id])

    __table_args__ = (
        UniqueConstraint("from_unit_id", "to_unit_id", name="uq_unit_conversion_pair"),
        Index("idx_unit_conversion_from", "from_unit_id"),
    )

    @property
    def ratio_value(self) -> Fraction:
        return text_to_fraction(self.ratio)

    @property
    def offset_value(self) -> Fraction:
        return text_to_fraction(self.offset_amount)

    def __repr__(self) -> str:
        return f"UnitConversion(from_unit_id={self.from_unit_id}, to_unit_id={self.to_unit_id})"
