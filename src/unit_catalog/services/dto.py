"""Data Transfer Objects for the unit catalog.

This module provides the immutable value types shared by the catalog builder,
the ratio resolver and the loader's query surface.

All numeric values are exact fractions.Fraction instances so ratios derived
from rational constants are reproducible bit for bit across builds.
"""

from dataclasses import dataclass
from fractions import Fraction


@dataclass(frozen=True)
class Category:
    """A measurement domain such as Length or Temperature.

    Attributes:
        id: Serialized category id (see CategoryId)
        name: Localized display name
        supports_negative: True if values in this category may be negative
    """

    id: int
    name: str
    supports_negative: bool


@dataclass(frozen=True)
class Unit:
    """A named, ordered measurement unit within one category.

    Attributes:
        id: Unit id, unique across the catalog and stable across builds
        category_id: Id of the owning category
        name: Localized unit name
        abbreviation: Localized abbreviation
        display_order: Ascending sort key inside the category
        is_default_from: Pre-selected as the conversion source
        is_default_to: Pre-selected as the conversion target
        is_whimsical: Novelty unit hidden from some default views; still convertible
    """

    id: int
    category_id: int
    name: str
    abbreviation: str
    display_order: int
    is_default_from: bool = False
    is_default_to: bool = False
    is_whimsical: bool = False

    def __str__(self) -> str:
        return f"{self.name} ({self.abbreviation})"


@dataclass(frozen=True)
class ConversionData:
    """How to get from one unit to another.

    Applying the data to a value x gives (x + offset) * ratio when
    offset_first is set, otherwise x * ratio + offset.
    """

    ratio: Fraction = Fraction(1)
    offset: Fraction = Fraction(0)
    offset_first: bool = False

    @property
    def is_identity(self) -> bool:
        return self.ratio == 1 and self.offset == 0


IDENTITY_CONVERSION = ConversionData()


@dataclass(frozen=True)
class ExplicitConversion:
    """A direct affine transform between two specific units.

    Attributes:
        category_id: Category both units belong to
        source_unit_id: Unit converted from
        target_unit_id: Unit converted to
        ratio: Scale factor
        offset: Offset added before or after scaling
        offset_first: Apply the offset before the ratio
    """

    category_id: int
    source_unit_id: int
    target_unit_id: int
    ratio: Fraction
    offset: Fraction = Fraction(0)
    offset_first: bool = False

    def to_conversion_data(self) -> ConversionData:
        return ConversionData(ratio=self.ratio, offset=self.offset, offset_first=self.offset_first)
