"""Unit Catalog - region-aware measurement units and exact conversion tables."""

__version__ = "0.1.0"
