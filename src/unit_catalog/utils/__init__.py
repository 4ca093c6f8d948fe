"""Utilities package for the unit catalog: static tables, region policy and configuration."""
