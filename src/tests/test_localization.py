"""
Tests for localized string resolution.
"""

import pytest

from unit_catalog.services.exceptions import LocalizationError
from unit_catalog.services.localization import DictStringProvider, get_default_string_provider
from unit_catalog.utils.unit_definitions import CATEGORY_DEFINITIONS, UNIT_DEFINITIONS
from unit_catalog.utils.unit_strings import DEFAULT_STRINGS


class TestDictStringProvider:
    """Tests for DictStringProvider."""

    def test_defaults_to_bundled_strings(self):
        provider = DictStringProvider()
        assert len(provider) == len(DEFAULT_STRINGS)
        assert provider.resolve("UnitName_Mile") == "Miles"

    def test_custom_table(self):
        provider = DictStringProvider({"UnitName_Mile": "Meilen"})
        assert provider.resolve("UnitName_Mile") == "Meilen"
        assert "UnitName_Meter" not in provider

    def test_missing_string_raises(self):
        with pytest.raises(LocalizationError) as exc_info:
            DictStringProvider({}).resolve("UnitName_Mile")
        assert exc_info.value.string_id == "UnitName_Mile"

    def test_empty_text_counts_as_missing(self):
        with pytest.raises(LocalizationError):
            DictStringProvider({"UnitName_Mile": ""}).resolve("UnitName_Mile")

    def test_fallback_consulted(self):
        provider = DictStringProvider({"UnitName_Mile": "Meilen"}, fallback=get_default_string_provider())
        assert provider.resolve("UnitName_Mile") == "Meilen"
        assert provider.resolve("UnitName_Meter") == "Meters"

    def test_table_is_copied(self):
        strings = {"UnitName_Mile": "Meilen"}
        provider = DictStringProvider(strings)
        strings["UnitName_Mile"] = "Miles"
        assert provider.resolve("UnitName_Mile") == "Meilen"


class TestBundledStrings:
    """The bundled strings cover every declared category and unit."""

    def test_every_category_has_a_name(self):
        for definition in CATEGORY_DEFINITIONS:
            assert f"CategoryName_{definition.string_key}" in DEFAULT_STRINGS

    def test_every_unit_has_name_and_abbreviation(self):
        for definitions in UNIT_DEFINITIONS.values():
            for definition in definitions:
                assert f"UnitName_{definition.string_key}" in DEFAULT_STRINGS
                assert f"UnitAbbreviation_{definition.string_key}" in DEFAULT_STRINGS
