"""Localized string resolution for the unit catalog.

The catalog never formats display text itself; it asks a string provider for
every category name, unit name and abbreviation. Any object with a
``resolve(string_id) -> str`` method can act as a provider.

A provider that cannot resolve a string must raise LocalizationError. The
catalog treats that as fatal: a unit without a name cannot be presented.
"""

from typing import Mapping, Optional, Protocol

from ..utils.unit_strings import DEFAULT_STRINGS
from .exceptions import LocalizationError


class StringProvider(Protocol):
    """Anything that turns a string id into display text."""

    def resolve(self, string_id: str) -> str:
        ...


class DictStringProvider:
    """
    String provider backed by an in-memory table.

    Args:
        strings: String id -> text. Defaults to the bundled English strings.
        fallback: Optional provider consulted for ids missing from the table.
    """

    def __init__(
        self,
        strings: Optional[Mapping[str, str]] = None,
        fallback: Optional[StringProvider] = None,
    ):
        self._strings = dict(DEFAULT_STRINGS if strings is None else strings)
        self._fallback = fallback

    def resolve(self, string_id: str) -> str:
        """
        Resolve a string id.

        Raises:
            LocalizationError: If neither the table nor the fallback has the id
        """
        text = self._strings.get(string_id)
        if text:
            return text
        if self._fallback is not None:
            return self._fallback.resolve(string_id)
        raise LocalizationError(string_id)

    def __contains__(self, string_id: str) -> bool:
        return string_id in self._strings

    def __len__(self) -> int:
        return len(self._strings)


def get_default_string_provider() -> DictStringProvider:
    """Provider for the bundled en-US strings."""
    return DictStringProvider()
