"""
caljalali.core.providers
------------------------
Capability boundaries between the calendar arithmetic and its collaborators:
translated names (LocaleProvider), site/user settings (PreferenceProvider) and
timestamp handling on the Gregorian side (GregorianService).

Everything in the package receives these as arguments; nothing reads ambient
global configuration.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol

from .errors import MissingTranslation
from .types import GregorianDateArray


class LocaleProvider(Protocol):
    def name_for(self, key: str) -> str:
        """
        Display text for a translation key such as 'month3', 'weekday0', 'am'.
        Must raise MissingTranslation for unknown keys.
        """
        ...


class PreferenceProvider(Protocol):
    def get(self, name: str, default: Any = None) -> Any:
        """Configured value for `name`, or `default` when unset."""
        ...


class GregorianService(Protocol):
    def timestamp_to_date_array(self, time: int, timezone: Any = 99) -> GregorianDateArray:
        """Gregorian fields of a UTC timestamp under a timezone."""
        ...

    def format(self, time: int, template: str, timezone: Any = 99,
               fix_day: bool = True, fix_hour: bool = True) -> str:
        """strftime-style rendering of whatever tokens are left in `template`."""
        ...


class MappingLocale:
    """LocaleProvider over a plain mapping of key -> text."""

    def __init__(self, strings: Mapping[str, str], *, name: Optional[str] = None):
        self._strings = dict(strings)
        self.name = name

    def name_for(self, key: str) -> str:
        try:
            return self._strings[key]
        except KeyError:
            label = f" in locale '{self.name}'" if self.name else ""
            raise MissingTranslation(f"No translation for '{key}'{label}") from None


class MappingPreferences:
    """PreferenceProvider over a plain mapping; None values count as unset."""

    def __init__(self, values: Optional[Mapping[str, Any]] = None):
        self._values = dict(values or {})

    def get(self, name: str, default: Any = None) -> Any:
        value = self._values.get(name)
        return default if value is None else value
