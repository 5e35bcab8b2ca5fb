"""Preference storage consulted by the prefix resolver."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol, Union

from .constants import ALL_VENDORS, DEFAULT_ERA, PREF_ENABLED, PREF_ERA, PREF_VENDORS
from .util.text import normalize_whitespace, split_list

PreferenceValue = Union[bool, str, Sequence[str]]


class PreferenceReader(Protocol):
    def get_boolean(self, key: str) -> bool: ...

    def get_list(self, key: str) -> list[str]: ...

    def get_string(self, key: str) -> str: ...


@dataclass(frozen=True)
class PreferenceDefinition:
    key: str
    default: PreferenceValue
    description: str


class PreferenceStore:
    """In-memory key/value preferences with declared defaults and typed getters."""

    def __init__(self) -> None:
        self._definitions: dict[str, PreferenceDefinition] = {}
        self._values: dict[str, PreferenceValue] = {}

    def define(self, key: str, default: PreferenceValue, description: str = "") -> None:
        self._definitions[key] = PreferenceDefinition(key, default, description)

    def set(self, key: str, value: PreferenceValue) -> None:
        if key not in self._definitions:
            raise KeyError(f"Preference {key!r} is not defined")
        self._values[key] = value

    def reset(self, key: str | None = None) -> None:
        """Restore one preference, or all of them, to the declared default."""
        if key is None:
            self._values.clear()
        else:
            self._values.pop(key, None)

    def get(self, key: str) -> PreferenceValue | None:
        if key in self._values:
            return self._values[key]
        definition = self._definitions.get(key)
        return definition.default if definition is not None else None

    def describe(self, key: str) -> str:
        definition = self._definitions.get(key)
        return definition.description if definition is not None else ""

    def get_boolean(self, key: str) -> bool:
        value = self.get(key)
        if isinstance(value, str):
            return normalize_whitespace(value).lower() in {"1", "true", "yes", "on"}
        return bool(value)

    def get_list(self, key: str) -> list[str]:
        value = self.get(key)
        if value is None or isinstance(value, bool):
            return []
        if isinstance(value, str):
            return split_list(value)
        return [normalize_whitespace(str(item)) for item in value if str(item).strip()]

    def get_string(self, key: str) -> str:
        value = self.get(key)
        if value is None:
            return ""
        if isinstance(value, str):
            return normalize_whitespace(value)
        if isinstance(value, bool):
            return str(value).lower()
        return ",".join(value)


def define_caniuse_preferences(store: PreferenceStore) -> PreferenceStore:
    """Declare the preferences the resolver reads, with their defaults."""
    store.define(
        PREF_ENABLED,
        True,
        "Enable support of Can I Use database. When enabled, the CSS resolver "
        "looks at the Can I Use database before guessing vendor-prefixed properties.",
    )
    store.define(
        PREF_VENDORS,
        ALL_VENDORS,
        "A comma-separated list of vendor identifiers (as described in the Can I Use "
        "database) to support when resolving vendor-prefixed properties. Set to "
        f"'{ALL_VENDORS}' to support every vendor.",
    )
    store.define(
        PREF_ERA,
        DEFAULT_ERA,
        "Browser era, as defined in the Can I Use database. Examples: 'e0' (current "
        "version), 'e1' (near future), 'e-2' (2 versions back) and so on.",
    )
    return store


def default_preferences() -> PreferenceStore:
    return define_caniuse_preferences(PreferenceStore())
