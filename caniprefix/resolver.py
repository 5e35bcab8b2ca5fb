"""Vendor prefix resolution against a parsed Can I Use database."""

from __future__ import annotations

import logging
from pathlib import Path

from .constants import ALL_VENDORS, DEFAULT_ERA, PREF_ENABLED, PREF_ERA, PREF_VENDORS, PREFIXED_FLAG
from .model import DatabaseSnapshot, SupportTable, VendorInfo
from .parse_data import RawDatabase, load_database_file, parse_database
from .preferences import PreferenceReader
from .util.log import debug_log

LOGGER = logging.getLogger(__name__)

NOT_APPLICABLE = None


class PrefixResolver:
    """Answer which vendor prefixes a CSS property or at-rule still needs.

    The parsed tables live in a single immutable snapshot. ``load`` builds a
    new snapshot and swaps the reference only once parsing succeeded, so a
    failed reload leaves the previous database active.
    """

    def __init__(self, preferences: PreferenceReader, raw: RawDatabase | None = None) -> None:
        self.preferences = preferences
        self._snapshot: DatabaseSnapshot | None = None
        if raw is not None:
            self.load(raw)

    @property
    def snapshot(self) -> DatabaseSnapshot | None:
        return self._snapshot

    @property
    def is_loaded(self) -> bool:
        return self._snapshot is not None

    def load(self, raw: RawDatabase) -> None:
        """(Re)initialize lookup tables from a raw database."""
        self._snapshot = parse_database(raw)

    def load_file(self, path: str | Path) -> None:
        self._snapshot = load_database_file(path)

    def _vendors(self, snapshot: DatabaseSnapshot) -> list[str]:
        known = list(snapshot.vendors)
        configured = self.preferences.get_list(PREF_VENDORS)
        if not configured or configured[0] == ALL_VENDORS:
            return known
        return [vendor for vendor in known if vendor in configured]

    def _start_index(self, snapshot: DatabaseSnapshot) -> int:
        era = self.preferences.get_string(PREF_ERA)
        if era in snapshot.era_order:
            return snapshot.era_order.index(era)
        debug_log("Unknown era %r, falling back to %s", era, DEFAULT_ERA, logger=LOGGER)
        if DEFAULT_ERA in snapshot.era_order:
            return snapshot.era_order.index(DEFAULT_ERA)
        return 0

    @staticmethod
    def _needs_prefix(vendor: str, info: VendorInfo, stats: SupportTable, start: int) -> bool:
        vendor_stats = stats.get(vendor) or {}
        for version in info.versions[start:]:
            if not version:
                continue
            if PREFIXED_FLAG in (vendor_stats.get(version) or ""):
                return True
        return False

    def resolve_prefixes(self, identifier: str) -> list[str] | None:
        """Resolve prefixes for a property, value keyword or ``@``-rule.

        Returns ``None`` when prefixes can't be resolved: the feature is
        disabled, no database is loaded or the identifier is unknown. An empty
        list means the identifier needs no vendor prefix for the configured
        vendors and era.
        """
        snapshot = self._snapshot
        if not self.preferences.get_boolean(PREF_ENABLED):
            return NOT_APPLICABLE
        if snapshot is None:
            debug_log("No Can I Use database loaded", logger=LOGGER)
            return NOT_APPLICABLE
        stats = snapshot.property_support.get(identifier)
        if stats is None:
            return NOT_APPLICABLE

        start = self._start_index(snapshot)
        prefixes: list[str] = []
        for vendor in self._vendors(snapshot):
            info = snapshot.vendors[vendor]
            if not info.prefix:
                continue
            if info.prefix not in prefixes and self._needs_prefix(vendor, info, stats, start):
                prefixes.append(info.prefix)

        # Longest first; equal lengths keep encounter order.
        return sorted(prefixes, key=len, reverse=True)

    def expand_property(self, identifier: str) -> list[str] | None:
        """Return prefixed names followed by the bare one, e.g. ``-webkit-transform``."""
        prefixes = self.resolve_prefixes(identifier)
        if prefixes is None:
            return NOT_APPLICABLE
        if identifier.startswith("@"):
            name = identifier[1:]
            return [f"@{prefix}{name}" for prefix in prefixes] + [identifier]
        return [f"{prefix}{identifier}" for prefix in prefixes] + [identifier]
