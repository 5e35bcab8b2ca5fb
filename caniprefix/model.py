"""Data models for the parsed support database."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

SupportTable = Mapping[str, Mapping[str, str]]


@dataclass(frozen=True)
class VendorInfo:
    prefix: str | None
    versions: tuple[str | None, ...]


@dataclass(frozen=True)
class DatabaseSnapshot:
    """Vendors, property support and era order parsed from one raw database."""

    vendors: Mapping[str, VendorInfo] = field(default_factory=lambda: MappingProxyType({}))
    property_support: Mapping[str, SupportTable] = field(
        default_factory=lambda: MappingProxyType({})
    )
    era_order: tuple[str, ...] = ()
