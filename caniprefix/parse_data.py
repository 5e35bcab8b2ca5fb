"""Can I Use database parser."""

from __future__ import annotations

from collections.abc import Mapping
import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Union

from .constants import CSS_SECTIONS, ERA_PREFIX
from .exceptions import DatabaseFileError, MalformedInputError
from .model import DatabaseSnapshot, SupportTable, VendorInfo
from .util.log import debug_log

LOGGER = logging.getLogger(__name__)

RawDatabase = Union[Mapping[str, Any], str, bytes]


def _decode(raw: RawDatabase) -> Mapping[str, Any]:
    if isinstance(raw, (str, bytes)):
        try:
            raw = json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise MalformedInputError(cause=exc.__class__.__name__) from exc
    if not isinstance(raw, Mapping):
        raise MalformedInputError(cause=f"expected an object, got {type(raw).__name__}")
    return raw


def _section(data: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    section = data.get(name)
    return section if isinstance(section, Mapping) else {}


def _parse_vendors(data: Mapping[str, Any]) -> dict[str, VendorInfo]:
    vendors: dict[str, VendorInfo] = {}
    for name, agent in _section(data, "agents").items():
        if not isinstance(agent, Mapping):
            continue
        vendors[name] = VendorInfo(
            prefix=agent.get("prefix"),
            versions=tuple(agent.get("versions") or ()),
        )
    return vendors


def _support_table(section: Any) -> SupportTable:
    """Copy a section's vendor/version cells into read-only mappings."""
    if isinstance(section, Mapping) and isinstance(section.get("stats"), Mapping):
        section = section["stats"]
    if not isinstance(section, Mapping):
        return MappingProxyType({})
    return MappingProxyType(
        {
            vendor: MappingProxyType(dict(cells))
            for vendor, cells in section.items()
            if isinstance(cells, Mapping)
        }
    )


def _parse_properties(data: Mapping[str, Any]) -> dict[str, SupportTable]:
    features = _section(data, "data")
    properties: dict[str, SupportTable] = {}
    for name, identifiers in CSS_SECTIONS.items():
        if name not in features:
            continue
        table = _support_table(features[name])
        for identifier in identifiers:
            properties[identifier] = table
    return properties


def _era_index(era: str) -> int:
    return int(era[len(ERA_PREFIX) :])


def _parse_eras(data: Mapping[str, Any]) -> tuple[str, ...]:
    # Key order of the input is not trusted.
    return tuple(sorted(_section(data, "eras"), key=_era_index))


def parse_database(raw: RawDatabase) -> DatabaseSnapshot:
    """Parse a raw Can I Use document (decoded or JSON text) into lookup tables."""
    data = _decode(raw)
    try:
        era_order = _parse_eras(data)
    except ValueError as exc:
        raise MalformedInputError(cause="invalid era identifier") from exc

    snapshot = DatabaseSnapshot(
        vendors=MappingProxyType(_parse_vendors(data)),
        property_support=MappingProxyType(_parse_properties(data)),
        era_order=era_order,
    )
    debug_log(
        "Parsed %d vendors, %d properties, %d eras",
        len(snapshot.vendors),
        len(snapshot.property_support),
        len(snapshot.era_order),
        logger=LOGGER,
    )
    return snapshot


def load_database_file(path: str | Path) -> DatabaseSnapshot:
    """Read and parse a Can I Use JSON file."""
    try:
        raw = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DatabaseFileError(str(path), cause=exc.__class__.__name__) from exc
    return parse_database(raw)
