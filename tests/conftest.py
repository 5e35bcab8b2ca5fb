from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from caniprefix.preferences import PreferenceStore, default_preferences

RawFactory = Callable[..., dict[str, Any]]


def _make_database(*, a_codes: dict[str, str] | None = None) -> dict[str, Any]:
    """Two vendors over three eras; ``transform`` needs ``-a-`` at v2 only."""
    return {
        "agents": {
            "A": {"browser": "Alpha", "prefix": "-a-", "versions": ["v1", "v2", "v3"]},
            "B": {"browser": "Beta", "prefix": "-b-", "versions": ["w1", "w2", "w3"]},
        },
        "eras": {"e1": "Near future", "e-1": "Previous", "e0": "Current"},
        "data": {
            "transforms2d": {
                "title": "CSS3 2D Transforms",
                "stats": {
                    "A": a_codes or {"v1": "y", "v2": "a x", "v3": "y"},
                    "B": {"w1": "y", "w2": "y", "w3": "y"},
                },
            },
        },
    }


def _browsers_database() -> dict[str, Any]:
    """Real-looking vendors that all need a prefix for CSS animations."""
    agents = {
        "ie": {"prefix": "-ms-", "versions": ["9", "10", "11"]},
        "firefox": {"prefix": "-moz-", "versions": ["50", "51", "52"]},
        "chrome": {"prefix": "-webkit-", "versions": ["60", "61", "62"]},
        "safari": {"prefix": "-webkit-", "versions": ["10", "11", None]},
        "opera": {"prefix": "-o-", "versions": ["40", "41", "42"]},
    }
    stats = {
        vendor: {version: "a x d #1" for version in agent["versions"] if version}
        for vendor, agent in agents.items()
    }
    return {
        "agents": agents,
        "eras": {"e0": "", "e-2": "", "e-1": ""},
        "data": {"css-animation": {"stats": stats}},
    }


@pytest.fixture
def make_raw() -> RawFactory:
    return _make_database


@pytest.fixture
def raw_database() -> dict[str, Any]:
    return _make_database()


@pytest.fixture
def browsers_database() -> dict[str, Any]:
    return _browsers_database()


@pytest.fixture
def preferences() -> PreferenceStore:
    store = default_preferences()
    store.set("caniuse.era", "e0")
    return store
