"""Resolve CSS vendor prefixes from the Can I Use database."""

from ._version import __version__
from .exceptions import CaniuseError, DatabaseFileError, MalformedInputError
from .model import DatabaseSnapshot, VendorInfo
from .parse_data import load_database_file, parse_database
from .preferences import PreferenceReader, PreferenceStore, default_preferences
from .resolver import NOT_APPLICABLE, PrefixResolver

__all__ = [
    "NOT_APPLICABLE",
    "CaniuseError",
    "DatabaseFileError",
    "DatabaseSnapshot",
    "MalformedInputError",
    "PreferenceReader",
    "PreferenceStore",
    "PrefixResolver",
    "VendorInfo",
    "__version__",
    "default_preferences",
    "load_database_file",
    "parse_database",
]
