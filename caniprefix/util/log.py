"""Debug logging helpers."""

from __future__ import annotations

import logging
import os

from ..constants import DEBUG_ENV_VAR

LOGGER = logging.getLogger("caniprefix")


def debug_enabled() -> bool:
    """Check debug mode env flag."""
    return os.environ.get(DEBUG_ENV_VAR, "").strip() == "1"


def debug_log(message: str, *args: object, logger: logging.Logger = LOGGER) -> None:
    """Emit debug logs in debug mode only."""
    if debug_enabled():
        logger.debug(message, *args)
