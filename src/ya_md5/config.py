from __future__ import annotations

import logging
import os

logger = logging.getLogger(__name__)

# Per-step compression dumps go below DEBUG.
TRACE = 5
logging.addLevelName(TRACE, "TRACE")

DEFAULT_READ_CHUNK_SIZE = 64 * 1024


def _positive_int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        value = 0
    if value <= 0:
        logger.warning("Ignoring %s=%r, expected a positive integer; using %d", name, raw, default)
        return default
    return value


READ_CHUNK_SIZE = _positive_int_env("YA_MD5_READ_CHUNK_SIZE", DEFAULT_READ_CHUNK_SIZE)
LOG_LEVEL = os.getenv("YA_MD5_LOG_LEVEL", "WARNING").upper()


__all__ = ["TRACE", "DEFAULT_READ_CHUNK_SIZE", "READ_CHUNK_SIZE", "LOG_LEVEL"]
