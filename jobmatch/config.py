# jobmatch/config.py
from __future__ import annotations

import logging
import os

# Scoring weights live in jobmatch.matching.scoring and are deliberately not
# read from the environment.

# --- Ranking ---

# How many recommendations the CLI prints when --limit is not given.
DEFAULT_LIMIT_FALLBACK = 10

# --- Logging ---

DEFAULT_LOG_LEVEL = "WARNING"


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_log_level(name: str, default: str) -> str:
    raw = (os.getenv(name) or "").strip().upper()
    if raw and isinstance(logging.getLevelName(raw), int):
        return raw
    return default


JOBMATCH_DEFAULT_LIMIT: int = max(0, _env_int("JOBMATCH_DEFAULT_LIMIT", DEFAULT_LIMIT_FALLBACK))

JOBMATCH_LOG_LEVEL: str = _env_log_level("JOBMATCH_LOG_LEVEL", DEFAULT_LOG_LEVEL)


def configure_logging(level: str | None = None) -> None:
    """Root logging setup for the CLI. Library modules only create loggers."""
    logging.basicConfig(
        level=getattr(logging, (level or JOBMATCH_LOG_LEVEL).upper(), logging.WARNING),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
