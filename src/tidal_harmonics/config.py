"""Environment-driven defaults for the command-line edge.

The compute core never reads the environment; only the CLI consults these
helpers, so library calls stay pure functions of their arguments.

Variables:
- TIDAL_HARMONICS_LOG_LEVEL: Logging level name (default WARNING)
- TIDAL_HARMONICS_STEP_MINUTES: Default sampling step in minutes (default 6)
- TIDAL_HARMONICS_STATION: Default station id (default 9414290, San Francisco)
"""

from __future__ import annotations

import logging
import os

import numpy as np

LOG_LEVEL_ENV = "TIDAL_HARMONICS_LOG_LEVEL"
STEP_MINUTES_ENV = "TIDAL_HARMONICS_STEP_MINUTES"
STATION_ENV = "TIDAL_HARMONICS_STATION"

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_STEP_MINUTES = 6.0
DEFAULT_STATION_ID = "9414290"

LOG_LEVEL_CHOICES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_cli_handler: logging.Handler | None = None


def default_log_level() -> str:
    raw = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).strip().upper()
    if raw not in LOG_LEVEL_CHOICES:
        return DEFAULT_LOG_LEVEL
    return raw


def default_step_minutes() -> float:
    raw = os.getenv(STEP_MINUTES_ENV, str(DEFAULT_STEP_MINUTES))
    try:
        value = float(raw)
    except ValueError:
        return DEFAULT_STEP_MINUTES
    if not np.isfinite(value) or value <= 0.0:
        return DEFAULT_STEP_MINUTES
    return value


def default_station_id() -> str:
    raw = os.getenv(STATION_ENV, "").strip()
    return raw or DEFAULT_STATION_ID


def configure_logging(level: str | None = None) -> None:
    """Install a stderr handler on the package logger.

    Used by the CLI; library users configure logging themselves. Repeated
    calls replace the handler so it always targets the current stderr.
    """
    global _cli_handler
    name = (level or default_log_level()).upper()
    logger = logging.getLogger("tidal_harmonics")
    logger.setLevel(getattr(logging, name, logging.WARNING))
    if _cli_handler is not None:
        logger.removeHandler(_cli_handler)
    _cli_handler = logging.StreamHandler()
    _cli_handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    logger.addHandler(_cli_handler)
