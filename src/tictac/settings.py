"""Environment-driven defaults.

Environment first, then built-in fallbacks. Command-line flags override both.
"""

from __future__ import annotations

import logging
import os

HUMAN_CHOICES = ("x", "o", "both", "none")

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_HUMAN = "x"


def log_level() -> int:
    name = os.getenv("TICTAC_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        logging.getLogger(__name__).warning("Unknown TICTAC_LOG_LEVEL=%r, using %s", name, DEFAULT_LOG_LEVEL)
        return logging.INFO
    return level


def default_human() -> str:
    raw = os.getenv("TICTAC_HUMAN")
    if not raw:
        return DEFAULT_HUMAN
    value = raw.strip().lower()
    if value not in HUMAN_CHOICES:
        logging.getLogger(__name__).warning("Unknown TICTAC_HUMAN=%r, using %s", raw, DEFAULT_HUMAN)
        return DEFAULT_HUMAN
    return value
