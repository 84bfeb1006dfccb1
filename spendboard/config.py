"""
Runtime configuration.

Values come from ``SPENDBOARD_*`` environment variables; anything unset
falls back to the defaults below.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

DEFAULT_DATA_PATH = "~/.spendboard/expenses.json"
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Config:
    data_path: Path
    log_level: str = DEFAULT_LOG_LEVEL


def load_config(environ: Mapping[str, str] = os.environ) -> Config:
    """Build a :class:`Config` from *environ* (defaults to the process env)."""
    raw_path = environ.get("SPENDBOARD_DATA_PATH") or DEFAULT_DATA_PATH
    return Config(
        data_path=Path(raw_path).expanduser(),
        log_level=environ.get("SPENDBOARD_LOG_LEVEL") or DEFAULT_LOG_LEVEL,
    )
