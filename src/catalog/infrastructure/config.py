"""Application settings, read from the environment (and a ``.env`` file)."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# Repo root when installed in editable mode.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


class Settings:
    DATA_DIR: Path = Path(os.getenv("CATALOG_DATA_DIR", str(_DEFAULT_DATA_DIR)))

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")  # DEBUG, INFO, WARNING, ERROR

    # Daily lot sweep trigger, used by `catalog sweep schedule`
    SWEEP_AT: str = os.getenv("SWEEP_AT", "00:00")
    SWEEP_TIMEZONE: str = os.getenv("SWEEP_TIMEZONE", "")  # empty = server-local


settings = Settings()
