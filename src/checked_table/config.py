"""Shared configuration for checked_table: project root, environment and logging setup."""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

# ─── Project Root & Environment ───────────────────────────────────────────────

ROOT = Path(__file__).parent.parent.parent.resolve()
load_dotenv(ROOT / ".env")

# ─── Logging ──────────────────────────────────────────────────────────────────

LOG_LEVEL_ENV_VAR = "CHECKED_TABLE_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

LOG_LEVEL = os.getenv(LOG_LEVEL_ENV_VAR, "WARNING").upper()


def configure_logging(level: str | int | None = None) -> None:
    """Install a root handler using LOG_FORMAT.  Defaults to LOG_LEVEL when *level* is None."""
    logging.basicConfig(level=level if level is not None else LOG_LEVEL, format=LOG_FORMAT)
