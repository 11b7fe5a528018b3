"""
Runtime settings for dnd-roster.

Values come from a ``.env`` file, the process environment and finally the
command line, in increasing order of precedence.
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger("dnd-roster.config")

DEFAULT_DATA_FILE = "characters.json"
DEFAULT_LOG_LEVEL = "INFO"

DATA_FILE_ENV = "DND_ROSTER_DATA_FILE"
LOG_LEVEL_ENV = "DND_ROSTER_LOG_LEVEL"


class Settings(BaseModel):
    """Resolved configuration for one run of the roster."""
    data_file: Path = Field(default=Path(DEFAULT_DATA_FILE), description="Snapshot file holding the roster")
    log_level: str = Field(default=DEFAULT_LOG_LEVEL, description="Minimum level of notices shown on the terminal")

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, value: object) -> str:
        name = str(value or "").strip().upper()
        if name not in logging.getLevelNamesMapping():
            logger.warning(f"⚠️ Unknown log level '{value}', using {DEFAULT_LOG_LEVEL}")
            return DEFAULT_LOG_LEVEL
        return name


def load_settings(
    data_file: str | Path | None = None,
    log_level: str | None = None,
    dotenv_path: str | Path | None = None,
) -> Settings:
    """Build Settings from .env, environment variables and explicit overrides.

    Args:
        data_file: Overrides DND_ROSTER_DATA_FILE when given.
        log_level: Overrides DND_ROSTER_LOG_LEVEL when given.
        dotenv_path: Explicit .env location. Searched for when omitted.
    """
    if not load_dotenv(dotenv_path=dotenv_path):
        logger.debug("📄 No .env file loaded, using environment and defaults.")

    return Settings(
        data_file=data_file or os.getenv(DATA_FILE_ENV, DEFAULT_DATA_FILE),
        log_level=log_level or os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL),
    )
