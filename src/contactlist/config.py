"""Runtime settings from environment variables (and a .env file in the working directory)."""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

FILE_ENV = "CONTACTLIST_FILE"
LOG_LEVEL_ENV = "CONTACTLIST_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    """default_file is offered when the user leaves the path prompt empty."""

    default_file: str | None = None
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def log_level_number(self) -> int:
        level = logging.getLevelName(self.log_level)
        return level if isinstance(level, int) else logging.WARNING


def load_env_file(directory: Path | None = None) -> bool:
    """Load .env from directory (default: cwd) without overriding set variables."""
    path = (directory or Path.cwd()) / ".env"
    if path.exists():
        return load_dotenv(path)
    return False


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    env = os.environ if environ is None else environ
    default_file = env.get(FILE_ENV, "").strip() or None
    log_level = env.get(LOG_LEVEL_ENV, "").strip().upper() or DEFAULT_LOG_LEVEL
    return Settings(default_file=default_file, log_level=log_level)
