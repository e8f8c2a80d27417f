"""Runtime settings, read from the environment (and a .env file if present)."""

from __future__ import annotations

import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

DEFAULT_LOG_FILE = "eee_log.txt"
DEFAULT_LOG_LEVEL = "WARNING"

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseModel):
    log_file: str = Field(DEFAULT_LOG_FILE, min_length=1, description="Calculation log path")
    log_level: str = Field(DEFAULT_LOG_LEVEL, description="Diagnostic logging level")

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log level must be one of {', '.join(_LOG_LEVELS)}")
        return level


def load_settings(log_file: Optional[str] = None, log_level: Optional[str] = None) -> Settings:
    """
    Build Settings from EEE_LOG_FILE / EEE_LOG_LEVEL.

    Explicit arguments (command-line flags) win over the environment.
    """
    load_dotenv()
    return Settings(
        log_file=log_file or os.getenv("EEE_LOG_FILE", DEFAULT_LOG_FILE),
        log_level=log_level or os.getenv("EEE_LOG_LEVEL", DEFAULT_LOG_LEVEL),
    )
