"""
Application settings for the taskmgrr dashboard server.

Settings are an explicit structure handed to ``create_app``; ``from_env``
builds one from environment variables (and a local ``.env`` file).
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator


PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Matches the path the taskmgrr.sh producer appends to.
DEFAULT_LOG_PATH = Path.home() / ".taskmgrr_data" / "history_graph.json"
DEFAULT_STATIC_DIR = PROJECT_ROOT / "public"


class Settings(BaseModel):
    host: str = "127.0.0.1"
    port: int = Field(3000, ge=1, le=65535)
    log_path: Path = DEFAULT_LOG_PATH
    tail_window: int = Field(60, ge=1)
    static_dir: Path = DEFAULT_STATIC_DIR
    data_rate_limit: str = "120/minute"
    log_level: str = "INFO"

    @field_validator("log_path", "static_dir")
    @classmethod
    def expand_user(cls, value: Path) -> Path:
        return Path(value).expanduser()

    @field_validator("log_level")
    @classmethod
    def upper_level(cls, value: str) -> str:
        return value.upper()

    @classmethod
    def from_env(cls) -> "Settings":
        """Read settings from the environment, falling back to defaults."""
        load_dotenv()
        return cls(
            host=os.getenv("HOST", "127.0.0.1"),
            port=os.getenv("PORT", "3000"),
            log_path=os.getenv("LOG_PATH", str(DEFAULT_LOG_PATH)),
            tail_window=os.getenv("TAIL_WINDOW", "60"),
            static_dir=os.getenv("STATIC_DIR", str(DEFAULT_STATIC_DIR)),
            data_rate_limit=os.getenv("DATA_RATE_LIMIT", "120/minute"),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )


__all__ = ["Settings", "DEFAULT_LOG_PATH", "DEFAULT_STATIC_DIR", "PROJECT_ROOT"]
