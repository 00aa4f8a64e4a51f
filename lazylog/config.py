# Config
"""
Configuration for the lazylog analyzer.

Values come from LAZYLOG_* environment variables (a local .env file is
honoured) and can be overridden by keyword arguments.
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

load_dotenv()


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(f"LAZYLOG_{name}", default)


def _env_flag(name: str, default: str = "false") -> bool:
    return (_env(name, default) or "").strip().lower() in {"1", "true", "yes", "on"}


class Settings(BaseModel):
    model_config = ConfigDict(validate_default=True)

    # Logging
    log_level: str = Field(default_factory=lambda: _env("LOG_LEVEL", "INFO"))
    log_file_path: Optional[Path] = Field(default_factory=lambda: _env("LOG_FILE"))
    dev_mode: bool = Field(default_factory=lambda: _env_flag("DEV_MODE"))
    structured_logging: bool = Field(default_factory=lambda: _env_flag("STRUCTURED_LOGS", "true"))

    # Output
    placeholder: str = Field(default_factory=lambda: _env("PLACEHOLDER", "[json-object]"))
    json_indent: int = Field(default_factory=lambda: _env("JSON_INDENT", "2"))

    # Reading
    encoding: str = Field(default_factory=lambda: _env("ENCODING", "utf-8"))
    chunk_size: int = Field(default_factory=lambda: _env("CHUNK_SIZE", "4096"))

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"log_level must be a standard logging level, got '{value}'")
        return level

    @field_validator("placeholder")
    @classmethod
    def validate_placeholder(cls, value: str) -> str:
        if not value:
            raise ValueError("placeholder must not be empty")
        return value

    @field_validator("json_indent")
    @classmethod
    def validate_json_indent(cls, value: int) -> int:
        if value < 0:
            raise ValueError("json_indent must not be negative")
        return value

    @field_validator("chunk_size")
    @classmethod
    def validate_chunk_size(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("chunk_size must be positive")
        return value

    def get_log_file_path(self) -> Optional[Path]:
        """Return the log file path, creating its directory when needed."""
        if self.log_file_path is None:
            return None
        self.log_file_path.parent.mkdir(parents=True, exist_ok=True)
        return self.log_file_path

# Singleton instance
_settings = None

def get_settings():
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    global _settings
    _settings = None
