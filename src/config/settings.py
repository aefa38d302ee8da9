# src/config/settings.py - v1
"""Typed configuration loaded from .env via pydantic-settings.

Single source of truth for storage location, file naming and logging.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigurationError(Exception):
    """Raised when configuration is internally inconsistent."""


class Settings(BaseSettings):
    """Application settings loaded from .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # === Storage location ===
    documents_dir: Path | None = None
    storage_subdir: str = "CacheStorage"
    default_file_name: str = "default.json"

    # === Serialization ===
    json_indent: int | None = None
    atomic_writes: bool = True

    # === Logging ===
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["json", "text"] = "text"
    log_file: Path | None = None
    log_rotation: str = "10MB"
    log_retention: int = 30

    # --- Validators ---

    @field_validator("storage_subdir", "default_file_name")
    @classmethod
    def validate_path_component(cls, v: str, info) -> str:  # noqa: N805
        """Must be a single, non-empty path component."""
        v = v.strip()
        if not v:
            raise ValueError(f"{info.field_name} must not be empty")
        if "/" in v or "\\" in v or v in {".", ".."}:
            raise ValueError(f"{info.field_name} must be a single path component")
        return v

    @field_validator("json_indent")
    @classmethod
    def validate_json_indent(cls, v: int | None) -> int | None:  # noqa: N805
        if v is not None and v < 0:
            raise ValueError("json_indent must be >= 0")
        return v

    @model_validator(mode="after")
    def validate_config_consistency(self) -> Settings:
        """Validate cross-field consistency rules."""
        errors: list[str] = []

        if self.default_file_name == self.storage_subdir:
            errors.append(
                "DEFAULT_FILE_NAME must differ from STORAGE_SUBDIR"
            )

        if self.log_retention < 0:
            errors.append("LOG_RETENTION must be >= 0")

        if errors:
            raise ConfigurationError("; ".join(errors))

        return self

    # --- Helpers ---

    @property
    def documents_path(self) -> Path | None:
        """Expanded documents directory override, if any."""
        if self.documents_dir is None:
            return None
        return self.documents_dir.expanduser()


def load_settings(**overrides: object) -> Settings:
    """Load settings from .env with optional overrides.

    Args:
        **overrides: Field-level overrides (for testing or per-cache config).

    Returns:
        Validated Settings instance.

    Raises:
        ConfigurationError: If configuration is internally inconsistent.
    """
    return Settings(**overrides)  # type: ignore[arg-type]
