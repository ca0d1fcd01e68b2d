"""Configuration utilities for shingles.

The core windowers take plain arguments; this module is for callers such as
the command line.  :class:`Settings` groups default window sizes and steps,
hashing parameters and logging options.  Instances can be populated from
environment variables or from YAML/JSON files with matching nested keys.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic_settings.sources import EnvSettingsSource

from .core.hasher import DEFAULT_DIGEST_SIZE, DEFAULT_KEY
from .utils.logging import DEFAULT_FORMAT, resolve_level


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _split_ints(value: str) -> list[int]:
    return [int(item) for item in value.split(",") if item.strip()]


def _coerce_pair(value: Any) -> Any:
    if isinstance(value, str):
        return _split_ints(value)
    if isinstance(value, int):
        return [value, value]
    if isinstance(value, (list, tuple)):
        return [int(item) for item in value]
    return value


def _check_pair(value: list[int]) -> list[int]:
    if len(value) != 2:
        raise ValueError("expected an [x, y] pair")
    if any(item < 1 for item in value):
        raise ValueError("pair entries must be at least 1")
    return value


class SectionModel(BaseModel):
    """Base model for configuration subsections that ignores unknown fields."""

    model_config = ConfigDict(extra="ignore")


# ---------------------------------------------------------------------------
# Settings schema
# ---------------------------------------------------------------------------


class WindowSettings(SectionModel):
    """Defaults for one-dimensional shingles."""

    size: int = Field(default=4, ge=1)
    step: int = Field(default=1, ge=1)


class Window2DSettings(SectionModel):
    """Defaults for 2D shingles, as ``[x, y]`` pairs."""

    size: list[int] = Field(default_factory=lambda: [3, 3])
    step: list[int] = Field(default_factory=lambda: [1, 1])

    @field_validator("size", "step", mode="before")
    @classmethod
    def _coerce_int_pair(cls, value: Any) -> Any:
        return _coerce_pair(value)

    @field_validator("size", "step")
    @classmethod
    def _validate_pair(cls, value: list[int]) -> list[int]:
        return _check_pair(value)


class HasherSettings(SectionModel):
    """Keyed hash parameters."""

    key: str = DEFAULT_KEY.hex()
    digest_size: int = Field(default=DEFAULT_DIGEST_SIZE, ge=1, le=64)

    @field_validator("key")
    @classmethod
    def _validate_key(cls, value: str) -> str:
        try:
            raw = bytes.fromhex(value)
        except ValueError:
            raise ValueError("key must be a hex string") from None
        if len(raw) > 64:
            raise ValueError("key must be at most 64 bytes")
        return value

    @property
    def key_bytes(self) -> bytes:
        return bytes.fromhex(self.key)


class LoggingSettings(SectionModel):
    """Logging options for the command line."""

    level: str = "WARNING"
    format: str = DEFAULT_FORMAT

    @field_validator("level")
    @classmethod
    def _validate_level(cls, value: str) -> str:
        resolve_level(value)
        return value.strip().upper()


class Settings(BaseSettings):
    """Container for all runtime configuration sections."""

    window: WindowSettings = Field(default_factory=WindowSettings)
    window_2d: Window2DSettings = Field(default_factory=Window2DSettings)
    hasher: HasherSettings = Field(default_factory=HasherSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_prefix="SHINGLES_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from ``SHINGLES_*`` environment variables."""

        return cls()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        class LegacyEnvSettingsSource(EnvSettingsSource):
            def decode_complex_value(self, field_name, target_field, value):  # type: ignore[override]
                try:
                    return super().decode_complex_value(field_name, target_field, value)
                except json.JSONDecodeError:
                    return value

        env_settings.__class__ = LegacyEnvSettingsSource
        return init_settings, env_settings, dotenv_settings, file_secret_settings


# ---------------------------------------------------------------------------
# Loading utilities
# ---------------------------------------------------------------------------


def load_settings(path: str | Path) -> Settings:
    """Load settings from a JSON or YAML file."""

    p = Path(path)
    text = p.read_text()
    if p.suffix.lower() in {".yaml", ".yml"}:
        data = yaml.safe_load(text) or {}
    else:
        data = json.loads(text)
    if not isinstance(data, dict):
        raise TypeError("Configuration file must define a mapping")
    return Settings.model_validate(data)
