"""Application configuration handling."""

from __future__ import annotations

import os
import shlex
from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import BaseModel, Field, field_validator

ENV_PREFIX = "DCOL_"
DEFAULT_CONFIG_PATH = Path("~/.config/design-collector/config.yaml")
DEFAULT_DATA_DIR = Path.home() / ".claude" / "skills" / "ui-ux-pro-max" / "data"

_YAML_KEY_MAP: Mapping[tuple[str, ...], str] = {
    ("storage", "data_dir"): "data_dir",
    ("storage", "table_name"): "table_name",
    ("storage", "stats_files"): "stats_files",
    ("generator", "command"): "generator_command",
    ("generator", "timeout"): "generator_timeout",
    ("generator", "enabled"): "generator_enabled",
    ("browser", "timeout_ms"): "browser_timeout_ms",
    ("browser", "viewport_width"): "viewport_width",
    ("browser", "viewport_height"): "viewport_height",
    ("server", "host"): "host",
    ("server", "port"): "port",
    ("server", "cors_origins"): "cors_origins",
}


class Settings(BaseModel):
    """Runtime configuration loaded from YAML file and environment variables.

    ``data_dir`` defaults to the ui-ux-pro-max skill data directory, which also
    holds the reference tables counted by ``stats_files``.
    """

    data_dir: Path = Field(default=DEFAULT_DATA_DIR)
    table_name: str = "collected-designs.csv"
    stats_files: list[str] = Field(
        default_factory=lambda: ["styles.csv", "colors.csv", "typography.csv", "collected-designs.csv"]
    )
    generator_command: str = "claude -p"
    generator_timeout: float = 60.0
    generator_enabled: bool = True
    browser_timeout_ms: int = 60000
    viewport_width: int = 1440
    viewport_height: int = 900
    host: str = "127.0.0.1"
    port: int = 3847
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    model_config = {
        "validate_assignment": True,
        "extra": "ignore",
    }

    @field_validator("data_dir", mode="before")
    @classmethod
    def _expand_data_dir(cls, value: Any) -> Path:
        if isinstance(value, Path):
            return value.expanduser()
        if isinstance(value, str):
            return Path(value).expanduser()
        raise TypeError("data_dir must be a path or string")

    @field_validator("stats_files", "cors_origins", mode="before")
    @classmethod
    def _split_csv_env(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [part.strip() for part in value.split(",") if part.strip()]
        return value

    @property
    def table_path(self) -> Path:
        return self.data_dir / self.table_name

    @property
    def generator_argv(self) -> list[str]:
        return shlex.split(self.generator_command)

    @classmethod
    def from_yaml(cls, path: Path | None = None) -> "Settings":
        """Load YAML config and overlay env vars; fall back to defaults."""
        config_path = cls._resolve_config_path(path)
        data: dict[str, Any] = {}
        if config_path and config_path.exists():
            with config_path.open("r", encoding="utf-8") as fh:
                raw = yaml.safe_load(fh) or {}
            data.update(_flatten_yaml(raw))
        data.update(_load_env_overrides())
        return cls(**data)

    @staticmethod
    def _resolve_config_path(path: Path | None) -> Path | None:
        if path is not None:
            return path.expanduser()
        env_path = os.environ.get(f"{ENV_PREFIX}CONFIG")
        if env_path:
            return Path(env_path).expanduser()
        resolved_default = DEFAULT_CONFIG_PATH.expanduser()
        return resolved_default if resolved_default.exists() else None


def _flatten_yaml(raw: Mapping[str, Any], prefix: tuple[str, ...] = ()) -> dict[str, Any]:
    """Flatten nested YAML configuration to Settings field names."""
    flat: dict[str, Any] = {}
    for key, value in raw.items():
        next_prefix = prefix + (key,)
        if isinstance(value, Mapping):
            flat.update(_flatten_yaml(value, prefix=next_prefix))
        else:
            mapped_key = _YAML_KEY_MAP.get(next_prefix)
            if mapped_key:
                flat[mapped_key] = value
            elif key in Settings.model_fields:
                flat[key] = value
    return flat


def _load_env_overrides() -> dict[str, Any]:
    """Map environment variables with DCOL_ prefix into Settings fields."""
    overrides: dict[str, Any] = {}
    for key, value in os.environ.items():
        if not key.startswith(ENV_PREFIX):
            continue
        field_name = key[len(ENV_PREFIX) :].lower()
        if field_name in Settings.model_fields:
            overrides[field_name] = value
    return overrides


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached settings accessor for dependency injection."""
    return Settings.from_yaml()


__all__ = ["Settings", "get_settings"]
