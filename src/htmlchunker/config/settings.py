"""Pydantic settings for htmlchunker configuration."""

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from htmlchunker.depth.ranges import MAX_EXPANDED_CHAPTERS
from htmlchunker.exceptions import ConfigError


def get_config_dir() -> Path:
    """Get the configuration directory."""
    return Path.home() / ".htmlchunker"


def get_config_path() -> Path:
    """Get the path to the config file."""
    return get_config_dir() / "config.yaml"


def _load_yaml_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from YAML file if it exists.

    Returns:
        Dictionary of configuration values, or empty dict if file doesn't exist.
    """
    config_path = config_path or get_config_path()
    if config_path.exists():
        try:
            with open(config_path) as f:
                data = yaml.safe_load(f)
        except (yaml.YAMLError, OSError):
            # Silently ignore malformed or unreadable config
            return {}
        return data if isinstance(data, dict) else {}
    return {}


class OutputSettings(BaseModel):
    """Settings for output."""

    directory: Path = Path("html_chunks")


class DepthSettings(BaseModel):
    """Settings for depth specifier resolution."""

    default: str = "1"
    max_chapters: int = Field(default=MAX_EXPANDED_CHAPTERS, ge=1)


class Settings(BaseSettings):
    """Main settings model for htmlchunker."""

    model_config = SettingsConfigDict(
        env_prefix="HTMLCHUNKER_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    output: OutputSettings = Field(default_factory=OutputSettings)
    depth: DepthSettings = Field(default_factory=DepthSettings)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        # Environment overrides values passed in from the YAML file
        return env_settings, init_settings, dotenv_settings, file_secret_settings


def load_settings(config_path: Path | None = None) -> Settings:
    """Build settings from the YAML file and the environment.

    Raises:
        ConfigError: If a value fails validation.
    """
    yaml_config = _load_yaml_config(config_path)
    try:
        return Settings(**yaml_config)
    except ValidationError as e:
        raise ConfigError("Invalid configuration", details=str(e)) from e


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Settings are loaded from (in order of priority, highest first):
    1. Environment variables (HTMLCHUNKER_* prefix)
    2. YAML config file (~/.htmlchunker/config.yaml)
    3. Default values
    """
    return load_settings()
