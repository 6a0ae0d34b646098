"""Configuration loading.

Settings are loaded in priority order (highest first):
  1. Constructor arguments
  2. Environment variables  (HEADINGID__FILTER__UNTERMINATED_HEADING=drop)
  3. headingid.yaml         (searched in cwd, then platform config dir)
  4. Hardcoded defaults

The config file is optional — all fields have sensible defaults.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import platformdirs
from pydantic import BaseModel, ValidationError
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

from headingid.errors import ErrorCode, HeadingIdError

_CONFIG_FILE_NAME = "headingid.yaml"


def _find_config_file() -> str | None:
    """Return the path of the first headingid.yaml found, or None."""
    candidates = [
        Path(_CONFIG_FILE_NAME),
        Path(platformdirs.user_config_dir("headingid")) / _CONFIG_FILE_NAME,
    ]
    for path in candidates:
        if path.exists():
            return str(path)
    return None


class MarkdownSettings(BaseModel):
    preset: Literal["commonmark", "default", "zero", "js-default"] = "commonmark"
    # None keeps whatever the preset says about raw HTML
    html: bool | None = None


class FilterSettings(BaseModel):
    unterminated_heading: Literal["flush", "drop", "error"] = "flush"


class LoggingSettings(BaseModel):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    format: Literal["json", "text"] = "text"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        # Double-underscore separates nesting: HEADINGID__LOGGING__LEVEL=DEBUG
        env_prefix="HEADINGID__",
        env_nested_delimiter="__",
        yaml_file=_find_config_file(),
        yaml_file_encoding="utf-8",
    )

    markdown: MarkdownSettings = MarkdownSettings()
    filter: FilterSettings = FilterSettings()
    logging: LoggingSettings = LoggingSettings()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
        **kwargs: Any,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,  # Constructor args (highest priority)
            env_settings,  # Environment variables
            YamlConfigSettingsSource(settings_cls),  # YAML file
            # dotenv and file secrets intentionally excluded
        )


def load_settings(**overrides: Any) -> Settings:
    """Build Settings, reporting validation failures as HeadingIdError."""
    try:
        return Settings(**overrides)
    except ValidationError as exc:
        raise HeadingIdError(
            ErrorCode.INVALID_CONFIG,
            f"Invalid headingid configuration: {exc.error_count()} error(s)",
            suggestion=(
                "Check HEADINGID__* environment variables and headingid.yaml "
                "against the documented settings."
            ),
        ) from exc
