"""Runtime settings for the console game. Defaults can be overridden by a YAML file and then by command line arguments."""

from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from src.core.exceptions import ConfigError

# Move notation uses one letter per column and one digit per row
MAX_WIDTH = 26
MAX_HEIGHT = 10

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    width: int = Field(default=7, ge=1, le=MAX_WIDTH)
    height: int = Field(default=7, ge=1, le=MAX_HEIGHT)
    log_level: LogLevel = "WARNING"

    def with_overrides(self, **overrides: Optional[object]) -> "Settings":
        """Apply the values that were actually given (None means: keep the current value)"""
        given = {key: value for key, value in overrides.items() if value is not None}
        try:
            return Settings.model_validate(self.model_dump() | given)
        except ValidationError as error:
            raise ConfigError(f"Invalid settings: {error}") from error


def load_settings(path: Optional[str | Path] = None) -> Settings:
    """Read settings from a YAML mapping. Without a path, the defaults are used."""
    if path is None:
        return Settings()

    settings_path = Path(path)
    if not settings_path.is_file():
        raise ConfigError(f"Settings file not found: {settings_path}")

    with open(settings_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ConfigError(f"Settings file {settings_path} must contain a mapping.")

    try:
        return Settings.model_validate(data)
    except ValidationError as error:
        raise ConfigError(f"Invalid settings in {settings_path}: {error}") from error
