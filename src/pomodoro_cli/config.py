"""Configuration management for Pomodoro CLI."""

import json
from pathlib import Path
from typing import Optional

from platformdirs import user_config_dir
from pydantic import BaseModel, Field, ValidationError

from pomodoro_cli.errors import ConfigurationError
from pomodoro_cli.models.focus.plan import PomodoroConfig

CONFIG_FILE_NAME = "config.json"


class UIConfig(BaseModel):
    """UI configuration."""

    bar_width: int = Field(default=30, gt=0)
    bell: bool = Field(default=False)
    refresh_per_second: int = Field(default=10, gt=0)


class Config(BaseModel):
    """Main configuration."""

    defaults: PomodoroConfig = Field(default_factory=PomodoroConfig)
    ui: UIConfig = Field(default_factory=UIConfig)


def describe_validation_error(error: ValidationError) -> str:
    """Flatten a pydantic error into one readable line."""
    parts = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"])
        parts.append(f"{location}: {item['msg']}")
    return "; ".join(parts)


class ConfigManager:
    """Reads the optional Pomodoro CLI configuration file."""

    def __init__(self):
        self.config_dir = Path(user_config_dir("pomodoro-cli"))
        self.config_file = self.config_dir / CONFIG_FILE_NAME
        self._config: Optional[Config] = None

    @property
    def config(self) -> Config:
        """Get the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> Config:
        """Load configuration from file; a missing file means defaults."""
        if not self.config_file.exists():
            return Config()

        try:
            with open(self.config_file, "r") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(
                f"config file {self.config_file} is not valid JSON: {e}"
            ) from e

        try:
            return Config(**data)
        except (ValidationError, TypeError) as e:
            detail = (
                describe_validation_error(e) if isinstance(e, ValidationError) else e
            )
            raise ConfigurationError(
                f"invalid config file {self.config_file}: {detail}"
            ) from e

    def resolve_session(self, **overrides: Optional[int]) -> PomodoroConfig:
        """
        Merge command-line values over the configured defaults.

        ``None`` overrides are ignored. Raises ConfigurationError when the
        result has a non-positive duration or round count.
        """
        data = self.config.defaults.model_dump()
        data.update({k: v for k, v in overrides.items() if v is not None})
        try:
            return PomodoroConfig(**data)
        except ValidationError as e:
            raise ConfigurationError(describe_validation_error(e)) from e


# Global config manager instance
_config_manager: Optional[ConfigManager] = None


def get_config_manager() -> ConfigManager:
    """Get or create the global config manager."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager
