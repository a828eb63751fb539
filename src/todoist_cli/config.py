"""Configuration management for the Todoist CLI."""

import os
from pathlib import Path
from typing import Optional

import yaml
from platformdirs import user_config_dir
from pydantic import BaseModel, Field, ValidationError

from todoist_cli.errors import ConfigError

DEFAULT_ENDPOINT = "https://api.todoist.com/rest/v2"
CONFIG_ENV_VAR = "TODOIST_CONFIG"
CONFIG_FILE_NAME = "config.yaml"


class Config(BaseModel):
    """Contents of the config file."""

    api_key: str = Field(min_length=1)
    endpoint: str = Field(default=DEFAULT_ENDPOINT)
    timeout: float = Field(default=30.0, gt=0)


class ConfigManager:
    """Locates and loads the config file."""

    def __init__(self, path: Optional[Path] = None):
        if path is None:
            override = os.environ.get(CONFIG_ENV_VAR)
            if override:
                path = Path(override).expanduser()
            else:
                path = Path(user_config_dir("todoist")) / CONFIG_FILE_NAME
        self.path = path
        self._config: Optional[Config] = None

    @property
    def config(self) -> Config:
        """Get the loaded configuration, reading the file on first access."""
        if self._config is None:
            self._config = self.load()
        return self._config

    def load(self) -> Config:
        """Load configuration from file."""
        if not self.path.is_file():
            raise ConfigError(
                f"Config file not found at {self.path}. "
                "Create it with a line like 'api_key: <your token>'."
            )

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Could not read config file {self.path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Config file {self.path} must be a YAML mapping")

        try:
            return Config(**data)
        except ValidationError as e:
            fields = ", ".join(
                ".".join(str(part) for part in err["loc"]) for err in e.errors()
            )
            raise ConfigError(f"Invalid config file {self.path}: check {fields}") from e


# Global config manager instance
_config_manager: Optional[ConfigManager] = None


def get_config_manager() -> ConfigManager:
    """Get or create the global config manager."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager
