"""Configuration management for tasklog."""

import json
import os
from pathlib import Path
from typing import Any, Optional

from platformdirs import user_config_dir
from pydantic import BaseModel, Field, field_validator

from tasklog.errors import TasklogError
from tasklog.utils.logger import get_logger
from tasklog.utils.parsing import parse_duration

DB_DIR_NAME = ".tasklog"
DB_FILE_NAME = "db.sqlite"
DB_ENV_VAR = "TASKLOG_DB"

logger = get_logger("config")


class StoreConfig(BaseModel):
    """Database configuration."""

    path: Optional[str] = Field(default=None)


class PomodoroConfig(BaseModel):
    """Countdown runtime configuration."""

    default_duration: str = Field(default="25m")
    quit_keys: str = Field(default="q", min_length=1)
    tick_seconds: float = Field(default=1.0, gt=0)
    tick_slices: int = Field(default=10, ge=1)
    poll_seconds: float = Field(default=0.2, gt=0)
    idle_seconds: float = Field(default=0.05, gt=0)

    @field_validator("default_duration")
    @classmethod
    def check_duration(cls, value: str) -> str:
        try:
            parse_duration(value)
        except TasklogError as e:
            raise ValueError(str(e)) from e
        return value


class OutputConfig(BaseModel):
    """Output configuration."""

    color: bool = Field(default=True)
    default_limit: int = Field(default=50, ge=1, le=100)


class Config(BaseModel):
    """Main configuration."""

    store: StoreConfig = Field(default_factory=StoreConfig)
    pomodoro: PomodoroConfig = Field(default_factory=PomodoroConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)


def get_home_directory() -> Path:
    """Resolve the user's home directory.

    Tries ``HOME``, then ``USERPROFILE``, then ``HOMEDRIVE`` + ``HOMEPATH``.

    Raises:
        RuntimeError: If none of them is set
    """
    for var in ("HOME", "USERPROFILE"):
        value = os.environ.get(var)
        if value:
            return Path(value)

    drive = os.environ.get("HOMEDRIVE")
    path = os.environ.get("HOMEPATH")
    if drive and path:
        return Path(drive + path)

    raise RuntimeError("Could not get the home directory")


class ConfigManager:
    """Manages tasklog configuration."""

    def __init__(self, config_dir: Path | None = None):
        self.config_dir = config_dir or Path(user_config_dir("tasklog"))
        self.config_file = self.config_dir / "config.json"
        self._config: Optional[Config] = None

    @property
    def config(self) -> Config:
        """Get the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> Config:
        """Load configuration from file."""
        if self.config_file.exists():
            try:
                with open(self.config_file, encoding="utf-8") as f:
                    data = json.load(f)
                return Config(**data)
            except (OSError, ValueError) as e:
                # If config is corrupted, return default
                logger.warning("ignoring unreadable config %s: %s", self.config_file, e)
                return Config()
        return Config()

    def save_config(self, config: Optional[Config] = None) -> None:
        """Save configuration to file."""
        if config is None:
            config = self.config

        self.config_dir.mkdir(parents=True, exist_ok=True)
        with open(self.config_file, "w", encoding="utf-8") as f:
            json.dump(config.model_dump(), f, indent=2)

    def get(self, key: str) -> Any:
        """Get a configuration value by dot-separated key."""
        keys = key.split(".")
        value: Any = self.config
        for k in keys:
            if isinstance(value, BaseModel):
                value = getattr(value, k, None)
            else:
                return None
        return value

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value by dot-separated key.

        Raises:
            KeyError: If the key does not name an existing setting
            pydantic.ValidationError: If the value does not fit the setting
        """
        keys = key.split(".")
        config_dict = self.config.model_dump()

        current = config_dict
        for k in keys[:-1]:
            if not isinstance(current.get(k), dict):
                raise KeyError(key)
            current = current[k]
        if keys[-1] not in current:
            raise KeyError(key)
        current[keys[-1]] = value

        # Re-validate so a bad value never reaches disk
        self._config = Config(**config_dict)
        self.save_config()

    def reset(self) -> None:
        """Reset configuration to defaults."""
        self._config = Config()
        self.save_config()

    def get_db_path(self) -> Path:
        """Resolve the database file.

        ``TASKLOG_DB`` wins over ``store.path``, which wins over
        ``<home>/.tasklog/db.sqlite``.
        """
        override = os.environ.get(DB_ENV_VAR) or self.config.store.path
        if override:
            return Path(override).expanduser()
        return get_home_directory() / DB_DIR_NAME / DB_FILE_NAME


# Global config manager instance
_config_manager: Optional[ConfigManager] = None


def get_config_manager() -> ConfigManager:
    """Get or create the global config manager."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager
