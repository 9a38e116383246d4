"""Config handler for the task list."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from task_list.exceptions import ConfigError

LIST_STYLES = ("plain", "table")


@dataclass(frozen=True)
class Settings:
    """Resolved application settings.

    Attributes:
        storage_path: SQLite file holding the saved list.
        log_dir: Directory for log files.
        log_level: Logging level name (DEBUG, INFO, ...).
        list_style: How 'list' prints tasks: "plain" or "table".
        width: Width of the console separator line.
        indent: Indentation of console output.
    """

    storage_path: Path = Path("data/tasks.db")
    log_dir: Path = Path("logs")
    log_level: str = "INFO"
    list_style: str = "plain"
    width: int = 60
    indent: int = 4

    def __post_init__(self) -> None:
        """Validate settings."""
        if self.list_style not in LIST_STYLES:
            valid = ", ".join(LIST_STYLES)
            raise ConfigError(f"Invalid list_style '{self.list_style}'. Must be one of: {valid}")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ConfigError(f"Invalid logging level '{self.log_level}'")
        if self.width < 1 or self.indent < 0:
            raise ConfigError("display width must be positive and indent non-negative")

    @property
    def level(self) -> int:
        """Numeric logging level."""
        return logging.getLevelName(self.log_level.upper())

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> Settings:
        """Build settings from a parsed config mapping, filling in defaults."""
        storage = config.get("storage") or {}
        logs = config.get("logging") or {}
        display = config.get("display") or {}
        defaults = cls()
        try:
            return cls(
                storage_path=Path(storage.get("path", defaults.storage_path)),
                log_dir=Path(logs.get("dir", defaults.log_dir)),
                log_level=str(logs.get("level", defaults.log_level)),
                list_style=str(display.get("list_style", defaults.list_style)),
                width=int(display.get("width", defaults.width)),
                indent=int(display.get("indent", defaults.indent)),
            )
        except (AttributeError, TypeError, ValueError) as e:
            raise ConfigError(f"Invalid configuration: {e}") from e


class ConfigManager:
    """Config Manager

    This class handles the YAML Config.
    """

    def __init__(self, path: str | Path) -> None:
        """Initialize Config Manager."""
        self.path = Path(path)

    def load_config(self) -> dict[str, Any]:
        """Load YAML Config. A missing file gives an empty config."""
        if not self.path.exists():
            return {}
        try:
            with self.path.open() as fp:
                config = yaml.safe_load(fp)
        except yaml.YAMLError as e:
            raise ConfigError(f"Could not parse {self.path}: {e}") from e

        if config is None:
            return {}
        if not isinstance(config, dict):
            raise ConfigError(f"{self.path} must contain a mapping")
        return dict(config)

    def load_settings(self) -> Settings:
        """Load the config file and resolve it into Settings."""
        return Settings.from_dict(self.load_config())
