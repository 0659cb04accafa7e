"""Configuration manager for loading inventory settings from YAML files."""

from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..constants.game_constants import (
    DEFAULT_CONFIG_FILE,
    DEFAULT_INVENTORY_SLOTS,
    DEFAULT_LOG_LEVEL,
)
from ..utils.logger import get_logger

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(Exception):
    """Raised when a configuration file cannot be used."""


class ConfigManager:
    """Manages loading and caching of configuration data."""

    def __init__(self, config_dir: str = None, config_file: str = DEFAULT_CONFIG_FILE):
        """Initialize the config manager.

        Args:
            config_dir: Path to configuration directory. If None, uses default.
            config_file: Name of the settings file inside config_dir.

        Raises:
            ConfigError: If the settings file exists but is not a YAML mapping.
        """
        if config_dir is None:
            # Default to config directory relative to project root
            project_root = Path(__file__).parent.parent.parent.parent
            config_dir = project_root / "config"

        self.config_dir = Path(config_dir)
        self.config_path = self.config_dir / config_file
        self.logger = get_logger()
        self.settings: Dict[str, Any] = {}

        self._load_settings()

    def _load_settings(self):
        """Load settings from the YAML file, or use defaults if it is missing."""
        if not self.config_path.exists():
            self.logger.debug(f"No config file at {self.config_path}, using defaults")
            self.settings = {}
            return

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                settings = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Error parsing configuration file {self.config_path}: {e}") from e

        if settings is None:
            settings = {}
        if not isinstance(settings, dict):
            raise ConfigError(f"Configuration file {self.config_path} must contain a mapping")

        self.settings = settings
        self.logger.debug(f"Loaded settings from {self.config_path}")

    def reload_config(self):
        """Force reload of the configuration file."""
        self._load_settings()

    def get_setting(self, *path, default=None):
        """Get a setting value by key path.

        Args:
            *path: Path components (e.g., 'inventory', 'max_slots')
            default: Default value if setting not found

        Returns:
            The setting value or default
        """
        value = self.settings
        for key in path:
            if isinstance(value, dict):
                value = value.get(key)
            else:
                return default
            if value is None:
                return default
        return value

    def get_max_slots(self) -> int:
        """Get the configured inventory capacity."""
        max_slots = self.get_setting('inventory', 'max_slots', default=DEFAULT_INVENTORY_SLOTS)
        if isinstance(max_slots, bool) or not isinstance(max_slots, int) or max_slots < 0:
            raise ConfigError(f"inventory.max_slots must be a non-negative integer, got {max_slots!r}")
        return max_slots

    def get_log_level(self) -> str:
        """Get the configured log level name."""
        level = self.get_setting('logging', 'level', default=DEFAULT_LOG_LEVEL)
        if not isinstance(level, str) or level.upper() not in VALID_LOG_LEVELS:
            raise ConfigError(f"logging.level must be one of {', '.join(VALID_LOG_LEVELS)}, got {level!r}")
        return level.upper()

    def get_log_file(self) -> Optional[str]:
        """Get the configured log file path, if any."""
        log_file = self.get_setting('logging', 'file')
        return str(log_file) if log_file else None
