"""
DeskFS Configuration Loader

Configuration management that provides:
- JSON configuration file loading
- Validation of section and key names
- Default value handling
- Runtime configuration updates

Author: YSNRFD
Version: 1.0.0
"""

import json
import threading
from dataclasses import dataclass, field, fields, asdict
from pathlib import Path
from typing import Any, Optional

from deskfs.exceptions import TreeException


class ConfigValidationError(TreeException):
    """Raised when configuration loading or validation fails."""

    def __init__(self, message: str) -> None:
        super().__init__(message, error_code=2001)


@dataclass
class AppConfig:
    """Application identification settings."""
    name: str = "DeskFS"
    version: str = "1.0.0"
    welcome_message: str = "Welcome to DeskFS"


@dataclass
class FilesystemConfig:
    """Filesystem configuration settings."""
    seed_sample_tree: bool = True
    directories_first: bool = True


@dataclass
class LoggingConfig:
    """Logging configuration settings."""
    level: str = "INFO"
    log_file: Optional[str] = None
    console_output: bool = True
    use_colors: bool = True


@dataclass
class ShellConfig:
    """Shell configuration settings."""
    prompt: str = "$ "
    history_size: int = 1000
    terminal_width: int = 71  # characters per ls line
    column_padding: int = 5


@dataclass
class Config:
    """
    Main configuration container.

    Holds all configuration settings for the desktop filesystem.
    """
    app: AppConfig = field(default_factory=AppConfig)
    filesystem: FilesystemConfig = field(default_factory=FilesystemConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    shell: ShellConfig = field(default_factory=ShellConfig)


class ConfigLoader:
    """
    Configuration loader and manager.

    Handles loading configuration from JSON files, validating
    settings, and providing runtime configuration access.

    Example:
        >>> loader = ConfigLoader()
        >>> config = loader.load('deskfs.json')
        >>> print(config.shell.prompt)
        $
    """

    _instance: Optional['ConfigLoader'] = None
    _lock = threading.Lock()

    def __new__(cls) -> 'ConfigLoader':
        """Singleton pattern for configuration access."""
        with cls._lock:
            if cls._instance is None:
                cls._instance = super().__new__(cls)
                cls._instance._config = Config()
                cls._instance._loaded = False
            return cls._instance

    def load(self, config_path: str) -> Config:
        """
        Load configuration from a JSON file.

        Args:
            config_path: Path to the configuration file

        Returns:
            Config object with loaded settings

        Raises:
            ConfigValidationError: If the file cannot be loaded or parsed
        """
        path = Path(config_path)

        if not path.exists():
            raise ConfigValidationError(f"Configuration file not found: {config_path}")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigValidationError(f"Invalid JSON in configuration file: {e}")
        except OSError as e:
            raise ConfigValidationError(f"Cannot read configuration file: {e}")

        self._config = self.parse(data)
        self._loaded = True
        return self._config

    @staticmethod
    def parse(data: dict[str, Any]) -> Config:
        """
        Parse configuration data into a Config object.

        Missing sections and keys keep their defaults; unknown ones
        are rejected.
        """
        if not isinstance(data, dict):
            raise ConfigValidationError("Configuration root must be an object")

        config = Config()
        sections = {f.name for f in fields(Config)}

        for section_name, section_data in data.items():
            if section_name not in sections:
                raise ConfigValidationError(f"Unknown configuration section: {section_name}")
            if not isinstance(section_data, dict):
                raise ConfigValidationError(f"Section '{section_name}' must be an object")

            section = getattr(config, section_name)
            known = {f.name for f in fields(section)}
            for key, value in section_data.items():
                if key not in known:
                    raise ConfigValidationError(
                        f"Unknown configuration key: {section_name}.{key}"
                    )
                setattr(section, key, value)

        return config

    @property
    def config(self) -> Config:
        """Get the current configuration."""
        return self._config

    def reset(self) -> None:
        """Drop loaded settings and return to defaults."""
        self._config = Config()
        self._loaded = False

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value by dot-notation key.

        Args:
            key: Dot-notation key (e.g., 'shell.prompt')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        obj: Any = self._config

        for part in key.split('.'):
            if hasattr(obj, part):
                obj = getattr(obj, part)
            else:
                return default

        return obj

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value at runtime.

        Args:
            key: Dot-notation key (e.g., 'shell.terminal_width')
            value: Value to set
        """
        parts = key.split('.')
        obj: Any = self._config

        for part in parts[:-1]:
            if hasattr(obj, part):
                obj = getattr(obj, part)
            else:
                raise ConfigValidationError(f"Invalid configuration key: {key}")

        final_key = parts[-1]
        if hasattr(obj, final_key):
            setattr(obj, final_key, value)
        else:
            raise ConfigValidationError(f"Invalid configuration key: {key}")

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        return asdict(self._config)


def get_config() -> Config:
    """
    Get the global configuration instance.

    Returns:
        Config object with current settings
    """
    return ConfigLoader().config
