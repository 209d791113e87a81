"""
DeskFS Core Module

Core components:
- Configuration Loader
"""

from .config_loader import (
    ConfigLoader,
    Config,
    AppConfig,
    FilesystemConfig,
    LoggingConfig,
    ShellConfig,
    ConfigValidationError,
    get_config,
)

__all__ = [
    'ConfigLoader',
    'Config',
    'AppConfig',
    'FilesystemConfig',
    'LoggingConfig',
    'ShellConfig',
    'ConfigValidationError',
    'get_config',
]
