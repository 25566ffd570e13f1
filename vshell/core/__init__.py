"""
VShell Core Module

Configuration shared by every shell component.
"""

from .config_loader import (
    Config,
    ConfigLoader,
    FilesystemConfig,
    LoggingConfig,
    ShellConfig,
    get_config,
)

__all__ = [
    'Config',
    'ConfigLoader',
    'FilesystemConfig',
    'LoggingConfig',
    'ShellConfig',
    'get_config',
]
