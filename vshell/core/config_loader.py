"""
VShell Configuration Loader

Configuration management for the shell:
- JSON configuration file loading
- Default value handling
- Runtime configuration updates with dot-notation keys
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional
import threading

from vshell.exceptions import ConfigValidationError
from vshell.logger import LogLevel, get_logger


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    section = data[name]
    if not isinstance(section, dict):
        raise ConfigValidationError(f"{name} must be an object")
    return section


def validate_seed(seed: Any, path: str = 'filesystem.seed') -> None:
    """Check that a seed tree holds only objects, strings and string lists."""
    if not isinstance(seed, dict):
        raise ConfigValidationError(f"{path} must be an object")
    for name, value in seed.items():
        entry = f"{path}.{name}"
        if isinstance(value, dict):
            validate_seed(value, entry)
        elif isinstance(value, list):
            if not all(isinstance(line, str) for line in value):
                raise ConfigValidationError(f"{entry} must contain only strings")
        elif not isinstance(value, str):
            raise ConfigValidationError(
                f"{entry} must be an object, a string or a list of strings"
            )


def _default_seed() -> dict[str, Any]:
    return {
        'about.txt': [
            "Hi, I'm Carl.",
            "Type 'help' to see what this shell can do.",
        ],
        'contact.txt': [
            "email: carl@carlegbert.com",
            "github: github.com/carlegbert",
        ],
        'projects': {
            'shell.txt': ["This website."],
        },
    }


@dataclass
class ShellConfig:
    """Shell session settings."""
    user: str = "guest"
    hostname: str = "www.carlegbert.com"
    prompt_template: str = "{user}@{hostname}:{path}$ "
    enable_autocomplete: bool = True


@dataclass
class FilesystemConfig:
    """
    Virtual filesystem settings.

    ``seed`` describes the initial tree: a dict is a directory, a list of
    strings is a text file (one entry per line), a plain string is a
    single-line text file.
    """
    root_label: str = "~"
    seed: dict[str, Any] = field(default_factory=_default_seed)


@dataclass
class LoggingConfig:
    """Logging settings."""
    level: str = "WARNING"
    log_file: Optional[str] = None
    console_output: bool = False


@dataclass
class Config:
    """Main configuration container."""
    shell: ShellConfig = field(default_factory=ShellConfig)
    filesystem: FilesystemConfig = field(default_factory=FilesystemConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


class ConfigLoader:
    """
    Configuration loader and manager.

    Example:
        >>> loader = ConfigLoader()
        >>> config = loader.load('config.json')
        >>> print(config.shell.user)
        guest
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
            raise ConfigValidationError(
                f"Configuration file not found: {config_path}",
                path=config_path
            )

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigValidationError(
                f"Invalid JSON in configuration file: {e}",
                path=config_path
            ) from e
        except OSError as e:
            raise ConfigValidationError(
                f"Cannot read configuration file: {e}",
                path=config_path
            ) from e

        self._config = self.parse(data)
        self._loaded = True
        get_logger('config').info("Configuration loaded", context={'path': config_path})
        return self._config

    @staticmethod
    def parse(data: dict[str, Any]) -> Config:
        """Parse configuration data into a Config object."""
        if not isinstance(data, dict):
            raise ConfigValidationError("Configuration root must be an object")

        config = Config()

        if 'shell' in data:
            shell_data = _section(data, 'shell')
            config.shell = ShellConfig(
                user=shell_data.get('user', config.shell.user),
                hostname=shell_data.get('hostname', config.shell.hostname),
                prompt_template=shell_data.get('prompt_template', config.shell.prompt_template),
                enable_autocomplete=shell_data.get('enable_autocomplete', config.shell.enable_autocomplete),
            )

        if 'filesystem' in data:
            fs_data = _section(data, 'filesystem')
            seed = fs_data.get('seed', config.filesystem.seed)
            validate_seed(seed)
            config.filesystem = FilesystemConfig(
                root_label=fs_data.get('root_label', config.filesystem.root_label),
                seed=seed,
            )

        if 'logging' in data:
            log_data = _section(data, 'logging')
            level = log_data.get('level', config.logging.level)
            try:
                LogLevel.from_name(level)
            except ValueError as e:
                raise ConfigValidationError(str(e)) from e
            config.logging = LoggingConfig(
                level=level,
                log_file=log_data.get('log_file', config.logging.log_file),
                console_output=log_data.get('console_output', config.logging.console_output),
            )

        return config

    @property
    def config(self) -> Config:
        """Get the current configuration."""
        return self._config

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value by dot-notation key.

        Args:
            key: Dot-notation key (e.g., 'shell.user')
            default: Default value if key not found
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

        Changes are not persisted to disk.
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

    def reset(self) -> None:
        """Drop any loaded configuration and go back to defaults."""
        self._config = Config()
        self._loaded = False

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        def dataclass_to_dict(obj: Any) -> Any:
            if hasattr(obj, '__dataclass_fields__'):
                return {
                    k: dataclass_to_dict(v)
                    for k, v in obj.__dict__.items()
                }
            elif isinstance(obj, list):
                return [dataclass_to_dict(item) for item in obj]
            elif isinstance(obj, dict):
                return {k: dataclass_to_dict(v) for k, v in obj.items()}
            else:
                return obj

        return dataclass_to_dict(self._config)


def get_config() -> Config:
    """
    Get the global configuration instance.

    Returns:
        Config object with current settings
    """
    return ConfigLoader().config
