'''
Configuration management for armaspec.

Settings are organised in dataclass sections and resolved in layers:
1. Defaults built into the package
2. A user JSON configuration file
3. Environment variables
4. Runtime modifications through set_config()

Numerical defaults (spectral resolution, number of autocovariance lags,
impulse response length, simulation length) are read from here whenever a
diagnostic is called without an explicit value.

Environment variables follow the pattern ARMASPEC_<SECTION>_<OPTION>, for
example ARMASPEC_NUMERICAL_SPECTRAL_RESOLUTION=1024. The configuration file is
taken from ARMASPEC_CONFIG_FILE when set, otherwise from
~/.armaspec/armaspec_config.json when it exists. The file is never created
implicitly.
'''

import copy
import os
import json
import logging
from dataclasses import dataclass, field, asdict, fields, replace
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from .exceptions import ConfigurationError
from .types import LogLevel

# Set up module-level logger
logger = logging.getLogger("armaspec.core.config")

# Constants for configuration paths and environment variables
CONFIG_ENV_PREFIX = "ARMASPEC_"
CONFIG_FILE_ENV = "ARMASPEC_CONFIG_FILE"
DEFAULT_CONFIG_FILENAME = "armaspec_config.json"
DEFAULT_CONFIG_DIR = Path.home() / ".armaspec"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigSection(Enum):
    """Enumeration of configuration sections."""
    NUMERICAL = "numerical"
    OUTPUT = "output"
    LOGGING = "logging"


@dataclass
class NumericalConfig:
    """
    Default sizes used by the diagnostics.

    Attributes:
        spectral_resolution: Number of frequency grid points
        autocovariance_lags: Number of autocovariance lags returned
        impulse_length: Number of impulse response coefficients returned
        simulation_length: Number of observations in a simulated path
    """
    spectral_resolution: int = 512
    autocovariance_lags: int = 16
    impulse_length: int = 30
    simulation_length: int = 90


@dataclass
class OutputConfig:
    """
    Plot styling used by the presentation adapters.

    Attributes:
        plot_figsize: Figure size for newly created figures
        plot_color: Line color of the spectral density plot
        plot_linewidth: Line width of the spectral density plot
        plot_alpha: Line transparency of the spectral density plot
    """
    plot_figsize: Tuple[float, float] = (10, 6)
    plot_color: str = "blue"
    plot_linewidth: float = 2.0
    plot_alpha: float = 0.7


@dataclass
class LoggingConfig:
    """
    Logging configuration settings.

    Attributes:
        log_level: Level of the package logger
        log_format: Format string for log messages
        log_date_format: Format string for log message timestamps
        console_logging: Whether to attach a console handler
    """
    log_level: LogLevel = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    log_date_format: str = "%Y-%m-%d %H:%M:%S"
    console_logging: bool = True


@dataclass
class ARMASpecConfig:
    """Complete configuration, one attribute per section."""
    numerical: NumericalConfig = field(default_factory=NumericalConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


class ConfigManager:
    """
    Configuration manager for armaspec.

    Holds the current configuration and provides methods to get, set and
    reset options. Values are validated on every change; invalid values raise
    ConfigurationError and leave the configuration untouched.
    """

    def __init__(self) -> None:
        """Initialize the configuration manager with default settings."""
        self._config = ARMASpecConfig()
        self._initialized = False
        self._config_file: Optional[Path] = None

    def initialize(self, config_file: Optional[Path] = None) -> None:
        """
        Load the user configuration file and environment overrides.

        Args:
            config_file: Explicit configuration file, overriding the
                environment variable and the default location

        Raises:
            ConfigurationError: If the file or an environment override is
                invalid. The settings in effect before the call are kept.
        """
        if self._initialized and config_file is None:
            return

        self._config_file = self._locate_config_file(config_file)

        # Overrides are all-or-nothing: a bad option restores the previous settings
        previous = copy.deepcopy(self._config)
        try:
            self._load_user_config()
            self._apply_env_overrides()
        except ConfigurationError:
            self._config = previous
            self._setup_logging()
            raise
        self._setup_logging()

        self._initialized = True
        logger.debug("Configuration manager initialized")

    @staticmethod
    def _locate_config_file(config_file: Optional[Path]) -> Optional[Path]:
        if config_file is not None:
            return Path(config_file)
        env_file = os.environ.get(CONFIG_FILE_ENV)
        if env_file:
            return Path(env_file)
        return DEFAULT_CONFIG_DIR / DEFAULT_CONFIG_FILENAME

    def _load_user_config(self) -> None:
        """Update the configuration from the JSON file, when present."""
        if not self._config_file or not self._config_file.exists():
            logger.debug("No user configuration file found")
            return

        try:
            with open(self._config_file, "r") as f:
                user_config = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(
                f"Failed to load configuration file {self._config_file}",
                details=str(e)
            ) from e

        if not isinstance(user_config, dict):
            raise ConfigurationError(
                "Configuration file must contain a JSON object",
                value=type(user_config).__name__
            )

        self._update_from_dict(user_config)
        logger.debug(f"Loaded user configuration from {self._config_file}")

    def _apply_env_overrides(self) -> None:
        """Apply ARMASPEC_<SECTION>_<OPTION> environment variables."""
        for env_var, value in os.environ.items():
            if not env_var.startswith(CONFIG_ENV_PREFIX) or env_var == CONFIG_FILE_ENV:
                continue

            key = env_var[len(CONFIG_ENV_PREFIX):]
            parts = key.lower().split("_", 1)
            if len(parts) != 2:
                continue

            section, option = parts
            try:
                ConfigSection(section)
            except ValueError:
                continue
            if not self.has_option(section, option):
                continue

            current_value = self.get(section, option)
            self.set(section, option, self._parse_env_value(value, current_value, env_var))
            logger.debug(f"Applied environment override: {env_var}={value}")

    @staticmethod
    def _parse_env_value(value: str, current_value: Any, env_var: str) -> Any:
        """Convert an environment string to the type of the current value."""
        try:
            if isinstance(current_value, bool):
                return value.lower() in ("true", "yes", "1", "y")
            if isinstance(current_value, int):
                return int(value)
            if isinstance(current_value, float):
                return float(value)
            if isinstance(current_value, tuple):
                return tuple(float(part) for part in value.split(","))
        except ValueError as e:
            raise ConfigurationError(
                f"Invalid value in environment variable {env_var}",
                value=value,
                details=str(e)
            ) from e
        return value

    def _setup_logging(self) -> None:
        """Configure the package logger from the logging section."""
        root_logger = logging.getLogger("armaspec")

        for handler in root_logger.handlers[:]:
            root_logger.removeHandler(handler)

        root_logger.setLevel(getattr(logging, self._config.logging.log_level))

        if self._config.logging.console_logging:
            formatter = logging.Formatter(
                fmt=self._config.logging.log_format,
                datefmt=self._config.logging.log_date_format
            )
            console_handler = logging.StreamHandler()
            console_handler.setFormatter(formatter)
            root_logger.addHandler(console_handler)

    def _update_from_dict(self, config_dict: Dict[str, Any]) -> None:
        for section, options in config_dict.items():
            if not isinstance(options, dict):
                raise ConfigurationError(
                    f"Configuration section '{section}' must be a mapping",
                    section=section
                )
            for option, value in options.items():
                if isinstance(value, list):
                    value = tuple(value)
                self.set(section, option, value)

    def _section(self, section: str) -> Any:
        try:
            ConfigSection(section)
        except ValueError:
            raise ConfigurationError(
                f"Unknown configuration section '{section}'",
                section=section,
                details=f"Valid sections: {[s.value for s in ConfigSection]}"
            ) from None
        return getattr(self._config, section)

    @staticmethod
    def _validate_option(section: str, option: str, value: Any) -> None:
        """Check the constraints of a single option."""
        if section == "numerical":
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ConfigurationError(
                    f"{option} must be a positive integer",
                    section=section, option=option, value=value
                )
        elif option == "plot_figsize":
            if (not isinstance(value, tuple) or len(value) != 2
                    or any(not isinstance(v, (int, float)) or v <= 0 for v in value)):
                raise ConfigurationError(
                    "plot_figsize must be a pair of positive numbers",
                    section=section, option=option, value=value
                )
        elif option == "plot_linewidth":
            if not isinstance(value, (int, float)) or value <= 0:
                raise ConfigurationError(
                    f"{option} must be positive",
                    section=section, option=option, value=value
                )
        elif option == "plot_alpha":
            if not isinstance(value, (int, float)) or not 0 <= value <= 1:
                raise ConfigurationError(
                    "plot_alpha must be between 0 and 1",
                    section=section, option=option, value=value
                )
        elif option == "log_level":
            if value not in _LOG_LEVELS:
                raise ConfigurationError(
                    f"log_level must be one of {_LOG_LEVELS}",
                    section=section, option=option, value=value
                )

    def get(self, section: str, option: str, default: Any = None) -> Any:
        """
        Get a configuration value.

        Args:
            section: The configuration section
            option: The configuration option
            default: Value returned when the option does not exist

        Returns:
            The configuration value
        """
        section_obj = self._section(section)
        return getattr(section_obj, option, default)

    def set(self, section: str, option: str, value: Any) -> None:
        """
        Set a configuration value.

        Raises:
            ConfigurationError: If the section or option is unknown, or the
                value violates the option's constraint
        """
        section_obj = self._section(section)
        if not hasattr(section_obj, option):
            raise ConfigurationError(
                f"Unknown option '{option}' in section '{section}'",
                section=section,
                option=option
            )
        self._validate_option(section, option, value)
        setattr(section_obj, option, value)

        if section == "logging":
            self._setup_logging()

    def reset(self, section: Optional[str] = None, option: Optional[str] = None) -> None:
        """
        Reset configuration to default values.

        Args:
            section: Section to reset, or None for the whole configuration
            option: Option to reset within section, or None for the whole section
        """
        if section is None:
            self._config = ARMASpecConfig()
        else:
            defaults = type(self._section(section))()
            if option is None:
                setattr(self._config, section, defaults)
            else:
                self.set(section, option, getattr(defaults, option))
        if section in (None, "logging"):
            self._setup_logging()
        logger.debug(f"Configuration reset (section={section}, option={option})")

    def has_option(self, section: str, option: str) -> bool:
        try:
            section_obj = self._section(section)
        except ConfigurationError:
            return False
        return option in {f.name for f in fields(section_obj)}

    def get_section(self, section: str) -> Any:
        """Return a copy of a configuration section."""
        return replace(self._section(section))

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self._config)

    def save_user_config(self, path: Optional[Path] = None) -> Path:
        """
        Write the current configuration to a JSON file.

        Args:
            path: Destination file, defaults to the active configuration file

        Returns:
            Path: The file that was written
        """
        target = Path(path) if path is not None else (
            self._config_file or DEFAULT_CONFIG_DIR / DEFAULT_CONFIG_FILENAME
        )
        target.parent.mkdir(parents=True, exist_ok=True)
        with open(target, "w") as f:
            json.dump(self.to_dict(), f, indent=4)
        logger.info(f"Saved configuration to {target}")
        return target


# Global configuration manager instance
_config_manager = ConfigManager()


def initialize_config(config_file: Optional[Path] = None) -> None:
    """Initialize the global configuration manager."""
    _config_manager.initialize(config_file)


def get_config(section: str, option: str, default: Any = None) -> Any:
    """Get a configuration value from the global configuration manager."""
    return _config_manager.get(section, option, default)


def set_config(section: str, option: str, value: Any) -> None:
    """Set a configuration value in the global configuration manager."""
    _config_manager.set(section, option, value)


def reset_config(section: Optional[str] = None, option: Optional[str] = None) -> None:
    """Reset configuration values in the global configuration manager."""
    _config_manager.reset(section, option)


def get_config_manager() -> ConfigManager:
    return _config_manager


def get_numerical_config() -> NumericalConfig:
    """Get a copy of the numerical configuration section."""
    return _config_manager.get_section("numerical")


def get_output_config() -> OutputConfig:
    """Get a copy of the output configuration section."""
    return _config_manager.get_section("output")
