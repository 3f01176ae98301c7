"""Logging configuration for firestore-path.

The library logs through Prefect's logger hierarchy so that applications
already configuring Prefect logging get firestore-path records in the same
place. Configuration comes from a YAML dictConfig file when one is supplied,
otherwise from built-in defaults. Nothing is configured until
setup_logging() is called.

Usage:
    >>> from firestore_path.logging import get_path_logger
    >>> logger = get_path_logger(__name__)
    >>> logger.debug("Parsed document name")

Environment variables:
    FIRESTORE_PATH_LOGGING_CONFIG: Path to a custom logging.yml
    FIRESTORE_PATH_LOG_LEVEL: Default log level (WARNING, DEBUG, etc.)
    PREFECT_LOGGING_SETTINGS_PATH: Fallback config path
"""

import logging.config
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from prefect.logging import get_logger

# Default log levels for the library's loggers
DEFAULT_LOG_LEVELS = {
    "firestore_path": "WARNING",
    "firestore_path.ids": "WARNING",
    "firestore_path.paths": "WARNING",
    "firestore_path.names": "WARNING",
}


class LoggingConfig:
    """Loads and applies a logging configuration.

    Configuration precedence:
        1. Explicit config_path parameter
        2. FIRESTORE_PATH_LOGGING_CONFIG environment variable
        3. PREFECT_LOGGING_SETTINGS_PATH environment variable
        4. Default configuration

    Example:
        >>> config = LoggingConfig()
        >>> config.apply()
        >>>
        >>> config = LoggingConfig(Path("custom_logging.yml"))
        >>> config.apply()

    Note:
        The configuration is loaded lazily and cached after first access.
    """

    def __init__(self, config_path: Optional[Path] = None):
        self.config_path = config_path or self._get_default_config_path()
        self._config: Optional[Dict[str, Any]] = None

    @staticmethod
    def _get_default_config_path() -> Optional[Path]:
        """Return the config path named by the environment, if any."""
        if env_path := os.environ.get("FIRESTORE_PATH_LOGGING_CONFIG"):
            return Path(env_path)

        if prefect_path := os.environ.get("PREFECT_LOGGING_SETTINGS_PATH"):
            return Path(prefect_path)

        return None

    def load_config(self) -> Dict[str, Any]:
        """Load the configuration from file, or fall back to the defaults.

        Returns:
            Dictionary in logging.config.dictConfig format.
        """
        if self._config is None:
            if self.config_path and self.config_path.exists():
                with open(self.config_path, "r") as f:
                    self._config = yaml.safe_load(f)
            else:
                self._config = self._get_default_config()
        assert self._config is not None
        return self._config

    @staticmethod
    def _get_default_config() -> Dict[str, Any]:
        """Built-in configuration used when no file is found.

        Library records stay at WARNING unless FIRESTORE_PATH_LOG_LEVEL says
        otherwise; parsers only emit DEBUG records.
        """
        return {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "standard": {
                    "format": "%(asctime)s.%(msecs)03d | %(levelname)-7s | %(name)s - %(message)s",
                    "datefmt": "%H:%M:%S",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "standard",
                    "stream": "ext://sys.stderr",
                },
            },
            "loggers": {
                "prefect.firestore_path": {
                    "level": os.environ.get("FIRESTORE_PATH_LOG_LEVEL", "WARNING"),
                    "handlers": ["console"],
                    "propagate": False,
                },
            },
        }

    def apply(self):
        """Apply the configuration with logging.config.dictConfig.

        If the configuration names a "prefect" logger, its level is exported
        as PREFECT_LOGGING_LEVEL unless that variable is already set.
        """
        config = self.load_config()
        logging.config.dictConfig(config)

        if "prefect" in config.get("loggers", {}):
            prefect_level = config["loggers"]["prefect"].get("level", "INFO")
            os.environ.setdefault("PREFECT_LOGGING_LEVEL", prefect_level)


def setup_logging(config_path: Optional[Path] = None, level: Optional[str] = None):
    """Configure logging for firestore-path.

    Args:
        config_path: Optional path to a YAML logging configuration file.
        level: Optional level applied to every library logger after the
            configuration is loaded.

    Example:
        >>> setup_logging()
        >>> setup_logging(level="DEBUG")
        >>> setup_logging(Path("custom.yml"), level="WARNING")
    """
    LoggingConfig(config_path).apply()

    if level:
        for logger_name in DEFAULT_LOG_LEVELS:
            logger = get_logger(logger_name)
            logger.setLevel(level)


def get_path_logger(name: str):
    """Return a Prefect logger for a firestore-path module.

    Importing the library never configures logging; applications call
    setup_logging() themselves when they want the built-in configuration.

    Args:
        name: Logger name, usually __name__.
    """
    return get_logger(name)
