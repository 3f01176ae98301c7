"""Logging infrastructure for firestore-path.

Key components:
    get_path_logger: Factory for module loggers
    setup_logging: Apply a YAML or default logging configuration
    LoggingConfig: Loads and applies the configuration

Example:
    >>> from firestore_path.logging import get_path_logger
    >>>
    >>> logger = get_path_logger(__name__)
    >>> logger.debug("Rejected collection path")
"""

from .logging_config import LoggingConfig, get_path_logger, setup_logging

__all__ = [
    "LoggingConfig",
    "setup_logging",
    "get_path_logger",
]
