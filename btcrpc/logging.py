"""Centralized logging configuration for btcrpc."""

import logging
import logging.handlers
from pathlib import Path

from .config import Config


def setup_logging(config: Config) -> None:
    """
    Initialize logging for an application using the client.

    The library itself never installs handlers; call this once from the
    application entrypoint.

    Args:
        config: Configuration instance with logging settings
    """
    level = getattr(logging, config.log_level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Clear any existing handlers
    root_logger.handlers.clear()

    formatter = logging.Formatter(
        '%(asctime)s [%(levelname)-8s] [%(name)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # Size-based rotation when a log file is configured
    if config.log_file:
        log_path = Path(config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        rotation_config = config.log_rotation
        file_handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=rotation_config["max_bytes"],
            backupCount=rotation_config["backup_count"],
            encoding="utf-8"
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter('[%(levelname)-8s] [%(name)s] %(message)s'))
    root_logger.addHandler(console_handler)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a specific component.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
