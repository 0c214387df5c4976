"""Logging setup for lovense-cloud.

The ``lovense_cloud`` logger gets a stderr handler and, optionally, a
file handler. The HTTP client libraries log every request at INFO, which
would echo the Lovense endpoints once per tool call, so they are held at
WARNING unless the service itself runs at DEBUG.
"""

from __future__ import annotations

import logging
import sys

from lovense_cloud.config.settings import LoggingConfig

PACKAGE_LOGGER = "lovense_cloud"
CLIENT_LOGGERS = ("httpx", "httpcore")


def setup_logging(config: LoggingConfig | None = None) -> None:
    """Configure the package logger and quiet the HTTP client loggers.

    Args:
        config: Logging configuration. If None, uses defaults
                (INFO level, stderr output).
    """
    if config is None:
        config = LoggingConfig()

    level = getattr(logging, config.level.upper(), logging.INFO)
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)

    # Safe to call again (CLI then server) without duplicating output
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(config.format)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if config.file:
        handlers.append(logging.FileHandler(config.file))
    for handler in handlers:
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)

    client_level = logging.DEBUG if level <= logging.DEBUG else logging.WARNING
    for name in CLIENT_LOGGERS:
        logging.getLogger(name).setLevel(client_level)

    package_logger.debug(
        "Logging initialized at %s level (HTTP client at %s)",
        config.level, logging.getLevelName(client_level),
    )
