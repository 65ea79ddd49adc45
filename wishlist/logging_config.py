"""Logging setup shared by the API process."""

import logging
import sys

from wishlist.config import Settings

ROOT_LOGGER_NAME = "wishlist"

LOG_FORMAT = "%(asctime)s  %(levelname)-8s  %(name)s - %(message)s"

NOISY_LOGGERS = ("httpcore", "httpx", "passlib", "sqlalchemy.engine")


def configure_logging(settings: Settings) -> None:
    """Install the stdout handler and apply the configured level."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format=LOG_FORMAT,
        stream=sys.stdout,
    )
    for noisy in NOISY_LOGGERS:
        logging.getLogger(noisy).setLevel(logging.WARNING)

    if settings.log_disabled:
        logging.getLogger(ROOT_LOGGER_NAME).setLevel(logging.CRITICAL + 1)


def get_child_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under the application logger."""
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
