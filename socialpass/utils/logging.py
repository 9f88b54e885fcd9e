"""Logging configuration for the Socialpass application."""

import logging
import sys

from socialpass.config import get_settings

# httpx logs every request line at INFO; callback URLs carry the authorization code
QUIET_LOGGERS = ("httpx", "httpcore")


def setup_logging() -> None:
    """Send application logs to stdout, DEBUG everywhere but production."""
    settings = get_settings()

    logging.basicConfig(
        level=logging.INFO if settings.is_production else logging.DEBUG,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stdout,
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


class LogContext:
    """Prefix log messages with `[key=value]` pairs."""

    def __init__(self, logger: logging.Logger, **context: str) -> None:
        self.logger = logger
        self.prefix = " ".join(f"[{k}={v}]" for k, v in context.items())

    def info(self, msg: str) -> None:
        self.logger.info(f"{self.prefix} {msg}")

    def warning(self, msg: str) -> None:
        self.logger.warning(f"{self.prefix} {msg}")
