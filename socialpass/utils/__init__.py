"""Utility modules for the Socialpass application."""

from socialpass.utils.logging import get_logger, LogContext, setup_logging
from socialpass.utils.secrets import mask_secret

__all__ = [
    # Logging
    "get_logger",
    "LogContext",
    "setup_logging",
    # Secrets
    "mask_secret",
]
