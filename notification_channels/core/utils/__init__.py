"""Utilities package."""

from .exceptions import AppError
from .logging import configure_logging, get_logger, mask_pii

__all__ = ["AppError", "configure_logging", "get_logger", "mask_pii"]
