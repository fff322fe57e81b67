"""Utility modules for profile cache."""

from .logging import configure_logging
from .validation import INVALID_HANDLE_MESSAGE, MAX_HANDLE_LENGTH, is_valid_handle

__all__ = [
    "INVALID_HANDLE_MESSAGE",
    "MAX_HANDLE_LENGTH",
    "configure_logging",
    "is_valid_handle",
]
