"""Utility functions for the text repeater."""

from repeater.utils.logging import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]
