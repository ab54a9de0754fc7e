"""Logging setup for Deck Clock."""

from deckclock.logging.config import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
