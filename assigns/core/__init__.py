"""Core utilities shared across the assigns package."""

from .log import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
