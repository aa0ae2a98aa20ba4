"""Checks run after a component definition is complete."""

from .lib import (
    INIT_CONTEXT,
    ContextNotInitializedWarning,
    check_init_context,
    has_callable,
    missing_init_context_message,
)

__all__ = [
    "ContextNotInitializedWarning",
    "INIT_CONTEXT",
    "has_callable",
    "check_init_context",
    "missing_init_context_message",
]
