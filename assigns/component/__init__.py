"""Component base class and introspection surface."""

from .lib import Component, is_component, run_pending_checks

__all__ = ["Component", "is_component", "run_pending_checks"]
