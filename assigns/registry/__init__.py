"""Per-component registry of declared assigns."""

from .lib import AssignRegistry, duplicate_hint

__all__ = ["AssignRegistry", "duplicate_hint"]
