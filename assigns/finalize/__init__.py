"""Finalized accessor views over a component's assigns."""

from .lib import AssignSchema, finalize_registry

__all__ = ["AssignSchema", "finalize_registry"]
