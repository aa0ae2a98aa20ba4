"""Schema module - authoritative source for assign declaration shapes.

This module provides:
- Assign kinds, the closed type set, context actions and scopes
- Option tables per (kind, type, action)
- The immutable `Assign` record

Example usage:
    >>> from assigns.schema import AssignKind, get_valid_options
    >>> get_valid_options(AssignKind.PROPERTY, "list")
    ['required', 'default', 'binding']
"""

from .lib import (
    ASSIGN_TYPES,
    PRIVATE_OPTIONS,
    Assign,
    AssignKind,
    AssignType,
    ContextAction,
    ContextScope,
    SourceSite,
    coerce_action,
    coerce_kind,
    coerce_type,
    export_option_table,
    format_option_value,
    get_required_options,
    get_valid_options,
)

__all__ = [
    # Enums
    "AssignKind",
    "AssignType",
    "ContextAction",
    "ContextScope",
    # Constants
    "ASSIGN_TYPES",
    "PRIVATE_OPTIONS",
    # Records
    "SourceSite",
    "Assign",
    # Coercion
    "coerce_kind",
    "coerce_type",
    "coerce_action",
    # Option tables
    "get_valid_options",
    "get_required_options",
    "format_option_value",
    "export_option_table",
]
