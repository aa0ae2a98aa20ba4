"""Assign declaration validation utilities."""

from assigns.validation.lib import (
    is_bare_name,
    is_valid_assign,
    normalize_options,
    validate_assign,
    validate_name,
    validate_option_keys,
    validate_option_value,
    validate_required_options,
    validate_type,
)

__all__ = [
    "validate_assign",
    "is_valid_assign",
    "is_bare_name",
    "normalize_options",
    "validate_name",
    "validate_type",
    "validate_option_keys",
    "validate_option_value",
    "validate_required_options",
]
