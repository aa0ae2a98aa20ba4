"""Errors raised while declaring component assigns."""

from .lib import (
    AssignDefinitionError,
    BuilderFinalizedError,
    DuplicateNameError,
    InvalidContextActionError,
    InvalidContextUsageError,
    InvalidNameError,
    InvalidOptionsShapeError,
    InvalidOptionValueError,
    InvalidTypeError,
    MissingAssignTypeError,
    MissingRequiredOptionError,
    UnknownOptionError,
)

__all__ = [
    "AssignDefinitionError",
    "InvalidNameError",
    "InvalidTypeError",
    "InvalidOptionsShapeError",
    "UnknownOptionError",
    "InvalidOptionValueError",
    "MissingRequiredOptionError",
    "MissingAssignTypeError",
    "InvalidContextActionError",
    "InvalidContextUsageError",
    "DuplicateNameError",
    "BuilderFinalizedError",
]
