"""component-assigns: declarative schema and validation for component assigns."""

from assigns.builder import AssignBuilder
from assigns.checks import ContextNotInitializedWarning, check_init_context
from assigns.component import Component, run_pending_checks
from assigns.errors import (
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
from assigns.finalize import AssignSchema
from assigns.schema import (
    Assign,
    AssignKind,
    AssignType,
    ContextAction,
    ContextScope,
    SourceSite,
)
from assigns.validation import validate_assign

__all__ = [
    # Declaration
    "Component",
    "AssignBuilder",
    "AssignSchema",
    "validate_assign",
    "check_init_context",
    "run_pending_checks",
    # Schema
    "Assign",
    "AssignKind",
    "AssignType",
    "ContextAction",
    "ContextScope",
    "SourceSite",
    # Errors
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
    "ContextNotInitializedWarning",
]
