"""Definition-time error taxonomy for component assigns.

Every error here aborts the enclosing component definition. Errors carry the
source site of the offending declaration so they read like compile errors:
``path/to/file.py:12: invalid type 'str' for property label. ...``.
"""

from __future__ import annotations

from typing import Any


class AssignDefinitionError(Exception):
    """Base exception for invalid assign declarations.

    Attributes:
        description: Human-readable message without location.
        file: Source file of the declaration, if known.
        line: Source line of the declaration, if known.
    """

    def __init__(
        self,
        description: str,
        file: str | None = None,
        line: int | None = None,
    ):
        super().__init__(description)
        self.description = description
        self.file = file
        self.line = line

    def at(self, file: str | None, line: int | None) -> AssignDefinitionError:
        """Attach a source location unless one is already set."""
        if self.file is None and self.line is None:
            self.file = file
            self.line = line
        return self

    def __str__(self) -> str:
        if self.file is None:
            return self.description
        if self.line is None:
            return f"{self.file}: {self.description}"
        return f"{self.file}:{self.line}: {self.description}"


class InvalidNameError(AssignDefinitionError):
    """Raised when the declared name is not a bare identifier."""


class InvalidTypeError(AssignDefinitionError):
    """Raised when the type is outside the closed type set."""


class InvalidOptionsShapeError(AssignDefinitionError):
    """Raised when options are not a well-formed key/value mapping."""


class UnknownOptionError(AssignDefinitionError):
    """Raised for option keys outside the allowed set.

    Attributes:
        unknown: The offending keys, in declaration order.
        available: The author-facing options valid for this declaration.
    """

    def __init__(
        self,
        description: str,
        unknown: list[str] | None = None,
        available: list[str] | None = None,
    ):
        super().__init__(description)
        self.unknown = unknown or []
        self.available = available or []


class InvalidOptionValueError(AssignDefinitionError):
    """Raised when an option value has the wrong shape.

    Attributes:
        key: The option name.
        expected: Description of the expected shape.
        value: The value that was supplied.
    """

    def __init__(self, description: str, key: str, expected: str, value: Any):
        super().__init__(description)
        self.key = key
        self.expected = expected
        self.value = value


class MissingRequiredOptionError(AssignDefinitionError):
    """Raised when a required option is absent.

    Attributes:
        missing: Names of the missing options.
    """

    def __init__(self, description: str, missing: list[str] | None = None):
        super().__init__(description)
        self.missing = missing or []


class MissingAssignTypeError(InvalidTypeError, MissingRequiredOptionError):
    """Raised when a declaration that needs a type does not give one."""

    def __init__(self, description: str):
        MissingRequiredOptionError.__init__(self, description, missing=["type"])


class InvalidContextActionError(AssignDefinitionError):
    """Raised when a context action is neither get nor set."""


class InvalidContextUsageError(AssignDefinitionError):
    """Raised when a type is given to a context get."""


class DuplicateNameError(AssignDefinitionError):
    """Raised when a name is already taken in the component.

    Attributes:
        existing: The assign that already holds the name.
    """

    def __init__(self, description: str, existing: Any = None):
        super().__init__(description)
        self.existing = existing


class BuilderFinalizedError(RuntimeError):
    """Raised when a finalized builder is used again."""


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
