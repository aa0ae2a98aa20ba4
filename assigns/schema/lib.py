"""Authoritative schema for component assign declarations.

This module is the single source of truth for what an assign can be:
- The three assign kinds and the closed set of assign types
- Context actions and scopes
- Which options each (kind, type, action) combination accepts
- The `Assign` record produced by a successful declaration

All option-table queries should route through this module.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AssignKind(str, Enum):
    """The three kinds of component assigns."""

    PROPERTY = "property"
    DATA = "data"
    CONTEXT = "context"


class AssignType(str, Enum):
    """Closed set of assign types.

    There is no escape hatch; ANY is the universal fallback.
    """

    ANY = "any"
    CSS_CLASS = "css_class"
    LIST = "list"
    EVENT = "event"
    CHILDREN = "children"
    BOOLEAN = "boolean"
    STRING = "string"
    DATE = "date"
    DATETIME = "datetime"
    NUMBER = "number"
    INTEGER = "integer"
    DECIMAL = "decimal"
    MAP = "map"
    FUN = "fun"
    ATOM = "atom"
    MODULE = "module"
    CHANGESET = "changeset"
    FORM = "form"


class ContextAction(str, Enum):
    """Operational mode of a context declaration.

    - GET: read a value set by an ancestor component
    - SET: establish a value for this component and/or its descendants
    """

    GET = "get"
    SET = "set"


class ContextScope(str, Enum):
    """Visibility of a context set.

    - ONLY_CHILDREN: descendants only; the declaring component cannot read it
    - SELF_AND_CHILDREN: the declaring component and its descendants (default)
    """

    ONLY_CHILDREN = "only_children"
    SELF_AND_CHILDREN = "self_and_children"


ASSIGN_TYPES: tuple[str, ...] = tuple(t.value for t in AssignType)

# Engine-internal options, always accepted but never shown to authors
PRIVATE_OPTIONS: tuple[str, ...] = ("action", "to")

_PROPERTY_LIST_OPTIONS = ("required", "default", "binding")
_PROPERTY_CHILDREN_OPTIONS = ("required", "group", "use_bindings")
_PROPERTY_OPTIONS = ("required", "default", "values")
_DATA_OPTIONS = ("default", "values")
_CONTEXT_GET_OPTIONS = ("from", "as")
_CONTEXT_SET_OPTIONS = ("scope",)


@dataclass(frozen=True)
class SourceSite:
    """Where a declaration was written, used only for diagnostics."""

    file: str | None = None
    line: int | None = None

    @classmethod
    def from_frame(cls, frame: Any) -> SourceSite:
        """Build a site from a Python frame object."""
        if frame is None:
            return cls()
        return cls(file=_relative_path(frame.f_code.co_filename), line=frame.f_lineno)

    def __str__(self) -> str:
        if self.file is None:
            return "<unknown>"
        return f"{self.file}:{self.line}" if self.line is not None else self.file


def _relative_path(path: str) -> str:
    try:
        relative = os.path.relpath(path)
    except ValueError:
        return path
    return path if relative.startswith("..") else relative


def coerce_kind(kind: AssignKind | str) -> AssignKind:
    """Convert a kind token to AssignKind.

    Raises:
        ValueError: If the token is not a known kind.
    """
    return kind if isinstance(kind, AssignKind) else AssignKind(kind)


def coerce_type(type_: Any) -> AssignType | None:
    """Convert a type token to AssignType, or None if it is not in the set."""
    if isinstance(type_, AssignType):
        return type_
    if isinstance(type_, str):
        try:
            return AssignType(type_)
        except ValueError:
            return None
    return None


def coerce_action(action: Any) -> ContextAction | None:
    """Convert an action token to ContextAction, or None if unrecognized."""
    if isinstance(action, ContextAction):
        return action
    if isinstance(action, str):
        try:
            return ContextAction(action)
        except ValueError:
            return None
    return None


def get_valid_options(
    kind: AssignKind | str,
    type_: AssignType | str | None,
    action: ContextAction | str | None = None,
) -> list[str]:
    """Get the author-facing options accepted by a declaration.

    Args:
        kind: Assign kind.
        type_: Assign type (only distinguishes list and children properties).
        action: Context action; required when kind is context.

    Returns:
        Option names in display order. Private options are not included.

    Raises:
        ValueError: If kind is context and action is not get or set.
    """
    kind = coerce_kind(kind)
    type_ = coerce_type(type_)

    if kind is AssignKind.PROPERTY:
        if type_ is AssignType.LIST:
            return list(_PROPERTY_LIST_OPTIONS)
        if type_ is AssignType.CHILDREN:
            return list(_PROPERTY_CHILDREN_OPTIONS)
        return list(_PROPERTY_OPTIONS)

    if kind is AssignKind.DATA:
        return list(_DATA_OPTIONS)

    resolved = coerce_action(action)
    if resolved is ContextAction.GET:
        return list(_CONTEXT_GET_OPTIONS)
    if resolved is ContextAction.SET:
        return list(_CONTEXT_SET_OPTIONS)
    raise ValueError(f"context options depend on the action, got: {action!r}")


def get_required_options(
    kind: AssignKind | str,
    type_: AssignType | str | None = None,
    action: ContextAction | str | None = None,
) -> list[str]:
    """Get the options a declaration must supply.

    Only a context get has a requirement: the component it reads from.
    """
    if coerce_kind(kind) is AssignKind.CONTEXT:
        if coerce_action(action) is ContextAction.GET:
            return ["from"]
    return []


def format_option_value(value: Any) -> str:
    """Render an option value for docs and messages."""
    if isinstance(value, Enum):
        return repr(value.value)
    if isinstance(value, type):
        return value.__qualname__
    return repr(value)


class Assign(BaseModel):
    """A registered, validated assign declaration.

    Immutable once registered. `options` holds the full evaluated option
    mapping, including engine-internal keys, behind a read-only proxy;
    `raw_options` keeps only what the author wrote, in order, for
    documentation.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: AssignKind
    name: str = Field(..., description="Identifier of the assign")
    type: AssignType
    doc: str | None = Field(None, description="Captured documentation string")
    options: Mapping[str, Any] = Field(default_factory=lambda: MappingProxyType({}))
    raw_options: tuple[tuple[str, Any], ...] = Field(default_factory=tuple)
    site: SourceSite = Field(default_factory=SourceSite)

    @field_validator("options")
    @classmethod
    def freeze_options(cls, v: Mapping[str, Any]) -> Mapping[str, Any]:
        return MappingProxyType(dict(v))

    @property
    def line(self) -> int | None:
        """Declaration line, if known."""
        return self.site.line

    @property
    def action(self) -> ContextAction | None:
        """Context action, or None for properties and data."""
        return coerce_action(self.options.get("action"))

    @property
    def scope(self) -> ContextScope:
        """Context scope; absent means self_and_children."""
        scope = self.options.get("scope", ContextScope.SELF_AND_CHILDREN)
        return ContextScope(scope)

    @property
    def key(self) -> str:
        """Name this assign occupies in the component namespace."""
        return self.options.get("as") or self.name

    @property
    def is_only_children(self) -> bool:
        """True for a context set scoped to descendants only."""
        return (
            self.kind is AssignKind.CONTEXT
            and self.action is ContextAction.SET
            and self.scope is ContextScope.ONLY_CHILDREN
        )

    def format_options(self) -> str:
        """Render author options as ``key=value, ...``."""
        return ", ".join(
            f"{key}={format_option_value(value)}" for key, value in self.raw_options
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-friendly dictionary."""
        return {
            "kind": self.kind.value,
            "name": self.name,
            "type": self.type.value,
            "doc": self.doc,
            "options": {
                key: _jsonable(value) for key, value in self.options.items()
            },
            "file": self.site.file,
            "line": self.site.line,
        }


def _jsonable(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, type):
        return f"{value.__module__}.{value.__qualname__}"
    if isinstance(value, (list, tuple)):
        return [_jsonable(v) for v in value]
    if isinstance(value, dict):
        return {str(k): _jsonable(v) for k, v in value.items()}
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    return repr(value)


def export_option_table() -> dict[str, Any]:
    """Export the option table for tooling.

    Returns:
        Dict keyed by kind with the valid and required options per variant.
    """
    return {
        "types": list(ASSIGN_TYPES),
        "property": {
            "list": get_valid_options(AssignKind.PROPERTY, AssignType.LIST),
            "children": get_valid_options(AssignKind.PROPERTY, AssignType.CHILDREN),
            "*": get_valid_options(AssignKind.PROPERTY, AssignType.ANY),
        },
        "data": {"*": get_valid_options(AssignKind.DATA, AssignType.ANY)},
        "context": {
            action.value: {
                "valid": get_valid_options(AssignKind.CONTEXT, None, action),
                "required": get_required_options(AssignKind.CONTEXT, None, action),
            }
            for action in ContextAction
        },
    }


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
