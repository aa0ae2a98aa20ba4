"""Declaration validation pipeline.

`validate_assign` runs the checks in a fixed order and raises on the first
failure:

    1. name shape          -> InvalidNameError
    2. type membership     -> InvalidTypeError / MissingAssignTypeError
    3. options shape       -> InvalidOptionsShapeError
    4. option membership   -> UnknownOptionError
    5. per-option values   -> InvalidOptionValueError
    6. required options    -> MissingRequiredOptionError
"""

from __future__ import annotations

import keyword
from collections.abc import Mapping, Sequence
from typing import Any

from assigns.errors import (
    AssignDefinitionError,
    InvalidContextActionError,
    InvalidNameError,
    InvalidOptionsShapeError,
    InvalidOptionValueError,
    InvalidTypeError,
    MissingAssignTypeError,
    MissingRequiredOptionError,
    UnknownOptionError,
)
from assigns.schema import (
    ASSIGN_TYPES,
    PRIVATE_OPTIONS,
    AssignKind,
    AssignType,
    ContextAction,
    ContextScope,
    SourceSite,
    coerce_action,
    coerce_kind,
    coerce_type,
    get_required_options,
    get_valid_options,
)

OptionPairs = list[tuple[str, Any]]

_SCOPES = tuple(scope.value for scope in ContextScope)


def validate_assign(
    kind: AssignKind | str,
    name: Any,
    type_: Any,
    options: Any,
    site: SourceSite | None = None,
) -> dict[str, Any]:
    """Validate a declaration.

    Args:
        kind: Assign kind.
        name: Declared name; must be a bare identifier.
        type_: Type token; None means no type was given.
        options: Evaluated options, as a mapping or a sequence of pairs.
        site: Declaration site attached to any error raised.

    Returns:
        The options as an ordered dict.

    Raises:
        AssignDefinitionError: On the first failing check.
    """
    kind = coerce_kind(kind)
    try:
        name = validate_name(kind, name)
        assign_type = validate_type(kind, name, type_)
        pairs = normalize_options(kind, name, options)
        validate_option_keys(kind, assign_type, pairs)
        for key, value in pairs:
            validate_option_value(kind, key, value)
        validate_required_options(kind, assign_type, pairs)
    except AssignDefinitionError as e:
        if site is not None:
            e.at(site.file, site.line)
        raise
    return dict(pairs)


def is_valid_assign(
    kind: AssignKind | str, name: Any, type_: Any, options: Any
) -> bool:
    """Check a declaration without raising.

    Example:
        >>> is_valid_assign("property", "label", "string", {"required": True})
        True
    """
    try:
        validate_assign(kind, name, type_, options)
    except AssignDefinitionError:
        return False
    return True


def is_bare_name(value: Any) -> bool:
    """True for strings that are plain, non-keyword identifiers."""
    return (
        isinstance(value, str) and value.isidentifier() and not keyword.iskeyword(value)
    )


def validate_name(kind: AssignKind, name: Any) -> str:
    if not is_bare_name(name):
        raise InvalidNameError(
            f"invalid {kind.value} name. Expected a variable name, got: {name!r}"
        )
    return name


def validate_type(kind: AssignKind, name: str, type_: Any) -> AssignType:
    if type_ is None:
        raise MissingAssignTypeError(
            "action 'set' requires the type of the assign as third argument"
        )
    assign_type = coerce_type(type_)
    if assign_type is None:
        raise InvalidTypeError(
            f"invalid type {_token(type_)} for {kind.value} {name}. "
            f"Expected one of {list(ASSIGN_TYPES)}. "
            "Use 'any' if the type is not listed"
        )
    return assign_type


def normalize_options(kind: AssignKind, name: str, options: Any) -> OptionPairs:
    """Turn options into ordered (key, value) pairs.

    Accepts None, a mapping, or a sequence of 2-item pairs with string keys.
    Duplicate keys are rejected.
    """
    if options is None:
        return []

    pairs: OptionPairs | None = None
    if isinstance(options, Mapping):
        pairs = list(options.items())
    elif isinstance(options, Sequence) and not isinstance(options, (str, bytes)):
        if all(isinstance(item, tuple) and len(item) == 2 for item in options):
            pairs = list(options)

    if pairs is not None:
        keys = [key for key, _ in pairs]
        if all(isinstance(key, str) for key in keys) and len(set(keys)) == len(keys):
            return pairs

    raise InvalidOptionsShapeError(
        f"invalid options for {kind.value} {name}. "
        f"Expected a mapping of options, got: {options!r}"
    )


def resolve_action(pairs: OptionPairs) -> ContextAction:
    raw = dict(pairs).get("action")
    action = coerce_action(raw)
    if action is None:
        raise InvalidContextActionError(
            f"invalid context action. Expected 'get' or 'set', got: {raw!r}"
        )
    return action


def validate_option_keys(
    kind: AssignKind, assign_type: AssignType, pairs: OptionPairs
) -> None:
    action = resolve_action(pairs) if kind is AssignKind.CONTEXT else None
    valid = get_valid_options(kind, assign_type, action)
    unknown = [
        key for key, _ in pairs if key not in valid and key not in PRIVATE_OPTIONS
    ]
    if not unknown:
        return

    if len(unknown) == 1:
        head = f"unknown option {unknown[0]!r}"
    else:
        head = f"unknown options {unknown!r}"
    raise UnknownOptionError(
        f"{head}. Available options: {valid!r}", unknown=unknown, available=valid
    )


def validate_option_value(kind: AssignKind, key: str, value: Any) -> None:
    expected = None
    if key == "required" and not isinstance(value, bool):
        expected = "a boolean"
    elif key == "values" and not _is_sequence(value):
        expected = "a list of values"
    elif kind is AssignKind.CONTEXT:
        if key == "scope" and _enum_value(value) not in _SCOPES:
            expected = "'only_children' or 'self_and_children'"
        elif key == "from" and not _is_component_ref(value):
            expected = "a component"
        elif key == "as" and not is_bare_name(value):
            expected = "a variable name"

    if expected is not None:
        raise InvalidOptionValueError(
            f"invalid value for option {key!r}. Expected {expected}, got: {value!r}",
            key=key,
            expected=expected,
            value=value,
        )


def validate_required_options(
    kind: AssignKind, assign_type: AssignType, pairs: OptionPairs
) -> None:
    action = resolve_action(pairs) if kind is AssignKind.CONTEXT else None
    keys = {key for key, _ in pairs}
    missing = [
        key for key in get_required_options(kind, assign_type, action) if key not in keys
    ]
    if missing:
        raise MissingRequiredOptionError(
            f"the following options are required: {missing!r}", missing=missing
        )


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _is_component_ref(value: Any) -> bool:
    if isinstance(value, type):
        return True
    return isinstance(value, str) and all(
        is_bare_name(part) for part in value.split(".")
    )


def _enum_value(value: Any) -> Any:
    return value.value if isinstance(value, ContextScope) else value


def _token(value: Any) -> str:
    if isinstance(value, type):
        return value.__qualname__
    return repr(value)


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
