"""Post-definition checks on finished components.

Runs once the component's class body is fully evaluated. The only check is
context completeness: every context set needs an ``init_context`` callback
taking the initial state. A missing callback is reported as a warning and
never fails the definition.
"""

from __future__ import annotations

import inspect
import warnings
from collections.abc import Iterable
from typing import Any

from assigns.core.log import get_logger
from assigns.schema import Assign, AssignKind, ContextAction

logger = get_logger(__name__)

INIT_CONTEXT = "init_context"


class ContextNotInitializedWarning(UserWarning):
    """A context set has no init_context callback to initialize it."""


def has_callable(component: Any, name: str, arity: int) -> bool:
    """Check whether a component exposes a callable accepting `arity` args.

    Looks the attribute up statically on the finished class (including its
    bases), so no instance is created and no descriptor runs. Methods are
    counted without their implicit self/cls argument.

    Args:
        component: The component class (or any object).
        name: Attribute name.
        arity: Number of positional arguments the caller will pass.

    Returns:
        True if calling ``component().<name>(*arity args)`` would bind.
    """
    try:
        attr = inspect.getattr_static(component, name)
    except AttributeError:
        return False

    if isinstance(attr, staticmethod):
        func, implicit = attr.__func__, 0
    elif isinstance(attr, classmethod):
        func, implicit = attr.__func__, 1
    elif inspect.isfunction(attr):
        func, implicit = attr, (1 if isinstance(component, type) else 0)
    else:
        return False

    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        return False

    try:
        signature.bind(*([None] * (implicit + arity)))
    except TypeError:
        return False
    return True


def missing_init_context_message(assign: Assign) -> str:
    return (
        f'context assign "{assign.name}" not initialized. '
        f"You should implement an {INIT_CONTEXT}/1 callback and initialize its "
        f'value by returning {{"{assign.name}": ...}}'
    )


def check_init_context(component: Any, context: Iterable[Assign]) -> list[str]:
    """Warn about context sets that nothing initializes.

    Args:
        component: The finished component class.
        context: The component's context declarations.

    Returns:
        The warning messages emitted, one per uninitialized context set.
    """
    if has_callable(component, INIT_CONTEXT, 1):
        return []

    messages = []
    for assign in context:
        if assign.kind is not AssignKind.CONTEXT:
            continue
        if assign.action is not ContextAction.SET:
            continue
        message = missing_init_context_message(assign)
        logger.warning("%s (%s)", message, assign.site)
        warnings.warn_explicit(
            message,
            ContextNotInitializedWarning,
            filename=assign.site.file or "<unknown>",
            lineno=assign.site.line or 0,
        )
        messages.append(message)
    return messages


__all__ = [
    "ContextNotInitializedWarning",
    "INIT_CONTEXT",
    "has_callable",
    "check_init_context",
    "missing_init_context_message",
]
