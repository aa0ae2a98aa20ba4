"""Component base class wiring assign declarations into class construction.

Subclasses declare their assigns in a ``declare_assigns`` classmethod. When
the ``class`` statement runs, the declarations are validated and registered
in order, the registry is finalized and generated docs are appended to the
class docstring. Any declaration error propagates out of the ``class``
statement, so a half-defined component never exists.

The init_context check needs the finished class, which includes whatever
class decorators add after ``__init_subclass__`` returns. It is therefore
queued and runs once, on first use of the component or through
`run_pending_checks`.

Example:
    >>> class Button(Component):
    ...     '''A clickable button.'''
    ...
    ...     @classmethod
    ...     def declare_assigns(cls, d):
    ...         d.doc("The button label")
    ...         d.property("label", "string", required=True)
    ...         d.context("get", "theme", from_=Layout)
    >>> Button.has_property("label")
    True
"""

from __future__ import annotations

import weakref
from typing import Any, ClassVar

from assigns.builder import AssignBuilder
from assigns.checks import check_init_context
from assigns.config import init_context_check_enabled
from assigns.core.log import get_logger
from assigns.finalize import AssignSchema
from assigns.schema import Assign

logger = get_logger(__name__)

# Components defined but not yet checked for init_context.
_pending: weakref.WeakSet[type[Component]] = weakref.WeakSet()


class Component:
    """Base class for components with declared assigns."""

    __assigns__: ClassVar[AssignSchema] = AssignSchema()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        builder = AssignBuilder(cls)
        if "declare_assigns" in cls.__dict__:
            cls.declare_assigns(builder)
        schema = builder.finalize(doc=cls.__dict__.get("__doc__"))
        cls.__assigns__ = schema
        cls.__doc__ = schema.docs
        if schema.context_sets:
            _pending.add(cls)
        logger.debug("Defined component %s", cls.__qualname__)

    def __new__(cls, *args: Any, **kwargs: Any):
        cls.check_definition()
        return super().__new__(cls)

    @classmethod
    def declare_assigns(cls, d: AssignBuilder) -> None:
        """Declare the component's assigns on the builder `d`."""

    @classmethod
    def check_definition(cls) -> list[str]:
        """Run the init_context check if it has not run for this class.

        Returns:
            The warning messages emitted; empty when the check already ran,
            is disabled, or found nothing.
        """
        if cls not in _pending:
            return []
        _pending.discard(cls)
        if not init_context_check_enabled():
            return []
        return check_init_context(cls, cls.__assigns__.context_sets)

    @classmethod
    def _schema(cls) -> AssignSchema:
        cls.check_definition()
        return cls.__assigns__

    @classmethod
    def list_properties(cls) -> list[Assign]:
        return cls._schema().list_properties()

    @classmethod
    def has_property(cls, name: str) -> bool:
        return cls._schema().has_property(name)

    @classmethod
    def get_property(cls, name: str) -> Assign | None:
        return cls._schema().get_property(name)

    @classmethod
    def list_data(cls) -> list[Assign]:
        return cls._schema().list_data()

    @classmethod
    def list_context_gets(cls) -> list[Assign]:
        return cls._schema().list_context_gets()

    @classmethod
    def list_context_sets(cls) -> list[Assign]:
        return cls._schema().list_context_sets()

    @classmethod
    def list_context_sets_in_scope(cls) -> list[Assign]:
        return cls._schema().list_context_sets_in_scope()

    @classmethod
    def list_context_assigns(cls) -> list[Assign]:
        return cls._schema().list_context_assigns()


def run_pending_checks() -> dict[type[Component], list[str]]:
    """Check every component still waiting for its init_context check.

    Call once all component modules are imported and decorated.

    Returns:
        Warning messages keyed by component class, for components that
        produced any.
    """
    results = {}
    for component in list(_pending):
        messages = component.check_definition()
        if messages:
            results[component] = messages
    return results


def is_component(obj: Any) -> bool:
    """True for Component subclasses (not the base class itself)."""
    return isinstance(obj, type) and issubclass(obj, Component) and obj is not Component


__all__ = ["Component", "is_component", "run_pending_checks"]
