"""Finalization of a component's registry into accessor views.

Runs once after every declaration is registered and produces an immutable
`AssignSchema`. Context declarations are partitioned as follows:

- ``context_gets``: every get
- ``context_sets``: every set, whatever its scope
- ``context_sets_in_scope``: sets the declaring component can read itself
- ``context_assigns``: gets followed by in-scope sets
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from assigns.docs import generate_docs
from assigns.registry import AssignRegistry
from assigns.schema import Assign, ContextAction, ContextScope


@dataclass(frozen=True)
class AssignSchema:
    """Finalized, read-only view of a component's assigns.

    Attributes:
        properties: Properties in declaration order.
        property_names: Names of all properties, for membership tests.
        properties_by_name: Name to property lookup.
        data: Data assigns in declaration order.
        context_gets: Context gets.
        context_sets: Context sets, including only_children ones.
        context_sets_in_scope: Context sets readable by the component itself.
        context_assigns: Context names resolvable inside the component.
        docs: Generated documentation text.
    """

    properties: tuple[Assign, ...] = ()
    property_names: frozenset[str] = frozenset()
    properties_by_name: Mapping[str, Assign] = field(
        default_factory=lambda: MappingProxyType({})
    )
    data: tuple[Assign, ...] = ()
    context_gets: tuple[Assign, ...] = ()
    context_sets: tuple[Assign, ...] = ()
    context_sets_in_scope: tuple[Assign, ...] = ()
    context_assigns: tuple[Assign, ...] = ()
    docs: str = ""

    def list_properties(self) -> list[Assign]:
        return list(self.properties)

    def has_property(self, name: str) -> bool:
        return name in self.property_names

    def get_property(self, name: str) -> Assign | None:
        return self.properties_by_name.get(name)

    def list_data(self) -> list[Assign]:
        return list(self.data)

    def list_context_gets(self) -> list[Assign]:
        return list(self.context_gets)

    def list_context_sets(self) -> list[Assign]:
        return list(self.context_sets)

    def list_context_sets_in_scope(self) -> list[Assign]:
        return list(self.context_sets_in_scope)

    def list_context_assigns(self) -> list[Assign]:
        return list(self.context_assigns)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-friendly dictionary."""
        return {
            "properties": [p.to_dict() for p in self.properties],
            "data": [d.to_dict() for d in self.data],
            "context": {
                "gets": [c.to_dict() for c in self.context_gets],
                "sets": [c.to_dict() for c in self.context_sets],
                "sets_in_scope": [c.name for c in self.context_sets_in_scope],
                "assigns": [c.key for c in self.context_assigns],
            },
            "docs": self.docs,
        }


def finalize_registry(
    registry: AssignRegistry,
    doc: str | None = None,
    heading: str | None = None,
) -> AssignSchema:
    """Compute the accessor views and docs for a registry.

    Args:
        registry: The registry holding every declaration of the component.
        doc: Existing documentation of the component, if any.
        heading: Heading for the generated properties block.

    Returns:
        The finalized schema.
    """
    props = tuple(registry.properties)
    context = registry.context

    gets = tuple(c for c in context if c.action is ContextAction.GET)
    sets = tuple(c for c in context if c.action is ContextAction.SET)
    sets_in_scope = tuple(c for c in sets if c.scope is not ContextScope.ONLY_CHILDREN)

    return AssignSchema(
        properties=props,
        property_names=frozenset(p.name for p in props),
        properties_by_name=MappingProxyType({p.name: p for p in props}),
        data=tuple(registry.data),
        context_gets=gets,
        context_sets=sets,
        context_sets_in_scope=sets_in_scope,
        context_assigns=gets + sets_in_scope,
        docs=generate_docs(doc, props, heading),
    )


__all__ = ["AssignSchema", "finalize_registry"]
