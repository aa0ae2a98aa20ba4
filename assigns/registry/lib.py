"""Per-component assign registry and conflict resolution.

The registry keeps two structures:
- a flat ``name -> Assign`` map enforcing uniqueness across all kinds
- one ordered sequence per kind, in declaration order

A context set scoped to ``only_children`` never enters the flat map: it sets
a value for descendants without taking a name in the declaring component.
"""

from __future__ import annotations

from assigns.core.log import get_logger
from assigns.errors import DuplicateNameError
from assigns.schema import Assign, AssignKind, ContextAction

logger = get_logger(__name__)

_SET_HINT = (
    "if you only need this context assign in the child components, "
    "you can set option 'scope' as 'only_children' to solve the issue."
)
_GET_HINT = "you can use the 'as' option to set another name for the context assign."


class AssignRegistry:
    """Accumulates the assigns declared by one component.

    Example:
        >>> registry = AssignRegistry()
        >>> registry.register(assign)
        >>> registry.properties
        [Assign(kind=<AssignKind.PROPERTY: 'property'>, ...)]
    """

    def __init__(self) -> None:
        self._by_name: dict[str, Assign] = {}
        self._by_kind: dict[AssignKind, list[Assign]] = {
            kind: [] for kind in AssignKind
        }

    def register(self, assign: Assign) -> Assign:
        """Register an assign, enforcing name uniqueness.

        Args:
            assign: A validated assign.

        Returns:
            The registered assign.

        Raises:
            DuplicateNameError: If the name is already taken by a non-exempt
                assign.
        """
        if not assign.is_only_children:
            existing = self._by_name.get(assign.key)
            if existing is not None:
                where = "" if existing.line is None else f" at line {existing.line}"
                raise DuplicateNameError(
                    f'cannot use name "{assign.name}". There\'s already '
                    f"a {existing.kind.value} assign with the same name"
                    f"{where}.{duplicate_hint(assign, existing)}",
                    existing=existing,
                ).at(assign.site.file, assign.site.line)
            self._by_name[assign.key] = assign

        self._by_kind[assign.kind].append(assign)
        logger.debug(
            "Registered %s %s (%s) at %s",
            assign.kind.value,
            assign.name,
            assign.type.value,
            assign.site,
        )
        return assign

    def lookup(self, name: str) -> Assign | None:
        """Get the assign occupying a name, if any."""
        return self._by_name.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __len__(self) -> int:
        return sum(len(assigns) for assigns in self._by_kind.values())

    def names(self) -> list[str]:
        """Names occupied in the uniqueness map, in registration order."""
        return list(self._by_name)

    def of_kind(self, kind: AssignKind) -> list[Assign]:
        """Assigns of one kind, in declaration order."""
        return list(self._by_kind[kind])

    @property
    def properties(self) -> list[Assign]:
        return self.of_kind(AssignKind.PROPERTY)

    @property
    def data(self) -> list[Assign]:
        return self.of_kind(AssignKind.DATA)

    @property
    def context(self) -> list[Assign]:
        return self.of_kind(AssignKind.CONTEXT)


def duplicate_hint(assign: Assign, existing: Assign | None = None) -> str:
    """Suggest a fix for a name collision.

    The hint follows the context declaration involved in the collision,
    preferring the new one. Returns an empty string when neither side is a
    context.
    """
    if assign.kind is not AssignKind.CONTEXT:
        if existing is None or existing.kind is not AssignKind.CONTEXT:
            return ""
        assign = existing
    if assign.action is ContextAction.SET:
        return f"\nHint: {_SET_HINT}"
    return f"\nHint: {_GET_HINT}"


__all__ = ["AssignRegistry", "duplicate_hint"]
