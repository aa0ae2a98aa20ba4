"""Declaration builder for component assigns.

One `AssignBuilder` exists per component under construction. Declarations run
through validation and registration immediately, in source order; `finalize`
then freezes the result into an `AssignSchema`.

Example:
    >>> d = AssignBuilder("Button")
    >>> d.doc("The button label")
    >>> d.property("label", "string", required=True)
    >>> d.context("get", "theme", from_="Layout")
    >>> schema = d.finalize()
    >>> schema.has_property("label")
    True
"""

from __future__ import annotations

import inspect
import keyword
from collections.abc import Mapping, Sequence
from typing import Any

from assigns.core.log import get_logger
from assigns.errors import (
    BuilderFinalizedError,
    InvalidContextActionError,
    InvalidContextUsageError,
)
from assigns.finalize import AssignSchema, finalize_registry
from assigns.registry import AssignRegistry
from assigns.schema import (
    PRIVATE_OPTIONS,
    Assign,
    AssignKind,
    AssignType,
    ContextAction,
    SourceSite,
    coerce_action,
    coerce_kind,
)
from assigns.validation import validate_assign

logger = get_logger(__name__)


def caller_site(stacklevel: int = 2) -> SourceSite:
    """Site of the frame `stacklevel` levels above this call."""
    frame = inspect.currentframe()
    try:
        for _ in range(stacklevel):
            frame = frame.f_back if frame is not None else None
        return SourceSite.from_frame(frame)
    finally:
        del frame


def option_name(key: str) -> str:
    """Map ``from_``/``as_`` style keyword arguments to option names."""
    if key.endswith("_") and keyword.iskeyword(key[:-1]):
        return key[:-1]
    return key


def merge_options(opts: Any, kwargs: Mapping[str, Any]) -> Any:
    """Combine positional options and keyword options.

    Keyword options are appended after the positional ones. Malformed
    positional options are returned untouched so validation reports them.
    """
    extra = [(option_name(key), value) for key, value in kwargs.items()]
    if opts is None:
        return extra
    if not extra:
        return opts
    pairs = _as_pairs(opts)
    return pairs + extra if isinstance(pairs, list) else opts


def _author_pairs(options: Any) -> list[tuple[str, Any]]:
    if isinstance(options, Mapping):
        options = list(options.items())
    return [
        (key, value) for key, value in options or () if key not in PRIVATE_OPTIONS
    ]


def _is_type_token(value: Any) -> bool:
    """Anything other than None, a mapping or a sequence of pairs is a type."""
    if value is None or isinstance(value, Mapping):
        return False
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        return not all(isinstance(item, tuple) and len(item) == 2 for item in value)
    return True


class AssignBuilder:
    """Collects and validates the assigns of one component.

    Attributes:
        component: Identity of the declaring component, a class or a name.
            Used as the ``to`` option of context sets.
    """

    def __init__(self, component: Any = None):
        self.component = component
        self._registry = AssignRegistry()
        self._pending_doc: str | None = None
        self._schema: AssignSchema | None = None

    @property
    def registry(self) -> AssignRegistry:
        return self._registry

    @property
    def finalized(self) -> bool:
        return self._schema is not None

    @property
    def schema(self) -> AssignSchema:
        """The finalized schema.

        Raises:
            RuntimeError: If `finalize` has not run yet.
        """
        if self._schema is None:
            raise RuntimeError("builder has not been finalized")
        return self._schema

    def doc(self, text: str) -> None:
        """Attach documentation to the next declaration."""
        self._ensure_open()
        self._pending_doc = text

    def pop_doc(self) -> str | None:
        """Read and clear the pending documentation."""
        doc, self._pending_doc = self._pending_doc, None
        return doc

    def declare(
        self,
        kind: AssignKind | str,
        name: Any,
        type_: Any,
        options: Any = None,
        site: SourceSite | None = None,
        raw_options: Any = None,
    ) -> Assign:
        """Validate a declaration and register it.

        Args:
            kind: Assign kind.
            name: Bare identifier naming the assign.
            type_: Type token from the closed type set.
            options: Evaluated options (mapping or sequence of pairs).
            site: Declaration site; defaults to the caller's location.
            raw_options: Author-facing options for docs; defaults to
                `options` without engine-internal keys.

        Returns:
            The registered Assign.

        Raises:
            AssignDefinitionError: If validation or registration fails.
        """
        self._ensure_open()
        if site is None:
            site = caller_site()
        kind = coerce_kind(kind)
        validated = validate_assign(kind, name, type_, options, site)
        assign = Assign(
            kind=kind,
            name=name,
            type=type_,
            doc=self.pop_doc(),
            options=validated,
            raw_options=tuple(
                _author_pairs(validated if raw_options is None else raw_options)
            ),
            site=site,
        )
        return self._registry.register(assign)

    def property(
        self, name: Any, type_: Any, opts: Any = None, *, site=None, **options
    ) -> Assign:
        """Declare a caller-supplied input."""
        site = site or caller_site()
        return self.declare(
            AssignKind.PROPERTY, name, type_, merge_options(opts, options), site
        )

    def data(
        self, name: Any, type_: Any, opts: Any = None, *, site=None, **options
    ) -> Assign:
        """Declare component-local state."""
        site = site or caller_site()
        return self.declare(
            AssignKind.DATA, name, type_, merge_options(opts, options), site
        )

    def context(
        self,
        action: Any,
        name: Any,
        type_or_opts: Any = None,
        opts: Any = None,
        *,
        site=None,
        **options,
    ) -> Assign:
        """Declare a context assign.

        ``context("get", name, opts)`` reads a value set by an ancestor and
        requires ``from``. ``context("set", name, type, opts)`` sets a value
        for this component and its descendants. A get never takes a type, and
        a set always needs one.
        """
        site = site or caller_site()
        resolved = coerce_action(action)
        if resolved is None:
            raise InvalidContextActionError(
                f"invalid context action. Expected 'get' or 'set', got: {action!r}"
            ).at(site.file, site.line)

        typed = opts is not None or _is_type_token(type_or_opts)
        if typed:
            type_, author = type_or_opts, merge_options(opts, options)
        else:
            type_, author = None, merge_options(type_or_opts, options)

        if resolved is ContextAction.GET:
            if typed:
                raise InvalidContextUsageError(
                    "cannot define the type of the assign when using action 'get'. "
                    "The type should be already defined by a parent component "
                    "using action 'set'"
                ).at(site.file, site.line)
            return self._context_get(name, author, site)

        if not typed:
            # Untyped set is not supported; validation rejects the missing type.
            internal = [("action", ContextAction.SET.value), ("to", self.component)]
            return self.declare(AssignKind.CONTEXT, name, None, internal, site)

        return self._context_set(name, type_, author, site)

    def _context_get(self, name: Any, author: Any, site: SourceSite) -> Assign:
        options = _as_pairs(author)
        if isinstance(options, list):
            options = [("action", ContextAction.GET.value)] + [
                pair for pair in options if _key(pair) not in PRIVATE_OPTIONS
            ]
        return self.declare(
            AssignKind.CONTEXT, name, AssignType.ANY, options, site, raw_options=author
        )

    def _context_set(
        self, name: Any, type_: Any, author: Any, site: SourceSite
    ) -> Assign:
        options = _as_pairs(author)
        if isinstance(options, list):
            options = [pair for pair in options if _key(pair) not in PRIVATE_OPTIONS]
            options += [("action", ContextAction.SET.value), ("to", self.component)]
        return self.declare(
            AssignKind.CONTEXT, name, type_, options, site, raw_options=author
        )

    def finalize(
        self, doc: str | None = None, heading: str | None = None
    ) -> AssignSchema:
        """Freeze the builder and compute the accessor views.

        Args:
            doc: Existing documentation of the component.
            heading: Heading of the generated properties block.

        Returns:
            The finalized AssignSchema.

        Raises:
            BuilderFinalizedError: If called more than once.
        """
        self._ensure_open()
        self._schema = finalize_registry(self._registry, doc=doc, heading=heading)
        logger.debug(
            "Finalized %s: %d properties, %d data, %d context",
            self.component,
            len(self._schema.properties),
            len(self._schema.data),
            len(self._registry.context),
        )
        return self._schema

    def _ensure_open(self) -> None:
        if self._schema is not None:
            raise BuilderFinalizedError(
                f"assigns of {self.component!r} are already finalized"
            )


def _as_pairs(options: Any) -> Any:
    if isinstance(options, Mapping):
        return list(options.items())
    if isinstance(options, Sequence) and not isinstance(options, (str, bytes)):
        return list(options)
    return options


def _key(pair: Any) -> Any:
    if isinstance(pair, tuple) and len(pair) == 2:
        return pair[0]
    return None


__all__ = ["AssignBuilder", "caller_site", "merge_options", "option_name"]
