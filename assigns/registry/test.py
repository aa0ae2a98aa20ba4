"""Unit tests for the assign registry."""

import pytest

from assigns.errors import DuplicateNameError
from assigns.registry import AssignRegistry, duplicate_hint
from assigns.schema import Assign, SourceSite


class Parent:
    """Stand-in component class."""


def make(kind, name, type_="string", line=1, **options):
    return Assign(
        kind=kind,
        name=name,
        type=type_,
        options=options,
        site=SourceSite(file="button.py", line=line),
    )


def context_set(name, line=1, **options):
    return make("context", name, "integer", line, action="set", to=Parent, **options)


def context_get(name, line=1, **options):
    return make("context", name, "any", line, action="get", **{"from": Parent}, **options)


class TestRegister:
    """Tests for registration and ordering."""

    @pytest.mark.unit
    def test_sequences_keep_declaration_order(self):
        """Each kind keeps its own insertion order."""
        registry = AssignRegistry()
        registry.register(make("property", "a"))
        registry.register(make("data", "b"))
        registry.register(make("property", "c"))

        assert [p.name for p in registry.properties] == ["a", "c"]
        assert [d.name for d in registry.data] == ["b"]
        assert registry.context == []
        assert len(registry) == 3
        assert registry.names() == ["a", "b", "c"]

    @pytest.mark.unit
    def test_returns_registered_assign(self):
        """register returns its argument."""
        assign = make("property", "label")
        assert AssignRegistry().register(assign) is assign

    @pytest.mark.unit
    def test_lookup(self):
        """Registered names can be looked up."""
        registry = AssignRegistry()
        registry.register(make("data", "count", "integer"))
        assert "count" in registry
        assert registry.lookup("count").type.value == "integer"
        assert registry.lookup("missing") is None


class TestDuplicates:
    """Tests for conflict resolution."""

    @pytest.mark.unit
    def test_same_name_across_kinds(self):
        """A name is unique across property, data and context."""
        registry = AssignRegistry()
        registry.register(make("property", "label", line=3))
        with pytest.raises(DuplicateNameError) as exc:
            registry.register(make("data", "label", line=5))

        message = str(exc.value)
        assert message.startswith("button.py:5:")
        assert 'cannot use name "label"' in message
        assert "already a property assign with the same name at line 3" in message
        assert "Hint" not in message
        assert exc.value.existing.kind.value == "property"

    @pytest.mark.unit
    def test_unknown_line_omitted(self):
        """Without a known site the message does not mention a line."""
        registry = AssignRegistry()
        registry.register(Assign(kind="property", name="label", type="string"))
        with pytest.raises(DuplicateNameError) as exc:
            registry.register(make("data", "label", line=5))

        message = str(exc.value)
        assert "already a property assign with the same name." in message
        assert "line None" not in message

    @pytest.mark.unit
    def test_context_set_hint(self):
        """A colliding context set suggests only_children."""
        registry = AssignRegistry()
        registry.register(make("property", "count"))
        with pytest.raises(DuplicateNameError) as exc:
            registry.register(context_set("count"))
        assert "'only_children'" in str(exc.value)

    @pytest.mark.unit
    def test_context_get_hint(self):
        """A colliding context get suggests the as option."""
        registry = AssignRegistry()
        registry.register(make("data", "theme"))
        with pytest.raises(DuplicateNameError) as exc:
            registry.register(context_get("theme"))
        assert "'as' option" in str(exc.value)

    @pytest.mark.unit
    def test_only_children_exempt(self):
        """only_children sets neither collide nor occupy the name."""
        registry = AssignRegistry()
        registry.register(context_set("count", scope="only_children"))
        registry.register(context_set("count", scope="only_children"))
        registry.register(make("property", "count"))

        assert len(registry.context) == 2
        assert registry.lookup("count").kind.value == "property"

    @pytest.mark.unit
    def test_self_and_children_not_exempt(self):
        """An explicit self_and_children scope still occupies the name."""
        registry = AssignRegistry()
        registry.register(context_set("count", scope="self_and_children"))
        with pytest.raises(DuplicateNameError):
            registry.register(make("property", "count"))

    @pytest.mark.unit
    def test_as_renames_slot(self):
        """A get renamed with as no longer collides on its declared name."""
        registry = AssignRegistry()
        registry.register(make("property", "theme"))
        registry.register(context_get("theme", **{"as": "parent_theme"}))

        assert registry.lookup("parent_theme").kind.value == "context"
        with pytest.raises(DuplicateNameError):
            registry.register(make("data", "parent_theme"))


class TestDuplicateHint:
    """Tests for duplicate_hint."""

    @pytest.mark.unit
    def test_no_hint_for_property(self):
        """Properties and data have no hint."""
        assert duplicate_hint(make("property", "x")) == ""
        assert duplicate_hint(make("data", "x")) == ""

    @pytest.mark.unit
    def test_hint_from_existing_context(self):
        """A property colliding with an earlier context get gets its hint."""
        hint = duplicate_hint(make("property", "theme"), context_get("theme"))
        assert "'as' option" in hint

    @pytest.mark.unit
    def test_hint_prefix(self):
        """Hints start on their own line."""
        assert duplicate_hint(context_get("x")).startswith("\nHint: ")
