"""Unit tests for the Component base class."""

import warnings

import pytest

from assigns.checks import ContextNotInitializedWarning
from assigns.component import Component, is_component, run_pending_checks
from assigns.errors import (
    AssignDefinitionError,
    DuplicateNameError,
    InvalidContextUsageError,
)
from assigns.schema import AssignType


class TestDefinition:
    """Tests for declaration during class construction."""

    @pytest.mark.unit
    def test_accessors(self, layout_component):
        """Declared assigns are exposed through classmethods."""

        class Button(Component):
            """A clickable button."""

            @classmethod
            def declare_assigns(cls, d):
                d.doc("The button label")
                d.property("label", "string", required=True)
                d.property("items", "list", default=[])
                d.data("pressed", "boolean", default=False)
                d.context("get", "theme", from_=layout_component)

        assert Button.has_property("items")
        assert Button.get_property("items").type is AssignType.LIST
        assert [p.name for p in Button.list_properties()] == ["label", "items"]
        assert [d.name for d in Button.list_data()] == ["pressed"]
        assert [c.name for c in Button.list_context_gets()] == ["theme"]
        assert [c.name for c in Button.list_context_assigns()] == ["theme"]
        assert Button.list_context_sets() == []
        assert Button.list_context_sets_in_scope() == []

    @pytest.mark.unit
    def test_docs_appended(self):
        """Generated docs follow the class docstring."""

        class Badge(Component):
            """A badge."""

            @classmethod
            def declare_assigns(cls, d):
                d.doc("Text shown")
                d.property("text", "string", required=True)

        assert Badge.__doc__.startswith("A badge.\n\n### Properties\n\n")
        assert "* **text** *string, required=True* - Text shown." in Badge.__doc__

    @pytest.mark.unit
    def test_docs_without_docstring(self):
        """The docs block becomes the docstring when there is none."""

        class Plain(Component):
            @classmethod
            def declare_assigns(cls, d):
                d.property("text", "string")

        assert Plain.__doc__.endswith("* **text** *string*\n")

    @pytest.mark.unit
    def test_context_to_is_component(self, layout_component):
        """Context sets record the declaring class."""
        [theme] = layout_component.list_context_sets()
        assert theme.options["to"] is layout_component

    @pytest.mark.unit
    def test_subclass_has_own_schema(self, layout_component):
        """Schemas are per class and not inherited."""

        class Child(layout_component):
            pass

        assert Child.list_context_sets() == []
        assert layout_component.list_context_sets() != []
        assert is_component(Child)
        assert not is_component(Component)


class TestDefinitionErrors:
    """Definition errors abort the class statement."""

    @pytest.mark.unit
    def test_error_propagates(self, layout_component):
        """A bad declaration raises from the class statement."""
        with pytest.raises(InvalidContextUsageError):

            class Broken(Component):
                @classmethod
                def declare_assigns(cls, d):
                    d.context("get", "theme", "string", from_=layout_component)

    @pytest.mark.unit
    def test_duplicate_name(self):
        """Collisions abort the definition with the first line."""
        with pytest.raises(DuplicateNameError) as exc:

            class Twice(Component):
                @classmethod
                def declare_assigns(cls, d):
                    d.property("label", "string")
                    d.data("label", "string")

        assert isinstance(exc.value, AssignDefinitionError)
        assert exc.value.existing.kind.value == "property"
        assert exc.value.line == exc.value.existing.line + 1


class TestInitContextCheck:
    """Tests for the post-definition context check."""

    @pytest.mark.unit
    def test_warns_without_init_context(self):
        """A context set without init_context warns once, on first use."""

        class Counter(Component):
            @classmethod
            def declare_assigns(cls, d):
                d.context("set", "count", "integer", [])

        with pytest.warns(ContextNotInitializedWarning) as record:
            assert Counter.list_context_sets()[0].name == "count"

        messages = [str(w.message) for w in record]
        assert len(messages) == 1
        assert '"count"' in messages[0]
        assert Counter.check_definition() == []

    @pytest.mark.unit
    def test_silent_with_init_context(self):
        """An init_context taking the initial state silences the check."""
        with warnings.catch_warnings():
            warnings.simplefilter("error")

            class Counter(Component):
                @classmethod
                def declare_assigns(cls, d):
                    d.context("set", "count", "integer", [])

                def init_context(self, state):
                    return {"count": 0}

            assert [c.name for c in Counter.list_context_assigns()] == ["count"]

    @pytest.mark.unit
    def test_decorator_added_init_context(self):
        """init_context added by a class decorator counts."""

        def with_init_context(cls):
            cls.init_context = lambda self, state: {"count": 0}
            return cls

        with warnings.catch_warnings():
            warnings.simplefilter("error")

            @with_init_context
            class Counter(Component):
                @classmethod
                def declare_assigns(cls, d):
                    d.context("set", "count", "integer")

            assert Counter.check_definition() == []
            assert Counter.list_context_sets()

    @pytest.mark.unit
    def test_instantiation_runs_check(self):
        """Creating an instance runs the pending check."""

        class Counter(Component):
            @classmethod
            def declare_assigns(cls, d):
                d.context("set", "count", "integer")

        with pytest.warns(ContextNotInitializedWarning):
            Counter()

    @pytest.mark.unit
    def test_run_pending_checks(self):
        """Pending components are checked in one pass."""

        class Counter(Component):
            @classmethod
            def declare_assigns(cls, d):
                d.context("set", "count", "integer")

        with pytest.warns(ContextNotInitializedWarning):
            results = run_pending_checks()
        assert len(results[Counter]) == 1
        assert Counter not in run_pending_checks()

    @pytest.mark.unit
    def test_check_can_be_disabled(self, monkeypatch):
        """The check follows ASSIGNS_CHECK_INIT_CONTEXT."""
        monkeypatch.setenv("ASSIGNS_CHECK_INIT_CONTEXT", "false")
        with warnings.catch_warnings():
            warnings.simplefilter("error")

            class Counter(Component):
                @classmethod
                def declare_assigns(cls, d):
                    d.context("set", "count", "integer")

            assert Counter.list_context_sets()


class TestImmutability:
    """Registered assigns cannot be changed through the accessors."""

    @pytest.mark.unit
    def test_property_options_read_only(self):
        """Options of a registered property reject item assignment."""

        class Badge(Component):
            @classmethod
            def declare_assigns(cls, d):
                d.property("label", "string", required=True)

        with pytest.raises(TypeError):
            Badge.get_property("label").options["required"] = False
        assert Badge.get_property("label").options["required"] is True
        assert "required=True" in Badge.__doc__
