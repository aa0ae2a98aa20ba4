"""Unit tests for the declaration builder."""

import inspect

import pytest
from pydantic import ValidationError

from assigns.builder import AssignBuilder, merge_options, option_name
from assigns.errors import (
    BuilderFinalizedError,
    DuplicateNameError,
    InvalidContextActionError,
    InvalidContextUsageError,
    InvalidNameError,
    InvalidOptionsShapeError,
    InvalidOptionValueError,
    InvalidTypeError,
    MissingRequiredOptionError,
)
from assigns.schema import AssignKind, AssignType, ContextAction


class ParentComponent:
    """Stand-in for an ancestor component."""


@pytest.fixture
def builder():
    return AssignBuilder("Counter")


class TestOptionHelpers:
    """Tests for option name and merge helpers."""

    @pytest.mark.unit
    def test_option_name(self):
        """Keyword-safe names map back to option names."""
        assert option_name("from_") == "from"
        assert option_name("as_") == "as"
        assert option_name("default") == "default"
        assert option_name("use_bindings") == "use_bindings"

    @pytest.mark.unit
    def test_merge_order(self):
        """Keyword options come after positional ones."""
        merged = merge_options({"required": True}, {"default": 1})
        assert merged == [("required", True), ("default", 1)]

    @pytest.mark.unit
    def test_merge_keeps_malformed(self):
        """Malformed positional options are passed through."""
        assert merge_options("oops", {"default": 1}) == "oops"
        assert merge_options(None, {}) == []


class TestPropertyAndData:
    """Tests for property and data declarations."""

    @pytest.mark.unit
    def test_list_property(self, builder):
        """A list property with a default is registered and exposed."""
        builder.property("items", "list", default=[])
        schema = builder.finalize()

        assert schema.has_property("items")
        assert schema.get_property("items").type is AssignType.LIST
        assert len(schema.list_properties()) == 1
        assert schema.list_properties()[0].options["default"] == []

    @pytest.mark.unit
    def test_mapping_and_pairs(self, builder):
        """Options may be a mapping or pairs, plus keywords."""
        builder.property("label", "string", {"required": True}, default="OK")
        builder.data("count", AssignType.INTEGER, [("default", 0)])
        label = builder.registry.lookup("label")
        assert label.options == {"required": True, "default": "OK"}
        assert builder.registry.lookup("count").kind is AssignKind.DATA

    @pytest.mark.unit
    def test_duplicate_keyword_and_mapping(self, builder):
        """The same option twice is a shape error."""
        with pytest.raises(InvalidOptionsShapeError):
            builder.property("label", "string", {"default": "a"}, default="b")

    @pytest.mark.unit
    def test_invalid_name(self, builder):
        """Computed or literal names are rejected."""
        with pytest.raises(InvalidNameError):
            builder.property("label text", "string")

    @pytest.mark.unit
    def test_site_is_caller_line(self, builder):
        """Declarations record the caller's file and line."""
        line = inspect.currentframe().f_lineno + 1
        assign = builder.data("count", "integer")
        assert assign.site.line == line
        assert assign.site.file.endswith("test.py")

    @pytest.mark.unit
    def test_error_names_caller_line(self, builder):
        """Errors point at the offending declaration."""
        line = inspect.currentframe().f_lineno + 2
        with pytest.raises(InvalidTypeError) as exc:
            builder.data("count", "int")
        assert exc.value.line == line
        assert f"test.py:{line}:" in str(exc.value)


class TestDocCapture:
    """Tests for the pending documentation slot."""

    @pytest.mark.unit
    def test_doc_applies_to_next_declaration_only(self, builder):
        """A doc string is consumed by exactly one declaration."""
        builder.doc("The label")
        builder.property("label", "string")
        builder.property("icon", "string")

        assert builder.registry.lookup("label").doc == "The label"
        assert builder.registry.lookup("icon").doc is None

    @pytest.mark.unit
    def test_doc_reaches_generated_docs(self, builder):
        """Captured docs appear in the properties block."""
        builder.doc("Items to show")
        builder.property("items", "list", required=True)
        schema = builder.finalize(doc="A list.")
        assert schema.docs.startswith("A list.\n\n### Properties\n\n")
        assert "* **items** *list, required=True* - Items to show." in schema.docs


class TestContextForms:
    """Tests for the context declaration forms."""

    @pytest.mark.unit
    def test_get(self, builder):
        """A get reads from a component and is typed any."""
        assign = builder.context("get", "theme", from_=ParentComponent)
        assert assign.type is AssignType.ANY
        assert assign.action is ContextAction.GET
        assert assign.options["from"] is ParentComponent
        assert assign.raw_options == (("from", ParentComponent),)

    @pytest.mark.unit
    def test_get_with_type_rejected(self, builder):
        """A get cannot carry a type."""
        with pytest.raises(InvalidContextUsageError) as exc:
            builder.context("get", "theme", "string", from_=ParentComponent)
        assert "action 'get'" in str(exc.value)

    @pytest.mark.unit
    def test_get_without_from(self, builder):
        """A get needs the component it reads from."""
        with pytest.raises(MissingRequiredOptionError):
            builder.context("get", "theme", [])
        with pytest.raises(MissingRequiredOptionError):
            builder.context("get", "theme")

    @pytest.mark.unit
    def test_get_tuple_options(self, builder):
        """Tuples of pairs are accepted for gets."""
        assign = builder.context("get", "theme", (("from", ParentComponent),))
        assert assign.options["action"] == "get"

    @pytest.mark.unit
    def test_set(self, builder):
        """A typed set records the action and the declaring component."""
        assign = builder.context("set", "count", "integer", [])
        assert assign.options == {"action": "set", "to": "Counter"}
        assert assign.raw_options == ()

    @pytest.mark.unit
    def test_set_author_cannot_override_internals(self, builder):
        """action and to are always set by the builder."""
        assign = builder.context("set", "count", "integer", {"to": "Other"})
        assert assign.options["to"] == "Counter"

    @pytest.mark.unit
    def test_get_author_action_ignored(self, builder):
        """A get may repeat action; the builder's own action wins."""
        assign = builder.context(
            "get", "theme", {"from": ParentComponent, "action": "get"}
        )
        assert assign.action is ContextAction.GET
        assert assign.options == {"action": "get", "from": ParentComponent}
        assert assign.raw_options == (("from", ParentComponent),)

    @pytest.mark.unit
    def test_python_type_is_a_type_token(self, builder):
        """Non-option third arguments are treated as types."""
        with pytest.raises(InvalidTypeError) as exc:
            builder.context("set", "theme", int)
        assert "invalid type int for context theme" in str(exc.value)
        assert not isinstance(exc.value, MissingRequiredOptionError)
        with pytest.raises(InvalidContextUsageError):
            builder.context("get", "theme", int)

    @pytest.mark.unit
    def test_set_invalid_scope(self, builder):
        """Scope must be one of the two known values."""
        with pytest.raises(InvalidOptionValueError):
            builder.context("set", "theme", "string", scope="invalid_value")

    @pytest.mark.unit
    def test_untyped_set_always_fails(self, builder):
        """The untyped set form is not supported."""
        with pytest.raises(MissingRequiredOptionError) as exc:
            builder.context("set", "theme", {"scope": "only_children"})
        assert isinstance(exc.value, InvalidTypeError)
        with pytest.raises(InvalidTypeError):
            builder.context("set", "theme")
        assert len(builder.registry) == 0

    @pytest.mark.unit
    def test_invalid_action(self, builder):
        """Only get and set are actions."""
        with pytest.raises(InvalidContextActionError) as exc:
            builder.context("put", "theme", "string")
        assert "got: 'put'" in str(exc.value)

    @pytest.mark.unit
    def test_enum_action(self, builder):
        """ContextAction members are accepted."""
        assign = builder.context(ContextAction.SET, "count", AssignType.INTEGER)
        assert assign.action is ContextAction.SET


class TestConflicts:
    """Tests for name conflicts through the builder."""

    @pytest.mark.unit
    def test_duplicate_property(self, builder):
        """Two assigns with the same name collide."""
        builder.property("label", "string")
        with pytest.raises(DuplicateNameError):
            builder.data("label", "string")

    @pytest.mark.unit
    def test_only_children_sets_and_property(self, builder):
        """only_children sets share a name with each other and a property."""
        builder.context("set", "count", "integer", scope="only_children")
        builder.context("set", "count", "integer", scope="only_children")
        builder.property("count", "string", [])

        assert builder.registry.lookup("count").kind is AssignKind.PROPERTY
        schema = builder.finalize()
        assert len(schema.list_context_sets()) == 2
        assert schema.list_context_sets_in_scope() == []


class TestFinalize:
    """Tests for finalization."""

    @pytest.mark.unit
    def test_context_partitions(self, builder):
        """Gets come first, then in-scope sets; only_children sets drop out."""
        builder.context("get", "a", from_=ParentComponent)
        builder.context("get", "b", from_=ParentComponent)
        builder.context("set", "c", "string")
        builder.context("set", "d", "string", scope="only_children")
        schema = builder.finalize()

        assert [c.name for c in schema.list_context_assigns()] == ["a", "b", "c"]
        assert [c.name for c in schema.list_context_gets()] == ["a", "b"]
        assert [c.name for c in schema.list_context_sets()] == ["c", "d"]
        assert [c.name for c in schema.list_context_sets_in_scope()] == ["c"]

    @pytest.mark.unit
    def test_sets_first_still_orders_gets_first(self, builder):
        """Context assigns list gets before sets whatever the source order."""
        builder.context("set", "c", "string")
        builder.context("get", "a", from_=ParentComponent)
        schema = builder.finalize()
        assert [c.name for c in schema.list_context_assigns()] == ["a", "c"]

    @pytest.mark.unit
    def test_property_views(self, builder):
        """Properties are listed, looked up and tested by name."""
        builder.property("label", "string")
        builder.property("items", "list")
        builder.data("open", "boolean", default=False)
        schema = builder.finalize()

        assert [p.name for p in schema.list_properties()] == ["label", "items"]
        assert schema.property_names == {"label", "items"}
        assert schema.get_property("missing") is None
        assert not schema.has_property("open")
        assert [d.name for d in schema.list_data()] == ["open"]

    @pytest.mark.unit
    def test_views_are_immutable(self, builder):
        """The lookup map cannot be modified."""
        builder.property("label", "string")
        schema = builder.finalize()
        with pytest.raises(TypeError):
            schema.properties_by_name["x"] = None

    @pytest.mark.unit
    def test_registered_assigns_are_immutable(self, builder):
        """Neither fields nor options of a registered assign can change."""
        builder.property("label", "string", required=True)
        schema = builder.finalize()
        label = schema.get_property("label")
        with pytest.raises(TypeError):
            label.options["required"] = False
        with pytest.raises(TypeError):
            del label.options["required"]
        with pytest.raises(ValidationError):
            label.name = "other"
        assert schema.get_property("label").options["required"] is True
        assert schema.properties_by_name["label"].options == {"required": True}

    @pytest.mark.unit
    def test_finalize_once(self, builder):
        """The builder is frozen after finalization."""
        builder.finalize()
        assert builder.finalized
        with pytest.raises(BuilderFinalizedError):
            builder.finalize()
        with pytest.raises(BuilderFinalizedError):
            builder.property("late", "string")
        with pytest.raises(BuilderFinalizedError):
            builder.doc("late")

    @pytest.mark.unit
    def test_schema_before_finalize(self, builder):
        """The schema is only available after finalization."""
        with pytest.raises(RuntimeError):
            builder.schema

    @pytest.mark.unit
    def test_to_dict(self, builder):
        """Schema export lists context names after renaming."""
        builder.context("get", "theme", from_=ParentComponent, as_="parent_theme")
        data = builder.finalize().to_dict()
        assert data["context"]["assigns"] == ["parent_theme"]
        assert data["context"]["gets"][0]["options"]["as"] == "parent_theme"
