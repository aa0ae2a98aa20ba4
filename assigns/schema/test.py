"""Unit tests for the Schema module."""

import inspect

import pytest
from pydantic import ValidationError

from assigns.schema import (
    ASSIGN_TYPES,
    Assign,
    AssignKind,
    AssignType,
    ContextAction,
    ContextScope,
    SourceSite,
    coerce_action,
    coerce_type,
    export_option_table,
    format_option_value,
    get_required_options,
    get_valid_options,
)


class TestTypeSet:
    """Tests for the closed type set."""

    @pytest.mark.unit
    def test_has_18_types(self):
        """The type set is closed at 18 members."""
        assert len(ASSIGN_TYPES) == 18

    @pytest.mark.unit
    def test_any_is_present(self):
        """ANY is the universal fallback."""
        assert "any" in ASSIGN_TYPES

    @pytest.mark.unit
    def test_coerce_type(self):
        """Strings and enum members coerce; anything else is rejected."""
        assert coerce_type("string") is AssignType.STRING
        assert coerce_type(AssignType.MAP) is AssignType.MAP
        assert coerce_type("str") is None
        assert coerce_type(str) is None
        assert coerce_type(None) is None

    @pytest.mark.unit
    def test_coerce_action(self):
        """Only get and set are actions."""
        assert coerce_action("get") is ContextAction.GET
        assert coerce_action(ContextAction.SET) is ContextAction.SET
        assert coerce_action("put") is None


class TestValidOptions:
    """Tests for the option table."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "kind,type_,action,expected",
        [
            ("property", "list", None, ["required", "default", "binding"]),
            ("property", "children", None, ["required", "group", "use_bindings"]),
            ("property", "string", None, ["required", "default", "values"]),
            ("data", "list", None, ["default", "values"]),
            ("context", "any", "get", ["from", "as"]),
            ("context", "string", "set", ["scope"]),
        ],
    )
    def test_valid_options(self, kind, type_, action, expected):
        """Each variant exposes its documented options."""
        assert get_valid_options(kind, type_, action) == expected

    @pytest.mark.unit
    def test_context_without_action_raises(self):
        """Context options depend on the action."""
        with pytest.raises(ValueError):
            get_valid_options("context", "any")

    @pytest.mark.unit
    def test_required_options(self):
        """Only context get requires an option."""
        assert get_required_options("context", "any", "get") == ["from"]
        assert get_required_options("context", "string", "set") == []
        assert get_required_options("property", "string") == []
        assert get_required_options("data", "map") == []

    @pytest.mark.unit
    def test_export_option_table(self):
        """Exported table lists types and per-kind options."""
        table = export_option_table()
        assert table["types"] == list(ASSIGN_TYPES)
        assert table["context"]["get"]["required"] == ["from"]
        assert table["property"]["list"] == ["required", "default", "binding"]


class TestAssign:
    """Tests for the Assign record."""

    def _context_set(self, **options):
        return Assign(
            kind=AssignKind.CONTEXT,
            name="theme",
            type=AssignType.STRING,
            options={"action": "set", **options},
        )

    @pytest.mark.unit
    def test_frozen(self):
        """Registered assigns cannot be mutated."""
        assign = Assign(kind="property", name="label", type="string")
        with pytest.raises(ValidationError):
            assign.name = "other"

    @pytest.mark.unit
    def test_scope_defaults_to_self_and_children(self):
        """Absent scope means widest visibility."""
        assign = self._context_set()
        assert assign.scope is ContextScope.SELF_AND_CHILDREN
        assert not assign.is_only_children

    @pytest.mark.unit
    def test_only_children(self):
        """only_children scope is detected from strings or enum values."""
        assert self._context_set(scope="only_children").is_only_children
        assert self._context_set(scope=ContextScope.ONLY_CHILDREN).is_only_children

    @pytest.mark.unit
    def test_key_uses_as_option(self):
        """The as option renames the namespace slot."""
        assign = Assign(
            kind="context",
            name="theme",
            type="any",
            options={"action": "get", "from": object, "as": "parent_theme"},
        )
        assert assign.key == "parent_theme"
        assert assign.action is ContextAction.GET

    @pytest.mark.unit
    def test_format_options(self):
        """Author options render in order as key=value."""
        assign = Assign(
            kind="property",
            name="items",
            type="list",
            raw_options=(("required", True), ("default", [])),
        )
        assert assign.format_options() == "required=True, default=[]"

    @pytest.mark.unit
    def test_to_dict(self):
        """Dictionary export is JSON friendly."""
        assign = Assign(
            kind="context",
            name="theme",
            type="any",
            options={"action": ContextAction.GET, "from": SourceSite},
            site=SourceSite(file="x.py", line=3),
        )
        data = assign.to_dict()
        assert data["kind"] == "context"
        assert data["options"]["action"] == "get"
        assert data["options"]["from"].endswith("SourceSite")
        assert data["line"] == 3


class TestSourceSite:
    """Tests for SourceSite."""

    @pytest.mark.unit
    def test_from_frame(self):
        """Sites are captured from frames."""
        site = SourceSite.from_frame(inspect.currentframe())
        assert site.file.endswith("test.py")
        assert isinstance(site.line, int)

    @pytest.mark.unit
    def test_str(self):
        """Sites render as file:line."""
        assert str(SourceSite("a.py", 4)) == "a.py:4"
        assert str(SourceSite()) == "<unknown>"

    @pytest.mark.unit
    def test_format_option_value(self):
        """Classes render by name and enums by value."""
        assert format_option_value(SourceSite) == "SourceSite"
        assert format_option_value(ContextScope.ONLY_CHILDREN) == "'only_children'"
        assert format_option_value([1]) == "[1]"
