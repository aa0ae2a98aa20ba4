"""Unit tests for the validation pipeline."""

import pytest

from assigns.errors import (
    InvalidContextActionError,
    InvalidNameError,
    InvalidOptionsShapeError,
    InvalidOptionValueError,
    InvalidTypeError,
    MissingAssignTypeError,
    MissingRequiredOptionError,
    UnknownOptionError,
)
from assigns.schema import AssignKind, SourceSite
from assigns.validation import (
    is_bare_name,
    is_valid_assign,
    normalize_options,
    validate_assign,
)


class Parent:
    """Stand-in component class for context get."""


# (kind, type, options) for every row of the option table
VALID_COMBINATIONS = [
    ("property", "list", {"required": True, "default": [], "binding": "items"}),
    ("property", "children", {"required": False, "group": "tabs", "use_bindings": []}),
    ("property", "string", {"required": True, "default": "x", "values": ["x", "y"]}),
    ("data", "map", {"default": {}, "values": []}),
    ("context", "any", {"action": "get", "from": Parent, "as": "parent_theme"}),
    ("context", "string", {"action": "set", "to": Parent, "scope": "only_children"}),
]


class TestValidCombinations:
    """Every documented option combination validates."""

    @pytest.mark.unit
    @pytest.mark.parametrize("kind,type_,options", VALID_COMBINATIONS)
    def test_valid(self, kind, type_, options):
        """Allowed options pass and come back as an ordered dict."""
        result = validate_assign(kind, "name", type_, options)
        assert list(result) == list(options)

    @pytest.mark.unit
    @pytest.mark.parametrize("kind,type_,options", VALID_COMBINATIONS)
    def test_one_extra_key(self, kind, type_, options):
        """A single extra key is reported by name."""
        with pytest.raises(UnknownOptionError) as exc:
            validate_assign(kind, "name", type_, {**options, "bogus": 1})
        assert exc.value.unknown == ["bogus"]
        assert "unknown option 'bogus'" in exc.value.description
        assert "Available options" in exc.value.description

    @pytest.mark.unit
    def test_private_options_not_listed(self):
        """action and to are accepted but never advertised."""
        with pytest.raises(UnknownOptionError) as exc:
            validate_assign("data", "count", "integer", {"action": "x", "nope": 1})
        assert exc.value.available == ["default", "values"]

    @pytest.mark.unit
    def test_plural_message(self):
        """Several unknown keys are pluralized."""
        with pytest.raises(UnknownOptionError) as exc:
            validate_assign("property", "label", "string", {"a": 1, "b": 2})
        assert exc.value.unknown == ["a", "b"]
        assert exc.value.description.startswith("unknown options ['a', 'b']")

    @pytest.mark.unit
    def test_binding_only_for_list(self):
        """binding is specific to list properties."""
        assert is_valid_assign("property", "items", "list", {"binding": "x"})
        assert not is_valid_assign("property", "label", "string", {"binding": "x"})


class TestName:
    """Stage 1: name shape."""

    @pytest.mark.unit
    @pytest.mark.parametrize("name", ["1abc", "my-name", "a.b", "", "class", 42, None])
    def test_invalid_names(self, name):
        """Only bare identifiers are names."""
        with pytest.raises(InvalidNameError) as exc:
            validate_assign("property", name, "string", {})
        assert "Expected a variable name" in str(exc.value)

    @pytest.mark.unit
    def test_name_checked_before_type(self):
        """A bad name wins over a bad type."""
        with pytest.raises(InvalidNameError):
            validate_assign("property", "bad name", "nope", {})

    @pytest.mark.unit
    def test_is_bare_name(self):
        """Helper accepts identifiers only."""
        assert is_bare_name("label")
        assert not is_bare_name("for")


class TestType:
    """Stage 2: type membership."""

    @pytest.mark.unit
    def test_unknown_type(self):
        """Types outside the set list the allowed set."""
        with pytest.raises(InvalidTypeError) as exc:
            validate_assign("property", "label", "str", {})
        assert "invalid type 'str' for property label" in str(exc.value)
        assert "'css_class'" in str(exc.value)

    @pytest.mark.unit
    def test_python_type_rejected(self):
        """Python classes are not assign types."""
        with pytest.raises(InvalidTypeError):
            validate_assign("data", "count", int, {})

    @pytest.mark.unit
    def test_missing_type(self):
        """None type always fails."""
        with pytest.raises(MissingAssignTypeError) as exc:
            validate_assign("context", "theme", None, {"action": "set"})
        assert isinstance(exc.value, MissingRequiredOptionError)
        assert "requires the type" in str(exc.value)


class TestOptionsShape:
    """Stage 3: options shape."""

    @pytest.mark.unit
    def test_pairs_accepted(self):
        """Sequences of pairs keep their order."""
        pairs = [("values", [1]), ("default", 1)]
        assert normalize_options(AssignKind.DATA, "n", pairs) == pairs
        assert list(validate_assign("data", "n", "integer", pairs)) == [
            "values",
            "default",
        ]

    @pytest.mark.unit
    def test_none_is_empty(self):
        """Missing options mean no options."""
        assert validate_assign("data", "n", "integer", None) == {}

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "options",
        ["default", 3, [("default", 1, 2)], [(1, "x")], [("default", 1), ("default", 2)]],
    )
    def test_malformed(self, options):
        """Non-mappings, bad pairs and duplicate keys are rejected."""
        with pytest.raises(InvalidOptionsShapeError) as exc:
            validate_assign("data", "n", "integer", options)
        assert "Expected a mapping of options" in str(exc.value)


class TestOptionValues:
    """Stage 5: per-option values."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "kind,type_,options,key",
        [
            ("property", "string", {"required": "yes"}, "required"),
            ("property", "string", {"values": "abc"}, "values"),
            ("data", "string", {"values": {"a": 1}}, "values"),
            ("context", "string", {"action": "set", "scope": "invalid_value"}, "scope"),
            ("context", "any", {"action": "get", "from": 12}, "from"),
            ("context", "any", {"action": "get", "from": Parent, "as": "a b"}, "as"),
        ],
    )
    def test_invalid_value(self, kind, type_, options, key):
        """Each checked option reports its key, expectation and value."""
        with pytest.raises(InvalidOptionValueError) as exc:
            validate_assign(kind, "name", type_, options)
        assert exc.value.key == key
        assert exc.value.value == options[key]
        assert f"invalid value for option {key!r}" in str(exc.value)

    @pytest.mark.unit
    def test_from_accepts_dotted_name(self):
        """A component can be named by dotted path."""
        assert is_valid_assign(
            "context", "theme", "any", {"action": "get", "from": "app.Parent"}
        )

    @pytest.mark.unit
    def test_scope_only_checked_for_context(self):
        """Option value checks are scoped by kind."""
        with pytest.raises(UnknownOptionError):
            validate_assign("data", "n", "integer", {"scope": "bad"})


class TestRequiredOptions:
    """Stage 6: required options."""

    @pytest.mark.unit
    def test_get_requires_from(self):
        """Context get without from fails."""
        with pytest.raises(MissingRequiredOptionError) as exc:
            validate_assign("context", "theme", "any", {"action": "get"})
        assert exc.value.missing == ["from"]
        assert "the following options are required: ['from']" in str(exc.value)

    @pytest.mark.unit
    def test_context_needs_action(self):
        """Context options cannot be resolved without an action."""
        with pytest.raises(InvalidContextActionError):
            validate_assign("context", "theme", "any", {})


class TestSite:
    """Errors carry the declaration site."""

    @pytest.mark.unit
    def test_site_attached(self):
        """The site prefixes the message."""
        with pytest.raises(InvalidTypeError) as exc:
            validate_assign("data", "n", "nope", {}, site=SourceSite("c.py", 9))
        assert str(exc.value).startswith("c.py:9: invalid type")
