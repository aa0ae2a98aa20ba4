"""Unit tests for the error taxonomy."""

import pytest

from .lib import (
    AssignDefinitionError,
    DuplicateNameError,
    InvalidNameError,
    InvalidTypeError,
    MissingAssignTypeError,
    MissingRequiredOptionError,
    UnknownOptionError,
)


class TestAssignDefinitionError:
    """Tests for location formatting."""

    @pytest.mark.unit
    def test_str_without_site(self):
        """Only the description is shown when no site is known."""
        assert str(InvalidNameError("bad name")) == "bad name"

    @pytest.mark.unit
    def test_str_with_site(self):
        """File and line prefix the description."""
        error = InvalidNameError("bad name", file="button.py", line=7)
        assert str(error) == "button.py:7: bad name"

    @pytest.mark.unit
    def test_at_does_not_overwrite(self):
        """An existing location is kept."""
        error = InvalidNameError("bad", file="a.py", line=1).at("b.py", 2)
        assert (error.file, error.line) == ("a.py", 1)

    @pytest.mark.unit
    def test_at_fills_missing_site(self):
        """A missing location is filled in."""
        error = InvalidNameError("bad").at("b.py", 2)
        assert str(error) == "b.py:2: bad"


class TestSubclasses:
    """Tests for the exception hierarchy."""

    @pytest.mark.unit
    def test_all_derive_from_base(self):
        """Taxonomy members are AssignDefinitionErrors."""
        assert issubclass(DuplicateNameError, AssignDefinitionError)
        assert issubclass(UnknownOptionError, AssignDefinitionError)

    @pytest.mark.unit
    def test_missing_type_is_both(self):
        """A missing type is an invalid type and a missing requirement."""
        error = MissingAssignTypeError("type required")
        assert isinstance(error, InvalidTypeError)
        assert isinstance(error, MissingRequiredOptionError)
        assert error.missing == ["type"]
        assert error.description == "type required"

    @pytest.mark.unit
    def test_unknown_option_attributes(self):
        """Unknown option errors expose the offending and allowed keys."""
        error = UnknownOptionError("msg", unknown=["foo"], available=["default"])
        assert error.unknown == ["foo"]
        assert error.available == ["default"]
