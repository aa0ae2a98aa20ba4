"""Tests for configuration management."""

import pytest

from .lib import (
    EnvConfig,
    EnvVar,
    convert_value,
    get_docs_heading,
    get_environment,
    get_environment_info,
    get_log_level,
    init_context_check_enabled,
    list_environment_variables,
)


class TestGetEnvironment:
    """Resolution order and conversion."""

    @pytest.mark.unit
    def test_default_when_unset(self, monkeypatch):
        """Unset variables resolve to their default."""
        monkeypatch.delenv("ASSIGNS_DOCS_HEADING", raising=False)
        assert get_environment(EnvVar.ASSIGNS_DOCS_HEADING) == "### Properties"

    @pytest.mark.unit
    def test_override_wins(self, monkeypatch):
        """An explicit override beats the environment."""
        monkeypatch.setenv("ASSIGNS_LOG_LEVEL", "DEBUG")
        assert get_environment(EnvVar.ASSIGNS_LOG_LEVEL, override="ERROR") == "ERROR"

    @pytest.mark.unit
    def test_environment_beats_default(self, monkeypatch):
        """A set variable replaces the default."""
        monkeypatch.setenv("ASSIGNS_LOG_LEVEL", "DEBUG")
        assert get_environment(EnvVar.ASSIGNS_LOG_LEVEL) == "DEBUG"

    @pytest.mark.unit
    @pytest.mark.parametrize("raw", ["true", "1", "yes", "ON", "Yes"])
    def test_bool_true(self, monkeypatch, raw):
        """Truthy spellings parse to True."""
        monkeypatch.setenv("ASSIGNS_CHECK_INIT_CONTEXT", raw)
        assert get_environment(EnvVar.ASSIGNS_CHECK_INIT_CONTEXT) is True

    @pytest.mark.unit
    @pytest.mark.parametrize("raw", ["false", "0", "no", "OFF", " No "])
    def test_bool_false(self, monkeypatch, raw):
        """Falsy spellings parse to False."""
        monkeypatch.setenv("ASSIGNS_CHECK_INIT_CONTEXT", raw)
        assert get_environment(EnvVar.ASSIGNS_CHECK_INIT_CONTEXT) is False

    @pytest.mark.unit
    def test_unparsable_falls_back(self, monkeypatch):
        """Unrecognized booleans use the default."""
        monkeypatch.setenv("ASSIGNS_CHECK_INIT_CONTEXT", "maybe")
        assert get_environment(EnvVar.ASSIGNS_CHECK_INIT_CONTEXT) is True


class TestConvertValue:
    """convert_value follows the type of the default."""

    @pytest.mark.unit
    def test_int(self):
        config = EnvConfig("N", 3)
        assert convert_value("7", config) == 7
        assert convert_value("seven", config) == 3

    @pytest.mark.unit
    def test_none_is_default(self):
        assert convert_value(None, EnvConfig("S", "x")) == "x"


class TestIntrospection:
    """Metadata and listing helpers."""

    @pytest.mark.unit
    def test_info(self):
        """Info exposes the EnvConfig record."""
        info = get_environment_info(EnvVar.ASSIGNS_LOG_LEVEL)
        assert isinstance(info, EnvConfig)
        assert info.name == "ASSIGNS_LOG_LEVEL"
        assert info.var_type is str

    @pytest.mark.unit
    def test_list(self):
        """Listing filters by category."""
        assert list_environment_variables() == list(EnvVar)
        assert list_environment_variables("docs") == [EnvVar.ASSIGNS_DOCS_HEADING]
        assert list_environment_variables("nope") == []


class TestConvenienceFunctions:
    """Shortcuts used by the rest of the package."""

    @pytest.mark.unit
    def test_log_level_upper(self, monkeypatch):
        """Log level is upper-cased."""
        monkeypatch.setenv("ASSIGNS_LOG_LEVEL", "debug")
        assert get_log_level() == "DEBUG"

    @pytest.mark.unit
    def test_check_toggle(self, monkeypatch):
        """The init_context check can be switched off."""
        monkeypatch.setenv("ASSIGNS_CHECK_INIT_CONTEXT", "0")
        assert init_context_check_enabled() is False
        assert init_context_check_enabled(override=True) is True

    @pytest.mark.unit
    def test_docs_heading(self, monkeypatch):
        """Docs heading follows the environment."""
        monkeypatch.setenv("ASSIGNS_DOCS_HEADING", "## Props")
        assert get_docs_heading() == "## Props"
