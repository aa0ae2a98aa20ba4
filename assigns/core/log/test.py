"""Tests for core logging module."""

import logging
from io import StringIO

import pytest

from .lib import ROOT_LOGGER, get_logger, setup_logging


@pytest.fixture
def restore_package_logger():
    package = logging.getLogger(ROOT_LOGGER)
    handlers, level = list(package.handlers), package.level
    yield package
    package.handlers[:] = handlers
    package.setLevel(level)


class TestGetLogger:
    """Logger naming."""

    @pytest.mark.unit
    def test_default_name(self) -> None:
        """No name gives the package logger."""
        assert get_logger().name == ROOT_LOGGER

    @pytest.mark.unit
    def test_short_name_nested(self) -> None:
        """Short names are nested under the package."""
        assert get_logger("cli").name == "assigns.cli"

    @pytest.mark.unit
    def test_module_name_kept(self) -> None:
        """Module names are already namespaced."""
        assert get_logger("assigns.registry.lib").name == "assigns.registry.lib"


class TestSetupLogging:
    """Handler configuration."""

    @pytest.mark.unit
    def test_messages_reach_stream(self, restore_package_logger) -> None:
        """Debug records reach the stream once configured at DEBUG."""
        stream = StringIO()
        setup_logging(level=logging.DEBUG, stream=stream)
        get_logger("registry").debug("registered label")
        assert "assigns.registry - DEBUG - registered label" in stream.getvalue()

    @pytest.mark.unit
    def test_level_names(self, restore_package_logger) -> None:
        """Level names resolve and unknown names fall back to INFO."""
        setup_logging(level="warning", stream=StringIO())
        assert restore_package_logger.level == logging.WARNING
        setup_logging(level="not-a-level", stream=StringIO())
        assert restore_package_logger.level == logging.INFO

    @pytest.mark.unit
    def test_reconfigure_replaces_handler(self, restore_package_logger) -> None:
        """Repeated setup keeps a single package handler."""
        first, second = StringIO(), StringIO()
        setup_logging(stream=first)
        setup_logging(stream=second)
        get_logger().info("once")
        assert first.getvalue() == ""
        assert second.getvalue().count("once") == 1
