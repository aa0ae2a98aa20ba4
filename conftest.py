"""Root pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from assigns.component import Component

# =============================================================================
# Component Fixtures
# =============================================================================


@pytest.fixture
def layout_component() -> type[Component]:
    """A parent component that sets a theme context for its children.

    Returns:
        A Component subclass with an init_context callback.
    """

    class Layout(Component):
        """Page layout."""

        @classmethod
        def declare_assigns(cls, d):
            d.doc("Theme shared with children")
            d.context("set", "theme", "string")

        def init_context(self, state):
            return {"theme": "light"}

    return Layout
