"""Unit tests for registry finalization."""

import pytest

from assigns.finalize import AssignSchema, finalize_registry
from assigns.registry import AssignRegistry
from assigns.schema import Assign


class TestFinalizeRegistry:
    """Tests for finalize_registry."""

    @pytest.mark.unit
    def test_empty_registry(self):
        """An empty registry yields empty views and a bare docs block."""
        schema = finalize_registry(AssignRegistry(), heading="### Properties")
        assert schema.list_properties() == []
        assert schema.list_context_assigns() == []
        assert schema.docs == "### Properties\n\n\n"

    @pytest.mark.unit
    def test_views_are_tuples(self):
        """Views are stored as tuples and returned as fresh lists."""
        registry = AssignRegistry()
        registry.register(Assign(kind="property", name="label", type="string"))
        schema = finalize_registry(registry)

        assert isinstance(schema.properties, tuple)
        listed = schema.list_properties()
        listed.clear()
        assert len(schema.properties) == 1

    @pytest.mark.unit
    def test_default_schema(self):
        """A default schema has no assigns."""
        schema = AssignSchema()
        assert not schema.has_property("anything")
        assert schema.list_data() == []
