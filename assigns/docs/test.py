"""Unit tests for docs generation."""

import pytest

from assigns.docs import format_property_doc, generate_docs, generate_props_docs
from assigns.schema import Assign


def prop(name, type_="string", doc=None, **options):
    return Assign(
        kind="property",
        name=name,
        type=type_,
        doc=doc,
        options=options,
        raw_options=tuple(options.items()),
    )


class TestFormatPropertyDoc:
    """Tests for single property lines."""

    @pytest.mark.unit
    def test_bare(self):
        """No options and no doc render name and type only."""
        assert format_property_doc(prop("label")) == "* **label** *string*"

    @pytest.mark.unit
    def test_options_and_doc(self):
        """Options follow the type; doc follows a dash."""
        line = format_property_doc(
            prop("items", "list", doc="The items", required=True, default=[])
        )
        assert line == "* **items** *list, required=True, default=[]* - The items."


class TestGenerateDocs:
    """Tests for the properties block."""

    @pytest.mark.unit
    def test_declaration_order(self, monkeypatch):
        """Properties render in declaration order."""
        monkeypatch.delenv("ASSIGNS_DOCS_HEADING", raising=False)
        block = generate_props_docs([prop("b"), prop("a")])
        assert block == "### Properties\n\n* **b** *string*\n* **a** *string*\n"

    @pytest.mark.unit
    def test_heading_override(self):
        """The heading can be overridden."""
        assert generate_props_docs([], heading="## Props").startswith("## Props\n")

    @pytest.mark.unit
    def test_becomes_doc_when_absent(self):
        """With no existing docs the block is the whole doc."""
        block = generate_props_docs([prop("a")])
        assert generate_docs(None, [prop("a")]) == block
        assert generate_docs("   ", [prop("a")]) == block

    @pytest.mark.unit
    def test_appends_to_existing(self):
        """Existing docs are dedented and kept first."""
        doc = generate_docs("A button.\n\n    Clickable.\n    ", [prop("a")])
        assert doc.startswith("A button.\n\nClickable.\n\n")
        assert doc.endswith("* **a** *string*\n")
