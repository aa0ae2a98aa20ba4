"""Tests for the assigns CLI commands."""

import json

import pytest

from assigns.__main__ import load_component, main
from assigns.component import Component


class Card(Component):
    """A content card."""

    @classmethod
    def declare_assigns(cls, d):
        d.doc("Card title")
        d.property("title", "string", required=True)
        d.data("expanded", "boolean", default=False)


@pytest.mark.unit
def test_types_lists_every_type(capsys):
    """types prints the closed type set, one per line."""
    assert main(["types"]) == 0
    lines = capsys.readouterr().out.split()
    assert len(lines) == 18
    assert lines[0] == "any"


@pytest.mark.unit
def test_options_for_list_property(capsys):
    """options prints the valid options for a kind and type."""
    assert main(["options", "property", "list"]) == 0
    assert capsys.readouterr().out.split() == ["required", "default", "binding"]


@pytest.mark.unit
def test_options_for_context_get_marks_required(capsys):
    """Required options are flagged."""
    assert main(["options", "context", "--action", "get"]) == 0
    assert "from (required)" in capsys.readouterr().out


@pytest.mark.unit
def test_options_for_context_needs_action():
    """Context options need an action."""
    assert main(["options", "context"]) == 1


@pytest.mark.unit
def test_inspect_json(capsys):
    """inspect dumps the finalized schema as JSON."""
    assert main(["inspect", f"{__name__}:Card"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert [p["name"] for p in data["properties"]] == ["title"]
    assert data["properties"][0]["doc"] == "Card title"
    assert [d["name"] for d in data["data"]] == ["expanded"]


@pytest.mark.unit
def test_inspect_docs(capsys):
    """inspect can print generated docs."""
    assert main(["inspect", f"{__name__}:Card", "--format", "docs"]) == 0
    out = capsys.readouterr().out
    assert "* **title** *string, required=True* - Card title." in out


@pytest.mark.unit
def test_inspect_rejects_non_components():
    """Targets must be Component subclasses."""
    assert main(["inspect", "json:dumps"]) == 1
    assert main(["inspect", "no_such_module_xyz:Thing"]) == 1
    with pytest.raises(ValueError):
        load_component("missing-colon")


@pytest.mark.unit
def test_no_command_prints_help(capsys):
    """Running without a command shows help."""
    assert main([]) == 1
    assert "usage" in capsys.readouterr().out.lower()


@pytest.mark.unit
def test_env_shows_resolved_values(capsys, monkeypatch):
    """env prints each variable with its current value."""
    monkeypatch.setenv("ASSIGNS_DOCS_HEADING", "## Props")
    assert main(["env", "--category", "docs"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert len(out) == 1
    assert out[0].startswith("ASSIGNS_DOCS_HEADING=## Props  # ")
