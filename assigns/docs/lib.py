"""Generated documentation for component properties.

Renders one markdown line per property in declaration order, e.g.::

    ### Properties

    * **label** *string, required=True* - The button label.
    * **items** *list, default=[]*
"""

from __future__ import annotations

import inspect
from collections.abc import Iterable

from assigns.config import get_docs_heading
from assigns.schema import Assign


def format_property_doc(prop: Assign) -> str:
    """Render a single property line."""
    options = prop.format_options()
    opts = f", {options}" if options else ""
    doc = f" - {prop.doc}." if prop.doc else ""
    return f"* **{prop.name}** *{prop.type.value}{opts}*{doc}"


def generate_props_docs(props: Iterable[Assign], heading: str | None = None) -> str:
    """Render the properties block.

    Args:
        props: Properties in declaration order.
        heading: Block heading; defaults to the configured heading.

    Returns:
        The markdown block, ending with a newline.
    """
    lines = "\n".join(format_property_doc(prop) for prop in props)
    return f"{get_docs_heading(heading)}\n\n{lines}\n"


def generate_docs(
    existing: str | None, props: Iterable[Assign], heading: str | None = None
) -> str:
    """Append the properties block to existing documentation.

    The block becomes the whole documentation when there is none.
    """
    props_doc = generate_props_docs(props, heading)
    if not existing or not existing.strip():
        return props_doc
    return f"{inspect.cleandoc(existing)}\n\n{props_doc}"


__all__ = ["format_property_doc", "generate_props_docs", "generate_docs"]
