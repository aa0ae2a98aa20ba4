"""Documentation generation for declared properties."""

from .lib import format_property_doc, generate_docs, generate_props_docs

__all__ = ["format_property_doc", "generate_props_docs", "generate_docs"]
