"""Console and HTML renderers."""

from .console import render_console
from .html import TraceGraphWidget, edge_element_id, render_html, render_page, to_cytoscape_elements

__all__ = [
    "TraceGraphWidget",
    "edge_element_id",
    "render_console",
    "render_html",
    "render_page",
    "to_cytoscape_elements",
]
