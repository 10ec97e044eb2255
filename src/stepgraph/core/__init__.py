"""Graph building and interactive view state."""

from .builder import build_graph, step_node_id
from .controller import InteractiveTraceGraph
from .hooks import NullHook, ViewHook
from .layout import LayoutEngine, LayoutOptions, NullLayout
from .palette import PaletteGenerator, TolPalette
from .view import compile_query, compute_render_state, highlighted_edges
from .viz_config import VizConfig

__all__ = [
    "InteractiveTraceGraph",
    "LayoutEngine",
    "LayoutOptions",
    "NullHook",
    "NullLayout",
    "PaletteGenerator",
    "TolPalette",
    "ViewHook",
    "VizConfig",
    "build_graph",
    "compile_query",
    "compute_render_state",
    "highlighted_edges",
    "step_node_id",
]
