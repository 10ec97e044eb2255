"""stepgraph — interactive graphs of multi-component pipeline traces.

Entry point:
    stepgraph.visualize_to_div(master_trace, "graph-div")  -> InteractiveTraceGraph

DI API (construct the pieces yourself):
    from stepgraph.core import InteractiveTraceGraph, VizConfig, build_graph
    graph = build_graph(master_trace, config=VizConfig(...))
    view = InteractiveTraceGraph(graph, layout=my_layout, hooks=[my_hook])
    view.apply_filter("det|noun")
"""

from __future__ import annotations

from .core import (
    InteractiveTraceGraph,
    LayoutEngine,
    NullHook,
    NullLayout,
    PaletteGenerator,
    TolPalette,
    ViewHook,
    VizConfig,
    build_graph,
)
from .exceptions import (
    DanglingLinkError,
    DuplicateNodeIdError,
    InvalidFilterError,
    PaletteExhaustedError,
    StepgraphError,
    TraceLoadError,
)
from .models import MasterSpec, MasterTrace


def visualize_to_div(
    master_trace: MasterTrace | dict[str, object],
    container_id: str,
    master_spec: MasterSpec | dict[str, object] | None = None,
    *,
    palette: PaletteGenerator | None = None,
    layout: LayoutEngine | None = None,
    hooks: list[ViewHook] | None = None,
    config: VizConfig | None = None,
) -> InteractiveTraceGraph:
    """Build the graph for ``master_trace`` and mount a controller on ``container_id``.

    Every call returns a new, independent controller. Raises
    ``PaletteExhaustedError``, ``DanglingLinkError`` or
    ``DuplicateNodeIdError`` before anything is rendered if the trace cannot be drawn.
    """
    if not isinstance(master_trace, MasterTrace):
        master_trace = MasterTrace.model_validate(master_trace)
    if master_spec is not None and not isinstance(master_spec, MasterSpec):
        master_spec = MasterSpec.model_validate(master_spec)

    config = config or VizConfig()
    graph = build_graph(master_trace, palette=palette, config=config)
    return InteractiveTraceGraph(
        graph,
        container_id=container_id,
        master_spec=master_spec,
        layout=layout,
        hooks=hooks,
        config=config,
    )


__all__ = [
    "DanglingLinkError",
    "DuplicateNodeIdError",
    "InteractiveTraceGraph",
    "InvalidFilterError",
    "MasterSpec",
    "MasterTrace",
    "NullHook",
    "NullLayout",
    "PaletteExhaustedError",
    "StepgraphError",
    "TolPalette",
    "TraceLoadError",
    "ViewHook",
    "VizConfig",
    "build_graph",
    "visualize_to_div",
]
