"""InteractiveTraceGraph — owns the render state of one built graph."""

from __future__ import annotations

import warnings

from ..models import GraphModel, MasterSpec, RenderState
from .hooks import ViewHook
from .layout import LayoutEngine, LayoutOptions, NullLayout
from .view import compute_render_state, highlighted_edges
from .viz_config import VizConfig


class InteractiveTraceGraph:
    """Controller for one graph instance mounted in one container.

    Error-handling contract
    ----------------------
    - An invalid filter pattern raises ``InvalidFilterError`` and leaves the
      current state untouched.
    - Hook failures are swallowed with ``warnings.warn`` so that a broken
      view integration never corrupts the render state.
    - Layout engine failures propagate; they are configuration problems.
    """

    def __init__(
        self,
        graph: GraphModel,
        *,
        container_id: str = "stepgraph",
        master_spec: MasterSpec | None = None,
        layout: LayoutEngine | None = None,
        hooks: list[ViewHook] | None = None,
        config: VizConfig | None = None,
    ) -> None:
        self.graph = graph
        self.container_id = container_id
        self.master_spec = master_spec
        self.layout: LayoutEngine = layout or NullLayout()
        self.hooks: list[ViewHook] = hooks or []
        self.config = config or VizConfig()
        self._component_adjacency = tuple(master_spec.component_adjacency()) if master_spec else ()
        self.state = compute_render_state(graph, "")
        self._relayout()

    @property
    def layout_options(self) -> LayoutOptions:
        return LayoutOptions(
            name=self.config.layout_name,
            component_adjacency=self._component_adjacency,
            visible=self.state.visible,
        )

    def apply_filter(self, query: str) -> RenderState:
        """Recompute the whole render state for ``query`` and re-run the layout."""
        state = compute_render_state(self.graph, query)
        self.state = state
        self._relayout()
        self._dispatch_state(state)
        return state

    def on_hover(self, element: str | int) -> frozenset[int]:
        """Edges to emphasize for a hovered node id or edge position."""
        edges = highlighted_edges(self.graph, element)
        for hook in self.hooks:
            try:
                hook.on_highlight(element, edges)
            except Exception:
                warnings.warn("stepgraph: hook error in on_highlight", stacklevel=2)
        return edges

    def render_html(self) -> str:
        from ..renderers import render_html

        return render_html(
            self.graph,
            self.state,
            self.container_id,
            options=self.layout_options,
            config=self.config,
        )

    def render_console(self) -> str:
        from ..renderers import render_console

        return render_console(self.graph, self.state)

    def render_page(self) -> str:
        from ..renderers import render_page

        return render_page(
            self.graph,
            self.state,
            self.container_id,
            options=self.layout_options,
            config=self.config,
        )

    def _repr_html_(self) -> str:
        from ..renderers import TraceGraphWidget

        widget = TraceGraphWidget(self.render_page(), self.config.width_px, self.config.height_px)
        return widget._repr_html_()

    def _relayout(self) -> None:
        self.layout.run(self.graph, self.state, self.layout_options)

    def _dispatch_state(self, state: RenderState) -> None:
        for hook in self.hooks:
            try:
                hook.on_render_state(state)
            except Exception:
                warnings.warn("stepgraph: hook error in on_render_state", stacklevel=3)
