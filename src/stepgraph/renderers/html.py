"""Cytoscape.js HTML rendering for pages and notebooks."""

from __future__ import annotations

import html as html_module
import json

from ..core.layout import LayoutOptions
from ..core.viz_config import VizConfig
from ..models import FadeLevel, GraphModel, RenderState

STYLESHEET: list[dict[str, object]] = [
    {
        "selector": "node",
        "style": {
            "background-color": "data(componentColor)",
            "content": "data(text)",
            "text-halign": "center",
            "text-opacity": 1.0,
            "text-valign": "center",
        },
    },
    {
        "selector": "node.step",
        "style": {
            "text-outline-width": 2,
            "text-outline-color": "#ffffff",
            "text-outline-opacity": 0.3,
        },
    },
    {
        "selector": ":parent",
        "style": {
            "background-opacity": 0.1,
            "text-halign": "right",
            "text-margin-x": 5,
            "text-margin-y": 5,
            "text-valign": "bottom",
        },
    },
    {
        "selector": "edge",
        "style": {
            "control-point-distance": "data(curvature)",
            "curve-style": "unbundled-bezier",
            "line-color": "#666666",
            "opacity": 0.4,
            "target-arrow-color": "#666666",
            "target-arrow-shape": "triangle",
            "width": 3,
        },
    },
    {"selector": "edge.faded-near", "style": {"opacity": 0.2}},
    {"selector": "node.step.faded-near", "style": {"opacity": 0.5}},
    {"selector": "node.step.faded-far, edge.faded-far", "style": {"opacity": 0.1}},
    # Mouse-overs win, but far edges stay light.
    {"selector": "edge.highlighted-edge", "style": {"line-color": "#333333", "opacity": 1.0}},
    {"selector": "edge.highlighted-edge.faded-far", "style": {"opacity": 0.4}},
    {"selector": ".hidden", "style": {"display": "none"}},
]

_FADE_CLASSES = {
    FadeLevel.NONE: "",
    FadeLevel.NEAR: "faded-near",
    FadeLevel.FAR: "faded-far",
}


def edge_element_id(position: int) -> str:
    return f"edge:{position}"


def to_cytoscape_elements(graph: GraphModel, state: RenderState) -> dict[str, list[dict[str, object]]]:
    """Cytoscape ``elements`` payload with fade and visibility as classes."""
    nodes: list[dict[str, object]] = []
    for node in graph.nodes:
        data: dict[str, object] = {
            "id": node.id,
            "text": node.text,
            "componentColor": node.color,
            "type": node.kind.value,
        }
        if node.is_component:
            data["idx"] = node.component_idx
        else:
            data.update(
                {
                    "parent": node.parent,
                    "componentIdx": node.component_idx,
                    "stepIdx": node.step_idx,
                    "stateInfo": node.state_info,
                    "fixedFeatures": node.fixed_features,
                }
            )
        classes = [node.kind.value, _FADE_CLASSES[state.fade_of(node.id)]]
        if not state.is_visible(node.id):
            classes.append("hidden")
        nodes.append({"data": data, "classes": " ".join(c for c in classes if c)})

    edges: list[dict[str, object]] = []
    for position, edge in enumerate(graph.edges):
        fade = state.edge_fade[position] if position < len(state.edge_fade) else FadeLevel.NONE
        classes = [_FADE_CLASSES[fade]]
        if not (state.is_visible(edge.source) and state.is_visible(edge.target)):
            classes.append("hidden")
        edges.append(
            {
                "data": {
                    "id": edge_element_id(position),
                    "source": edge.source,
                    "target": edge.target,
                    "curvature": edge.curvature,
                    "featureName": edge.feature_name,
                    "featureValue": edge.feature_value,
                },
                "classes": " ".join(c for c in classes if c),
            }
        )
    return {"nodes": nodes, "edges": edges}


def render_html(
    graph: GraphModel,
    state: RenderState,
    container_id: str,
    *,
    options: LayoutOptions | None = None,
    config: VizConfig | None = None,
) -> str:
    """HTML fragment mounting the graph into a ``<div>`` with ``container_id``."""
    config = config or VizConfig()
    options = options or LayoutOptions(name=config.layout_name, visible=state.visible)
    width = f"{config.width_px}px" if config.width_px is not None else "100%"
    payload = {
        "elements": to_cytoscape_elements(graph, state),
        "style": STYLESHEET,
        "layout": {
            "name": options.name,
            "componentAdjacency": [list(pair) for pair in options.component_adjacency],
        },
    }
    return (
        f'<div id="{html_module.escape(container_id, quote=True)}" '
        f'style="position: relative; overflow: hidden; width: {width}; '
        f'height: {config.height_px}px;"></div>\n'
        f'<script src="{html_module.escape(config.cytoscape_url, quote=True)}"></script>\n'
        f"<script>\n{_mount_script(container_id, payload)}\n</script>"
    )


def render_page(
    graph: GraphModel,
    state: RenderState,
    container_id: str = "stepgraph",
    *,
    options: LayoutOptions | None = None,
    config: VizConfig | None = None,
    title: str = "stepgraph",
) -> str:
    """Standalone HTML document around ``render_html``.

    The page is a snapshot of ``state``: it shows the filter result it was
    rendered with and has no filter input of its own. To look at another
    query, call ``InteractiveTraceGraph.apply_filter`` and render again.
    """
    fragment = render_html(graph, state, container_id, options=options, config=config)
    return (
        "<!DOCTYPE html>\n<html>\n<head>\n"
        '<meta charset="UTF-8">\n'
        f"<title>{html_module.escape(title)}</title>\n"
        "<style>body { margin: 0; font-family: system-ui, sans-serif; }</style>\n"
        f"</head>\n<body>\n{fragment}\n</body>\n</html>\n"
    )


def _mount_script(container_id: str, payload: dict[str, object]) -> str:
    data = _script_json(payload)
    target = _script_json(container_id)
    return f"""(function() {{
  var spec = {data};
  var cy = cytoscape({{
    container: document.getElementById({target}),
    boxSelectionEnabled: true,
    autounselectify: true,
    elements: spec.elements,
    style: spec.style,
    layout: {{name: "preset"}}
  }});
  cy.elements().not(".hidden").layout(spec.layout).run();
  var info = document.createElement("div");
  info.className = "stepgraph-node-info";
  info.style.cssText = "position: absolute; top: 8px; right: 8px; z-index: 10; "
    + "max-width: 40%; max-height: 90%; overflow: auto; padding: 6px 8px; "
    + "background: rgba(255, 255, 255, 0.95); border: 1px solid #cccccc; "
    + "font-size: 12px; display: none;";
  document.getElementById({target}).appendChild(info);
  cy.on("mouseover", "node, edge", function(evt) {{
    var el = evt.target;
    var edges = el.isEdge() ? el : el.union(el.children()).connectedEdges();
    edges.addClass("highlighted-edge");
    if (el.isNode() && el.data("type") === "step") {{
      var heading = document.createElement("b");
      heading.textContent = el.data("text");
      var state = document.createElement("div");
      state.innerHTML = el.data("stateInfo") || "";
      var features = document.createElement("pre");
      features.textContent = JSON.stringify(el.data("fixedFeatures") || [], null, 2);
      info.replaceChildren(heading, state, features);
      info.style.display = "block";
    }}
  }});
  cy.on("mouseout", "node, edge", function() {{
    cy.edges().removeClass("highlighted-edge");
    info.style.display = "none";
  }});
}})();"""


def _script_json(value: object) -> str:
    return json.dumps(value).replace("</", "<\\/")


class TraceGraphWidget:
    """Notebook display wrapper: the full page inside an iframe."""

    def __init__(self, html_content: str, width: int | None, height: int) -> None:
        self.html_content = html_content
        self.width = width
        self.height = height

    def _repr_html_(self) -> str:
        escaped_html = html_module.escape(self.html_content, quote=True)
        width = f"{self.width}px" if self.width is not None else "100%"
        return (
            f'<iframe srcdoc="{escaped_html}" frameborder="0" '
            f'style="border: none; width: {width}; max-width: 100%; '
            f'height: {self.height + 16}px; display: block;" '
            f'sandbox="allow-scripts">'
            f"</iframe>"
        )
