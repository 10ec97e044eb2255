"""Builds a flat graph model from a hierarchical master trace."""

from __future__ import annotations

import logging

from ..exceptions import DanglingLinkError, DuplicateNodeIdError, PaletteExhaustedError
from ..models import ComponentTrace, GraphEdge, GraphModel, GraphNode, MasterTrace, NodeKind, StepTrace
from .palette import PaletteGenerator, TolPalette
from .viz_config import VizConfig

logger = logging.getLogger(__name__)


def step_node_id(component_name: str, step_idx: int, separator: str = "-") -> str:
    return f"{component_name}{separator}{step_idx}"


def build_graph(
    master_trace: MasterTrace,
    *,
    palette: PaletteGenerator | None = None,
    config: VizConfig | None = None,
) -> GraphModel:
    """Transform ``master_trace`` into a ``GraphModel``.

    Components become container nodes, captioned steps become nodes nested
    under them, and every value of every linked feature becomes one edge
    from the referenced earlier step. Edges are emitted in component, step,
    feature, value order.

    Raises ``PaletteExhaustedError`` if the palette cannot colour every
    component, ``DanglingLinkError`` if a link names a step node that
    has not been emitted before the linking step, and ``DuplicateNodeIdError``
    if two nodes would share an id.
    """
    config = config or VizConfig()
    palette = palette or TolPalette()
    components = master_trace.component_trace

    colors = palette.generate(config.palette_scheme, len(components))
    if colors is None or len(colors) != len(components):
        raise PaletteExhaustedError(config.palette_scheme, len(components))

    nodes: list[GraphNode] = []
    edges: list[GraphEdge] = []
    emitted_steps: set[str] = set()
    emitted_ids: set[str] = set()
    without_captions = 0

    for component_idx, (component, color) in enumerate(zip(components, colors, strict=True)):
        color = "#" + color.removeprefix("#")
        _claim_id(emitted_ids, component.name)
        nodes.append(_component_node(component, component_idx, color))

        for step_idx, step in enumerate(component.step_trace):
            if step.caption is None:
                without_captions += 1
                continue

            node = _step_node(component, component_idx, step, step_idx, color, config.id_separator)
            _claim_id(emitted_ids, node.id)
            for edge in _step_edges(step, node.id, config.id_separator):
                if edge.source not in emitted_steps:
                    raise DanglingLinkError(edge.source, edge.target)
                edges.append(edge)
            nodes.append(node)
            emitted_steps.add(node.id)

    logger.info("%d nodes without captions", without_captions)
    return GraphModel(nodes=nodes, edges=edges, nodes_without_captions=without_captions)


def _claim_id(emitted_ids: set[str], node_id: str) -> None:
    if node_id in emitted_ids:
        raise DuplicateNodeIdError(node_id)
    emitted_ids.add(node_id)


def _component_node(component: ComponentTrace, component_idx: int, color: str) -> GraphNode:
    return GraphNode(
        id=component.name,
        kind=NodeKind.COMPONENT,
        text=component.name,
        color=color,
        component_idx=component_idx,
    )


def _step_node(
    component: ComponentTrace,
    component_idx: int,
    step: StepTrace,
    step_idx: int,
    color: str,
    separator: str,
) -> GraphNode:
    node_id = step_node_id(component.name, step_idx, separator)
    return GraphNode(
        id=node_id,
        kind=NodeKind.STEP,
        text=step.caption or node_id,
        color=color,
        component_idx=component_idx,
        parent=component.name,
        step_idx=step_idx,
        state_info=step.html_representation,
        fixed_features=list(step.fixed_feature_trace),
        linked_features=list(step.linked_feature_trace),
    )


def _step_edges(step: StepTrace, target_id: str, separator: str) -> list[GraphEdge]:
    # Each linked feature can take multiple values.
    return [
        GraphEdge(
            source=step_node_id(feature.source_component, value.step_idx, separator),
            target=target_id,
            feature_name=value.feature_name,
            feature_value=value.feature_value,
        )
        for feature in step.linked_feature_trace
        for value in feature.value_trace
    ]
