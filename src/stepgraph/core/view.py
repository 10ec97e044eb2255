"""Filter and highlight computations over a graph model.

Both functions are pure: the same graph and input always produce the same
result, and nothing is patched incrementally.
"""

from __future__ import annotations

import re

from ..exceptions import InvalidFilterError
from ..models import FadeLevel, GraphModel, RenderState


def compile_query(query: str) -> re.Pattern[str]:
    try:
        return re.compile(query)
    except re.error as exc:
        raise InvalidFilterError(query, str(exc)) from exc


def compute_render_state(graph: GraphModel, query: str) -> RenderState:
    """Derive visibility and fade levels for ``query``.

    Step nodes whose text matches ``query`` (regex search; the empty query
    matches everything) form the match set. The visible set adds every step
    one edge away from a match, in either direction, plus the components
    containing any of those steps. Matched nodes are not faded, other visible
    nodes fade ``near`` and hidden nodes fade ``far``. An edge is unfaded when
    both ends match, ``near`` when one end matches, ``far`` otherwise.

    Raises ``InvalidFilterError`` if ``query`` is not a valid pattern.
    """
    pattern = compile_query(query)

    if not query:
        everything = frozenset(node.id for node in graph.nodes)
        return RenderState(
            query=query,
            matched=everything,
            visible=everything,
            node_fade={node.id: FadeLevel.NONE for node in graph.nodes},
            edge_fade=tuple(FadeLevel.NONE for _ in graph.edges),
        )

    matched_steps = {node.id for node in graph.step_nodes if pattern.search(node.text)}

    neighbours: set[str] = set()
    for edge in graph.edges:
        if edge.source in matched_steps:
            neighbours.add(edge.target)
        if edge.target in matched_steps:
            neighbours.add(edge.source)
    visible_steps = matched_steps | neighbours

    parents = {node.parent for node in graph.step_nodes if node.id in visible_steps}
    matched_components = {node.parent for node in graph.step_nodes if node.id in matched_steps}
    matched = frozenset(matched_steps | {parent for parent in matched_components if parent})
    visible = frozenset(visible_steps | {parent for parent in parents if parent})

    node_fade: dict[str, FadeLevel] = {}
    for node in graph.nodes:
        if node.id in matched:
            node_fade[node.id] = FadeLevel.NONE
        elif node.id in visible:
            node_fade[node.id] = FadeLevel.NEAR
        else:
            node_fade[node.id] = FadeLevel.FAR

    edge_fade = tuple(
        _edge_fade(edge.source in matched_steps, edge.target in matched_steps) for edge in graph.edges
    )
    return RenderState(
        query=query,
        matched=matched,
        visible=visible,
        node_fade=node_fade,
        edge_fade=edge_fade,
    )


def _edge_fade(source_matched: bool, target_matched: bool) -> FadeLevel:
    if source_matched and target_matched:
        return FadeLevel.NONE
    if source_matched or target_matched:
        return FadeLevel.NEAR
    return FadeLevel.FAR


def highlighted_edges(graph: GraphModel, element: str | int) -> frozenset[int]:
    """Positions of the edges to emphasize while ``element`` is hovered.

    ``element`` is a node id or an edge position. Steps yield their incident
    edges, components the incident edges of all their steps, and an edge
    yields itself. Unknown elements, including booleans, yield nothing.
    """
    if isinstance(element, bool):
        return frozenset()
    if isinstance(element, int):
        return frozenset({element}) if 0 <= element < len(graph.edges) else frozenset()

    node = graph.get_node(element)
    if node is None:
        return frozenset()

    incident = graph.incident_edges()
    if node.is_step:
        return frozenset(incident.get(node.id, ()))
    return frozenset(
        position for child in graph.children_of(node.id) for position in incident.get(child.id, ())
    )
