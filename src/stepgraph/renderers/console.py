"""Rich-based console rendering of a trace graph."""

from __future__ import annotations

from collections import defaultdict
from io import StringIO

from rich.console import Console
from rich.tree import Tree

from ..models import FadeLevel, GraphModel, GraphNode, RenderState

_MAX_TEXT_LEN = 60


def render_console(graph: GraphModel, state: RenderState | None = None) -> str:
    """Render components and their visible steps as a text tree.

    Hidden nodes are omitted; visible nodes carry a fade marker when faded.
    """
    tree = Tree(_graph_label(graph, state))
    links_by_target = _build_link_labels(graph)

    for component in graph.component_nodes:
        if state is not None and not state.is_visible(component.id):
            continue
        steps = graph.children_of(component.id)
        shown = [step for step in steps if state is None or state.is_visible(step.id)]
        branch = tree.add(
            f"{component.text} [{component.color}] ({len(shown)}/{len(steps)} steps)"
            f"{_fade_marker(component, state)}"
        )
        for step in shown:
            line = f"{step.id}: {_truncate(step.text)}{_fade_marker(step, state)}"
            labels = links_by_target.get(step.id, [])
            if labels:
                line += " " + " ".join(labels)
            branch.add(line)

    console = Console(record=True, width=120, markup=False, file=StringIO())
    console.print(tree)
    return console.export_text()


def _graph_label(graph: GraphModel, state: RenderState | None) -> str:
    label = (
        f"Graph: {len(graph.component_nodes)} components, "
        f"{len(graph.step_nodes)} steps, {len(graph.edges)} edges"
    )
    if state is not None and state.query:
        label += f" (filter: {state.query!r})"
    return label


def _build_link_labels(graph: GraphModel) -> dict[str, list[str]]:
    """Build map: target_id -> [label, ...] for display."""
    result: dict[str, list[str]] = defaultdict(list)
    for edge in graph.edges:
        feature = f" {edge.feature_name}={edge.feature_value}" if edge.feature_name else ""
        result[edge.target].append(f"[<- {edge.source}{feature}]")
    return dict(result)


def _fade_marker(node: GraphNode, state: RenderState | None) -> str:
    if state is None:
        return ""
    fade = state.fade_of(node.id)
    if fade == FadeLevel.NONE:
        return ""
    return f" ({fade.value})"


def _truncate(text: str) -> str:
    if len(text) <= _MAX_TEXT_LEN:
        return text
    return text[:_MAX_TEXT_LEN] + "..."
