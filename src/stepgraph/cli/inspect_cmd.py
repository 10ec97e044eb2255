"""Inspect subcommand implementation."""

from __future__ import annotations

import json
import sys
from pathlib import Path

from ..core import InteractiveTraceGraph, build_graph
from ..exceptions import StepgraphError
from ..models import FadeLevel, GraphModel, RenderState
from ..serializers import load_master_trace_json


def run_inspect(
    trace_file: Path,
    *,
    query: str,
    as_json: bool,
    output_path: Path | None,
) -> int:
    if output_path is not None and not as_json:
        raise ValueError("--output is only supported when --json is provided")

    try:
        master_trace = load_master_trace_json(trace_file)
        view = InteractiveTraceGraph(build_graph(master_trace))
        view.apply_filter(query)
    except FileNotFoundError:
        print(f"Error: file not found: {trace_file}", file=sys.stderr)
        return 1
    except StepgraphError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"Error reading file: {exc}", file=sys.stderr)
        return 1
    summary = _build_summary(view.graph, view.state)

    if as_json:
        payload = json.dumps(summary, ensure_ascii=True, sort_keys=True)
        if output_path is not None:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(payload + "\n", encoding="utf-8")
        else:
            print(payload)
        return 0

    print(f"Components: {summary['component_count']}")
    print(f"Steps: {summary['step_count']}")
    print(f"Edges: {summary['edge_count']}")
    print(f"Nodes without captions: {summary['nodes_without_captions']}")
    if query:
        print(f"Filter: {query}")
        print(f"Matched steps: {summary['matched_step_count']}")
        print(f"Visible nodes: {summary['visible_count']}")
    print()
    print(view.render_console())
    return 0


def _build_summary(graph: GraphModel, state: RenderState) -> dict[str, object]:
    step_ids = {node.id for node in graph.step_nodes}
    fade_counts = {level.value: 0 for level in FadeLevel}
    for fade in state.node_fade.values():
        fade_counts[fade.value] += 1

    return {
        "component_count": len(graph.component_nodes),
        "step_count": len(step_ids),
        "edge_count": len(graph.edges),
        "nodes_without_captions": graph.nodes_without_captions,
        "query": state.query,
        "matched_step_count": len(state.matched & step_ids),
        "visible_count": len(state.visible),
        "fade_counts": fade_counts,
        "components": [
            {"name": node.id, "color": node.color, "steps": len(graph.children_of(node.id))}
            for node in graph.component_nodes
        ],
    }
