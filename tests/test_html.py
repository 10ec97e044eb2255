from __future__ import annotations

import html
import json

from stepgraph import visualize_to_div
from stepgraph.core import VizConfig, build_graph, compute_render_state
from stepgraph.models import MasterTrace
from stepgraph.renderers import TraceGraphWidget, render_html, render_page, to_cytoscape_elements


def test_cytoscape_elements_carry_data_and_classes(foo_trace: MasterTrace) -> None:
    graph = build_graph(foo_trace)
    elements = to_cytoscape_elements(graph, compute_render_state(graph, "foo"))

    nodes = {node["data"]["id"]: node for node in elements["nodes"]}  # type: ignore[index]
    assert nodes["A"]["classes"] == "component"
    assert nodes["A"]["data"]["idx"] == 0  # type: ignore[index]
    assert nodes["A-0"]["classes"] == "step"
    assert nodes["A-0"]["data"]["parent"] == "A"  # type: ignore[index]
    assert nodes["A-0"]["data"]["componentColor"] == "#4477aa"  # type: ignore[index]
    assert nodes["A-1"]["classes"] == "step faded-far hidden"
    assert nodes["B-0"]["classes"] == "step faded-near"

    (edge,) = elements["edges"]
    assert edge["data"] == {
        "id": "edge:0",
        "source": "A-0",
        "target": "B-0",
        "curvature": 0.0,
        "featureName": "input",
        "featureValue": "0",
    }
    assert edge["classes"] == "faded-near"


def test_edges_to_hidden_nodes_are_hidden(foo_trace: MasterTrace) -> None:
    graph = build_graph(foo_trace)
    elements = to_cytoscape_elements(graph, compute_render_state(graph, "bar"))

    assert elements["edges"][0]["classes"] == "faded-far hidden"


def test_render_html_mounts_into_container(foo_trace: MasterTrace) -> None:
    graph = build_graph(foo_trace)
    config = VizConfig(layout_name="breadthfirst", height_px=400, width_px=800)
    fragment = render_html(graph, compute_render_state(graph, ""), "my-graph", config=config)

    assert '<div id="my-graph"' in fragment
    assert "width: 800px; height: 400px;" in fragment
    assert config.cytoscape_url in fragment
    assert 'document.getElementById("my-graph")' in fragment
    assert '"name": "breadthfirst"' in fragment
    assert "highlighted-edge" in fragment


def test_render_html_escapes_script_breakouts() -> None:
    trace = MasterTrace.model_validate(
        {
            "component_trace": [
                {
                    "name": "A",
                    "step_trace": [
                        {"caption": "</script><b>", "html_representation": "<i>state</i>"}
                    ],
                }
            ]
        }
    )
    graph = build_graph(trace)
    fragment = render_html(graph, compute_render_state(graph, ""), "g")

    assert "</script><b>" not in fragment
    assert "<\\/script><b>" in fragment


def test_render_html_shows_step_details_on_mouseover(chain_trace: MasterTrace) -> None:
    graph = build_graph(chain_trace)
    fragment = render_html(graph, compute_render_state(graph, ""), "g")

    mouseover = fragment[fragment.index('cy.on("mouseover"') : fragment.index('cy.on("mouseout"')]
    assert 'info.className = "stepgraph-node-info"' in fragment
    assert 'el.data("stateInfo")' in mouseover
    assert 'el.data("fixedFeatures")' in mouseover
    assert 'info.style.display = "block"' in mouseover
    assert 'info.style.display = "none"' in fragment[fragment.index('cy.on("mouseout"') :]


def test_render_page_is_a_full_document(foo_trace: MasterTrace) -> None:
    graph = build_graph(foo_trace)
    page = render_page(graph, compute_render_state(graph, ""), title="run 1")

    assert page.startswith("<!DOCTYPE html>")
    assert "<title>run 1</title>" in page
    assert '<div id="stepgraph"' in page
    assert "<input" not in page


def test_controller_html_reflects_current_filter(foo_trace: MasterTrace) -> None:
    view = visualize_to_div(
        foo_trace,
        "graph",
        {"component": [{"name": "B", "linked_feature": [{"source_component": "A"}]}]},
    )
    view.apply_filter("bar")
    fragment = view.render_html()

    start = fragment.index("var spec = ") + len("var spec = ")
    end = fragment.index(";\n", start)
    spec = json.loads(fragment[start:end].replace("<\\/", "</"))
    classes = {node["data"]["id"]: node["classes"] for node in spec["elements"]["nodes"]}
    assert classes["B-0"] == "step faded-far hidden"
    assert classes["A-1"] == "step"
    assert spec["layout"]["componentAdjacency"] == [["A", "B"]]


def test_widget_wraps_page_in_iframe(foo_trace: MasterTrace) -> None:
    view = visualize_to_div(foo_trace, "graph")
    output = view._repr_html_()

    assert output.startswith("<iframe srcdoc=")
    assert html.escape("<!DOCTYPE html>", quote=True) in output
    assert "height: 616px" in output

    widget = TraceGraphWidget("<p>x</p>", 300, 100)
    assert "width: 300px" in widget._repr_html_()
