from __future__ import annotations

import pytest

from stepgraph.core import build_graph, compute_render_state, highlighted_edges
from stepgraph.exceptions import InvalidFilterError
from stepgraph.models import FadeLevel, MasterTrace


def test_filter_shows_match_neighbours_and_parents(foo_trace: MasterTrace) -> None:
    graph = build_graph(foo_trace)
    state = compute_render_state(graph, "foo")

    assert state.matched == {"A-0", "A"}
    assert state.visible == {"A-0", "B-0", "A", "B"}
    assert state.hidden == {"A-1"}
    assert state.node_fade == {
        "A": FadeLevel.NONE,
        "A-0": FadeLevel.NONE,
        "A-1": FadeLevel.FAR,
        "B": FadeLevel.NEAR,
        "B-0": FadeLevel.NEAR,
    }
    assert state.edge_fade == (FadeLevel.NEAR,)


def test_neighbourhood_follows_edges_in_both_directions(foo_trace: MasterTrace) -> None:
    graph = build_graph(foo_trace)
    state = compute_render_state(graph, "baz")

    assert state.visible == {"B-0", "A-0", "A", "B"}
    assert state.fade_of("A-0") == FadeLevel.NEAR
    assert state.fade_of("A") == FadeLevel.NEAR
    assert state.fade_of("B") == FadeLevel.NONE
    assert not state.is_visible("A-1")


def test_unlinked_match_does_not_pull_in_other_components(foo_trace: MasterTrace) -> None:
    graph = build_graph(foo_trace)
    state = compute_render_state(graph, "bar")

    assert state.visible == {"A-1", "A"}
    assert state.fade_of("B") == FadeLevel.FAR
    assert state.fade_of("B-0") == FadeLevel.FAR
    assert state.edge_fade == (FadeLevel.FAR,)


def test_edge_between_two_matches_is_not_faded(chain_trace: MasterTrace) -> None:
    graph = build_graph(chain_trace)
    state = compute_render_state(graph, "^(the|cat)$")

    assert state.edge_fade == (FadeLevel.NONE, FadeLevel.NEAR, FadeLevel.NEAR)
    assert state.visible == {"A", "A-0", "A-1", "B", "B-0"}
    assert state.fade_of("B-0") == FadeLevel.NEAR


def test_neighbourhood_is_one_hop_only(chain_trace: MasterTrace) -> None:
    graph = build_graph(chain_trace)
    state = compute_render_state(graph, "^cat$")

    # A-0 and B-0 are both one hop from A-1.
    assert state.visible == {"A", "A-0", "A-1", "B", "B-0"}
    assert state.edge_fade == (FadeLevel.NEAR, FadeLevel.FAR, FadeLevel.NEAR)


def test_empty_query_shows_everything_without_fade(foo_trace: MasterTrace) -> None:
    graph = build_graph(foo_trace)
    state = compute_render_state(graph, "")

    assert state.visible == {node.id for node in graph.nodes}
    assert set(state.node_fade.values()) == {FadeLevel.NONE}
    assert state.edge_fade == (FadeLevel.NONE,)
    assert state.hidden == frozenset()


def test_empty_query_shows_components_without_steps() -> None:
    trace = MasterTrace.model_validate(
        {"component_trace": [{"name": "A", "step_trace": [{}]}, {"name": "B", "step_trace": []}]}
    )
    state = compute_render_state(build_graph(trace), "")

    assert state.visible == {"A", "B"}


def test_query_matching_nothing_hides_everything(foo_trace: MasterTrace) -> None:
    graph = build_graph(foo_trace)
    state = compute_render_state(graph, "zzz")

    assert state.visible == frozenset()
    assert set(state.node_fade.values()) == {FadeLevel.FAR}


def test_filter_is_idempotent(chain_trace: MasterTrace) -> None:
    graph = build_graph(chain_trace)

    assert compute_render_state(graph, "c.t") == compute_render_state(graph, "c.t")


def test_invalid_pattern_raises_invalid_filter_error(foo_trace: MasterTrace) -> None:
    graph = build_graph(foo_trace)

    with pytest.raises(InvalidFilterError, match="Invalid filter pattern") as excinfo:
        compute_render_state(graph, "(unclosed")
    assert excinfo.value.query == "(unclosed"
    assert isinstance(excinfo.value, ValueError)


def test_highlight_step_yields_incident_edges(chain_trace: MasterTrace) -> None:
    graph = build_graph(chain_trace)

    assert highlighted_edges(graph, "A-0") == {0, 1}
    assert highlighted_edges(graph, "A-1") == {0, 2}
    assert highlighted_edges(graph, "B-0") == {1, 2}


def test_highlight_component_yields_edges_of_its_steps(chain_trace: MasterTrace) -> None:
    graph = build_graph(chain_trace)

    assert highlighted_edges(graph, "A") == {0, 1, 2}
    assert highlighted_edges(graph, "B") == {1, 2}


def test_highlight_edge_and_unknown_elements(chain_trace: MasterTrace) -> None:
    graph = build_graph(chain_trace)

    assert highlighted_edges(graph, 2) == {2}
    assert highlighted_edges(graph, 7) == frozenset()
    assert highlighted_edges(graph, "nope") == frozenset()


def test_highlight_rejects_booleans(chain_trace: MasterTrace) -> None:
    graph = build_graph(chain_trace)

    assert highlighted_edges(graph, True) == frozenset()  # type: ignore[arg-type]
    assert highlighted_edges(graph, False) == frozenset()  # type: ignore[arg-type]
