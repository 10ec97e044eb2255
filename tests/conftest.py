from __future__ import annotations

import pytest

from stepgraph.models import MasterTrace


def link(component: str, *step_idxs: int, feature: str = "input") -> dict[str, object]:
    """Linked feature trace reading ``step_idxs`` of ``component``."""
    return {
        "source_component": component,
        "value_trace": [
            {"step_idx": idx, "feature_name": feature, "feature_value": str(idx)} for idx in step_idxs
        ],
    }


@pytest.fixture
def foo_trace() -> MasterTrace:
    """A: a0 "foo", a1 "bar". B: b0 "baz" reading a0."""
    return MasterTrace.model_validate(
        {
            "component_trace": [
                {"name": "A", "step_trace": [{"caption": "foo"}, {"caption": "bar"}]},
                {
                    "name": "B",
                    "step_trace": [{"caption": "baz", "linked_feature_trace": [link("A", 0)]}],
                },
            ]
        }
    )


@pytest.fixture
def chain_trace() -> MasterTrace:
    """A: a0 -> a1. B: b0 reads a0 and a1 through one multi-valued feature."""
    return MasterTrace.model_validate(
        {
            "component_trace": [
                {
                    "name": "A",
                    "step_trace": [
                        {"caption": "the", "html_representation": "<b>state 0</b>"},
                        {"caption": "cat", "linked_feature_trace": [link("A", 0, feature="prev")]},
                    ],
                },
                {
                    "name": "B",
                    "step_trace": [
                        {"caption": "NP", "linked_feature_trace": [link("A", 0, 1, feature="words")]}
                    ],
                },
            ]
        }
    )
