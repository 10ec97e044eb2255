"""Basic usage: build a graph for a small tagger/parser trace and filter it."""

from __future__ import annotations

import logging
from pathlib import Path

from stepgraph import visualize_to_div
from stepgraph.models import MasterTrace


def _trace() -> MasterTrace:
    words = ["The", "cat", "sat"]
    tags = ["DT", "NN", "VBD"]
    return MasterTrace.model_validate(
        {
            "component_trace": [
                {
                    "name": "tagger",
                    "step_trace": [
                        {
                            "caption": f"{word}/{tag}",
                            "linked_feature_trace": (
                                [
                                    {
                                        "source_component": "tagger",
                                        "value_trace": [
                                            {"step_idx": idx - 1, "feature_name": "history"}
                                        ],
                                    }
                                ]
                                if idx
                                else []
                            ),
                        }
                        for idx, (word, tag) in enumerate(zip(words, tags, strict=True))
                    ],
                },
                {
                    "name": "parser",
                    "step_trace": [
                        {
                            "caption": action,
                            "linked_feature_trace": [
                                {
                                    "source_component": "tagger",
                                    "value_trace": [
                                        {
                                            "step_idx": stack_top,
                                            "feature_name": "stack.tag",
                                            "feature_value": tags[stack_top],
                                        }
                                    ],
                                }
                            ],
                        }
                        for action, stack_top in [("SHIFT", 0), ("SHIFT", 1), ("LEFT_ARC", 1)]
                    ]
                    + [{}],
                },
            ]
        }
    )


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    output_dir = Path("artifacts")
    output_dir.mkdir(exist_ok=True)

    master_spec = {
        "component": [
            {"name": "tagger"},
            {"name": "parser", "linked_feature": [{"source_component": "tagger"}]},
        ]
    }
    view = visualize_to_div(_trace(), "trace-graph", master_spec)
    print(view.render_console())

    view.apply_filter("SHIFT")
    print(view.render_console())
    print("Edges to emphasize on hover of tagger-1:", sorted(view.on_hover("tagger-1")))

    page = output_dir / "trace_graph.html"
    page.write_text(view.render_page(), encoding="utf-8")
    print(f"Graph page saved to: {page}")


if __name__ == "__main__":
    main()
