"""Serialization helpers."""

from .json import (
    graph_from_json,
    graph_to_json,
    load_master_spec_json,
    load_master_trace_json,
    master_spec_from_json,
    master_trace_from_json,
    save_graph_json,
)

__all__ = [
    "graph_from_json",
    "graph_to_json",
    "load_master_spec_json",
    "load_master_trace_json",
    "master_spec_from_json",
    "master_trace_from_json",
    "save_graph_json",
]
