"""JSON serialization helpers for master traces, specs and graph models."""

from __future__ import annotations

import warnings
from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from ..exceptions import TraceLoadError
from ..models import CURRENT_SCHEMA_VERSION, GraphModel, MasterSpec, MasterTrace

M = TypeVar("M", bound=BaseModel)


def _parse(model: type[M], payload: str | bytes, what: str) -> M:
    try:
        return model.model_validate_json(payload)
    except ValidationError as exc:
        raise TraceLoadError(f"Failed to parse {what} JSON: {exc}") from exc


def master_trace_from_json(payload: str | bytes) -> MasterTrace:
    """Parse a JSON string into a MasterTrace.

    Raises ``TraceLoadError`` on invalid or unparseable input.
    """
    return _parse(MasterTrace, payload, "master trace")


def master_spec_from_json(payload: str | bytes) -> MasterSpec:
    return _parse(MasterSpec, payload, "master spec")


def load_master_trace_json(path: str | Path) -> MasterTrace:
    """Load a master trace from a JSON file.

    Raises ``TraceLoadError`` on invalid content,
    or ``FileNotFoundError`` / ``OSError`` if the file is inaccessible.
    """
    return master_trace_from_json(Path(path).read_text(encoding="utf-8"))


def load_master_spec_json(path: str | Path) -> MasterSpec:
    return master_spec_from_json(Path(path).read_text(encoding="utf-8"))


def graph_to_json(graph: GraphModel, *, indent: int | None = 2) -> str:
    return graph.model_dump_json(indent=indent)


def graph_from_json(payload: str | bytes) -> GraphModel:
    """Parse a graph model dumped by ``graph_to_json``.

    Emits a warning if the graph's schema version differs from the current one.
    """
    graph = _parse(GraphModel, payload, "graph")
    if graph.schema_version != CURRENT_SCHEMA_VERSION:
        warnings.warn(
            f"Graph schema version {graph.schema_version!r} differs from "
            f"current {CURRENT_SCHEMA_VERSION!r}. "
            "Some fields may be missing or ignored.",
            stacklevel=2,
        )
    return graph


def save_graph_json(graph: GraphModel, path: str | Path, *, indent: int | None = 2) -> Path:
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(graph_to_json(graph, indent=indent), encoding="utf-8")
    return output_path
