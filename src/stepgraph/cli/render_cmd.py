"""Render subcommand implementation."""

from __future__ import annotations

import sys
from pathlib import Path

from .. import visualize_to_div
from ..exceptions import StepgraphError
from ..serializers import load_master_spec_json, load_master_trace_json


def run_render(
    trace_file: Path,
    output_path: Path,
    *,
    spec_file: Path | None,
    query: str,
    container_id: str,
) -> int:
    try:
        master_trace = load_master_trace_json(trace_file)
        master_spec = load_master_spec_json(spec_file) if spec_file is not None else None
        view = visualize_to_div(master_trace, container_id, master_spec)
        if query:
            view.apply_filter(query)
    except FileNotFoundError as exc:
        print(f"Error: file not found: {exc.filename}", file=sys.stderr)
        return 1
    except StepgraphError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"Error reading file: {exc}", file=sys.stderr)
        return 1

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(view.render_page(), encoding="utf-8")
    print(f"Wrote {output_path}")
    return 0
