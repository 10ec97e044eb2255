"""Command line interface for stepgraph."""

from __future__ import annotations

import argparse
from pathlib import Path

from .inspect_cmd import run_inspect
from .render_cmd import run_render


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="stepgraph")
    subparsers = parser.add_subparsers(dest="command", required=True)

    inspect_parser = subparsers.add_parser("inspect", help="Inspect a master trace JSON file")
    inspect_parser.add_argument("trace_file", type=Path, help="Path to master trace JSON file")
    inspect_parser.add_argument(
        "--filter",
        dest="query",
        default="",
        help="Regular expression applied to step captions",
    )
    inspect_parser.add_argument(
        "--json",
        action="store_true",
        help="Emit machine-readable summary JSON instead of text output",
    )
    inspect_parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Optional output file path for --json summary",
    )

    render_parser = subparsers.add_parser("render", help="Write an interactive HTML page")
    render_parser.add_argument("trace_file", type=Path, help="Path to master trace JSON file")
    render_parser.add_argument("--output", type=Path, required=True, help="HTML file to write")
    render_parser.add_argument(
        "--spec",
        type=Path,
        default=None,
        help="Optional master spec JSON file used for layout hints",
    )
    render_parser.add_argument(
        "--filter",
        dest="query",
        default="",
        help="Regular expression applied to step captions",
    )
    render_parser.add_argument("--container-id", default="stepgraph", help="Id of the graph div")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "inspect":
        return run_inspect(
            args.trace_file,
            query=args.query,
            as_json=args.json,
            output_path=args.output,
        )
    if args.command == "render":
        return run_render(
            args.trace_file,
            args.output,
            spec_file=args.spec,
            query=args.query,
            container_id=args.container_id,
        )

    parser.error("Unknown command")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
