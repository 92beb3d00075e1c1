"""Module entry point for `python -m gridpath`."""

from __future__ import annotations

import argparse
from pathlib import Path

from pydantic import ValidationError
from rich.console import Console

from gridpath.app import resolve_layout, run_search, run_search_with_log
from gridpath.db.run_log import RUN_LOG_NAME
from gridpath.render.run_reader import read_report
from gridpath.render.viewer import render_report


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Run a Dijkstra grid search.")
    parser.add_argument(
        "--map",
        type=Path,
        default=None,
        help="ASCII grid map (S start, F finish, # wall, . open).",
    )
    parser.add_argument("--rows", type=int, default=None, help="Grid rows.")
    parser.add_argument("--cols", type=int, default=None, help="Grid columns.")
    parser.add_argument(
        "--start", type=_parse_coord, default=None, help="Start cell as ROW,COL."
    )
    parser.add_argument(
        "--finish", type=_parse_coord, default=None, help="Finish cell as ROW,COL."
    )
    parser.add_argument(
        "--wall",
        type=_parse_coord,
        action="append",
        default=None,
        help="Wall cell as ROW,COL. Repeat for more walls.",
    )
    parser.add_argument(
        "--log-dir",
        type=Path,
        default=None,
        help="Base directory for run logs (defaults to ./runs).",
    )
    parser.add_argument(
        "--no-log",
        action="store_true",
        help="Run the search without writing a run log.",
    )
    parser.add_argument(
        "--replay",
        type=Path,
        default=None,
        help="Print the summary stored in a saved run folder.",
    )
    args = parser.parse_args(argv)
    console = Console()

    if args.replay is not None:
        try:
            report = read_report(args.replay / RUN_LOG_NAME)
        except FileNotFoundError as exc:
            raise SystemExit(f"No run log found in {args.replay}.") from exc
        if report is None:
            raise SystemExit(f"No search report found in {args.replay}.")
        console.print(render_report(report))
        return

    overrides = [args.rows, args.cols, args.start, args.finish, args.wall]
    if args.map is not None and any(value is not None for value in overrides):
        parser.error(
            "--map cannot be combined with --rows, --cols, --start, --finish "
            "or --wall."
        )

    try:
        layout = resolve_layout(
            args.map,
            rows=args.rows,
            cols=args.cols,
            start=args.start,
            finish=args.finish,
            walls=args.wall,
        )
    except (ValidationError, ValueError, FileNotFoundError) as exc:
        raise SystemExit(str(exc)) from exc

    if args.no_log:
        console.print(render_report(run_search(layout)))
        return

    run_dir, report = run_search_with_log(layout, base_dir=args.log_dir)
    console.print(render_report(report))
    print(f"Run saved to {run_dir}")


def _parse_coord(value: str) -> tuple[int, int]:
    try:
        row, col = (int(part) for part in value.split(","))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(
            f"Expected ROW,COL but got {value!r}."
        ) from exc
    return (row, col)


if __name__ == "__main__":
    main()
