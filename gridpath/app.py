"""Application entry for running one grid search."""

from __future__ import annotations

import os
from pathlib import Path

from gridpath.core.contracts import Coord, GridLayout, SearchReport, VisitRecord
from gridpath.core.dijkstra import SearchEngine, SearchOutcome
from gridpath.core.grid import Grid
from gridpath.core.grid_loader import default_layout, load_layout
from gridpath.db.run_log import create_run_folder, write_search_log

DEFAULT_LOG_DIR = Path("runs")


def run_search(layout: GridLayout) -> SearchReport:
    grid = Grid.from_layout(layout)
    outcome = SearchEngine(grid).search()
    return build_report(layout, outcome)


def run_search_with_log(
    layout: GridLayout,
    *,
    base_dir: Path | None = None,
    timestamp: str | None = None,
) -> tuple[Path, SearchReport]:
    report = run_search(layout)
    run_dir, log_path = create_run_folder(
        resolve_log_dir(base_dir), timestamp=timestamp
    )
    write_search_log(log_path, report, run_id=run_dir.name)
    return run_dir, report


def build_report(layout: GridLayout, outcome: SearchOutcome) -> SearchReport:
    trace = [
        VisitRecord(
            index=index, row=node.row, col=node.col, distance=int(node.distance)
        )
        for index, node in enumerate(outcome.trace)
    ]
    path = [Coord.from_tuple(node.coord) for node in outcome.path]
    return SearchReport(
        layout=layout,
        trace=trace,
        path=path,
        reached=outcome.reached,
        distance=outcome.distance,
    )


def resolve_layout(
    map_path: Path | None = None,
    *,
    rows: int | None = None,
    cols: int | None = None,
    start: tuple[int, int] | None = None,
    finish: tuple[int, int] | None = None,
    walls: list[tuple[int, int]] | None = None,
) -> GridLayout:
    """Build the board from a map file if one is given, else from overrides.

    A map file (argument or `GRIDPATH_MAP`) describes the whole board, so the
    dimension, start, finish and wall overrides are not applied to it.
    """
    env_map = os.getenv("GRIDPATH_MAP")
    path = map_path or (Path(env_map) if env_map else None)
    if path is not None:
        return load_layout(path)

    overrides: dict = {}
    if rows is not None:
        overrides["rows"] = rows
    if cols is not None:
        overrides["cols"] = cols
    if start is not None:
        overrides["start"] = start
    if finish is not None:
        overrides["finish"] = finish
    return default_layout(walls=walls, **overrides)


def resolve_log_dir(base_dir: Path | None) -> Path:
    env_dir = os.getenv("GRIDPATH_LOG_DIR")
    if base_dir is not None:
        return base_dir
    if env_dir:
        return Path(env_dir)
    return DEFAULT_LOG_DIR
