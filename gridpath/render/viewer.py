"""Rich summary rendering for a finished search."""

from __future__ import annotations

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from gridpath.core.contracts import SearchReport
from gridpath.core.grid_loader import (
    FINISH_TILE,
    OPEN_TILE,
    START_TILE,
    WALL_TILE,
)

VISITED_TILE = "o"
PATH_TILE = "*"

TILE_STYLES = {
    START_TILE: "bold bright_green",
    FINISH_TILE: "bold bright_red",
    WALL_TILE: "bright_magenta",
    OPEN_TILE: "grey50",
    VISITED_TILE: "cyan",
    PATH_TILE: "bold yellow",
}


def render_report(report: SearchReport) -> RenderableType:
    board = Panel(_render_board(report), title="Grid")
    return Group(board, _render_summary(report))


def board_lines(report: SearchReport) -> list[str]:
    layout = report.layout
    tiles = [[OPEN_TILE] * layout.cols for _ in range(layout.rows)]
    for wall in layout.walls:
        tiles[wall.row][wall.col] = WALL_TILE
    for visit in report.trace:
        tiles[visit.row][visit.col] = VISITED_TILE
    if report.reached:
        for coord in report.path:
            tiles[coord.row][coord.col] = PATH_TILE
    tiles[layout.start.row][layout.start.col] = START_TILE
    tiles[layout.finish.row][layout.finish.col] = FINISH_TILE
    return ["".join(row) for row in tiles]


def _render_board(report: SearchReport) -> Text:
    text = Text()
    for index, line in enumerate(board_lines(report)):
        if index:
            text.append("\n")
        for tile in line:
            text.append(tile, style=TILE_STYLES.get(tile, ""))
    return text


def _render_summary(report: SearchReport) -> RenderableType:
    table = Table(title="Search Summary", show_header=False)
    table.add_column("Field")
    table.add_column("Value")
    layout = report.layout
    table.add_row("Grid", f"{layout.rows}x{layout.cols}")
    table.add_row("Start", _format_coord(layout.start.as_tuple()))
    table.add_row("Finish", _format_coord(layout.finish.as_tuple()))
    table.add_row("Walls", str(len(layout.walls)))
    table.add_row("Visited", str(len(report.trace)))
    if report.reached:
        table.add_row("Path length", str(report.distance))
    else:
        table.add_row("Path length", "No path")
    return table


def _format_coord(coord: tuple[int, int]) -> str:
    return f"({coord[0]}, {coord[1]})"
