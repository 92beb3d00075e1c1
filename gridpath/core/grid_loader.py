"""Load grid layouts from ASCII maps."""

from __future__ import annotations

from pathlib import Path

from gridpath.core.contracts import Coord, GridLayout

DEFAULT_ROWS = 20
DEFAULT_COLS = 50
DEFAULT_START = (10, 15)
DEFAULT_FINISH = (10, 35)

START_TILE = "S"
FINISH_TILE = "F"
WALL_TILE = "#"
OPEN_TILE = "."
KNOWN_TILES = {START_TILE, FINISH_TILE, WALL_TILE, OPEN_TILE}


def default_layout(
    *,
    rows: int = DEFAULT_ROWS,
    cols: int = DEFAULT_COLS,
    start: tuple[int, int] = DEFAULT_START,
    finish: tuple[int, int] = DEFAULT_FINISH,
    walls: list[tuple[int, int]] | None = None,
) -> GridLayout:
    return GridLayout(
        rows=rows,
        cols=cols,
        start=Coord.from_tuple(start),
        finish=Coord.from_tuple(finish),
        walls=[Coord.from_tuple(wall) for wall in walls or []],
    )


def load_layout(path: Path) -> GridLayout:
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise FileNotFoundError(f"Missing grid map file: {path}") from exc
    return parse_layout(text.splitlines())


def parse_layout(lines: list[str]) -> GridLayout:
    rows = _strip_trailing_blank(lines)
    if not rows:
        raise ValueError("Grid map is empty.")
    width = len(rows[0])
    start: tuple[int, int] | None = None
    finish: tuple[int, int] | None = None
    walls: list[tuple[int, int]] = []

    for row_index, line in enumerate(rows):
        if len(line) != width:
            raise ValueError(
                f"Row {row_index} has width {len(line)}, expected {width}."
            )
        for col_index, tile in enumerate(line):
            if tile not in KNOWN_TILES:
                raise ValueError(
                    f"Unknown tile {tile!r} at row {row_index}, col {col_index}."
                )
            if tile == START_TILE:
                if start is not None:
                    raise ValueError("Grid map has more than one start tile.")
                start = (row_index, col_index)
            elif tile == FINISH_TILE:
                if finish is not None:
                    raise ValueError("Grid map has more than one finish tile.")
                finish = (row_index, col_index)
            elif tile == WALL_TILE:
                walls.append((row_index, col_index))

    if start is None:
        raise ValueError("Grid map has no start tile.")
    if finish is None:
        raise ValueError("Grid map has no finish tile.")
    return default_layout(
        rows=len(rows), cols=width, start=start, finish=finish, walls=walls
    )


def layout_to_lines(layout: GridLayout) -> list[str]:
    walls = {wall.as_tuple() for wall in layout.walls}
    lines = []
    for row in range(layout.rows):
        tiles = []
        for col in range(layout.cols):
            if (row, col) == layout.start.as_tuple():
                tiles.append(START_TILE)
            elif (row, col) == layout.finish.as_tuple():
                tiles.append(FINISH_TILE)
            elif (row, col) in walls:
                tiles.append(WALL_TILE)
            else:
                tiles.append(OPEN_TILE)
        lines.append("".join(tiles))
    return lines


def _strip_trailing_blank(lines: list[str]) -> list[str]:
    rows = [line.rstrip("\r") for line in lines]
    while rows and not rows[-1].strip():
        rows.pop()
    return rows
