"""Grid of search nodes addressed by (row, col)."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Iterator

from gridpath.core.contracts import Coord, GridLayout


@dataclass(eq=False)
class Node:
    row: int
    col: int
    is_wall: bool = False
    is_start: bool = False
    is_finish: bool = False
    distance: float = math.inf
    is_visited: bool = False
    previous: tuple[int, int] | None = None

    @property
    def coord(self) -> tuple[int, int]:
        return (self.row, self.col)

    def reset(self) -> None:
        self.distance = math.inf
        self.is_visited = False
        self.previous = None


class Grid:
    """Rectangular node grid owned by one caller for the length of a search.

    Predecessors are stored on each node as coordinates, so the grid is the
    only thing holding node references.
    """

    def __init__(self, nodes: list[list[Node]]) -> None:
        self._nodes = nodes
        self.rows = len(nodes)
        self.cols = len(nodes[0]) if nodes else 0

    @classmethod
    def build(
        cls,
        rows: int,
        cols: int,
        *,
        start: tuple[int, int],
        finish: tuple[int, int],
        walls: Iterable[tuple[int, int]] = (),
    ) -> "Grid":
        wall_set = set(walls)
        nodes = [
            [
                Node(
                    row=row,
                    col=col,
                    is_wall=(row, col) in wall_set,
                    is_start=(row, col) == start,
                    is_finish=(row, col) == finish,
                )
                for col in range(cols)
            ]
            for row in range(rows)
        ]
        return cls(nodes)

    @classmethod
    def from_layout(cls, layout: GridLayout) -> "Grid":
        return cls.build(
            layout.rows,
            layout.cols,
            start=layout.start.as_tuple(),
            finish=layout.finish.as_tuple(),
            walls=[wall.as_tuple() for wall in layout.walls],
        )

    def __iter__(self) -> Iterator[list[Node]]:
        return iter(self._nodes)

    def node(self, row: int, col: int) -> Node:
        return self._nodes[row][col]

    def resolve(self, coord: tuple[int, int] | Coord | None) -> Node | None:
        if coord is None:
            return None
        if isinstance(coord, Coord):
            coord = coord.as_tuple()
        row, col = coord
        if not self.in_bounds(row, col):
            return None
        return self._nodes[row][col]

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    @property
    def start_node(self) -> Node | None:
        return next((node for node in self.all_nodes() if node.is_start), None)

    @property
    def finish_node(self) -> Node | None:
        return next((node for node in self.all_nodes() if node.is_finish), None)

    def all_nodes(self) -> list[Node]:
        return [node for row in self._nodes for node in row]

    def neighbors_of(self, node: Node) -> list[Node]:
        """Return unvisited axis-aligned neighbors: up, down, left, right."""
        neighbors: list[Node] = []
        row, col = node.row, node.col
        if row > 0:
            neighbors.append(self._nodes[row - 1][col])
        if row < self.rows - 1:
            neighbors.append(self._nodes[row + 1][col])
        if col > 0:
            neighbors.append(self._nodes[row][col - 1])
        if col < self.cols - 1:
            neighbors.append(self._nodes[row][col + 1])
        return [neighbor for neighbor in neighbors if not neighbor.is_visited]

    def reset(self) -> None:
        for node in self.all_nodes():
            node.reset()

    def toggle_wall(self, row: int, col: int) -> bool:
        node = self._nodes[row][col]
        if node.is_start or node.is_finish:
            return False
        node.is_wall = not node.is_wall
        return node.is_wall

    def walls(self) -> list[tuple[int, int]]:
        return [node.coord for node in self.all_nodes() if node.is_wall]

    def to_layout(self) -> GridLayout:
        start = self.start_node
        finish = self.finish_node
        if start is None or finish is None:
            raise ValueError("Grid needs a start and a finish node.")
        return GridLayout(
            rows=self.rows,
            cols=self.cols,
            start=Coord.from_tuple(start.coord),
            finish=Coord.from_tuple(finish.coord),
            walls=[Coord.from_tuple(wall) for wall in self.walls()],
        )
