"""Dijkstra search over a unit-weight, 4-connected node grid.

``dijkstra`` returns every node in the order it was finalized and leaves a
``previous`` coordinate on each reached node, so the shortest path can be
rebuilt by walking back from the finish node.

Equal-distance nodes are finalized row-major (smaller row, then smaller
column), so repeated searches over the same board give the same trace.
"""

from __future__ import annotations

import heapq
import math
from dataclasses import dataclass, field

from gridpath.core.grid import Grid, Node

EDGE_WEIGHT = 1


def dijkstra(grid: Grid, start_node: Node, finish_node: Node) -> list[Node]:
    visited_in_order: list[Node] = []
    start_node.distance = 0

    # Nodes still at infinity are implicit members of the unvisited set.
    unvisited: list[tuple[float, int, int]] = []
    for node in grid.all_nodes():
        if not node.is_wall and not node.is_visited and node.distance < math.inf:
            heapq.heappush(unvisited, (node.distance, node.row, node.col))

    while unvisited:
        distance, row, col = heapq.heappop(unvisited)
        closest = grid.node(row, col)
        if closest.is_visited or distance > closest.distance:
            continue

        closest.is_visited = True
        visited_in_order.append(closest)
        if closest is finish_node:
            return visited_in_order

        for neighbor in _relax_neighbors(closest, grid):
            heapq.heappush(unvisited, (neighbor.distance, neighbor.row, neighbor.col))

    # Whatever is left sits at infinite distance: the finish is walled off.
    return visited_in_order


def _relax_neighbors(node: Node, grid: Grid) -> list[Node]:
    improved: list[Node] = []
    candidate = node.distance + EDGE_WEIGHT
    for neighbor in grid.neighbors_of(node):
        if neighbor.is_wall:
            continue
        if candidate < neighbor.distance:
            neighbor.distance = candidate
            neighbor.previous = node.coord
            improved.append(neighbor)
    return improved


def nodes_in_shortest_path_order(grid: Grid, finish_node: Node) -> list[Node]:
    """Walk ``previous`` links back from ``finish_node``.

    Call after ``dijkstra``. If the finish was never reached the result does
    not begin at the start node; check it with ``path_is_valid``.
    """
    path: list[Node] = []
    current: Node | None = finish_node
    while current is not None:
        path.append(current)
        current = grid.resolve(current.previous)
    path.reverse()
    return path


def path_is_valid(path: list[Node], start_node: Node, finish_node: Node) -> bool:
    if not path:
        return False
    return path[0] is start_node and path[-1] is finish_node


def manhattan_distance(a: tuple[int, int], b: tuple[int, int]) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


@dataclass
class SearchOutcome:
    trace: list[Node] = field(default_factory=list)
    path: list[Node] = field(default_factory=list)
    reached: bool = False

    @property
    def distance(self) -> int | None:
        if not self.reached:
            return None
        return len(self.path) - 1


class SearchEngine:
    def __init__(self, grid: Grid) -> None:
        self._grid = grid

    @property
    def grid(self) -> Grid:
        return self._grid

    def run(self, start_node: Node, finish_node: Node) -> list[Node]:
        return dijkstra(self._grid, start_node, finish_node)

    def reconstruct_path(self, finish_node: Node) -> list[Node]:
        return nodes_in_shortest_path_order(self._grid, finish_node)

    def search(
        self,
        start_node: Node | None = None,
        finish_node: Node | None = None,
        *,
        reset: bool = True,
    ) -> SearchOutcome:
        start_node = start_node or self._grid.start_node
        finish_node = finish_node or self._grid.finish_node
        if start_node is None or finish_node is None:
            return SearchOutcome()
        if reset:
            self._grid.reset()
        trace = self.run(start_node, finish_node)
        path = self.reconstruct_path(finish_node)
        reached = finish_node.is_visited and path_is_valid(
            path, start_node, finish_node
        )
        return SearchOutcome(trace=trace, path=path, reached=reached)
