"""Grid model and shortest-path search."""

from gridpath.core.contracts import Coord, GridLayout, SearchReport, VisitRecord
from gridpath.core.dijkstra import (
    SearchEngine,
    SearchOutcome,
    dijkstra,
    manhattan_distance,
    nodes_in_shortest_path_order,
    path_is_valid,
)
from gridpath.core.grid import Grid, Node
from gridpath.core.grid_loader import default_layout, load_layout, parse_layout

__all__ = [
    "Coord",
    "Grid",
    "GridLayout",
    "Node",
    "SearchEngine",
    "SearchOutcome",
    "SearchReport",
    "VisitRecord",
    "default_layout",
    "dijkstra",
    "load_layout",
    "manhattan_distance",
    "nodes_in_shortest_path_order",
    "parse_layout",
    "path_is_valid",
]
