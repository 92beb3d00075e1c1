import math

from gridpath.core.grid import Grid


def test_build_marks_start_finish_and_walls() -> None:
    grid = Grid.build(3, 4, start=(0, 0), finish=(2, 3), walls=[(1, 1)])

    assert grid.rows == 3
    assert grid.cols == 4
    assert grid.start_node is grid.node(0, 0)
    assert grid.finish_node is grid.node(2, 3)
    assert grid.node(1, 1).is_wall
    assert all(node.distance == math.inf for node in grid.all_nodes())


def test_all_nodes_is_row_major() -> None:
    grid = Grid.build(2, 3, start=(0, 0), finish=(1, 2))

    coords = [node.coord for node in grid.all_nodes()]

    assert coords == [(0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2)]


def test_neighbors_stay_in_bounds() -> None:
    grid = Grid.build(3, 4, start=(0, 0), finish=(2, 3))

    corner = [node.coord for node in grid.neighbors_of(grid.node(0, 0))]
    center = [node.coord for node in grid.neighbors_of(grid.node(1, 1))]
    far_corner = [node.coord for node in grid.neighbors_of(grid.node(2, 3))]

    assert corner == [(1, 0), (0, 1)]
    assert center == [(0, 1), (2, 1), (1, 0), (1, 2)]
    assert far_corner == [(1, 3), (2, 2)]


def test_neighbors_skip_visited_nodes() -> None:
    grid = Grid.build(3, 3, start=(0, 0), finish=(2, 2))
    grid.node(0, 1).is_visited = True

    neighbors = [node.coord for node in grid.neighbors_of(grid.node(1, 1))]

    assert (0, 1) not in neighbors
    assert len(neighbors) == 3


def test_reset_clears_search_state_but_keeps_walls() -> None:
    grid = Grid.build(2, 2, start=(0, 0), finish=(1, 1), walls=[(0, 1)])
    node = grid.node(1, 0)
    node.distance = 1
    node.is_visited = True
    node.previous = (0, 0)

    grid.reset()

    assert node.distance == math.inf
    assert not node.is_visited
    assert node.previous is None
    assert grid.node(0, 1).is_wall


def test_toggle_wall_ignores_start_and_finish() -> None:
    grid = Grid.build(2, 2, start=(0, 0), finish=(1, 1))

    assert grid.toggle_wall(0, 1) is True
    assert grid.node(0, 1).is_wall
    assert grid.toggle_wall(0, 1) is False
    assert not grid.node(0, 1).is_wall

    assert grid.toggle_wall(0, 0) is False
    assert grid.toggle_wall(1, 1) is False
    assert not grid.node(0, 0).is_wall
    assert not grid.node(1, 1).is_wall


def test_resolve_handles_missing_and_out_of_bounds() -> None:
    grid = Grid.build(2, 2, start=(0, 0), finish=(1, 1))

    assert grid.resolve(None) is None
    assert grid.resolve((5, 0)) is None
    assert grid.resolve((1, 0)) is grid.node(1, 0)


def test_layout_round_trip_through_grid() -> None:
    grid = Grid.build(3, 3, start=(0, 0), finish=(2, 2), walls=[(1, 1), (0, 2)])

    layout = grid.to_layout()
    rebuilt = Grid.from_layout(layout)

    assert layout.start.as_tuple() == (0, 0)
    assert layout.finish.as_tuple() == (2, 2)
    assert sorted(rebuilt.walls()) == [(0, 2), (1, 1)]
