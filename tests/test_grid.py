from gridastar.grid import Grid
from gridastar.nodes import Node, Point


def test_new_grid_has_no_obstacles():
    grid = Grid(4, 3)
    assert grid.width == 4
    assert grid.height == 3
    assert not grid.is_obstacle(Point(0, 0))


def test_add_obstacle():
    grid = Grid(5, 5)
    grid.add_obstacle(Point(2, 2))
    assert grid.is_obstacle(Point(2, 2))
    assert not grid.is_obstacle(Point(2, 3))


def test_obstacle_outside_bounds_is_recorded():
    grid = Grid(5, 5)
    grid.add_obstacle(Point(50, 50))
    assert grid.is_obstacle(Point(50, 50))
    assert not grid.is_valid(Point(50, 50))


def test_is_valid_checks_bounds():
    grid = Grid(5, 4)
    assert grid.is_valid(Point(0, 0))
    assert grid.is_valid(Point(4, 3))
    assert not grid.is_valid(Point(5, 0))
    assert not grid.is_valid(Point(0, 4))
    assert not grid.is_valid(Point(-1, 0))
    assert not grid.is_valid(Point(0, -1))


def test_is_valid_rejects_obstacle():
    grid = Grid(5, 5)
    grid.add_obstacle(Point(1, 1))
    assert not grid.is_valid(Point(1, 1))


def test_neighbors_order_in_open_space():
    grid = Grid(5, 5)
    result = grid.neighbors(Node(Point(2, 2)))
    assert [n.position for n in result] == [
        Point(2, 3),
        Point(2, 1),
        Point(3, 2),
        Point(1, 2),
    ]


def test_neighbors_in_corner_and_around_obstacles():
    grid = Grid(3, 3)
    grid.add_obstacle(Point(1, 0))
    result = grid.neighbors(Node(Point(0, 0)))
    assert [n.position for n in result] == [Point(0, 1)]


def test_neighbors_are_fresh_nodes():
    grid = Grid(3, 3)
    for neighbor in grid.neighbors(Node(Point(1, 1), g_cost=5.0)):
        assert neighbor.parent is None
        assert neighbor.g_cost == 0.0
        assert neighbor.index == -1