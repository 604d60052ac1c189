import pytest

from gridastar.nodes import ClosedList, Node, OpenList, Point


def _node(x, y, f):
    return Node(Point(x, y), f_cost=f)


def _assert_indices(open_list):
    for slot, node in enumerate(open_list):
        assert node.index == slot


def test_point_equality_and_hashing():
    assert Point(1, 2) == Point(1, 2)
    assert len({Point(1, 2), Point(1, 2), Point(2, 1)}) == 2


def test_node_str_shows_position():
    assert str(Node(Point(3, 4))) == "(3, 4)"


def test_node_defaults():
    node = Node(Point(0, 0))
    assert (node.g_cost, node.h_cost, node.f_cost) == (0.0, 0.0, 0.0)
    assert node.parent is None
    assert node.index == -1


def test_pop_returns_nodes_in_cost_order():
    open_list = OpenList()
    costs = [5.0, 1.0, 4.0, 2.0, 8.0, 3.0, 0.5, 7.0]
    for i, cost in enumerate(costs):
        open_list.push(_node(i, 0, cost))
        _assert_indices(open_list)
    assert len(open_list) == len(costs)
    popped = []
    while len(open_list):
        popped.append(open_list.pop().f_cost)
        _assert_indices(open_list)
    assert popped == sorted(costs)


def test_pop_clears_index():
    open_list = OpenList()
    open_list.push(_node(0, 0, 1.0))
    node = open_list.pop()
    assert node.index == -1
    assert len(open_list) == 0


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        OpenList().pop()


def test_update_moves_node_to_front():
    open_list = OpenList()
    nodes = [_node(i, 0, float(10 + i)) for i in range(6)]
    for node in nodes:
        open_list.push(node)
    target = nodes[5]
    open_list.update(target, 0.25, 0.25)
    assert target.f_cost == 0.5
    _assert_indices(open_list)
    assert open_list.pop() is target


def test_fix_after_raising_cost():
    open_list = OpenList()
    nodes = [_node(i, 0, float(i)) for i in range(5)]
    for node in nodes:
        open_list.push(node)
    nodes[0].f_cost = 100.0
    open_list.fix(nodes[0])
    _assert_indices(open_list)
    order = [open_list.pop() for _ in range(5)]
    assert order[-1] is nodes[0]
    assert [n.f_cost for n in order] == sorted(n.f_cost for n in order)


def test_fix_rejects_foreign_node():
    open_list = OpenList()
    open_list.push(_node(0, 0, 1.0))
    with pytest.raises(ValueError):
        open_list.fix(_node(9, 9, 1.0))


def test_find_locates_node_by_position():
    open_list = OpenList()
    wanted = _node(2, 3, 1.0)
    open_list.push(_node(0, 0, 2.0))
    open_list.push(wanted)
    assert open_list.find(Point(2, 3)) is wanted
    assert open_list.find(Point(3, 2)) is None


def test_closed_list_membership():
    closed = ClosedList()
    assert Point(1, 1) not in closed
    closed.add(Node(Point(1, 1)))
    assert Point(1, 1) in closed
    assert Point(1, 2) not in closed
    closed.add(Node(Point(1, 1)))
    assert len(closed) == 1