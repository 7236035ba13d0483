import pytest

from sokoban_core.errors import UnknownStrategyError
from search.priority_queue import PriorityQueue
from search.strategy import Strategy


def test_exactly_five_strategies():
    assert [s.value for s in Strategy] == ["BFS", "DFS", "UC", "GREEDY", "A*"]


@pytest.mark.parametrize("name,expected", [
    ("BFS", Strategy.BFS),
    ("dfs", Strategy.DFS),
    ("UC", Strategy.UC),
    ("Greedy", Strategy.GREEDY),
    ("A*", Strategy.ASTAR),
    ("astar", Strategy.ASTAR),
])
def test_parse(name, expected):
    assert Strategy.parse(name) is expected


@pytest.mark.parametrize("name", ["", "IDS", "A"])
def test_parse_unknown(name):
    with pytest.raises(UnknownStrategyError):
        Strategy.parse(name)


def test_value_of():
    depth, cost, h = 3, 5.0, 2.0
    assert Strategy.BFS.value_of(depth, cost, h) == 3
    assert Strategy.DFS.value_of(depth, cost, h) == -3
    assert Strategy.UC.value_of(depth, cost, h) == 5
    assert Strategy.GREEDY.value_of(depth, cost, h) == 2
    assert Strategy.ASTAR.value_of(depth, cost, h) == 7


def test_dfs_prefers_deeper_nodes():
    assert Strategy.DFS.value_of(4, 0, 0) < Strategy.DFS.value_of(1, 0, 0)


def test_priority_queue_breaks_ties_by_key():
    pq = PriorityQueue()
    pq.push(1.0, 3, "c")
    pq.push(0.0, 5, "e")
    pq.push(1.0, 1, "a")
    pq.push(1.0, 2, "b")
    assert len(pq) == 4
    assert [pq.pop() for _ in range(4)] == ["e", "a", "b", "c"]
    assert len(pq) == 0


def test_priority_queue_never_compares_items():
    pq = PriorityQueue()
    pq.push(0.0, 1, object())
    pq.push(0.0, 2, object())
    pq.pop()
    pq.pop()
