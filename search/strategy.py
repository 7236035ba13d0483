from __future__ import annotations
from enum import Enum

from sokoban_core.errors import UnknownStrategyError


class Strategy(Enum):
    """Frontier ordering policy. Lower value is expanded first; ties go to the older node."""

    BFS = "BFS"
    DFS = "DFS"
    UC = "UC"
    GREEDY = "GREEDY"
    ASTAR = "A*"

    @classmethod
    def parse(cls, name: str) -> "Strategy":
        key = name.strip().upper()
        if key == "ASTAR":
            key = "A*"
        for s in cls:
            if s.value == key:
                return s
        available = ", ".join(s.value for s in cls)
        raise UnknownStrategyError(f"Unknown strategy: {name}. Available: {available}")

    def value_of(self, depth: int, cost: float, heuristic: float) -> float:
        if self is Strategy.BFS:
            return float(depth)
        if self is Strategy.DFS:
            # deeper first; siblings keep creation order through the id tie-break
            return float(-depth)
        if self is Strategy.UC:
            return float(cost)
        if self is Strategy.GREEDY:
            return float(heuristic)
        if self is Strategy.ASTAR:
            return float(cost + heuristic)
        raise AssertionError(f"unhandled strategy {self!r}")
