from __future__ import annotations
import heapq
from typing import Any, List, Tuple

class PriorityQueue:
    """Binary heap popping the lowest (priority, key) first.

    key must be unique per item (node ids are), so items themselves are never compared.
    """
    def __init__(self) -> None:
        self._h: List[Tuple[float, int, Any]] = []

    def push(self, priority: float, key: int, item: Any) -> None:
        heapq.heappush(self._h, (priority, key, item))

    def pop(self) -> Any:
        return heapq.heappop(self._h)[2]

    def __len__(self) -> int:
        return len(self._h)
