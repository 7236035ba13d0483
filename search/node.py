from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from sokoban_core.state import State


@dataclass(frozen=True, slots=True)
class Node:
    """Search tree node.

    parent is the id of the parent node, which is also its index in the
    engine's node arena; None for the root.
    """

    id: int
    state: State
    parent: Optional[int]
    action: str
    depth: int
    cost: float
    heuristic: float
    value: float
