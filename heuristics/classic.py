from __future__ import annotations
from typing import Tuple

import numpy as np
from scipy.optimize import linear_sum_assignment
from sokoban_core.level import Level
from sokoban_core.state import State


# ---- helpers

def manhattan(a: Tuple[int, int], b: Tuple[int, int]) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


# ---- classical heuristics
# All of them ignore walls and the player, so none overestimates the number
# of steps left, and all return 0 once every box sits on a target.

def h_zero(level: Level, state: State) -> int:
    return 0


def h_manhattan(level: Level, state: State) -> int:
    """Sum over boxes of the distance to the nearest target (targets may be shared)."""
    if not level.targets:
        return 0
    return sum(min(manhattan(b, t) for t in level.targets) for b in state.boxes)


def h_manhattan_hungarian(level: Level, state: State) -> int:
    """Cost = optimal matching of boxes → targets by Manhattan distance.
    Targets may outnumber boxes; the assignment is then rectangular."""
    boxes = state.boxes
    targets = sorted(level.targets)
    if not boxes or not targets:
        return 0

    C = np.empty((len(boxes), len(targets)), dtype=np.int32)
    for i, b in enumerate(boxes):
        for j, t in enumerate(targets):
            C[i, j] = manhattan(b, t)
    r, c = linear_sum_assignment(C)
    return int(C[r, c].sum())
