from __future__ import annotations
from typing import Callable, Dict

from heuristics.classic import h_zero, h_manhattan, h_manhattan_hungarian

HEURISTICS: Dict[str, Callable] = {
    "zero": h_zero,
    "manhattan": h_manhattan,
    "hungarian": h_manhattan_hungarian,
}


def get_heuristic(name: str) -> Callable:
    key = name.lower()
    if key not in HEURISTICS:
        raise ValueError(f"unknown heuristic: {name}")
    return HEURISTICS[key]
