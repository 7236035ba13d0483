from __future__ import annotations
from typing import Iterable, List, NamedTuple, Tuple

from .level import Coord, Level
from .state import State

__all__ = [
    "DIRECTIONS",
    "NOOP",
    "STEP_COST",
    "Successor",
    "successors",
    "apply_action",
    "replay",
]

NOOP = "NOTHING"
STEP_COST = 1

# (delta row, delta col, move label, push label); the order fixes successor order
DIRECTIONS: Tuple[Tuple[int, int, str, str], ...] = (
    (-1, 0, "u", "U"),
    (0, 1, "r", "R"),
    (1, 0, "d", "D"),
    (0, -1, "l", "L"),
)


class Successor(NamedTuple):
    action: str
    state: State
    cost: int


def _step(level: Level, state: State, boxes: frozenset, dr: int, dc: int,
          move: str, push: str) -> Successor | None:
    """One direction of the successor function, or None if the player cannot go there."""
    pr, pc = state.player
    dest: Coord = (pr + dr, pc + dc)
    if level.is_blocked(dest):
        return None
    if dest in boxes:
        behind: Coord = (dest[0] + dr, dest[1] + dc)
        if level.is_blocked(behind) or behind in boxes:
            return None
        return Successor(push, state.moved(dest, dest, behind), STEP_COST)
    return Successor(move, state.moved(dest), STEP_COST)


def successors(level: Level, state: State) -> List[Successor]:
    """All legal one-step moves from `state`, in up, right, down, left order.

    A step into an empty cell is a move (lowercase label). A step into a box
    is a push (uppercase label) and is legal only when the cell behind the
    box is neither blocked nor holding another box. Every step costs 1.
    Neither `level` nor `state` is modified.
    """
    boxes = frozenset(state.boxes)
    succs: List[Successor] = []
    for dr, dc, move, push in DIRECTIONS:
        succ = _step(level, state, boxes, dr, dc, move, push)
        if succ is not None:
            succs.append(succ)
    return succs


def apply_action(level: Level, state: State, action: str) -> State:
    """Replays one labelled action; raises ValueError if it is unknown or illegal here."""
    for dr, dc, move, push in DIRECTIONS:
        if action in (move, push):
            succ = _step(level, state, frozenset(state.boxes), dr, dc, move, push)
            if succ is None or succ.action != action:
                raise ValueError(f"action {action!r} is not legal from state {state.id}")
            return succ.state
    raise ValueError(f"unknown action: {action!r}")


def replay(level: Level, state: State, actions: Iterable[str]) -> List[State]:
    """States visited by applying `actions` in turn, starting with `state` itself.

    The no-op label is skipped, so a search path's action list can be fed as is.
    """
    states = [state]
    for action in actions:
        if action == NOOP:
            continue
        states.append(apply_action(level, states[-1], action))
    return states
