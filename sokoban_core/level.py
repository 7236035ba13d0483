from __future__ import annotations
from dataclasses import dataclass
from typing import FrozenSet, Tuple

from .errors import LevelError, PreconditionError

Coord = Tuple[int, int]

__all__ = [
    "Coord",
    "Level",
    "check_puzzle",
]


@dataclass(frozen=True, slots=True)
class Level:
    """
    Static part of a Sokoban board: size, walls and targets.

    Coordinates are (row, col) with (0, 0) in the upper left corner.
    Shared read-only by every state and every successor call.
    """

    rows: int
    cols: int
    walls: FrozenSet[Coord]
    targets: FrozenSet[Coord]

    def __post_init__(self) -> None:
        if self.rows < 1 or self.cols < 1:
            raise LevelError(f"Level must have at least one cell, got {self.rows}x{self.cols}")
        for name, cells in (("wall", self.walls), ("target", self.targets)):
            for cell in cells:
                if not self.in_bounds(cell):
                    raise LevelError(f"{name} {cell} outside of {self.rows}x{self.cols} level")
        overlap = self.walls & self.targets
        if overlap:
            raise LevelError(f"Cells are both wall and target: {sorted(overlap)}")


    def in_bounds(self, cell: Coord) -> bool:
        r, c = cell
        return 0 <= r < self.rows and 0 <= c < self.cols


    def is_wall(self, cell: Coord) -> bool:
        return cell in self.walls


    def is_target(self, cell: Coord) -> bool:
        return cell in self.targets


    def is_blocked(self, cell: Coord) -> bool:
        """Wall or outside the grid."""
        return not self.in_bounds(cell) or cell in self.walls


def check_puzzle(level: Level, state) -> None:
    """Validates an initial state against its level before any search runs.

    Raises LevelError for pieces placed on walls or off the board and
    PreconditionError for box/target counts that make the puzzle ill-posed.
    """
    if level.is_blocked(state.player):
        raise LevelError(f"Player {state.player} is on a wall or outside the level")
    if len(set(state.boxes)) != len(state.boxes):
        raise LevelError("Two boxes share a cell")
    for box in state.boxes:
        if level.is_blocked(box):
            raise LevelError(f"Box {box} is on a wall or outside the level")
    if state.player in state.boxes:
        raise LevelError(f"Player and box share cell {state.player}")
    if len(state.boxes) > len(level.targets):
        raise PreconditionError("The level must have at least as many targets as boxes")
    if not state.boxes or not level.targets:
        raise PreconditionError("The level must have at least one box and one target")
