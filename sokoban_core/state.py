from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable, Tuple
import hashlib

from .level import Coord

__all__ = [
    "State",
    "canonical_form",
    "state_id",
]


def canonical_form(player: Coord, boxes: Iterable[Coord]) -> str:
    """Serializes (player, boxes) as "(r,c)[(r,c),(r,c)]" with boxes sorted by row, then col."""
    ordered = sorted(boxes)
    box_txt = ",".join(f"({r},{c})" for r, c in ordered)
    return f"({player[0]},{player[1]})[{box_txt}]"


def state_id(player: Coord, boxes: Iterable[Coord]) -> str:
    """MD5 hex digest of the canonical form. Independent of the order of `boxes`."""
    return hashlib.md5(canonical_form(player, boxes).encode("utf-8")).hexdigest()


@dataclass(frozen=True, slots=True)
class State:
    """
    Dynamic part of a Sokoban board: player position and box positions.

    boxes is always sorted by (row, col) and id is the digest of that
    canonical form, so two states holding the same box set compare equal
    no matter how the boxes were listed. Build instances with State.create;
    a move produces a new State instead of mutating this one.
    """

    player: Coord
    boxes: Tuple[Coord, ...]
    id: str = field(compare=False)


    @classmethod
    def create(cls, player: Coord, boxes: Iterable[Coord]) -> "State":
        player = (int(player[0]), int(player[1]))
        ordered = tuple(sorted((int(r), int(c)) for r, c in boxes))
        return cls(player=player, boxes=ordered, id=state_id(player, ordered))


    def moved(self, player: Coord, box_from: Coord | None = None, box_to: Coord | None = None) -> "State":
        """New state with the player at `player` and, for a push, one box relocated."""
        if box_from is None:
            return State(player=player, boxes=self.boxes, id=state_id(player, self.boxes))
        boxes = [box_to if b == box_from else b for b in self.boxes]
        return State.create(player, boxes)


    def __eq__(self, other: object) -> bool:
        if not isinstance(other, State):
            return NotImplemented
        return self.id == other.id


    def __hash__(self) -> int:
        return hash(self.id)
