from typing import List, Optional, Tuple

from .errors import LevelError
from .level import Coord, Level
from .state import State

TOK_WALL = "#"
TOK_GOAL = "."
TOK_BOX = "$"
TOK_BOX_ON_GOAL = "*"
TOK_PLAYER = "@"
TOK_PLAYER_ON_GOAL = "+"
TOK_FLOOR = " "

VALID_CHARS = frozenset({TOK_WALL, TOK_GOAL, TOK_BOX, TOK_BOX_ON_GOAL,
                         TOK_PLAYER, TOK_PLAYER_ON_GOAL, TOK_FLOOR, "\n"})


def parse_level_str(level_str: str) -> Tuple[Level, State]:
    """Parses an ASCII level into (Level, initial State).

    Supported characters:
      '#': wall
      '.': target
      '$': box
      '*': box on target
      '@': player
      '+': player on target
      ' ' (space): floor
    A literal backslash-n (as typed on a command line) separates rows like a
    real newline. Any other character is rejected, and so are rows of
    different lengths.
    """
    level_str = level_str.replace("\\n", "\n")
    for ch in level_str:
        if ch not in VALID_CHARS:
            raise LevelError(f"Character not valid: {ch!r}")

    lines = level_str.split("\n")
    while lines and lines[0].strip() == "":
        lines.pop(0)
    while lines and lines[-1].strip() == "":
        lines.pop()
    if not lines:
        raise LevelError("Empty level")
    rows = len(lines)
    cols = len(lines[0])
    for r, line in enumerate(lines):
        if len(line) != cols:
            raise LevelError(f"Row {r} has {len(line)} columns, expected {cols}")

    walls: List[Coord] = []
    targets: List[Coord] = []
    boxes: List[Coord] = []
    player: Optional[Coord] = None

    for r, line in enumerate(lines):
        for c, ch in enumerate(line):
            cell = (r, c)
            if ch == TOK_WALL:
                walls.append(cell)
            elif ch == TOK_GOAL:
                targets.append(cell)
            elif ch == TOK_BOX:
                boxes.append(cell)
            elif ch == TOK_BOX_ON_GOAL:
                boxes.append(cell)
                targets.append(cell)
            elif ch in (TOK_PLAYER, TOK_PLAYER_ON_GOAL):
                if player is not None:
                    raise LevelError(f"More than one player: {player} and {cell}")
                player = cell
                if ch == TOK_PLAYER_ON_GOAL:
                    targets.append(cell)

    if player is None:
        raise LevelError("No player '@' or '+' found in level")

    level = Level(rows=rows, cols=cols, walls=frozenset(walls), targets=frozenset(targets))
    return level, State.create(player, boxes)


def parse_level_file(path: str) -> Tuple[Level, State]:
    with open(path, "r", encoding="utf-8") as f:
        return parse_level_str(f.read())
