from typing import Iterable

from .level import Coord, Level
from .moves import Successor
from .state import State


def render_ascii(level: Level, state: State) -> str:
    """ASCII visualization of the state, in the same alphabet the parser reads."""
    boxes = set(state.boxes)
    out_lines = []
    for r in range(level.rows):
        row_chars = []
        for c in range(level.cols):
            cell = (r, c)
            if level.is_wall(cell):
                row_chars.append('#')
                continue
            has_goal = level.is_target(cell)
            if cell == state.player:
                row_chars.append('+' if has_goal else '@')
            elif cell in boxes:
                row_chars.append('*' if has_goal else '$')
            else:
                row_chars.append('.' if has_goal else ' ')
        out_lines.append(''.join(row_chars))
    return "\n".join(out_lines)


def format_coords(cells: Iterable[Coord]) -> str:
    return "[" + ",".join(f"({r},{c})" for r, c in sorted(cells)) + "]"


def describe_domain(level: Level, state: State) -> str:
    """Problem domain report: state id, size, walls, targets, player and boxes."""
    pr, pc = state.player
    return "\n".join([
        f"ID: {state.id}",
        f"\tRows: {level.rows}",
        f"\tColumns: {level.cols}",
        f"\tWalls: {format_coords(level.walls)}",
        f"\tTargets: {format_coords(level.targets)}",
        f"\tPlayer: ({pr},{pc})",
        f"\tBoxes: {format_coords(state.boxes)}",
    ])


def format_successor(succ: Successor) -> str:
    return f"[{succ.action},{succ.state.id},{succ.cost}]"


def format_node(node) -> str:
    """[ID][COST,STATE_ID,PARENT_ID,ACTION,DEPTH,HEURISTIC,VALUE]; the root's parent is None."""
    return (f"[{node.id}][{float(node.cost):.1f},{node.state.id},{node.parent},{node.action},"
            f"{node.depth},{float(node.heuristic):.1f},{float(node.value):.1f}]")
