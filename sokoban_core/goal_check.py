from .level import Level
from .state import State


def is_goal(level: Level, state: State) -> bool:
    """All boxes are on targets: boxes ⊆ targets. Spare targets are allowed."""
    return all(box in level.targets for box in state.boxes)
