import pytest

from heuristics.classic import h_zero, h_manhattan, h_manhattan_hungarian, manhattan
from heuristics.selector import get_heuristic
from sokoban_core.goal_check import is_goal
from sokoban_core.parser import parse_level_str

# both boxes are closest to the same target
SHARED = """
#######
#@    #
# $$. #
#    .#
#######
"""


def test_manhattan():
    assert manhattan((0, 0), (2, 3)) == 5


def test_manhattan_allows_shared_targets():
    level, s = parse_level_str(SHARED)
    # (2,2)->(2,4)=2, (2,3)->(2,4)=1
    assert h_manhattan(level, s) == 3
    # one box has to take (3,5): (2,2)->(2,4)=2 + (2,3)->(3,5)=3
    assert h_manhattan_hungarian(level, s) == 5


def test_rectangular_assignment():
    level, s = parse_level_str("#######\n#@$ ..#\n#######")
    assert h_manhattan_hungarian(level, s) == 2
    assert h_manhattan(level, s) == 2


@pytest.mark.parametrize("h_fn", [h_zero, h_manhattan, h_manhattan_hungarian])
def test_zero_on_goal(h_fn):
    level, s = parse_level_str("######\n#@**.#\n######")
    assert is_goal(level, s)
    assert h_fn(level, s) == 0


def test_selector():
    assert get_heuristic("Manhattan") is h_manhattan
    assert get_heuristic("hungarian") is h_manhattan_hungarian
    assert get_heuristic("zero") is h_zero
    with pytest.raises(ValueError):
        get_heuristic("learned")
