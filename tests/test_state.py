import dataclasses

import pytest
from sokoban_core.parser import parse_level_str
from sokoban_core.state import State, canonical_form, state_id

LVL = """
#####
#.@ #
# $ #
# . #
#####
"""

def test_parse_basic():
    level, s = parse_level_str(LVL)
    assert level.rows == 5 and level.cols == 5
    assert s.player == (1, 2)
    assert s.boxes == ((2, 2),)
    assert level.targets == {(1, 1), (3, 2)}


def test_canonical_form_sorts_boxes():
    assert canonical_form((1, 1), [(2, 2), (1, 3), (2, 0)]) == "(1,1)[(1,3),(2,0),(2,2)]"


def test_id_ignores_box_order():
    a = State.create((1, 1), [(1, 2), (2, 3)])
    b = State.create((1, 1), [(2, 3), (1, 2)])
    assert a.boxes == b.boxes == ((1, 2), (2, 3))
    assert a.id == b.id
    assert a == b and hash(a) == hash(b)


def test_id_changes_with_player_or_boxes():
    base = State.create((1, 1), [(1, 2)])
    assert State.create((1, 3), [(1, 2)]).id != base.id
    assert State.create((1, 1), [(2, 2)]).id != base.id
    assert len(base.id) == 32
    assert base.id == state_id((1, 1), [(1, 2)])


def test_moved_returns_new_sorted_state():
    s = State.create((2, 2), [(1, 1), (2, 3)])
    ns = s.moved((2, 3), (2, 3), (0, 3))
    assert ns.boxes == ((0, 3), (1, 1))
    assert ns.id == State.create((2, 3), [(1, 1), (0, 3)]).id
    # the original is untouched
    assert s.boxes == ((1, 1), (2, 3))
    assert s.player == (2, 2)


def test_state_is_frozen():
    s = State.create((1, 1), [(1, 2)])
    with pytest.raises(dataclasses.FrozenInstanceError):
        s.player = (0, 0)
