"""Tests for the render module."""

from sokoban_core.parser import parse_level_str
from sokoban_core.render import render_ascii, describe_domain, format_successor, format_node
from sokoban_core.moves import successors
from search.engine import search
from search.strategy import Strategy

LVL = """#####
#.@ #
# $ #
# *.#
#####"""

ONE_PUSH = "#####\n#@$.#\n#####"


def test_render_round_trips_parser():
    level, s = parse_level_str(LVL)
    assert render_ascii(level, s) == LVL


def test_render_player_and_box_on_target():
    txt = "#####\n#+* #\n#####"
    level, s = parse_level_str(txt)
    assert render_ascii(level, s) == txt


def test_describe_domain():
    level, s = parse_level_str(ONE_PUSH)
    lines = describe_domain(level, s).splitlines()
    assert lines[0] == f"ID: {s.id}"
    assert lines[1] == "\tRows: 3"
    assert lines[2] == "\tColumns: 5"
    assert lines[3].startswith("\tWalls: [(0,0),(0,1)")
    assert lines[4] == "\tTargets: [(1,3)]"
    assert lines[5] == "\tPlayer: (1,1)"
    assert lines[6] == "\tBoxes: [(1,2)]"


def test_format_successor():
    level, s = parse_level_str(ONE_PUSH)
    (succ,) = successors(level, s)
    assert format_successor(succ) == f"[R,{succ.state.id},1]"


def test_format_node():
    level, s = parse_level_str(ONE_PUSH)
    res = search(level, s, Strategy.ASTAR, 5)
    root, goal = res.path
    assert format_node(root) == f"[0][0.0,{s.id},None,NOTHING,0,1.0,1.0]"
    assert format_node(goal) == f"[1][1.0,{goal.state.id},0,R,1,0.0,1.0]"
