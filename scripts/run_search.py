from __future__ import annotations
import argparse
import sys
from typing import List, Optional

from sokoban_core.errors import SokobanError
from sokoban_core.goal_check import is_goal
from sokoban_core.level import check_puzzle
from sokoban_core.moves import successors
from sokoban_core.parser import parse_level_file, parse_level_str
from sokoban_core.render import describe_domain, format_node, format_successor, render_ascii
from search.engine import search
from search.strategy import Strategy
from heuristics.selector import get_heuristic
from scripts.config import load_config, setup_logging

"""
Single-level entry point.

Usage:
  python -m scripts.run_search T1  -l '#####\\n#@$.#\\n#####'
  python -m scripts.run_search T2S -l '#####\\n#@$.#\\n#####'
  python -m scripts.run_search T2T --file level.txt
  python -m scripts.run_search T3  -l '#####\\n#@$.#\\n#####' -s A* -d 50 --render
"""

TASKS = ("T1", "T2S", "T2T", "T3")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Sokoban state-space search")
    p.add_argument("task", choices=TASKS,
                   help="T1 domain report | T2S successors | T2T goal test | T3 search")
    src = p.add_mutually_exclusive_group(required=True)
    src.add_argument("-l", "--level", type=str, help="inline level text, rows split by newlines or '\\n'")
    src.add_argument("--file", type=str, help="path to a .txt level")
    p.add_argument("-s", "--strategy", type=str, default=None, help="BFS | DFS | UC | GREEDY | A*")
    p.add_argument("-d", "--depth", type=int, default=None, help="depth bound (positive)")
    p.add_argument("--h", type=str, default=None, help="heuristic: zero | manhattan | hungarian")
    p.add_argument("--config", type=str, default="configs/search.yaml")
    p.add_argument("--render", action="store_true", help="print the board after every step of the solution")
    p.add_argument("-v", "--verbose", action="store_true")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    p = build_parser()
    args = p.parse_args(argv)

    cfg = load_config(args.config)
    setup_logging(cfg["logging"]["level"], args.verbose)
    scfg = cfg["search"]

    try:
        strategy = Strategy.parse(args.strategy or scfg["strategy"])
        h_fn = get_heuristic(args.h or scfg["heuristic"])
    except ValueError as e:
        p.error(str(e))
    depth = args.depth if args.depth is not None else int(scfg["depth"])
    if depth < 1:
        p.error(f"depth must be a positive integer, got {depth}")

    try:
        if args.file is not None:
            level, state = parse_level_file(args.file)
        else:
            level, state = parse_level_str(args.level)
        check_puzzle(level, state)
    except SokobanError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.task == "T1":
        print(describe_domain(level, state))
    elif args.task == "T2S":
        print(f"ID: {state.id}")
        for succ in successors(level, state):
            print(format_successor(succ))
    elif args.task == "T2T":
        print(str(is_goal(level, state)).upper())
    else:
        print(strategy.value)
        res = search(level, state, strategy, depth, h_fn=h_fn)
        if not res.success:
            print("There is no solution.")
            if args.render:
                print(f"\n-- initial --\n{render_ascii(level, state)}")
            return 0
        for node in res.path:
            print(format_node(node))
        if args.render:
            for i, node in enumerate(res.path):
                print(f"\n-- step {i} ({node.action}) --\n{render_ascii(level, node.state)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
