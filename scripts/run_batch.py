from __future__ import annotations
import argparse, csv, logging, os, time
from typing import Callable, Dict, List

from tqdm import tqdm

from sokoban_core.errors import SokobanError
from sokoban_core.levels.resolve import load_level_by_id
from search.engine import search
from search.strategy import Strategy
from heuristics.selector import get_heuristic
from scripts.config import load_config, setup_logging

logger = logging.getLogger(__name__)

FIELDS = ["level_id", "strategy", "success", "expanded", "generated", "runtime", "solution_len", "cost"]


def run_one(level_id: str, strategy: Strategy, depth: int, h_fn: Callable) -> Dict[str, object]:
    level, state = load_level_by_id(level_id)
    res = search(level, state, strategy, depth, h_fn=h_fn)
    return {
        "level_id": level_id,
        "strategy": strategy.value,
        "success": res.success,
        "expanded": res.expanded,
        "generated": res.generated,
        "runtime": round(res.runtime, 4),
        "solution_len": res.solution_len,
        "cost": res.goal.cost if res.goal is not None else -1,
    }


def main(argv: List[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Batch search runs over a split list → CSV")
    p.add_argument("--list", required=True, help="path to split .txt (lines: path#idx)")
    p.add_argument("-s", "--strategy", default=None, help="BFS | DFS | UC | GREEDY | A*")
    p.add_argument("-d", "--depth", type=int, default=None)
    p.add_argument("--h", default=None, help="heuristic: zero|manhattan|hungarian")
    p.add_argument("--out", default="results/batch.csv", help="output CSV path")
    p.add_argument("--config", type=str, default="configs/search.yaml")
    args = p.parse_args(argv)

    cfg = load_config(args.config)
    setup_logging(cfg["logging"]["level"])
    try:
        strategy = Strategy.parse(args.strategy or cfg["search"]["strategy"])
        h_fn = get_heuristic(args.h or cfg["search"]["heuristic"])
    except ValueError as e:
        p.error(str(e))
    depth = args.depth if args.depth is not None else int(cfg["search"]["depth"])
    if depth < 1:
        p.error(f"depth must be a positive integer, got {depth}")

    out_dir = os.path.dirname(args.out)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)

    with open(args.list, "r", encoding="utf-8") as f:
        level_ids = [ln.strip() for ln in f if ln.strip() and not ln.strip().startswith("#")]

    started = time.time()
    rows: List[dict] = []
    for lid in tqdm(level_ids, desc="Searching levels", unit="level"):
        try:
            r = run_one(lid, strategy, depth, h_fn)
        except (SokobanError, OSError, IndexError) as e:
            logger.warning("skip %s: %s", lid, e)
            r = {"level_id": lid, "strategy": strategy.value, "success": False, "expanded": 0,
                 "generated": 0, "runtime": 0.0, "solution_len": -1, "cost": -1}
        rows.append(r)

    with open(args.out, "w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=FIELDS)
        w.writeheader()
        for r in rows:
            w.writerow(r)

    print(f"done: {len(rows)} levels → {args.out}; total_time={time.time()-started:.2f}s")
    return 0


if __name__ == "__main__":
    main()
