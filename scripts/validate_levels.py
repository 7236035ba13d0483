from __future__ import annotations
import argparse, yaml
from typing import List, Optional

from sokoban_core.levels.io import iterate_level_strings, filter_level


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser()
    p.add_argument("--config", type=str, default="configs/data.yaml")
    args = p.parse_args(argv)

    with open(args.config, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f)

    root = cfg["levels"]["root_dir"]
    rels = cfg["levels"]["sources"]
    flt  = cfg.get("filters") or {}

    ok = 0
    bad = 0
    for ref, s in iterate_level_strings(root, rels):
        if filter_level(s,
                        max_rows=flt.get("max_rows"),
                        max_cols=flt.get("max_cols"),
                        min_b=flt.get("min_boxes"),
                        max_b=flt.get("max_boxes")):
            ok += 1
        else:
            bad += 1
            print(f"[skip] {ref.level_id}")
    print(f"valid: {ok}, skipped: {bad}")
    return 0

if __name__ == "__main__":
    main()
