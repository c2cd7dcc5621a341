#!/usr/bin/env python3
from __future__ import annotations

import argparse
import logging
import math
import statistics as stats
import time
from dataclasses import dataclass
from typing import List, Tuple

from noughts.board import new_board, parse_board
from noughts.search import choose_move


def ci95(values: List[float]) -> Tuple[float, float]:
    if not values:
        return (float("nan"), float("nan"))
    m = stats.fmean(values)
    s = stats.pstdev(values) if len(values) > 1 else 0.0
    z = 1.96
    half = z * (s / math.sqrt(len(values)))
    return m, half


@dataclass
class Config:
    repeats: int = 5
    midgame: str = "X...O...."


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Time the minimax search")
    ap.add_argument("--repeats", type=int, default=Config.repeats)
    ns = ap.parse_args(argv)
    cfg = Config(repeats=ns.repeats)
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")

    cases = [
        ("empty", new_board(), "X", "O"),
        ("midgame", parse_board(cfg.midgame), "X", "O"),
    ]
    for name, board, computer, human in cases:
        times: List[float] = []
        nodes = 0
        for _ in range(cfg.repeats):
            t0 = time.perf_counter()
            res = choose_move(board, computer, human)
            times.append(time.perf_counter() - t0)
            nodes = res.nodes_explored
        m, h = ci95(times)
        logging.info("%s: nodes=%d mean=%.4fs ± %.4fs (95%% CI, N=%d)", name, nodes, m, h, cfg.repeats)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
