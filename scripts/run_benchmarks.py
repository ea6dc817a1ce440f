#!/usr/bin/env python3
from __future__ import annotations

import argparse
import logging
import math
import statistics as stats
import time
from dataclasses import dataclass
from typing import List, Tuple

from tictac.search import cache_info, clear_cache, minimax, solve_all_reachable
from tictac.state import initial_state


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
    repeats: int = 10


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Time exhaustive minimax search")
    ap.add_argument("--repeats", type=int, default=Config.repeats)
    ns = ap.parse_args(argv)
    cfg = Config(repeats=max(1, ns.repeats))
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")

    cold_times: List[float] = []
    all_times: List[float] = []
    for _ in range(cfg.repeats):
        clear_cache()
        t0 = time.perf_counter()
        minimax(initial_state())
        t1 = time.perf_counter()
        cold_times.append(t1 - t0)
        t2 = time.perf_counter()
        solved = solve_all_reachable()
        t3 = time.perf_counter()
        all_times.append(t3 - t2)
    m_cold, h_cold = ci95(cold_times)
    m_all, h_all = ci95(all_times)
    logging.info("minimax(empty, cold cache): mean=%.4fs ± %.4fs (95%% CI)", m_cold, h_cold)
    logging.info("solve_all_reachable(warm): mean=%.4fs ± %.4fs (95%% CI), %d positions", m_all, h_all, len(solved))
    logging.info("cache=%s", cache_info())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
