#!/usr/bin/env python3
"""
Performance benchmarking script for the Forecast weather model.

Runs days headless (no rendering) and times day advancement, prediction and
graph rasterization separately.

Usage:
    python -m performance.benchmarks.simulation --days 5000 --seed 1
"""
from __future__ import annotations

import argparse
import time
from statistics import mean, median, stdev
from typing import Dict, List, Tuple

from game_state import build_initial_state, next_day
from render.graph import render_graph_pixels


class Timer:
    """Context manager for timing code blocks."""

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, *args):
        self.elapsed = time.perf_counter() - self.start


def get_time_stats(times: List[float]) -> Tuple[float, float, float, float, float]:
    """Returns (mean, median, stdev, min, max) in seconds."""
    if not times:
        return (0.0, 0.0, 0.0, 0.0, 0.0)
    return (
        mean(times),
        median(times),
        stdev(times) if len(times) > 1 else 0.0,
        min(times),
        max(times),
    )


def run_benchmark(days: int, seed: int, graph_every: int = 100) -> Dict[str, List[float]]:
    """Advance `days` days, sampling graph rendering every `graph_every` days."""
    state = build_initial_state(seed)
    timings: Dict[str, List[float]] = {"next_day": [], "predict": [], "graph": []}

    for day in range(days):
        with Timer() as t:
            next_day(state)
        timings["next_day"].append(t.elapsed)

        with Timer() as t:
            state.weather.predict_next()
        timings["predict"].append(t.elapsed)

        if graph_every and day % graph_every == 0:
            with Timer() as t:
                render_graph_pixels(state.weather.recent_history(len(state.weather.history)))
            timings["graph"].append(t.elapsed)

    return timings


def print_report(timings: Dict[str, List[float]]) -> None:
    print("\n" + "=" * 72)
    print("FORECAST PERFORMANCE REPORT")
    print("=" * 72)
    header = f"{'Operation':<12} {'Calls':<8} {'Mean (us)':<12} {'Median (us)':<12} {'Max (us)':<12}"
    print(header)
    print("-" * len(header))
    for name, times in timings.items():
        avg, med, _, _, worst = get_time_stats(times)
        print(f"{name:<12} {len(times):<8} {avg * 1e6:<12.1f} {med * 1e6:<12.1f} {worst * 1e6:<12.1f}")
    print("=" * 72)


def main() -> None:
    parser = argparse.ArgumentParser(description="Benchmark the weather model")
    parser.add_argument("--days", type=int, default=5000, help="Number of days to simulate")
    parser.add_argument("--seed", type=int, default=0, help="Random seed")
    parser.add_argument("--graph-every", type=int, default=100, help="Render the graph every N days (0 = never)")
    args = parser.parse_args()

    print_report(run_benchmark(args.days, args.seed, args.graph_every))


if __name__ == "__main__":
    main()
