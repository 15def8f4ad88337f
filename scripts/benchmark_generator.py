"""Benchmark the path generator on the default board.

Developer utility: runs many generations and reports timing, how often the
snake fallback was needed, attempts per path, and whether every path kept
its invariants.

Run: python scripts/benchmark_generator.py --runs 1000
"""

import argparse
import logging
import time

import numpy as np

from pattern_recall.constants import GridConfig
from pattern_recall.generators.path_generator import PathGenerator


def run_benchmark(runs: int, width: int, height: int, length: int, seed: int | None) -> dict:
    """Generate ``runs`` patterns and collect statistics."""
    generator = PathGenerator(seed=seed)
    durations_ms = np.empty(runs)
    attempts = np.empty(runs, dtype=int)
    fallbacks = 0
    broken = 0

    for i in range(runs):
        t0 = time.perf_counter()
        pattern = generator.generate_pattern(width=width, height=height, length=length)
        durations_ms[i] = (time.perf_counter() - t0) * 1000.0
        attempts[i] = pattern.attempts
        if pattern.is_fallback:
            fallbacks += 1
        elif pattern.violations() or len(pattern) != length:
            broken += 1

    return {
        "runs": runs,
        "fallbacks": fallbacks,
        "broken": broken,
        "mean_ms": float(durations_ms.mean()),
        "p95_ms": float(np.percentile(durations_ms, 95)),
        "max_ms": float(durations_ms.max()),
        "mean_attempts": float(attempts.mean()),
        "max_attempts": int(attempts.max()),
    }


def main() -> None:
    parser = argparse.ArgumentParser(description="Benchmark the Pattern Recall path generator")
    parser.add_argument("--runs", type=int, default=1000, help="Number of generations")
    parser.add_argument("--width", type=int, default=GridConfig.WIDTH, help="Grid width")
    parser.add_argument("--height", type=int, default=GridConfig.HEIGHT, help="Grid height")
    parser.add_argument("--length", type=int, default=GridConfig.PATH_LENGTH, help="Path length")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible runs")
    parser.add_argument("--verbose", action="store_true", help="Show generator log output")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)

    stats = run_benchmark(runs=args.runs, width=args.width, height=args.height, length=args.length, seed=args.seed)

    print(f"Board {args.width}x{args.height}, length {args.length}, {stats['runs']} runs")
    print(f"  time:      mean {stats['mean_ms']:.2f} ms, p95 {stats['p95_ms']:.2f} ms, max {stats['max_ms']:.2f} ms")
    print(f"  attempts:  mean {stats['mean_attempts']:.2f}, max {stats['max_attempts']}")
    print(f"  fallbacks: {stats['fallbacks']} ({stats['fallbacks'] / stats['runs']:.1%})")
    print(f"  broken:    {stats['broken']}")


if __name__ == "__main__":
    main()
