"""
Latency benchmarking for cached matrix inversion.

Measures, per matrix dimension:
- Miss latency (first cache_solve, runs the inversion)
- Hit latency (later cache_solve calls, served from the cache)
- Speedup of a hit over a miss
"""

import os
import time
from dataclasses import dataclass
from pathlib import Path
from typing import List

import numpy as np

# Add parent directory to path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))
sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv
load_dotenv(Path(__file__).parent.parent / '.env')

from cachematrix import CacheMatrix, cache_solve
from cachematrix.generators import invertible_matrix


@dataclass
class LatencyMetrics:
    """Performance metrics for one matrix dimension."""
    size: int
    repeats: int

    # Timing breakdowns (seconds)
    miss_time: float
    hit_time: float

    # Derived metrics
    miss_latency_ms: float
    hit_latency_ms: float
    speedup: float


def benchmark_size(n: int, repeats: int = 100, random_seed: int = 42) -> LatencyMetrics:
    """
    Benchmark miss vs hit latency for one dimension.

    Args:
        n: Matrix dimension
        repeats: Number of misses and of hits to time
        random_seed: Seed for the benchmark matrix

    Returns:
        LatencyMetrics with timing results
    """
    matrix = invertible_matrix(n, random_seed=random_seed)
    cm = CacheMatrix(matrix)

    miss_time = 0.0
    hit_time = 0.0

    for _ in range(repeats):
        cm.set_matrix(matrix)

        start = time.perf_counter()
        cache_solve(cm)
        miss_time += time.perf_counter() - start

        start = time.perf_counter()
        cache_solve(cm)
        hit_time += time.perf_counter() - start

    miss_latency = miss_time / repeats
    hit_latency = hit_time / repeats

    return LatencyMetrics(
        size=n,
        repeats=repeats,
        miss_time=miss_time,
        hit_time=hit_time,
        miss_latency_ms=miss_latency * 1000,
        hit_latency_ms=hit_latency * 1000,
        speedup=miss_latency / hit_latency if hit_latency > 0 else float('inf')
    )


def run_benchmark(sizes: List[int], repeats: int = 100, random_seed: int = 42,
                  verbose: bool = True) -> List[LatencyMetrics]:
    """
    Run the latency benchmark over several dimensions.

    Args:
        sizes: Matrix dimensions to benchmark
        repeats: Timed calls per dimension
        random_seed: Seed for the benchmark matrices
        verbose: Whether to print progress

    Returns:
        List of LatencyMetrics, one per dimension
    """
    if verbose:
        print("="*70)
        print("LATENCY BENCHMARK: cache miss vs cache hit")
        print("="*70)
        print(f"  Sizes: {sizes}")
        print(f"  Repeats: {repeats}")

    results = []
    for n in sizes:
        metrics = benchmark_size(n, repeats=repeats, random_seed=random_seed)
        results.append(metrics)

        if verbose:
            print(f"   n={n:5d}: miss {metrics.miss_latency_ms:9.3f}ms, "
                  f"hit {metrics.hit_latency_ms * 1000:7.2f}us, "
                  f"speedup {metrics.speedup:,.0f}x")

    if verbose:
        print("="*70)

    return results


def main():
    """Main entry point."""
    import argparse

    default_sizes = os.getenv('CACHEMATRIX_SIZES', '10,50,100,200,400')

    parser = argparse.ArgumentParser(
        description='Benchmark cached matrix inversion latency'
    )
    parser.add_argument('--sizes', '-s', type=str, default=default_sizes,
                       help=f'Comma-separated dimensions (default: {default_sizes})')
    parser.add_argument('--repeats', '-r', type=int,
                       default=int(os.getenv('CACHEMATRIX_REPEATS', '20')),
                       help='Timed calls per dimension (default: 20)')
    parser.add_argument('--seed', type=int,
                       default=int(os.getenv('CACHEMATRIX_SEED', '42')),
                       help='Random seed (default: 42)')
    parser.add_argument('--plot', type=str, default=None,
                       help='Save a latency plot to this path')
    parser.add_argument('--quiet', '-q', action='store_true',
                       help='Suppress output')

    args = parser.parse_args()
    sizes = [int(s) for s in args.sizes.split(',') if s.strip()]

    results = run_benchmark(sizes, repeats=args.repeats,
                            random_seed=args.seed, verbose=not args.quiet)

    if args.plot:
        from visualization import plot_latency
        plot_latency(results, save_path=args.plot)

    return results


if __name__ == '__main__':
    main()
