"""
Latency visualization for cached matrix inversion.

Plots miss and hit latency against matrix dimension, and the resulting
speedup of serving the inverse from the cache.
"""

import matplotlib.pyplot as plt
from typing import List, Optional


def plot_latency(results: List,
                 title: str = "Cache Miss vs Hit Latency",
                 figsize: tuple = (12, 5),
                 save_path: Optional[str] = None):
    """
    Plot miss/hit latency and speedup per matrix dimension (matplotlib).

    Args:
        results: List of LatencyMetrics (size, miss_latency_ms,
            hit_latency_ms, speedup)
        title: Plot title
        figsize: Figure size
        save_path: Optional path to save figure
    """
    sizes = [r.size for r in results]
    miss = [r.miss_latency_ms for r in results]
    hit = [r.hit_latency_ms for r in results]
    speedup = [r.speedup for r in results]

    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=figsize)

    # Latency on a log scale, hits are orders of magnitude faster
    ax1.plot(sizes, miss, marker='o', linewidth=2, color='#A23B72', label='Miss (inversion)')
    ax1.plot(sizes, hit, marker='s', linewidth=2, color='#2E86AB', label='Hit (cached)')
    ax1.set_yscale('log')
    ax1.set_xlabel('Matrix dimension n', fontsize=12)
    ax1.set_ylabel('Latency (ms)', fontsize=12)
    ax1.set_title('Latency', fontsize=12)
    ax1.legend(loc='best', fontsize=10)
    ax1.grid(True, alpha=0.3)

    ax2.bar([str(s) for s in sizes], speedup, color='#F18F01', alpha=0.8)
    ax2.set_yscale('log')
    ax2.set_xlabel('Matrix dimension n', fontsize=12)
    ax2.set_ylabel('Speedup (miss / hit)', fontsize=12)
    ax2.set_title('Speedup', fontsize=12)
    ax2.grid(True, alpha=0.3, axis='y')

    fig.suptitle(title, fontsize=14, fontweight='bold')
    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=300, bbox_inches='tight')

    return fig
