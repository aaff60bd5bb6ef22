"""
TreeMap Demo -- Basic map usage, overwrite semantics, value deduplication,
and how insertion order shapes an unbalanced tree.

Generates:
- viz/*.png -- Individual visualization files
"""

import logging
import sys
from pathlib import Path

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

sys.path.insert(0, str(Path(__file__).resolve().parent))
from tree_map import TreeMap, NullKeyError

SEED = 42
np.random.seed(SEED)

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)

SIZES = [10, 50, 100, 250, 500, 1000, 2000]
TRIALS = 20

COLORS = {
    "sorted": "#e74c3c",
    "shuffled": "#3498db",
    "log2": "#27ae60",
}


def example_1_basic_usage():
    print("=" * 60)
    print("Example 1: Basic Usage")
    print("=" * 60)

    m = TreeMap()
    m.put("Word1", 1)
    m.put("Word2", 2)
    print(f"  get('Word1') = {m.get('Word1')}")
    for key in m.key_set():
        print(f"  {key}, {m.get(key)}")

    print(f"  put('Word1', 10) returned {m.put('Word1', 10)}")
    print(f"  size after overwrite = {m.size()}")

    try:
        m.put(None, 0)
    except NullKeyError as exc:
        print(f"  put(None, 0) -> {type(exc).__name__}: {exc}")
    try:
        m.remove("Word1")
    except NotImplementedError as exc:
        print(f"  remove('Word1') -> {type(exc).__name__}: {exc}")
    print()


def example_2_value_dedup():
    print("=" * 60)
    print("Example 2: values() Collapses Duplicates")
    print("=" * 60)

    m = TreeMap()
    m.put_all({"apple": "fruit", "carrot": "vegetable", "banana": "fruit"})
    print(f"  keys   = {m.key_set()}")
    print(f"  values = {sorted(m.values())}")
    print()


def tree_heights(keys):
    m = TreeMap()
    heights = []
    for i, key in enumerate(keys, start=1):
        m.put(key, i)
        if i in SIZES:
            heights.append(m.height())
    return heights


def example_3_height_vs_insertion_order():
    """Plot tree height for sorted and shuffled insertion."""
    print("=" * 60)
    print("Example 3: Height vs Insertion Order")
    print("=" * 60)

    n = max(SIZES)
    sorted_heights = tree_heights(range(n))
    shuffled = np.array([tree_heights(np.random.permutation(n).tolist()) for _ in range(TRIALS)])
    shuffled_mean = shuffled.mean(axis=0)
    sizes = np.array(SIZES)

    for size, h_sorted, h_shuffled in zip(SIZES, sorted_heights, shuffled_mean):
        print(f"  n={size:5d}: sorted height={h_sorted:5d}, shuffled mean height={h_shuffled:6.1f}")

    fig, ax = plt.subplots(figsize=(10, 6))
    ax.plot(sizes, sorted_heights, "o-", color=COLORS["sorted"], linewidth=2, label="sorted insertion")
    ax.plot(sizes, shuffled_mean, "o-", color=COLORS["shuffled"], linewidth=2,
            label=f"shuffled insertion (mean of {TRIALS})")
    ax.plot(sizes, np.log2(sizes + 1), "--", color=COLORS["log2"], linewidth=1.5, label="log2(n + 1)")
    ax.set_xscale("log")
    ax.set_yscale("log")
    ax.set_xlabel("entries", fontsize=12)
    ax.set_ylabel("height", fontsize=12)
    ax.set_title("Unbalanced Tree Height by Insertion Order", fontsize=14, fontweight="bold")
    ax.legend(fontsize=11)
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    path = VIZ_DIR / "01_height_vs_order.png"
    fig.savefig(path, dpi=150)
    plt.close(fig)

    print()
    return [path]


def main():
    logging.basicConfig(level=logging.INFO)

    print()
    print("*" * 60)
    print("  TREE MAP -- DEMO")
    print(f"  Seed: {SEED}")
    print("*" * 60)
    print()

    example_1_basic_usage()
    example_2_value_dedup()
    figures = example_3_height_vs_insertion_order()

    print("=" * 60)
    print("DEMO COMPLETE")
    print("=" * 60)
    print(f"  Visualizations: {VIZ_DIR}/")
    for f in figures:
        print(f"    - {f.name}")
    print()


if __name__ == "__main__":
    main()
