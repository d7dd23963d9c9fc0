"""
Binary Heap Demo — Worked examples, heap sort, custom comparators, and
sift cost analysis.

Generates:
- viz/*.png — Individual visualization files
- report.pdf — Comprehensive PDF report
"""

import sys
from pathlib import Path

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))
from binary_heap import Heap, MinHeap, MaxHeap

SEED = 42
np.random.seed(SEED)

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)
REPORT_PATH = Path(__file__).parent / "report.pdf"

COLORS = {
    "min": "#3498db",
    "max": "#e74c3c",
    "bound": "#7f8c8d",
    "edge": "#95a5a6",
}

SIZES = [2 ** k for k in range(4, 15)]


class CountingComparator:
    def __init__(self, compare):
        self.compare = compare
        self.calls = 0

    def __call__(self, a, b):
        self.calls += 1
        return self.compare(a, b)


def example_1_worked_examples():
    """Min-heap and max-heap walk-throughs."""
    print("=" * 60)
    print("Example 1: Min-Heap and Max-Heap")
    print("=" * 60)

    for label, heap in (("min", MinHeap()), ("max", MaxHeap())):
        for v in [4, 2, 9, 11]:
            heap.insert(v)
        print(f"  {label}-heap after inserting 4, 2, 9, 11: {heap!r} (len={len(heap)})")
        drained = [heap.extract_root() for _ in range(3)]
        print(f"    extract x3 -> {drained}")
        heap.insert(1)
        print(f"    insert 1, extract -> {heap.extract_root()}")
        print(f"    remaining: {list(heap)}, empty extract -> {heap.extract_root()}")
    print()
    return []


def example_2_heap_sort():
    """Drain a heap built from random data and compare with np.sort."""
    print("=" * 60)
    print("Example 2: Heap Sort")
    print("=" * 60)

    data = np.random.randint(-1000, 1000, size=2000)
    ascending = np.array(list(Heap.from_array(data.tolist(), lambda a, b: a < b)))
    descending = np.array(list(Heap.from_array(data.tolist(), lambda a, b: a > b)))

    print(f"  n = {len(data)}")
    print(f"  ascending matches np.sort:  {np.array_equal(ascending, np.sort(data))}")
    print(f"  descending matches reverse: {np.array_equal(descending, np.sort(data)[::-1])}")

    fig, ax = plt.subplots(figsize=(10, 5))
    ax.plot(data[:200], color=COLORS["edge"], linewidth=1, label="input")
    ax.plot(ascending[::10], color=COLORS["min"], linewidth=2, label="min-heap drain")
    ax.plot(descending[::10], color=COLORS["max"], linewidth=2, label="max-heap drain")
    ax.set_title("Heap Drain Order (every 10th element)", fontsize=14, fontweight="bold")
    ax.set_xlabel("position")
    ax.set_ylabel("value")
    ax.legend()
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    path = VIZ_DIR / "02_heap_sort.png"
    fig.savefig(path, dpi=150)
    plt.close(fig)
    print()
    return [path]


def example_3_custom_comparator():
    """Records ordered by priority with insertion order breaking ties."""
    print("=" * 60)
    print("Example 3: Custom Comparator")
    print("=" * 60)

    tasks = [("compact", 2), ("flush", 1), ("backup", 3), ("reindex", 2), ("vacuum", 1)]
    heap = Heap(lambda a, b: (a[1], a[2]) < (b[1], b[2]))
    for seq, (name, priority) in enumerate(tasks):
        heap.insert((name, priority, seq))

    for name, priority, seq in heap:
        print(f"  priority={priority} seq={seq} -> {name}")
    print()
    return []


def _draw_tree(ax, values, title):
    # values is the live storage in index order 1..n
    n = len(values)
    depth = int(np.floor(np.log2(n))) + 1 if n else 1
    positions = {}
    for i in range(1, n + 1):
        level = int(np.floor(np.log2(i)))
        slot = i - 2 ** level
        x = (slot + 0.5) / 2 ** level
        positions[i] = (x, depth - level)

    for i in range(2, n + 1):
        (x0, y0), (x1, y1) = positions[i // 2], positions[i]
        ax.plot([x0, x1], [y0, y1], color=COLORS["edge"], linewidth=1.2, zorder=1)
    for i, (x, y) in positions.items():
        ax.scatter(x, y, s=600, color=COLORS["min"], zorder=2)
        ax.text(x, y, str(values[i - 1]), ha="center", va="center", color="white",
                fontsize=10, fontweight="bold", zorder=3)

    ax.set_title(title, fontsize=11)
    ax.set_xlim(0, 1)
    ax.set_ylim(0.5, depth + 0.5)
    ax.axis("off")


def example_4_tree_snapshots():
    """Storage drawn as a tree after each insert into a min-heap."""
    print("=" * 60)
    print("Example 4: Tree Snapshots")
    print("=" * 60)

    values = np.random.permutation(np.arange(1, 9)).tolist()
    heap = MinHeap()

    fig, axes = plt.subplots(2, 4, figsize=(16, 8))
    for ax, v in zip(axes.flatten(), values):
        heap.insert(v)
        live = heap.to_list()
        print(f"  insert {v}: {live}")
        _draw_tree(ax, live, f"after insert {v}")

    fig.suptitle("Min-Heap Sift-Up", fontsize=16, fontweight="bold")
    fig.tight_layout(rect=[0, 0, 1, 0.95])
    path = VIZ_DIR / "04_tree_snapshots.png"
    fig.savefig(path, dpi=150)
    plt.close(fig)
    print()
    return [path]


def example_5_sift_cost():
    """Comparator calls per operation against log2(n)."""
    print("=" * 60)
    print("Example 5: Sift Cost vs log2(n)")
    print("=" * 60)

    insert_cost, extract_cost = [], []
    for n in SIZES:
        counter = CountingComparator(lambda a, b: a < b)
        heap = Heap(counter)
        for v in np.random.randint(0, 10 * n, size=n).tolist():
            heap.insert(v)
        insert_cost.append(counter.calls / n)

        counter.calls = 0
        for _ in heap:
            pass
        extract_cost.append(counter.calls / n)
        print(f"  n={n:<6} insert: {insert_cost[-1]:6.2f}  extract: {extract_cost[-1]:6.2f}  "
              f"log2(n): {np.log2(n):5.2f}")

    sizes = np.array(SIZES)
    fig, ax = plt.subplots(figsize=(10, 6))
    ax.plot(sizes, insert_cost, "o-", color=COLORS["min"], linewidth=2, label="insert")
    ax.plot(sizes, extract_cost, "s-", color=COLORS["max"], linewidth=2, label="extract_root")
    ax.plot(sizes, 2 * np.log2(sizes), "--", color=COLORS["bound"], label="2 log2(n)")
    ax.set_xscale("log", base=2)
    ax.set_xlabel("n")
    ax.set_ylabel("comparator calls per operation")
    ax.set_title("Sift Cost", fontsize=14, fontweight="bold")
    ax.legend()
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    path = VIZ_DIR / "05_sift_cost.png"
    fig.savefig(path, dpi=150)
    plt.close(fig)
    print()
    return [path]


def generate_pdf_report(all_figures):
    print("=" * 60)
    print("Generating PDF Report")
    print("=" * 60)

    with PdfPages(REPORT_PATH) as pdf:
        for fig_path in all_figures:
            if fig_path.exists():
                img = plt.imread(str(fig_path))
                fig, ax = plt.subplots(figsize=(11, 8))
                ax.imshow(img)
                ax.axis("off")
                fig.tight_layout()
                pdf.savefig(fig)
                plt.close(fig)

    print(f"  Report saved to: {REPORT_PATH}")
    print()


def main():
    print()
    print("*" * 60)
    print("  BINARY HEAP — DEMO")
    print(f"  Seed: {SEED}")
    print("*" * 60)
    print()

    all_figures = []

    all_figures.extend(example_1_worked_examples())
    all_figures.extend(example_2_heap_sort())
    all_figures.extend(example_3_custom_comparator())
    all_figures.extend(example_4_tree_snapshots())
    all_figures.extend(example_5_sift_cost())

    generate_pdf_report(all_figures)

    print("=" * 60)
    print("DEMO COMPLETE")
    print("=" * 60)
    print(f"  Visualizations: {VIZ_DIR}/")
    for f in sorted(VIZ_DIR.glob("*.png")):
        print(f"    - {f.name}")
    print(f"  PDF Report:     {REPORT_PATH}")
    print()


if __name__ == "__main__":
    main()
