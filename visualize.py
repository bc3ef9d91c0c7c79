# visualize.py
import os
import matplotlib.pyplot as plt

def plot_steps_distribution(records, outpath):
    os.makedirs(os.path.dirname(os.path.abspath(outpath)), exist_ok=True)
    steps = sorted(s for _, s in records)
    plt.figure(figsize=(8,4))
    plt.plot(steps, marker='.', linewidth=0.5)
    plt.title(f"Collatz Step Distribution ({len(steps)} samples)")
    plt.xlabel("Sorted Sample Index")
    plt.ylabel("Steps to reach 1")
    plt.grid(True)
    plt.tight_layout()
    plt.savefig(outpath)
    plt.close()

def plot_hit_miss_rate(hit_rate, outpath, policy=None):
    os.makedirs(os.path.dirname(os.path.abspath(outpath)), exist_ok=True)
    plt.figure(figsize=(4,4))
    # a zero-sized wedge still gets a label, which overlaps the other one
    wedges = [(label, size) for label, size in (('Hit', hit_rate), ('Miss', 1.0 - hit_rate)) if size > 0]
    plt.pie([s for _, s in wedges], labels=[l for l, _ in wedges], autopct='%1.1f%%')
    plt.title(f"Cache Hit/Miss Rate ({policy})" if policy else "Cache Hit/Miss Rate")
    plt.tight_layout()
    plt.savefig(outpath)
    plt.close()
