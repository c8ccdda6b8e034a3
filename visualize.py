# visualize.py
import os
import matplotlib.pyplot as plt


def _ensure_dir(outpath):
    os.makedirs(os.path.dirname(outpath) or ".", exist_ok=True)


def plot_outcome_breakdown(stats, outpath):
    _ensure_dir(outpath)
    labels = ['Hit', 'Compulsory', 'Capacity', 'Conflict']
    sizes = [stats.hits, stats.compulsory, stats.capacity, stats.conflict]
    # pie() cannot draw all-zero wedges
    pairs = [(l, s) for l, s in zip(labels, sizes) if s > 0] or [('No accesses', 1)]
    plt.figure(figsize=(5,5))
    plt.pie([s for _, s in pairs], labels=[l for l, _ in pairs], autopct='%1.1f%%')
    plt.title(f"Access Outcomes (Hit rate: {stats.hit_rate():.2f}%)")
    plt.tight_layout()
    plt.savefig(outpath)
    plt.close()


def plot_hit_rate_comparison(summaries, outpath):
    _ensure_dir(outpath)
    labels = [s.get("label", s["cache"]) for s in summaries]
    rates = [s["hit_rate"] for s in summaries]
    plt.figure(figsize=(max(6, 1.2 * len(labels)), 4))
    plt.bar(range(len(labels)), rates)
    plt.xticks(range(len(labels)), labels, rotation=30, ha='right')
    plt.ylim(0, 100)
    plt.ylabel("Hit rate (%)")
    plt.title("Hit Rate by Cache Configuration")
    plt.grid(True, axis='y')
    plt.tight_layout()
    plt.savefig(outpath)
    plt.close()
