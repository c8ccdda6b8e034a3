# main.py
import json
import os
import sys
from benchmark import BenchmarkRunner
from visualize import plot_outcome_breakdown, plot_hit_rate_comparison

def load_config(path="config.json"):
    with open(path, "r") as f:
        return json.load(f)

def format_stats(stats):
    total = stats.total_accesses()
    return "\n".join([
        "--- Cache Simulation Results ---",
        f"Total Accesses: {total}",
        f"Hits:           {stats.hits} ({stats.hit_rate():.2f}%)",
        f"Misses:         {stats.misses()}",
        f"  - Compulsory: {stats.compulsory}",
        f"  - Capacity:   {stats.capacity}",
        f"  - Conflict:   {stats.conflict}",
        "--------------------------------",
    ])

def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    cfg = load_config(argv[0] if argv else "config.json")
    out_cfg = cfg.get("output", {})
    runner = BenchmarkRunner(cfg)
    print("Starting benchmark with config:", cfg.get("benchmark", {}))
    print(f"Running simulation with {runner.num_requests} memory accesses on {runner.cache_config.describe()}...")
    summary, stats = runner.run()
    print(format_stats(stats))

    if cfg.get("compare"):
        summary["comparison"] = runner.compare()
        for entry in summary["comparison"]:
            print(f"{entry['label']:30s} hit rate {entry['hit_rate']:6.2f}%")

    results_path = runner.save_results(summary, out_cfg)
    print("Results saved to:", results_path)

    # Plots
    plot_outcome_breakdown(stats, out_cfg.get("breakdown_plot", "results/outcome_breakdown.png"))
    if cfg.get("compare"):
        plot_hit_rate_comparison(summary["comparison"], out_cfg.get("comparison_plot", "results/hit_rate_comparison.png"))
    print("Plots saved in", os.path.dirname(out_cfg.get("breakdown_plot", "results/outcome_breakdown.png")) or ".")
    return 0

if __name__ == "__main__":
    sys.exit(main())
