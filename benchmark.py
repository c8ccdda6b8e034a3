# benchmark.py
import os
import json
import time
from itertools import islice

import numpy as np

from cache import build_cache
from config import CacheConfiguration, ConfigurationError
from generators import make_generator
from stats import AccessStatistics


def run(organization, addresses, iterations):
    """
    Feed up to `iterations` addresses into `organization`, one at a time.
    A finite address sequence that runs out first ends the run early.
    Returns the AccessStatistics for the run.
    """
    if organization is None:
        raise ConfigurationError("no cache organization to simulate")
    if addresses is None:
        raise ConfigurationError("no address sequence to simulate")
    if iterations < 0:
        raise ConfigurationError(f"iteration count must be non-negative, got {iterations}")

    stats = AccessStatistics()
    for address in islice(addresses, iterations):
        stats.record(organization.access(address))
    return stats


class BenchmarkRunner:
    def __init__(self, cfg):
        self.cfg = cfg
        bench_cfg = cfg.get("benchmark", {})
        self.seed = bench_cfg.get("random_seed", None)
        # fixed per runner even when unseeded
        self.entropy = np.random.SeedSequence(self.seed).entropy
        self.generator_name = bench_cfg.get("generator", "gen5")
        self.num_requests = bench_cfg.get("num_requests", 1_000_000)
        self.cache_config = CacheConfiguration.from_dict(cfg.get("cache", {}))

    def run(self, cache_config=None):
        """
        Simulate one cache configuration against a fresh trace.
        The trace and the cache's evictions draw from separate generators
        spawned from the same seed, so every configuration run by this
        runner sees the same addresses.
        """
        cache_config = cache_config or self.cache_config
        trace_seed, cache_seed = np.random.SeedSequence(self.entropy).spawn(2)
        cache = build_cache(cache_config, np.random.default_rng(cache_seed))
        addresses = make_generator(self.generator_name, np.random.default_rng(trace_seed))

        start = time.time()
        stats = run(cache, addresses, self.num_requests)
        end = time.time()

        total = stats.total_accesses()
        summary = {
            "cache": cache_config.describe(),
            "generator": self.generator_name,
            **stats.as_dict(),
            "valid_blocks": cache.valid_blocks(),
            "throughput_ops_per_sec": total / (end - start) if (end - start) > 0 else 0,
            "duration_s": end - start,
        }
        return summary, stats

    def compare(self):
        """Run every entry of cfg["compare"] (overrides on the cache section) on the same trace."""
        results = []
        base = self.cfg.get("cache", {})
        for entry in self.cfg.get("compare", []):
            overrides = {k: v for k, v in entry.items() if k != "label"}
            cache_config = CacheConfiguration.from_dict({**base, **overrides})
            summary, _ = self.run(cache_config)
            summary["label"] = entry.get("label", cache_config.describe())
            results.append(summary)
        return results

    def save_results(self, summary, out_cfg):
        results_dir = out_cfg.get("results_dir", "results")
        os.makedirs(results_dir, exist_ok=True)
        path = os.path.join(results_dir, out_cfg.get("results_file", "results.json"))
        with open(path, "w") as f:
            json.dump(summary, f, indent=2)
        return path
