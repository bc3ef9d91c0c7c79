# benchmark.py
import enum
import json
import logging
import os
import time

import numpy as np

from cache import LFUCache, LRUCache
from collatz import collatz_steps

logger = logging.getLogger(__name__)


class Policy(enum.Enum):
    NONE = "none"
    LRU = "LRU"
    LFU = "LFU"

    @classmethod
    def from_name(cls, name):
        """Case-insensitive lookup: 'none', 'lru', 'LFU', ..."""
        if isinstance(name, cls):
            return name
        if not isinstance(name, str):
            raise ValueError(f"Unknown cache policy {name!r}. Use 'none', 'LRU', or 'LFU'.")
        for policy in cls:
            if policy.value.lower() == name.strip().lower():
                return policy
        raise ValueError(f"Unknown cache policy {name!r}. Use 'none', 'LRU', or 'LFU'.")


class CollatzMemo:
    """
    Step counter fronted by the cache chosen at construction.
    Policy.NONE keeps no cache at all and recomputes every call.
    """

    def __init__(self, policy: Policy, capacity: int):
        self.policy = Policy.from_name(policy)
        self.capacity = capacity
        if self.policy is Policy.LRU:
            self.cache = LRUCache(capacity)
        elif self.policy is Policy.LFU:
            self.cache = LFUCache(capacity)
        else:
            self.cache = None
        self.hits = 0
        self.misses = 0

    def get_or_compute(self, key):
        if self.cache is None:
            self.misses += 1
            return collatz_steps(key)

        steps = self.cache.lookup(key)
        if steps is not None:
            self.hits += 1
            logger.debug("hit %d -> %d", key, steps)
            return steps

        self.misses += 1
        steps = collatz_steps(key)
        self.cache.insert(key, steps)
        return steps

    def stats(self):
        total = self.hits + self.misses
        return {
            "policy": self.policy.value,
            "capacity": self.capacity,
            "cache_size": len(self.cache) if self.cache is not None else 0,
            "hits": self.hits,
            "misses": self.misses,
            "hit_rate": self.hits / total if total else 0,
        }


class BenchmarkRunner:
    def __init__(self, cfg):
        self.cfg = cfg
        bench_cfg = cfg["benchmark"]
        self.rng = np.random.default_rng(bench_cfg.get("random_seed", None))
        self.num_samples = bench_cfg.get("num_samples", 20)
        self.min_value = bench_cfg.get("min_value", 1)
        self.max_value = bench_cfg.get("max_value", 1000)
        cache_cfg = cfg["cache"]
        self.memo = CollatzMemo(
            policy=cache_cfg.get("policy", "none"),
            capacity=cache_cfg.get("capacity", 0),
        )

    def _generate_number(self):
        # integers() excludes the upper bound unless endpoint=True
        return int(self.rng.integers(self.min_value, self.max_value, endpoint=True))

    def iter_samples(self):
        """Yield (number, steps) for each draw, in draw order."""
        for _ in range(self.num_samples):
            number = self._generate_number()
            yield number, self.memo.get_or_compute(number)

    def run(self, on_record=None):
        logger.info(
            "Running %d samples in [%d, %d] with policy %s (capacity %d)",
            self.num_samples, self.min_value, self.max_value,
            self.memo.policy.value, self.memo.capacity,
        )
        records = []
        start = time.time()
        for number, steps in self.iter_samples():
            records.append((number, steps))
            if on_record is not None:
                on_record(number, steps)
        end = time.time()

        total = len(records)
        steps_only = [steps for _, steps in records]
        summary = {
            "total_requests": total,
            "duration_s": end - start,
            "throughput_ops_per_sec": total / (end - start) if (end - start) > 0 else 0,
            "max_steps": max(steps_only) if steps_only else 0,
            "mean_steps": float(np.mean(steps_only)) if steps_only else 0.0,
        }
        summary.update(self.memo.stats())
        logger.info("Finished: %d hits, %d misses", summary["hits"], summary["misses"])
        return summary, records

    def save_results(self, summary, out_cfg):
        path = out_cfg.get("results_path", "results/results.json")
        os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
        with open(path, "w") as f:
            json.dump(summary, f, indent=2)
        return path
