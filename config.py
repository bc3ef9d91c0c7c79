# config.py
import json

from benchmark import Policy

DEFAULT_CONFIG = {
    "benchmark": {
        "num_samples": 20,
        "min_value": 1,
        "max_value": 1000,
        "random_seed": None,
    },
    "cache": {
        "policy": "none",
        "capacity": 0,
    },
    "output": {
        "results_path": "results/results.json",
        "steps_plot": "results/steps_distribution.png",
        "hitmiss_plot": "results/hit_miss_rate.png",
    },
}


def load_config(path="config.json"):
    with open(path, "r") as f:
        return json.load(f)


def merge_defaults(cfg):
    """Fill every missing section/key from DEFAULT_CONFIG. Returns a new dict."""
    if not isinstance(cfg, dict):
        raise ValueError("CONFIG must be an object.")
    merged = {}
    for section, defaults in DEFAULT_CONFIG.items():
        values = cfg.get(section)
        if values is None:
            values = {}
        if not isinstance(values, dict):
            raise ValueError(f"{section.upper()} must be an object.")
        merged[section] = dict(defaults)
        merged[section].update(values)
    return merged


def _is_int(value):
    return isinstance(value, int) and not isinstance(value, bool)


def validate_config(cfg):
    """
    Reject settings the sampling loop cannot run with and normalize the
    policy name. Raises ValueError naming the offending field.
    """
    cfg = merge_defaults(cfg)
    bench = cfg["benchmark"]
    cache = cfg["cache"]

    if not _is_int(bench["num_samples"]) or bench["num_samples"] < 0:
        raise ValueError("NUM_SAMPLES must be a non-negative integer.")
    # collatz_steps never terminates below 1
    if not _is_int(bench["min_value"]) or bench["min_value"] < 1:
        raise ValueError("MIN_VALUE must be a positive integer.")
    if not _is_int(bench["max_value"]) or bench["max_value"] < bench["min_value"]:
        raise ValueError("MAX_VALUE must be an integer no smaller than MIN_VALUE.")
    seed = bench["random_seed"]
    if seed is not None and (not _is_int(seed) or seed < 0):
        raise ValueError("RANDOM_SEED must be a non-negative integer or null.")

    cache["policy"] = Policy.from_name(cache["policy"]).value
    if not _is_int(cache["capacity"]) or cache["capacity"] < 0:
        raise ValueError("CAPACITY must be a non-negative integer.")

    return cfg
