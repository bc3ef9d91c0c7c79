import json
from pathlib import Path

import pytest

from config import DEFAULT_CONFIG, load_config, merge_defaults, validate_config


def test_load_config(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"cache": {"policy": "LFU", "capacity": 3}}))
    assert load_config(str(path)) == {"cache": {"policy": "LFU", "capacity": 3}}


def test_merge_defaults_fills_missing_keys():
    cfg = merge_defaults({"benchmark": {"num_samples": 5}})
    assert cfg["benchmark"]["num_samples"] == 5
    assert cfg["benchmark"]["max_value"] == DEFAULT_CONFIG["benchmark"]["max_value"]
    assert cfg["cache"] == DEFAULT_CONFIG["cache"]
    assert cfg["cache"] is not DEFAULT_CONFIG["cache"]


def test_validate_normalizes_policy():
    cfg = validate_config({"cache": {"policy": "lru", "capacity": 2}})
    assert cfg["cache"]["policy"] == "LRU"


def test_validate_accepts_shipped_config():
    cfg = validate_config(load_config(str(Path(__file__).parent.parent / "config.json")))
    assert cfg["cache"]["policy"] in ("none", "LRU", "LFU")


@pytest.mark.parametrize(
    "cfg, field",
    [
        ({"cache": {"policy": "MRU"}}, "Unknown cache policy"),
        ({"cache": {"capacity": -1}}, "CAPACITY"),
        ({"cache": {"capacity": 1.5}}, "CAPACITY"),
        ({"benchmark": {"min_value": 0}}, "MIN_VALUE"),
        ({"benchmark": {"min_value": -4}}, "MIN_VALUE"),
        ({"benchmark": {"min_value": 10, "max_value": 9}}, "MAX_VALUE"),
        ({"benchmark": {"num_samples": -1}}, "NUM_SAMPLES"),
        ({"benchmark": {"num_samples": True}}, "NUM_SAMPLES"),
        ({"benchmark": {"random_seed": "abc"}}, "RANDOM_SEED"),
        ([1, 2], "CONFIG must be an object"),
        ({"cache": 5}, "CACHE must be an object"),
        ({"cache": "LRU"}, "CACHE must be an object"),
        ({"benchmark": 0}, "BENCHMARK must be an object"),
        ({"cache": {"policy": None, "capacity": 2}}, "Unknown cache policy"),
    ],
)
def test_validate_rejects(cfg, field):
    with pytest.raises(ValueError, match=field):
        validate_config(cfg)


def test_validate_allows_single_value_range():
    cfg = validate_config({"benchmark": {"min_value": 7, "max_value": 7}})
    assert cfg["benchmark"]["min_value"] == 7


def test_validate_allows_null_section():
    cfg = validate_config({"output": None})
    assert cfg["output"] == DEFAULT_CONFIG["output"]
