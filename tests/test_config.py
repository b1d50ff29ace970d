"""Tests for configuration schemas."""

from __future__ import annotations

from pathlib import Path

import pytest

from reversi.agents import DEFAULT_TIER_PROFILES
from reversi.config import AppConfig, load_config
from reversi.games.othello import EvalWeights, SkillTier

DEFAULT_YAML = Path(__file__).resolve().parent.parent / "configs" / "default.yaml"


def test_app_config_parsing():
    data = {
        "log_level": "debug",
        "seed": "7",
        "eval": {"corners": 50, "mobility": 0},
        "tiers": {
            "MEDIUM": {"search_depth": 4, "randomness": 0.25},
            "easy": {"thinking_time": [0, 0.1], "corner_weight": 5},
        },
        "search": {"apply_thinking_time": False, "pacing_slice_s": 0.01},
    }

    cfg = AppConfig.from_dict(data)
    assert cfg.log_level == "DEBUG"
    assert cfg.seed == 7
    assert cfg.eval == EvalWeights(mobility=0.0, corners=50.0)

    medium = cfg.tiers[SkillTier.MEDIUM]
    assert medium.search_depth == 4
    assert medium.randomness == 0.25
    assert medium.thinking_time == DEFAULT_TIER_PROFILES[SkillTier.MEDIUM].thinking_time

    easy = cfg.tiers[SkillTier.EASY]
    assert easy.thinking_time == (0.0, 0.1)
    assert easy.corner_weight == 5.0
    assert not easy.searches

    assert cfg.tiers[SkillTier.HARD] == DEFAULT_TIER_PROFILES[SkillTier.HARD]
    assert cfg.search.apply_thinking_time is False
    assert cfg.search.iterative_deepening is True
    assert cfg.search.pacing_slice_s == 0.01


def test_empty_mapping_gives_defaults():
    assert AppConfig.from_dict({}) == AppConfig()


def test_default_yaml_matches_builtin_defaults():
    assert load_config(DEFAULT_YAML) == AppConfig()


def test_load_config_from_file(tmp_path):
    path = tmp_path / "cfg.yaml"
    path.write_text("tiers:\n  hard:\n    search_depth: 6\n    time_limit_s: null\nseed: 3\n")

    cfg = load_config(path)
    assert cfg.seed == 3
    assert cfg.tiers[SkillTier.HARD].search_depth == 6
    assert cfg.tiers[SkillTier.HARD].time_limit_s is None


def test_load_config_rejects_non_mapping(tmp_path):
    path = tmp_path / "cfg.yaml"
    path.write_text("- just\n- a list\n")
    with pytest.raises(ValueError):
        load_config(path)


@pytest.mark.parametrize(
    "data",
    [
        {"tiers": {"impossible": {"search_depth": 9}}},
        {"eval": {"parity": 3}},
        {"tiers": {"medium": {"search_depth": 0}}},
        {"tiers": {"easy": {"thinking_time": [2.0, 1.0]}}},
        {"tiers": {"hard": {"randomness": 1.5}}},
        {"search": {"pacing_slice_s": 0}},
    ],
)
def test_invalid_config_raises(data):
    with pytest.raises(ValueError):
        AppConfig.from_dict(data)
