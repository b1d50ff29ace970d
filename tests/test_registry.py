"""Tests for game and agent registries."""

from __future__ import annotations

import pytest

from reversi.agents import MinimaxAgent, RandomAgent, TierProfile
from reversi.config import AppConfig
from reversi.games.othello import EvalWeights, OthelloRules, SkillTier
from reversi.registry import AGENTS, GAMES, Registry, make_agent, make_game
from reversi.cli.play_agent_vs_agent import build_agent


class _Rules:
    def __init__(self, size: int, strict: bool = False) -> None:
        self.size = size
        self.strict = strict


def test_registry_defaults_and_overrides():
    registry = Registry("variant")
    registry.register("small", _Rules, size=6)

    assert "small" in registry
    assert registry.names() == ("small",)

    rules = registry.make("small", strict=True)
    assert (rules.size, rules.strict) == (6, True)

    factory, defaults = registry.entry("small")
    assert factory is _Rules
    defaults["size"] = 10
    assert registry.make("small").size == 6


def test_registry_rejects_duplicates_and_unknown_ids():
    registry = Registry("variant")
    registry.register("small", _Rules, size=6)
    with pytest.raises(ValueError):
        registry.register("small", _Rules)
    with pytest.raises(KeyError, match="small"):
        registry.make("large")


def test_default_ids_are_registered():
    assert "othello" in GAMES
    assert {"random", "minimax", "easy", "medium", "hard"}.issubset(set(AGENTS.names()))
    assert GAMES.entry("othello") == (OthelloRules, {})
    assert AGENTS.entry("random")[0] is RandomAgent


def test_default_entries_build_working_objects():
    rules = make_game("othello", weights=EvalWeights(mobility=0.0))
    assert isinstance(rules, OthelloRules)
    assert rules.weights.mobility == 0.0

    assert isinstance(make_agent("random", seed=1), RandomAgent)
    assert make_agent("minimax", depth=2).depth == 2


def test_tier_ids_follow_the_given_profiles():
    profiles = {tier: TierProfile(search_depth=2, thinking_time=(0.0, 0.0)) for tier in SkillTier}
    profiles[SkillTier.EASY] = TierProfile(search_depth=None, thinking_time=(0.0, 0.0))

    assert isinstance(make_agent("easy", profiles=profiles), RandomAgent)
    hard = make_agent("hard", profiles=profiles)
    assert isinstance(hard, MinimaxAgent)
    assert hard.depth == 2
    assert make_agent("medium").depth == 3


def test_cli_builds_agents_by_id():
    cfg = AppConfig()
    assert build_agent("hard", cfg, seed=0).depth == 5
    assert isinstance(build_agent("random", cfg, seed=0), RandomAgent)
    assert build_agent("minimax", cfg).policy.value_fn.weights == cfg.eval
    with pytest.raises(KeyError):
        build_agent("grandmaster", cfg)


def test_make_missing_entries():
    with pytest.raises(KeyError):
        make_game("missing_game")
    with pytest.raises(KeyError):
        make_agent("missing_agent")
