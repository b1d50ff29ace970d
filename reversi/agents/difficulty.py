"""Skill tiers: how strong and how slow each computer opponent is."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, Mapping, Optional, Tuple

import numpy as np

from reversi.games.othello import EvalWeights, SkillTier
from .base_agent import BaseAgent
from .minimax_agent import MinimaxAgent
from .random_agent import RandomAgent


@dataclass(frozen=True)
class TierProfile:
    """
    Behaviour of one skill tier.

    Attributes:
        search_depth: Minimax depth; None means no search (weighted random pick).
        thinking_time: (min, max) seconds of artificial delay before searching.
        randomness: Probability a searching tier plays the weighted random pick.
        time_limit_s: Search time budget; enables iterative deepening.
        corner_weight: Weight of corner moves in the random pick (others weigh 1).
    """

    search_depth: Optional[int]
    thinking_time: Tuple[float, float]
    randomness: float = 0.0
    time_limit_s: Optional[float] = None
    corner_weight: float = 3.0

    def __post_init__(self) -> None:
        low, high = self.thinking_time
        if low < 0 or high < low:
            raise ValueError(f"Invalid thinking_time range: {self.thinking_time}")
        if self.search_depth is not None and self.search_depth < 1:
            raise ValueError("search_depth must be >= 1 or None")
        if not 0.0 <= self.randomness <= 1.0:
            raise ValueError("randomness must be within [0, 1]")

    @property
    def searches(self) -> bool:
        return self.search_depth is not None

    def sample_thinking_time(self, rng: np.random.Generator) -> float:
        low, high = self.thinking_time
        return float(rng.uniform(low, high)) if high > low else float(low)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], base: Optional["TierProfile"] = None) -> "TierProfile":
        """Build a profile from config data; missing keys come from ``base``."""
        values: Dict[str, Any] = {}
        if "search_depth" in data:
            depth = data["search_depth"]
            values["search_depth"] = None if depth is None else int(depth)
        if "thinking_time" in data:
            low, high = data["thinking_time"]
            values["thinking_time"] = (float(low), float(high))
        if "randomness" in data:
            values["randomness"] = float(data["randomness"])
        if "time_limit_s" in data:
            limit = data["time_limit_s"]
            values["time_limit_s"] = None if limit is None else float(limit)
        if "corner_weight" in data:
            values["corner_weight"] = float(data["corner_weight"])

        if base is not None:
            return replace(base, **values)
        if "search_depth" not in values or "thinking_time" not in values:
            raise ValueError("Tier profile needs search_depth and thinking_time")
        return cls(**values)


DEFAULT_TIER_PROFILES: Dict[SkillTier, TierProfile] = {
    SkillTier.EASY: TierProfile(search_depth=None, thinking_time=(0.5, 1.5)),
    SkillTier.MEDIUM: TierProfile(search_depth=3, thinking_time=(1.0, 3.0)),
    SkillTier.HARD: TierProfile(search_depth=5, thinking_time=(2.0, 5.0), time_limit_s=10.0),
}


def make_tier_agent(
    tier: SkillTier,
    profiles: Optional[Mapping[SkillTier, TierProfile]] = None,
    weights: Optional[EvalWeights] = None,
    seed: Optional[int] = None,
    iterative_deepening: bool = True,
) -> BaseAgent:
    """
    Create the move selector for ``tier``.

    Args:
        tier: Requested skill tier.
        profiles: Tier table (default: ``DEFAULT_TIER_PROFILES``).
        weights: Evaluation weights for searching tiers.
        seed: Seed for the random choices.
        iterative_deepening: Deepen 1..N under the tier time budget instead of
            searching the full depth at once.

    Returns:
        RandomAgent for tiers without search, MinimaxAgent otherwise.
    """
    profile = (profiles or DEFAULT_TIER_PROFILES)[tier]
    if not profile.searches:
        return RandomAgent(seed=seed, corner_weight=profile.corner_weight)
    return MinimaxAgent(
        depth=profile.search_depth,
        iterative_deepening=iterative_deepening and profile.time_limit_s is not None,
        time_limit_s=profile.time_limit_s,
        weights=weights,
        randomness=profile.randomness,
        corner_weight=profile.corner_weight,
        seed=seed,
    )
