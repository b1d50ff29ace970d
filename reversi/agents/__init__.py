"""Agent modules."""

from functools import partial

from reversi.games.othello import SkillTier
from .base_agent import BaseAgent
from .random_agent import RandomAgent
from .minimax_agent import MinimaxAgent
from .difficulty import DEFAULT_TIER_PROFILES, TierProfile, make_tier_agent
from ..registry import AGENTS

if "random" not in AGENTS:
    AGENTS.register("random", RandomAgent)
if "minimax" not in AGENTS:
    AGENTS.register("minimax", MinimaxAgent)
# Skill tiers are registered under their value ("easy", "medium", "hard").
for _tier in SkillTier:
    if _tier.value not in AGENTS:
        AGENTS.register(_tier.value, partial(make_tier_agent, _tier))

__all__ = [
    "BaseAgent",
    "RandomAgent",
    "MinimaxAgent",
    "TierProfile",
    "DEFAULT_TIER_PROFILES",
    "make_tier_agent",
]
