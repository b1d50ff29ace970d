"""Configuration schema for the engine, the computer opponent and the CLIs."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from reversi.agents.difficulty import DEFAULT_TIER_PROFILES, TierProfile
from reversi.games.othello import EvalWeights, SkillTier


@dataclass
class SearchSettings:
    iterative_deepening: bool = True
    apply_thinking_time: bool = True
    # Granularity of the cancellable thinking-time sleep.
    pacing_slice_s: float = 0.05


@dataclass
class AppConfig:
    eval: EvalWeights = field(default_factory=EvalWeights)
    tiers: Dict[SkillTier, TierProfile] = field(default_factory=lambda: dict(DEFAULT_TIER_PROFILES))
    search: SearchSettings = field(default_factory=SearchSettings)
    log_level: str = "INFO"
    seed: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        weights = EvalWeights.from_dict(data.get("eval"))

        tiers = dict(DEFAULT_TIER_PROFILES)
        for name, tier_data in (data.get("tiers") or {}).items():
            try:
                tier = SkillTier(str(name).lower())
            except ValueError:
                raise ValueError(f"Unknown skill tier '{name}'") from None
            tiers[tier] = TierProfile.from_dict(tier_data or {}, base=tiers[tier])

        search_data = data.get("search") or {}
        search = SearchSettings(
            iterative_deepening=bool(search_data.get("iterative_deepening", True)),
            apply_thinking_time=bool(search_data.get("apply_thinking_time", True)),
            pacing_slice_s=float(search_data.get("pacing_slice_s", 0.05)),
        )
        if search.pacing_slice_s <= 0:
            raise ValueError("search.pacing_slice_s must be positive")

        seed = data.get("seed")
        if seed is not None:
            seed = int(seed)

        return cls(
            eval=weights,
            tiers=tiers,
            search=search,
            log_level=str(data.get("log_level", "INFO")).upper(),
            seed=seed,
        )


def load_config(path: Union[str, Path]) -> AppConfig:
    """Load AppConfig from a YAML file."""
    path = Path(path)
    with path.open() as f:
        data = yaml.safe_load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Config must be a YAML mapping, got {type(data)}")
    return AppConfig.from_dict(data)
