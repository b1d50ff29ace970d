"""Heuristic minimax policy for Othello."""

from __future__ import annotations

from typing import Optional

from reversi.games.othello import EvalWeights, GameState, Position
from ..minimax_policy import MinimaxConfig, MinimaxPolicy
from .heuristic_value_fn import OthelloHeuristicValueFn


def make_othello_heuristic_minimax_policy(
    *,
    depth: int = 3,
    use_alpha_beta: bool = True,
    iterative_deepening: bool = False,
    time_limit_s: Optional[float] = None,
    weights: Optional[EvalWeights] = None,
) -> MinimaxPolicy[GameState, Position]:
    config = MinimaxConfig(
        depth=depth,
        use_alpha_beta=use_alpha_beta,
        iterative_deepening=iterative_deepening,
        time_limit_s=time_limit_s,
    )
    return MinimaxPolicy[GameState, Position](
        value_fn=OthelloHeuristicValueFn(weights),
        config=config,
    )
