"""Agent backed by the heuristic minimax search."""

from __future__ import annotations

from typing import Optional

import numpy as np

from reversi.games.othello import EvalWeights, GameState, OthelloRules, Position
from reversi.search import CancellationToken, MinimaxPolicy, SearchResult
from reversi.search.othello import make_othello_heuristic_minimax_policy
from .base_agent import BaseAgent
from .random_agent import RandomAgent


class MinimaxAgent(BaseAgent):
    """
    Searches with alpha-beta minimax over the positional evaluation.

    With ``randomness`` > 0 the agent plays a corner-weighted random move
    with that probability instead of searching.
    """

    def __init__(
        self,
        depth: int = 3,
        use_alpha_beta: bool = True,
        iterative_deepening: bool = False,
        time_limit_s: Optional[float] = None,
        weights: Optional[EvalWeights] = None,
        randomness: float = 0.0,
        corner_weight: float = 3.0,
        seed: Optional[int] = None,
        policy: Optional[MinimaxPolicy[GameState, Position]] = None,
    ) -> None:
        if depth < 1:
            raise ValueError("Minimax depth must be >= 1")
        if not 0.0 <= randomness <= 1.0:
            raise ValueError("randomness must be within [0, 1]")
        self.policy = policy or make_othello_heuristic_minimax_policy(
            depth=depth,
            use_alpha_beta=use_alpha_beta,
            iterative_deepening=iterative_deepening,
            time_limit_s=time_limit_s,
            weights=weights,
        )
        self.randomness = randomness
        # Separate streams for the branch draw and the random pick.
        branch_seed, pick_seed = np.random.SeedSequence(seed).spawn(2)
        self.rng = np.random.default_rng(branch_seed)
        self._random = RandomAgent(seed=pick_seed, corner_weight=corner_weight)

    @property
    def depth(self) -> int:
        return self.policy.config.depth

    def act(
        self,
        game: OthelloRules,
        state: GameState,
        cancel_token: Optional[CancellationToken] = None,
    ) -> SearchResult[Position]:
        if self.randomness > 0.0 and self.rng.random() < self.randomness:
            return self._random.act(game, state, cancel_token)

        legal = game.legal_moves(state)
        result = self.policy.search(
            game,
            state,
            root_player=state.current_seat.token,
            cancel_token=cancel_token,
            legal_actions=legal,
        )
        # Deadline hit before the first root move finished: fall back to scan order.
        if result.move is None and legal and not (cancel_token is not None and cancel_token.cancelled):
            result.move = legal[0]
        return result
