"""Random agent implementation."""

from typing import Optional, Union

import numpy as np

from reversi.games.othello import GameState, OthelloRules, Position
from reversi.search import CancellationToken, SearchResult
from .base_agent import BaseAgent


class RandomAgent(BaseAgent):
    """Agent that picks a random legal move, optionally favouring corners."""

    def __init__(self, seed: Optional[Union[int, np.random.SeedSequence]] = None, corner_weight: float = 1.0):
        """
        Initialize random agent.

        Args:
            seed: Random seed for reproducibility
            corner_weight: Relative weight of corner moves (other moves weigh 1)
        """
        if corner_weight <= 0:
            raise ValueError("corner_weight must be positive")
        self.corner_weight = corner_weight
        self.rng = np.random.default_rng(seed)

    def choose(self, moves: list) -> Position:
        """Weighted random pick among ``moves``."""
        if not moves:
            raise ValueError("No legal actions available")
        weights = np.array([self.corner_weight if m.is_corner else 1.0 for m in moves])
        index = int(self.rng.choice(len(moves), p=weights / weights.sum()))
        return moves[index]

    def act(
        self,
        game: OthelloRules,
        state: GameState,
        cancel_token: Optional[CancellationToken] = None,
    ) -> SearchResult[Position]:
        """
        Select a random move for the side to move.

        Returns:
            SearchResult with score 0.0; the node count is the number of
            candidate moves. No move when none is legal.
        """
        moves = game.legal_moves(state)
        if not moves:
            return SearchResult(move=None, score=0.0, nodes=0)
        return SearchResult(move=self.choose(moves), score=0.0, nodes=len(moves))
