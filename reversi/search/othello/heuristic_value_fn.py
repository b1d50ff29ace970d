"""Positional heuristic value function for Othello minimax."""

from __future__ import annotations

from typing import Any, Optional

from reversi.games.othello import EvalWeights, GameState, Seat, evaluate_position
from reversi.games.turn_based_game import TurnBasedGame
from ..value_fn import StateValueFn


class OthelloHeuristicValueFn(StateValueFn[GameState]):
    """
    Weighted sum of mobility, corners, edges, stability and piece count,
    computed for the root seat only (not a differential against the opponent).
    """

    def __init__(self, weights: Optional[EvalWeights] = None) -> None:
        self.weights = weights or EvalWeights()

    def evaluate(
        self,
        game: TurnBasedGame[GameState, Any],
        state: GameState,
        root_player: int,
    ) -> float:
        return evaluate_position(state, Seat(root_player), self.weights)
