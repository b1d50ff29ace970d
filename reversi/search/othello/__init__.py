"""Othello-specific search policies and value functions."""

from .heuristic_value_fn import OthelloHeuristicValueFn
from .heuristic_minimax import make_othello_heuristic_minimax_policy

__all__ = [
    "OthelloHeuristicValueFn",
    "make_othello_heuristic_minimax_policy",
]
