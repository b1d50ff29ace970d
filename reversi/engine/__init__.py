"""Computer opponent service."""

from .analysis import ComputerAnalysis, MoveRecommendation, move_recommendations
from .computer import ComputerOpponent

__all__ = [
    "ComputerAnalysis",
    "ComputerOpponent",
    "MoveRecommendation",
    "move_recommendations",
]
