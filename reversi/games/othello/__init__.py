"""Othello rules package."""

from .board import Board
from .eval import EvalWeights, PositionAnalysis, analyze_position, evaluate_position
from .game import OthelloRules
from .move import Move, MoveHistory, MoveResult
from .player import PlayerInfo, PlayerKind, SkillTier
from .position import ALL_POSITIONS, CORNERS, EDGES, Position
from .state import GamePhase, GameState
from .types import CellState, Score, Seat
from .utils import OTHELLO_SIZE
from ...registry import GAMES

if "othello" not in GAMES:
    GAMES.register("othello", OthelloRules)

__all__ = [
    "ALL_POSITIONS",
    "Board",
    "CORNERS",
    "CellState",
    "EDGES",
    "EvalWeights",
    "GamePhase",
    "GameState",
    "Move",
    "MoveHistory",
    "MoveResult",
    "OTHELLO_SIZE",
    "OthelloRules",
    "PlayerInfo",
    "PlayerKind",
    "Position",
    "PositionAnalysis",
    "Score",
    "Seat",
    "SkillTier",
    "analyze_position",
    "evaluate_position",
]
