"""
Boundary used by front ends.

Module-level functions share one rules instance and one computer-opponent
service; call :func:`configure` to swap in a different ``AppConfig``.
"""

from __future__ import annotations

import asyncio
from typing import List, Optional

from reversi.config import AppConfig
from reversi.engine import ComputerAnalysis, ComputerOpponent, MoveRecommendation
from reversi.games.othello import (
    GameState,
    Move,
    MoveResult,
    OthelloRules,
    PlayerInfo,
    Position,
    PositionAnalysis,
    Seat,
    SkillTier,
)
from reversi.registry import make_game
from reversi.utils.serialization import load_game, save_game, state_from_dict, state_to_dict

_config = AppConfig()
_rules: OthelloRules = make_game("othello", weights=_config.eval)
_computer = ComputerOpponent(_config, _rules)


def configure(config: AppConfig) -> None:
    """Replace the shared rules and computer opponent."""
    global _config, _rules, _computer
    _config = config
    _rules = make_game("othello", weights=config.eval)
    _computer = ComputerOpponent(config, _rules)


def rules() -> OthelloRules:
    return _rules


def computer() -> ComputerOpponent:
    return _computer


def new_game(dark_info: Optional[PlayerInfo] = None, light_info: Optional[PlayerInfo] = None) -> GameState:
    return _rules.new_game(dark_info, light_info)


def legal_moves(state: GameState) -> List[Position]:
    return _rules.legal_moves(state)


def is_legal_move(move: Move, state: GameState) -> bool:
    return _rules.is_legal_move(move, state)


def apply_move(move: Move, state: GameState) -> Optional[MoveResult]:
    return _rules.apply_move(move, state)


async def request_computer_move(
    state: GameState,
    seat: Optional[Seat] = None,
    tier: Optional[SkillTier] = None,
) -> Optional[Position]:
    return await _computer.request_move(state, seat, tier)


async def cancel_computer_move(game_id: str) -> bool:
    return await _computer.cancel(game_id)


def evaluate(state: GameState, seat: Seat) -> float:
    return _rules.evaluate(state, seat)


def analyze_position(state: GameState) -> PositionAnalysis:
    return _rules.analyze_position(state)


def move_recommendations(state: GameState, seat: Optional[Seat] = None) -> List[MoveRecommendation]:
    """Every legal move of ``seat`` scored by its resulting position, best first."""
    return _computer.move_recommendations(state, seat)


async def analyze_computer_move(state: GameState, tier: SkillTier) -> ComputerAnalysis:
    """What ``tier`` would play for the side to move; the search runs off the event loop."""
    return await asyncio.to_thread(_computer.analyze, state, tier)


def replay(moves: List[Move], start_state: Optional[GameState] = None) -> Optional[GameState]:
    """Replay ``moves`` from the start of ``start_state`` (default: a new standard game)."""
    if start_state is None:
        return _rules.replay(moves)
    return _rules.replay(moves, start_state.start_board, start_state.dark_info, start_state.light_info)


__all__ = [
    "analyze_computer_move",
    "analyze_position",
    "apply_move",
    "cancel_computer_move",
    "computer",
    "configure",
    "evaluate",
    "is_legal_move",
    "legal_moves",
    "load_game",
    "move_recommendations",
    "new_game",
    "replay",
    "request_computer_move",
    "rules",
    "save_game",
    "state_from_dict",
    "state_to_dict",
]
