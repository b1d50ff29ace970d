"""Serialization utilities for game records."""

from __future__ import annotations

import json
from dataclasses import replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

from reversi.games.othello import (
    Board,
    GamePhase,
    GameState,
    Move,
    OthelloRules,
    PlayerInfo,
    PlayerKind,
    Position,
    Seat,
    SkillTier,
)

FORMAT_VERSION = 1


def _player_to_dict(info: PlayerInfo) -> Dict[str, Any]:
    return {"kind": info.kind.value, "tier": info.tier.value if info.tier is not None else None}


def _player_from_dict(seat: Seat, data: Dict[str, Any]) -> PlayerInfo:
    tier = data.get("tier")
    return PlayerInfo(
        seat=seat,
        kind=PlayerKind(data.get("kind", PlayerKind.HUMAN.value)),
        tier=SkillTier(tier) if tier is not None else None,
    )


def state_to_dict(state: GameState) -> Dict[str, Any]:
    """
    Convert a game state to a JSON-compatible dict.

    The move list is the source of truth; the board, seat and phase are
    stored as well so a restored record can be checked against its replay.
    """
    return {
        "version": FORMAT_VERSION,
        "game_id": state.game_id,
        "start_time": state.start_time,
        "start_board": state.start_board.to_rows(),
        "board": state.board.to_rows(),
        "current_seat": state.current_seat.name,
        "phase": state.phase.value,
        "players": {
            "dark": _player_to_dict(state.dark_info),
            "light": _player_to_dict(state.light_info),
        },
        "moves": [
            {"position": m.position.algebraic, "seat": m.seat.name, "timestamp": m.timestamp}
            for m in state.history
        ],
    }


def state_from_dict(data: Dict[str, Any], game: Optional[OthelloRules] = None) -> GameState:
    """
    Rebuild a game state by replaying its recorded moves.

    Raises:
        ValueError: If the record is malformed or its replay disagrees with
            the stored board, seat or phase.
    """
    game = game or OthelloRules()
    try:
        version = data.get("version", FORMAT_VERSION)
        if version != FORMAT_VERSION:
            raise ValueError(f"Unsupported game record version: {version}")

        start_board = Board.from_rows(data["start_board"])
        stored_board = Board.from_rows(data["board"])
        dark_info = _player_from_dict(Seat.DARK, data["players"]["dark"])
        light_info = _player_from_dict(Seat.LIGHT, data["players"]["light"])

        moves = []
        for entry in data["moves"]:
            position = Position.from_algebraic(entry["position"])
            if position is None:
                raise ValueError(f"Bad move position: {entry['position']!r}")
            moves.append(Move(position, Seat[entry["seat"]], float(entry["timestamp"])))

        current_seat = Seat[data["current_seat"]]
        phase = GamePhase(data["phase"])
        game_id = str(data["game_id"])
        start_time = float(data["start_time"])
    except (KeyError, TypeError) as exc:
        raise ValueError(f"Malformed game record: {exc}") from exc

    first_seat = moves[0].seat if moves else current_seat
    replayed = game.replay(moves, start_board, dark_info, light_info, first_seat)
    if replayed is None:
        raise ValueError("Game record contains an illegal move sequence")
    if replayed.board != stored_board:
        raise ValueError("Stored board does not match the replayed moves")
    if replayed.current_seat is not current_seat or replayed.phase is not phase:
        raise ValueError("Stored turn or phase does not match the replayed moves")
    return replace(replayed, game_id=game_id, start_time=start_time)


def save_game(state: GameState, path: Union[str, Path]) -> None:
    """
    Save a game record as JSON.

    Args:
        state: Game to save
        path: Path to save file
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w") as f:
        json.dump(state_to_dict(state), f, indent=2)


def load_game(path: Union[str, Path], game: Optional[OthelloRules] = None) -> GameState:
    """Load and verify a game record written by :func:`save_game`."""
    with Path(path).open() as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Game record must be a JSON object, got {type(data)}")
    return state_from_dict(data, game)
