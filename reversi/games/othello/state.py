"""Othello game state."""

from __future__ import annotations

import time
import uuid
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import List, Optional, Tuple

from .board import Board
from .move import Move, MoveHistory
from .player import PlayerInfo
from .position import Position
from .types import Score, Seat


class GamePhase(str, Enum):
    IN_PROGRESS = "in_progress"
    FINISHED = "finished"


def resolve_turn(board: Board, mover: Seat) -> Tuple[Seat, GamePhase]:
    """
    Decide who moves next after ``mover`` has acted on ``board``.

    The opponent moves if it can; otherwise ``mover`` moves again if it can;
    otherwise the game is over (seat stays with ``mover``).
    """
    opponent = mover.opposite
    if board.has_legal_move(opponent):
        return opponent, GamePhase.IN_PROGRESS
    if board.has_legal_move(mover):
        return mover, GamePhase.IN_PROGRESS
    return mover, GamePhase.FINISHED


@dataclass(frozen=True)
class GameState:
    """
    Immutable snapshot of a game.

    ``start_board`` is the board the history replays from; it is the standard
    opening for every game created through ``OthelloRules.new_game``.
    """

    board: Board
    current_seat: Seat = Seat.DARK
    phase: GamePhase = GamePhase.IN_PROGRESS
    history: MoveHistory = field(default_factory=MoveHistory)
    dark_info: PlayerInfo = field(default_factory=lambda: PlayerInfo.human(Seat.DARK))
    light_info: PlayerInfo = field(default_factory=lambda: PlayerInfo.human(Seat.LIGHT))
    game_id: str = field(default_factory=lambda: uuid.uuid4().hex)
    start_time: float = field(default_factory=time.time)
    start_board: Board = field(default_factory=Board.initial)

    # ------------------------------------------------------------------ derived

    @property
    def score(self) -> Score:
        return self.board.score

    @property
    def available_moves(self) -> List[Position]:
        if self.phase is GamePhase.FINISHED:
            return []
        return self.board.legal_moves(self.current_seat)

    @property
    def has_available_moves(self) -> bool:
        if self.phase is GamePhase.FINISHED:
            return False
        return self.board.has_legal_move(self.current_seat)

    @property
    def is_game_over(self) -> bool:
        return self.phase is GamePhase.FINISHED

    @property
    def winner(self) -> Optional[Seat]:
        """Seat with strictly more pieces once the game is finished."""
        if not self.is_game_over:
            return None
        return self.score.leader

    @property
    def is_tied(self) -> bool:
        return self.is_game_over and self.score.is_tied

    def player_info(self, seat: Seat) -> PlayerInfo:
        return self.dark_info if seat is Seat.DARK else self.light_info

    @property
    def current_player_info(self) -> PlayerInfo:
        return self.player_info(self.current_seat)

    @property
    def move_count(self) -> int:
        return len(self.history)

    @property
    def last_move(self) -> Optional[Move]:
        return self.history.last_move

    @property
    def duration(self) -> float:
        """Seconds since the game started."""
        return time.time() - self.start_time

    # ------------------------------------------------------------------ transitions

    def resolving_move(self, move: Move) -> Optional[Tuple["GameState", List[Position]]]:
        """
        Apply ``move`` and report the captured pieces.

        Returns:
            ``(new_state, captured)`` or None when the move is not legal here
            (wrong seat, finished game, or no capture).
        """
        if move.seat is not self.current_seat or self.phase is not GamePhase.IN_PROGRESS:
            return None
        applied = self.board.applying_move(move)
        if applied is None:
            return None
        board, captured = applied

        next_seat, phase = resolve_turn(board, move.seat)
        new_state = replace(
            self,
            board=board,
            current_seat=next_seat,
            phase=phase,
            history=self.history.appending(move),
        )
        return new_state, captured

    def applying_move(self, move: Move) -> Optional["GameState"]:
        resolved = self.resolving_move(move)
        return resolved[0] if resolved is not None else None

    def switching_player(self) -> "GameState":
        """
        Pass the turn without placing a piece.

        Uses the same resolution as a move: opponent, else the current seat
        again, else the game finishes. Finished games are returned unchanged.
        """
        if self.phase is GamePhase.FINISHED:
            return self
        next_seat, phase = resolve_turn(self.board, self.current_seat)
        if next_seat is self.current_seat and phase is self.phase:
            return self
        return replace(self, current_seat=next_seat, phase=phase)

    def __str__(self) -> str:
        status = " (finished)" if self.is_game_over else ""
        return f"Game {self.game_id[:8]}: {self.current_seat.display_name} to move{status}, {self.score}"
