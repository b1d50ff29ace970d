"""Othello game rules (immutable state, for search algorithms)."""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from reversi.games.turn_based_game import TurnBasedGame
from .board import Board
from .eval import DEFAULT_WEIGHTS, EvalWeights, PositionAnalysis, analyze_position, evaluate_position
from .move import Move, MoveResult
from .player import PlayerInfo
from .position import Position
from .state import GamePhase, GameState
from .types import Seat


class OthelloRules(TurnBasedGame[GameState, Position]):
    """
    Pure Othello rules without any front end: only state transitions and analysis.

    Illegal requests never raise; they return None (or an empty list) and leave
    the given state untouched.
    """

    def __init__(self, weights: Optional[EvalWeights] = None) -> None:
        self.weights = weights or DEFAULT_WEIGHTS

    # ------------------------------------------------------------------ construction

    def new_game(
        self,
        dark_info: Optional[PlayerInfo] = None,
        light_info: Optional[PlayerInfo] = None,
    ) -> GameState:
        """Standard opening position with dark to move."""
        dark_info, light_info = self._check_players(dark_info, light_info)
        board = Board.initial()
        return GameState(
            board=board,
            current_seat=Seat.DARK,
            phase=GamePhase.IN_PROGRESS,
            dark_info=dark_info,
            light_info=light_info,
            start_board=board,
        )

    def initial_state(self) -> GameState:
        return self.new_game()

    def from_board(
        self,
        board: Board,
        current_seat: Seat = Seat.DARK,
        phase: Optional[GamePhase] = None,
        dark_info: Optional[PlayerInfo] = None,
        light_info: Optional[PlayerInfo] = None,
    ) -> GameState:
        """
        Build a state around an arbitrary board.

        When ``phase`` is omitted it is derived from the board: ``current_seat``
        keeps the move if it can play, otherwise the opponent gets it, and the
        game is finished when neither side can play.
        """
        dark_info, light_info = self._check_players(dark_info, light_info)
        if phase is None:
            if board.has_legal_move(current_seat):
                phase = GamePhase.IN_PROGRESS
            elif board.has_legal_move(current_seat.opposite):
                current_seat = current_seat.opposite
                phase = GamePhase.IN_PROGRESS
            else:
                phase = GamePhase.FINISHED
        return GameState(
            board=board,
            current_seat=current_seat,
            phase=phase,
            dark_info=dark_info,
            light_info=light_info,
            start_board=board,
        )

    @staticmethod
    def _check_players(dark_info: Optional[PlayerInfo], light_info: Optional[PlayerInfo]):
        dark_info = dark_info or PlayerInfo.human(Seat.DARK)
        light_info = light_info or PlayerInfo.human(Seat.LIGHT)
        if dark_info.seat is not Seat.DARK or light_info.seat is not Seat.LIGHT:
            raise ValueError(
                f"Player seats must be (DARK, LIGHT), got ({dark_info.seat.name}, {light_info.seat.name})"
            )
        return dark_info, light_info

    # ------------------------------------------------------------------ TurnBasedGame

    def legal_actions(self, state: GameState) -> Sequence[Position]:
        return state.available_moves

    def apply_action(self, state: GameState, action: Position) -> Optional[GameState]:
        return state.applying_move(Move(action, state.current_seat))

    def current_player(self, state: GameState) -> int:
        return state.current_seat.token

    def is_terminal(self, state: GameState) -> bool:
        return self.is_game_over(state)

    def winner(self, state: GameState) -> Optional[int]:
        if not self.is_game_over(state):
            return None
        leader = state.score.leader
        return leader.token if leader is not None else 0

    def pass_turn(self, state: GameState) -> GameState:
        return state.switching_player()

    # ------------------------------------------------------------------ moves

    def legal_moves(self, state: GameState, seat: Optional[Seat] = None) -> List[Position]:
        """Legal placements for ``seat`` (default: side to move); empty once finished."""
        if state.phase is GamePhase.FINISHED:
            return []
        return state.board.legal_moves(seat or state.current_seat)

    def is_legal_move(self, move: Move, state: GameState) -> bool:
        """Only the side to move may play, and only while the game is in progress."""
        if state.phase is not GamePhase.IN_PROGRESS:
            return False
        if move.seat is not state.current_seat or not move.position.is_valid:
            return False
        return state.board.is_legal_move(move.position, move.seat)

    def apply_move(self, move: Move, state: GameState) -> Optional[MoveResult]:
        """Play ``move``; None (state untouched) for a wrong seat, finished game, or non-capturing target."""
        resolved = state.resolving_move(move)
        if resolved is None:
            return None
        new_state, captured = resolved
        return MoveResult(move=move, captured=tuple(captured), state=new_state)

    def captured_positions(self, move: Move, state: GameState) -> List[Position]:
        if not move.position.is_valid:
            return []
        return state.board.captured_positions(move.seat, move.position)

    # ------------------------------------------------------------------ game flow

    def is_game_over(self, state: GameState) -> bool:
        if state.phase is GamePhase.FINISHED:
            return True
        board = state.board
        return not board.has_legal_move(Seat.DARK) and not board.has_legal_move(Seat.LIGHT)

    def winning_seat(self, state: GameState) -> Optional[Seat]:
        """Seat with strictly more pieces once the game is over; None on a tie or mid-game."""
        if not self.is_game_over(state):
            return None
        return state.score.leader

    def has_legal_moves(self, seat: Seat, state: GameState) -> bool:
        if state.phase is GamePhase.FINISHED:
            return False
        return state.board.has_legal_move(seat)

    def next_turn(self, state: GameState) -> GameState:
        """Resolve a pass: opponent if it can move, else the same seat, else finish."""
        return state.switching_player()

    # ------------------------------------------------------------------ analysis

    def evaluate(self, state: GameState, seat: Seat) -> float:
        return evaluate_position(state, seat, self.weights)

    def analyze_position(self, state: GameState) -> PositionAnalysis:
        return analyze_position(state, self.weights)

    def replay(
        self,
        moves: Iterable[Move],
        start_board: Optional[Board] = None,
        dark_info: Optional[PlayerInfo] = None,
        light_info: Optional[PlayerInfo] = None,
        first_seat: Optional[Seat] = None,
    ) -> Optional[GameState]:
        """
        Re-apply ``moves`` from ``start_board`` (default: standard opening).

        ``first_seat`` is the seat to move on ``start_board``; it defaults to
        the seat of the first move (dark for an empty list).

        Returns:
            The resulting state, or None as soon as a move is rejected.
        """
        moves = list(moves)
        if first_seat is None:
            first_seat = moves[0].seat if moves else Seat.DARK
        if start_board is None:
            state = self.new_game(dark_info, light_info)
        else:
            state = self.from_board(start_board, first_seat, dark_info=dark_info, light_info=light_info)
        for move in moves:
            next_state = state.applying_move(move)
            if next_state is None:
                return None
            state = next_state
        return state

    def validate_state(self, state: GameState) -> List[str]:
        """
        Report inconsistencies in ``state``; an empty list means it is sound.

        Diagnostic only: checks the history replay, piece counts and the phase
        against the moves actually available on the board.
        """
        issues: List[str] = []
        board = state.board
        dark_can_move = board.has_legal_move(Seat.DARK)
        light_can_move = board.has_legal_move(Seat.LIGHT)

        expected_total = state.start_board.score.total + len(state.history)
        if state.score.total != expected_total:
            issues.append(
                f"Piece count {state.score.total} does not match {len(state.history)} moves "
                f"from a start of {state.start_board.score.total}"
            )

        replayed = self.replay(state.history, state.start_board, state.dark_info, state.light_info)
        if replayed is None:
            issues.append("Move history does not replay from the start board")
        elif replayed.board != board:
            issues.append(f"Replayed board ({replayed.score}) differs from state board ({state.score})")

        if state.phase is GamePhase.FINISHED and (dark_can_move or light_can_move):
            issues.append("Game marked as finished but moves are still available")
        if state.phase is GamePhase.IN_PROGRESS:
            if not dark_can_move and not light_can_move:
                issues.append("Game marked as in progress but neither seat can move")
            elif not board.has_legal_move(state.current_seat):
                issues.append(f"{state.current_seat.display_name} is to move but has no legal move")

        if state.dark_info.seat is not Seat.DARK or state.light_info.seat is not Seat.LIGHT:
            issues.append("Player info seats are swapped")
        return issues
