"""Othello positional evaluation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Mapping, Optional, Tuple

from .board import Board
from .position import CORNERS, EDGES, Position
from .state import GamePhase, GameState
from .types import CellState, Seat

_LAST = 7

# Each corner with the two directions that walk along its edges.
_CORNER_WALKS = (
    (Position(0, 0), ((0, 1), (1, 0))),
    (Position(0, _LAST), ((0, -1), (1, 0))),
    (Position(_LAST, 0), ((-1, 0), (0, 1))),
    (Position(_LAST, _LAST), ((-1, 0), (0, -1))),
)


@dataclass(frozen=True)
class EvalWeights:
    mobility: float = 10.0
    corners: float = 100.0
    edges: float = 5.0
    stability: float = 20.0
    pieces: float = 1.0

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "EvalWeights":
        if not data:
            return cls()
        unknown = set(data) - {"mobility", "corners", "edges", "stability", "pieces"}
        if unknown:
            raise ValueError(f"Unknown evaluation weights: {sorted(unknown)}")
        return cls(**{key: float(value) for key, value in data.items()})


DEFAULT_WEIGHTS = EvalWeights()


@dataclass(frozen=True)
class PositionAnalysis:
    """Per-seat breakdown of the evaluation terms."""

    mobility: Dict[Seat, int] = field(default_factory=dict)
    corners: Dict[Seat, int] = field(default_factory=dict)
    edges: Dict[Seat, int] = field(default_factory=dict)
    stability: Dict[Seat, float] = field(default_factory=dict)
    evaluation: Dict[Seat, float] = field(default_factory=dict)

    @property
    def mobility_difference(self) -> int:
        """Dark mobility minus light mobility."""
        return self.mobility[Seat.DARK] - self.mobility[Seat.LIGHT]

    @property
    def corner_advantage(self) -> int:
        return self.corners[Seat.DARK] - self.corners[Seat.LIGHT]

    @property
    def advantage(self) -> Optional[Seat]:
        """Seat with the higher evaluation, None when level."""
        dark, light = self.evaluation[Seat.DARK], self.evaluation[Seat.LIGHT]
        if dark > light:
            return Seat.DARK
        if light > dark:
            return Seat.LIGHT
        return None


def stable_positions(board: Board) -> FrozenSet[Position]:
    """
    Cells treated as stable: occupied corners plus the runs of the corner's
    colour walked along both edges from each occupied corner.

    Interior stability is not modelled.
    """
    stable = set()
    for corner, walks in _CORNER_WALKS:
        owner = board.cell_at(corner)
        if owner is CellState.EMPTY:
            continue
        stable.add(corner)
        for d_row, d_col in walks:
            current = corner.offset(d_row, d_col)
            while current is not None and board.cell_at(current) is owner:
                stable.add(current)
                current = current.offset(d_row, d_col)
    return frozenset(stable)


def stability_fraction(board: Board, seat: Seat, stable: Optional[FrozenSet[Position]] = None) -> float:
    """Fraction of ``seat``'s pieces that are stable; 0.0 when it has none."""
    pieces = board.positions_with(seat.cell)
    if not pieces:
        return 0.0
    if stable is None:
        stable = stable_positions(board)
    return sum(1 for p in pieces if p in stable) / len(pieces)


def mobility(state: GameState, seat: Seat) -> int:
    """Legal move count for ``seat``; zero once the game is over."""
    if state.phase is GamePhase.FINISHED:
        return 0
    return len(state.board.legal_moves(seat))


def _seat_terms(state: GameState, seat: Seat, stable: FrozenSet[Position]) -> Tuple[int, int, int, float]:
    board = state.board
    cell = seat.cell
    return (
        mobility(state, seat),
        sum(1 for p in CORNERS if board.cell_at(p) is cell),
        sum(1 for p in EDGES if board.cell_at(p) is cell),
        stability_fraction(board, seat, stable),
    )


def _weighted(terms: Tuple[int, int, int, float], pieces: int, weights: EvalWeights) -> float:
    seat_mobility, seat_corners, seat_edges, seat_stability = terms
    return (
        seat_mobility * weights.mobility
        + seat_corners * weights.corners
        + seat_edges * weights.edges
        + seat_stability * weights.stability
        + pieces * weights.pieces
    )


def analyze_position(state: GameState, weights: EvalWeights = DEFAULT_WEIGHTS) -> PositionAnalysis:
    """
    Compute every evaluation term for both seats.

    Args:
        state: Position to analyse.
        weights: Linear weights applied to the terms.

    Returns:
        PositionAnalysis whose ``evaluation`` holds the weighted sum per seat.
    """
    stable = stable_positions(state.board)
    score = state.score
    analysis = PositionAnalysis()
    for seat in Seat:
        terms = _seat_terms(state, seat, stable)
        analysis.mobility[seat] = terms[0]
        analysis.corners[seat] = terms[1]
        analysis.edges[seat] = terms[2]
        analysis.stability[seat] = terms[3]
        analysis.evaluation[seat] = _weighted(terms, score.for_seat(seat), weights)
    return analysis


def evaluate_position(state: GameState, seat: Seat, weights: EvalWeights = DEFAULT_WEIGHTS) -> float:
    """Weighted positional score of ``state`` for ``seat`` (higher is better)."""
    terms = _seat_terms(state, seat, stable_positions(state.board))
    return _weighted(terms, state.score.for_seat(seat), weights)
