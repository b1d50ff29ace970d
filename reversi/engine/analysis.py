"""Hints and search summaries for front ends."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from reversi.games.othello import GameState, Move, OthelloRules, Position, PositionAnalysis, Seat, SkillTier

# Base confidence reported for each tier's choice.
TIER_CONFIDENCE = {
    SkillTier.EASY: 0.3,
    SkillTier.MEDIUM: 0.7,
    SkillTier.HARD: 0.9,
}


@dataclass(frozen=True)
class MoveRecommendation:
    """One candidate move scored from the mover's point of view."""

    move: Position
    evaluation: float
    confidence: float
    reasoning: str


@dataclass(frozen=True)
class ComputerAnalysis:
    """
    What a tier would play from a position and what the search cost.

    Attributes:
        position: Static per-seat breakdown of the position.
        best_move: Move the tier selected; None without legal moves.
        confidence: Tier base confidence, 0 without a move.
        search_depth: Deepest completed search depth (0 for a random pick).
        nodes: Nodes visited.
        elapsed: Seconds spent selecting the move.
        cancelled: The search stopped early (token or time budget).
    """

    position: PositionAnalysis
    best_move: Optional[Position]
    confidence: float
    search_depth: int
    nodes: int
    elapsed: float
    cancelled: bool = False


def move_reasoning(position: Position, captured: Sequence[Position]) -> str:
    count = len(captured)
    if position.is_corner:
        return "Corner move - excellent strategic position"
    if count > 6:
        return f"High-capture move ({count} pieces)"
    if count > 3:
        return f"Good capture ({count} pieces)"
    if position.is_edge:
        return "Edge move - good positional play"
    return "Solid tactical move"


def evaluation_confidence(evaluation: float) -> float:
    """Map an evaluation onto [0, 1]: -100 or lower is 0, 100 or higher is 1."""
    return min(1.0, max(0.0, (evaluation + 100.0) / 200.0))


def move_recommendations(
    game: OthelloRules,
    state: GameState,
    seat: Optional[Seat] = None,
) -> List[MoveRecommendation]:
    """
    Score every legal move of ``seat`` by the position it leads to.

    Returns:
        Recommendations sorted best first; ties keep row-major order. Empty
        when ``seat`` is not the side to move or the game is over.
    """
    seat = seat or state.current_seat
    if seat is not state.current_seat:
        return []

    recommendations = []
    for position in game.legal_moves(state):
        result = game.apply_move(Move(position, seat), state)
        if result is None:
            continue
        evaluation = game.evaluate(result.state, seat)
        recommendations.append(
            MoveRecommendation(
                move=position,
                evaluation=evaluation,
                confidence=evaluation_confidence(evaluation),
                reasoning=move_reasoning(position, result.captured),
            )
        )
    recommendations.sort(key=lambda r: r.evaluation, reverse=True)
    return recommendations
