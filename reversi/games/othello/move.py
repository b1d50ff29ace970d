"""Moves, move history and move results."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple, TYPE_CHECKING

from .position import Position
from .types import Seat

if TYPE_CHECKING:
    from .state import GameState


@dataclass(frozen=True)
class Move:
    """A placement by ``seat`` at ``position``. The timestamp is informational only."""

    position: Position
    seat: Seat
    timestamp: float = field(default_factory=time.time, compare=False)

    def __str__(self) -> str:
        return f"{self.seat.display_name} {self.position.algebraic}"


@dataclass(frozen=True)
class MoveHistory:
    """Insertion-ordered, immutable sequence of moves."""

    moves: Tuple[Move, ...] = ()

    def appending(self, move: Move) -> "MoveHistory":
        return MoveHistory(self.moves + (move,))

    @property
    def last_move(self) -> Optional[Move]:
        return self.moves[-1] if self.moves else None

    def moves_by(self, seat: Seat) -> List[Move]:
        return [m for m in self.moves if m.seat is seat]

    def move_at(self, index: int) -> Optional[Move]:
        if 0 <= index < len(self.moves):
            return self.moves[index]
        return None

    def __len__(self) -> int:
        return len(self.moves)

    def __iter__(self) -> Iterator[Move]:
        return iter(self.moves)

    def __bool__(self) -> bool:
        return bool(self.moves)


@dataclass(frozen=True)
class MoveResult:
    move: Move
    captured: Tuple[Position, ...]
    state: "GameState"

    @property
    def flipped_count(self) -> int:
        return len(self.captured)
