"""Board coordinates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .utils import OTHELLO_SIZE

COLUMN_LETTERS = "ABCDEFGH"


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """
    A (row, col) coordinate on the 8x8 board.

    Row 0 is the top rank ("8" in algebraic notation), column 0 is file "A".
    Validity is a predicate: out-of-range positions can be built freely and
    are treated as empty / not playable by the board.
    """

    row: int
    col: int

    @property
    def is_valid(self) -> bool:
        return 0 <= self.row < OTHELLO_SIZE and 0 <= self.col < OTHELLO_SIZE

    @property
    def index(self) -> int:
        """Flat row-major index (0..63)."""
        return self.row * OTHELLO_SIZE + self.col

    @property
    def is_corner(self) -> bool:
        last = OTHELLO_SIZE - 1
        return self.row in (0, last) and self.col in (0, last)

    @property
    def is_edge(self) -> bool:
        """Border cell that is not a corner."""
        if not self.is_valid or self.is_corner:
            return False
        last = OTHELLO_SIZE - 1
        return self.row in (0, last) or self.col in (0, last)

    def offset(self, d_row: int, d_col: int) -> Optional["Position"]:
        """Neighbour in direction (d_row, d_col), or None when it falls off the board."""
        moved = Position(self.row + d_row, self.col + d_col)
        return moved if moved.is_valid else None

    @property
    def algebraic(self) -> str:
        if not self.is_valid:
            return "Invalid"
        return f"{COLUMN_LETTERS[self.col]}{OTHELLO_SIZE - self.row}"

    @classmethod
    def from_algebraic(cls, notation: str) -> Optional["Position"]:
        """Parse notation like ``"d3"`` / ``"D3"``; returns None on bad input."""
        text = notation.strip().upper()
        if len(text) != 2:
            return None
        letter, digit = text[0], text[1]
        if letter not in COLUMN_LETTERS or not digit.isdigit():
            return None
        rank = int(digit)
        if not 1 <= rank <= OTHELLO_SIZE:
            return None
        return cls(OTHELLO_SIZE - rank, COLUMN_LETTERS.index(letter))

    @classmethod
    def from_index(cls, index: int) -> "Position":
        return cls(index // OTHELLO_SIZE, index % OTHELLO_SIZE)

    def __str__(self) -> str:
        return f"({self.row}, {self.col})"


ALL_POSITIONS: Tuple[Position, ...] = tuple(
    Position(row, col) for row in range(OTHELLO_SIZE) for col in range(OTHELLO_SIZE)
)

CORNERS: Tuple[Position, ...] = tuple(p for p in ALL_POSITIONS if p.is_corner)
EDGES: Tuple[Position, ...] = tuple(p for p in ALL_POSITIONS if p.is_edge)
