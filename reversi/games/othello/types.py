"""Cell, seat and score value types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional


class CellState(IntEnum):
    """Content of a board cell. Values are the tokens stored in the board array."""

    EMPTY = 0
    DARK = 1
    LIGHT = -1

    @property
    def has_piece(self) -> bool:
        return self is not CellState.EMPTY


class Seat(Enum):
    """One of the two sides. Dark always moves first."""

    DARK = 1
    LIGHT = -1

    @property
    def opposite(self) -> "Seat":
        return Seat.LIGHT if self is Seat.DARK else Seat.DARK

    @property
    def cell(self) -> CellState:
        return CellState(self.value)

    @property
    def token(self) -> int:
        return self.value

    @property
    def display_name(self) -> str:
        return self.name.capitalize()


@dataclass(frozen=True)
class Score:
    dark: int
    light: int

    @property
    def total(self) -> int:
        return self.dark + self.light

    @property
    def difference(self) -> int:
        """Positive when dark is ahead."""
        return self.dark - self.light

    @property
    def is_tied(self) -> bool:
        return self.dark == self.light

    @property
    def leader(self) -> Optional[Seat]:
        if self.dark > self.light:
            return Seat.DARK
        if self.light > self.dark:
            return Seat.LIGHT
        return None

    def for_seat(self, seat: Seat) -> int:
        return self.dark if seat is Seat.DARK else self.light

    def __str__(self) -> str:
        return f"Dark: {self.dark}, Light: {self.light}"
