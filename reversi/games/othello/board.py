"""Immutable Othello board."""

from __future__ import annotations

from typing import Dict, List, Mapping, Optional, Sequence, Tuple, TYPE_CHECKING

import numpy as np

from .position import ALL_POSITIONS, COLUMN_LETTERS, Position
from .types import CellState, Score, Seat
from .utils import OTHELLO_SIZE, count_pieces, get_flips, is_valid_move

if TYPE_CHECKING:
    from .move import Move

_SYMBOLS = {CellState.EMPTY: ".", CellState.DARK: "X", CellState.LIGHT: "O"}
_FROM_SYMBOL = {".": CellState.EMPTY, "-": CellState.EMPTY, "X": CellState.DARK, "O": CellState.LIGHT}


class Board:
    """
    8x8 grid of cell states.

    The cells live in a read-only ``int8`` array holding the tokens of
    :class:`CellState` (0 empty, 1 dark, -1 light). Every operation that
    changes a cell returns a new Board; existing boards never change.
    """

    __slots__ = ("_cells", "_rows")

    def __init__(self, cells: Optional[np.ndarray] = None) -> None:
        if cells is None:
            cells = np.zeros((OTHELLO_SIZE, OTHELLO_SIZE), dtype=np.int8)
        else:
            cells = np.array(cells, dtype=np.int8, copy=True)
            if cells.shape != (OTHELLO_SIZE, OTHELLO_SIZE):
                raise ValueError(f"Board must be {OTHELLO_SIZE}x{OTHELLO_SIZE}, got {cells.shape}")
        cells.flags.writeable = False
        self._cells = cells
        # Plain nested tuples: element access is much cheaper than numpy indexing in scans.
        self._rows: Tuple[Tuple[int, ...], ...] = tuple(tuple(r) for r in cells.tolist())

    # ------------------------------------------------------------------ factories

    @classmethod
    def empty(cls) -> "Board":
        return cls()

    @classmethod
    def initial(cls) -> "Board":
        """Standard opening: light on D5/E4 diagonal, dark on E5/D4 diagonal."""
        cells = np.zeros((OTHELLO_SIZE, OTHELLO_SIZE), dtype=np.int8)
        mid = OTHELLO_SIZE // 2
        cells[mid - 1, mid - 1] = CellState.LIGHT
        cells[mid - 1, mid] = CellState.DARK
        cells[mid, mid - 1] = CellState.DARK
        cells[mid, mid] = CellState.LIGHT
        return cls(cells)

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "Board":
        """
        Build a board from a text diagram, one string per row.

        ``X`` is dark, ``O`` is light, ``.`` or ``-`` is empty. Whitespace is ignored.
        """
        if len(rows) != OTHELLO_SIZE:
            raise ValueError(f"Expected {OTHELLO_SIZE} rows, got {len(rows)}")
        cells = np.zeros((OTHELLO_SIZE, OTHELLO_SIZE), dtype=np.int8)
        for r, line in enumerate(rows):
            symbols = line.replace(" ", "").upper()
            if len(symbols) != OTHELLO_SIZE:
                raise ValueError(f"Row {r} must have {OTHELLO_SIZE} cells: {line!r}")
            for c, symbol in enumerate(symbols):
                if symbol not in _FROM_SYMBOL:
                    raise ValueError(f"Unknown cell symbol {symbol!r} in row {r}")
                cells[r, c] = _FROM_SYMBOL[symbol]
        return cls(cells)

    # ------------------------------------------------------------------ access

    def cell_at(self, position: Position) -> CellState:
        """Cell content, or EMPTY when ``position`` is off the board."""
        if not position.is_valid:
            return CellState.EMPTY
        return CellState(self._rows[position.row][position.col])

    def __getitem__(self, position: Position) -> CellState:
        return self.cell_at(position)

    def as_array(self) -> np.ndarray:
        """Read-only view of the underlying token array."""
        return self._cells

    def positions_with(self, state: CellState) -> List[Position]:
        token = int(state)
        rows = self._rows
        return [p for p in ALL_POSITIONS if rows[p.row][p.col] == token]

    @property
    def empty_positions(self) -> List[Position]:
        return self.positions_with(CellState.EMPTY)

    @property
    def score(self) -> Score:
        dark, light = count_pieces(self._cells)
        return Score(dark=dark, light=light)

    @property
    def is_full(self) -> bool:
        return not np.any(self._cells == CellState.EMPTY)

    # ------------------------------------------------------------------ updates

    def placing(self, state: CellState, at: Position) -> "Board":
        """Board with one cell replaced. Invalid positions leave the board unchanged."""
        if not at.is_valid:
            return self
        cells = self._cells.copy()
        cells[at.row, at.col] = state
        return Board(cells)

    def placing_many(self, placements: Mapping[Position, CellState]) -> "Board":
        """Board with several cells replaced at once; invalid positions are skipped."""
        cells = self._cells.copy()
        for position, state in placements.items():
            if position.is_valid:
                cells[position.row, position.col] = state
        return Board(cells)

    # ------------------------------------------------------------------ rules

    def captured_positions(self, seat: Seat, at: Position) -> List[Position]:
        """Opponent pieces flanked by placing ``seat`` at ``at`` (union over all eight rays)."""
        if not at.is_valid:
            return []
        return [Position(r, c) for r, c in get_flips(self._rows, at.row, at.col, seat.token)]

    def is_legal_move(self, at: Position, seat: Seat) -> bool:
        if not at.is_valid:
            return False
        return is_valid_move(self._rows, at.row, at.col, seat.token)

    def legal_moves(self, seat: Seat) -> List[Position]:
        """Legal placements for ``seat`` in row-major order."""
        rows = self._rows
        token = seat.token
        return [p for p in ALL_POSITIONS if is_valid_move(rows, p.row, p.col, token)]

    def has_legal_move(self, seat: Seat) -> bool:
        rows = self._rows
        token = seat.token
        return any(is_valid_move(rows, p.row, p.col, token) for p in ALL_POSITIONS)

    def applying_move(self, move: "Move") -> Optional[Tuple["Board", List[Position]]]:
        """
        Place the move's piece and flip every captured piece.

        Returns:
            ``(new_board, captured)`` or None when the placement captures nothing.
        """
        captured = self.captured_positions(move.seat, move.position)
        if not captured:
            return None

        placements: Dict[Position, CellState] = {move.position: move.seat.cell}
        for position in captured:
            placements[position] = move.seat.cell
        return self.placing_many(placements), captured

    # ------------------------------------------------------------------ dunder

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self) -> int:
        return hash(self._rows)

    def __str__(self) -> str:
        header = "  " + " ".join(COLUMN_LETTERS)
        lines = [header]
        for r, row in enumerate(self._rows):
            rank = OTHELLO_SIZE - r
            cells = " ".join(_SYMBOLS[CellState(v)] for v in row)
            lines.append(f"{rank} {cells} {rank}")
        lines.append(header)
        return "\n".join(lines)

    def __repr__(self) -> str:
        score = self.score
        return f"Board(dark={score.dark}, light={score.light})"

    def to_rows(self) -> List[str]:
        """Inverse of :meth:`from_rows`."""
        return ["".join(_SYMBOLS[CellState(v)] for v in row) for row in self._rows]

