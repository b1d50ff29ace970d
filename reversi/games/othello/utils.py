"""Shared scanning helpers for Othello board logic."""

from __future__ import annotations

from typing import List, Sequence, Tuple

import numpy as np

OTHELLO_SIZE = 8

DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)

Rows = Sequence[Sequence[int]]


def get_flips(
    rows: Rows,
    row: int,
    col: int,
    player: int,
    size: int = OTHELLO_SIZE,
) -> List[Tuple[int, int]]:
    """
    Get all pieces that would be flipped by placing a piece at (row, col).

    Every direction is scanned on its own: a run of opponent pieces is only
    captured when it is closed by one of ``player``'s pieces. Runs that reach
    an empty cell or the board edge capture nothing.

    Args:
        rows: Board cells indexed as ``rows[row][col]``.
        row: Row position.
        col: Column position.
        player: Player token (1 or -1).
        size: Board size.

    Returns:
        List of (row, col) positions that would be flipped, grouped by
        direction in ``DIRECTIONS`` order.
    """
    if not (0 <= row < size and 0 <= col < size) or rows[row][col] != 0:
        return []

    opponent = -player
    flips: List[Tuple[int, int]] = []

    for dr, dc in DIRECTIONS:
        temp_flips = []
        r, c = row + dr, col + dc

        while 0 <= r < size and 0 <= c < size and rows[r][c] == opponent:
            temp_flips.append((r, c))
            r += dr
            c += dc

        if 0 <= r < size and 0 <= c < size and rows[r][c] == player and temp_flips:
            flips.extend(temp_flips)

    return flips


def is_valid_move(
    rows: Rows,
    row: int,
    col: int,
    player: int,
    size: int = OTHELLO_SIZE,
) -> bool:
    """Check if placing a piece at (row, col) flips at least one piece."""
    if not (0 <= row < size and 0 <= col < size) or rows[row][col] != 0:
        return False

    opponent = -player
    for dr, dc in DIRECTIONS:
        r, c = row + dr, col + dc
        seen_opponent = False
        while 0 <= r < size and 0 <= c < size and rows[r][c] == opponent:
            seen_opponent = True
            r += dr
            c += dc
        if seen_opponent and 0 <= r < size and 0 <= c < size and rows[r][c] == player:
            return True
    return False


def valid_moves(rows: Rows, player: int, size: int = OTHELLO_SIZE) -> List[Tuple[int, int]]:
    """All (row, col) moves for ``player`` in row-major order."""
    return [
        (r, c)
        for r in range(size)
        for c in range(size)
        if is_valid_move(rows, r, c, player, size)
    ]


def count_pieces(board: np.ndarray) -> Tuple[int, int]:
    """
    Count pieces for each player.

    Returns:
        Tuple of (dark_count, light_count) for tokens 1 and -1.
    """
    dark_count = np.count_nonzero(board == 1)
    light_count = np.count_nonzero(board == -1)
    return int(dark_count), int(light_count)
