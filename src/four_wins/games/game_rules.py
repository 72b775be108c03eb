"""
Win detection over boards of any rectangular size.

Lines are extracted with NumPy slicing and scanned for a run of
CONNECT_LENGTH consecutive tiles owned by the same player. Every line is
copied out of the grid so callers can never write through a view.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, List, Optional

import numpy as np

from four_wins.core.types import CONNECT_LENGTH, WinningCondition

if TYPE_CHECKING:
    from four_wins.agent.player import Player
    from four_wins.games.board import Board


def get_rows(grid: np.ndarray) -> List[np.ndarray]:
    """Rows from top to bottom, each scanned left to right."""
    return [row.copy() for row in grid]


def get_cols(grid: np.ndarray) -> List[np.ndarray]:
    """Columns from left to right, each scanned top to bottom."""
    return [col.copy() for col in grid.T]


def _diagonal_offsets(rows: int, cols: int) -> List[int]:
    # Starting cells down the first column (offset 0, -1, ...), then along
    # the top row (offset 1, 2, ...). Covers every diagonal exactly once.
    return [-y for y in range(rows)] + list(range(1, cols))


def get_diagonals(grid: np.ndarray) -> List[np.ndarray]:
    """
    All down-right diagonals, including the length-1 corner ones.

    Starts from each cell of the left edge (top to bottom), then from each
    cell of the top edge (left to right).
    """
    rows, cols = grid.shape
    return [grid.diagonal(k).copy() for k in _diagonal_offsets(rows, cols)]


def get_anti_diagonals(grid: np.ndarray) -> List[np.ndarray]:
    """
    All down-left diagonals, including the length-1 corner ones.

    Starts from each cell of the right edge (top to bottom), then from each
    cell of the top edge (right to left).
    """
    flipped = np.fliplr(grid)
    rows, cols = grid.shape
    return [flipped.diagonal(k).copy() for k in _diagonal_offsets(rows, cols)]


def first_run_owner(line: Iterable[Optional["Player"]], length: int = CONNECT_LENGTH) -> Optional["Player"]:
    """
    Return the owner of the first run of `length` equal tiles in `line`.

    An empty cell resets the run to 0, a tile of another owner starts a new
    run of 1. Scanning stops at the first run that reaches `length`.
    """
    owner = None
    run = 0
    for tile in line:
        if tile is None:
            owner, run = None, 0
            continue
        if owner is None or tile is not owner:
            owner, run = tile, 1
        else:
            run += 1
        if run == length:
            return owner
    return None


def find_winner(board: "Board", length: int = CONNECT_LENGTH) -> Optional["Player"]:
    """Scan rows, columns, down-right and down-left diagonals, in that order."""
    grid = board.as_array()
    for lines in (get_rows, get_cols, get_diagonals, get_anti_diagonals):
        for line in lines(grid):
            if line.size < length:
                continue
            owner = first_run_owner(line, length)
            if owner is not None:
                return owner
    return None


def detect_outcome(board: "Board") -> Optional[WinningCondition]:
    """
    Return the terminal result of the board, or None while the game is
    still on-going. A full board without a winner is a draw.
    """
    winner = find_winner(board)
    if winner is not None:
        return WinningCondition.win(winner)
    if board.is_full():
        return WinningCondition.draw()
    return None
