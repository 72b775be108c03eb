"""
Board - rectangular grid of tiles owned by players.

The top-left corner is (0, 0) and the bottom-right corner is
(width - 1, height - 1). Tiles drop into a column and come to rest on the
lowest free row, i.e. the row with the highest index.

Uses an object board:
    None   = empty cell
    Player = tile owned by that player
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, List, Optional

import numpy as np

from four_wins.core.errors import CellOccupiedError
from four_wins.core.types import MIN_BOARD_SIZE, NO_SPACE

if TYPE_CHECKING:
    from four_wins.agent.player import Player


class Board:
    """Game board with column-drop insertion and O(1) full/empty checks."""

    __slots__ = ('width', 'height', '_tiles', '_tile_count')

    def __init__(self, width: int, height: int):
        if width < MIN_BOARD_SIZE or height < MIN_BOARD_SIZE:
            raise ValueError(
                f"Board must be at least {MIN_BOARD_SIZE}x{MIN_BOARD_SIZE} tiles big, "
                f"got {width}x{height}"
            )
        self.width = width
        self.height = height
        self._tiles = np.full((height, width), None, dtype=object)
        self._tile_count = 0

    # ------------------------------------------------------------------
    # Copying
    # ------------------------------------------------------------------

    def create_copy(self) -> "Board":
        """Independent copy: tiles are copied, players are shared."""
        b = Board.__new__(Board)
        b.width = self.width
        b.height = self.height
        b._tiles = self._tiles.copy()
        b._tile_count = self._tile_count
        return b

    copy = create_copy

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def tile_count(self) -> int:
        return self._tile_count

    def is_valid_column(self, column: int) -> bool:
        return 0 <= column < self.width

    def has_space_in_column(self, column: int) -> bool:
        """Return True if at least one more tile fits into the column."""
        return self.get(column, 0) is None

    def valid_moves(self) -> List[int]:
        return [c for c in range(self.width) if self._tiles[0, c] is None]

    def is_full(self) -> bool:
        return self._tile_count == self.width * self.height

    def is_empty(self) -> bool:
        return self._tile_count == 0

    def get(self, x: int, y: int) -> Optional["Player"]:
        """Return the owner of the tile at (x, y), or None if there is none."""
        self._check_bounds(x, y)
        return self._tiles[y, x]

    def as_array(self) -> np.ndarray:
        """Copy of the grid, indexed [row, column]."""
        return self._tiles.copy()

    def __iter__(self) -> Iterator[Optional["Player"]]:
        """Iterate over all cells from the top-left to the bottom-right corner."""
        return iter(self._tiles.ravel().tolist())

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def move(self, column: int, player: "Player") -> Optional[int]:
        """
        Drop a tile for `player` into `column`.

        Returns:
            The row the tile came to rest on, or NO_SPACE (None) if the
            column is already full. A full column is left untouched.
        """
        if player is None:
            raise ValueError("player must not be None")
        if not self.is_valid_column(column):
            raise ValueError(f"Column {column} out of range 0..{self.width - 1}")

        for y in range(self.height - 1, -1, -1):
            if self._tiles[y, column] is None:
                self.set(column, y, player)
                return y
        return NO_SPACE

    def set(self, x: int, y: int, player: "Player") -> None:
        """Put a tile at (x, y). Placing onto an occupied cell is an error."""
        if player is None:
            raise ValueError("player must not be None")
        self._check_bounds(x, y)
        current = self._tiles[y, x]
        if current is not None:
            raise CellOccupiedError(f"({x},{y}) is already set to {current.name}")
        self._tiles[y, x] = player
        self._tile_count += 1

    def clear(self, x: Optional[int] = None, y: Optional[int] = None) -> None:
        """
        Remove the tile at (x, y), or every tile when called without
        coordinates. Clearing an empty cell does nothing.
        """
        if x is None and y is None:
            self._tiles.fill(None)
            self._tile_count = 0
            return
        if x is None or y is None:
            raise ValueError("clear() needs both coordinates or none")

        self._check_bounds(x, y)
        if self._tiles[y, x] is not None:
            self._tiles[y, x] = None
            self._tile_count -= 1

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def _check_bounds(self, x: int, y: int) -> None:
        # numpy would silently accept negative indices
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"({x},{y}) is outside the {self.width}x{self.height} board")

    def state_string(self) -> str:
        lines = []
        for row in self._tiles:
            lines.append("".join("." if p is None else p.name[0] for p in row))
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.state_string()

    def __repr__(self) -> str:
        return f"Board({self.width}x{self.height}, tiles={self._tile_count})"
