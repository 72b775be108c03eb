"""
Core module - fundamental types, constants and exceptions.

This module provides the building blocks used throughout the game engine.
"""

from four_wins.core.types import (
    CONNECT_LENGTH,
    MIN_BOARD_SIZE,
    NO_SPACE,
    Outcome,
    WinningCondition,
)
from four_wins.core.errors import (
    AlgorithmError,
    AlgorithmLoadError,
    AlgorithmNotFoundError,
    CellOccupiedError,
)

__all__ = [
    # Types
    "Outcome",
    "WinningCondition",
    # Constants
    "CONNECT_LENGTH",
    "MIN_BOARD_SIZE",
    "NO_SPACE",
    # Exceptions
    "AlgorithmError",
    "AlgorithmLoadError",
    "AlgorithmNotFoundError",
    "CellOccupiedError",
]
