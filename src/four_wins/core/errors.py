"""
Exceptions raised by the game engine.
"""


class CellOccupiedError(RuntimeError):
    """A tile was placed on a cell that already holds one."""


class AlgorithmError(LookupError):
    """Base class for failures to provide a computer algorithm."""


class AlgorithmNotFoundError(AlgorithmError):
    """No algorithm is registered under the requested identifier."""


class AlgorithmLoadError(AlgorithmError):
    """The algorithm exists but could not be instantiated."""
