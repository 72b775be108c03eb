"""
Algorithms module - computer players and the catalog they are looked up in.
"""

from four_wins.algorithms.catalog import AlgorithmCatalog, ProviderFactory
from four_wins.algorithms.random_player import RandomPlayer


# ---------------------------------------------------------------------------
# Built-in algorithms
# ---------------------------------------------------------------------------

ALGORITHMS = {
    "random": RandomPlayer,
}


def default_catalog() -> AlgorithmCatalog:
    """New catalog holding the built-in algorithms."""
    return AlgorithmCatalog(ALGORITHMS)


__all__ = [
    "ALGORITHMS",
    "AlgorithmCatalog",
    "ProviderFactory",
    "RandomPlayer",
    "default_catalog",
]
