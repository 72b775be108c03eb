"""
Dispatch module - turn routing between human input and computer algorithms.
"""

from four_wins.dispatch.delay import CancellableDelay
from four_wins.dispatch.registry import AlgorithmRegistry
from four_wins.dispatch.dispatcher import DispatchPhase, TurnDispatcher

__all__ = [
    "AlgorithmRegistry",
    "CancellableDelay",
    "DispatchPhase",
    "TurnDispatcher",
]
