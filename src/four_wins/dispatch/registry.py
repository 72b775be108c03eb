"""
AlgorithmRegistry - the live algorithm instance of every computer player.

Instances are created lazily through an AlgorithmCatalog on the first turn
of a player and kept for the rest of the session, or until
invalidate_all() throws them away.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional, TYPE_CHECKING

from four_wins.algorithms import AlgorithmCatalog, default_catalog
from four_wins.core.errors import AlgorithmError

if TYPE_CHECKING:
    from four_wins.agent.player import Player
    from four_wins.input.provider import MoveProvider

logger = logging.getLogger(__name__)


class AlgorithmRegistry:
    """
    Per-session cache of MoveProvider instances, keyed by player.

    Not thread-safe: a single driver thread is expected to use it.
    """

    def __init__(self, catalog: Optional[AlgorithmCatalog] = None):
        self.catalog = catalog if catalog is not None else default_catalog()
        self._providers: Dict["Player", "MoveProvider"] = {}

    def __len__(self) -> int:
        return len(self._providers)

    def __contains__(self, player: object) -> bool:
        return player in self._providers

    def resolve(self, player: "Player") -> "MoveProvider":
        """
        Return the provider bound to a computer player, creating it on
        first use. Creating a provider resets the player's counters.

        Raises:
            ValueError: the player is not a computer player
            AlgorithmError: the algorithm could not be provided. Nothing is
                cached, the error is meant to end the session.
        """
        if not player.is_computer:
            raise ValueError("Only applicable to computer players")

        provider = self._providers.get(player)
        if provider is None:
            player.reset_counters()
            provider = self._load(player)
            self._providers[player] = provider
        return provider

    def _load(self, player: "Player") -> "MoveProvider":
        logger.info("Trying to load algorithm '%s' ...", player.algorithm)
        try:
            return self.catalog.create(player.algorithm)
        except AlgorithmError:
            logger.error(
                "Failed to load algorithm '%s' for player '%s'", player.algorithm, player.name
            )
            raise

    def invalidate_all(self) -> None:
        """Forget every instance; the next resolve() creates fresh ones."""
        logger.info("Algorithm implementations will be reloaded.")
        self._providers.clear()
