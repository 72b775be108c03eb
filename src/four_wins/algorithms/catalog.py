"""
AlgorithmCatalog - looks up computer algorithms by identifier.

The catalog is an explicit table filled at startup. Registering a new
factory under an existing name (replace=True) changes what the next
lookup creates; instances that already exist are not touched.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Mapping, Optional

from four_wins.core.errors import AlgorithmLoadError, AlgorithmNotFoundError
from four_wins.input.provider import MoveProvider

logger = logging.getLogger(__name__)

ProviderFactory = Callable[[], MoveProvider]


class AlgorithmCatalog:
    """Maps algorithm identifiers to zero-argument provider factories."""

    def __init__(self, factories: Optional[Mapping[str, ProviderFactory]] = None):
        self._factories: Dict[str, ProviderFactory] = {}
        for name, factory in (factories or {}).items():
            self.register(name, factory)

    def register(self, name: str, factory: ProviderFactory, *, replace: bool = False) -> None:
        if not name:
            raise ValueError("Algorithm name must not be empty")
        if not callable(factory):
            raise ValueError(f"Factory for '{name}' is not callable")
        if name in self._factories and not replace:
            raise ValueError(f"Algorithm '{name}' is already registered")
        self._factories[name] = factory
        logger.debug("Registered algorithm '%s'", name)

    def unregister(self, name: str) -> None:
        if name not in self._factories:
            raise AlgorithmNotFoundError(f"Unknown algorithm: {name}")
        del self._factories[name]

    def names(self) -> List[str]:
        return sorted(self._factories)

    def __contains__(self, name: object) -> bool:
        return name in self._factories

    def __len__(self) -> int:
        return len(self._factories)

    def create(self, name: str) -> MoveProvider:
        """
        Create a fresh provider for the given identifier.

        Raises:
            AlgorithmNotFoundError: nothing is registered under `name`
            AlgorithmLoadError: the factory failed or returned something
                that is not a MoveProvider
        """
        factory = self._factories.get(name)
        if factory is None:
            available = ", ".join(self.names()) or "none"
            raise AlgorithmNotFoundError(f"Unknown algorithm: {name}. Available: {available}")

        try:
            provider = factory()
        except Exception as e:
            raise AlgorithmLoadError(f"Failed to instantiate algorithm '{name}': {e}") from e

        if not isinstance(provider, MoveProvider):
            raise AlgorithmLoadError(
                f"Algorithm '{name}' produced {type(provider).__name__}, not a MoveProvider"
            )
        return provider
