"""
A class representing a participant in a game session, either a human or a
computer algorithm.
"""

from typing import Optional


class Player:
    """
    Player identity plus performance counters.

    The identity (name, computer flag, algorithm, look-ahead depth) never
    changes after construction. The counters are written by the algorithm
    bound to this player and reset whenever that algorithm is (re)created.

    Players compare and hash by identity so two players with the same name
    still count as distinct participants.
    """
    __slots__ = (
        '_name',
        '_computer',
        '_algorithm',
        '_max_think_depth',
        'total_moves_analyzed',
        'total_move_time_seconds',
    )

    def __init__(
        self,
        name: str,
        computer: bool = False,
        algorithm: Optional[str] = None,
        max_think_depth: int = 0,
    ):
        if not name:
            raise ValueError("Player name must not be empty")
        if computer and not algorithm:
            raise ValueError(f"Computer player '{name}' needs an algorithm")
        if max_think_depth < 0:
            raise ValueError("max_think_depth must not be negative")

        self._name = name
        self._computer = computer
        self._algorithm = algorithm if computer else None
        self._max_think_depth = max_think_depth
        self.total_moves_analyzed = 0
        self.total_move_time_seconds = 0.0

    @classmethod
    def human(cls, name: str) -> "Player":
        return cls(name)

    @classmethod
    def computer(cls, name: str, algorithm: str, max_think_depth: int = 0) -> "Player":
        return cls(name, computer=True, algorithm=algorithm, max_think_depth=max_think_depth)

    @property
    def name(self) -> str:
        """Returns the display name of the player."""
        return self._name

    @property
    def is_computer(self) -> bool:
        """Returns whether an algorithm moves for this player."""
        return self._computer

    @property
    def algorithm(self) -> Optional[str]:
        """Returns the identifier of the bound algorithm (None for humans)."""
        return self._algorithm

    @property
    def max_think_depth(self) -> int:
        """Returns the look-ahead depth (in half-moves) the algorithm may use."""
        return self._max_think_depth

    @property
    def moves_per_second(self) -> float:
        """Average analysis speed since the counters were last reset."""
        if self.total_move_time_seconds <= 0:
            return 0.0
        return self.total_moves_analyzed / self.total_move_time_seconds

    def reset_counters(self) -> None:
        self.total_moves_analyzed = 0
        self.total_move_time_seconds = 0.0

    def record_move(self, moves_analyzed: int, seconds: float) -> None:
        """Add the work done for one move to the counters."""
        self.total_moves_analyzed += moves_analyzed
        self.total_move_time_seconds += seconds

    def __repr__(self) -> str:
        if self._computer:
            return f"Player({self._name!r}, algorithm={self._algorithm!r})"
        return f"Player({self._name!r})"
