"""
Configuration and default settings.
"""

from typing import List, Optional, Sequence

from four_wins.core.types import MIN_BOARD_SIZE


# ---------------------------------------------------------------------------
# Board
# ---------------------------------------------------------------------------

DEFAULT_WIDTH = 7
DEFAULT_HEIGHT = 6


# ---------------------------------------------------------------------------
# Players
# ---------------------------------------------------------------------------

# "Name" is a human, "Name=algorithm[@depth]" a computer player
DEFAULT_PLAYERS = ("Human", "Computer=random")


# ---------------------------------------------------------------------------
# Pacing
# ---------------------------------------------------------------------------

# Pause before a new game once a game with a human in it has ended
OBSERVATION_DELAY_SEC = 3.0

# Sleep between polls that produced no event
POLL_INTERVAL_SEC = 0.05

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class Config:
    """Session configuration with sensible defaults."""

    def __init__(
        self,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        players: Sequence[str] = DEFAULT_PLAYERS,
        autoplay: bool = False,
        observation_delay: float = OBSERVATION_DELAY_SEC,
        poll_interval: float = POLL_INTERVAL_SEC,
        max_games: Optional[int] = None,
        log_level: str = "INFO",
    ):
        if width < MIN_BOARD_SIZE or height < MIN_BOARD_SIZE:
            raise ValueError(
                f"Board must be at least {MIN_BOARD_SIZE}x{MIN_BOARD_SIZE}, got {width}x{height}"
            )
        if len(players) != 2:
            raise ValueError(f"Exactly two players are needed, got {len(players)}")
        if observation_delay < 0 or poll_interval < 0:
            raise ValueError("Delays must not be negative")
        if max_games is not None and max_games < 1:
            raise ValueError("max_games must be at least 1")
        if log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {log_level}")

        self.width = width
        self.height = height
        self.players: List[str] = list(players)
        self.autoplay = autoplay
        self.observation_delay = observation_delay
        self.poll_interval = poll_interval
        self.max_games = max_games
        self.log_level = log_level.upper()


# Default configuration
DEFAULT_CONFIG = Config()
