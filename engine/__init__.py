"""Game engine for the pursuit game.

This module provides the game logic including:
- Setup: configuration checks and random placement
- Movement resolvers for the Bear and the Wolves
- Game engine for coordinating rounds and the end condition
- End-of-game scoring
"""

from .setup import (
    ConfigurationError,
    SetupManager,
    initialize_game,
)

from .scoring import (
    GameOutcome,
    determine_outcome,
)

from .game_engine import (
    GameEngine,
    RoundResult,
)

__all__ = [
    # Setup
    "ConfigurationError",
    "SetupManager",
    "initialize_game",
    # Scoring
    "GameOutcome",
    "determine_outcome",
    # Game engine
    "GameEngine",
    "RoundResult",
]
