"""Movement resolvers for the pursuit game engine.

Each resolver:
- Takes the game state as input
- Provides resolve() to execute one piece's move for a given roll
- Returns a result dataclass describing the move and any captures

Dice are rolled by the GameEngine; resolvers are deterministic.
"""

from .bear import (
    BearResolver,
    BearMoveResult,
)

from .wolves import (
    WolfResolver,
    WolfMoveResult,
)

__all__ = [
    # Bear
    "BearResolver",
    "BearMoveResult",
    # Wolves
    "WolfResolver",
    "WolfMoveResult",
]
