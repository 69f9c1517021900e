"""Constants and enums for the pursuit game engine."""

from enum import Enum


class PieceKind(Enum):
    """Categories of occupants a board cell can hold."""

    BEAR = "bear"
    WOLF = "wolf"
    SHEEP = "sheep"
    SHEPHERD = "shepherd"


class TieRule(Enum):
    """How the end-of-game scan decides a tie.

    STRICT: tie iff more than one piece holds the maximum score.
    STICKY: a Wolf matching the running best raises a tie flag that is
        never cleared, even by a later Wolf with a higher score.
    """

    STRICT = "strict"
    STICKY = "sticky"


# Board limits (per axis, inclusive)
MIN_BOARD_SIZE = 7
MAX_BOARD_SIZE = 40

# Wolf limits
MIN_WOLVES = 1
MAX_WOLVES = 3

# Sheep count bounds are floor(W*H / divisor)
MIN_SHEEP_DIVISOR = 5
MAX_SHEEP_DIVISOR = 2

# Dice
DICE_FACES = 6

# Row every Bear/Wolf is racing toward
GOAL_ROW = 0

# Render symbols
BEAR_SYMBOL = "B"
WOLF_SYMBOL = "W"
SHEEP_SYMBOL = "O"
SHEPHERD_SYMBOL = "S"
EMPTY_SYMBOL = "."

BEAR_ID = "Bear"
WOLF_ID_PREFIX = "Wolf"
