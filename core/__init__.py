"""Core data models for the pursuit game engine."""

from .constants import (
    PieceKind,
    TieRule,
    MIN_BOARD_SIZE,
    MAX_BOARD_SIZE,
    MIN_WOLVES,
    MAX_WOLVES,
    MIN_SHEEP_DIVISOR,
    MAX_SHEEP_DIVISOR,
    DICE_FACES,
    GOAL_ROW,
    BEAR_SYMBOL,
    WOLF_SYMBOL,
    SHEEP_SYMBOL,
    SHEPHERD_SYMBOL,
    EMPTY_SYMBOL,
)

from .config import ConfigurationError, GameConfig, sheep_bounds

from .board import Position, Cell, Grid

from .pieces import Piece, Sheep, Shepherd

from .game_state import GameState

__all__ = [
    # Constants
    "PieceKind",
    "TieRule",
    "MIN_BOARD_SIZE",
    "MAX_BOARD_SIZE",
    "MIN_WOLVES",
    "MAX_WOLVES",
    "MIN_SHEEP_DIVISOR",
    "MAX_SHEEP_DIVISOR",
    "DICE_FACES",
    "GOAL_ROW",
    "BEAR_SYMBOL",
    "WOLF_SYMBOL",
    "SHEEP_SYMBOL",
    "SHEPHERD_SYMBOL",
    "EMPTY_SYMBOL",
    # Config
    "ConfigurationError",
    "GameConfig",
    "sheep_bounds",
    # Board
    "Position",
    "Cell",
    "Grid",
    # Pieces
    "Piece",
    "Sheep",
    "Shepherd",
    # Game State
    "GameState",
]
