"""Configuration for a pursuit game session.

GameConfig is validated as a whole before any board or piece is created,
so a ConfigurationError never leaves a half-built game behind.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .constants import (
    MIN_BOARD_SIZE,
    MAX_BOARD_SIZE,
    MIN_WOLVES,
    MAX_WOLVES,
    MIN_SHEEP_DIVISOR,
    MAX_SHEEP_DIVISOR,
    TieRule,
)


class ConfigurationError(ValueError):
    """Raised when a game configuration violates the setup bounds."""


def sheep_bounds(width: int, height: int) -> tuple[int, int]:
    """Return the inclusive (min, max) sheep count for a board size."""
    area = width * height
    return area // MIN_SHEEP_DIVISOR, area // MAX_SHEEP_DIVISOR


def validate_board_size(width: int, height: int) -> None:
    """Raise ConfigurationError unless both axes are within the board limits."""
    for name, value in (("width", width), ("height", height)):
        if not MIN_BOARD_SIZE <= value <= MAX_BOARD_SIZE:
            raise ConfigurationError(
                f"Board {name} must be between {MIN_BOARD_SIZE} and "
                f"{MAX_BOARD_SIZE}, got {value}"
            )


def validate_wolf_count(wolf_count: int) -> None:
    """Raise ConfigurationError unless the wolf count is within limits."""
    if not MIN_WOLVES <= wolf_count <= MAX_WOLVES:
        raise ConfigurationError(
            f"The number of wolves must be between {MIN_WOLVES} and "
            f"{MAX_WOLVES}, got {wolf_count}"
        )


def validate_sheep_count(width: int, height: int, sheep_count: int) -> None:
    """Raise ConfigurationError unless the sheep count fits the board."""
    min_sheep, max_sheep = sheep_bounds(width, height)
    if not min_sheep <= sheep_count <= max_sheep:
        raise ConfigurationError(
            f"The number of sheep must be between {min_sheep} and "
            f"{max_sheep}, got {sheep_count}"
        )


@dataclass(frozen=True)
class GameConfig:
    """Parameters of a single game.

    Attributes:
        width: Number of columns (7-40).
        height: Number of rows (7-40). Row 0 is the goal row.
        sheep_count: Number of sheep scattered at setup.
        wolf_count: Number of wolves (1-3).
        seed: Seed for the game's random source, or None for an unseeded one.
        tie_rule: How the end-of-game scan decides ties.
    """

    width: int
    height: int
    sheep_count: int
    wolf_count: int
    seed: Optional[int] = None
    tie_rule: TieRule = TieRule.STRICT

    def validate(self) -> None:
        """Check every bound.

        Raises:
            ConfigurationError: If any bound is violated.
        """
        validate_board_size(self.width, self.height)
        validate_wolf_count(self.wolf_count)
        validate_sheep_count(self.width, self.height, self.sheep_count)

    @classmethod
    def square(
        cls,
        size: int,
        sheep_count: int,
        wolf_count: int,
        seed: Optional[int] = None,
        tie_rule: TieRule = TieRule.STRICT,
    ) -> GameConfig:
        """Create a validated configuration for a size x size board."""
        config = cls(
            width=size,
            height=size,
            sheep_count=sheep_count,
            wolf_count=wolf_count,
            seed=seed,
            tie_rule=tie_rule,
        )
        config.validate()
        return config

    @property
    def sheep_bounds(self) -> tuple[int, int]:
        """Inclusive (min, max) sheep count for this board."""
        return sheep_bounds(self.width, self.height)
