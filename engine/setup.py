"""Initial game setup logic for the pursuit game engine.

Setup happens once per game, in a fixed order so that a seeded random
source replays the same board:
1. Place the Bear on a random column of the starting row
2. Scatter the sheep over the rows above the starting row
3. Place the wolves on random free columns of the starting row
4. Place the shepherd on a random free cell above the starting row

Every placement draws until it hits an unoccupied cell.
"""

from __future__ import annotations

import random
from typing import Optional

from core.board import Grid, Position
from core.config import ConfigurationError, GameConfig
from core.game_state import GameState
from core.pieces import Piece, Sheep, Shepherd


class SetupManager:
    """Places the pieces of a new game on an empty grid.

    The manager validates the configuration first; nothing is created
    when validation fails.
    """

    def __init__(self, config: GameConfig, rng: Optional[random.Random] = None):
        """Initialize the setup manager.

        Args:
            config: The game configuration.
            rng: Random source. Defaults to random.Random(config.seed).

        Raises:
            ConfigurationError: If the configuration violates any bound.
        """
        config.validate()
        self.config = config
        self.rng = rng if rng is not None else random.Random(config.seed)
        self.grid = Grid(config.width, config.height)

    @property
    def start_row(self) -> int:
        """Row every Bear/Wolf starts on."""
        return self.config.height - 1

    # -------------------------------------------------------------------------
    # Random cell selection
    # -------------------------------------------------------------------------

    def random_free_start_cell(self) -> Position:
        """Draw columns on the starting row until one is unoccupied."""
        while True:
            pos = Position(self.start_row, self.rng.randrange(self.config.width))
            if not self.grid.is_occupied(pos):
                return pos

    def random_free_field_cell(self) -> Position:
        """Draw cells above the starting row until one is unoccupied."""
        while True:
            row = self.rng.randrange(self.config.height - 1)
            col = self.rng.randrange(self.config.width)
            pos = Position(row, col)
            if not self.grid.is_occupied(pos):
                return pos

    # -------------------------------------------------------------------------
    # Placement steps
    # -------------------------------------------------------------------------

    def place_bear(self) -> Piece:
        """Place the Bear on a random column of the starting row."""
        bear = Piece.bear(Position(self.start_row, self.rng.randrange(self.config.width)))
        self.grid.place(bear)
        return bear

    def place_sheep(self) -> list[Sheep]:
        """Scatter config.sheep_count sheep, one at a time."""
        flock: list[Sheep] = []
        for _ in range(self.config.sheep_count):
            sheep = Sheep(self.random_free_field_cell())
            self.grid.place(sheep)
            flock.append(sheep)
        return flock

    def place_wolves(self) -> list[Piece]:
        """Place config.wolf_count wolves on free starting-row columns."""
        wolves: list[Piece] = []
        for number in range(1, self.config.wolf_count + 1):
            wolf = Piece.wolf(number, self.random_free_start_cell())
            self.grid.place(wolf)
            wolves.append(wolf)
        return wolves

    def place_shepherd(self) -> Shepherd:
        """Place the shepherd on a free cell above the starting row."""
        shepherd = Shepherd(self.random_free_field_cell())
        self.grid.place(shepherd)
        return shepherd

    def run(self) -> GameState:
        """Run every placement step in order.

        Returns:
            The initial game state.
        """
        bear = self.place_bear()
        flock = self.place_sheep()
        wolves = self.place_wolves()
        shepherd = self.place_shepherd()

        return GameState(
            grid=self.grid,
            bear=bear,
            wolves=wolves,
            sheep=flock,
            shepherd=shepherd,
            initial_sheep_count=len(flock),
        )


def initialize_game(
    config: GameConfig,
    rng: Optional[random.Random] = None,
) -> GameState:
    """Validate a configuration and build the initial game state.

    Args:
        config: The game configuration.
        rng: Random source for placement. Defaults to random.Random(config.seed).

    Returns:
        The populated initial game state.

    Raises:
        ConfigurationError: If the configuration violates any bound.
    """
    return SetupManager(config, rng).run()


__all__ = [
    "ConfigurationError",
    "SetupManager",
    "initialize_game",
]
