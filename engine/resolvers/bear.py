"""Bear movement resolver for the pursuit game engine.

The Bear charges straight toward the goal row by the number rolled.
Every tile it crosses is checked for prey:
- Sheep: eaten, +1 point
- Shepherd: eaten, no points

Resolution: scan the tiles at offsets 0..roll-1 from the start (never
past the goal row), move to max(row - roll, 0), then check the landing
tile once more.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from core.board import Position
from core.constants import GOAL_ROW

if TYPE_CHECKING:
    from core.game_state import GameState


@dataclass
class BearMoveResult:
    """Result of resolving one Bear move.

    Attributes:
        roll: The dice value used.
        start: Position before the move.
        end: Position after the move.
        already_at_goal: True if the Bear was on the goal row and did not move.
        sheep_eaten_on_path: Positions of sheep eaten while crossing tiles.
        sheep_eaten_on_landing: Positions of sheep eaten on the landing tile.
        shepherd_eaten_at: Where the shepherd was eaten, if it was.
        shepherd_eaten_on_landing: True if the landing re-check ate the shepherd.
        score: The Bear's score after the move.
    """

    roll: int
    start: Position
    end: Position
    already_at_goal: bool = False
    sheep_eaten_on_path: list[Position] = field(default_factory=list)
    sheep_eaten_on_landing: list[Position] = field(default_factory=list)
    shepherd_eaten_at: Position | None = None
    shepherd_eaten_on_landing: bool = False
    score: int = 0

    @property
    def sheep_eaten(self) -> int:
        """Total sheep eaten during this move."""
        return len(self.sheep_eaten_on_path) + len(self.sheep_eaten_on_landing)


class BearResolver:
    """Resolves the Bear's move for a given dice roll.

    The resolver mutates the game state in place: grid occupancy, the
    Bear's position and score, and the live sheep/shepherd.
    """

    def __init__(self, state: GameState):
        """Initialize the resolver with the game state.

        Args:
            state: The current game state.
        """
        self.state = state

    def _eat_at(self, pos: Position, result: BearMoveResult, landing: bool) -> None:
        """Apply the capture rule to one tile."""
        if self.state.capture_sheep_at(pos) is not None:
            self.state.bear.add_score()
            if landing:
                result.sheep_eaten_on_landing.append(pos)
            else:
                result.sheep_eaten_on_path.append(pos)

        if self.state.capture_shepherd_at(pos) is not None:
            result.shepherd_eaten_at = pos
            result.shepherd_eaten_on_landing = landing

    def resolve(self, roll: int) -> BearMoveResult:
        """Move the Bear by a dice roll.

        Args:
            roll: Number of rows to advance (a dice value, >= 1).

        Returns:
            BearMoveResult with what happened.

        Raises:
            ValueError: If roll is not positive.
        """
        if roll < 1:
            raise ValueError(f"Roll must be positive, got {roll}")

        bear = self.state.bear
        start = bear.position
        result = BearMoveResult(roll=roll, start=start, end=start, score=bear.score)

        if bear.has_reached_goal():
            result.already_at_goal = True
            return result

        # Path scan: the starting tile and each tile crossed before landing
        for offset in range(roll):
            row = start.row - offset
            if row < GOAL_ROW:
                break
            self._eat_at(Position(row, start.col), result, landing=False)

        landing = Position(max(start.row - roll, GOAL_ROW), start.col)
        self.state.grid.move_piece(bear, landing)

        # Landing tile is always checked again
        self._eat_at(landing, result, landing=True)

        result.end = landing
        result.score = bear.score
        return result
