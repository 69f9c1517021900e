"""Wolf movement resolver for the pursuit game engine.

A Wolf advances diagonally: each step moves one row toward the goal
and one column in its drift direction. When the drift would carry it
off the board the direction flips for the rest of the move.

Wolves eat sheep on every tile they step on, but never the shepherd.
A Wolf that reaches the goal row stops; the rest of its roll is lost.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from core.board import Position
from core.constants import GOAL_ROW

if TYPE_CHECKING:
    from core.game_state import GameState
    from core.pieces import Piece


@dataclass
class WolfMoveResult:
    """Result of resolving one Wolf move.

    Attributes:
        wolf_id: The Wolf that moved.
        roll: The dice value used.
        start: Position before the move.
        end: Position after the move.
        moving_right: Drift direction at the end of the move.
        already_at_goal: True if the Wolf was on the goal row and did not move.
        steps: Every tile visited, in order.
        bounces: Number of times the drift direction flipped at an edge.
        sheep_eaten: Positions of sheep eaten, in order.
        score: The Wolf's score after the move.
    """

    wolf_id: str
    roll: int
    start: Position
    end: Position
    moving_right: bool
    already_at_goal: bool = False
    steps: list[Position] = field(default_factory=list)
    bounces: int = 0
    sheep_eaten: list[Position] = field(default_factory=list)
    score: int = 0


class WolfResolver:
    """Resolves a Wolf's move for a given dice roll and drift direction."""

    def __init__(self, state: GameState):
        """Initialize the resolver with the game state.

        Args:
            state: The current game state.
        """
        self.state = state

    def next_step(self, pos: Position, moving_right: bool) -> tuple[Position, bool]:
        """Compute one diagonal step with edge deflection.

        Args:
            pos: Current position.
            moving_right: Current drift direction.

        Returns:
            (destination, drift direction after the step).
        """
        grid = self.state.grid
        row = max(pos.row - 1, GOAL_ROW)
        col = pos.col + (1 if moving_right else -1)

        if not 0 <= col < grid.width:
            moving_right = not moving_right
            col = grid.clamp_col(pos.col + (1 if moving_right else -1))

        return Position(row, col), moving_right

    def resolve(self, wolf: Piece, roll: int, moving_right: bool) -> WolfMoveResult:
        """Move a Wolf by a dice roll.

        Args:
            wolf: The Wolf to move.
            roll: Number of steps (a dice value, >= 1).
            moving_right: Initial drift direction.

        Returns:
            WolfMoveResult with what happened.

        Raises:
            ValueError: If roll is not positive.
        """
        if roll < 1:
            raise ValueError(f"Roll must be positive, got {roll}")

        start = wolf.position
        result = WolfMoveResult(
            wolf_id=wolf.piece_id,
            roll=roll,
            start=start,
            end=start,
            moving_right=moving_right,
            score=wolf.score,
        )

        if wolf.has_reached_goal():
            result.already_at_goal = True
            return result

        for _ in range(roll):
            if wolf.has_reached_goal():
                break

            destination, new_direction = self.next_step(wolf.position, moving_right)
            if new_direction != moving_right:
                result.bounces += 1
            moving_right = new_direction

            if self.state.capture_sheep_at(destination) is not None:
                wolf.add_score()
                result.sheep_eaten.append(destination)

            self.state.grid.move_piece(wolf, destination)
            result.steps.append(destination)

        result.end = wolf.position
        result.moving_right = moving_right
        result.score = wolf.score
        return result
