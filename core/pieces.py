"""Piece models for the pursuit game engine.

Bear and Wolves are scoring pieces sharing one Piece type. Sheep and the
Shepherd only carry a position; they are removed from play when captured.
"""

from __future__ import annotations

from dataclasses import dataclass

from .board import Position
from .constants import (
    PieceKind,
    GOAL_ROW,
    BEAR_SYMBOL,
    WOLF_SYMBOL,
    BEAR_ID,
    WOLF_ID_PREFIX,
)


@dataclass(eq=False)
class Piece:
    """A Bear or Wolf.

    Attributes:
        kind: PieceKind.BEAR or PieceKind.WOLF.
        piece_id: Display identifier ("Bear", "Wolf1", ...).
        position: Current cell.
        score: Sheep captured so far.
    """

    kind: PieceKind
    piece_id: str
    position: Position
    score: int = 0

    @classmethod
    def bear(cls, position: Position) -> Piece:
        """Create the Bear."""
        return cls(kind=PieceKind.BEAR, piece_id=BEAR_ID, position=position)

    @classmethod
    def wolf(cls, number: int, position: Position) -> Piece:
        """Create a Wolf. Numbers start at 1."""
        return cls(
            kind=PieceKind.WOLF,
            piece_id=f"{WOLF_ID_PREFIX}{number}",
            position=position,
        )

    @property
    def symbol(self) -> str:
        return BEAR_SYMBOL if self.kind == PieceKind.BEAR else WOLF_SYMBOL

    def has_reached_goal(self) -> bool:
        """Check if the piece stands on the goal row."""
        return self.position.row == GOAL_ROW

    def add_score(self, points: int = 1) -> None:
        """Add points for captured sheep.

        Raises:
            ValueError: If points is negative.
        """
        if points < 0:
            raise ValueError(f"Score can only increase, got {points}")
        self.score += points

    def __repr__(self) -> str:
        return f"Piece({self.piece_id}, at={self.position}, score={self.score})"


@dataclass(eq=False)
class Sheep:
    """A sheep grazing on a cell."""

    position: Position

    @property
    def kind(self) -> PieceKind:
        return PieceKind.SHEEP


@dataclass(eq=False)
class Shepherd:
    """The shepherd guarding the flock. Captured only by the Bear."""

    position: Position

    @property
    def kind(self) -> PieceKind:
        return PieceKind.SHEPHERD
