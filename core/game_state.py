"""Game state for the pursuit game engine.

GameState is the single source of truth for a game. It owns the grid
and every piece, and provides cloning, serialization, hashing and a
consistency check between piece positions and grid occupancy.
"""

from __future__ import annotations

import copy
import hashlib
import json
from dataclasses import dataclass, field
from typing import Optional, Any

from .board import Grid, Position
from .constants import PieceKind
from .pieces import Piece, Sheep, Shepherd


@dataclass
class GameState:
    """The complete game state.

    Attributes:
        grid: The board with per-cell occupancy.
        bear: The Bear.
        wolves: Wolves in registration (turn) order.
        sheep: Live sheep; captured sheep are removed.
        shepherd: The shepherd, or None once captured.
        initial_sheep_count: Number of sheep placed at setup.
        round_number: Number of rounds played so far.
        game_ended: Whether every Bear/Wolf reached the goal row.
        interrupted: Whether play was stopped before the game ended.
    """

    grid: Grid
    bear: Piece
    wolves: list[Piece] = field(default_factory=list)
    sheep: list[Sheep] = field(default_factory=list)
    shepherd: Optional[Shepherd] = None
    initial_sheep_count: int = 0
    round_number: int = 0
    game_ended: bool = False
    interrupted: bool = False

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    # -------------------------------------------------------------------------
    # Piece access
    # -------------------------------------------------------------------------

    def scoring_pieces(self) -> list[Piece]:
        """Bear followed by the wolves in turn order."""
        return [self.bear, *self.wolves]

    def all_at_goal(self) -> bool:
        """Check if the Bear and every Wolf stand on the goal row."""
        return all(piece.has_reached_goal() for piece in self.scoring_pieces())

    def is_game_over(self) -> bool:
        """Check if the game has ended, normally or by interruption."""
        return self.game_ended or self.interrupted

    # -------------------------------------------------------------------------
    # Captures
    # -------------------------------------------------------------------------

    def capture_sheep_at(self, pos: Position) -> Optional[Sheep]:
        """Remove the sheep at a position from the grid and the flock.

        Returns:
            The captured sheep, or None if the cell holds no sheep.
        """
        if self.grid.cell_at(pos).sheep is None:
            return None
        sheep = self.grid.remove(PieceKind.SHEEP, pos)
        self.sheep = [s for s in self.sheep if s is not sheep]
        return sheep

    def capture_shepherd_at(self, pos: Position) -> Optional[Shepherd]:
        """Remove the shepherd if it stands at a position.

        Returns:
            The captured shepherd, or None if it is not there.
        """
        if self.grid.cell_at(pos).shepherd is None:
            return None
        shepherd = self.grid.remove(PieceKind.SHEPHERD, pos)
        self.shepherd = None
        return shepherd

    def count_sheep(self) -> int:
        """Return the number of live sheep."""
        return len(self.sheep)

    def total_captured(self) -> int:
        """Return the number of sheep captured so far."""
        return self.initial_sheep_count - len(self.sheep)

    # -------------------------------------------------------------------------
    # Cloning and serialization
    # -------------------------------------------------------------------------

    def clone(self) -> GameState:
        """Create a deep copy of the game state."""
        return copy.deepcopy(self)

    def to_dict(self) -> dict[str, Any]:
        """Serialize the game state to a dictionary.

        Returns:
            Dictionary representation of the game state.
        """
        return {
            "width": self.width,
            "height": self.height,
            "round_number": self.round_number,
            "game_ended": self.game_ended,
            "interrupted": self.interrupted,
            "initial_sheep_count": self.initial_sheep_count,
            "pieces": [
                {
                    "piece_id": p.piece_id,
                    "kind": p.kind.value,
                    "row": p.position.row,
                    "col": p.position.col,
                    "score": p.score,
                }
                for p in self.scoring_pieces()
            ],
            "sheep": sorted([s.position.row, s.position.col] for s in self.sheep),
            "shepherd": (
                [self.shepherd.position.row, self.shepherd.position.col]
                if self.shepherd is not None
                else None
            ),
        }

    def state_hash(self) -> str:
        """Compute a hash of the game state.

        Two games replayed from the same seed produce the same hash.

        Returns:
            A hex string hash of the serialized state.
        """
        state_json = json.dumps(self.to_dict(), sort_keys=True)
        return hashlib.sha256(state_json.encode()).hexdigest()

    # -------------------------------------------------------------------------
    # Validation
    # -------------------------------------------------------------------------

    def validate(self) -> list[str]:
        """Validate that piece positions and grid occupancy agree.

        Returns:
            List of validation error messages (empty if valid).
        """
        errors: list[str] = []
        grid = self.grid

        # Piece -> grid
        for piece in self.scoring_pieces():
            if not grid.in_bounds(piece.position):
                errors.append(f"{piece.piece_id} off the grid at {piece.position}")
                continue
            cell = grid.cell_at(piece.position)
            if not any(p is piece for p in cell.pieces):
                errors.append(
                    f"{piece.piece_id} at {piece.position} not reflected in cell"
                )
            if piece.score < 0:
                errors.append(f"{piece.piece_id} has negative score {piece.score}")

        for sheep in self.sheep:
            if not grid.in_bounds(sheep.position):
                errors.append(f"Sheep off the grid at {sheep.position}")
            elif grid.cell_at(sheep.position).sheep is not sheep:
                errors.append(f"Sheep at {sheep.position} not reflected in cell")

        if self.shepherd is not None:
            if not grid.in_bounds(self.shepherd.position):
                errors.append(f"Shepherd off the grid at {self.shepherd.position}")
            elif grid.cell_at(self.shepherd.position).shepherd is not self.shepherd:
                errors.append(
                    f"Shepherd at {self.shepherd.position} not reflected in cell"
                )

        # Grid -> pieces
        live_pieces = self.scoring_pieces()
        for cell in grid.iter_cells():
            for piece in cell.pieces:
                if not any(piece is p for p in live_pieces):
                    errors.append(f"Unknown piece on cell {cell.position}")
                elif piece.position != cell.position:
                    errors.append(
                        f"{piece.piece_id} on cell {cell.position} "
                        f"but positioned at {piece.position}"
                    )
            if cell.sheep is not None and not any(cell.sheep is s for s in self.sheep):
                errors.append(f"Captured or unknown sheep on cell {cell.position}")
            if cell.shepherd is not None and cell.shepherd is not self.shepherd:
                errors.append(f"Unknown shepherd on cell {cell.position}")

        # Score bound
        total_score = sum(p.score for p in live_pieces)
        if total_score != self.total_captured():
            errors.append(
                f"Scores total {total_score} but {self.total_captured()} sheep captured"
            )

        return errors

    # -------------------------------------------------------------------------
    # String representation
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        """Return a human-readable string representation."""
        lines = [
            f"GameState({self.height}x{self.width}, round={self.round_number})",
            f"  Sheep remaining: {self.count_sheep()}/{self.initial_sheep_count}",
            f"  Shepherd: {'captured' if self.shepherd is None else self.shepherd.position}",
            f"  Pieces ({len(self.scoring_pieces())}):",
        ]
        for p in self.scoring_pieces():
            status = "GOAL" if p.has_reached_goal() else "moving"
            lines.append(
                f"    {p.piece_id}: at={p.position}, score={p.score} [{status}]"
            )
        return "\n".join(lines)
