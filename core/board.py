"""Grid model for the pursuit game engine.

The board is a fixed-size rectangular array of cells:
- Row 0 is the goal row; pieces start on row height-1 and move up
- Each cell holds at most one Sheep and one Shepherd
- Bear and Wolves share the "big piece" slot of a cell

Dimensions never change after construction; only occupancy does.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional, Union, TYPE_CHECKING

from .constants import (
    PieceKind,
    EMPTY_SYMBOL,
    SHEEP_SYMBOL,
    SHEPHERD_SYMBOL,
)

if TYPE_CHECKING:
    from .pieces import Piece, Sheep, Shepherd

    Occupant = Union[Piece, Sheep, Shepherd]


@dataclass(frozen=True, order=True)
class Position:
    """A (row, col) coordinate on the grid. Row decreases toward the goal."""

    row: int
    col: int

    def __str__(self) -> str:
        return f"({self.row}, {self.col})"


@dataclass
class Cell:
    """A single tile of the grid.

    Attributes:
        position: Coordinates of this cell.
        pieces: Bear/Wolves on this cell, in arrival order. Setup never puts
            two here, but pieces converging during play may share a tile.
        sheep: The sheep grazing here, if any.
        shepherd: The shepherd standing here, if any.
    """

    position: Position
    pieces: list[Piece] = field(default_factory=list)
    sheep: Optional[Sheep] = None
    shepherd: Optional[Shepherd] = None

    @property
    def piece(self) -> Optional[Piece]:
        """The most recently arrived Bear/Wolf, or None."""
        return self.pieces[-1] if self.pieces else None

    def has_piece(self) -> bool:
        """Check if a Bear or Wolf stands on this cell."""
        return bool(self.pieces)

    def is_occupied(self) -> bool:
        """Check if anything at all occupies this cell."""
        return bool(self.pieces) or self.sheep is not None or self.shepherd is not None

    def symbol(self) -> str:
        """Render symbol: Shepherd > Bear/Wolf > Sheep > empty."""
        if self.shepherd is not None:
            return SHEPHERD_SYMBOL
        if self.pieces:
            return self.pieces[-1].symbol
        if self.sheep is not None:
            return SHEEP_SYMBOL
        return EMPTY_SYMBOL


class Grid:
    """Fixed-size board of cells indexed by Position.

    Out-of-range access is a programming error and raises IndexError;
    movement code clamps coordinates before touching the grid.
    """

    def __init__(self, width: int, height: int):
        """Create an empty grid.

        Args:
            width: Number of columns.
            height: Number of rows.

        Raises:
            ValueError: If either dimension is not positive.
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._cells: list[list[Cell]] = [
            [Cell(Position(row, col)) for col in range(width)]
            for row in range(height)
        ]

    # -------------------------------------------------------------------------
    # Access
    # -------------------------------------------------------------------------

    def in_bounds(self, pos: Position) -> bool:
        """Check if a position lies on the grid."""
        return 0 <= pos.row < self.height and 0 <= pos.col < self.width

    def cell_at(self, pos: Position) -> Cell:
        """Get the cell at a position.

        Raises:
            IndexError: If the position is off the grid.
        """
        if not self.in_bounds(pos):
            raise IndexError(
                f"Position {pos} outside {self.height}x{self.width} grid"
            )
        return self._cells[pos.row][pos.col]

    def is_occupied(self, pos: Position) -> bool:
        """Check if any occupant is at a position."""
        return self.cell_at(pos).is_occupied()

    def iter_cells(self) -> Iterator[Cell]:
        """Iterate over all cells, row by row."""
        for row in self._cells:
            yield from row

    def clamp_col(self, col: int) -> int:
        """Clamp a column index into [0, width)."""
        return max(min(col, self.width - 1), 0)

    # -------------------------------------------------------------------------
    # Occupancy changes
    # -------------------------------------------------------------------------

    def place(self, occupant: Occupant) -> None:
        """Put an occupant on the cell matching its own position.

        Raises:
            IndexError: If the occupant's position is off the grid.
            ValueError: If the cell already holds a sheep/shepherd (for
                those kinds) or already holds this very piece.
        """
        cell = self.cell_at(occupant.position)
        kind = occupant.kind

        if kind in (PieceKind.BEAR, PieceKind.WOLF):
            if any(p is occupant for p in cell.pieces):
                raise ValueError(f"{occupant.piece_id} already at {cell.position}")
            cell.pieces.append(occupant)
        elif kind == PieceKind.SHEEP:
            if cell.sheep is not None:
                raise ValueError(f"Cell {cell.position} already holds a sheep")
            cell.sheep = occupant
        elif kind == PieceKind.SHEPHERD:
            if cell.shepherd is not None:
                raise ValueError(f"Cell {cell.position} already holds the shepherd")
            cell.shepherd = occupant

    def remove(self, kind: PieceKind, pos: Position) -> Union[Sheep, Shepherd]:
        """Take a sheep or the shepherd off a cell.

        Bear and Wolves are never removed; they only move, by identity,
        through move_piece().

        Returns:
            The removed occupant.

        Raises:
            ValueError: If kind is a Bear/Wolf, or no occupant of that
                kind is at the position.
        """
        if kind in (PieceKind.BEAR, PieceKind.WOLF):
            raise ValueError(f"Use move_piece() for {kind.value}; only sheep/shepherd are removed")

        cell = self.cell_at(pos)
        if kind == PieceKind.SHEEP and cell.sheep is not None:
            sheep = cell.sheep
            cell.sheep = None
            return sheep
        elif kind == PieceKind.SHEPHERD and cell.shepherd is not None:
            shepherd = cell.shepherd
            cell.shepherd = None
            return shepherd

        raise ValueError(f"No {kind.value} at {pos}")

    def move_piece(self, piece: Piece, new_pos: Position) -> None:
        """Move a Bear/Wolf to a new cell, updating its stored position.

        Raises:
            IndexError: If new_pos is off the grid.
            ValueError: If the piece is not on the cell its position names.
        """
        target = self.cell_at(new_pos)
        source = self.cell_at(piece.position)
        for idx, occupant in enumerate(source.pieces):
            if occupant is piece:
                del source.pieces[idx]
                break
        else:
            raise ValueError(f"{piece.piece_id} not found at {piece.position}")

        piece.position = new_pos
        target.pieces.append(piece)

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def render_rows(self) -> list[list[str]]:
        """Return the grid as rows of per-cell symbols, goal row first."""
        return [[cell.symbol() for cell in row] for row in self._cells]

    def __str__(self) -> str:
        return "\n".join(" ".join(row) for row in self.render_rows())
