"""Tests for movement resolvers.

This module tests the resolvers:
- BearResolver: straight charge with path and landing captures
- WolfResolver: diagonal drift with edge deflection
"""

import pytest

from core.board import Grid, Position
from core.constants import SHEPHERD_SYMBOL, BEAR_SYMBOL
from core.game_state import GameState
from core.pieces import Piece, Sheep, Shepherd

from engine.resolvers import (
    BearResolver,
    BearMoveResult,
    WolfResolver,
    WolfMoveResult,
)


# =============================================================================
# Fixtures
# =============================================================================


def build_state(
    width: int = 7,
    height: int = 7,
    bear: tuple[int, int] = (6, 3),
    wolves: tuple[tuple[int, int], ...] = (),
    sheep: tuple[tuple[int, int], ...] = (),
    shepherd: tuple[int, int] | None = None,
) -> GameState:
    """Build a hand-placed game state."""
    grid = Grid(width, height)
    bear_piece = Piece.bear(Position(*bear))
    grid.place(bear_piece)

    wolf_pieces = []
    for number, (row, col) in enumerate(wolves, start=1):
        wolf = Piece.wolf(number, Position(row, col))
        grid.place(wolf)
        wolf_pieces.append(wolf)

    flock = []
    for row, col in sheep:
        animal = Sheep(Position(row, col))
        grid.place(animal)
        flock.append(animal)

    herder = None
    if shepherd is not None:
        herder = Shepherd(Position(*shepherd))
        grid.place(herder)

    return GameState(
        grid=grid,
        bear=bear_piece,
        wolves=wolf_pieces,
        sheep=flock,
        shepherd=herder,
        initial_sheep_count=len(flock),
    )


# =============================================================================
# Bear Tests
# =============================================================================


class TestBearResolver:
    """Test the Bear's straight charge."""

    def test_full_roll_captures_along_column(self):
        """7x7: from row 6 a roll of 6 scans rows 6..1 and lands on row 0."""
        state = build_state(sheep=((5, 3), (3, 3), (0, 3), (1, 1)))

        result = BearResolver(state).resolve(6)

        assert isinstance(result, BearMoveResult)
        assert result.end == Position(0, 3)
        assert result.sheep_eaten_on_path == [Position(5, 3), Position(3, 3)]
        assert result.sheep_eaten_on_landing == [Position(0, 3)]
        assert result.sheep_eaten == 3
        assert state.bear.score == 3
        assert result.score == 3
        assert [s.position for s in state.sheep] == [Position(1, 1)]
        assert state.validate() == []

    def test_sheep_past_landing_untouched(self):
        state = build_state(sheep=((3, 3),))
        result = BearResolver(state).resolve(2)

        assert result.end == Position(4, 3)
        assert result.sheep_eaten == 0
        assert state.count_sheep() == 1

    def test_landing_capture(self):
        state = build_state(sheep=((4, 3),))
        result = BearResolver(state).resolve(2)

        assert result.sheep_eaten_on_path == []
        assert result.sheep_eaten_on_landing == [Position(4, 3)]
        assert state.bear.score == 1

    def test_clamped_roll_counts_each_sheep_once(self):
        """When the roll overshoots the goal the scan reaches the landing tile."""
        state = build_state(bear=(2, 3), sheep=((1, 3), (0, 3)))
        result = BearResolver(state).resolve(5)

        assert result.end == Position(0, 3)
        assert result.sheep_eaten_on_path == [Position(1, 3), Position(0, 3)]
        assert result.sheep_eaten_on_landing == []
        assert state.bear.score == 2
        assert state.validate() == []

    def test_shepherd_eaten_without_points(self):
        state = build_state(sheep=((4, 3),), shepherd=(5, 3))
        result = BearResolver(state).resolve(3)

        assert result.shepherd_eaten_at == Position(5, 3)
        assert state.shepherd is None
        assert state.bear.score == 1
        assert state.validate() == []

    def test_shepherd_on_landing_tile(self):
        state = build_state(shepherd=(3, 3))
        result = BearResolver(state).resolve(3)

        assert result.shepherd_eaten_at == result.end == Position(3, 3)
        assert result.shepherd_eaten_on_landing
        assert state.shepherd is None
        assert state.bear.score == 0

    def test_shepherd_on_goal_row_eaten_by_path_scan(self):
        """An overshooting roll scans row 0 before landing there."""
        state = build_state(bear=(2, 3), shepherd=(0, 3))
        result = BearResolver(state).resolve(5)

        assert result.shepherd_eaten_at == result.end == Position(0, 3)
        assert not result.shepherd_eaten_on_landing
        assert state.shepherd is None

    def test_other_columns_untouched(self):
        state = build_state(sheep=((5, 2), (5, 4)), shepherd=(4, 2))
        BearResolver(state).resolve(6)

        assert state.count_sheep() == 2
        assert state.shepherd is not None

    def test_already_at_goal_is_noop(self):
        state = build_state(bear=(0, 3), sheep=((1, 3),))
        before = state.state_hash()

        result = BearResolver(state).resolve(4)

        assert result.already_at_goal
        assert result.end == result.start == Position(0, 3)
        assert state.state_hash() == before

    def test_grid_updated(self):
        state = build_state()
        BearResolver(state).resolve(4)

        assert not state.grid.cell_at(Position(6, 3)).has_piece()
        assert state.grid.cell_at(Position(2, 3)).piece is state.bear
        assert state.grid.render_rows()[2][3] == BEAR_SYMBOL

    def test_bear_joins_wolf_on_goal_tile(self):
        state = build_state(bear=(1, 3), wolves=((0, 3),))
        BearResolver(state).resolve(1)

        cell = state.grid.cell_at(Position(0, 3))
        assert cell.pieces == [state.wolves[0], state.bear]
        assert state.validate() == []

    @pytest.mark.parametrize("roll", [0, -2])
    def test_invalid_roll(self, roll):
        state = build_state()
        with pytest.raises(ValueError):
            BearResolver(state).resolve(roll)


# =============================================================================
# Wolf Tests
# =============================================================================


class TestWolfResolver:
    """Test the Wolves' diagonal drift."""

    def test_diagonal_steps_right(self):
        state = build_state(bear=(6, 0), wolves=((6, 3),))
        wolf = state.wolves[0]

        result = WolfResolver(state).resolve(wolf, 3, moving_right=True)

        assert isinstance(result, WolfMoveResult)
        assert result.steps == [Position(5, 4), Position(4, 5), Position(3, 6)]
        assert result.end == wolf.position == Position(3, 6)
        assert result.bounces == 0
        assert result.moving_right

    def test_bounce_off_right_edge(self):
        state = build_state(bear=(6, 0), wolves=((6, 5),))
        wolf = state.wolves[0]

        result = WolfResolver(state).resolve(wolf, 3, moving_right=True)

        assert result.steps == [Position(5, 6), Position(4, 5), Position(3, 4)]
        assert result.bounces == 1
        assert not result.moving_right

    def test_bounce_off_left_edge(self):
        state = build_state(bear=(6, 6), wolves=((6, 0),))
        wolf = state.wolves[0]

        result = WolfResolver(state).resolve(wolf, 2, moving_right=False)

        assert result.steps == [Position(5, 1), Position(4, 2)]
        assert result.bounces == 1
        assert result.moving_right

    def test_captures_on_intermediate_steps(self):
        state = build_state(bear=(6, 0), wolves=((6, 3),), sheep=((5, 4), (3, 6), (4, 4)))
        wolf = state.wolves[0]

        result = WolfResolver(state).resolve(wolf, 3, moving_right=True)

        assert result.sheep_eaten == [Position(5, 4), Position(3, 6)]
        assert wolf.score == 2
        assert result.score == 2
        assert [s.position for s in state.sheep] == [Position(4, 4)]
        assert state.validate() == []

    def test_never_eats_shepherd(self):
        state = build_state(bear=(6, 0), wolves=((6, 3),), shepherd=(5, 4))
        wolf = state.wolves[0]

        WolfResolver(state).resolve(wolf, 1, moving_right=True)

        assert wolf.position == Position(5, 4)
        assert state.shepherd is not None
        assert state.grid.render_rows()[5][4] == SHEPHERD_SYMBOL
        assert state.validate() == []

    def test_stops_at_goal_row(self):
        state = build_state(bear=(6, 0), wolves=((2, 3),))
        wolf = state.wolves[0]

        result = WolfResolver(state).resolve(wolf, 6, moving_right=True)

        assert result.steps == [Position(1, 4), Position(0, 5)]
        assert wolf.position == Position(0, 5)
        assert not result.already_at_goal

    def test_already_at_goal_is_noop(self):
        state = build_state(bear=(6, 0), wolves=((0, 3),), sheep=((0, 4),))
        wolf = state.wolves[0]
        before = state.state_hash()

        result = WolfResolver(state).resolve(wolf, 5, moving_right=True)

        assert result.already_at_goal
        assert result.steps == []
        assert state.state_hash() == before

    def test_wolves_may_share_a_tile(self):
        state = build_state(bear=(6, 6), wolves=((0, 2), (1, 1)))
        WolfResolver(state).resolve(state.wolves[1], 1, moving_right=True)

        cell = state.grid.cell_at(Position(0, 2))
        assert len(cell.pieces) == 2
        assert state.validate() == []

    @pytest.mark.parametrize("moving_right", [True, False])
    @pytest.mark.parametrize("roll", range(1, 7))
    def test_column_always_in_bounds(self, roll, moving_right):
        for col in range(7):
            state = build_state(bear=(0, 0), wolves=((6, col),))
            wolf = state.wolves[0]

            result = WolfResolver(state).resolve(wolf, roll, moving_right)

            rows = [6] + [step.row for step in result.steps]
            assert all(0 <= step.col < 7 for step in result.steps)
            assert all(a - b == 1 for a, b in zip(rows, rows[1:]))
            assert len(result.steps) == min(roll, 6)
            assert state.validate() == []

    def test_invalid_roll(self):
        state = build_state(bear=(6, 0), wolves=((6, 3),))
        with pytest.raises(ValueError):
            WolfResolver(state).resolve(state.wolves[0], 0, moving_right=True)
