"""Main game engine for the pursuit game.

The GameEngine is the primary interface for playing the game. It provides:
- reset(): Validate a configuration and set up a new board
- play_round(): Roll and resolve the Bear, then every Wolf in order
- is_game_over(): Whether every piece reached the goal (or play stopped)
- get_outcome(): Winner or tie from the current scores

All randomness comes from one injectable random.Random instance, so a
seeded engine replays the same game.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Optional, Any

from core.config import GameConfig
from core.constants import DICE_FACES, TieRule
from core.game_state import GameState
from core.pieces import Piece

from .resolvers import BearResolver, BearMoveResult, WolfResolver, WolfMoveResult
from .scoring import GameOutcome, determine_outcome
from .setup import initialize_game


@dataclass
class RoundResult:
    """Result of playing one round.

    Attributes:
        round_number: The round that was played (1-indexed).
        bear: The Bear's move.
        wolves: Each Wolf's move, in turn order.
        done: Whether the game ended with this round.
    """

    round_number: int
    bear: BearMoveResult
    wolves: list[WolfMoveResult] = field(default_factory=list)
    done: bool = False


class GameEngine:
    """Main engine for playing the pursuit game.

    Usage:
        engine = GameEngine()
        engine.reset(GameConfig.square(10, 30, 2, seed=7))

        while not engine.is_game_over():
            engine.play_round()

        outcome = engine.get_outcome()
    """

    def __init__(self, rng: Optional[random.Random] = None):
        """Initialize the game engine.

        Args:
            rng: Random source for setup and dice. When None, reset()
                creates one seeded from the configuration.
        """
        self._injected_rng = rng
        self._rng: Optional[random.Random] = rng
        self._state: Optional[GameState] = None
        self._config: Optional[GameConfig] = None

    @property
    def state(self) -> GameState:
        """Get the current game state.

        Raises:
            RuntimeError: If the game has not been initialized.
        """
        if self._state is None:
            raise RuntimeError("Game not initialized. Call reset() first.")
        return self._state

    @property
    def config(self) -> GameConfig:
        """Get the configuration of the current game.

        Raises:
            RuntimeError: If the game has not been initialized.
        """
        if self._config is None:
            raise RuntimeError("Game not initialized. Call reset() first.")
        return self._config

    @property
    def rng(self) -> random.Random:
        if self._rng is None:
            raise RuntimeError("Game not initialized. Call reset() first.")
        return self._rng

    # -------------------------------------------------------------------------
    # Game Initialization
    # -------------------------------------------------------------------------

    def reset(self, config: GameConfig) -> GameState:
        """Initialize a new game.

        Args:
            config: The game configuration.

        Returns:
            The initial game state.

        Raises:
            ConfigurationError: If the configuration violates any bound.
                The engine keeps its previous game in that case.
        """
        config.validate()
        rng = self._injected_rng if self._injected_rng is not None else random.Random(config.seed)
        state = initialize_game(config, rng)

        self._rng = rng
        self._config = config
        self._state = state
        return state

    def load_state(self, state: GameState, config: GameConfig) -> None:
        """Play on from an existing state (e.g. a hand-built test board).

        A state whose pieces already all stand on the goal row is marked ended.
        """
        if state.all_at_goal():
            state.game_ended = True
        self._config = config
        self._state = state
        if self._rng is None:
            self._rng = random.Random(config.seed)

    # -------------------------------------------------------------------------
    # Turn Execution
    # -------------------------------------------------------------------------

    def roll_dice(self) -> int:
        """Roll one die."""
        return self.rng.randint(1, DICE_FACES)

    def flip_direction(self) -> bool:
        """Fair coin for a Wolf's drift; True means right."""
        return self.rng.random() < 0.5

    def move_bear(self, roll: Optional[int] = None) -> BearMoveResult:
        """Roll for the Bear (unless a roll is given) and resolve its move."""
        if roll is None:
            roll = self.roll_dice()
        return BearResolver(self.state).resolve(roll)

    def move_wolf(
        self,
        wolf: Piece,
        roll: Optional[int] = None,
        moving_right: Optional[bool] = None,
    ) -> WolfMoveResult:
        """Roll and flip for a Wolf (unless given) and resolve its move."""
        if roll is None:
            roll = self.roll_dice()
        if moving_right is None:
            moving_right = self.flip_direction()
        return WolfResolver(self.state).resolve(wolf, roll, moving_right)

    def move_wolves(self) -> list[WolfMoveResult]:
        """Move every Wolf in turn order."""
        return [self.move_wolf(wolf) for wolf in self.state.wolves]

    def play_round(self) -> RoundResult:
        """Play one full round: the Bear, then each Wolf.

        Returns:
            RoundResult describing every move.

        Raises:
            RuntimeError: If the game is already over.
        """
        if self.is_game_over():
            raise RuntimeError("Game is over; call reset() to start a new one")

        state = self.state
        bear_result = self.move_bear()
        wolf_results = self.move_wolves()

        state.round_number += 1
        if state.all_at_goal():
            state.game_ended = True

        return RoundResult(
            round_number=state.round_number,
            bear=bear_result,
            wolves=wolf_results,
            done=state.game_ended,
        )

    def interrupt(self) -> None:
        """Stop the game early; the outcome is scored as the board stands."""
        self.state.interrupted = True

    # -------------------------------------------------------------------------
    # End Condition
    # -------------------------------------------------------------------------

    def is_game_over(self) -> bool:
        """Check if the game has ended or was interrupted.

        Read-only: game_ended is only set by play_round() and load_state().
        """
        if self._state is None:
            return False
        return self._state.is_game_over() or self._state.all_at_goal()

    def get_outcome(self, tie_rule: Optional[TieRule] = None) -> GameOutcome:
        """Score the game.

        Args:
            tie_rule: Override for the configured tie rule.
        """
        return determine_outcome(self.state, tie_rule or self.config.tie_rule)

    # -------------------------------------------------------------------------
    # Utility Methods
    # -------------------------------------------------------------------------

    def clone(self) -> GameEngine:
        """Create an independent copy of the engine, random source included."""
        new_engine = GameEngine()
        new_engine._state = self.state.clone()
        new_engine._config = self._config
        new_engine._rng = random.Random()
        new_engine._rng.setstate(self.rng.getstate())
        return new_engine

    def get_game_summary(self) -> dict[str, Any]:
        """Get a summary of the current game state.

        Returns:
            Dictionary with game summary information.
        """
        state = self.state
        return {
            "round": state.round_number,
            "width": state.width,
            "height": state.height,
            "sheep_remaining": state.count_sheep(),
            "sheep_captured": state.total_captured(),
            "shepherd_alive": state.shepherd is not None,
            "pieces": [
                {
                    "id": p.piece_id,
                    "row": p.position.row,
                    "col": p.position.col,
                    "score": p.score,
                    "at_goal": p.has_reached_goal(),
                }
                for p in state.scoring_pieces()
            ],
            "game_over": self.is_game_over(),
            "interrupted": state.interrupted,
        }

    def __str__(self) -> str:
        """Return string representation of the engine."""
        if self._state is None:
            return "GameEngine(not initialized)"
        return f"GameEngine(round={self.state.round_number}, over={self.is_game_over()})"
