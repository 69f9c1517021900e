"""Interactive CLI driver for playing the pursuit game.

This module provides a text-based interface for the game. The driver is
designed to be extensible:
- GameRenderer handles all display logic
- TurnPrompter handles all user input
- GameDriver orchestrates the game loop

Usage:
    python -m engine.driver --size 10 --sheep 30 --wolves 2

Or from code:
    from engine.driver import GameDriver
    driver = GameDriver(GameConfig.square(10, 30, 2))
    driver.run()
"""

from __future__ import annotations

import argparse
import re
import sys
from abc import ABC, abstractmethod
from typing import Callable, Optional, Sequence

from core.config import (
    ConfigurationError,
    GameConfig,
    sheep_bounds,
    validate_board_size,
    validate_wolf_count,
    validate_sheep_count,
)
from core.constants import (
    TieRule,
    MIN_BOARD_SIZE,
    MAX_BOARD_SIZE,
    MIN_WOLVES,
    MAX_WOLVES,
    BEAR_SYMBOL,
    WOLF_SYMBOL,
    SHEEP_SYMBOL,
    SHEPHERD_SYMBOL,
)
from core.game_state import GameState

from engine.game_engine import GameEngine, RoundResult
from engine.resolvers import BearMoveResult, WolfMoveResult
from engine.scoring import GameOutcome


# =============================================================================
# Display Formatters
# =============================================================================

class GameRenderer(ABC):
    """Abstract base class for rendering game state."""

    @abstractmethod
    def render_board(self, state: GameState) -> None:
        """Render the grid."""
        pass

    @abstractmethod
    def render_round(self, result: RoundResult) -> None:
        """Render the moves of one round."""
        pass

    @abstractmethod
    def render_message(self, message: str) -> None:
        """Render a message to the user."""
        pass

    @abstractmethod
    def render_error(self, error: str) -> None:
        """Render an error message."""
        pass

    @abstractmethod
    def render_game_over(self, outcome: GameOutcome) -> None:
        """Render the end-of-game report."""
        pass


class TextRenderer(GameRenderer):
    """CLI text-based renderer."""

    SYMBOL_COLORS = {
        BEAR_SYMBOL: "\033[91m",  # Red
        WOLF_SYMBOL: "\033[94m",  # Blue
        SHEPHERD_SYMBOL: "\033[93m",  # Yellow
        SHEEP_SYMBOL: "\033[97m",  # White
    }
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    def __init__(self, use_colors: bool = True, out: Callable[[str], None] = print):
        """Initialize the renderer.

        Args:
            use_colors: Whether to use ANSI color codes.
            out: Line sink, print by default.
        """
        self.use_colors = use_colors
        self._out = out

    def _color(self, text: str, color: str) -> str:
        """Apply color to text if colors are enabled."""
        if self.use_colors:
            return f"{color}{text}{self.RESET}"
        return text

    def _strip_ansi(self, text: str) -> str:
        """Strip ANSI escape codes from text."""
        return re.sub(r'\033\[[0-9;]*m', '', text)

    def _symbol(self, symbol: str) -> str:
        color = self.SYMBOL_COLORS.get(symbol)
        if color is None:
            return self._color(symbol, self.DIM)
        return self._color(symbol, color)

    def format_board(self, state: GameState) -> list[str]:
        """Format the grid as one text line per row, goal row first."""
        return [
            " ".join(self._symbol(symbol) for symbol in row)
            for row in state.grid.render_rows()
        ]

    def render_board(self, state: GameState) -> None:
        """Render the grid."""
        for line in self.format_board(state):
            self._out(line)

    def format_bear_move(self, result: BearMoveResult) -> list[str]:
        """Describe a Bear move as message lines."""
        lines = [f"The Bear rolls the dice and got: {result.roll}"]
        if result.already_at_goal:
            lines.append("The Bear has already reached the goal.")
            return lines

        running = result.score - result.sheep_eaten
        for _ in result.sheep_eaten_on_path:
            running += 1
            lines.append(
                f"The Bear ate a sheep on the way and scored a point. Current score: {running}"
            )
        if result.shepherd_eaten_at is not None and not result.shepherd_eaten_on_landing:
            lines.append("The Bear ate the shepherd on the way.")
        for _ in result.sheep_eaten_on_landing:
            running += 1
            lines.append(
                f"The Bear ate a sheep on its tile and scored a point. Current score: {running}"
            )
        if result.shepherd_eaten_on_landing:
            lines.append("The Bear ate the shepherd on its tile.")
        return lines

    def format_wolf_move(self, result: WolfMoveResult) -> list[str]:
        """Describe a Wolf move as message lines."""
        lines = [f"{result.wolf_id} rolls the dice and got: {result.roll}"]
        if result.already_at_goal:
            lines.append(f"{result.wolf_id} has already reached the goal.")
            return lines

        running = result.score - len(result.sheep_eaten)
        for _ in result.sheep_eaten:
            running += 1
            lines.append(
                f"{result.wolf_id} ate a sheep and scored a point. "
                f"Score {result.wolf_id}: {running}"
            )
        return lines

    def render_round(self, result: RoundResult) -> None:
        """Render the moves of one round."""
        for line in self.format_bear_move(result.bear):
            self._out(line)
        for wolf_result in result.wolves:
            for line in self.format_wolf_move(wolf_result):
                self._out(line)

    def render_message(self, message: str) -> None:
        """Render a message to the user."""
        self._out(message)

    def render_error(self, error: str) -> None:
        """Render an error message."""
        self._out(self._color(f"[ERROR] {error}", "\033[91m"))

    def format_game_over(self, outcome: GameOutcome) -> list[str]:
        """Format the end-of-game report."""
        lines = []
        if outcome.interrupted:
            lines.append(self._color("The game was stopped before every piece reached the goal.", self.DIM))
        lines.append(self._color("The game is over!", self.BOLD))

        for piece_id, score in outcome.scores.items():
            label = "Bear's score" if piece_id == "Bear" else piece_id
            lines.append(f"{label}: {score}")

        if outcome.is_tie:
            lines.append("The game ends in a tie!")
        else:
            lines.append(
                f"The winner is: {outcome.winner_id} with a score of: {outcome.winner_score}"
            )
        return lines

    def render_game_over(self, outcome: GameOutcome) -> None:
        """Render the end-of-game report."""
        for line in self.format_game_over(outcome):
            self._out(line)


# =============================================================================
# Turn Prompter
# =============================================================================

class TurnPrompter(ABC):
    """Abstract base class for reading user input."""

    @abstractmethod
    def prompt_line(self, message: str) -> str:
        """Read one line of input.

        Raises:
            EOFError: If input is exhausted.
        """
        pass

    def wait_for_turn(self, message: str) -> None:
        """Block until the user signals the next turn. Content is ignored."""
        self.prompt_line(message)


class TextPrompter(TurnPrompter):
    """Reads input from the console."""

    def prompt_line(self, message: str) -> str:
        return input(message)


class AutoPrompter(TextPrompter):
    """Console prompter that advances turns without waiting."""

    def wait_for_turn(self, message: str) -> None:
        pass


def _prompt_validated_int(
    prompter: TurnPrompter,
    renderer: GameRenderer,
    message: str,
    validate: Callable[[int], None],
) -> int:
    """Prompt until the input is an integer accepted by validate."""
    while True:
        raw = prompter.prompt_line(message).strip()
        try:
            value = int(raw)
        except ValueError:
            renderer.render_error("Invalid input. Please enter a number.")
            continue
        try:
            validate(value)
        except ConfigurationError as e:
            renderer.render_error(str(e))
            continue
        return value


def prompt_config(
    prompter: TurnPrompter,
    renderer: GameRenderer,
    seed: Optional[int] = None,
    tie_rule: TieRule = TieRule.STRICT,
) -> GameConfig:
    """Ask for board size, sheep count and wolf count, re-prompting on errors.

    Raises:
        EOFError: If input runs out before a valid configuration is read.
    """
    size = _prompt_validated_int(
        prompter,
        renderer,
        f"Enter the board size (square, {MIN_BOARD_SIZE}-{MAX_BOARD_SIZE}): ",
        lambda value: validate_board_size(value, value),
    )

    min_sheep, max_sheep = sheep_bounds(size, size)
    sheep_count = _prompt_validated_int(
        prompter,
        renderer,
        f"Enter the number of sheep on the board (between {min_sheep} and {max_sheep}): ",
        lambda value: validate_sheep_count(size, size, value),
    )

    wolf_count = _prompt_validated_int(
        prompter,
        renderer,
        f"Enter the number of wolves on the board ({MIN_WOLVES}-{MAX_WOLVES}): ",
        validate_wolf_count,
    )

    return GameConfig.square(size, sheep_count, wolf_count, seed=seed, tie_rule=tie_rule)


# =============================================================================
# Game Driver
# =============================================================================

class GameDriver:
    """Main driver for running an interactive game session.

    This class orchestrates the game loop and delegates to:
    - GameEngine for game logic
    - GameRenderer for display
    - TurnPrompter for user input
    """

    TURN_PROMPT = "--- New turn --- Press Enter to continue"

    def __init__(
        self,
        config: GameConfig,
        renderer: Optional[GameRenderer] = None,
        prompter: Optional[TurnPrompter] = None,
        engine: Optional[GameEngine] = None,
    ):
        """Initialize the game driver.

        Args:
            config: The game configuration.
            renderer: The renderer to use (default: TextRenderer).
            prompter: The prompter to use (default: TextPrompter).
            engine: The engine to drive (default: a fresh GameEngine).
        """
        self.config = config
        self.engine = engine or GameEngine()
        self.renderer = renderer or TextRenderer()
        self.prompter = prompter or TextPrompter()

    def run(self) -> GameOutcome:
        """Run the main game loop and report the outcome."""
        self.engine.reset(self.config)
        self.renderer.render_board(self.engine.state)

        while not self.engine.is_game_over():
            try:
                self.prompter.wait_for_turn(self.TURN_PROMPT)
            except (EOFError, OSError, KeyboardInterrupt) as e:
                detail = str(e) or type(e).__name__
                self.renderer.render_error(
                    f"An error occurred while reading from the console: {detail}"
                )
                self.engine.interrupt()
                break

            result = self.engine.play_round()
            self.renderer.render_round(result)
            self.renderer.render_board(self.engine.state)

        outcome = self.engine.get_outcome()
        self.renderer.render_game_over(outcome)
        return outcome


# =============================================================================
# Entry Point
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    """Create the command-line parser."""
    parser = argparse.ArgumentParser(
        description="Bear, Wolves and Sheep pursuit board game",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("--size", type=int, default=None,
                        help="Board side length for a square board")
    parser.add_argument("--width", type=int, default=None,
                        help="Board width (overrides --size)")
    parser.add_argument("--height", type=int, default=None,
                        help="Board height (overrides --size)")
    parser.add_argument("--sheep", type=int, default=None, help="Number of sheep")
    parser.add_argument("--wolves", type=int, default=None, help="Number of wolves (1-3)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for replay")
    parser.add_argument("--tie-rule", choices=[rule.value for rule in TieRule],
                        default=TieRule.STRICT.value,
                        help="How ties are decided at the end of the game")
    parser.add_argument("--no-color", action="store_true", help="Disable ANSI colors")
    parser.add_argument("--auto", action="store_true",
                        help="Advance turns without waiting for Enter")
    return parser


def config_from_args(args: argparse.Namespace) -> Optional[GameConfig]:
    """Build a configuration from command-line flags.

    Returns:
        The validated configuration, or None if the flags do not
        describe a complete board.

    Raises:
        ConfigurationError: If the flags describe an invalid game.
    """
    width = args.width if args.width is not None else args.size
    height = args.height if args.height is not None else args.size
    if width is None or height is None or args.sheep is None or args.wolves is None:
        return None

    config = GameConfig(
        width=width,
        height=height,
        sheep_count=args.sheep,
        wolf_count=args.wolves,
        seed=args.seed,
        tie_rule=TieRule(args.tie_rule),
    )
    config.validate()
    return config


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the CLI driver."""
    parser = build_parser()
    args = parser.parse_args(argv)

    renderer = TextRenderer(use_colors=not args.no_color)
    prompter: TurnPrompter = AutoPrompter() if args.auto else TextPrompter()

    try:
        config = config_from_args(args)
    except ConfigurationError as e:
        parser.error(str(e))

    if config is None:
        try:
            config = prompt_config(
                TextPrompter(),
                renderer,
                seed=args.seed,
                tie_rule=TieRule(args.tie_rule),
            )
        except (EOFError, KeyboardInterrupt):
            renderer.render_message("\nGoodbye!")
            return 0

    driver = GameDriver(config, renderer=renderer, prompter=prompter)
    driver.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
