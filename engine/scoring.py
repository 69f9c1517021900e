"""End-of-game scoring for the pursuit game engine.

Scores are scanned Bear first, then wolves in turn order. Two tie rules
are supported (see core.constants.TieRule):

STRICT: the game is a tie iff more than one piece holds the top score.
STICKY: a running-best scan; a Wolf equal to the running best sets a tie
    flag that stays set even if a later Wolf beats that best.

The rules only disagree when an early tie is followed by a strictly
higher later Wolf, e.g. Bear 1, Wolf1 1, Wolf2 3.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, TYPE_CHECKING

from core.constants import TieRule

if TYPE_CHECKING:
    from core.game_state import GameState
    from core.pieces import Piece


@dataclass
class GameOutcome:
    """Final result of a game.

    Attributes:
        scores: Score per piece id, Bear first then wolves in turn order.
        max_score: Highest score reached.
        winner_id: The winning piece id, or None on a tie.
        is_tie: Whether the game ended in a tie.
        interrupted: Whether play stopped before every piece reached the goal.
        tie_rule: The rule used to decide ties.
    """

    scores: dict[str, int] = field(default_factory=dict)
    max_score: int = 0
    winner_id: Optional[str] = None
    is_tie: bool = False
    interrupted: bool = False
    tie_rule: TieRule = TieRule.STRICT

    @property
    def winner_score(self) -> Optional[int]:
        if self.winner_id is None:
            return None
        return self.scores[self.winner_id]


def _strict_scan(pieces: list[Piece]) -> tuple[Optional[Piece], bool]:
    top = max(p.score for p in pieces)
    leaders = [p for p in pieces if p.score == top]
    if len(leaders) > 1:
        return None, True
    return leaders[0], False


def _sticky_scan(pieces: list[Piece]) -> tuple[Optional[Piece], bool]:
    best = pieces[0]
    is_tie = False
    for piece in pieces[1:]:
        if piece.score > best.score:
            best = piece
        elif piece.score == best.score:
            is_tie = True
    return (None if is_tie else best), is_tie


def determine_outcome(
    state: GameState,
    tie_rule: TieRule = TieRule.STRICT,
) -> GameOutcome:
    """Compute the winner or tie from the current scores.

    Works on any state; an interrupted game is scored as it stands.

    Args:
        state: The game state to score.
        tie_rule: How to decide ties.

    Returns:
        GameOutcome for the state.
    """
    pieces = state.scoring_pieces()

    if tie_rule == TieRule.STICKY:
        winner, is_tie = _sticky_scan(pieces)
    else:
        winner, is_tie = _strict_scan(pieces)

    return GameOutcome(
        scores={p.piece_id: p.score for p in pieces},
        max_score=max(p.score for p in pieces),
        winner_id=None if winner is None else winner.piece_id,
        is_tie=is_tie,
        interrupted=state.interrupted,
        tie_rule=tie_rule,
    )
