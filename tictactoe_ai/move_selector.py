"""Pick the automated player's next move.

A single uniform draw decides whether this turn is played by the
minimax search or by a uniformly random legal move. The chance of the
search being used comes from the difficulty tier (see ``difficulty``).
"""
from __future__ import annotations

import logging
import random
from typing import Optional, Sequence

from .board import legal_moves
from .difficulty import DEFAULT_DIFFICULTY, optimal_probability
from .minimax import MinimaxSearch

logger = logging.getLogger(__name__)

DEFAULT_AI_PLAYER = "O"


class MoveSelector:
    def __init__(self, ai_player: str = DEFAULT_AI_PLAYER,
                 difficulty: str = DEFAULT_DIFFICULTY,
                 rng: Optional[random.Random] = None):
        self.ai_player = ai_player
        self.difficulty = difficulty
        # Anything with ``random()`` and ``choice(seq)`` works here.
        self.rng = rng if rng is not None else random.Random()
        self.searcher = MinimaxSearch(ai_player)
        self.last_decision: Optional[str] = None

    @classmethod
    def from_config(cls, config) -> "MoveSelector":
        return cls(ai_player=config.ai_player,
                   difficulty=config.difficulty,
                   rng=config.make_rng())

    def choose_move(self, board: Sequence[Optional[str]]) -> Optional[int]:
        """Return the cell index to play, or ``None`` if the board is full."""
        available = legal_moves(board)
        if not available:
            self.last_decision = None
            logger.debug("No legal moves left for %s", self.ai_player)
            return None

        threshold = optimal_probability(self.difficulty)
        sample = self.rng.random()
        if sample > threshold:
            self.last_decision = "random"
            move = self.rng.choice(available)
            logger.debug(
                "%s plays random move %d (sample=%.3f > %.2f)",
                self.ai_player, move, sample, threshold,
            )
            return move

        self.last_decision = "optimal"
        best = self.searcher.search(board, self.ai_player)
        logger.debug("%s plays optimal move %s (score=%d)", self.ai_player, best.index, best.score)
        return best.index


def choose_move(board: Sequence[Optional[str]], ai_player: str = DEFAULT_AI_PLAYER,
                difficulty: str = DEFAULT_DIFFICULTY,
                rng: Optional[random.Random] = None) -> Optional[int]:
    return MoveSelector(ai_player, difficulty, rng).choose_move(board)
