"""Difficulty tiers and their probability of playing the optimal move."""
from __future__ import annotations

import logging
from typing import Dict, Optional

logger = logging.getLogger(__name__)

BEGINNER = "beginner"
MIDDLE = "middle"
TOP = "top"
DEFAULT_DIFFICULTY = TOP

OPTIMAL_PLAY_PROBABILITY: Dict[str, float] = {
    BEGINNER: 0.3,
    MIDDLE: 0.7,
    TOP: 1.0,
}


def _normalize(difficulty: Optional[str]) -> str:
    if difficulty is None:
        return ""
    return str(difficulty).strip().lower()


def is_known_difficulty(difficulty: Optional[str]) -> bool:
    return _normalize(difficulty) in OPTIMAL_PLAY_PROBABILITY


def optimal_probability(difficulty: Optional[str]) -> float:
    """Probability that a move at ``difficulty`` comes from the search.

    Anything outside the table plays like ``top``.
    """
    key = _normalize(difficulty)
    if key not in OPTIMAL_PLAY_PROBABILITY:
        logger.debug("Unknown difficulty %r, falling back to %r", difficulty, DEFAULT_DIFFICULTY)
        key = DEFAULT_DIFFICULTY
    return OPTIMAL_PLAY_PROBABILITY[key]
