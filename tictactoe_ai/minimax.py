"""Exhaustive minimax search for Tic-Tac-Toe.

Scores are always reported from the automated player's point of view:
``WIN_SCORE`` when it has a line, ``LOSS_SCORE`` when its opponent has
one and ``DRAW_SCORE`` for a full board. The whole tree is searched
without pruning; on a 3x3 board that is fast enough.
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import List, NamedTuple, Optional, Sequence

from .board import is_winner, legal_moves, opponent

logger = logging.getLogger(__name__)

WIN_SCORE = 10
DRAW_SCORE = 0
LOSS_SCORE = -10


class MoveCandidate(NamedTuple):
    index: Optional[int]
    score: int


@contextmanager
def _trial_move(board: List[Optional[str]], index: int, mark: str):
    """Place ``mark`` at ``index`` and always clear it again on exit."""
    board[index] = mark
    try:
        yield board
    finally:
        board[index] = None


class MinimaxSearch:
    """Minimax player bound to the automated side's mark."""

    def __init__(self, ai_player: str = "O"):
        self.ai_player = ai_player
        self.human_player = opponent(ai_player)
        self.nodes = 0

    def _terminal_score(self, board: Sequence[Optional[str]]) -> Optional[int]:
        # Opponent's line is checked first; a sane board never has both.
        if is_winner(board, self.human_player):
            return LOSS_SCORE
        if is_winner(board, self.ai_player):
            return WIN_SCORE
        if None not in board:
            return DRAW_SCORE
        return None

    def _candidates(self, board: List[Optional[str]], to_move: str) -> List[MoveCandidate]:
        next_player = opponent(to_move)
        moves = []
        for index in legal_moves(board):
            with _trial_move(board, index, to_move):
                result = self._minimax(board, next_player)
            moves.append(MoveCandidate(index, result.score))
        return moves

    def _select(self, moves: List[MoveCandidate], to_move: str) -> MoveCandidate:
        best = moves[0]
        if to_move == self.ai_player:
            for move in moves[1:]:
                if move.score > best.score:
                    best = move
        else:
            for move in moves[1:]:
                if move.score < best.score:
                    best = move
        return best

    def _minimax(self, board: List[Optional[str]], to_move: str) -> MoveCandidate:
        self.nodes += 1
        score = self._terminal_score(board)
        if score is not None:
            return MoveCandidate(None, score)
        return self._select(self._candidates(board, to_move), to_move)

    def search(self, board: Sequence[Optional[str]], to_move: Optional[str] = None) -> MoveCandidate:
        """Return the best ``(index, score)`` for ``to_move``.

        ``to_move`` defaults to the automated player. On a decided or full
        board the index is ``None``. ``board`` is copied before searching
        and is never modified.
        """
        if to_move is None:
            to_move = self.ai_player
        self.nodes = 0
        working = list(board)
        best = self._minimax(working, to_move)
        logger.debug(
            "search to_move=%s best=%s score=%s nodes=%d",
            to_move, best.index, best.score, self.nodes,
        )
        return best

    def rank_moves(self, board: Sequence[Optional[str]], to_move: Optional[str] = None) -> List[MoveCandidate]:
        """Score every legal move for ``to_move`` in ascending index order."""
        if to_move is None:
            to_move = self.ai_player
        self.nodes = 0
        working = list(board)
        if self._terminal_score(working) is not None:
            return []
        return self._candidates(working, to_move)


def search(board: Sequence[Optional[str]], player_to_move: str, ai_player: Optional[str] = None) -> MoveCandidate:
    if ai_player is None:
        ai_player = player_to_move
    return MinimaxSearch(ai_player).search(board, player_to_move)
