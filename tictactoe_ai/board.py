"""Flat 3x3 board helpers.

The board is a list of 9 cells stored row-major::

    0 | 1 | 2
    3 | 4 | 5
    6 | 7 | 8

Each cell is ``None`` (empty) or one of the marks in ``MARKS``.
"""
from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

MARKS = ("X", "O")
EMPTY = None
BOARD_SIZE = 9

WIN_LINES: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)

_EMPTY_SYMBOLS = (".", "-", "_", "")


def opponent(mark: str) -> str:
    return "O" if mark == "X" else "X"


def is_winner(board: Sequence[Optional[str]], mark: str) -> bool:
    """True iff ``mark`` fills every cell of at least one winning line."""
    for a, b, c in WIN_LINES:
        if board[a] == mark and board[b] == mark and board[c] == mark:
            return True
    return False


def legal_moves(board: Sequence[Optional[str]]) -> List[int]:
    return [i for i, cell in enumerate(board) if cell is None]


def is_full(board: Sequence[Optional[str]]) -> bool:
    return all(cell is not None for cell in board)


def winner(board: Sequence[Optional[str]]) -> Optional[str]:
    for mark in MARKS:
        if is_winner(board, mark):
            return mark
    return None


def is_terminal(board: Sequence[Optional[str]]) -> bool:
    return winner(board) is not None or is_full(board)


def parse_board(text: str) -> List[Optional[str]]:
    """Parse ``"XX.O....."`` or ``"X,X,,O,,,,,"`` into a board list.

    Raises ``ValueError`` when the board does not have nine cells or a
    cell holds something other than a mark or an empty placeholder.
    """
    if "," in text:
        tokens = [t.strip() for t in text.split(",")]
    else:
        tokens = list(text.strip())
    if len(tokens) != BOARD_SIZE:
        raise ValueError(
            f"board must have {BOARD_SIZE} cells, got {len(tokens)}: {text!r}"
        )
    board: List[Optional[str]] = []
    for i, token in enumerate(tokens):
        symbol = token.upper()
        if symbol in MARKS:
            board.append(symbol)
        elif symbol in _EMPTY_SYMBOLS:
            board.append(EMPTY)
        else:
            raise ValueError(f"invalid symbol {token!r} at cell {i}")
    return board


def format_board(board: Sequence[Optional[str]]) -> str:
    return "".join("." if cell is None else cell for cell in board)
