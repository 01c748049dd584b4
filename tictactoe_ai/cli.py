#!/usr/bin/env python3
"""Ask the move selector for one move from the command line.

Example::

    tictactoe-ai "XX.O....." --ai-player O --difficulty top --rank

Prints a single JSON object with the chosen move (``null`` when the board
is full).
"""
from __future__ import annotations

import argparse
import json
import logging
from typing import List, Optional

from .board import format_board, parse_board
from .config import SelectorConfig, config_from_env, load_config
from .move_selector import MoveSelector



def parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Choose the next Tic-Tac-Toe move.")
    p.add_argument("board", help='9 cells row-major, e.g. "XX.O....." or "X,X,,O,,,,,".')
    p.add_argument("--config", default=None, help="JSON file with ai_player / difficulty / seed.")
    p.add_argument("--ai-player", choices=["X", "O"], default=None, help="Mark played by the AI.")
    p.add_argument("--difficulty", default=None, help="beginner, middle or top (unknown = top).")
    p.add_argument("--seed", type=int, default=None, help="Seed for the random source.")
    p.add_argument("--rank", action="store_true", help="Also print the minimax score of every legal move.")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging.")
    return p


def build_config(args: argparse.Namespace) -> SelectorConfig:
    base = load_config(args.config) if args.config else SelectorConfig()
    config = config_from_env(base)
    if args.ai_player is not None:
        config.ai_player = args.ai_player
    if args.difficulty is not None:
        config.difficulty = args.difficulty
    if args.seed is not None:
        config.seed = args.seed
    return config.validate()


def run(args: argparse.Namespace) -> dict:
    board = parse_board(args.board)
    config = build_config(args)
    selector = MoveSelector.from_config(config)
    move = selector.choose_move(board)
    result = {
        "board": format_board(board),
        "ai_player": config.ai_player,
        "difficulty": config.difficulty,
        "move": move,
    }
    if args.rank:
        ranked = selector.searcher.rank_moves(board, config.ai_player)
        result["scores"] = {str(c.index): c.score for c in ranked}
    return result


def main(argv: Optional[List[str]] = None) -> int:
    p = parser()
    args = p.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%H:%M:%S'
    )
    try:
        result = run(args)
    except (ValueError, FileNotFoundError) as exc:
        p.error(str(exc))
    print(json.dumps(result))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
