"""Selector settings: explicit defaults, JSON files and env overrides."""
from __future__ import annotations

import json
import logging
import os
import random
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Optional, Union

from .board import MARKS
from .difficulty import DEFAULT_DIFFICULTY, is_known_difficulty
from .move_selector import DEFAULT_AI_PLAYER

logger = logging.getLogger(__name__)

ENV_AI_PLAYER = "TTT_AI_PLAYER"
ENV_DIFFICULTY = "TTT_DIFFICULTY"
ENV_SEED = "TTT_SEED"


@dataclass
class SelectorConfig:
    ai_player: str = DEFAULT_AI_PLAYER
    difficulty: str = DEFAULT_DIFFICULTY
    seed: Optional[int] = None

    def validate(self) -> "SelectorConfig":
        if self.ai_player not in MARKS:
            raise ValueError(f"ai_player must be one of {MARKS}, got {self.ai_player!r}")
        if self.seed is not None and not isinstance(self.seed, int):
            raise ValueError(f"seed must be an integer, got {self.seed!r}")
        if not is_known_difficulty(self.difficulty):
            logger.warning("Unknown difficulty %r will play as %r", self.difficulty, DEFAULT_DIFFICULTY)
        return self

    def make_rng(self) -> random.Random:
        return random.Random(self.seed)

    def to_dict(self) -> dict:
        return asdict(self)


def load_config(path: Union[str, Path]) -> SelectorConfig:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"No selector config at '{path}'.")
    with path.open() as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a JSON object")
    known = {f.name for f in fields(SelectorConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"{path}: unknown keys {unknown}")
    return SelectorConfig(**data).validate()


def config_from_env(base: Optional[SelectorConfig] = None) -> SelectorConfig:
    config = base if base is not None else SelectorConfig()
    overrides = {}
    ai_player = os.getenv(ENV_AI_PLAYER)
    if ai_player:
        overrides["ai_player"] = ai_player.strip().upper()
    difficulty = os.getenv(ENV_DIFFICULTY)
    if difficulty:
        overrides["difficulty"] = difficulty.strip()
    seed = os.getenv(ENV_SEED)
    if seed:
        try:
            overrides["seed"] = int(seed)
        except ValueError:
            raise ValueError(f"{ENV_SEED} must be an integer, got {seed!r}") from None
    return replace(config, **overrides).validate()
