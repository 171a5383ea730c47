"""Validated game options, read from CLI flags or ``TICTACTOE_*`` variables."""

from __future__ import annotations

import os
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .ai import MinimaxAI
from .console import ConsolePlayer
from .game import Mark
from .players import FirstMovePlayer, Player, RandomPlayer

ENV_PREFIX = "TICTACTOE_"


class PlayerKind(str, Enum):
    HUMAN = "human"
    COMPUTER_MINIMAX = "computer-minimax"
    COMPUTER_RANDOM = "computer-random"
    COMPUTER_FIRST = "computer-first"


MARK_ALIASES: Dict[str, Mark] = {
    "cross": Mark.CROSS,
    "x": Mark.CROSS,
    "naught": Mark.NAUGHT,
    "nought": Mark.NAUGHT,
    "o": Mark.NAUGHT,
}


class GameConfig(BaseModel):
    """Who plays and who moves first."""

    model_config = ConfigDict(frozen=True)

    player1: PlayerKind = Field(default=PlayerKind.HUMAN, description="Player holding X")
    player2: PlayerKind = Field(default=PlayerKind.HUMAN, description="Player holding O")
    starting_mark: Mark = Field(default=Mark.CROSS, description="Mark that moves first")
    seed: Optional[int] = Field(default=None, description="Seed for random players")
    verbose: bool = False

    @field_validator("starting_mark", mode="before")
    @classmethod
    def parse_starting_mark(cls, value: Any) -> Any:
        if isinstance(value, str):
            try:
                return MARK_ALIASES[value.strip().lower()]
            except KeyError:
                raise ValueError(
                    f"Unknown starting mark {value!r}. "
                    f"Choose one of {', '.join(sorted(MARK_ALIASES))}."
                ) from None
        return value

    @classmethod
    def from_env(cls, **overrides: Any) -> "GameConfig":
        """Defaults from ``TICTACTOE_PLAYER1`` etc., explicit ``overrides`` win."""
        values: Dict[str, Any] = {}
        for name in ("player1", "player2", "starting_mark", "seed"):
            raw = os.environ.get(ENV_PREFIX + name.upper())
            if raw:
                values[name] = raw
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)


def build_player(kind: PlayerKind, mark: Mark, seed: Optional[int] = None) -> Player:
    if kind is PlayerKind.COMPUTER_MINIMAX:
        return MinimaxAI(mark)
    if kind is PlayerKind.COMPUTER_RANDOM:
        return RandomPlayer(mark, seed=seed)
    if kind is PlayerKind.COMPUTER_FIRST:
        return FirstMovePlayer(mark)
    return ConsolePlayer(mark)


def build_players(config: GameConfig) -> Tuple[Player, Player]:
    """Player 1 always holds X and player 2 holds O."""
    return (
        build_player(config.player1, Mark.CROSS, config.seed),
        build_player(config.player2, Mark.NAUGHT, config.seed),
    )
