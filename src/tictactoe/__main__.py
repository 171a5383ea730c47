"""Entry point for playing in the terminal via ``python -m tictactoe``."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

import pydantic

from .config import GameConfig, PlayerKind, build_players
from .console import ConsoleRenderer
from .engine import TicTacToe
from .errors import ConfigurationError, GameAbortedError

PLAYER_CHOICES = [kind.value for kind in PlayerKind]


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="tictactoe", description="Tic-tac-toe in the terminal")
    p.add_argument(
        "-1", "--player1", choices=PLAYER_CHOICES, default=None,
        help="Who plays X (default: human, or $TICTACTOE_PLAYER1)",
    )
    p.add_argument(
        "-2", "--player2", choices=PLAYER_CHOICES, default=None,
        help="Who plays O (default: human, or $TICTACTOE_PLAYER2)",
    )
    p.add_argument(
        "-s", "--starting-mark", default=None,
        help="Mark that moves first: cross|naught (default: cross)",
    )
    p.add_argument("--seed", type=int, default=None, help="Seed for random players")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    ns = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if ns.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = GameConfig.from_env(
            player1=ns.player1,
            player2=ns.player2,
            starting_mark=ns.starting_mark,
            seed=ns.seed,
            verbose=ns.verbose,
        )
        player1, player2 = build_players(config)
        game = TicTacToe(player1, player2, ConsoleRenderer())
    except (pydantic.ValidationError, ConfigurationError) as exc:
        logging.error("Invalid configuration: %s", exc)
        return 2

    try:
        game.play(config.starting_mark)
    except GameAbortedError as exc:
        logging.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
