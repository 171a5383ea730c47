"""Synchronous game loop tying two players and a renderer together."""

from __future__ import annotations

import logging
from typing import Callable, Optional, Protocol

from .errors import ConfigurationError, GameAbortedError, MoveError
from .game import GameState, Grid, Mark
from .players import Player

logger = logging.getLogger(__name__)

ErrorHandler = Callable[[MoveError], None]


class Renderer(Protocol):
    def render(self, state: GameState) -> None: ...


def _log_move_error(error: MoveError) -> None:
    logger.warning("Move rejected: %s", error)


class TicTacToe:
    """One game between ``player1`` and ``player2``.

    Each turn: render, stop if the game is over, ask the player holding the
    current mark and apply its move. Move errors go to ``error_handler`` and
    the same player is asked again.
    """

    def __init__(
        self,
        player1: Player,
        player2: Player,
        renderer: Renderer,
        error_handler: Optional[ErrorHandler] = None,
        max_failures: int = 3,
    ) -> None:
        if player1.get_mark() == player2.get_mark():
            raise ConfigurationError(
                f"Both players hold {player1.get_mark()}; they cannot play each other"
            )
        self.player1 = player1
        self.player2 = player2
        self.renderer = renderer
        self.error_handler = error_handler or _log_move_error
        self.max_failures = max_failures

    def current_player(self, state: GameState) -> Player:
        if state.current_mark() == self.player1.get_mark():
            return self.player1
        return self.player2

    def play(self, starting_mark: Optional[Mark] = None) -> GameState:
        state = GameState.new(Grid(), starting_mark)
        failures = 0
        logger.info("New game, %s moves first", state.starting_mark)

        while True:
            self.renderer.render(state)
            if state.is_terminal():
                break

            player = self.current_player(state)
            try:
                state = player.make_move(state)
            except MoveError as exc:
                self.error_handler(exc)
                failures += 1
                if failures >= self.max_failures:
                    raise GameAbortedError(state, exc) from exc
                continue
            failures = 0

        winner = state.winner_mark()
        if winner is None:
            logger.info("Game over: tie")
        else:
            logger.info("Game over: %s wins on %s", winner, state.winning_line())
        return state
