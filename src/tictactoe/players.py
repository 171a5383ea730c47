"""Player interface plus the two trivial computer players."""

from __future__ import annotations

import logging
import random
from abc import ABC, abstractmethod
from typing import Optional

from .errors import NoPossibleMovesError, NotYourTurnError
from .game import GameMove, GameState, Mark

logger = logging.getLogger(__name__)


class Player(ABC):
    """Anything that can pick a move for one mark.

    Subclasses only supply :meth:`get_move`; :meth:`make_move` is the single
    call the engine issues per turn.
    """

    def __init__(self, mark: Mark) -> None:
        self.mark = mark

    def __repr__(self) -> str:
        return f"{type(self).__name__}(mark={self.mark!s})"

    def get_mark(self) -> Mark:
        return self.mark

    @abstractmethod
    def get_move(self, state: GameState) -> Optional[GameMove]:
        """Return the chosen move, or ``None`` when no legal move exists."""

    def make_move(self, state: GameState) -> GameState:
        if self.get_mark() != state.current_mark():
            raise NotYourTurnError(self.get_mark())
        move = self.get_move(state)
        if move is None:
            raise NoPossibleMovesError()
        logger.debug("%r played cell %d", self, move.cell_index)
        return move.after_state


class FirstMovePlayer(Player):
    """Always takes the lowest free cell."""

    def get_move(self, state: GameState) -> Optional[GameMove]:
        moves = state.enumerate_moves()
        return moves[0] if moves else None


class RandomPlayer(Player):
    """Picks uniformly among the legal moves; pass ``seed`` for repeatable games."""

    def __init__(self, mark: Mark, seed: Optional[int] = None) -> None:
        super().__init__(mark)
        self._rng = random.Random(seed)

    def get_move(self, state: GameState) -> Optional[GameMove]:
        moves = state.enumerate_moves()
        if not moves:
            return None
        return self._rng.choice(moves)
