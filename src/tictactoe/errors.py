"""Exception hierarchy for board validation, moves and game setup."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:  # pragma: no cover
    from .game import GameState, Mark


class TicTacToeError(Exception):
    """Base class for every recoverable error raised by the package."""


# ---------- Validation (raised only while building a GameState) ----------


class ValidationError(TicTacToeError):
    """A grid/starting-mark combination that no legal game can produce."""


class WrongMarkCountError(ValidationError):
    def __init__(self, cross_count: int, naught_count: int) -> None:
        super().__init__(
            f"Wrong number of naughts and crosses ({cross_count}, {naught_count}), "
            "expected 0 or 1 difference"
        )
        self.cross_count = cross_count
        self.naught_count = naught_count


class WrongStartingMarkError(ValidationError):
    def __init__(self, mark: "Mark") -> None:
        super().__init__(f"Wrong starting mark {mark}, expected the other mark")
        self.mark = mark


class WrongWinnerError(ValidationError):
    def __init__(self, mark: "Mark") -> None:
        super().__init__(f"Wrong winner mark {mark}, expected the other mark")
        self.mark = mark


# ---------- Moves (always recoverable by the caller) ----------


class MoveError(TicTacToeError):
    """A move request that could not be honoured."""


class CellOccupiedError(MoveError):
    def __init__(self, index: int) -> None:
        super().__init__(f"Cell {index} is already marked")
        self.index = index


class NotYourTurnError(MoveError):
    def __init__(self, mark: "Mark") -> None:
        super().__init__(f"It's the other player's turn, not {mark}")
        self.mark = mark


class NoPossibleMovesError(MoveError):
    def __init__(self) -> None:
        super().__init__("No more possible moves")


# ---------- Game setup ----------


class ConfigurationError(TicTacToeError):
    """Players or options that cannot make up a game."""


class GameAbortedError(TicTacToeError):
    """The engine stopped because a player kept failing to move."""

    def __init__(self, state: "GameState", cause: Optional[MoveError] = None) -> None:
        super().__init__(f"Game aborted: {cause}" if cause else "Game aborted")
        self.state = state
        self.cause = cause
