"""Invariant checks run once whenever a :class:`~tictactoe.game.GameState` is built.

Every function is pure: it returns ``None`` when the grid is consistent and
raises the matching :class:`~tictactoe.errors.ValidationError` otherwise.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from .errors import WrongMarkCountError, WrongStartingMarkError, WrongWinnerError

if TYPE_CHECKING:  # pragma: no cover
    from .game import Grid, Mark


def validate_mark_count(grid: "Grid") -> None:
    """Marks alternate, so the two counts differ by at most one."""
    cross, naught = grid.cross_count(), grid.naught_count()
    if abs(cross - naught) > 1:
        raise WrongMarkCountError(cross, naught)


def validate_starting_mark(grid: "Grid", starting_mark: "Mark") -> None:
    """When the counts differ, the mark that is ahead must have moved first."""
    if grid.count(starting_mark) < grid.count(starting_mark.other()):
        raise WrongStartingMarkError(starting_mark)


def validate_winner(grid: "Grid", starting_mark: "Mark", winner: Optional["Mark"]) -> None:
    """The winner must be the side that placed the last mark.

    A winning starting mark is one mark ahead; a winning second player has
    just evened the counts.
    """
    if winner is None:
        return
    mine, theirs = grid.count(winner), grid.count(winner.other())
    if winner is starting_mark:
        if mine <= theirs:
            raise WrongWinnerError(winner)
    elif mine != theirs:
        raise WrongWinnerError(winner)


def validate_game_state(grid: "Grid", starting_mark: "Mark", winner: Optional["Mark"]) -> None:
    validate_mark_count(grid)
    validate_starting_mark(grid, starting_mark)
    validate_winner(grid, starting_mark, winner)
