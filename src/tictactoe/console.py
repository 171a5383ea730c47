"""Terminal frontend: a human player reading stdin and a text renderer."""

from __future__ import annotations

from typing import Callable, Optional

from .errors import CellOccupiedError
from .game import GameMove, GameState, Grid, Mark
from .players import Player

# Same labels as render_grid: letters name columns, digits name rows.
COL_KEYS = {"A": 0, "B": 1, "C": 2}
ROW_KEYS = {"1": 0, "2": 1, "3": 2}

CLEAR_SCREEN = "\x1b[2J\x1b[1;1H"

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


def coord_to_index(coord: str) -> Optional[int]:
    """Map a coordinate such as ``"C1"`` or ``"1C"`` to 0..8.

    One letter (column) and one digit (row), in either order. Anything else
    gives ``None``.
    """
    coord = coord.strip().upper()
    if len(coord) != 2:
        return None
    if coord[0].isdigit():
        coord = coord[::-1]
    col = COL_KEYS.get(coord[0])
    row = ROW_KEYS.get(coord[1])
    if row is None or col is None:
        return None
    return row * Grid.WIDTH + col


class ConsolePlayer(Player):
    """Human player typing coordinates at a prompt."""

    def __init__(
        self,
        mark: Mark,
        input_fn: InputFn = input,
        output_fn: OutputFn = print,
    ) -> None:
        super().__init__(mark)
        self._input = input_fn
        self._output = output_fn

    def get_move(self, state: GameState) -> Optional[GameMove]:
        while not state.is_terminal():
            try:
                raw = self._input(f"{self.mark}'s move: ")
            except EOFError:
                return None

            index = coord_to_index(raw)
            if index is None:
                self._output("Invalid input. Try again.")
                continue
            try:
                return state.apply_move(index)
            except CellOccupiedError:
                self._output("That cell is already occupied.")
        return None


def render_grid(grid: Grid) -> str:
    c = [str(cell) for cell in grid]
    return "\n".join(
        [
            "    A   B   C",
            "  ------------",
            f"1 ┆  {c[0]} │ {c[1]} │ {c[2]}",
            "  ┆ ───┼───┼───",
            f"2 ┆  {c[3]} │ {c[4]} │ {c[5]}",
            "  ┆ ───┼───┼───",
            f"3 ┆  {c[6]} │ {c[7]} │ {c[8]}",
        ]
    )


class ConsoleRenderer:
    """Prints the board after every turn and the result at the end."""

    def __init__(self, output_fn: OutputFn = print, clear: bool = True) -> None:
        self._output = output_fn
        self.clear = clear

    def render(self, state: GameState) -> None:
        if state.game_not_started():
            self._output("Nice to see you play")
        if self.clear:
            self._output(CLEAR_SCREEN)
        self._output(render_grid(state.grid))

        if not state.is_terminal():
            return
        winner = state.winner_mark()
        if winner is None:
            self._output("No one wins this time")
        else:
            self._output(f"{winner} wins!")
            self._output(f"The winning indexes are: {state.winning_line()}")
