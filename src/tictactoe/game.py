"""Core rules for classic 3x3 tic-tac-toe: marks, grid and validated game states."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator, List, Optional, Tuple

from .errors import CellOccupiedError
from .validators import validate_game_state

# Scan order matters: winner_mark() and winning_line() report the first hit.
ROWS: Tuple[Tuple[int, int, int], ...] = ((0, 1, 2), (3, 4, 5), (6, 7, 8))
COLUMNS: Tuple[Tuple[int, int, int], ...] = ((0, 3, 6), (1, 4, 7), (2, 5, 8))
DIAGONALS: Tuple[Tuple[int, int, int], ...] = ((0, 4, 8), (2, 4, 6))
WINNING_LINES: Tuple[Tuple[int, int, int], ...] = ROWS + COLUMNS + DIAGONALS


# ---------- Marks & cells ----------


class Mark(Enum):
    """One of the two players' symbols."""

    CROSS = "X"
    NAUGHT = "O"

    def other(self) -> "Mark":
        return Mark.NAUGHT if self is Mark.CROSS else Mark.CROSS

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Cell:
    mark: Optional[Mark] = None

    def is_occupied(self) -> bool:
        return self.mark is not None

    def is_vacant(self) -> bool:
        return self.mark is None

    def is_occupied_by(self, mark: Mark) -> bool:
        return self.mark is mark

    def __str__(self) -> str:
        return str(self.mark) if self.mark is not None else " "


EMPTY_CELL = Cell()


# ---------- Grid ----------


@dataclass(frozen=True)
class Grid:
    """Nine cells in row-major order (``index = row * 3 + col``).

    A grid is never edited; :meth:`with_mark` builds a new one.
    """

    WIDTH = 3
    SIZE = WIDTH * WIDTH

    cells: Tuple[Cell, ...] = field(default_factory=lambda: (EMPTY_CELL,) * 9)

    def __post_init__(self) -> None:
        cells = tuple(self.cells)
        if len(cells) != self.SIZE:
            raise ValueError(f"A grid holds exactly {self.SIZE} cells, got {len(cells)}")
        object.__setattr__(self, "cells", cells)

    @classmethod
    def empty(cls) -> "Grid":
        return cls()

    @classmethod
    def from_marks(cls, marks: Iterable[Optional[Mark]]) -> "Grid":
        """Build a grid from nine optional marks, ``None`` meaning vacant."""
        return cls(tuple(Cell(m) for m in marks))

    def __getitem__(self, index: int) -> Cell:
        if not 0 <= index < self.SIZE:
            raise IndexError(f"Cell index {index} outside 0..{self.SIZE - 1}")
        return self.cells[index]

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells)

    def __len__(self) -> int:
        return self.SIZE

    def count(self, mark: Optional[Mark]) -> int:
        return sum(1 for c in self.cells if c.mark is mark)

    def empty_count(self) -> int:
        return self.count(None)

    def cross_count(self) -> int:
        return self.count(Mark.CROSS)

    def naught_count(self) -> int:
        return self.count(Mark.NAUGHT)

    def with_mark(self, index: int, mark: Mark) -> "Grid":
        self[index]  # bounds check
        cells = list(self.cells)
        cells[index] = Cell(mark)
        return Grid(tuple(cells))


# ---------- Game state ----------


@dataclass(frozen=True)
class GameState:
    """A validated, immutable snapshot of the board plus who moved first.

    Whose turn it is never gets stored: it follows from the mark counts and
    ``starting_mark``. Every instance has passed the validators, so a
    ``GameState`` that exists is internally consistent.
    """

    grid: Grid = field(default_factory=Grid)
    starting_mark: Mark = Mark.CROSS

    _winner: Optional[Mark] = field(default=None, init=False, repr=False, compare=False)
    _line: Optional[Tuple[int, int, int]] = field(
        default=None, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        if not isinstance(self.starting_mark, Mark):
            raise ValueError(
                f"starting_mark must be a Mark, got {self.starting_mark!r}; "
                "use GameState.new() for the CROSS default"
            )
        winner, line = _scan_winner(self.grid)
        object.__setattr__(self, "_winner", winner)
        object.__setattr__(self, "_line", line)
        validate_game_state(self.grid, self.starting_mark, winner)

    @classmethod
    def new(cls, grid: Optional[Grid] = None, starting_mark: Optional[Mark] = None) -> "GameState":
        """Validate ``grid`` and wrap it; ``starting_mark`` defaults to CROSS."""
        return cls(
            grid=grid if grid is not None else Grid(),
            starting_mark=starting_mark if starting_mark is not None else Mark.CROSS,
        )

    # ---- API used by players, engine & renderer ----

    def current_mark(self) -> Mark:
        if self.grid.cross_count() == self.grid.naught_count():
            return self.starting_mark
        return self.starting_mark.other()

    def winner_mark(self) -> Optional[Mark]:
        return self._winner

    def winning_line(self) -> Optional[List[int]]:
        return list(self._line) if self._line is not None else None

    def game_not_started(self) -> bool:
        return self.grid.empty_count() == Grid.SIZE

    def tie(self) -> bool:
        return self.grid.empty_count() == 0 and self._winner is None

    def is_terminal(self) -> bool:
        return self._winner is not None or self.tie()

    def apply_move(self, cell_index: int) -> "GameMove":
        """Mark ``cell_index`` for the side to move.

        Raises :class:`CellOccupiedError` when the cell is taken; ``self`` is
        left untouched either way.
        """
        if self.grid[cell_index].is_occupied():
            raise CellOccupiedError(cell_index)
        mark = self.current_mark()
        after = GameState(self.grid.with_mark(cell_index, mark), self.starting_mark)
        return GameMove(mark=mark, cell_index=cell_index, before_state=self, after_state=after)

    def enumerate_moves(self) -> List["GameMove"]:
        """Every legal move in ascending cell order; empty once the game is over."""
        if self.is_terminal():
            return []
        return [
            self.apply_move(i)
            for i, cell in enumerate(self.grid.cells)
            if cell.is_vacant()
        ]

    def score(self, maximizing_mark: Mark) -> int:
        """+1 / 0 / -1 from ``maximizing_mark``'s point of view.

        Only meaningful on a terminal state; anything else is a caller bug.
        """
        if not self.is_terminal():
            raise RuntimeError("score() called on a game that is not over")
        if self._winner is None:
            return 0
        return 1 if self._winner is maximizing_mark else -1


@dataclass(frozen=True)
class GameMove:
    """A transition between two snapshots, produced by :meth:`GameState.apply_move`."""

    mark: Mark
    cell_index: int
    before_state: GameState
    after_state: GameState


# ---- helpers ----


def _scan_winner(grid: Grid) -> Tuple[Optional[Mark], Optional[Tuple[int, int, int]]]:
    # Cross before Naught, then rows, columns, diagonals.
    cells = grid.cells
    for mark in (Mark.CROSS, Mark.NAUGHT):
        for line in WINNING_LINES:
            a, b, c = line
            if cells[a].mark is mark and cells[b].mark is mark and cells[c].mark is mark:
                return mark, line
    return None, None
