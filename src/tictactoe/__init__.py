"""Classic tic-tac-toe: validated game states, an optimal minimax player and a console game."""

from .ai import MinimaxAI, find_best_move
from .engine import TicTacToe
from .errors import (
    CellOccupiedError,
    MoveError,
    NoPossibleMovesError,
    NotYourTurnError,
    ValidationError,
)
from .game import Cell, GameMove, GameState, Grid, Mark
from .players import FirstMovePlayer, Player, RandomPlayer

__all__ = [
    "Cell",
    "CellOccupiedError",
    "FirstMovePlayer",
    "GameMove",
    "GameState",
    "Grid",
    "Mark",
    "MinimaxAI",
    "MoveError",
    "NoPossibleMovesError",
    "NotYourTurnError",
    "Player",
    "RandomPlayer",
    "TicTacToe",
    "ValidationError",
    "find_best_move",
]
