"""Exhaustive minimax search with alpha-beta pruning for classic tic-tac-toe."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Optional

from .game import GameMove, GameState, Mark
from .players import Player

logger = logging.getLogger(__name__)


@dataclass
class SearchStats:
    """Counts the positions visited by one search."""

    nodes: int = 0


# ---- core search ----


def minimax(
    move: GameMove,
    maximizing_mark: Mark,
    maximizing: bool,
    stats: Optional[SearchStats] = None,
) -> float:
    """Value of ``move.after_state`` for ``maximizing_mark``, full tree, no pruning."""
    if stats is not None:
        stats.nodes += 1
    state = move.after_state
    if state.is_terminal():
        return state.score(maximizing_mark)

    scores = [
        minimax(child, maximizing_mark, not maximizing, stats)
        for child in state.enumerate_moves()
    ]
    return max(scores) if maximizing else min(scores)


def minimax_with_pruning(
    move: GameMove,
    maximizing_mark: Mark,
    maximizing: bool,
    alpha: float = -math.inf,
    beta: float = math.inf,
    stats: Optional[SearchStats] = None,
) -> float:
    """Same value as :func:`minimax`, skipping siblings once ``beta <= alpha``."""
    if stats is not None:
        stats.nodes += 1
    state = move.after_state
    if state.is_terminal():
        return state.score(maximizing_mark)

    if maximizing:
        value = -math.inf
        for child in state.enumerate_moves():
            score = minimax_with_pruning(child, maximizing_mark, False, alpha, beta, stats)
            value = max(value, score)
            alpha = max(alpha, value)
            if beta <= alpha:
                break
    else:
        value = math.inf
        for child in state.enumerate_moves():
            score = minimax_with_pruning(child, maximizing_mark, True, alpha, beta, stats)
            value = min(value, score)
            beta = min(beta, value)
            if beta <= alpha:
                break
    return value


def find_best_move(
    state: GameState,
    pruning: bool = True,
    stats: Optional[SearchStats] = None,
) -> Optional[GameMove]:
    """Best move for the side to move, assuming the opponent plays perfectly.

    Candidates are tried in ascending cell order and a later candidate only
    replaces the current pick when its value is strictly greater, so equal
    values resolve to the lowest cell index. Returns ``None`` when the game
    is already over.
    """
    maximizing_mark = state.current_mark()
    best_move: Optional[GameMove] = None
    best_value = -math.inf

    for move in state.enumerate_moves():
        # Fresh (-inf, +inf) window for every root candidate.
        if pruning:
            value = minimax_with_pruning(move, maximizing_mark, False, stats=stats)
        else:
            value = minimax(move, maximizing_mark, False, stats)
        if best_move is None or value > best_value:
            best_move, best_value = move, value
    return best_move


# ---- player ----


@dataclass(repr=False, eq=False)
class MinimaxAI(Player):
    """Optimal player: never loses, wins whenever the opponent slips.

    ``pruning=False`` runs the plain search, which picks the same moves but
    visits many more positions.
    """

    mark: Mark
    pruning: bool = True
    nodes_evaluated: int = field(default=0, init=False)

    def get_move(self, state: GameState) -> Optional[GameMove]:
        stats = SearchStats()
        move = find_best_move(state, pruning=self.pruning, stats=stats)
        self.nodes_evaluated = stats.nodes
        if move is not None:
            logger.debug(
                "%r evaluated %d positions, best cell %d",
                self,
                stats.nodes,
                move.cell_index,
            )
        return move
