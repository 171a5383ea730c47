"""Tests for the game loop."""

from typing import Optional

import pytest

from tictactoe.engine import TicTacToe
from tictactoe.errors import ConfigurationError, GameAbortedError, NoPossibleMovesError
from tictactoe.game import GameMove, GameState, Mark
from tictactoe.players import FirstMovePlayer, Player


class RecordingRenderer:
    def __init__(self):
        self.states = []

    def render(self, state):
        self.states.append(state)


class StuckPlayer(Player):
    def get_move(self, state: GameState) -> Optional[GameMove]:
        return None


def test_players_must_hold_different_marks():
    with pytest.raises(ConfigurationError):
        TicTacToe(FirstMovePlayer(Mark.CROSS), FirstMovePlayer(Mark.CROSS), RecordingRenderer())


def test_first_move_players_play_to_a_win():
    renderer = RecordingRenderer()
    game = TicTacToe(FirstMovePlayer(Mark.CROSS), FirstMovePlayer(Mark.NAUGHT), renderer)

    final = game.play()

    assert final.winner_mark() is Mark.CROSS
    assert final.winning_line() == [2, 4, 6]
    # Initial board plus one render per move.
    assert len(renderer.states) == 8
    assert renderer.states[0].game_not_started()
    assert renderer.states[-1] == final


def test_starting_mark_is_passed_through():
    game = TicTacToe(FirstMovePlayer(Mark.CROSS), FirstMovePlayer(Mark.NAUGHT), RecordingRenderer())
    final = game.play(Mark.NAUGHT)
    assert final.starting_mark is Mark.NAUGHT
    assert final.winner_mark() is Mark.NAUGHT


def test_current_player_follows_the_mark():
    x, o = FirstMovePlayer(Mark.CROSS), FirstMovePlayer(Mark.NAUGHT)
    game = TicTacToe(o, x, RecordingRenderer())
    state = GameState.new()
    assert game.current_player(state) is x
    assert game.current_player(state.apply_move(0).after_state) is o


def test_stuck_player_aborts_the_game():
    errors = []
    game = TicTacToe(
        StuckPlayer(Mark.CROSS),
        FirstMovePlayer(Mark.NAUGHT),
        RecordingRenderer(),
        error_handler=errors.append,
        max_failures=3,
    )

    with pytest.raises(GameAbortedError) as excinfo:
        game.play()

    assert len(errors) == 3
    assert all(isinstance(e, NoPossibleMovesError) for e in errors)
    assert excinfo.value.state.game_not_started()
    assert isinstance(excinfo.value.cause, NoPossibleMovesError)


def test_default_error_handler_logs(caplog):
    game = TicTacToe(StuckPlayer(Mark.CROSS), FirstMovePlayer(Mark.NAUGHT), RecordingRenderer())
    with caplog.at_level("WARNING", logger="tictactoe.engine"):
        with pytest.raises(GameAbortedError):
            game.play()
    assert "Move rejected" in caplog.text
