"""Tests for configuration parsing and the ``python -m tictactoe`` entry point."""

import io

import pydantic
import pytest

from tictactoe.__main__ import build_parser, main
from tictactoe.ai import MinimaxAI
from tictactoe.config import GameConfig, PlayerKind, build_players
from tictactoe.console import ConsolePlayer
from tictactoe.game import Mark
from tictactoe.players import RandomPlayer


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("PLAYER1", "PLAYER2", "STARTING_MARK", "SEED"):
        monkeypatch.delenv(f"TICTACTOE_{name}", raising=False)


def test_config_defaults():
    config = GameConfig()
    assert config.player1 is PlayerKind.HUMAN
    assert config.player2 is PlayerKind.HUMAN
    assert config.starting_mark is Mark.CROSS
    assert config.seed is None


@pytest.mark.parametrize(
    "value, mark",
    [("cross", Mark.CROSS), ("X", Mark.CROSS), ("Naught", Mark.NAUGHT), ("o", Mark.NAUGHT)],
)
def test_config_starting_mark_aliases(value, mark):
    assert GameConfig(starting_mark=value).starting_mark is mark


def test_config_rejects_unknown_values():
    with pytest.raises(pydantic.ValidationError):
        GameConfig(starting_mark="purple")
    with pytest.raises(pydantic.ValidationError):
        GameConfig(player1="robot")


def test_config_from_env(monkeypatch):
    monkeypatch.setenv("TICTACTOE_PLAYER1", "computer-random")
    monkeypatch.setenv("TICTACTOE_STARTING_MARK", "naught")
    monkeypatch.setenv("TICTACTOE_SEED", "5")

    config = GameConfig.from_env(player2="computer-minimax")

    assert config.player1 is PlayerKind.COMPUTER_RANDOM
    assert config.player2 is PlayerKind.COMPUTER_MINIMAX
    assert config.starting_mark is Mark.NAUGHT
    assert config.seed == 5


def test_explicit_values_override_env(monkeypatch):
    monkeypatch.setenv("TICTACTOE_PLAYER1", "computer-random")
    config = GameConfig.from_env(player1="human", player2=None)
    assert config.player1 is PlayerKind.HUMAN
    assert config.player2 is PlayerKind.HUMAN


def test_build_players_assigns_marks():
    config = GameConfig(player1="computer-minimax", player2="computer-random", seed=3)
    x, o = build_players(config)
    assert isinstance(x, MinimaxAI) and x.get_mark() is Mark.CROSS
    assert isinstance(o, RandomPlayer) and o.get_mark() is Mark.NAUGHT
    human, _ = build_players(GameConfig())
    assert isinstance(human, ConsolePlayer)


def test_parser_flags():
    ns = build_parser().parse_args(["-1", "computer-first", "-2", "human", "-s", "o", "-v"])
    assert ns.player1 == "computer-first"
    assert ns.player2 == "human"
    assert ns.starting_mark == "o"
    assert ns.verbose is True


def test_parser_rejects_unknown_player():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["-1", "robot"])


def test_main_computer_vs_computer_ties(capsys):
    code = main(["-1", "computer-minimax", "-2", "computer-minimax"])
    assert code == 0
    assert "No one wins this time" in capsys.readouterr().out


def test_main_uses_env_players(monkeypatch, capsys):
    monkeypatch.setenv("TICTACTOE_PLAYER1", "computer-first")
    monkeypatch.setenv("TICTACTOE_PLAYER2", "computer-first")
    assert main([]) == 0
    assert "X wins!" in capsys.readouterr().out


def test_main_bad_starting_mark():
    assert main(["-1", "computer-first", "-2", "computer-first", "-s", "purple"]) == 2


def test_main_human_at_end_of_input(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main(["-1", "human", "-2", "computer-first"]) == 1
