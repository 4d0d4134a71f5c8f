import pytest

from fourinarow.interfaces.cli import SimpleCLI, parse_moves


def run_cli(argv, inputs=()):
    feed = iter(inputs)

    def fake_input(prompt):
        try:
            return next(feed)
        except StopIteration:
            raise EOFError

    cli = SimpleCLI(input_fn=fake_input)
    return cli, cli.run(argv)


def test_parse_moves():
    assert parse_moves("3, 3,4,,5") == [3, 3, 4, 5]
    with pytest.raises(ValueError):
        parse_moves("3,x")


def test_replay_announces_winner(capsys):
    cli, status = run_cli(["replay", "--moves", "0,0,1,1,2,2,3"])
    out = capsys.readouterr().out
    assert status == 0
    assert "Winning line: (5,0) (5,1) (5,2) (5,3)" in out
    assert "Player Red won!" in out
    assert not cli.game.active


def test_replay_reports_full_column(capsys):
    _, status = run_cli(["replay", "--height", "4", "--width", "4", "--moves", "0,0,0,0,0"])
    out = capsys.readouterr().out
    assert status == 0
    assert "Column 0 is full." in out
    assert "Game still in progress; Red to move." in out


def test_replay_rejects_bad_moves(capsys):
    _, status = run_cli(["replay", "--moves", "1,two"])
    assert status == 1
    assert "Invalid column 'two'" in capsys.readouterr().out


def test_replay_rejects_empty_board(capsys):
    _, status = run_cli(["replay", "--height", "0", "--moves", "0"])
    assert status == 1
    assert "Board dimensions must be positive" in capsys.readouterr().out


def test_play_until_win(capsys):
    cli, status = run_cli(["play"], ["0", "1", "0", "1", "0", "1", "0"])
    out = capsys.readouterr().out
    assert status == 0
    assert "Player Red won!" in out


def test_play_handles_bad_input_and_off_board_columns(capsys):
    cli, status = run_cli(["play"], ["abc", "9", "q"])
    out = capsys.readouterr().out
    assert status == 0
    assert "Invalid input" in out
    assert "Column 9 is not on the board." in out
    assert "Quitting game." in out


def test_restart_replaces_game(capsys):
    cli, status = run_cli(["play", "--p1", "Ann", "--p2", "Bob"], ["3", "r", "q"])
    out = capsys.readouterr().out
    assert "Game restarted." in out
    assert cli.game.board.filled_count() == 0
    assert cli.game.current_player.name == "Ann"


def test_no_command_prints_help(capsys):
    _, status = run_cli([])
    assert status == 1


def test_replay_shows_player_symbols(capsys):
    _, status = run_cli(["replay", "--p1", "Red", "--p2", "Rose", "--moves", "0,1"])
    out = capsys.readouterr().out
    assert status == 0
    assert "Red plays X, Rose plays O" in out
    assert "|X O          |" in out
