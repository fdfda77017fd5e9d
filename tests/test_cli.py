import io

import pytest

from wordgrid.cli import main, render_row
from wordgrid.scoring import TileState, score_guess


def run(monkeypatch, capsys, argv, lines):
    monkeypatch.setattr("sys.stdin", io.StringIO("".join(f"{line}\n" for line in lines)))
    code = main(argv)
    return code, capsys.readouterr().out


def test_render_row_all_correct():
    states = score_guess("crane", "crane")
    assert render_row("crane", states) == "[C][R][A][N][E]"


def test_render_row_shows_each_letter_uppercase():
    states = score_guess("slate", "crane")
    row = render_row("slate", states)
    assert [ch for ch in row if ch.isalpha()] == list("SLATE")
    assert len(row) == 3 * len(states)


def test_render_row_markers_follow_states():
    states = [TileState.PRESENT, TileState.ABSENT, TileState.CORRECT]
    assert render_row("abc", states) == "(A) B [C]"


def test_render_row_length_mismatch():
    with pytest.raises(ValueError):
        render_row("crane", [TileState.CORRECT])


def test_win_reports_congratulations_and_score(monkeypatch, capsys):
    code, out = run(monkeypatch, capsys, ["--word", "crane", "--no-check"], ["crane"])
    assert code == 0
    assert "You Got the Word!!" in out
    assert "Score: 1" in out


def test_score_accumulates_over_rounds(monkeypatch, capsys):
    code, out = run(
        monkeypatch, capsys, ["--word", "crane", "--no-check"], ["crane", "crane"]
    )
    assert code == 0
    assert "Score: 2" in out


def test_loss_reveals_word(monkeypatch, capsys):
    code, out = run(
        monkeypatch, capsys, ["--word", "crane", "--no-check"], ["slate"] * 6
    )
    assert code == 0
    assert "The word was CRANE" in out
    assert "Better luck next time!" in out


def test_short_guess_is_reported(monkeypatch, capsys):
    code, out = run(monkeypatch, capsys, ["--word", "crane", "--no-check"], ["cra", "quit"])
    assert code == 0
    assert "the word must be 5 letters long !" in out
    assert "Guess 1/6" in out
    assert "Guess 2/6" not in out


def test_invalid_word_option_exits(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    with pytest.raises(SystemExit) as excinfo:
        main(["--word", "abc"])
    assert excinfo.value.code == 2