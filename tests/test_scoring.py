from collections import Counter

import pytest

from wordgrid.scoring import TileState, score_guess


def test_exact_match_is_all_correct():
    assert score_guess("crane", "crane") == [TileState.CORRECT] * 5


def test_case_is_ignored():
    assert score_guess("CRANE", "crane") == score_guess("crane", "CRANE")
    assert score_guess("Crane", "cRANE") == [TileState.CORRECT] * 5


def test_duplicate_letters_worked_example():
    assert score_guess("paper", "apple") == [
        TileState.PRESENT,
        TileState.PRESENT,
        TileState.CORRECT,
        TileState.PRESENT,
        TileState.ABSENT,
    ]


def test_no_shared_letters_all_absent():
    assert score_guess("crane", "outfl"[:5] if False else "moist") == [
        TileState.ABSENT,
        TileState.ABSENT,
        TileState.ABSENT,
        TileState.ABSENT,
        TileState.ABSENT,
    ]


def test_anagram_has_no_absent():
    states = score_guess("listen"[:5], "sitle"[:5])
    assert TileState.ABSENT not in states


@pytest.mark.parametrize(
    "guess,target",
    [
        ("eerie", "there"),
        ("llama", "hello"),
        ("sassy", "asses"),
        ("abbey", "babes"),
        ("geese", "eagle"),
    ],
)
def test_marked_letters_never_exceed_target_counts(guess, target):
    states = score_guess(guess, target)
    marked = Counter(
        letter
        for letter, state in zip(guess, states)
        if state in (TileState.CORRECT, TileState.PRESENT)
    )
    available = Counter(target)
    for letter, count in marked.items():
        assert count <= available[letter]


@pytest.mark.parametrize(
    "guess,target", [("eerie", "there"), ("llama", "hello"), ("sassy", "asses")]
)
def test_correct_exactly_where_letters_match(guess, target):
    states = score_guess(guess, target)
    for g, t, state in zip(guess, target, states):
        assert (state is TileState.CORRECT) == (g == t)


def test_length_mismatch_raises():
    with pytest.raises(ValueError):
        score_guess("cran", "crane")