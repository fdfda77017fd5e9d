"""Colouring of a guess against the hidden word."""

from __future__ import annotations

from collections import Counter
from enum import Enum


class TileState(Enum):
    """How one letter of a guess relates to the hidden word."""

    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"


def score_guess(guess: str, target: str) -> list[TileState]:
    """Return the state of every letter of ``guess`` compared with ``target``.

    Letters in the right place are marked first; the remaining letters are
    marked present only while the target still has unclaimed copies of them.
    """
    guess = guess.lower()
    target = target.lower()
    if len(guess) != len(target):
        raise ValueError(
            f"guess has {len(guess)} letters but the word has {len(target)}"
        )

    available = Counter(target)
    claimed: Counter[str] = Counter()
    states: list[TileState | None] = [None] * len(guess)

    for position, (letter, wanted) in enumerate(zip(guess, target)):
        if letter == wanted:
            claimed[letter] += 1
            states[position] = TileState.CORRECT

    for position, (letter, wanted) in enumerate(zip(guess, target)):
        if letter == wanted:
            continue
        if claimed[letter] < available[letter]:
            claimed[letter] += 1
            states[position] = TileState.PRESENT
        else:
            states[position] = TileState.ABSENT

    return [state for state in states if state is not None]