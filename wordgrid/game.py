"""State of a round: the hidden word, the guesses made and the outcome."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from wordgrid.grid import ROWS
from wordgrid.scoring import TileState, score_guess
from wordgrid.words import WORD_LENGTH, is_valid, word_exists

MAX_GUESSES = ROWS


class Outcome(Enum):
    """Where the round stands after a guess."""

    CONTINUE = "continue"
    WON = "won"
    LOST = "lost"


@dataclass(frozen=True)
class GuessResult:
    """The scored guess and what it did to the round.

    ``target`` is filled in only once the round has ended.
    """

    guess: str
    states: tuple[TileState, ...]
    outcome: Outcome
    target: str | None = None


class InvalidGuessError(ValueError):
    """A guess was rejected without using up a row."""


class Game:
    """One board of guesses against a hidden word, with a running score."""

    def __init__(
        self,
        target: str,
        validator: Callable[[str], bool] = word_exists,
        max_guesses: int = MAX_GUESSES,
    ) -> None:
        if max_guesses < 1:
            raise ValueError("a game needs at least one guess")
        self._validator = validator
        self.max_guesses = max_guesses
        self.score = 0
        self.reset(target)

    def reset(self, target: str) -> None:
        """Start a new round with ``target`` as the hidden word; the score is kept."""
        if not is_valid(target):
            raise ValueError(f"{target!r} is not a {WORD_LENGTH}-letter word")
        self.target = target.lower()
        self.guesses: list[GuessResult] = []
        self.finished = False

    @property
    def row(self) -> int:
        """Index of the row the next guess goes into."""
        return len(self.guesses)

    @property
    def remaining(self) -> int:
        return self.max_guesses - len(self.guesses)

    def submit(self, guess: str) -> GuessResult:
        """Score ``guess`` and advance the round."""
        if self.finished:
            raise RuntimeError("the round is over; reset it to play again")
        guess = guess.lower()
        if len(guess) != WORD_LENGTH:
            raise InvalidGuessError(f"the word must be {WORD_LENGTH} letters long !")
        if not is_valid(guess) or not self._validator(guess):
            raise InvalidGuessError("the word provided is not a valid word !")

        states = tuple(score_guess(guess, self.target))
        if guess == self.target:
            outcome = Outcome.WON
            self.score += 1
        elif len(self.guesses) + 1 >= self.max_guesses:
            outcome = Outcome.LOST
        else:
            outcome = Outcome.CONTINUE

        finished = outcome is not Outcome.CONTINUE
        result = GuessResult(
            guess=guess,
            states=states,
            outcome=outcome,
            target=self.target if finished else None,
        )
        self.guesses.append(result)
        self.finished = finished
        return result