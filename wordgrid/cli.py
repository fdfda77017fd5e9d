"""Terminal front end: guess the hidden word in six tries."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from functools import partial

from wordgrid.game import Game, InvalidGuessError, Outcome
from wordgrid.scoring import TileState
from wordgrid.words import (
    DEFAULT_TIMEOUT,
    WordServiceError,
    is_valid,
    pick_target,
    word_exists,
)

_MARKERS = {
    TileState.CORRECT: "[{}]",
    TileState.PRESENT: "({})",
    TileState.ABSENT: " {} ",
}


def render_row(guess: str, states: Sequence[TileState]) -> str:
    """Draw a scored guess: [X] in place, (X) elsewhere in the word, X absent."""
    if len(guess) != len(states):
        raise ValueError("every letter needs exactly one state")
    return "".join(
        _MARKERS[state].format(letter.upper()) for letter, state in zip(guess, states)
    )


def _accept_all(word: str) -> bool:
    return True


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="wordgrid", description="Guess the five-letter word in six tries."
    )
    parser.add_argument("--word", help="play with this hidden word instead of a random one")
    parser.add_argument(
        "--no-check",
        action="store_true",
        help="accept any five letters without asking the dictionary",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT,
        help="seconds to wait for the word services",
    )
    args = parser.parse_args(argv)

    if args.word is not None and not is_valid(args.word):
        parser.error(f"{args.word!r} is not a five-letter word")

    validator = _accept_all if args.no_check else partial(word_exists, timeout=args.timeout)

    def next_target() -> str:
        return args.word if args.word is not None else pick_target(args.timeout)

    try:
        game = Game(next_target(), validator=validator)
    except WordServiceError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    while True:
        try:
            line = input(f"Guess {game.row + 1}/{game.max_guesses}: ")
        except EOFError:
            print()
            return 0
        guess = line.strip()
        if guess.lower() in {"quit", "exit"}:
            return 0
        if not guess:
            continue
        try:
            result = game.submit(guess)
        except InvalidGuessError as exc:
            print(f"Error: {exc}")
            continue

        print(render_row(result.guess, result.states))
        if result.outcome is Outcome.WON:
            print("Congratulations! You Got the Word!! Well done, keep it up!")
            print(f"Score: {game.score}")
        elif result.outcome is Outcome.LOST:
            print(f"The word was {game.target.upper()}")
            print("Better luck next time!")
        else:
            continue

        try:
            game.reset(next_target())
        except WordServiceError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1


if __name__ == "__main__":
    sys.exit(main())