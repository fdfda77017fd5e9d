# wordgrid

A five-letter word guessing game played in the terminal.

Each round a hidden five-letter word is chosen. You have six attempts to
guess it. After every guess the letters are printed back, each marked:

- `[X]`: the letter is in the word and in the right place;
- `(X)`: the letter is in the word, but somewhere else;
- ` X `: the letter is not in the word, or the word has fewer copies of it
  than your guess uses.

Guesses must be five letters long and made of letters only. By default each
guess is also looked up in an online dictionary and rejected if it is not
found (a network failure counts as not found). The hidden word is drawn at
random from an online list of five-letter words and confirmed with the same
dictionary, so a network connection is needed unless you pass `--word`.

## Installing

```
pip install .
```

## Playing

```
wordgrid
```

Type a guess and press Enter. A rejected guess prints an error and does not
use up an attempt. When you find the word, a congratulation and your score
(the number of words found in this session) are printed; when you run out of
attempts, the word is shown. Either way a new round starts. Type `quit` or
`exit`, or send end-of-file, to stop.

Options:

- `--word WORD`: play with this hidden word instead of a random one; it is
  used again for every round.
- `--no-check`: accept any five letters without asking the dictionary.
- `--timeout SECONDS`: how long to wait for the word services (default 10).

If the word list cannot be fetched, the command prints an error and exits
with status 1.

## Using it as a library

`wordgrid.scoring.score_guess(guess, target)` returns one `TileState`
(`CORRECT`, `PRESENT` or `ABSENT`) per letter, in order. Exact matches are
marked first; other letters are marked present only while the target still
has unclaimed copies of them. Words of different lengths raise `ValueError`.

```python
from wordgrid.scoring import TileState, score_guess

states = score_guess("hello", "hello")
assert states == [TileState.CORRECT] * 5
```

`wordgrid.game.Game(target, validator=word_exists, max_guesses=6)` tracks a
round. `Game.submit(guess)` returns a `GuessResult` holding the guess, its
tile states and the `Outcome` (`CONTINUE`, `WON` or `LOST`); the target is
included once the round has ended. Guesses of the wrong length, or ones the
validator rejects, raise `InvalidGuessError` without using up a row;
submitting after the round is over raises `RuntimeError`. `Game.reset(target)`
starts a new round and keeps `Game.score`, which counts the words found.
`Game.row` and `Game.remaining` tell where the round stands.

`wordgrid.words` offers `is_valid`, `word_exists`, `random_word` and
`pick_target`. `random_word` and `pick_target` raise `WordServiceError` when
the word list cannot be fetched or is malformed.

`wordgrid.grid.step(row, col, direction)` moves a cursor one tile on the
six-by-five board in a `Direction` (`LEFT`, `RIGHT`, `UP`, `DOWN`), staying
put at the edge.

## What it does not do

There are no user accounts and nothing is stored: the score lives only as
long as the running command, and there is no graphical board.

## Running the tests

```
pip install .[test]
pytest
```