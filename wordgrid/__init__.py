"""A five-letter word guessing game for the terminal, with dictionary-checked guesses."""

__version__ = "0.1.0"
__all__ = ["cli", "game", "grid", "scoring", "words"]