"""Word validation and lookup against the online word services."""

from __future__ import annotations

import json
import random
import urllib.error
import urllib.parse
import urllib.request

WORD_LENGTH = 5
DEFAULT_TIMEOUT = 10.0

DICTIONARY_URL = "https://api.dictionaryapi.dev/api/v2/entries/en/"
WORD_LIST_URL = "https://api.datamuse.com/words?sp=?????&max=1000"


class WordServiceError(Exception):
    """A word service could not be reached or answered unexpectedly."""


def is_valid(word: str) -> bool:
    """Return True if ``word`` has the game's length and only letters."""
    return len(word) == WORD_LENGTH and all(ch.isalpha() for ch in word)


def _get(url: str, timeout: float) -> tuple[int, bytes]:
    try:
        with urllib.request.urlopen(url, timeout=timeout) as response:
            return response.status, response.read()
    except urllib.error.HTTPError as exc:
        return exc.code, b""
    except (urllib.error.URLError, OSError) as exc:
        raise WordServiceError(f"request to {url} failed: {exc}") from exc


def word_exists(word: str, timeout: float = DEFAULT_TIMEOUT) -> bool:
    """Return True if the dictionary service knows ``word``.

    Words that are not valid are rejected without a request; a network
    failure counts as the word not existing.
    """
    if not is_valid(word):
        return False
    url = DICTIONARY_URL + urllib.parse.quote(word.lower())
    try:
        status, _ = _get(url, timeout)
    except WordServiceError:
        return False
    return status == 200


def random_word(timeout: float = DEFAULT_TIMEOUT) -> str:
    """Fetch the list of five-letter words and return one of them at random."""
    status, body = _get(WORD_LIST_URL, timeout)
    if status != 200:
        raise WordServiceError(f"word list request failed with status {status}")
    try:
        entries = json.loads(body)
    except ValueError as exc:
        raise WordServiceError("word list is not valid JSON") from exc
    if not isinstance(entries, list):
        raise WordServiceError("unexpected word list format")
    if not entries:
        raise WordServiceError("no words received")
    entry = random.choice(entries)
    if isinstance(entry, dict):
        word = entry.get("word", "")
        return word if isinstance(word, str) else ""
    return ""


def pick_target(timeout: float = DEFAULT_TIMEOUT) -> str:
    """Draw random words until one is confirmed by the dictionary."""
    while True:
        candidate = random_word(timeout)
        if word_exists(candidate, timeout):
            return candidate