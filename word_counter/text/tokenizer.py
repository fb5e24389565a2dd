# word_counter/text/tokenizer.py
# Word tokenizer feeding the dictionaries.
# A word is a run of ASCII letters/digits; apostrophes inside a run are
# dropped rather than ending the word. Everything else is a separator.

import re
from typing import Iterator, TextIO

from .normalizer import normalize_word

DEFAULT_LIMIT = 256  # room for limit - 1 characters per word

_token_re = re.compile(r"[A-Za-z0-9][A-Za-z0-9']*")


def split_words(text: str, limit: int = DEFAULT_LIMIT) -> Iterator[str]:
    """
    Yield normalized words from a string.
    A run longer than limit - 1 characters (apostrophes not counted) is cut
    into consecutive words of at most that length.
    """
    if limit < 2:
        raise ValueError(f"limit must leave room for at least one character, got {limit}")
    width = limit - 1
    for match in _token_re.finditer(text):
        word = normalize_word(match.group())
        for start in range(0, len(word), width):
            yield word[start:start + width]


def iter_words(stream: TextIO, limit: int = DEFAULT_LIMIT) -> Iterator[str]:
    """
    Yield normalized words from a text stream, line by line.
    The generator simply stops at end of stream.
    """
    for line in stream:
        yield from split_words(line, limit)
