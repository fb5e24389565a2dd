# word_counter/text/__init__.py
# turns raw text into the words counted by the dictionaries

from .normalizer import normalize_word  # lower-case + join contractions
from .tokenizer import iter_words, split_words, DEFAULT_LIMIT  # stream/string -> words

__all__ = [
    "normalize_word",
    "iter_words",
    "split_words",
    "DEFAULT_LIMIT",
]
