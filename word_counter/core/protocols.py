# word_counter/core/protocols.py
"""
Protocol interfaces shared by the word dictionaries.

HashTable and WordTree both count word frequencies and can be walked with a
(frequency, word) visitor, so the CLI and tests can treat them alike.
"""

from __future__ import annotations

from typing import Callable, Optional, Protocol, runtime_checkable
from typing_extensions import TypedDict


class DumpRow(TypedDict):
    """One slot of a HashTable as shown by the diagnostic dump."""
    index: int
    frequency: int
    collisions: int
    word: Optional[str]


@runtime_checkable
class WordDictionary(Protocol):
    """Minimal interface of a word -> frequency dictionary."""

    def insert(self, word: str) -> object:
        ...

    def search(self, word: str) -> int:
        """Return the frequency of word, 0 when absent."""
        ...

    def traverse(self, visit: Callable[[int, str], None]) -> None:
        """Call visit(frequency, word) for each stored word in native order."""
        ...
