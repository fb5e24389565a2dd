# htable.py
# Open-addressing hash table used to count word frequencies.
# Supports linear probing and double hashing, and records how many
# collisions each distinct key needed in first-insertion order so the
# stats reporter can replay the table as it filled up.

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterator, List, Optional, Tuple

Word = str
Frequency = int
Visitor = Callable[[Frequency, Word], None]

_MASK = 0xFFFFFFFF  # hash accumulator is an unsigned 32-bit int


class Probing(Enum):
    """Collision resolution strategy."""

    LINEAR = "linear"
    DOUBLE = "double"

    @property
    def label(self) -> str:
        return "Linear Probing" if self is Probing.LINEAR else "Double Hashing"


class InsertStatus(Enum):
    INSERTED = "inserted"
    PRESENT = "present"
    FULL = "full"


@dataclass(frozen=True)
class InsertResult:
    """
    Outcome of HashTable.insert.
    frequency is 1 for a new key, the updated count for an existing key,
    and 0 when the table had no room.
    """

    status: InsertStatus
    frequency: int

    @property
    def full(self) -> bool:
        return self.status is InsertStatus.FULL


def hash_word(word: Word) -> int:
    """Polynomial hash (multiplier 31) over the UTF-8 bytes, wrapping at 2**32."""
    h = 0
    for byte in word.encode("utf-8"):
        h = (byte + 31 * h) & _MASK
    return h


class HashTable:
    """
    Fixed capacity open-addressing table of word -> frequency.

    keys/freqs are slot indexed. collision_log is indexed by the order in
    which distinct keys were first inserted; entry k is the number of probe
    advances the k-th key needed before it found an empty slot.
    """

    def __init__(self, capacity: int, probing: Probing = Probing.LINEAR) -> None:
        if not isinstance(probing, Probing):
            raise TypeError(f"probing must be a Probing, got {probing!r}")
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")

        self.capacity = capacity
        self.probing = probing
        self._keys: Optional[List[Optional[Word]]] = [None] * capacity
        self._freqs: List[int] = [0] * capacity
        # slot -> position in _log, only meaningful for occupied slots
        self._order: List[int] = [0] * capacity
        self._log: List[int] = []

    # lifecycle ----------------------------------------------------------------
    def destroy(self) -> None:
        """Release every stored key and the backing storage."""
        self._keys = None
        self._freqs = []
        self._order = []
        self._log = []

    def __enter__(self) -> "HashTable":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.destroy()

    def _slots(self) -> List[Optional[Word]]:
        if self._keys is None:
            raise RuntimeError("hash table has been destroyed")
        return self._keys

    # probing ------------------------------------------------------------------
    def home_slot(self, word: Word) -> int:
        return hash_word(word) % self.capacity

    def _step(self, index: int) -> int:
        # double hashing step is derived from the slot just examined,
        # not from the home slot, so it changes as the probe moves
        return 1 + (index % ((self.capacity - 1) or 1))

    def _advance(self, index: int) -> int:
        if self.probing is Probing.LINEAR:
            index += 1
        else:
            index += self._step(index)
        return index % self.capacity

    # insertion ----------------------------------------------------------------
    def insert(self, word: Word) -> InsertResult:
        """
        Insert word, or bump its frequency if it is already stored.
        Gives up with an InsertStatus.FULL result after `capacity` probe
        advances without finding the key or an empty slot.
        """
        keys = self._slots()
        index = self.home_slot(word)
        collisions = 0

        while True:
            current = keys[index]
            if current is None:
                keys[index] = word
                self._freqs[index] = 1
                self._order[index] = len(self._log)
                self._log.append(collisions)
                return InsertResult(InsertStatus.INSERTED, 1)
            if current == word:
                self._freqs[index] += 1
                return InsertResult(InsertStatus.PRESENT, self._freqs[index])

            index = self._advance(index)
            collisions += 1
            if collisions == self.capacity:
                return InsertResult(InsertStatus.FULL, 0)

    # lookup -------------------------------------------------------------------
    def search(self, word: Word) -> Frequency:
        """Return the frequency of word, 0 if it is not stored."""
        keys = self._slots()
        index = self.home_slot(word)
        collisions = 0

        while True:
            current = keys[index]
            if current is None:
                return 0
            if current == word:
                return self._freqs[index]

            index = self._advance(index)
            collisions += 1
            if collisions == self.capacity:
                return 0

    def __contains__(self, word: Word) -> bool:
        return self.search(word) > 0

    # traversal ----------------------------------------------------------------
    def items(self) -> Iterator[Tuple[Frequency, Word]]:
        """Yield (frequency, word) for every occupied slot, in slot order."""
        keys = self._slots()
        for i, word in enumerate(keys):
            if word is not None:
                yield self._freqs[i], word

    def traverse(self, visit: Visitor) -> None:
        """Call visit(frequency, word) for every occupied slot, in slot order."""
        for freq, word in self.items():
            visit(freq, word)

    # introspection ------------------------------------------------------------
    @property
    def num_keys(self) -> int:
        self._slots()
        return len(self._log)

    def __len__(self) -> int:
        return self.num_keys

    @property
    def collision_log(self) -> Tuple[int, ...]:
        """Collision counts in first-insertion order (read-only copy)."""
        self._slots()
        return tuple(self._log)

    def slot(self, index: int) -> Tuple[Frequency, int, Optional[Word]]:
        """(frequency, collisions, word) held at a slot; (0, 0, None) if empty."""
        word = self._slots()[index]
        if word is None:
            return 0, 0, None
        return self._freqs[index], self._log[self._order[index]], word

    def __repr__(self) -> str:
        state = "destroyed" if self._keys is None else f"{len(self._log)}/{self.capacity}"
        return f"HashTable({self.probing.value}, {state})"
