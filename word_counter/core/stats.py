# stats.py
# Collision statistics for a HashTable, replayed at evenly spaced fill levels.
#
# For snapshot i of n the table is considered (100 * i // n) percent full,
# which corresponds to the first capacity * percent // 100 distinct keys in
# insertion order. Snapshots whose prefix is empty or longer than the number
# of keys actually inserted are skipped.

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, TextIO

import numpy as np

from .htable import HashTable

RULE = "-" * 53


@dataclass(frozen=True)
class Snapshot:
    """Collision summary for the first `entries` keys inserted."""

    percent_full: int
    entries: int
    percent_at_home: float
    average_collisions: float
    max_collisions: int

    def format_line(self) -> str:
        return (
            f"{self.percent_full:4d} {self.entries:10d} {self.percent_at_home:10.1f} "
            f"{self.average_collisions:10.2f} {self.max_collisions:11d}"
        )


def snapshot_at(table: HashTable, percent_full: int) -> Optional[Snapshot]:
    """Summarise the table as it was when percent_full of it had been filled."""
    entries = table.capacity * percent_full // 100
    log = table.collision_log
    if entries <= 0 or entries > len(log):
        return None

    counts = np.asarray(log[:entries], dtype=np.int64)
    at_home = int(np.count_nonzero(counts == 0))
    return Snapshot(
        percent_full=percent_full,
        entries=entries,
        percent_at_home=at_home * 100.0 / entries,
        average_collisions=float(counts.sum()) / entries,
        max_collisions=int(counts.max()),
    )


def snapshots(table: HashTable, num_stats: int) -> List[Snapshot]:
    """Up to num_stats snapshots in increasing fill order; none if num_stats <= 0."""
    out: List[Snapshot] = []
    for i in range(1, num_stats + 1):
        snap = snapshot_at(table, 100 * i // num_stats)
        if snap is not None:
            out.append(snap)
    return out


def print_stats(table: HashTable, stream: TextIO, num_stats: int) -> None:
    """
    Write the statistics report to stream:
      - percent at home: keys placed without a collision
      - average collisions: mean probe advances per key so far
      - maximum collisions: worst single placement so far
    """
    stream.write(f"\n{table.probing.label}\n\n")
    stream.write("Percent   Current   Percent    Average      Maximum\n")
    stream.write(" Full     Entries   At Home   Collisions   Collisions\n")
    stream.write(RULE + "\n")
    for snap in snapshots(table, num_stats):
        stream.write(snap.format_line() + "\n")
    stream.write(RULE + "\n\n")
