# dump.py - full table inspection for debugging

from __future__ import annotations
import sys
from typing import Iterator, Optional, TextIO

from rich import box
from rich.console import Console
from rich.table import Table

from .htable import HashTable
from .protocols import DumpRow


def dump_rows(table: HashTable) -> Iterator[DumpRow]:
    """Yield one row per slot, in slot order, empty slots included."""
    for i in range(table.capacity):
        freq, collisions, word = table.slot(i)
        yield DumpRow(index=i, frequency=freq, collisions=collisions, word=word)


def dump_all(table: HashTable, stream: Optional[TextIO] = None) -> None:
    """Render every slot (position, frequency, collisions, word) to stream (stderr by default)."""
    out = Table(title=f"{table.probing.label} ({table.capacity} slots)", box=box.SIMPLE)
    out.add_column("Pos", justify="right", style="cyan")
    out.add_column("Freq", justify="right")
    out.add_column("Stats", justify="right", style="magenta")
    out.add_column("Word", style="bold")

    for row in dump_rows(table):
        out.add_row(
            str(row["index"]),
            str(row["frequency"]),
            str(row["collisions"]),
            row["word"] or "",
        )

    Console(file=stream or sys.stderr, highlight=False).print(out)
