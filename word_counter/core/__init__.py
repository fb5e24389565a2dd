"""
word_counter.core

Word dictionaries and their reporting:
 - open-addressing hash table with linear probing / double hashing (HashTable)
 - table sizing (next_prime)
 - collision statistics replayed at fill-level snapshots (snapshots, print_stats)
 - slot-by-slot diagnostic dump (dump_all)
 - ordered BST/red-black alternative (WordTree)
"""

from .primes import next_prime, is_prime
from .htable import HashTable, Probing, InsertResult, InsertStatus, hash_word
from .stats import Snapshot, snapshots, print_stats
from .dump import dump_rows, dump_all
from .tree import WordTree, TreeKind
from .protocols import WordDictionary, DumpRow

__all__ = [
    "next_prime",
    "is_prime",
    "HashTable",
    "Probing",
    "InsertResult",
    "InsertStatus",
    "hash_word",
    "Snapshot",
    "snapshots",
    "print_stats",
    "dump_rows",
    "dump_all",
    "WordTree",
    "TreeKind",
    "WordDictionary",
    "DumpRow",
]
