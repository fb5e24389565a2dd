"""
word_counter - count word frequencies with an instrumented open-addressing hash table.
"""

from .core import HashTable, Probing, InsertStatus, next_prime, print_stats

__all__ = ["HashTable", "Probing", "InsertStatus", "next_prime", "print_stats"]

__version__ = "0.1.0"
