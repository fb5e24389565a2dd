"""
cli.py - command line word counter
Features:
- Reads words from stdin into a HashTable (linear probing or double hashing)
- Prints word frequencies in table order, or collision statistics snapshots
- Spell-check mode: reports words of a file missing from the stdin dictionary
- Full table dump on stderr for debugging
- Uses Rich for diagnostics on stderr; stdout stays plain for piping
"""

import argparse
import sys
from contextlib import ExitStack
from typing import Iterable, List, Optional, TextIO

from rich.console import Console
from rich.markup import escape

from word_counter.core.dump import dump_all
from word_counter.core.htable import HashTable, InsertStatus, Probing
from word_counter.core.primes import next_prime
from word_counter.core.stats import print_stats
from word_counter.text import iter_words
from word_counter.utils.config_manager import DEFAULT_CONFIG_PATH, Config
from word_counter.utils.logger_utils import Log

# diagnostics go to stderr, results to stdout
err_console = Console(stderr=True, highlight=False)


def _positive_int(text: str) -> int:
    try:
        val = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}")
    if val <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {val}")
    return val


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="word-counter",
        description=(
            "Perform various operations using a hash table. By default, words are "
            "read from stdin and added to the hash table, before being printed out "
            "alongside their frequencies to stdout."
        ),
    )
    parser.add_argument(
        "-c", dest="check_file", metavar="FILENAME",
        help="check spelling of words in FILENAME using words from stdin as dictionary; "
             "print unknown words to stdout, timing info & count to stderr (ignores -p)",
    )
    parser.add_argument("-d", dest="double", action="store_true",
                        help="use double hashing (linear probing is the default)")
    parser.add_argument("-e", dest="entire", action="store_true",
                        help="display entire contents of hash table on stderr")
    parser.add_argument("-p", dest="stats", action="store_true",
                        help="print stats info instead of frequencies & words")
    parser.add_argument("-s", dest="snapshots", metavar="SNAPSHOTS", type=_positive_int,
                        help="show SNAPSHOTS stats snapshots (if -p is used)")
    parser.add_argument("-t", dest="table_size", metavar="TABLESIZE", type=_positive_int,
                        help="use the first prime >= TABLESIZE as hash table size")
    parser.add_argument("--config", default=DEFAULT_CONFIG_PATH,
                        help=f"JSON config file (default: {DEFAULT_CONFIG_PATH})")
    parser.add_argument("--log-file", help="log file (overrides the config)")
    parser.add_argument("--show-config", action="store_true",
                        help="print the effective configuration and exit")
    return parser


def fill_table(table: HashTable, words: Iterable[str], log: Log) -> int:
    """Insert every word; returns how many could not be placed because the table was full."""
    dropped = 0
    for word in words:
        if table.insert(word).status is InsertStatus.FULL:
            log.warning(f"table full ({table.capacity} slots), dropping '{word}'")
            dropped += 1
    if dropped:
        log.warning(f"{dropped} words dropped, table too small")
    return dropped


def spell_check(table: HashTable, words: Iterable[str], out: TextIO) -> int:
    """Write each word missing from the table to out; returns the count."""
    unknown = 0
    for word in words:
        if table.search(word) == 0:
            unknown += 1
            out.write(word + "\n")
    return unknown


def print_frequencies(table: HashTable, out: TextIO) -> None:
    table.traverse(lambda freq, word: out.write(f"{freq:<4d} {word}\n"))


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    # undecodable bytes become U+FFFD, which the tokenizer treats as a separator
    if hasattr(sys.stdin, "reconfigure"):
        sys.stdin.reconfigure(encoding="utf-8", errors="replace")

    try:
        cfg = Config(args.config)
    except (OSError, ValueError) as e:
        err_console.print(f"[red]Config error:[/red] {escape(str(e))}")
        return 1

    log = Log.configure(args.log_file or cfg["log_path"], echo=cfg["log_echo"])

    if args.show_config:
        cfg.show(Console(highlight=False))
        return 0

    probing = Probing.DOUBLE if args.double or cfg["probing"] == "double" else Probing.LINEAR
    capacity = next_prime(args.table_size or cfg["table_size"])
    num_stats = args.snapshots or cfg["snapshots"]

    with ExitStack() as stack:
        infile = None
        if args.check_file:
            try:
                infile = stack.enter_context(
                    open(args.check_file, "r", encoding="utf-8", errors="replace"))
            except OSError as e:
                err_console.print(f"[red]Can't open file![/red] {args.check_file}")
                log.error(f"open {args.check_file}: {e}")
                return 1

        table = stack.enter_context(HashTable(capacity, probing))
        log.info(f"counting words: {probing.value} probing, {capacity} slots")

        with Log.time_block("fill") as fill:
            fill_table(table, iter_words(sys.stdin), log)
        log.info(f"{table.num_keys} distinct words stored")

        if infile is not None:
            with Log.time_block("search") as search:
                unknown = spell_check(table, iter_words(infile), sys.stdout)
            err_console.print(
                f"Fill time:    {fill.elapsed:.6f}\n"
                f"Search time:  {search.elapsed:.6f}\n"
                f"Unknown words = {unknown}"
            )
            Log.metric("unknown words", unknown)

        if args.entire:
            dump_all(table, sys.stderr)

        if infile is None:
            if args.stats:
                print_stats(table, sys.stdout, num_stats)
            else:
                print_frequencies(table, sys.stdout)

    return 0


if __name__ == "__main__":
    sys.exit(main())
