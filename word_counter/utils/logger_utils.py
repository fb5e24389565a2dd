# logger_utils.py - for logging messages and timing metrics

import os
import sys
import time
from datetime import datetime
from typing import Optional

# Directory where log files are stored by default
LOG_DIR = "logs"

# Path to the default log file, can be overriden
DEFAULT_LOG_PATH = os.path.join(LOG_DIR, "word_counter.log")


class Log:
    """Lightweight logger for writing messages and tracking metrics."""
    COLORS = {
        "DEBUG": "\033[90m",   # gray
        "INFO": "\033[94m",    # blue
        "WARNING": "\033[93m", # yellow
        "ERROR": "\033[91m",   # red
        "RESET": "\033[0m",
    }

    # shared instance used by Log.metric/time_block, replaced by configure()
    default: "Log"

    def __init__(self, path: Optional[str] = None, echo: bool = False, use_color: bool = True):
        self.path = path or DEFAULT_LOG_PATH
        self.echo = echo
        self.use_color = use_color

    @classmethod
    def configure(cls, path: Optional[str] = None, echo: bool = False) -> "Log":
        """Replace the shared logger (the CLI calls this once config is loaded)."""
        cls.default = cls(path, echo=echo)
        return cls.default

    def _write(self, level: str, msg: str):
        """
        Append a log message to the log file with a timestamp.
        Each entry is written as: [YYYY-MM-DD HH:MM:SS] LEVEL   | message
        """
        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        line = f"[{ts}] {level:<7} | {msg}"

        folder = os.path.dirname(self.path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        with open(self.path, "a", encoding="utf-8") as f:
            f.write(line + "\n")

        # stdout carries program output, so echo goes to stderr
        if self.echo:
            if self.use_color and level in self.COLORS:
                print(f"{self.COLORS[level]}{line}{self.COLORS['RESET']}", file=sys.stderr)
            else:
                print(line, file=sys.stderr)

    # Public logging methods
    def debug(self, msg: str):
        self._write("DEBUG", msg)

    def info(self, msg: str):
        self._write("INFO", msg)

    def warning(self, msg: str):
        self._write("WARNING", msg)

    def error(self, msg: str):
        self._write("ERROR", msg)

    @staticmethod
    def metric(tag, value, unit=""):
        """
        Record a metric (like timing or counts) in the shared log.
        Example: [2024-05-01 12:45:02] METRIC  | fill: 0.012s
        """
        Log.default._write("METRIC", f"{tag}: {value}{unit}")

    @staticmethod
    def time_block(label):
        """
        Helper for measuring execution time of a code block.
        To use:
            with Log.time_block("fill") as t:
                do_some_work()
            print(t.elapsed)
        It automatically logs how long the block took.
        """
        return _Timer(label)


Log.default = Log()


class _Timer:
    """Context manager used internally to measure time for a code block."""
    def __init__(self, label):
        self.label = label
        self.start = 0.0
        self.elapsed = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        """When exiting the 'with' block, calculate how long it took and record it as a metric."""
        self.elapsed = time.perf_counter() - self.start
        Log.metric(f"{self.label} time", f"{self.elapsed:.6f}", "s")
