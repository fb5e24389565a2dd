# config_manager.py - JSON config manager

import json
import os

from rich.console import Console

from .logger_utils import DEFAULT_LOG_PATH

DEFAULT_CONFIG_PATH = "word_counter.json"
PROBING_CHOICES = ("linear", "double")

DEFAULTS = {
    "table_size": 113,   # -t, rounded up to a prime
    "snapshots": 10,     # -s
    "probing": "linear", # or "double" (-d)
    "log_path": DEFAULT_LOG_PATH,
    "log_echo": False,   # mirror log lines on stderr
}


class Config:
    def __init__(self, path=DEFAULT_CONFIG_PATH):
        self.path = path
        self.data = dict(DEFAULTS)
        self._load()

    def _load(self):
        # a missing file just means defaults
        if not os.path.exists(self.path):
            return
        with open(self.path, "r", encoding="utf8") as f:
            try:
                loaded = json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"bad config file {self.path}: {e}") from e
        if not isinstance(loaded, dict):
            raise ValueError(f"bad config file {self.path}: expected a JSON object")
        for key, val in loaded.items():
            if key in self.data:
                try:
                    self.set(key, val, save=False)
                except ValueError as e:
                    raise ValueError(f"bad config file {self.path}: {e}") from e

    def __getitem__(self, key):
        return self.data[key]

    def save(self):
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def show(self, console=None):
        console = console or Console()
        for k, v in self.data.items():
            console.print(f"{k:15} = {v}", highlight=False)

    def set(self, key, val, save=True):
        if key not in DEFAULTS:
            raise KeyError(f"no such option: {key}")
        kind = type(DEFAULTS[key])
        if kind is bool and isinstance(val, str):
            val = val.strip().lower() in ("1", "true", "yes", "on")
        try:
            val = kind(val)
        except (TypeError, ValueError) as e:
            raise ValueError(f"{key}: expected {kind.__name__}, got {val!r}") from e
        if key == "probing" and val not in PROBING_CHOICES:
            raise ValueError(f"probing must be one of {', '.join(PROBING_CHOICES)}, got {val!r}")
        self.data[key] = val
        if save:
            self.save()
