# word_counter/utils/__init__.py
# logging and configuration shared by the CLI

from .logger_utils import Log
from .config_manager import Config

__all__ = ["Log", "Config"]
