"""Configuration sources - JSON file and CLI/environment adapters.

Contents:
    * :mod:`.json_file` - JSON configuration file source
    * :mod:`.flags` - Command-line/environment source
"""

from __future__ import annotations

from .flags import FlagValues, partial_from_flags, split_label_values
from .json_file import FILE_KEYS, partial_from_file, partial_from_json

__all__ = [
    "FILE_KEYS",
    "FlagValues",
    "partial_from_file",
    "partial_from_flags",
    "partial_from_json",
    "split_label_values",
]
