"""In-memory logging adapter for testing.

Wired by ``build_testing`` so CLI tests never start the lib_log_rich runtime.
"""

from __future__ import annotations

from lib_layered_config import Config


def init_logging_in_memory(config: Config) -> None:
    """Accept the settings and leave logging untouched."""


__all__ = ["init_logging_in_memory"]
