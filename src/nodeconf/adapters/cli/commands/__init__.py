"""CLI command implementations.

Collects all subcommand functions and re-exports them for registration
with the root CLI group.

Contents:
    * Info command from :mod:`.info`
    * Resolve command from :mod:`.resolve_cmd`
"""

from __future__ import annotations

from .info import cli_info
from .resolve_cmd import cli_resolve

__all__ = [
    "cli_info",
    "cli_resolve",
]
