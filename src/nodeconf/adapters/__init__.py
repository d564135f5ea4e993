"""Adapters layer - infrastructure and framework integrations.

Contents:
    * :mod:`.sources` - JSON file and CLI/environment configuration sources
    * :mod:`.system` - Host-backed fallbacks (hostname, data dir, node IP)
    * :mod:`.config` - Tool settings loading and configuration display
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.memory` - In-memory adapters for tests
    * :mod:`.cli` - Click CLI framework integration
"""

from __future__ import annotations

__all__: list[str] = []
