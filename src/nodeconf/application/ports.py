"""Application ports: callable Protocol definitions for adapter functions.

Each Protocol class defines a ``__call__`` method whose signature exactly
matches the corresponding adapter function. Existing module-level functions
satisfy these protocols automatically via structural subtyping (PEP 544).

System Role:
    Sits between domain and adapters. Infrastructure types (``Config``) are
    imported under ``TYPE_CHECKING`` only so that layer contracts remain
    satisfied at runtime.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from ..domain.configuration import Configuration
from ..domain.enums import IPFamily, OutputFormat
from ..domain.partial import IPAddress, PartialConfiguration

if TYPE_CHECKING:
    from lib_layered_config import Config

    from .resolve import Fallbacks


# ---------------------------------------------------------------- fallbacks


class HostnameFallback(Protocol):
    """Return the machine hostname; raise FallbackError when unavailable."""

    def __call__(self) -> str: ...


class DataDirFallback(Protocol):
    """Return the default data directory; raise FallbackError when unavailable."""

    def __call__(self) -> Path: ...


class BindAddressFallback(Protocol):
    """Return the address the server binds to when none is configured."""

    def __call__(self) -> IPAddress: ...


class PathFallback(Protocol):
    """Derive a file path from the resolved data directory."""

    def __call__(self, data_dir: Path) -> Path: ...


class NodeIPFallback(Protocol):
    """Discover the node IP from the resolved hostname and bind address."""

    def __call__(self, hostname: str, preferred: IPAddress) -> IPAddress: ...


# ---------------------------------------------------------------- services


class GetConfig(Protocol):
    """Load layered tool settings with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


class LoadConfigFile(Protocol):
    """Read a JSON configuration file into a partial configuration."""

    def __call__(self, path: Path) -> PartialConfiguration: ...


class GetDefaultConfigFile(Protocol):
    """Return the JSON configuration file used when none is given."""

    def __call__(self) -> Path: ...


class BuildFallbacks(Protocol):
    """Assemble the fallback record for a preferred address family."""

    def __call__(self, preferred_family: IPFamily) -> Fallbacks: ...


class DisplayConfiguration(Protocol):
    """Render a resolved configuration in the requested format."""

    def __call__(self, configuration: Configuration, *, output_format: OutputFormat = ...) -> None: ...


__all__ = [
    "BindAddressFallback",
    "BuildFallbacks",
    "DataDirFallback",
    "DisplayConfiguration",
    "GetConfig",
    "GetDefaultConfigFile",
    "HostnameFallback",
    "InitLogging",
    "LoadConfigFile",
    "NodeIPFallback",
    "PathFallback",
]
