"""Application layer - use cases and port definitions.

Contents:
    * :mod:`.ports` - Callable Protocol definitions for adapter functions
    * :mod:`.resolve` - Ordered default resolution
    * :mod:`.use_cases` - Startup configuration use cases
"""

from __future__ import annotations

from .ports import (
    BindAddressFallback,
    BuildFallbacks,
    DataDirFallback,
    DisplayConfiguration,
    GetConfig,
    GetDefaultConfigFile,
    HostnameFallback,
    InitLogging,
    LoadConfigFile,
    NodeIPFallback,
    PathFallback,
)
from .resolve import Fallbacks, resolve
from .use_cases import default_configuration, load_configuration

__all__ = [
    "BindAddressFallback",
    "BuildFallbacks",
    "DataDirFallback",
    "DisplayConfiguration",
    "Fallbacks",
    "GetConfig",
    "GetDefaultConfigFile",
    "HostnameFallback",
    "InitLogging",
    "LoadConfigFile",
    "NodeIPFallback",
    "PathFallback",
    "default_configuration",
    "load_configuration",
    "resolve",
]
