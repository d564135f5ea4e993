"""In-memory adapter implementations for testing.

Lightweight implementations of the application ports that operate entirely
in memory -- no filesystem, no name service, no logging framework.

Contents:
    * :mod:`.config` - In-memory settings, file store, and display adapters
    * :mod:`.fallbacks` - Constant fallbacks
    * :mod:`.logging` - In-memory logging adapter
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import (
    ConfigFileStore,
    DisplaySpy,
    display_configuration_in_memory,
    get_config_in_memory,
    get_default_config_file_in_memory,
    load_config_file_in_memory,
)
from .fallbacks import build_fallbacks_in_memory
from .logging import init_logging_in_memory

# Static conformance assertions
if TYPE_CHECKING:
    from nodeconf.application.ports import (
        BuildFallbacks,
        DisplayConfiguration,
        GetConfig,
        GetDefaultConfigFile,
        InitLogging,
        LoadConfigFile,
    )

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_get_default_config_file: GetDefaultConfigFile = get_default_config_file_in_memory
    _assert_load_config_file: LoadConfigFile = load_config_file_in_memory
    _assert_build_fallbacks: BuildFallbacks = build_fallbacks_in_memory
    _assert_display: DisplayConfiguration = display_configuration_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory

__all__ = [
    "ConfigFileStore",
    "DisplaySpy",
    "build_fallbacks_in_memory",
    "display_configuration_in_memory",
    "get_config_in_memory",
    "get_default_config_file_in_memory",
    "init_logging_in_memory",
    "load_config_file_in_memory",
]
