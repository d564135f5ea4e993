"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

# Tool settings and display
from ..adapters.config.display import display_configuration
from ..adapters.config.loader import get_config

# Logging services
from ..adapters.logging.setup import init_logging

# Configuration sources and fallbacks
from ..adapters.sources.json_file import partial_from_file
from ..adapters.system.fallbacks import build_fallbacks, default_config_file

# Static conformance assertions - pyright verifies that each adapter function
# structurally satisfies its corresponding Protocol at type-check time.
if TYPE_CHECKING:
    from ..adapters.memory import ConfigFileStore, DisplaySpy
    from ..application.ports import (
        BuildFallbacks,
        DisplayConfiguration,
        GetConfig,
        GetDefaultConfigFile,
        InitLogging,
        LoadConfigFile,
    )

    _assert_get_config: GetConfig = get_config
    _assert_init_logging: InitLogging = init_logging
    _assert_load_config_file: LoadConfigFile = partial_from_file
    _assert_get_default_config_file: GetDefaultConfigFile = default_config_file
    _assert_build_fallbacks: BuildFallbacks = build_fallbacks
    _assert_display_configuration: DisplayConfiguration = display_configuration


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    init_logging: InitLogging
    load_config_file: LoadConfigFile
    get_default_config_file: GetDefaultConfigFile
    build_fallbacks: BuildFallbacks
    display_configuration: DisplayConfiguration


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        get_config=get_config,
        init_logging=init_logging,
        load_config_file=partial_from_file,
        get_default_config_file=default_config_file,
        build_fallbacks=build_fallbacks,
        display_configuration=display_configuration,
    )


def build_testing(
    *,
    files: ConfigFileStore | None = None,
    display: DisplaySpy | None = None,
) -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Args:
        files: Optional store of JSON documents standing in for files. When
            None, every configuration file reads as missing.
        display: Optional spy capturing displayed configurations. When None,
            display is a no-op.

    Returns:
        AppServices container with in-memory adapters and constant fallbacks.
    """
    from ..adapters.memory import (
        build_fallbacks_in_memory,
        display_configuration_in_memory,
        get_config_in_memory,
        get_default_config_file_in_memory,
        init_logging_in_memory,
        load_config_file_in_memory,
    )

    return AppServices(
        get_config=get_config_in_memory,
        init_logging=init_logging_in_memory,
        load_config_file=files.load if files is not None else load_config_file_in_memory,
        get_default_config_file=get_default_config_file_in_memory,
        build_fallbacks=build_fallbacks_in_memory,
        display_configuration=(
            display.display_configuration if display is not None else display_configuration_in_memory
        ),
    )


__all__ = [
    # Tool settings
    "get_config",
    "init_logging",
    # Node configuration
    "build_fallbacks",
    "default_config_file",
    "display_configuration",
    "partial_from_file",
    # Composition
    "AppServices",
    "build_production",
    "build_testing",
]
