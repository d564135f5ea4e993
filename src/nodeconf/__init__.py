"""Public package surface for resolving node-agent configuration.

Routes imports through the architectural layers:
- Domain exports: field states, partial configurations, merge, errors
- Application exports: fallbacks, resolution, startup use cases
- Composition exports: wired adapter services
- Metadata: package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Application exports
from .application import Fallbacks, default_configuration, load_configuration, resolve

# Composition exports (wired adapters)
from .composition import build_fallbacks, get_config

# Domain exports
from .domain import (
    ABSENT,
    Configuration,
    ConfigurationError,
    FieldError,
    Invalid,
    PartialConfiguration,
    ServerConfig,
    SourceError,
    Valid,
    merge,
)

__all__ = [
    "ABSENT",
    "Configuration",
    "ConfigurationError",
    "Fallbacks",
    "FieldError",
    "Invalid",
    "PartialConfiguration",
    "ServerConfig",
    "SourceError",
    "Valid",
    "build_fallbacks",
    "default_configuration",
    "get_config",
    "load_configuration",
    "merge",
    "print_info",
    "resolve",
]
