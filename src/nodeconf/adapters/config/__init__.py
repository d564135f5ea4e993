"""Configuration adapter - tool settings loading and configuration display.

Contents:
    * :mod:`.loader` - Layered tool settings with caching
    * :mod:`.display` - Resolved node configuration in human/JSON formats
"""

from __future__ import annotations

from .display import display_configuration
from .loader import NodeSettings, get_config, get_default_config_path, load_node_settings

__all__ = [
    "NodeSettings",
    "display_configuration",
    "get_config",
    "get_default_config_path",
    "load_node_settings",
]
