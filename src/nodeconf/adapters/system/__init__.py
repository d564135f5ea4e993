"""System adapter - host-backed fallbacks for absent configuration fields.

Contents:
    * :mod:`.fallbacks` - Hostname, data directory, TLS paths, node IP discovery
"""

from __future__ import annotations

from .fallbacks import (
    build_fallbacks,
    default_cert_path,
    default_config_file,
    default_data_dir,
    default_hostname,
    default_key_path,
    discover_node_ip,
    unspecified_address,
)

__all__ = [
    "build_fallbacks",
    "default_cert_path",
    "default_config_file",
    "default_data_dir",
    "default_hostname",
    "default_key_path",
    "discover_node_ip",
    "unspecified_address",
]
