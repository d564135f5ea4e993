"""Fixed fallbacks for testing.

Every fallback returns a recognisable constant so tests can tell defaulted
fields from configured ones without network or filesystem access.
"""

from __future__ import annotations

from ipaddress import ip_address
from pathlib import Path
from typing import Final

from ...application.resolve import Fallbacks
from ...domain.enums import IPFamily
from ...domain.partial import IPAddress

FALLBACK_HOSTNAME: Final[str] = "fallback-hostname"
FALLBACK_DATA_DIR: Final[Path] = Path("/fallback/data/dir")
FALLBACK_CERT_PATH: Final[Path] = Path("/fallback/cert/path")
FALLBACK_KEY_PATH: Final[Path] = Path("/fallback/key/path")
FALLBACK_NODE_IP: Final[IPAddress] = ip_address("4.4.4.4")


def build_fallbacks_in_memory(preferred_family: IPFamily = IPFamily.V4) -> Fallbacks:
    """Return constant fallbacks; only the bind address follows ``preferred_family``.

    Example:
        >>> fb = build_fallbacks_in_memory(IPFamily.V6)
        >>> fb.hostname(), str(fb.bind_address())
        ('fallback-hostname', '::')
    """
    bind_address = ip_address(preferred_family.unspecified)
    return Fallbacks(
        hostname=lambda: FALLBACK_HOSTNAME,
        data_dir=lambda: FALLBACK_DATA_DIR,
        bind_address=lambda: bind_address,
        cert_path=lambda data_dir: FALLBACK_CERT_PATH,
        key_path=lambda data_dir: FALLBACK_KEY_PATH,
        node_ip=lambda hostname, preferred: FALLBACK_NODE_IP,
    )


__all__ = [
    "FALLBACK_CERT_PATH",
    "FALLBACK_DATA_DIR",
    "FALLBACK_HOSTNAME",
    "FALLBACK_KEY_PATH",
    "FALLBACK_NODE_IP",
    "build_fallbacks_in_memory",
]
