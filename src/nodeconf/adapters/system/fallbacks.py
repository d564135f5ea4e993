"""Production fallbacks backed by the local host.

Supplies defaults for fields that no source configured: the machine
hostname, a data directory under the user's home, certificate and key
paths under that data directory, the unspecified bind address, and a node
IP found through the system resolver.

Contents:
    * :func:`default_hostname` - Hostname of this machine.
    * :func:`default_data_dir` - ``~/.nodeconf``.
    * :func:`default_cert_path` / :func:`default_key_path` - TLS files under the data dir.
    * :func:`default_config_file` - JSON config file consulted when none is given.
    * :func:`discover_node_ip` - Name-service lookup of the node address.
    * :func:`build_fallbacks` - Assemble a :class:`Fallbacks` record.
"""

from __future__ import annotations

import logging
import socket
from functools import partial
from ipaddress import ip_address
from pathlib import Path
from typing import Final

from nodeconf.application.resolve import Fallbacks
from nodeconf.domain.enums import IPFamily
from nodeconf.domain.errors import FallbackError, SourceError
from nodeconf.domain.partial import IPAddress

logger = logging.getLogger(__name__)

DATA_DIR_NAME: Final[str] = ".nodeconf"
CERT_FILE: Final[Path] = Path("config/nodeconf.crt")
KEY_FILE: Final[Path] = Path("config/nodeconf.key")
CONFIG_FILE: Final[Path] = Path("config/config.json")

#: Any port works; the resolver only needs a complete socket address.
LOOKUP_PORT: Final[int] = 80

NODE_IP_HINT: Final[str] = "unable to find default IP address for node. Please specify a node IP manually"


def default_hostname() -> str:
    """Return this machine's hostname."""
    try:
        hostname = socket.gethostname()
    except OSError as exc:
        raise FallbackError(f"unable to get hostname: {exc}") from exc
    if not hostname:
        raise FallbackError("unable to get hostname: empty name")
    return hostname


def _home_dir() -> Path:
    try:
        return Path.home()
    except (KeyError, RuntimeError) as exc:
        raise FallbackError("unable to get home directory") from exc


def default_data_dir() -> Path:
    """Return ``~/.nodeconf``."""
    return _home_dir() / DATA_DIR_NAME


def default_cert_path(data_dir: Path) -> Path:
    """Return the certificate path under ``data_dir``.

    Example:
        >>> default_cert_path(Path("/var/lib/agent")).as_posix()
        '/var/lib/agent/config/nodeconf.crt'
    """
    return data_dir / CERT_FILE


def default_key_path(data_dir: Path) -> Path:
    """Return the private key path under ``data_dir``.

    Example:
        >>> default_key_path(Path("/var/lib/agent")).as_posix()
        '/var/lib/agent/config/nodeconf.key'
    """
    return data_dir / KEY_FILE


def default_config_file() -> Path:
    """Return ``~/.nodeconf/config/config.json``."""
    try:
        return default_data_dir() / CONFIG_FILE
    except FallbackError as exc:
        raise SourceError(f"no configuration file given and {exc}") from exc


def unspecified_address(family: IPFamily) -> IPAddress:
    """Return the wildcard bind address for ``family``.

    Example:
        >>> str(unspecified_address(IPFamily.V6))
        '::'
    """
    return ip_address(family.unspecified)


def _is_candidate(address: IPAddress, preferred: IPAddress) -> bool:
    return (
        not address.is_loopback
        and not address.is_multicast
        and not address.is_unspecified
        and address.version == preferred.version
    )


def discover_node_ip(hostname: str, preferred: IPAddress) -> IPAddress:
    """Find the node IP by resolving ``hostname`` through the name service.

    Picks the first resolved address that is not loopback, multicast or
    unspecified and that has the same family as ``preferred``. Network
    interfaces are not inspected. The lookup may block; no timeout or retry
    is applied.

    Raises:
        FallbackError: The lookup failed or returned no usable address.
    """
    try:
        infos = socket.getaddrinfo(hostname, LOOKUP_PORT, type=socket.SOCK_STREAM)
    # idna encoding of bad labels raises UnicodeError; embedded NULs raise ValueError
    except (OSError, UnicodeError, ValueError) as exc:
        raise FallbackError(f"{NODE_IP_HINT} (lookup of {hostname!r} failed: {exc})") from exc

    for _family, _type, _proto, _canonname, sockaddr in infos:
        # IPv6 link-local results carry a "%scope" suffix
        candidate = ip_address(str(sockaddr[0]).split("%", 1)[0])
        if _is_candidate(candidate, preferred):
            logger.debug("Discovered node IP", extra={"hostname": hostname, "node_ip": str(candidate)})
            return candidate
    raise FallbackError(NODE_IP_HINT)


def build_fallbacks(preferred_family: IPFamily) -> Fallbacks:
    """Wire the host-backed fallbacks for ``preferred_family``."""
    return Fallbacks(
        hostname=default_hostname,
        data_dir=default_data_dir,
        bind_address=partial(unspecified_address, preferred_family),
        cert_path=default_cert_path,
        key_path=default_key_path,
        node_ip=discover_node_ip,
    )


__all__ = [
    "NODE_IP_HINT",
    "build_fallbacks",
    "default_cert_path",
    "default_config_file",
    "default_data_dir",
    "default_hostname",
    "default_key_path",
    "discover_node_ip",
    "unspecified_address",
]
