"""Default resolution: turn a merged partial configuration into a Configuration.

Fields are resolved one at a time in a fixed order because later defaults
depend on earlier results: the certificate and key paths live under the
data directory, and node IP discovery needs the hostname and the bind
address. The first field whose winning state is invalid stops resolution.

Contents:
    * :class:`Fallbacks` - Injected functions that supply missing values.
    * :func:`resolve` - Ordered resolution of every field.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import TypeVar

from ..domain.behaviors import sanitize_hostname
from ..domain.configuration import (
    DEFAULT_BOOTSTRAP_FILE,
    DEFAULT_MAX_PODS,
    DEFAULT_PORT,
    Configuration,
    ServerConfig,
)
from ..domain.errors import FallbackError, FieldError
from ..domain.field_state import FieldState, Invalid, Valid
from ..domain.partial import IPAddress, PartialConfiguration
from .ports import (
    BindAddressFallback,
    DataDirFallback,
    HostnameFallback,
    NodeIPFallback,
    PathFallback,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Fallbacks:
    """Functions consulted for fields that no source supplied.

    Production wiring lives in :mod:`nodeconf.adapters.system`; tests pass
    plain lambdas so resolution never touches the network or filesystem.
    """

    hostname: HostnameFallback
    data_dir: DataDirFallback
    bind_address: BindAddressFallback
    cert_path: PathFallback
    key_path: PathFallback
    node_ip: NodeIPFallback


def _take(state: FieldState[T], field: str, fallback: Callable[[], T]) -> T:
    """Return the value of ``state`` or the fallback's, raising FieldError for invalid input."""
    if isinstance(state, Valid):
        return state.value
    if isinstance(state, Invalid):
        raise FieldError(field, state.error)
    logger.debug("No source supplied %s, using fallback", field)
    try:
        return fallback()
    except FallbackError as exc:
        raise FieldError(field, str(exc)) from exc


def _constant(value: T) -> Callable[[], T]:
    return lambda: value


def _no_labels() -> Mapping[str, str]:
    return {}


def resolve(partial: PartialConfiguration, fallbacks: Fallbacks) -> Configuration:
    """Build the final configuration from a merged partial configuration.

    Args:
        partial: Result of merging every source, lowest precedence first.
        fallbacks: Functions supplying values for absent fields.

    Returns:
        Fully resolved, immutable configuration.

    Raises:
        FieldError: The winning state of some field is invalid, or the
            fallback for an absent field failed. The message names the
            logical field and carries the original cause.

    Example:
        >>> from ipaddress import ip_address
        >>> from nodeconf.domain.field_state import Valid
        >>> fb = Fallbacks(
        ...     hostname=lambda: "Fallback-Host",
        ...     data_dir=lambda: Path("/data"),
        ...     bind_address=lambda: ip_address("0.0.0.0"),
        ...     cert_path=lambda d: d / "tls.crt",
        ...     key_path=lambda d: d / "tls.key",
        ...     node_ip=lambda hostname, preferred: ip_address("4.4.4.4"),
        ... )
        >>> cfg = resolve(PartialConfiguration(server_port=Valid(8443)), fb)
        >>> cfg.node_name, cfg.server_config.port, str(cfg.server_config.tls_cert_file)
        ('fallback-host', 8443, '/data/tls.crt')
    """
    hostname: str = _take(partial.hostname, "hostname", fallbacks.hostname)
    data_dir: Path = _take(partial.data_dir, "data directory", fallbacks.data_dir)
    server_addr: IPAddress = _take(partial.server_addr, "server address", fallbacks.bind_address)
    tls_cert_file: Path = _take(
        partial.tls_cert_file, "TLS certificate file", lambda: fallbacks.cert_path(data_dir)
    )
    tls_private_key_file: Path = _take(
        partial.tls_private_key_file, "TLS private key file", lambda: fallbacks.key_path(data_dir)
    )
    server_port: int = _take(partial.server_port, "server port", _constant(DEFAULT_PORT))
    node_ip: IPAddress = _take(partial.node_ip, "node IP", lambda: fallbacks.node_ip(hostname, server_addr))
    node_name: str = _take(partial.node_name, "node name", lambda: sanitize_hostname(hostname))
    max_pods: int = _take(partial.max_pods, "maximum pods", _constant(DEFAULT_MAX_PODS))
    node_labels: Mapping[str, str] = _take(partial.node_labels, "node labels", _no_labels)
    bootstrap_file: Path = _take(partial.bootstrap_file, "bootstrap file", _constant(DEFAULT_BOOTSTRAP_FILE))

    return Configuration(
        node_ip=node_ip,
        hostname=hostname,
        node_name=node_name,
        server_config=ServerConfig(
            addr=server_addr,
            port=server_port,
            tls_cert_file=tls_cert_file,
            tls_private_key_file=tls_private_key_file,
        ),
        data_dir=data_dir,
        node_labels=node_labels,
        max_pods=max_pods,
        bootstrap_file=bootstrap_file,
    )


__all__ = [
    "Fallbacks",
    "resolve",
]
