"""Fully resolved node-agent configuration and its compiled-in defaults."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Final

from .partial import IPAddress

DEFAULT_PORT: Final[int] = 3000
DEFAULT_MAX_PODS: Final[int] = 110
DEFAULT_BOOTSTRAP_FILE: Final[Path] = Path("/etc/kubernetes/bootstrap-kubelet.conf")


def _empty_labels() -> Mapping[str, str]:
    return MappingProxyType({})


@dataclass(frozen=True, slots=True)
class ServerConfig:
    """Listener settings for the agent's TLS server.

    Attributes:
        addr: Address the server binds to.
        port: Port the server listens on.
        tls_cert_file: Path to the server certificate.
        tls_private_key_file: Path to the server private key.
    """

    addr: IPAddress
    port: int
    tls_cert_file: Path
    tls_private_key_file: Path


@dataclass(frozen=True, slots=True)
class Configuration:
    """Immutable configuration handed to the rest of the agent at startup.

    ``node_labels`` is stored as a read-only mapping view.

    Example:
        >>> from ipaddress import ip_address
        >>> server = ServerConfig(ip_address("0.0.0.0"), 3000, Path("c.crt"), Path("c.key"))
        >>> cfg = Configuration(
        ...     node_ip=ip_address("10.0.0.5"),
        ...     hostname="Worker-1",
        ...     node_name="worker-1",
        ...     server_config=server,
        ...     data_dir=Path("/var/lib/agent"),
        ...     node_labels={"zone": "a"},
        ... )
        >>> cfg.node_labels["zone"]
        'a'
        >>> cfg.max_pods
        110
    """

    node_ip: IPAddress
    hostname: str
    node_name: str
    server_config: ServerConfig
    data_dir: Path
    node_labels: Mapping[str, str] = field(default_factory=_empty_labels)
    max_pods: int = DEFAULT_MAX_PODS
    bootstrap_file: Path = DEFAULT_BOOTSTRAP_FILE

    def __post_init__(self) -> None:
        object.__setattr__(self, "node_labels", MappingProxyType(dict(self.node_labels)))

    def as_dict(self) -> dict[str, object]:
        """Plain JSON-friendly view used by the display adapters."""
        return {
            "nodeIP": str(self.node_ip),
            "hostname": self.hostname,
            "nodeName": self.node_name,
            "dataDir": str(self.data_dir),
            "nodeLabels": dict(self.node_labels),
            "maxPods": self.max_pods,
            "bootstrapFile": str(self.bootstrap_file),
            "listenerAddress": str(self.server_config.addr),
            "listenerPort": self.server_config.port,
            "tlsCertificateFile": str(self.server_config.tls_cert_file),
            "tlsPrivateKeyFile": str(self.server_config.tls_private_key_file),
        }


__all__ = [
    "DEFAULT_BOOTSTRAP_FILE",
    "DEFAULT_MAX_PODS",
    "DEFAULT_PORT",
    "Configuration",
    "ServerConfig",
]
