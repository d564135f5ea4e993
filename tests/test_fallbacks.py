"""Host-backed fallbacks: hostname, data directory, TLS paths, node IP discovery."""

from __future__ import annotations

import socket
from ipaddress import ip_address
from pathlib import Path
from typing import Any

import pytest

from nodeconf.adapters.system import fallbacks as system
from nodeconf.adapters.system.fallbacks import (
    NODE_IP_HINT,
    build_fallbacks,
    default_cert_path,
    default_config_file,
    default_data_dir,
    default_hostname,
    default_key_path,
    discover_node_ip,
    unspecified_address,
)
from nodeconf.domain.enums import IPFamily
from nodeconf.domain.errors import FallbackError, SourceError


def _addrinfo(*addresses: str) -> list[tuple[Any, ...]]:
    """Build getaddrinfo-shaped results for the given addresses."""
    results: list[tuple[Any, ...]] = []
    for address in addresses:
        if ":" in address:
            results.append((socket.AF_INET6, socket.SOCK_STREAM, 6, "", (address, 80, 0, 0)))
        else:
            results.append((socket.AF_INET, socket.SOCK_STREAM, 6, "", (address, 80)))
    return results


def _fake_lookup(monkeypatch: pytest.MonkeyPatch, *addresses: str) -> list[str]:
    calls: list[str] = []

    def _getaddrinfo(host: str, port: int, *args: Any, **kwargs: Any) -> list[tuple[Any, ...]]:
        calls.append(host)
        return _addrinfo(*addresses)

    monkeypatch.setattr(system.socket, "getaddrinfo", _getaddrinfo)
    return calls


# ---------------------------------------------------------------------------
# Hostname and directories
# ---------------------------------------------------------------------------


@pytest.mark.os_agnostic
def test_default_hostname_returns_the_machine_name(monkeypatch: pytest.MonkeyPatch) -> None:
    """The hostname comes from the operating system unchanged."""
    monkeypatch.setattr(system.socket, "gethostname", lambda: "Krusty-Host")

    assert default_hostname() == "Krusty-Host"


@pytest.mark.os_agnostic
def test_default_hostname_failure_raises_fallback_error(monkeypatch: pytest.MonkeyPatch) -> None:
    """OS errors become fallback errors."""

    def _broken() -> str:
        raise OSError("no name")

    monkeypatch.setattr(system.socket, "gethostname", _broken)

    with pytest.raises(FallbackError, match="unable to get hostname"):
        default_hostname()


@pytest.mark.os_agnostic
def test_default_data_dir_lives_under_home(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """The data directory is ~/.nodeconf."""
    monkeypatch.setattr(system.Path, "home", classmethod(lambda cls: tmp_path))

    assert default_data_dir() == tmp_path / ".nodeconf"


@pytest.mark.os_agnostic
def test_default_data_dir_without_home_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    """An undeterminable home directory is a fallback failure."""

    def _no_home(cls: type[Path]) -> Path:
        raise RuntimeError("Could not determine home directory.")

    monkeypatch.setattr(system.Path, "home", classmethod(_no_home))

    with pytest.raises(FallbackError, match="home directory"):
        default_data_dir()


@pytest.mark.os_agnostic
def test_default_config_file_without_home_is_a_source_error(monkeypatch: pytest.MonkeyPatch) -> None:
    """Without a home directory no default configuration file can be located."""

    def _no_home(cls: type[Path]) -> Path:
        raise KeyError("HOME")

    monkeypatch.setattr(system.Path, "home", classmethod(_no_home))

    with pytest.raises(SourceError, match="no configuration file given"):
        default_config_file()


@pytest.mark.os_agnostic
def test_default_config_file_is_under_the_data_dir(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """The JSON configuration sits in the data directory's config folder."""
    monkeypatch.setattr(system.Path, "home", classmethod(lambda cls: tmp_path))

    assert default_config_file() == tmp_path / ".nodeconf" / "config" / "config.json"


@pytest.mark.os_agnostic
def test_tls_paths_are_under_the_data_dir() -> None:
    """Certificate and key default into <data_dir>/config."""
    data_dir = Path("/krusty/data/dir")

    assert default_cert_path(data_dir) == data_dir / "config" / "nodeconf.crt"
    assert default_key_path(data_dir) == data_dir / "config" / "nodeconf.key"


@pytest.mark.os_agnostic
def test_unspecified_address_per_family() -> None:
    """The wildcard address matches the family."""
    assert unspecified_address(IPFamily.V4) == ip_address("0.0.0.0")
    assert unspecified_address(IPFamily.V6) == ip_address("::")


# ---------------------------------------------------------------------------
# Node IP discovery
# ---------------------------------------------------------------------------


@pytest.mark.os_agnostic
def test_discover_node_ip_picks_first_usable_address(monkeypatch: pytest.MonkeyPatch) -> None:
    """Loopback, unspecified and multicast results are skipped."""
    calls = _fake_lookup(monkeypatch, "127.0.0.1", "0.0.0.0", "224.0.0.1", "10.0.0.7", "10.0.0.8")

    assert discover_node_ip("worker", ip_address("0.0.0.0")) == ip_address("10.0.0.7")
    assert calls == ["worker"]


@pytest.mark.os_agnostic
def test_discover_node_ip_matches_the_bind_address_family(monkeypatch: pytest.MonkeyPatch) -> None:
    """An IPv6 bind address selects an IPv6 node IP."""
    _fake_lookup(monkeypatch, "10.0.0.7", "::1", "2001:db8::5")

    assert discover_node_ip("worker", ip_address("::")) == ip_address("2001:db8::5")


@pytest.mark.os_agnostic
def test_discover_node_ip_strips_scope_ids(monkeypatch: pytest.MonkeyPatch) -> None:
    """Link-local results with a zone suffix still parse."""
    _fake_lookup(monkeypatch, "fe80::1%eth0")

    assert discover_node_ip("worker", ip_address("::")) == ip_address("fe80::1")


@pytest.mark.os_agnostic
def test_discover_node_ip_without_candidates_asks_for_manual_ip(monkeypatch: pytest.MonkeyPatch) -> None:
    """Only loopback answers mean there is nothing to choose."""
    _fake_lookup(monkeypatch, "127.0.0.1", "::1")

    with pytest.raises(FallbackError) as exc_info:
        discover_node_ip("localhost", ip_address("0.0.0.0"))

    assert str(exc_info.value) == NODE_IP_HINT


@pytest.mark.os_agnostic
def test_discover_node_ip_lookup_failure_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    """Name-service errors are reported with the manual-IP hint."""

    def _gaierror(*_args: Any, **_kwargs: Any) -> list[tuple[Any, ...]]:
        raise socket.gaierror(-2, "Name or service not known")

    monkeypatch.setattr(system.socket, "getaddrinfo", _gaierror)

    with pytest.raises(FallbackError, match="Please specify a node IP manually") as exc_info:
        discover_node_ip("nowhere.invalid", ip_address("0.0.0.0"))

    assert "nowhere.invalid" in str(exc_info.value)


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    "error",
    [
        UnicodeError("encoding with 'idna' codec failed (UnicodeError: label empty or too long)"),
        ValueError("embedded null character"),
    ],
)
def test_discover_node_ip_unencodable_hostname_raises(monkeypatch: pytest.MonkeyPatch, error: Exception) -> None:
    """Hostnames the resolver cannot encode get the manual-IP hint too."""

    def _reject(*_args: Any, **_kwargs: Any) -> list[tuple[Any, ...]]:
        raise error

    monkeypatch.setattr(system.socket, "getaddrinfo", _reject)

    with pytest.raises(FallbackError, match="Please specify a node IP manually") as exc_info:
        discover_node_ip("bad..host", ip_address("0.0.0.0"))

    assert exc_info.value.__cause__ is error


# ---------------------------------------------------------------------------
# Assembly
# ---------------------------------------------------------------------------


@pytest.mark.os_agnostic
def test_build_fallbacks_binds_to_the_preferred_family() -> None:
    """The bind-address fallback is fixed to the requested family."""
    assert build_fallbacks(IPFamily.V6).bind_address() == ip_address("::")
    assert build_fallbacks(IPFamily.V4).bind_address() == ip_address("0.0.0.0")


@pytest.mark.os_agnostic
def test_build_fallbacks_wires_the_host_functions() -> None:
    """Every other fallback is the host-backed function."""
    fallbacks = build_fallbacks(IPFamily.V4)

    assert fallbacks.hostname is default_hostname
    assert fallbacks.data_dir is default_data_dir
    assert fallbacks.cert_path is default_cert_path
    assert fallbacks.key_path is default_key_path
    assert fallbacks.node_ip is discover_node_ip
