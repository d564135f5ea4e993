"""Rendering of a resolved configuration as a table or JSON.

The JSON form uses the configuration file's key names so the output can be
saved and read back as a configuration file.
"""

from __future__ import annotations

import io
from ipaddress import ip_address
from pathlib import Path

import orjson
import pytest
from rich.console import Console

from nodeconf.adapters.config.display import display_configuration
from nodeconf.adapters.sources.json_file import partial_from_json
from nodeconf.domain.configuration import Configuration, ServerConfig
from nodeconf.domain.enums import OutputFormat


def _configuration() -> Configuration:
    return Configuration(
        node_ip=ip_address("173.183.193.2"),
        hostname="krusty-host",
        node_name="krusty-node",
        server_config=ServerConfig(
            addr=ip_address("172.182.192.1"),
            port=1234,
            tls_cert_file=Path("/my/secure/cert.pfx"),
            tls_private_key_file=Path("/the/key"),
        ),
        data_dir=Path("/krusty/data/dir"),
        node_labels={"tier": "web", "zone": "a"},
    )


# ======================== JSON ========================


@pytest.mark.os_agnostic
def test_json_output_uses_file_key_names(capsys: pytest.CaptureFixture[str]) -> None:
    """Every field is emitted under its configuration file key."""
    display_configuration(_configuration(), output_format=OutputFormat.JSON)

    document = orjson.loads(capsys.readouterr().out)

    assert document["nodeIP"] == "173.183.193.2"
    assert document["listenerAddress"] == "172.182.192.1"
    assert document["listenerPort"] == 1234
    assert document["nodeLabels"] == {"tier": "web", "zone": "a"}
    assert document["maxPods"] == 110
    assert document["bootstrapFile"] == str(Path("/etc/kubernetes/bootstrap-kubelet.conf"))


@pytest.mark.os_agnostic
def test_json_output_reads_back_as_a_configuration_file(capsys: pytest.CaptureFixture[str]) -> None:
    """Printed JSON parses into a partial with every field valid."""
    display_configuration(_configuration(), output_format=OutputFormat.JSON)

    partial = partial_from_json(capsys.readouterr().out)

    assert len(partial.present_fields()) == 11
    assert partial.node_name.value == "krusty-node"  # type: ignore[union-attr]


# ======================== Human ========================


@pytest.mark.os_agnostic
def test_human_output_renders_a_table() -> None:
    """The table lists keys and values, labels joined as key=value."""
    buffer = io.StringIO()
    console = Console(file=buffer, width=200, color_system=None)

    display_configuration(_configuration(), output_format=OutputFormat.HUMAN, console=console)

    output = buffer.getvalue()
    assert "Node configuration" in output
    assert "nodeName" in output
    assert "krusty-node" in output
    assert "tier=web, zone=a" in output


@pytest.mark.os_agnostic
def test_human_output_marks_missing_labels() -> None:
    """An empty label mapping is shown as a dash."""
    buffer = io.StringIO()
    console = Console(file=buffer, width=200, color_system=None)
    configuration = Configuration(
        node_ip=ip_address("10.0.0.1"),
        hostname="h",
        node_name="h",
        server_config=ServerConfig(ip_address("0.0.0.0"), 3000, Path("c"), Path("k")),
        data_dir=Path("d"),
    )

    display_configuration(configuration, console=console)

    row = next(line for line in buffer.getvalue().splitlines() if "nodeLabels" in line)
    assert row.replace("│", " ").replace("|", " ").split() == ["nodeLabels", "-"]
