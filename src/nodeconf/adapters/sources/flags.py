"""Command-line and environment source.

Click collects option values as raw strings (each option also reads an
environment variable). They are validated here with the same per-field
validators as the JSON file, so a bad flag is reported after merging like
any other invalid field.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from nodeconf.domain.behaviors import parse_node_labels
from nodeconf.domain.field_state import ABSENT, FieldState, Valid
from nodeconf.domain.partial import PartialConfiguration

from ._validation import FILE_PATH, IP_ADDRESS, PORT_NUMBER, TEXT, to_state

#: Separator between pairs inside one ``--node-labels`` value.
LABEL_DELIMITER = ","


@dataclass(frozen=True, slots=True)
class FlagValues:
    """Raw option values as received from the command line or environment.

    ``None`` means the option was not given.
    """

    addr: str | None = None
    port: str | None = None
    max_pods: str | None = None
    tls_cert_file: str | None = None
    tls_private_key_file: str | None = None
    node_ip: str | None = None
    node_labels: tuple[str, ...] = ()
    hostname: str | None = None
    node_name: str | None = None
    data_dir: str | None = None
    bootstrap_file: str | None = None


def split_label_values(values: Iterable[str]) -> list[str]:
    """Split comma-delimited ``--node-labels`` values into single tokens.

    Example:
        >>> split_label_values(["a=1,b=2", "c=3"])
        ['a=1', 'b=2', 'c=3']
    """
    return [token for value in values for token in value.split(LABEL_DELIMITER)]


def _labels_state(values: Iterable[str]) -> FieldState[dict[str, str]]:
    labels = parse_node_labels(split_label_values(values))
    return Valid(labels) if labels else ABSENT


def partial_from_flags(values: FlagValues) -> PartialConfiguration:
    """Convert raw option values into a partial configuration.

    Example:
        >>> partial = partial_from_flags(FlagValues(port="1234", node_labels=("=bad",)))
        >>> partial.server_port, partial.node_labels
        (Valid(value=1234), ABSENT)
    """
    return PartialConfiguration(
        node_ip=to_state(IP_ADDRESS, values.node_ip, strict=False),
        hostname=to_state(TEXT, values.hostname, strict=False),
        node_name=to_state(TEXT, values.node_name, strict=False),
        data_dir=to_state(FILE_PATH, values.data_dir, strict=False),
        node_labels=_labels_state(values.node_labels),
        max_pods=to_state(PORT_NUMBER, values.max_pods, strict=False),
        bootstrap_file=to_state(FILE_PATH, values.bootstrap_file, strict=False),
        server_addr=to_state(IP_ADDRESS, values.addr, strict=False),
        server_port=to_state(PORT_NUMBER, values.port, strict=False),
        tls_cert_file=to_state(FILE_PATH, values.tls_cert_file, strict=False),
        tls_private_key_file=to_state(FILE_PATH, values.tls_private_key_file, strict=False),
    )


__all__ = [
    "FlagValues",
    "LABEL_DELIMITER",
    "partial_from_flags",
    "split_label_values",
]
