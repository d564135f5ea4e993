"""Partial configuration records and the precedence merge.

Each configuration source produces a :class:`PartialConfiguration`. Sources
are combined with :func:`merge`, lowest precedence first, before any field
is validated or defaulted.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from ipaddress import IPv4Address, IPv6Address
from pathlib import Path
from typing import Any

from .field_state import ABSENT, Absent, FieldState

IPAddress = IPv4Address | IPv6Address


@dataclass(frozen=True, slots=True)
class PartialConfiguration:
    """Configuration as seen by one source; every field may be missing or bad.

    Example:
        >>> from nodeconf.domain.field_state import Valid
        >>> PartialConfiguration(server_port=Valid(1234)).server_port
        Valid(value=1234)
        >>> PartialConfiguration().hostname
        ABSENT
    """

    node_ip: FieldState[IPAddress] = ABSENT
    hostname: FieldState[str] = ABSENT
    node_name: FieldState[str] = ABSENT
    data_dir: FieldState[Path] = ABSENT
    node_labels: FieldState[Mapping[str, str]] = ABSENT
    max_pods: FieldState[int] = ABSENT
    bootstrap_file: FieldState[Path] = ABSENT
    server_addr: FieldState[IPAddress] = ABSENT
    server_port: FieldState[int] = ABSENT
    tls_cert_file: FieldState[Path] = ABSENT
    tls_private_key_file: FieldState[Path] = ABSENT

    def with_override(self, other: PartialConfiguration) -> PartialConfiguration:
        """Return ``merge(self, other)``; ``other`` wins wherever it is present."""
        return merge(self, other)

    def present_fields(self) -> tuple[str, ...]:
        """Names of the fields this source supplied, valid or not.

        Example:
            >>> from nodeconf.domain.field_state import Invalid
            >>> PartialConfiguration(max_pods=Invalid("nope")).present_fields()
            ('max_pods',)
        """
        return tuple(f.name for f in fields(self) if not isinstance(getattr(self, f.name), Absent))


def merge(base: PartialConfiguration, override: PartialConfiguration) -> PartialConfiguration:
    """Combine two partial configurations field by field.

    A field present in ``override`` replaces the one in ``base`` whether it
    is valid or not. An absent field in ``override`` keeps ``base``'s state,
    so an earlier parse error survives unless something later supplies the
    same field.

    Example:
        >>> from nodeconf.domain.field_state import Invalid, Valid
        >>> file_values = PartialConfiguration(server_port=Invalid("out of range"), hostname=Valid("a"))
        >>> cli_values = PartialConfiguration(server_port=Valid(1234))
        >>> merged = merge(file_values, cli_values)
        >>> merged.server_port, merged.hostname
        (Valid(value=1234), Valid(value='a'))
    """
    chosen: dict[str, Any] = {}
    for f in fields(PartialConfiguration):
        override_state = getattr(override, f.name)
        chosen[f.name] = getattr(base, f.name) if isinstance(override_state, Absent) else override_state
    return PartialConfiguration(**chosen)


def merge_all(*partials: PartialConfiguration) -> PartialConfiguration:
    """Fold any number of partials, lowest precedence first.

    Example:
        >>> merge_all() == PartialConfiguration()
        True
    """
    result = PartialConfiguration()
    for partial in partials:
        result = merge(result, partial)
    return result


__all__ = [
    "IPAddress",
    "PartialConfiguration",
    "merge",
    "merge_all",
]
