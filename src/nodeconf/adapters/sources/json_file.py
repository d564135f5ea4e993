"""JSON configuration file source.

Maps the fixed keys of the node configuration file onto a
:class:`~nodeconf.domain.partial.PartialConfiguration`. Each key is
validated independently; a bad value only becomes an error if nothing with
higher precedence replaces it. Syntax errors, on the other hand, fail the
whole file.

Contents:
    * :data:`FILE_KEYS` - JSON key for each partial configuration field.
    * :func:`partial_from_json` - Parse a JSON document.
    * :func:`partial_from_file` - Read and parse a file; missing files are empty.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

import orjson
from pydantic import TypeAdapter

from nodeconf.domain.errors import SourceError
from nodeconf.domain.partial import PartialConfiguration

from ._validation import FILE_PATH, IP_ADDRESS, LABELS, PORT_NUMBER, TEXT, to_state

logger = logging.getLogger(__name__)

#: JSON key and validator for every field the file may set.
FILE_KEYS: Final[Mapping[str, tuple[str, TypeAdapter[Any]]]] = {
    "node_ip": ("nodeIP", IP_ADDRESS),
    "hostname": ("hostname", TEXT),
    "node_name": ("nodeName", TEXT),
    "data_dir": ("dataDir", FILE_PATH),
    "node_labels": ("nodeLabels", LABELS),
    "max_pods": ("maxPods", PORT_NUMBER),
    "bootstrap_file": ("bootstrapFile", FILE_PATH),
    "server_addr": ("listenerAddress", IP_ADDRESS),
    "server_port": ("listenerPort", PORT_NUMBER),
    "tls_cert_file": ("tlsCertificateFile", FILE_PATH),
    "tls_private_key_file": ("tlsPrivateKeyFile", FILE_PATH),
}


def partial_from_json(document: bytes | str) -> PartialConfiguration:
    """Parse a JSON document into a partial configuration.

    Unknown keys are ignored and a ``null`` value counts as absent.

    Raises:
        SourceError: The document is not valid JSON or is not an object.

    Example:
        >>> partial = partial_from_json('{"listenerPort": 1234, "nodeName": "krusty-node"}')
        >>> partial.server_port, partial.node_name
        (Valid(value=1234), Valid(value='krusty-node'))
        >>> partial_from_json('{"listenerPort": "qqq"}').server_port
        Invalid(error="Input should be a valid integer (got 'qqq')")
    """
    try:
        raw: object = orjson.loads(document)
    except orjson.JSONDecodeError as exc:
        raise SourceError(str(exc)) from exc
    if not isinstance(raw, dict):
        raise SourceError(f"configuration file must contain a JSON object, got {type(raw).__name__}")

    values: dict[str, Any] = raw
    states = {
        field: to_state(adapter, values.get(key), strict=True) for field, (key, adapter) in FILE_KEYS.items()
    }
    return PartialConfiguration(**states)


def partial_from_file(path: Path) -> PartialConfiguration:
    """Read a JSON configuration file.

    A file that does not exist is not an error: it contributes nothing.

    Raises:
        SourceError: The file exists but cannot be read or parsed.
    """
    if not path.exists():
        logger.debug("Configuration file not found, skipping", extra={"path": str(path)})
        return PartialConfiguration()
    try:
        document = path.read_bytes()
    except OSError as exc:
        raise SourceError(f"unable to read {path}: {exc}") from exc
    partial = partial_from_json(document)
    logger.info("Loaded configuration file", extra={"path": str(path), "fields": partial.present_fields()})
    return partial


__all__ = [
    "FILE_KEYS",
    "partial_from_file",
    "partial_from_json",
]
