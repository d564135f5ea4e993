"""In-memory configuration adapters for testing.

Satisfy the same Protocols as the production adapters without touching the
filesystem or lib_layered_config discovery.
"""

from __future__ import annotations

import tempfile
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from lib_layered_config import Config

from ...domain.configuration import Configuration
from ...domain.enums import OutputFormat
from ...domain.partial import PartialConfiguration
from ..sources.json_file import partial_from_json


def get_config_in_memory(
    *,
    profile: str | None = None,
    start_dir: str | None = None,
) -> Config:
    """Return an empty in-memory Config."""
    return Config({}, {})


def get_default_config_file_in_memory() -> Path:
    """Return a synthetic path (not a real file)."""
    return Path(tempfile.gettempdir()) / "nodeconf" / "config.json"


def _empty_documents() -> dict[Path, str]:
    return {}


@dataclass
class ConfigFileStore:
    """JSON documents keyed by path, standing in for the filesystem.

    Paths without a document behave like missing files.

    Example:
        >>> store = ConfigFileStore({Path("/etc/node.json"): '{"nodeName": "n1"}'})
        >>> store.load(Path("/etc/node.json")).node_name
        Valid(value='n1')
        >>> store.load(Path("/nowhere.json")) == PartialConfiguration()
        True
        >>> [p.name for p in store.requested]
        ['node.json', 'nowhere.json']
    """

    documents: Mapping[Path, str] = field(default_factory=_empty_documents)
    requested: list[Path] = field(default_factory=list)

    def load(self, path: Path) -> PartialConfiguration:
        self.requested.append(path)
        document = self.documents.get(path)
        if document is None:
            return PartialConfiguration()
        return partial_from_json(document)


def load_config_file_in_memory(path: Path) -> PartialConfiguration:
    """Treat every path as a missing file."""
    return PartialConfiguration()


@dataclass
class DisplaySpy:
    """Captures configurations passed to the display port."""

    shown: list[tuple[Configuration, OutputFormat]] = field(default_factory=list)

    def display_configuration(
        self,
        configuration: Configuration,
        *,
        output_format: OutputFormat = OutputFormat.HUMAN,
    ) -> None:
        self.shown.append((configuration, output_format))


def display_configuration_in_memory(
    configuration: Configuration,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
) -> None:
    """No-op display -- satisfies the DisplayConfiguration protocol."""


__all__ = [
    "ConfigFileStore",
    "DisplaySpy",
    "display_configuration_in_memory",
    "get_config_in_memory",
    "get_default_config_file_in_memory",
    "load_config_file_in_memory",
]
