"""Static package metadata and layered-settings identifiers.

Kept in sync with ``pyproject.toml``.
"""

from __future__ import annotations

from typing import Final

name: Final[str] = "nodeconf"
title: Final[str] = "Resolve node-agent configuration from flags, environment, and a JSON file"
version: Final[str] = "0.1.0"
homepage: Final[str] = "https://github.com/nodeconf/nodeconf"
author: Final[str] = "nodeconf contributors"
shell_command: Final[str] = "nodeconf"

#: Identifiers lib_layered_config uses to build platform-specific settings paths.
LAYEREDCONF_VENDOR: Final[str] = "nodeconf"
LAYEREDCONF_APP: Final[str] = "nodeconf"
LAYEREDCONF_SLUG: Final[str] = "nodeconf"


def print_info() -> None:
    """Print the package metadata.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for nodeconf:
        ...
    """
    fields = (
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("shell_command", shell_command),
    )
    width = max(len(label) for label, _ in fields)
    print(f"Info for {name}:\n")
    for label, value in fields:
        print(f"    {label:<{width}} = {value}")
