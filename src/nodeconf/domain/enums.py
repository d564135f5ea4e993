"""Type-safe domain enums for output formats and IP families."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Output format options for configuration display.

    Inherits from str to allow direct string comparison and Click integration.

    Attributes:
        HUMAN: Human-readable table output.
        JSON: Machine-readable JSON output.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


class IPFamily(str, Enum):
    """Address family preferred for defaulted addresses.

    Selects the unspecified bind address and filters node IP discovery.

    Example:
        >>> IPFamily("ipv6").unspecified
        '::'
        >>> IPFamily.V4.version
        4
    """

    V4 = "ipv4"
    V6 = "ipv6"

    @property
    def unspecified(self) -> str:
        return "0.0.0.0" if self is IPFamily.V4 else "::"

    @property
    def version(self) -> int:
        return 4 if self is IPFamily.V4 else 6


__all__ = [
    "IPFamily",
    "OutputFormat",
]
