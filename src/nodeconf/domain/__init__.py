"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.field_state` - Absent / Invalid / Valid field states
    * :mod:`.partial` - Partial configuration records and the merge engine
    * :mod:`.configuration` - Resolved configuration and compiled-in defaults
    * :mod:`.behaviors` - Hostname sanitizing and label parsing
    * :mod:`.enums` - Domain enumerations (OutputFormat, IPFamily)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .behaviors import parse_node_labels, sanitize_hostname, split_one_label
from .configuration import (
    DEFAULT_BOOTSTRAP_FILE,
    DEFAULT_MAX_PODS,
    DEFAULT_PORT,
    Configuration,
    ServerConfig,
)
from .enums import IPFamily, OutputFormat
from .errors import ConfigurationError, FallbackError, FieldError, SourceError
from .field_state import ABSENT, Absent, FieldState, Invalid, Valid, is_present, valid_or_absent
from .partial import IPAddress, PartialConfiguration, merge, merge_all

__all__ = [
    # Field states
    "ABSENT",
    "Absent",
    "FieldState",
    "Invalid",
    "Valid",
    "is_present",
    "valid_or_absent",
    # Partials
    "IPAddress",
    "PartialConfiguration",
    "merge",
    "merge_all",
    # Resolved configuration
    "DEFAULT_BOOTSTRAP_FILE",
    "DEFAULT_MAX_PODS",
    "DEFAULT_PORT",
    "Configuration",
    "ServerConfig",
    # Behaviors
    "parse_node_labels",
    "sanitize_hostname",
    "split_one_label",
    # Enums
    "IPFamily",
    "OutputFormat",
    # Errors
    "ConfigurationError",
    "FallbackError",
    "FieldError",
    "SourceError",
]
