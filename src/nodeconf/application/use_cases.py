"""Startup use cases combining sources, merge, and resolution.

Contents:
    * :func:`default_configuration` - Configuration built from fallbacks only.
    * :func:`load_configuration` - JSON file overlaid by CLI/environment values.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..domain.configuration import Configuration
from ..domain.partial import PartialConfiguration, merge
from .ports import GetDefaultConfigFile, LoadConfigFile
from .resolve import Fallbacks, resolve

logger = logging.getLogger(__name__)


def default_configuration(fallbacks: Fallbacks) -> Configuration:
    """Return a configuration where every field comes from its default."""
    return resolve(PartialConfiguration(), fallbacks)


def load_configuration(
    *,
    flags: PartialConfiguration,
    fallbacks: Fallbacks,
    load_file: LoadConfigFile,
    default_config_file: GetDefaultConfigFile,
    config_file: Path | None = None,
) -> Configuration:
    """Resolve the configuration from a JSON file and CLI/environment values.

    The file is read first so that a malformed file aborts startup even when
    the command line supplies every field. Values from ``flags`` take
    precedence over the file.

    Args:
        flags: Partial configuration from the command line and environment.
        fallbacks: Functions supplying values no source provided.
        load_file: Reads a JSON file into a partial configuration; a missing
            file yields an empty partial.
        default_config_file: Returns the file consulted when ``config_file``
            is not given.
        config_file: Explicit JSON configuration file.

    Raises:
        SourceError: The file exists but cannot be read or parsed.
        FieldError: The winning value of a field is invalid or its fallback
            failed.
    """
    path = config_file if config_file is not None else default_config_file()
    logger.debug("Loading configuration file", extra={"path": str(path)})
    file_values = load_file(path)
    merged = merge(file_values, flags)
    logger.debug(
        "Merged configuration sources",
        extra={"file_fields": file_values.present_fields(), "flag_fields": flags.present_fields()},
    )
    return resolve(merged, fallbacks)


__all__ = [
    "default_configuration",
    "load_configuration",
]
