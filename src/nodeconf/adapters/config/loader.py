"""Tool settings loader with caching and profile support.

These are the settings of the ``nodeconf`` command itself (logging, the
default node configuration file, the preferred address family), read with
lib_layered_config. They are separate from the node configuration that
:mod:`nodeconf.application.use_cases` resolves.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Protocol, cast

from lib_layered_config import (
    DEFAULT_MAX_PROFILE_LENGTH,
    Config,
    read_config,
    validate_profile_name,
)
from pydantic import BaseModel, ConfigDict, field_validator

from nodeconf import __init__conf__
from nodeconf.domain.enums import IPFamily


class ConfigLoaderProtocol(Protocol):
    """Protocol for config loader with cache_clear method."""

    def __call__(self, *, profile: str | None = None, start_dir: str | None = None) -> Config: ...
    def cache_clear(self) -> None: ...


class NodeSettings(BaseModel):
    """Pydantic model for the ``[nodeconf]`` settings section.

    Example:
        >>> NodeSettings.model_validate({"ip_family": "ipv6"}).ip_family
        <IPFamily.V6: 'ipv6'>
        >>> NodeSettings.model_validate({"config_file": ""}).config_file is None
        True
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    config_file: Path | None = None
    ip_family: IPFamily = IPFamily.V4

    @field_validator("config_file", mode="before")
    @classmethod
    def _coerce_empty_string_to_none(cls, v: object) -> object:
        """Treat an empty path from a config file or env var as not configured."""
        if isinstance(v, str) and not v.strip():
            return None
        return v


def load_node_settings(config: Config) -> NodeSettings:
    """Parse the ``[nodeconf]`` section, falling back to model defaults."""
    raw: object = config.get("nodeconf", default={})
    return NodeSettings.model_validate(cast("dict[str, object]", raw) if raw else {})


def validate_profile(profile: str, max_length: int | None = None) -> None:
    """Reject profile names that are empty, too long, or escape the config tree.

    Raises:
        ValueError: The profile name is not acceptable to lib_layered_config.

    Examples:
        >>> validate_profile("staging-v2")

        >>> validate_profile("../etc/passwd")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        lib_layered_config.domain.errors.ValidationError: profile contains invalid characters: ../etc/passwd
    """
    validate_profile_name(profile, max_length=max_length if max_length is not None else DEFAULT_MAX_PROFILE_LENGTH)


@lru_cache(maxsize=1)
def get_default_config_path() -> Path:
    """Return the bundled ``defaultconfig.toml`` shipped next to this module."""
    return Path(__file__).parent / "defaultconfig.toml"


# One read per (profile, start_dir) for the lifetime of the process.
@lru_cache(maxsize=4)
def _get_config_impl(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=get_default_config_path(),
        start_dir=start_dir,
    )


def _get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Load layered tool settings.

    Precedence: defaults -> app -> host -> user -> dotenv -> env.

    Args:
        profile: Optional profile name; inserts ``profile/<name>/`` into every
            configuration path.
        start_dir: Directory that seeds ``.env`` discovery; defaults to the
            current working directory.

    Returns:
        Immutable configuration object with provenance tracking.

    Raises:
        ValueError: ``profile`` is not a valid profile name.
    """
    if profile is not None:
        validate_profile(profile)
    return _get_config_impl(profile=profile, start_dir=start_dir)


def _cache_clear() -> None:
    """Forget cached settings so the next ``get_config()`` re-reads disk."""
    _get_config_impl.cache_clear()


# lru_cache's cache_clear is invisible once the function is cast to the Protocol.
_get_config.cache_clear = _cache_clear  # type: ignore[attr-defined]
get_config: ConfigLoaderProtocol = cast(ConfigLoaderProtocol, _get_config)


__all__ = [
    "NodeSettings",
    "get_config",
    "get_default_config_path",
    "load_node_settings",
    "validate_profile",
]
