"""Shared pytest fixtures for resolution, source, and CLI tests.

Centralizes test infrastructure:
- All shared fixtures live here
- Tests import fixtures implicitly via pytest's conftest discovery
- Fixtures use descriptive names that read as plain English
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import fields
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

from nodeconf.adapters.memory import ConfigFileStore, DisplaySpy, build_fallbacks_in_memory
from nodeconf.adapters.sources.json_file import partial_from_json
from nodeconf.application.resolve import Fallbacks
from nodeconf.domain.partial import PartialConfiguration

if TYPE_CHECKING:
    from nodeconf.composition import AppServices

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _remove_ansi_codes(text: str) -> str:
    """Return *text* stripped of ANSI escape sequences."""
    return ANSI_ESCAPE_PATTERN.sub("", text)


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a configuration snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use ``result.stdout`` for clean output (e.g., JSON parsing) so log
    messages written to stderr do not contaminate it.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory for tests."""
    from nodeconf.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return _remove_ansi_codes(value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore after the test."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config lru_cache before each test."""
    from nodeconf.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def fallbacks() -> Fallbacks:
    """Constant fallbacks: hostname ``fallback-hostname``, node IP ``4.4.4.4``, IPv4 wildcard bind."""
    return build_fallbacks_in_memory()


@pytest.fixture
def partial_from() -> Callable[[str], PartialConfiguration]:
    """Parse a JSON document into a partial configuration."""
    return partial_from_json


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real tool-settings Config instances from test data dicts."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def resolve_cli_context(
    clear_config_cache: None,
) -> Callable[..., tuple[Callable[[], AppServices], DisplaySpy, ConfigFileStore]]:
    """Build an in-memory services factory for ``resolve`` command tests.

    Returns a function taking ``files`` (path -> JSON document) and optional
    tool ``settings`` data. It returns the services factory for
    ``cli_runner.invoke(obj=...)``, the display spy receiving resolved
    configurations, and the file store recording requested paths.

    Example:
        def test_resolve(cli_runner, resolve_cli_context) -> None:
            factory, spy, store = resolve_cli_context({Path("/n.json"): '{"nodeName": "x"}'})
            cli_runner.invoke(cli, ["resolve", "--config-file", "/n.json"], obj=factory)
            assert spy.shown[0][0].node_name == "x"
    """
    from nodeconf.composition import AppServices, build_testing

    def _create(
        files: dict[Path, str] | None = None,
        settings: dict[str, Any] | None = None,
    ) -> tuple[Callable[[], AppServices], DisplaySpy, ConfigFileStore]:
        spy = DisplaySpy()
        store = ConfigFileStore(dict(files or {}))
        testing = build_testing(files=store, display=spy)
        config = Config(settings or {}, {})

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        services = AppServices(
            get_config=_fake_get_config,
            init_logging=testing.init_logging,
            load_config_file=testing.load_config_file,
            get_default_config_file=testing.get_default_config_file,
            build_fallbacks=testing.build_fallbacks,
            display_configuration=testing.display_configuration,
        )
        return (lambda: services), spy, store

    return _create
