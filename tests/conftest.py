"""Shared pytest fixtures for CLI, configuration and module-entry tests.

Centralizes test infrastructure:
- All shared fixtures live here
- Tests import fixtures implicitly via pytest's conftest discovery
- Fixtures use descriptive names that read as plain English
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import fields
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import lib_log_rich.runtime
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

if TYPE_CHECKING:
    from hello_buildinfo.composition import AppServices
    from hello_buildinfo.domain.metadata import RuntimeInfo

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


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

    Use ``result.stdout`` for exact comparisons so log records written to
    stderr never leak into the assertion.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Iterator[Callable[[], AppServices]]:
    """Provide the production services factory (real config, logging, host).

    CliRunner invokes the root command directly, bypassing the shutdown in
    ``main``, so the logging runtime is shut down here afterwards.
    """
    from hello_buildinfo.composition import build_production

    yield build_production
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return ANSI_ESCAPE_PATTERN.sub("", value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore after the test.

    Use whenever a test reads or mutates the global
    ``lib_cli_exit_tools.config`` traceback flags.
    """
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
    """Clear the get_config lru_cache before and after the test."""
    from hello_buildinfo.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield
    config_mod.get_config.cache_clear()


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from test data dicts without filesystem I/O.

    Example:
        def test_commit(config_factory: Callable[[dict[str, Any]], Config]) -> None:
            config = config_factory({"build": {"git_commit": "9f1c2ab"}})
            assert config.get("build.git_commit") == "9f1c2ab"
    """

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def testing_factory() -> Callable[..., Callable[[], AppServices]]:
    """Return a builder for in-memory services factories.

    The builder accepts the config data dict and optional runtime info, and
    returns a callable suitable for ``cli_runner.invoke(obj=...)`` or
    ``main(services_factory=...)``. Stamped constants are never consulted,
    so metadata defaults are always the sentinels.

    Example:
        def test_commit_line(cli_runner, testing_factory) -> None:
            factory = testing_factory({"build": {"git_commit": "9f1c2ab"}})
            result = cli_runner.invoke(cli, ["version"], obj=factory)
            assert "Commit: 9f1c2ab" in result.stdout
    """
    from hello_buildinfo.composition import AppServices, build_testing

    def _create(config_data: dict[str, Any] | None = None, runtime: RuntimeInfo | None = None) -> Callable[[], AppServices]:
        config = Config(config_data, {}) if config_data is not None else None

        def _factory() -> AppServices:
            return build_testing(config=config, runtime=runtime)

        return _factory

    return _create
