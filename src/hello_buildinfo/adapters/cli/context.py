"""Click context helpers for CLI state management."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

from hello_buildinfo.domain.metadata import BuildMetadata

if TYPE_CHECKING:
    from hello_buildinfo.adapters.config.sections import CliSettings
    from hello_buildinfo.composition import AppServices

TracebackState = tuple[bool, bool]
"""Captured traceback configuration: (traceback_enabled, force_color)."""


@dataclass(slots=True)
class CLIContext:
    """Typed CLI state resolved once per invocation."""

    config: Config
    services: AppServices
    settings: CliSettings
    metadata: BuildMetadata


def store_cli_context(
    ctx: click.Context,
    *,
    config: Config,
    services: AppServices,
    settings: CliSettings,
    metadata: BuildMetadata,
) -> CLIContext:
    """Store CLI state in the Click context and return it.

    Example:
        >>> from unittest.mock import MagicMock
        >>> from hello_buildinfo.adapters.config.sections import CliSettings
        >>> ctx = MagicMock()
        >>> stored = store_cli_context(
        ...     ctx, config=MagicMock(), services=MagicMock(), settings=CliSettings(), metadata=BuildMetadata()
        ... )
        >>> ctx.obj is stored
        True
    """
    ctx.obj = CLIContext(config=config, services=services, settings=settings, metadata=metadata)
    return ctx.obj


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Retrieve typed CLI state from Click context.

    Raises:
        RuntimeError: If CLI context was not properly initialized.
    """
    if not isinstance(ctx.obj, CLIContext):
        raise RuntimeError("CLI context not initialized. Call store_cli_context first.")
    return ctx.obj


def apply_traceback_preferences(enabled: bool) -> None:
    """Synchronise shared traceback flags with the requested preference.

    Args:
        enabled: ``True`` enables full tracebacks with colour.

    Example:
        >>> apply_traceback_preferences(True)
        >>> bool(lib_cli_exit_tools.config.traceback)
        True
    """
    lib_cli_exit_tools.config.traceback = bool(enabled)
    lib_cli_exit_tools.config.traceback_force_color = bool(enabled)


def snapshot_traceback_state() -> TracebackState:
    """Capture the current traceback configuration for later restoration."""
    return (
        bool(getattr(lib_cli_exit_tools.config, "traceback", False)),
        bool(getattr(lib_cli_exit_tools.config, "traceback_force_color", False)),
    )


def restore_traceback_state(state: TracebackState) -> None:
    """Reapply a configuration captured by :func:`snapshot_traceback_state`."""
    lib_cli_exit_tools.config.traceback = state[0]
    lib_cli_exit_tools.config.traceback_force_color = state[1]


__all__ = [
    "CLIContext",
    "TracebackState",
    "apply_traceback_preferences",
    "get_cli_context",
    "restore_traceback_state",
    "snapshot_traceback_state",
    "store_cli_context",
]
