"""Output handlers for the three dispatcher outcomes.

Each handler reads the resolved state from the Click context and prints one
block to stdout.

Contents:
    * :func:`show_greeting` - Greeting plus usage hint.
    * :func:`show_version` - Build metadata block.
    * :func:`show_help` - Usage block.
    * :data:`HANDLERS` - Command to handler mapping used by the root command.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Final

import rich_click as click

from hello_buildinfo import __init__conf__
from hello_buildinfo.domain.behaviors import build_greeting
from hello_buildinfo.domain.enums import Command
from hello_buildinfo.domain.reporting import render_help, render_version

from ..context import get_cli_context

logger = logging.getLogger(__name__)


def show_greeting(ctx: click.Context) -> None:
    click.echo(build_greeting(__init__conf__.shell_command))


def show_version(ctx: click.Context) -> None:
    """Print the version block, with runtime lines unless disabled in ``[cli]``."""
    cli_ctx = get_cli_context(ctx)
    runtime = cli_ctx.services.get_runtime_info() if cli_ctx.settings.show_runtime else None
    logger.debug(
        "Reporting build metadata",
        extra={
            "version": cli_ctx.metadata.version,
            "build_time": cli_ctx.metadata.build_time,
            "git_commit": cli_ctx.metadata.git_commit,
        },
    )
    click.echo(render_version(cli_ctx.metadata, runtime))


def show_help(ctx: click.Context) -> None:
    cli_ctx = get_cli_context(ctx)
    click.echo(render_help(cli_ctx.metadata, __init__conf__.shell_command))


HANDLERS: Final[Mapping[Command, Callable[[click.Context], None]]] = MappingProxyType(
    {
        Command.GREET: show_greeting,
        Command.VERSION: show_version,
        Command.HELP: show_help,
    }
)


__all__ = ["HANDLERS", "show_greeting", "show_help", "show_version"]
