"""Root command dispatching on the first command-line argument.

Click is used for invocation plumbing only: :class:`RawArgsCommand` skips
Click's argument parser entirely, so every token (a leading ``--`` included)
reaches the callback verbatim and :func:`~hello_buildinfo.domain.behaviors.resolve_command`
decides what to print. Unrecognised arguments and options fall back to the
greeting and never raise a usage error.

Contents:
    * :class:`RawArgsCommand` - Command class that passes argv through unparsed.
    * :func:`cli` - Root command.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import rich_click as click

from hello_buildinfo import __init__conf__
from hello_buildinfo.adapters.logging.setup import log_scope
from hello_buildinfo.domain.behaviors import resolve_command
from hello_buildinfo.domain.enums import Command
from hello_buildinfo.domain.errors import ConfigurationError

from .commands import HANDLERS
from .constants import DISPATCH_CONTEXT_SETTINGS
from .context import apply_traceback_preferences, store_cli_context
from .exit_codes import ExitCode

if TYPE_CHECKING:
    from hello_buildinfo.composition import AppServices

logger = logging.getLogger(__name__)


class RawArgsCommand(click.RichCommand):
    """Root command class that hands argv to the callback without parsing it.

    Even with unknown options ignored, Click's parser consumes a leading
    ``--`` as the end-of-options marker. The raw list is stored as the
    ``args`` parameter instead, and nothing is left over for Click.
    """

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        ctx.params["args"] = tuple(args)
        return []


@click.command(
    __init__conf__.shell_command,
    cls=RawArgsCommand,
    help=__init__conf__.title,
    context_settings=DISPATCH_CONTEXT_SETTINGS,
    add_help_option=False,
)
@click.pass_context
def cli(ctx: click.Context, args: tuple[str, ...]) -> None:
    """Resolve shared state once, then print the block selected by ``args[0]``.

    Example:
        >>> from click.testing import CliRunner
        >>> from hello_buildinfo.composition import build_testing
        >>> result = CliRunner().invoke(cli, ["--version"], obj=build_testing)
        >>> result.exit_code
        0
        >>> result.stdout.splitlines()[0]
        'Version: dev'
    """
    # ctx.obj is always the services factory (production or test)
    if not callable(ctx.obj):
        raise RuntimeError("Services factory not provided. This is a bug.")
    services: AppServices = ctx.obj()  # type: ignore[assignment]  # Click's obj is typed as Any
    config = services.get_config()
    services.init_logging(config)

    try:
        settings = services.load_cli_settings(config)
        metadata = services.load_build_metadata(config)
    except ConfigurationError as exc:
        logger.debug("Configuration rejected", extra={"error": str(exc)})
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc

    store_cli_context(ctx, config=config, services=services, settings=settings, metadata=metadata)
    apply_traceback_preferences(settings.traceback)

    command = resolve_command(args)
    with log_scope(f"cli-{command.value}", command=command.value):
        if command is Command.GREET and args:
            logger.debug("Unrecognised argument, showing greeting", extra={"argument": args[0]})
        logger.info("Dispatching command", extra={"command": command.value})
        HANDLERS[command](ctx)


__all__ = ["RawArgsCommand", "cli"]
