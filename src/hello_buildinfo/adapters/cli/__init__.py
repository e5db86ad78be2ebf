"""CLI package providing the command-line interface.

Contents:
    * Click context helpers and traceback state management from :mod:`.context`
    * Root dispatching command from :mod:`.root`
    * Entry point from :mod:`.main`
    * Output handlers from :mod:`.commands`

System Role:
    Public facade for the CLI subsystem. Consumers import from here and stay
    insulated from internal module boundaries.
"""

from __future__ import annotations

from .commands import HANDLERS, show_greeting, show_help, show_version
from .constants import DISPATCH_CONTEXT_SETTINGS, TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import (
    CLIContext,
    TracebackState,
    apply_traceback_preferences,
    get_cli_context,
    restore_traceback_state,
    snapshot_traceback_state,
    store_cli_context,
)
from .exit_codes import ExitCode
from .main import main
from .root import cli

__all__ = [
    # Constants
    "DISPATCH_CONTEXT_SETTINGS",
    "TRACEBACK_SUMMARY_LIMIT",
    "TRACEBACK_VERBOSE_LIMIT",
    "ExitCode",
    # Traceback management
    "TracebackState",
    "apply_traceback_preferences",
    "restore_traceback_state",
    "snapshot_traceback_state",
    # Context helpers
    "CLIContext",
    "get_cli_context",
    "store_cli_context",
    # Root command
    "cli",
    # Entry point
    "main",
    # Handlers
    "HANDLERS",
    "show_greeting",
    "show_help",
    "show_version",
]
