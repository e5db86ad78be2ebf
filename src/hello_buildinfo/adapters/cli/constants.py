"""Shared CLI constants.

Contents:
    * :data:`DISPATCH_CONTEXT_SETTINGS` - Context settings for the root command.
    * :data:`TRACEBACK_SUMMARY_LIMIT` - Character budget for truncated tracebacks.
    * :data:`TRACEBACK_VERBOSE_LIMIT` - Character budget for verbose tracebacks.
"""

from __future__ import annotations

from typing import Any, Final

#: No help option of its own: ``-h`` and ``--help`` are dispatcher tokens.
DISPATCH_CONTEXT_SETTINGS: Final[dict[str, Any]] = {
    "help_option_names": [],
}

#: Character budget used when printing truncated tracebacks.
TRACEBACK_SUMMARY_LIMIT: Final[int] = 500

#: Character budget used when verbose tracebacks are enabled.
TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000

__all__ = [
    "DISPATCH_CONTEXT_SETTINGS",
    "TRACEBACK_SUMMARY_LIMIT",
    "TRACEBACK_VERBOSE_LIMIT",
]
