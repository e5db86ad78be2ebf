"""POSIX-conventional exit codes for CLI paths.

Every dispatch outcome exits with ``SUCCESS``; the remaining codes cover the
ambient failures around it (configuration, unexpected errors).

Contents:
    * :class:`ExitCode` - IntEnum of all exit codes used by this application.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """POSIX-conventional exit codes.

    * 0–1: generic success / failure
    * 78: EX_CONFIG (sysexits.h)
    * 130: SIGINT (informational only; lib_cli_exit_tools translates signals)

    Example:
        >>> ExitCode.SUCCESS
        <ExitCode.SUCCESS: 0>
        >>> int(ExitCode.CONFIG_ERROR)
        78
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    CONFIG_ERROR = 78
    SIGNAL_INT = 130


__all__ = ["ExitCode"]
