"""Pure domain functions with no I/O or framework dependencies."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import Final

from .enums import Command

CANONICAL_GREETING = "Hello, world!"

#: Argument tokens mapped to the command they select. Matching is exact.
COMMAND_TOKENS: Final[Mapping[str, Command]] = MappingProxyType(
    {
        "version": Command.VERSION,
        "-v": Command.VERSION,
        "--version": Command.VERSION,
        "help": Command.HELP,
        "-h": Command.HELP,
        "--help": Command.HELP,
    }
)


def build_greeting(program: str = "hello") -> str:
    r"""Return the greeting followed by the usage hint.

    Args:
        program: Shell command name shown in the hint.

    Returns:
        Two-line greeting text without a trailing newline.

    Example:
        >>> print(build_greeting())
        Hello, world!
        Use 'hello version' to see version information
    """
    return f"{CANONICAL_GREETING}\nUse '{program} version' to see version information"


def resolve_command(args: Sequence[str]) -> Command:
    """Select the command from the first argument.

    Only the first argument is inspected; anything after it is ignored.
    Unrecognised or missing arguments select the greeting.

    Args:
        args: Command-line arguments without the program name.

    Returns:
        The resolved command.

    Example:
        >>> resolve_command([])
        <Command.GREET: 'greet'>
        >>> resolve_command(["-v"])
        <Command.VERSION: 'version'>
        >>> resolve_command(["--help", "version"])
        <Command.HELP: 'help'>
        >>> resolve_command(["Version"])
        <Command.GREET: 'greet'>
    """
    if not args:
        return Command.GREET
    return COMMAND_TOKENS.get(args[0], Command.GREET)


__all__ = [
    "CANONICAL_GREETING",
    "COMMAND_TOKENS",
    "build_greeting",
    "resolve_command",
]
