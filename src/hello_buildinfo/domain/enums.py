"""Type-safe domain enums for the commands the dispatcher understands."""

from __future__ import annotations

from enum import Enum


class Command(str, Enum):
    """Commands the dispatcher can resolve from the first argument.

    Inherits from str to allow direct string comparison and use as a
    logging field value.

    Attributes:
        GREET: Print the greeting and usage hint.
        VERSION: Print the build metadata block.
        HELP: Print the usage block.

    Example:
        >>> Command.VERSION.value
        'version'
        >>> Command.GREET == "greet"
        True
    """

    GREET = "greet"
    VERSION = "version"
    HELP = "help"


__all__ = ["Command"]
