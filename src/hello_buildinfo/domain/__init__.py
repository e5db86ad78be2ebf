"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.behaviors` - Greeting and first-argument command resolution
    * :mod:`.enums` - Domain enumerations (Command)
    * :mod:`.errors` - Domain exception types
    * :mod:`.metadata` - Build metadata and runtime value objects
    * :mod:`.reporting` - Version and help block rendering
"""

from __future__ import annotations

from .behaviors import (
    CANONICAL_GREETING,
    COMMAND_TOKENS,
    build_greeting,
    resolve_command,
)
from .enums import Command
from .errors import ConfigurationError
from .metadata import UNSET_VALUE, UNSET_VERSION, BuildMetadata, RuntimeInfo
from .reporting import render_help, render_version

__all__ = [
    # Behaviors
    "CANONICAL_GREETING",
    "COMMAND_TOKENS",
    "build_greeting",
    "resolve_command",
    # Enums
    "Command",
    # Errors
    "ConfigurationError",
    # Metadata
    "UNSET_VALUE",
    "UNSET_VERSION",
    "BuildMetadata",
    "RuntimeInfo",
    # Reporting
    "render_help",
    "render_version",
]
