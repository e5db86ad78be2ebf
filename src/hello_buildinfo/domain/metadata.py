"""Immutable value objects describing the build and the host runtime."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

#: Sentinel version used when no version was stamped at build time.
UNSET_VERSION: Final[str] = "dev"
#: Sentinel used for build time and commit when nothing was stamped.
UNSET_VALUE: Final[str] = "unknown"


@dataclass(frozen=True, slots=True)
class BuildMetadata:
    """Build-time values resolved once at startup.

    Attributes:
        version: Release version, ``dev`` when unstamped.
        build_time: Build timestamp, ``unknown`` when unstamped.
        git_commit: Commit hash, ``unknown`` when unstamped.

    Example:
        >>> BuildMetadata().version
        'dev'
        >>> BuildMetadata(git_commit="abc123").has_commit
        True
        >>> BuildMetadata().has_build_time
        False
    """

    version: str = UNSET_VERSION
    build_time: str = UNSET_VALUE
    git_commit: str = UNSET_VALUE

    @property
    def has_build_time(self) -> bool:
        return self.build_time != UNSET_VALUE

    @property
    def has_commit(self) -> bool:
        return self.git_commit != UNSET_VALUE


@dataclass(frozen=True, slots=True)
class RuntimeInfo:
    """Interpreter and platform identifiers of the running host.

    Attributes:
        python_version: Interpreter version, e.g. ``3.13.1``.
        system: Lower-case operating system name, e.g. ``linux``.
        machine: Lower-case machine architecture, e.g. ``x86_64``.

    Example:
        >>> RuntimeInfo("3.13.1", "linux", "x86_64").platform
        'linux/x86_64'
    """

    python_version: str
    system: str
    machine: str

    @property
    def platform(self) -> str:
        return f"{self.system}/{self.machine}"


__all__ = [
    "UNSET_VALUE",
    "UNSET_VERSION",
    "BuildMetadata",
    "RuntimeInfo",
]
