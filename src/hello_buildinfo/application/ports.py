"""Application ports: callable Protocol definitions for adapter functions.

Each Protocol defines a ``__call__`` whose signature matches the corresponding
adapter function, so module-level functions satisfy them structurally
(PEP 544). Infrastructure types are imported under ``TYPE_CHECKING`` only.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from ..domain.metadata import BuildMetadata, RuntimeInfo

if TYPE_CHECKING:
    from lib_layered_config import Config

    from ..adapters.config.sections import CliSettings


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


class LoadBuildMetadata(Protocol):
    """Resolve immutable build metadata from configuration and stamps."""

    def __call__(self, config: Config) -> BuildMetadata: ...


class LoadCliSettings(Protocol):
    """Resolve the ``[cli]`` section into typed settings."""

    def __call__(self, config: Config) -> CliSettings: ...


class GetRuntimeInfo(Protocol):
    """Describe the interpreter and platform of the running host."""

    def __call__(self) -> RuntimeInfo: ...


__all__ = [
    "GetConfig",
    "GetRuntimeInfo",
    "InitLogging",
    "LoadBuildMetadata",
    "LoadCliSettings",
]
