"""Application layer - port definitions.

Contents:
    * :mod:`.ports` - Callable Protocol definitions for adapter functions
"""

from __future__ import annotations

from .ports import (
    GetConfig,
    GetRuntimeInfo,
    InitLogging,
    LoadBuildMetadata,
    LoadCliSettings,
)

__all__ = [
    "GetConfig",
    "GetRuntimeInfo",
    "InitLogging",
    "LoadBuildMetadata",
    "LoadCliSettings",
]
