"""In-memory adapter implementations for testing.

Lightweight implementations of all application ports that operate entirely
in memory -- no filesystem, no logging framework, no host inspection.

Contents:
    * :mod:`.config` - In-memory configuration adapters
    * :mod:`.logging` - In-memory logging adapter
    * :mod:`.runtime` - Fixed runtime identifiers
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import (
    get_config_in_memory,
    load_build_metadata_in_memory,
    load_cli_settings_in_memory,
)
from .logging import init_logging_in_memory
from .runtime import IN_MEMORY_RUNTIME, get_runtime_info_in_memory

# Static conformance assertions
if TYPE_CHECKING:
    from hello_buildinfo.application.ports import (
        GetConfig,
        GetRuntimeInfo,
        InitLogging,
        LoadBuildMetadata,
        LoadCliSettings,
    )

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory
    _assert_load_build_metadata: LoadBuildMetadata = load_build_metadata_in_memory
    _assert_load_cli_settings: LoadCliSettings = load_cli_settings_in_memory
    _assert_get_runtime_info: GetRuntimeInfo = get_runtime_info_in_memory

__all__ = [
    "IN_MEMORY_RUNTIME",
    "get_config_in_memory",
    "get_runtime_info_in_memory",
    "init_logging_in_memory",
    "load_build_metadata_in_memory",
    "load_cli_settings_in_memory",
]
