"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

# Configuration services
from ..adapters.config.loader import get_config
from ..adapters.config.sections import load_build_metadata, load_cli_settings

# Logging services
from ..adapters.logging.setup import init_logging

# Runtime services
from ..adapters.runtime.host import get_runtime_info

# Static conformance assertions: pyright verifies that each adapter function
# structurally satisfies its corresponding Protocol at type-check time.
if TYPE_CHECKING:
    from lib_layered_config import Config

    from ..application.ports import (
        GetConfig,
        GetRuntimeInfo,
        InitLogging,
        LoadBuildMetadata,
        LoadCliSettings,
    )
    from ..domain.metadata import RuntimeInfo

    _assert_get_config: GetConfig = get_config
    _assert_init_logging: InitLogging = init_logging
    _assert_load_build_metadata: LoadBuildMetadata = load_build_metadata
    _assert_load_cli_settings: LoadCliSettings = load_cli_settings
    _assert_get_runtime_info: GetRuntimeInfo = get_runtime_info


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    init_logging: InitLogging
    load_build_metadata: LoadBuildMetadata
    load_cli_settings: LoadCliSettings
    get_runtime_info: GetRuntimeInfo


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        get_config=get_config,
        init_logging=init_logging,
        load_build_metadata=load_build_metadata,
        load_cli_settings=load_cli_settings,
        get_runtime_info=get_runtime_info,
    )


def build_testing(*, config: Config | None = None, runtime: RuntimeInfo | None = None) -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Args:
        config: Configuration returned by ``get_config``. When None, an empty
            Config is used so only sentinel metadata is reported.
        runtime: Runtime identifiers to report. When None, the fixed
            :data:`~hello_buildinfo.adapters.memory.IN_MEMORY_RUNTIME` is used.

    Returns:
        AppServices container with in-memory adapters.
    """
    from ..adapters.memory import (
        get_config_in_memory,
        get_runtime_info_in_memory,
        init_logging_in_memory,
        load_build_metadata_in_memory,
        load_cli_settings_in_memory,
    )

    def _injected_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
        return config if config is not None else get_config_in_memory(profile=profile, start_dir=start_dir)

    def _injected_runtime() -> RuntimeInfo:
        return runtime if runtime is not None else get_runtime_info_in_memory()

    return AppServices(
        get_config=_injected_config,
        init_logging=init_logging_in_memory,
        load_build_metadata=load_build_metadata_in_memory,
        load_cli_settings=load_cli_settings_in_memory,
        get_runtime_info=_injected_runtime,
    )


__all__ = [
    # Configuration
    "get_config",
    "load_build_metadata",
    "load_cli_settings",
    # Logging
    "init_logging",
    # Runtime
    "get_runtime_info",
    # Composition
    "AppServices",
    "build_production",
    "build_testing",
]
