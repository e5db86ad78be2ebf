"""In-memory configuration adapters for testing.

Satisfy the same Protocols as the production adapters without touching the
filesystem or the stamped constants in ``__init__conf__``.
"""

from __future__ import annotations

from lib_layered_config import Config

from ...domain.metadata import BuildMetadata
from ..config.sections import CliSettings, load_build_metadata, load_cli_settings


def get_config_in_memory(
    *,
    profile: str | None = None,
    start_dir: str | None = None,
) -> Config:
    """Return an empty in-memory Config."""
    return Config({}, {})


def load_build_metadata_in_memory(config: Config) -> BuildMetadata:
    """Parse ``[build]`` with the real model against sentinel defaults."""
    return load_build_metadata(config, stamped=BuildMetadata())


def load_cli_settings_in_memory(config: Config) -> CliSettings:
    """Parse ``[cli]`` with the real Pydantic model."""
    return load_cli_settings(config)


__all__ = [
    "get_config_in_memory",
    "load_build_metadata_in_memory",
    "load_cli_settings_in_memory",
]
