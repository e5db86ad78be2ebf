"""Configuration adapter - layered loading and typed section views.

Contents:
    * :mod:`.loader` - Configuration loading with caching
    * :mod:`.sections` - ``[build]`` and ``[cli]`` section parsing
"""

from __future__ import annotations

from .loader import get_config, get_default_config_path
from .sections import CliSettings, load_build_metadata, load_cli_settings, stamped_build_metadata

__all__ = [
    "CliSettings",
    "get_config",
    "get_default_config_path",
    "load_build_metadata",
    "load_cli_settings",
    "stamped_build_metadata",
]
