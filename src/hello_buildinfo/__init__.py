"""Public package surface exposing greeting, dispatch, reporting and metadata.

Routes imports through the architectural layers:
- Domain exports: greeting, command resolution, metadata, rendering
- Composition exports: wired configuration loader
- Metadata: stamped package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Composition exports (wired adapters)
from .composition import get_config

# Domain exports
from .domain.behaviors import (
    CANONICAL_GREETING,
    build_greeting,
    resolve_command,
)
from .domain.enums import Command
from .domain.metadata import BuildMetadata, RuntimeInfo
from .domain.reporting import render_help, render_version

__all__ = [
    "CANONICAL_GREETING",
    "BuildMetadata",
    "Command",
    "RuntimeInfo",
    "build_greeting",
    "get_config",
    "print_info",
    "render_help",
    "render_version",
    "resolve_command",
]
