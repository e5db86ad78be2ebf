"""In-memory runtime adapter returning fixed identifiers."""

from __future__ import annotations

from typing import Final

from ...domain.metadata import RuntimeInfo

#: Deterministic runtime identifiers so output assertions do not depend on the host.
IN_MEMORY_RUNTIME: Final[RuntimeInfo] = RuntimeInfo(python_version="3.13.0", system="linux", machine="x86_64")


def get_runtime_info_in_memory() -> RuntimeInfo:
    return IN_MEMORY_RUNTIME


__all__ = ["IN_MEMORY_RUNTIME", "get_runtime_info_in_memory"]
