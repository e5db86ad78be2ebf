"""Host runtime identifiers read from the running interpreter."""

from __future__ import annotations

import platform
import sys

from hello_buildinfo.domain.metadata import RuntimeInfo


def get_runtime_info() -> RuntimeInfo:
    """Describe the interpreter and platform of the current process.

    Example:
        >>> info = get_runtime_info()
        >>> info.python_version == platform.python_version()
        True
    """
    return RuntimeInfo(
        python_version=platform.python_version(),
        system=(platform.system() or sys.platform).lower(),
        machine=(platform.machine() or "unknown").lower(),
    )


__all__ = ["get_runtime_info"]
