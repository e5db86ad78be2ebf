"""Adapters layer - infrastructure and framework integrations.

Contents:
    * :mod:`.config` - Layered configuration loading and section parsing
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.runtime` - Interpreter and platform identifiers
    * :mod:`.memory` - In-memory implementations for tests
    * :mod:`.cli` - Click CLI framework integration
"""

from __future__ import annotations

__all__: list[str] = []
