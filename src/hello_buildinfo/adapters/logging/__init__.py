"""Logging adapter - lib_log_rich setup.

Contents:
    * :func:`.setup.init_logging` - Idempotent logging initialization
    * :func:`.setup.log_scope` - Context binding for command execution
"""

from __future__ import annotations

from .setup import init_logging, log_scope

__all__ = ["init_logging", "log_scope"]
