"""Runtime adapter - interpreter and platform identifiers."""

from __future__ import annotations

from .host import get_runtime_info

__all__ = ["get_runtime_info"]
