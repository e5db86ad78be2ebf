"""CLI output handlers.

Contents:
    * Reporter handlers from :mod:`.reporters`
"""

from __future__ import annotations

from .reporters import HANDLERS, show_greeting, show_help, show_version

__all__ = [
    "HANDLERS",
    "show_greeting",
    "show_help",
    "show_version",
]
