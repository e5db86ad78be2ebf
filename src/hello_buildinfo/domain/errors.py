"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class ConfigurationError(Exception):
    """Invalid or malformed configuration.

    Raised when a configuration section holds values of the wrong type.
    Caught at the CLI boundary and reported with a configuration exit code.

    Example:
        >>> from hello_buildinfo.domain.errors import ConfigurationError
        >>> err = ConfigurationError("[cli] show_runtime must be a boolean")
        >>> str(err)
        '[cli] show_runtime must be a boolean'
    """


__all__ = ["ConfigurationError"]
