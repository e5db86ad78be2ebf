"""Typed views over the ``[build]`` and ``[cli]`` configuration sections.

Configuration arrives as loosely typed dictionaries from lib_layered_config
(TOML files, ``.env`` files, environment variables). Each section is parsed
once at the boundary with a Pydantic model; validation failures surface as
:class:`~hello_buildinfo.domain.errors.ConfigurationError`.

Contents:
    * :class:`BuildSectionModel` - ``[build]`` overrides for stamped metadata.
    * :class:`CliSettings` - ``[cli]`` presentation and error-reporting flags.
    * :func:`stamped_build_metadata` - Metadata stamped into ``__init__conf__``.
    * :func:`load_build_metadata` - Resolve BuildMetadata from config and stamps.
    * :func:`load_cli_settings` - Resolve CliSettings from config.
"""

from __future__ import annotations

import datetime as dt
from typing import Any

from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from hello_buildinfo import __init__conf__
from hello_buildinfo.domain.errors import ConfigurationError
from hello_buildinfo.domain.metadata import BuildMetadata


class BuildSectionModel(BaseModel):
    """Pydantic model for the [build] config section.

    TOML allows unquoted timestamps and numbers, so dates, datetimes and
    numbers are converted to their string form before validation.

    Example:
        >>> BuildSectionModel.model_validate({"git_commit": "9f1c2ab"}).git_commit
        '9f1c2ab'
        >>> BuildSectionModel.model_validate({"version": 2}).version
        '2'
        >>> BuildSectionModel().build_time is None
        True
    """

    version: str | None = None
    build_time: str | None = None
    git_commit: str | None = None

    model_config = ConfigDict(extra="ignore", frozen=True)

    @field_validator("version", "build_time", "git_commit", mode="before")
    @classmethod
    def _stringify_scalars(cls, value: Any) -> Any:
        if isinstance(value, (dt.datetime, dt.date, dt.time)):
            return value.isoformat()
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value


class CliSettings(BaseModel):
    """Pydantic model for the [cli] config section.

    Attributes:
        show_runtime: Print Python version and platform in the version block.
        traceback: Print full tracebacks for unexpected errors.

    Example:
        >>> CliSettings().show_runtime
        True
        >>> CliSettings.model_validate({"traceback": "true"}).traceback
        True
    """

    show_runtime: bool = True
    traceback: bool = False

    model_config = ConfigDict(extra="ignore", frozen=True)


def _describe_validation_error(section: str, exc: ValidationError) -> str:
    """Flatten a ValidationError into a single readable line."""
    details = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"])
        prefix = f"{section}.{location}" if location else section
        details.append(f"{prefix}: {error['msg']}")
    return f"Invalid [{section}] configuration: " + "; ".join(details)


def _section(config: Config, name: str) -> object:
    raw: object = config.get(name, default={})
    return raw if raw else {}


def stamped_build_metadata() -> BuildMetadata:
    """Return the metadata stamped into ``__init__conf__`` at build time.

    Example:
        >>> isinstance(stamped_build_metadata(), BuildMetadata)
        True
    """
    return BuildMetadata(
        version=__init__conf__.build_version,
        build_time=__init__conf__.build_time,
        git_commit=__init__conf__.git_commit,
    )


def load_build_metadata(config: Config, *, stamped: BuildMetadata | None = None) -> BuildMetadata:
    """Resolve build metadata from configuration and stamped constants.

    Non-empty values from the ``[build]`` section take precedence over the
    stamped constants; everything else keeps its stamped (or sentinel) value.

    Args:
        config: Already-loaded layered configuration.
        stamped: Baseline metadata. Defaults to :func:`stamped_build_metadata`.

    Returns:
        Immutable BuildMetadata for the process lifetime.

    Raises:
        ConfigurationError: If the ``[build]`` section holds invalid values.

    Example:
        >>> cfg = Config({"build": {"git_commit": "9f1c2ab"}}, {})
        >>> load_build_metadata(cfg, stamped=BuildMetadata()).git_commit
        '9f1c2ab'
    """
    baseline = stamped if stamped is not None else stamped_build_metadata()
    try:
        parsed = BuildSectionModel.model_validate(_section(config, "build"))
    except ValidationError as exc:
        raise ConfigurationError(_describe_validation_error("build", exc)) from exc

    return BuildMetadata(
        version=parsed.version or baseline.version,
        build_time=parsed.build_time or baseline.build_time,
        git_commit=parsed.git_commit or baseline.git_commit,
    )


def load_cli_settings(config: Config) -> CliSettings:
    """Resolve CLI settings from the ``[cli]`` section.

    Raises:
        ConfigurationError: If the ``[cli]`` section holds invalid values.

    Example:
        >>> load_cli_settings(Config({}, {})).traceback
        False
    """
    try:
        return CliSettings.model_validate(_section(config, "cli"))
    except ValidationError as exc:
        raise ConfigurationError(_describe_validation_error("cli", exc)) from exc


__all__ = [
    "BuildSectionModel",
    "CliSettings",
    "load_build_metadata",
    "load_cli_settings",
    "stamped_build_metadata",
]
