"""Logging initialization shared by every entry point.

Contents:
    * :class:`LoggingConfigModel` - validated view over ``[lib_log_rich]``.
    * :func:`init_logging` - idempotent lib_log_rich runtime initialization.
    * :func:`log_scope` - bind command context when the runtime is active.
"""

from __future__ import annotations

import contextlib
from collections.abc import Iterator
from typing import Any

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from hello_buildinfo import __init__conf__


class LoggingConfigModel(BaseModel):
    """Pydantic model for the [lib_log_rich] config section.

    Extra fields pass through unchanged to ``lib_log_rich.runtime.RuntimeConfig``.

    Example:
        >>> LoggingConfigModel(console_level="DEBUG").model_dump(exclude={"service", "environment"})
        {'console_level': 'DEBUG'}
        >>> LoggingConfigModel().environment
        'prod'
    """

    service: str | None = None
    environment: str = "prod"

    model_config = ConfigDict(extra="allow")


def _build_runtime_config(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    """Map the ``[lib_log_rich]`` section onto a RuntimeConfig.

    The service name falls back to the distribution name.
    """
    log_raw: object = config.get("lib_log_rich", default={})
    parsed = LoggingConfigModel.model_validate(log_raw if log_raw else {})
    extra_config = parsed.model_dump(exclude={"service", "environment"}, exclude_none=True)

    return lib_log_rich.runtime.RuntimeConfig(
        service=parsed.service or __init__conf__.name,
        environment=parsed.environment,
        **extra_config,
    )


def init_logging(config: Config) -> None:
    """Initialize the lib_log_rich runtime once per process.

    Loads ``.env`` files so ``LOG_*`` variables take effect, initializes the
    runtime from the ``[lib_log_rich]`` section and bridges the standard
    ``logging`` module. Later calls return immediately.

    Args:
        config: Already-loaded layered configuration.

    Example:
        >>> init_logging(Config({"lib_log_rich": {"environment": "test"}}, {}))  # doctest: +SKIP
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(_build_runtime_config(config))
    lib_log_rich.runtime.attach_std_logging()


@contextlib.contextmanager
def log_scope(job_id: str, **extra: Any) -> Iterator[None]:
    """Bind ``job_id`` and ``extra`` to log records inside the block.

    Falls back to a plain block when the runtime was never initialized, as
    happens with the in-memory logging adapter.
    """
    if not lib_log_rich.runtime.is_initialised():
        yield
        return
    with lib_log_rich.runtime.bind(job_id=job_id, extra=extra):
        yield


__all__ = [
    "LoggingConfigModel",
    "init_logging",
    "log_scope",
]
