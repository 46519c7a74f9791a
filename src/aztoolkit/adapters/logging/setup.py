"""Logging initialization shared by every entry point.

Maps the ``[lib_log_rich]`` settings section onto a lib_log_rich
``RuntimeConfig`` and bridges stdlib ``logging`` into it, so module loggers
in the config and Azure adapters end up in the same sinks.

Contents:
    * :class:`LoggingConfigModel` - Boundary model for the settings section.
    * :func:`init_logging` - Idempotent runtime initialization.
"""

from __future__ import annotations

from typing import cast

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, field_validator

from aztoolkit import __init__conf__


class LoggingConfigModel(BaseModel):
    """Pydantic model for the ``[lib_log_rich]`` section.

    Unknown keys pass through to ``RuntimeConfig`` untouched.

    Example:
        >>> LoggingConfigModel(service="", environment="dev").service is None
        True
        >>> LoggingConfigModel().environment
        'prod'
    """

    service: str | None = None
    environment: str = "prod"

    model_config = ConfigDict(extra="allow")

    @field_validator("service", mode="before")
    @classmethod
    def _blank_service_to_none(cls, v: object) -> object:
        if isinstance(v, str) and not v.strip():
            return None
        return v


def _build_runtime_config(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    """Build a ``RuntimeConfig``; the service name falls back to the package name."""
    log_raw: object = config.get("lib_log_rich", default={})
    parsed = LoggingConfigModel.model_validate(cast("dict[str, object]", log_raw) if log_raw else {})
    extra_config = parsed.model_dump(exclude={"service", "environment"}, exclude_none=True)

    return lib_log_rich.runtime.RuntimeConfig(
        service=parsed.service or __init__conf__.name,
        environment=parsed.environment,
        **extra_config,
    )


def init_logging(config: Config) -> None:
    """Initialize lib_log_rich once per process.

    Loads ``.env`` files first so ``LOG_*`` variables apply, then starts the
    runtime and attaches stdlib logging. Later calls return immediately.

    Args:
        config: Loaded application settings holding the ``[lib_log_rich]`` section.
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(_build_runtime_config(config))
    lib_log_rich.runtime.attach_std_logging()


__all__ = [
    "LoggingConfigModel",
    "init_logging",
]
