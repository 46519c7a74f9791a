"""Toolkit settings model for the ``[aztoolkit]`` section.

Validated once at the boundary so commands read typed attributes instead of
probing the layered configuration.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, cast

from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, Field, field_validator

from aztoolkit.domain.enums import ConfigProfile

DEFAULT_GRAPH_ENDPOINT = "https://graph.microsoft.com/v1.0"


class ToolkitSettings(BaseModel):
    """Validated, immutable ``[aztoolkit]`` settings.

    Example:
        >>> settings = ToolkitSettings()
        >>> settings.prefix_for(ConfigProfile.CONNECT)
        'Connect-AzToolkit'
        >>> settings.config_directory is None
        True
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    config_directory: Path | None = None
    connect_prefix: str = "Connect-AzToolkit"
    host_key_prefix: str = "Set-FunctionHostKey"
    role_assignments_prefix: str = "Get-RoleAssignments"
    graph_endpoint: str = DEFAULT_GRAPH_ENDPOINT
    http_timeout: float = Field(default=30.0, gt=0)

    @field_validator("config_directory", mode="before")
    @classmethod
    def _coerce_blank_directory(cls, v: Any) -> Any:
        """Treat an empty setting as "use the current directory".

        Examples:
            >>> ToolkitSettings._coerce_blank_directory("  ") is None
            True
            >>> ToolkitSettings._coerce_blank_directory("/srv")
            '/srv'
        """
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("graph_endpoint", mode="after")
    @classmethod
    def _strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    def prefix_for(self, profile: ConfigProfile) -> str:
        """Return the default file prefix of the command behind ``profile``."""
        if profile is ConfigProfile.CONNECT:
            return self.connect_prefix
        if profile is ConfigProfile.HOST_KEY:
            return self.host_key_prefix
        return self.role_assignments_prefix


def load_toolkit_settings(config: Config) -> ToolkitSettings:
    """Extract and validate the ``[aztoolkit]`` section.

    Raises:
        pydantic.ValidationError: When a setting has an invalid value.

    Example:
        >>> from lib_layered_config import Config
        >>> load_toolkit_settings(Config({"aztoolkit": {"http_timeout": 5}}, {})).http_timeout
        5.0
    """
    raw: object = config.get("aztoolkit", default={})
    return ToolkitSettings.model_validate(cast("dict[str, object]", raw) if raw else {})


__all__ = [
    "DEFAULT_GRAPH_ENDPOINT",
    "ToolkitSettings",
    "load_toolkit_settings",
]
