"""Application ports - callable Protocol definitions for adapter functions.

Each Protocol class defines a ``__call__`` method whose signature exactly
matches the corresponding adapter function. Module-level adapter functions
satisfy these protocols through structural subtyping (PEP 544).

System Role:
    Sits between domain and adapters. Infrastructure types (``Config``,
    ``TokenCredential``) are imported under ``TYPE_CHECKING`` only so the
    layer stays free of runtime imports from adapters and SDKs.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from ..domain.document import ConfigDocument
from ..domain.models import (
    AzureContext,
    HostKeyResult,
    PrerequisiteCheck,
    PrincipalRef,
    ResourceRef,
    RoleAssignment,
)
from ..domain.parameters import ContextParameters, HostKeyParameters

if TYPE_CHECKING:
    from azure.core.credentials import TokenCredential
    from lib_layered_config import Config


class GetConfig(Protocol):
    """Load layered application settings with bundled defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided settings."""

    def __call__(self, config: Config) -> None: ...


class LocateConfig(Protocol):
    """Resolve the config document path from an explicit path or naming convention."""

    def __call__(
        self,
        *,
        explicit_path: str | Path | None = ...,
        name: str | None = ...,
        directory: str | Path | None = ...,
        prefix: str,
    ) -> Path | None: ...


class ReadConfig(Protocol):
    """Parse a config document, passing ``None`` through."""

    def __call__(self, path: Path | None) -> ConfigDocument | None: ...


class BuildCredential(Protocol):
    """Create the credential every remote call receives."""

    def __call__(self, context: ContextParameters) -> TokenCredential: ...


class ApplyContext(Protocol):
    """Select a subscription and return the resulting context, or None to skip."""

    def __call__(self, credential: TokenCredential, subscription_id: str | None) -> AzureContext | None: ...


class SetHostKey(Protocol):
    """Create or update a function-app host key."""

    def __call__(
        self, credential: TokenCredential, subscription_id: str, parameters: HostKeyParameters
    ) -> HostKeyResult: ...


class FindResource(Protocol):
    """Find exactly one resource by name, optionally narrowed by type and group."""

    def __call__(
        self,
        credential: TokenCredential,
        subscription_id: str,
        *,
        name: str,
        resource_type: str | None = ...,
        resource_group: str | None = ...,
    ) -> ResourceRef: ...


class ResolvePrincipal(Protocol):
    """Look up a user principal's object id by UPN."""

    def __call__(
        self,
        credential: TokenCredential,
        *,
        upn: str,
        graph_endpoint: str = ...,
        timeout: float = ...,
    ) -> PrincipalRef: ...


class ListRoleAssignments(Protocol):
    """List role assignments of one principal that apply to a scope."""

    def __call__(
        self,
        credential: TokenCredential,
        subscription_id: str,
        *,
        scope: str,
        principal_id: str,
    ) -> list[RoleAssignment]: ...


class CheckPrerequisites(Protocol):
    """Report which required distributions are installed."""

    def __call__(self) -> list[PrerequisiteCheck]: ...


__all__ = [
    "ApplyContext",
    "BuildCredential",
    "CheckPrerequisites",
    "FindResource",
    "GetConfig",
    "InitLogging",
    "ListRoleAssignments",
    "LocateConfig",
    "ReadConfig",
    "ResolvePrincipal",
    "SetHostKey",
]
