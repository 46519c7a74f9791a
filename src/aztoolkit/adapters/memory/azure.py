"""In-memory Azure adapters for testing.

:class:`AzureSpy` answers every Azure port from seeded records and captures
the calls it receives, so CLI tests run without credentials or network.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any

from azure.core.credentials import AccessToken

from aztoolkit.domain.errors import ResourceLookupError
from aztoolkit.domain.models import (
    AzureContext,
    HostKeyResult,
    PrerequisiteCheck,
    PrincipalRef,
    ResourceRef,
    RoleAssignment,
)
from aztoolkit.domain.parameters import ContextParameters, HostKeyParameters

from ..azure.resources import select_single_resource
from ..config.settings import DEFAULT_GRAPH_ENDPOINT

GENERATED_KEY_VALUE = "generated-key-value"


@dataclass(frozen=True, slots=True)
class FakeCredential:
    """Credential stand-in that remembers the context it was built for."""

    context: ContextParameters

    def get_token(self, *scopes: str, **kwargs: Any) -> AccessToken:
        return AccessToken("fake-token", int(time.time()) + 3600)


def _empty_calls() -> list[tuple[str, dict[str, Any]]]:
    return []


@dataclass
class AzureSpy:
    """Seedable fake for every Azure port.

    Attributes:
        subscriptions: Known subscriptions by id; unknown ids still succeed.
        resources: Candidates for :meth:`find_resource`.
        principals: Users by UPN (case-insensitive) for :meth:`resolve_principal`.
        assignments: Role assignments returned for matching principals.
        prerequisites: Result of :meth:`check_prerequisites`.
        raise_exception: When set, every remote call raises it.
        calls: ``(port_name, kwargs)`` for each call received.

    Example:
        >>> spy = AzureSpy()
        >>> credential = spy.build_credential(ContextParameters())
        >>> spy.apply_context(credential, "sub-1").subscription_id
        'sub-1'
        >>> spy.calls[-1][0]
        'apply_context'
    """

    subscriptions: dict[str, AzureContext] = field(default_factory=dict)
    resources: list[ResourceRef] = field(default_factory=list)
    principals: dict[str, PrincipalRef] = field(default_factory=dict)
    assignments: list[RoleAssignment] = field(default_factory=list)
    prerequisites: list[PrerequisiteCheck] = field(default_factory=list)
    raise_exception: Exception | None = None
    calls: list[tuple[str, dict[str, Any]]] = field(default_factory=_empty_calls)

    def _record(self, port: str, **kwargs: Any) -> None:
        self.calls.append((port, kwargs))
        if self.raise_exception is not None:
            raise self.raise_exception

    def calls_to(self, port: str) -> list[dict[str, Any]]:
        """Return captured kwargs for one port, oldest first."""
        return [kwargs for name, kwargs in self.calls if name == port]

    def build_credential(self, context: ContextParameters) -> FakeCredential:
        self.calls.append(("build_credential", {"context": context}))
        return FakeCredential(context)

    def apply_context(self, credential: Any, subscription_id: str | None) -> AzureContext | None:
        if not subscription_id:
            return None
        self._record("apply_context", subscription_id=subscription_id)
        return self.subscriptions.get(subscription_id) or AzureContext(subscription_id=subscription_id)

    def set_host_key(self, credential: Any, subscription_id: str, parameters: HostKeyParameters) -> HostKeyResult:
        self._record("set_host_key", subscription_id=subscription_id, parameters=parameters)
        return HostKeyResult(name=parameters.key_name, value=parameters.key_value or GENERATED_KEY_VALUE)

    def find_resource(
        self,
        credential: Any,
        subscription_id: str,
        *,
        name: str,
        resource_type: str | None = None,
        resource_group: str | None = None,
    ) -> ResourceRef:
        self._record(
            "find_resource",
            subscription_id=subscription_id,
            name=name,
            resource_type=resource_type,
            resource_group=resource_group,
        )
        return select_single_resource(
            self.resources, name=name, resource_type=resource_type, resource_group=resource_group
        )

    def resolve_principal(
        self,
        credential: Any,
        *,
        upn: str,
        graph_endpoint: str = DEFAULT_GRAPH_ENDPOINT,
        timeout: float = 30.0,
    ) -> PrincipalRef:
        self._record("resolve_principal", upn=upn, graph_endpoint=graph_endpoint, timeout=timeout)
        principal = {k.casefold(): v for k, v in self.principals.items()}.get(upn.casefold())
        if principal is None:
            raise ResourceLookupError(f"No user with UPN {upn!r} found in Microsoft Graph")
        return principal

    def list_role_assignments(
        self,
        credential: Any,
        subscription_id: str,
        *,
        scope: str,
        principal_id: str,
    ) -> list[RoleAssignment]:
        self._record("list_role_assignments", subscription_id=subscription_id, scope=scope, principal_id=principal_id)
        return [a for a in self.assignments if a.principal_id == principal_id]

    def check_prerequisites(self) -> list[PrerequisiteCheck]:
        return list(self.prerequisites)


__all__ = [
    "AzureSpy",
    "FakeCredential",
    "GENERATED_KEY_VALUE",
]
