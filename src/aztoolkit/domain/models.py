"""Plain records exchanged between commands and the Azure adapters.

Adapters translate SDK model objects into these records so command code and
tests never touch SDK types. Scope classification for role assignments also
lives here because it is pure string comparison.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from .enums import AssignmentKind


@dataclass(frozen=True, slots=True)
class AzureContext:
    """Subscription the toolkit is operating against."""

    subscription_id: str
    display_name: str | None = None
    tenant_id: str | None = None
    state: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {
            "subscriptionId": self.subscription_id,
            "displayName": self.display_name,
            "tenantId": self.tenant_id,
            "state": self.state,
        }


@dataclass(frozen=True, slots=True)
class ResourceRef:
    """A single ARM resource found by name lookup."""

    id: str
    name: str
    type: str
    resource_group: str | None = None
    location: str | None = None


@dataclass(frozen=True, slots=True)
class PrincipalRef:
    """An Entra ID principal identified by object id."""

    object_id: str
    display_name: str | None = None
    user_principal_name: str | None = None


@dataclass(frozen=True, slots=True)
class HostKeyResult:
    """Outcome of creating or updating a function host key."""

    name: str
    value: str | None = None


@dataclass(frozen=True, slots=True)
class PrerequisiteCheck:
    """Result of checking whether one required distribution is installed."""

    name: str
    found: bool
    version: str | None = None
    install_hint: str = ""


@dataclass(frozen=True, slots=True)
class RoleAssignment:
    """Role assignment as returned by the authorization API, role name resolved."""

    id: str
    scope: str
    role_definition_id: str
    role_name: str | None = None
    principal_id: str | None = None
    principal_type: str | None = None


@dataclass(frozen=True, slots=True)
class ClassifiedAssignment:
    """Role assignment tagged as direct or inherited relative to one resource."""

    assignment: RoleAssignment
    kind: AssignmentKind

    def as_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "roleName": self.assignment.role_name,
            "roleDefinitionId": self.assignment.role_definition_id,
            "scope": self.assignment.scope,
            "principalId": self.assignment.principal_id,
            "principalType": self.assignment.principal_type,
            "id": self.assignment.id,
        }


def normalize_scope(scope: str) -> str:
    """Return a comparable form of an ARM scope.

    Resource ids are case-insensitive and sometimes carry a trailing slash.

    Example:
        >>> normalize_scope("/Subscriptions/ABC/")
        '/subscriptions/abc'
    """
    return scope.strip().rstrip("/").casefold()


def classify_scope(assignment_scope: str, resource_scope: str) -> AssignmentKind:
    """Classify an assignment scope against the resource it was listed for.

    Example:
        >>> classify_scope("/subscriptions/s1", "/subscriptions/s1/resourceGroups/rg/providers/x/y/z")
        <AssignmentKind.INHERITED: 'inherited'>
    """
    if normalize_scope(assignment_scope) == normalize_scope(resource_scope):
        return AssignmentKind.DIRECT
    return AssignmentKind.INHERITED


def classify_assignments(assignments: Iterable[RoleAssignment], resource_scope: str) -> list[ClassifiedAssignment]:
    """Classify and order assignments: direct first, then by scope and role name."""
    classified = [ClassifiedAssignment(a, classify_scope(a.scope, resource_scope)) for a in assignments]
    return sorted(
        classified,
        key=lambda c: (
            c.kind is not AssignmentKind.DIRECT,
            normalize_scope(c.assignment.scope),
            (c.assignment.role_name or "").casefold(),
        ),
    )


__all__ = [
    "AzureContext",
    "ClassifiedAssignment",
    "HostKeyResult",
    "PrerequisiteCheck",
    "PrincipalRef",
    "ResourceRef",
    "RoleAssignment",
    "classify_assignments",
    "classify_scope",
    "normalize_scope",
]
