"""Role assignment listing through azure-mgmt-authorization."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from azure.mgmt.authorization import AuthorizationManagementClient

from aztoolkit.domain.models import RoleAssignment

from ._sdk import enum_text
from .resources import odata_literal

if TYPE_CHECKING:
    from azure.core.credentials import TokenCredential

logger = logging.getLogger(__name__)


def list_role_assignments(
    credential: TokenCredential,
    subscription_id: str,
    *,
    scope: str,
    principal_id: str,
) -> list[RoleAssignment]:
    """List assignments held by ``principal_id`` that apply at ``scope``.

    The API returns assignments at the scope, above it and below it. Role
    names are resolved once per role definition.
    """
    client = AuthorizationManagementClient(credential, subscription_id)
    listed = client.role_assignments.list_for_scope(scope, filter=f"principalId eq {odata_literal(principal_id)}")

    role_names: dict[str, str | None] = {}
    assignments: list[RoleAssignment] = []
    for item in listed:
        definition_id = item.role_definition_id
        if definition_id not in role_names:
            role_names[definition_id] = client.role_definitions.get_by_id(definition_id).role_name
        assignments.append(
            RoleAssignment(
                id=item.id,
                scope=item.scope,
                role_definition_id=definition_id,
                role_name=role_names[definition_id],
                principal_id=item.principal_id,
                principal_type=enum_text(item.principal_type),
            )
        )

    logger.info(
        "Listed role assignments",
        extra={"scope": scope, "principal_id": principal_id, "count": len(assignments)},
    )
    return assignments


__all__ = ["list_role_assignments"]
