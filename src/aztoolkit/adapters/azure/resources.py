"""Resource lookup by name through azure-mgmt-resource."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from azure.mgmt.resource import ResourceManagementClient

from aztoolkit.domain.errors import ResourceLookupError
from aztoolkit.domain.models import ResourceRef

if TYPE_CHECKING:
    from azure.core.credentials import TokenCredential

logger = logging.getLogger(__name__)

_RE_RESOURCE_GROUP = re.compile(r"/resourceGroups/([^/]+)", re.IGNORECASE)


def odata_literal(value: str) -> str:
    """Quote ``value`` as an OData string literal.

    Example:
        >>> odata_literal("o'brien")
        "'o''brien'"
    """
    return "'" + value.replace("'", "''") + "'"


def resource_group_of(resource_id: str) -> str | None:
    """Extract the resource group segment from an ARM id.

    Example:
        >>> resource_group_of("/subscriptions/s/resourceGroups/rg-1/providers/Microsoft.Web/sites/app")
        'rg-1'
    """
    match = _RE_RESOURCE_GROUP.search(resource_id)
    return match.group(1) if match else None


def _to_ref(resource: Any) -> ResourceRef:
    return ResourceRef(
        id=resource.id,
        name=resource.name,
        type=resource.type,
        resource_group=resource_group_of(resource.id),
        location=getattr(resource, "location", None),
    )


def select_single_resource(
    candidates: Iterable[ResourceRef],
    *,
    name: str,
    resource_type: str | None = None,
    resource_group: str | None = None,
) -> ResourceRef:
    """Narrow candidates by exact name, type and group; exactly one must remain.

    Comparisons are case-insensitive like ARM itself.

    Raises:
        ResourceLookupError: No candidate, or more than one, matches.
    """
    wanted_type = resource_type.casefold() if resource_type else None
    wanted_group = resource_group.casefold() if resource_group else None
    matches = [
        ref
        for ref in candidates
        if ref.name.casefold() == name.casefold()
        and (wanted_type is None or ref.type.casefold() == wanted_type)
        and (wanted_group is None or (ref.resource_group or "").casefold() == wanted_group)
    ]

    description = f"resource named {name!r}"
    if resource_type:
        description += f" of type {resource_type!r}"
    if resource_group:
        description += f" in resource group {resource_group!r}"

    if not matches:
        raise ResourceLookupError(f"No {description} found")
    if len(matches) > 1:
        ids = ", ".join(sorted(ref.id for ref in matches))
        raise ResourceLookupError(f"More than one {description} found: {ids}")
    return matches[0]


def find_resource(
    credential: TokenCredential,
    subscription_id: str,
    *,
    name: str,
    resource_type: str | None = None,
    resource_group: str | None = None,
) -> ResourceRef:
    """Find exactly one resource in the subscription.

    The server-side filter is on name only; type and group are applied
    locally because ARM does not accept every filter combination.
    """
    client = ResourceManagementClient(credential, subscription_id)
    odata_filter = f"name eq {odata_literal(name)}"
    if resource_group:
        listed = client.resources.list_by_resource_group(resource_group, filter=odata_filter)
    else:
        listed = client.resources.list(filter=odata_filter)

    resource = select_single_resource(
        (_to_ref(item) for item in listed),
        name=name,
        resource_type=resource_type,
        resource_group=resource_group,
    )
    logger.info("Resolved resource", extra={"resource_id": resource.id, "resource_type": resource.type})
    return resource


__all__ = [
    "find_resource",
    "odata_literal",
    "resource_group_of",
    "select_single_resource",
]
