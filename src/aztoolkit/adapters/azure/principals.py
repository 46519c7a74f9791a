"""Entra ID principal lookup through Microsoft Graph."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Final
from urllib.parse import quote

import httpx
import orjson

from aztoolkit.domain.errors import ResourceLookupError
from aztoolkit.domain.models import PrincipalRef

from ..config.settings import DEFAULT_GRAPH_ENDPOINT

if TYPE_CHECKING:
    from azure.core.credentials import TokenCredential

logger = logging.getLogger(__name__)

_HTTP_NOT_FOUND: Final[int] = 404


def graph_scope(graph_endpoint: str) -> str:
    """Return the ``.default`` token scope for the Graph host in ``graph_endpoint``.

    Example:
        >>> graph_scope("https://graph.microsoft.com/v1.0")
        'https://graph.microsoft.com/.default'
    """
    url = httpx.URL(graph_endpoint)
    return f"{url.scheme}://{url.host}/.default"


def resolve_principal(
    credential: TokenCredential,
    *,
    upn: str,
    graph_endpoint: str = DEFAULT_GRAPH_ENDPOINT,
    timeout: float = 30.0,
) -> PrincipalRef:
    """Resolve a user principal name to its object id.

    Raises:
        ResourceLookupError: Graph reports no such user.
        httpx.HTTPStatusError: Any other non-success response.
    """
    token = credential.get_token(graph_scope(graph_endpoint)).token
    url = f"{graph_endpoint.rstrip('/')}/users/{quote(upn, safe='@')}"

    response = httpx.get(
        url,
        params={"$select": "id,displayName,userPrincipalName"},
        headers={"Authorization": f"Bearer {token}"},
        timeout=timeout,
    )
    if response.status_code == _HTTP_NOT_FOUND:
        raise ResourceLookupError(f"No user with UPN {upn!r} found in Microsoft Graph")
    response.raise_for_status()

    payload: dict[str, Any] = orjson.loads(response.content)
    principal = PrincipalRef(
        object_id=payload["id"],
        display_name=payload.get("displayName"),
        user_principal_name=payload.get("userPrincipalName", upn),
    )
    logger.info("Resolved principal", extra={"upn": upn, "object_id": principal.object_id})
    return principal


__all__ = ["graph_scope", "resolve_principal"]
