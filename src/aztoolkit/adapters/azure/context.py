"""Subscription context selection."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from azure.mgmt.resource import SubscriptionClient

from aztoolkit.domain.models import AzureContext

from ._sdk import enum_text

if TYPE_CHECKING:
    from azure.core.credentials import TokenCredential

logger = logging.getLogger(__name__)


def apply_context(credential: TokenCredential, subscription_id: str | None) -> AzureContext | None:
    """Select ``subscription_id`` as the working context.

    Without a subscription id this is a no-op that returns None. Otherwise
    the subscription is fetched with ``credential``, which proves access and
    yields its display name and tenant. SDK errors propagate unchanged.

    Args:
        credential: Credential used for the lookup.
        subscription_id: Resolved subscription id, or None.

    Returns:
        The selected context, or None when nothing was selected.
    """
    if not subscription_id:
        logger.info("No subscription id provided; skipping context selection")
        return None

    client = SubscriptionClient(credential)
    subscription = client.subscriptions.get(subscription_id)
    context = AzureContext(
        subscription_id=subscription.subscription_id or subscription_id,
        display_name=subscription.display_name,
        tenant_id=getattr(subscription, "tenant_id", None),
        state=enum_text(subscription.state),
    )
    logger.info("Subscription context set", extra=context.as_dict())
    return context


__all__ = ["apply_context"]
