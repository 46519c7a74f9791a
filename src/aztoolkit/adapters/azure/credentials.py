"""Credential construction for Azure and Microsoft Graph calls.

The credential is built once per command and passed to every remote call,
so nothing depends on ambient login state that tests cannot see.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from azure.identity import (
    AzureCliCredential,
    ChainedTokenCredential,
    DefaultAzureCredential,
    DeviceCodeCredential,
    EnvironmentCredential,
)

from aztoolkit.domain.parameters import ContextParameters

if TYPE_CHECKING:
    from azure.core.credentials import TokenCredential

logger = logging.getLogger(__name__)


def build_credential(context: ContextParameters) -> TokenCredential:
    """Create the credential matching the resolved authentication choice.

    * ``auth.useDeviceAuthentication`` → device code flow, in the configured
      tenant when one is set.
    * A tenant without device auth → environment service principal, then the
      Azure CLI session for that tenant.
    * Neither → ``DefaultAzureCredential``.

    Args:
        context: Resolved subscription, tenant and authentication choice.

    Returns:
        A token credential accepted by every Azure SDK client.
    """
    tenant_id = context.tenant_id
    if context.use_device_authentication:
        logger.info("Using device code authentication", extra={"tenant_id": tenant_id})
        return DeviceCodeCredential(tenant_id=tenant_id) if tenant_id else DeviceCodeCredential()
    if tenant_id:
        logger.info("Using environment or Azure CLI credential", extra={"tenant_id": tenant_id})
        return ChainedTokenCredential(EnvironmentCredential(), AzureCliCredential(tenant_id=tenant_id))
    logger.info("Using default Azure credential chain")
    return DefaultAzureCredential()


__all__ = ["build_credential"]
