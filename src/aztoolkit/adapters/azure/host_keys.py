"""Function-app host key management through azure-mgmt-web."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Final

from azure.mgmt.web import WebSiteManagementClient
from azure.mgmt.web.models import KeyInfo

from aztoolkit.domain.models import HostKeyResult
from aztoolkit.domain.parameters import HostKeyParameters

if TYPE_CHECKING:
    from azure.core.credentials import TokenCredential

logger = logging.getLogger(__name__)

#: Host-level function keys; ``systemKeys`` belong to extensions and are not managed here.
HOST_KEY_TYPE: Final[str] = "functionKeys"


def set_host_key(
    credential: TokenCredential,
    subscription_id: str,
    parameters: HostKeyParameters,
) -> HostKeyResult:
    """Create or update a host key on a function app.

    When ``parameters.key_value`` is None the platform generates the value.

    Returns:
        The stored key name and the value the platform reports.
    """
    client = WebSiteManagementClient(credential, subscription_id)
    logger.info(
        "Setting function host key",
        extra={
            "resource_group": parameters.resource_group_name,
            "function_app": parameters.function_app_name,
            "key_name": parameters.key_name,
            "generated": parameters.key_value is None,
        },
    )
    stored = client.web_apps.create_or_update_host_secret(
        resource_group_name=parameters.resource_group_name,
        name=parameters.function_app_name,
        key_type=HOST_KEY_TYPE,
        key_name=parameters.key_name,
        key=KeyInfo(name=parameters.key_name, value=parameters.key_value),
    )
    return HostKeyResult(name=stored.name or parameters.key_name, value=stored.value)


__all__ = ["HOST_KEY_TYPE", "set_host_key"]
