"""Resolved parameter sets built from explicit values and a config document.

Each command reads a fixed set of document fields. The fields are declared
once as :class:`FieldSpec` constants so the merge, the missing-value error
and the ``resolve`` display all agree on key names and CLI flags.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Final

from .document import ConfigDocument, is_present, merge_value
from .errors import MissingRequiredFieldError


@dataclass(frozen=True, slots=True)
class FieldSpec:
    """Location of one logical field in the config document.

    Example:
        >>> SUBSCRIPTION_ID.dotted
        'context.subscriptionId'
    """

    section: str
    key: str
    option: str | None = None
    alias: str | None = None

    @property
    def dotted(self) -> str:
        return f"{self.section}.{self.key}"

    def resolve(self, explicit: Any, document: ConfigDocument | None) -> Any | None:
        return merge_value(explicit, document, self.section, self.key, self.alias)

    def require(self, explicit: Any, document: ConfigDocument | None) -> Any:
        value = self.resolve(explicit, document)
        if not is_present(value):
            raise MissingRequiredFieldError(self.dotted, self.option)
        return value


SUBSCRIPTION_ID: Final = FieldSpec("context", "subscriptionId", "--subscription-id", alias="defaultSubscriptionId")
TENANT_ID: Final = FieldSpec("context", "tenantId", "--tenant-id")
USE_DEVICE_AUTHENTICATION: Final = FieldSpec("auth", "useDeviceAuthentication", "--device-auth")
FUNCTION_APP_RESOURCE_GROUP: Final = FieldSpec("functionApp", "resourceGroupName", "--resource-group")
FUNCTION_APP_NAME: Final = FieldSpec("functionApp", "name", "--function-app")
HOST_KEY_NAME: Final = FieldSpec("hostKey", "name", "--key-name")
HOST_KEY_VALUE: Final = FieldSpec("hostKey", "value", "--key-value")
LOOKUP_RESOURCE_NAME: Final = FieldSpec("lookup", "resourceName", "--resource-name")
LOOKUP_RESOURCE_TYPE: Final = FieldSpec("lookup", "resourceType", "--resource-type")
LOOKUP_RESOURCE_GROUP: Final = FieldSpec("lookup", "resourceGroup", "--resource-group")
PRINCIPAL_UPN: Final = FieldSpec("principal", "upn", "--upn")
PRINCIPAL_OBJECT_ID: Final = FieldSpec("principal", "objectId", "--object-id")

_TRUE_STRINGS: Final = frozenset({"1", "true", "yes", "on"})


def _as_bool(value: Any) -> bool:
    """Interpret a flag that may arrive as JSON bool, number or string.

    Example:
        >>> [_as_bool(v) for v in (None, True, "True", "no", 1)]
        [False, True, True, False, True]
    """
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_STRINGS
    return bool(value)


def _as_text(value: Any) -> str | None:
    return None if value is None else str(value).strip()


@dataclass(frozen=True, slots=True)
class ContextParameters:
    """Effective subscription, tenant and authentication choice."""

    subscription_id: str | None = None
    tenant_id: str | None = None
    use_device_authentication: bool = False

    def as_dict(self) -> dict[str, Any]:
        return {
            SUBSCRIPTION_ID.dotted: self.subscription_id,
            TENANT_ID.dotted: self.tenant_id,
            USE_DEVICE_AUTHENTICATION.dotted: self.use_device_authentication,
        }


@dataclass(frozen=True, slots=True)
class HostKeyParameters:
    """Effective values for creating or updating a function host key."""

    context: ContextParameters
    resource_group_name: str
    function_app_name: str
    key_name: str
    key_value: str | None = None

    def as_dict(self, *, reveal_secrets: bool = False) -> dict[str, Any]:
        value = self.key_value
        if value is not None and not reveal_secrets:
            value = "***"
        return {
            **self.context.as_dict(),
            FUNCTION_APP_RESOURCE_GROUP.dotted: self.resource_group_name,
            FUNCTION_APP_NAME.dotted: self.function_app_name,
            HOST_KEY_NAME.dotted: self.key_name,
            HOST_KEY_VALUE.dotted: value,
        }


@dataclass(frozen=True, slots=True)
class RoleLookupParameters:
    """Effective values for listing a principal's role assignments on a resource."""

    context: ContextParameters
    resource_name: str
    resource_type: str | None = None
    resource_group: str | None = None
    principal_upn: str | None = None
    principal_object_id: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {
            **self.context.as_dict(),
            LOOKUP_RESOURCE_NAME.dotted: self.resource_name,
            LOOKUP_RESOURCE_TYPE.dotted: self.resource_type,
            LOOKUP_RESOURCE_GROUP.dotted: self.resource_group,
            PRINCIPAL_UPN.dotted: self.principal_upn,
            PRINCIPAL_OBJECT_ID.dotted: self.principal_object_id,
        }


def resolve_context_parameters(
    document: ConfigDocument | None,
    *,
    subscription_id: str | None = None,
    tenant_id: str | None = None,
    use_device_authentication: bool | None = None,
) -> ContextParameters:
    """Merge the ``context`` and ``auth`` sections; nothing here is required.

    Example:
        >>> doc = ConfigDocument({"context": {"subscriptionId": "A", "defaultSubscriptionId": "B"}})
        >>> resolve_context_parameters(doc).subscription_id
        'A'
    """
    return ContextParameters(
        subscription_id=_as_text(SUBSCRIPTION_ID.resolve(subscription_id, document)),
        tenant_id=_as_text(TENANT_ID.resolve(tenant_id, document)),
        use_device_authentication=_as_bool(USE_DEVICE_AUTHENTICATION.resolve(use_device_authentication, document)),
    )


def resolve_host_key_parameters(
    document: ConfigDocument | None,
    *,
    context: ContextParameters,
    resource_group_name: str | None = None,
    function_app_name: str | None = None,
    key_name: str | None = None,
    key_value: str | None = None,
) -> HostKeyParameters:
    """Merge the ``functionApp`` and ``hostKey`` sections.

    Raises:
        MissingRequiredFieldError: Resource group, app name or key name is absent.
    """
    value = HOST_KEY_VALUE.resolve(key_value, document)
    return HostKeyParameters(
        context=context,
        resource_group_name=str(FUNCTION_APP_RESOURCE_GROUP.require(resource_group_name, document)).strip(),
        function_app_name=str(FUNCTION_APP_NAME.require(function_app_name, document)).strip(),
        key_name=str(HOST_KEY_NAME.require(key_name, document)).strip(),
        key_value=None if value is None else str(value),
    )


def resolve_role_lookup_parameters(
    document: ConfigDocument | None,
    *,
    context: ContextParameters,
    resource_name: str | None = None,
    resource_type: str | None = None,
    resource_group: str | None = None,
    principal_upn: str | None = None,
    principal_object_id: str | None = None,
) -> RoleLookupParameters:
    """Merge the ``lookup`` and ``principal`` sections.

    The resource name is required, and so is at least one principal
    identifier. When both identifiers are present the object id wins at
    lookup time.

    Raises:
        MissingRequiredFieldError: Resource name or every principal identifier is absent.
    """
    name = str(LOOKUP_RESOURCE_NAME.require(resource_name, document)).strip()
    upn = _as_text(PRINCIPAL_UPN.resolve(principal_upn, document))
    object_id = _as_text(PRINCIPAL_OBJECT_ID.resolve(principal_object_id, document))
    if not upn and not object_id:
        raise MissingRequiredFieldError(
            f"{PRINCIPAL_OBJECT_ID.dotted} or {PRINCIPAL_UPN.dotted}",
            f"{PRINCIPAL_OBJECT_ID.option} or {PRINCIPAL_UPN.option}",
        )
    return RoleLookupParameters(
        context=context,
        resource_name=name,
        resource_type=_as_text(LOOKUP_RESOURCE_TYPE.resolve(resource_type, document)),
        resource_group=_as_text(LOOKUP_RESOURCE_GROUP.resolve(resource_group, document)),
        principal_upn=upn,
        principal_object_id=object_id,
    )


__all__ = [
    "ContextParameters",
    "FUNCTION_APP_NAME",
    "FUNCTION_APP_RESOURCE_GROUP",
    "FieldSpec",
    "HOST_KEY_NAME",
    "HOST_KEY_VALUE",
    "HostKeyParameters",
    "LOOKUP_RESOURCE_GROUP",
    "LOOKUP_RESOURCE_NAME",
    "LOOKUP_RESOURCE_TYPE",
    "PRINCIPAL_OBJECT_ID",
    "PRINCIPAL_UPN",
    "RoleLookupParameters",
    "SUBSCRIPTION_ID",
    "TENANT_ID",
    "USE_DEVICE_AUTHENTICATION",
    "resolve_context_parameters",
    "resolve_host_key_parameters",
    "resolve_role_lookup_parameters",
]
