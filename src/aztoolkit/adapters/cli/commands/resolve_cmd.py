"""``resolve`` command: show the effective parameters without calling Azure."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import lib_log_rich.runtime
import rich_click as click

from aztoolkit.domain.document import ConfigDocument
from aztoolkit.domain.enums import ConfigProfile, OutputFormat
from aztoolkit.domain.parameters import (
    ContextParameters,
    resolve_context_parameters,
    resolve_host_key_parameters,
    resolve_role_lookup_parameters,
)

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ._shared import (
    config_document_options,
    context_options,
    domain_error_handling,
    echo_fields,
    echo_json,
    format_option,
    load_document,
)

logger = logging.getLogger(__name__)

#: Task flags each target accepts, keyed by the click parameter name.
_TASK_FLAGS: dict[ConfigProfile, dict[str, str]] = {
    ConfigProfile.CONNECT: {},
    ConfigProfile.HOST_KEY: {
        "resource_group": "--resource-group",
        "function_app": "--function-app",
        "key_name": "--key-name",
        "key_value": "--key-value",
    },
    ConfigProfile.ROLE_ASSIGNMENTS: {
        "resource_name": "--resource-name",
        "resource_type": "--resource-type",
        "resource_group": "--resource-group",
        "upn": "--upn",
        "object_id": "--object-id",
    },
}


def resolve_parameters(
    profile: ConfigProfile,
    document: ConfigDocument | None,
    context: ContextParameters,
    **task_values: str | None,
) -> dict[str, Any]:
    """Merge the fields ``profile`` reads and return them keyed by dotted name.

    ``task_values`` carries the target command's own flags under their click
    parameter names (``function_app``, ``upn``, ...); they win over the
    document the same way they do on that command. Host key values are masked.

    Raises:
        MissingRequiredFieldError: A field the profile requires is absent.

    Example:
        >>> doc = ConfigDocument({"context": {"defaultSubscriptionId": "s-1"}})
        >>> resolve_parameters(ConfigProfile.CONNECT, doc, resolve_context_parameters(doc))["context.subscriptionId"]
        's-1'
    """
    if profile is ConfigProfile.CONNECT:
        return context.as_dict()
    if profile is ConfigProfile.HOST_KEY:
        return resolve_host_key_parameters(
            document,
            context=context,
            resource_group_name=task_values.get("resource_group"),
            function_app_name=task_values.get("function_app"),
            key_name=task_values.get("key_name"),
            key_value=task_values.get("key_value"),
        ).as_dict()
    return resolve_role_lookup_parameters(
        document,
        context=context,
        resource_name=task_values.get("resource_name"),
        resource_type=task_values.get("resource_type"),
        resource_group=task_values.get("resource_group"),
        principal_upn=task_values.get("upn"),
        principal_object_id=task_values.get("object_id"),
    ).as_dict()


def _reject_foreign_task_flags(profile: ConfigProfile, task_values: dict[str, str | None]) -> None:
    accepted = _TASK_FLAGS[profile]
    foreign = sorted(
        {
            flag
            for flags in _TASK_FLAGS.values()
            for name, flag in flags.items()
            if name not in accepted and task_values.get(name) is not None
        }
    )
    if foreign:
        raise click.UsageError(f"{', '.join(foreign)} does not apply to --for {profile.value}")


@click.command("resolve", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--for",
    "target",
    type=click.Choice([p.value for p in ConfigProfile]),
    required=True,
    help="Command whose parameters to resolve (also selects the default file prefix)",
)
@config_document_options
@context_options
@click.option(
    "--resource-group",
    default=None,
    help="Override functionApp.resourceGroupName (set-host-key) or lookup.resourceGroup (role-assignments)",
)
@click.option("--function-app", default=None, help="set-host-key: override functionApp.name")
@click.option("--key-name", default=None, help="set-host-key: override hostKey.name")
@click.option("--key-value", default=None, help="set-host-key: override hostKey.value")
@click.option("--resource-name", default=None, help="role-assignments: override lookup.resourceName")
@click.option("--resource-type", default=None, help="role-assignments: override lookup.resourceType")
@click.option("--upn", default=None, help="role-assignments: override principal.upn")
@click.option("--object-id", default=None, help="role-assignments: override principal.objectId")
@format_option
@click.pass_context
def cli_resolve(
    ctx: click.Context,
    target: str,
    config_path: Path | None,
    config_name: str | None,
    config_dir: Path | None,
    config_prefix: str | None,
    subscription_id: str | None,
    tenant_id: str | None,
    device_auth: bool | None,
    resource_group: str | None,
    function_app: str | None,
    key_name: str | None,
    key_value: str | None,
    resource_name: str | None,
    resource_type: str | None,
    upn: str | None,
    object_id: str | None,
    output_format: str,
) -> None:
    """Locate, read and merge a config document and print the result.

    Accepts the target command's own flags, so a dry run sees exactly what
    the real run would. Flags of another target are a usage error. Task
    fields are checked as the target command checks them. The subscription
    is shown but not required here. No Azure call is made.
    """
    cli_ctx = get_cli_context(ctx)
    profile = ConfigProfile(target)
    task_values = {
        "resource_group": resource_group,
        "function_app": function_app,
        "key_name": key_name,
        "key_value": key_value,
        "resource_name": resource_name,
        "resource_type": resource_type,
        "upn": upn,
        "object_id": object_id,
    }
    _reject_foreign_task_flags(profile, task_values)
    with (
        lib_log_rich.runtime.bind(job_id="cli-resolve", extra={"command": "resolve", "target": profile.value}),
        domain_error_handling(),
    ):
        document = load_document(
            cli_ctx,
            profile,
            config_path=config_path,
            config_name=config_name,
            config_dir=config_dir,
            config_prefix=config_prefix,
        )
        context = resolve_context_parameters(
            document,
            subscription_id=subscription_id,
            tenant_id=tenant_id,
            use_device_authentication=device_auth,
        )
        parameters = resolve_parameters(profile, document, context, **task_values)

    source = str(document.path) if document is not None and document.path is not None else None
    logger.info("Resolved parameters", extra={"target": profile.value, "config_path": source})
    if OutputFormat(output_format) is OutputFormat.JSON:
        echo_json({"command": profile.value, "configPath": source, "parameters": parameters})
        return

    click.echo(f"Config document: {source or '(none)'}")
    echo_fields(parameters)


__all__ = ["cli_resolve", "resolve_parameters"]
