"""``role-assignments`` command: list a principal's roles on one resource."""

from __future__ import annotations

import logging
from pathlib import Path

import lib_log_rich.runtime
import rich_click as click

from aztoolkit.domain.enums import ConfigProfile, OutputFormat
from aztoolkit.domain.models import ClassifiedAssignment, classify_assignments
from aztoolkit.domain.parameters import resolve_context_parameters, resolve_role_lookup_parameters

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ._shared import (
    config_document_options,
    context_options,
    domain_error_handling,
    echo_json,
    format_option,
    load_document,
    require_subscription,
)

logger = logging.getLogger(__name__)


def _render_human(resource_id: str, principal: str, classified: list[ClassifiedAssignment]) -> None:
    click.echo(f"Role assignments for {principal} on {resource_id}:")
    if not classified:
        click.echo("  (none)")
        return
    width = max(len(item.assignment.role_name or item.assignment.role_definition_id) for item in classified)
    for item in classified:
        role = item.assignment.role_name or item.assignment.role_definition_id
        click.echo(f"  {item.kind.value:<9} {role:<{width}}  {item.assignment.scope}")


@click.command("role-assignments", context_settings=CLICK_CONTEXT_SETTINGS)
@config_document_options
@context_options
@click.option("--resource-name", default=None, help="Override lookup.resourceName")
@click.option("--resource-type", default=None, help="Override lookup.resourceType (e.g. Microsoft.Web/sites)")
@click.option("--resource-group", default=None, help="Override lookup.resourceGroup")
@click.option("--upn", default=None, help="Override principal.upn")
@click.option("--object-id", default=None, help="Override principal.objectId (wins over the UPN)")
@format_option
@click.pass_context
def cli_role_assignments(
    ctx: click.Context,
    config_path: Path | None,
    config_name: str | None,
    config_dir: Path | None,
    config_prefix: str | None,
    subscription_id: str | None,
    tenant_id: str | None,
    device_auth: bool | None,
    resource_name: str | None,
    resource_type: str | None,
    resource_group: str | None,
    upn: str | None,
    object_id: str | None,
    output_format: str,
) -> None:
    """List role assignments of a user or principal that apply to a resource.

    Each assignment is classified as direct (scoped to the resource itself)
    or inherited (scoped above it). Deny assignments and group membership
    are not evaluated.
    """
    cli_ctx = get_cli_context(ctx)
    services = cli_ctx.services
    settings = cli_ctx.settings
    with (
        lib_log_rich.runtime.bind(job_id="cli-role-assignments", extra={"command": "role-assignments"}),
        domain_error_handling(),
    ):
        document = load_document(
            cli_ctx,
            ConfigProfile.ROLE_ASSIGNMENTS,
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
        subscription = require_subscription(context)
        parameters = resolve_role_lookup_parameters(
            document,
            context=context,
            resource_name=resource_name,
            resource_type=resource_type,
            resource_group=resource_group,
            principal_upn=upn,
            principal_object_id=object_id,
        )

        credential = services.build_credential(context)
        services.apply_context(credential, subscription)
        resource = services.find_resource(
            credential,
            subscription,
            name=parameters.resource_name,
            resource_type=parameters.resource_type,
            resource_group=parameters.resource_group,
        )
        if parameters.principal_object_id:
            principal_id = parameters.principal_object_id
        else:
            principal_id = services.resolve_principal(
                credential,
                upn=str(parameters.principal_upn),
                graph_endpoint=settings.graph_endpoint,
                timeout=settings.http_timeout,
            ).object_id

        assignments = services.list_role_assignments(
            credential,
            subscription,
            scope=resource.id,
            principal_id=principal_id,
        )

    classified = classify_assignments(assignments, resource.id)
    logger.info(
        "Classified role assignments",
        extra={"resource_id": resource.id, "principal_id": principal_id, "count": len(classified)},
    )
    if OutputFormat(output_format) is OutputFormat.JSON:
        echo_json([item.as_dict() for item in classified])
    else:
        _render_human(resource.id, parameters.principal_upn or principal_id, classified)


__all__ = ["cli_role_assignments"]
