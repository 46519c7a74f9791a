"""``set-host-key`` command: create or update a function-app host key."""

from __future__ import annotations

import logging
from pathlib import Path

import lib_log_rich.runtime
import rich_click as click

from aztoolkit.domain.enums import ConfigProfile, OutputFormat
from aztoolkit.domain.parameters import resolve_context_parameters, resolve_host_key_parameters

from ..constants import CLICK_CONTEXT_SETTINGS, MASKED_SECRET
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


@click.command("set-host-key", context_settings=CLICK_CONTEXT_SETTINGS)
@config_document_options
@context_options
@click.option("--resource-group", default=None, help="Override functionApp.resourceGroupName")
@click.option("--function-app", default=None, help="Override functionApp.name")
@click.option("--key-name", default=None, help="Override hostKey.name")
@click.option("--key-value", default=None, help="Override hostKey.value (omit to let Azure generate one)")
@click.option("--show-value", is_flag=True, default=False, help="Print the key value after setting it")
@format_option
@click.pass_context
def cli_set_host_key(
    ctx: click.Context,
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
    show_value: bool,
    output_format: str,
) -> None:
    """Create or update a host key of type functionKeys on a function app.

    The key value is never printed unless --show-value is given.
    """
    cli_ctx = get_cli_context(ctx)
    services = cli_ctx.services
    with (
        lib_log_rich.runtime.bind(job_id="cli-set-host-key", extra={"command": "set-host-key"}),
        domain_error_handling(),
    ):
        document = load_document(
            cli_ctx,
            ConfigProfile.HOST_KEY,
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
        parameters = resolve_host_key_parameters(
            document,
            context=context,
            resource_group_name=resource_group,
            function_app_name=function_app,
            key_name=key_name,
            key_value=key_value,
        )

        credential = services.build_credential(context)
        services.apply_context(credential, subscription)
        result = services.set_host_key(credential, subscription, parameters)

    logger.info(
        "Host key set",
        extra={"function_app": parameters.function_app_name, "key_name": result.name},
    )
    shown = result.value if show_value else (MASKED_SECRET if result.value is not None else None)
    if OutputFormat(output_format) is OutputFormat.JSON:
        echo_json(
            {
                "functionApp": parameters.function_app_name,
                "resourceGroup": parameters.resource_group_name,
                "keyName": result.name,
                "keyValue": shown,
            }
        )
        return

    click.echo(
        f"Host key '{result.name}' set on function app "
        f"'{parameters.function_app_name}' (resource group '{parameters.resource_group_name}')."
    )
    if show_value:
        click.echo(f"Value: {result.value}")


__all__ = ["cli_set_host_key"]
