"""``connect`` command: authenticate and select the subscription context."""

from __future__ import annotations

import logging
from pathlib import Path

import lib_log_rich.runtime
import rich_click as click

from aztoolkit.domain.enums import ConfigProfile, OutputFormat
from aztoolkit.domain.parameters import resolve_context_parameters

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

NO_SUBSCRIPTION_MESSAGE = "No subscription id provided; context not changed."


@click.command("connect", context_settings=CLICK_CONTEXT_SETTINGS)
@config_document_options
@context_options
@format_option
@click.pass_context
def cli_connect(
    ctx: click.Context,
    config_path: Path | None,
    config_name: str | None,
    config_dir: Path | None,
    config_prefix: str | None,
    subscription_id: str | None,
    tenant_id: str | None,
    device_auth: bool | None,
    output_format: str,
) -> None:
    """Authenticate and select the subscription context.

    The subscription comes from --subscription-id, else
    context.subscriptionId, else context.defaultSubscriptionId. Without one
    the credential is still built but no context is selected.
    """
    cli_ctx = get_cli_context(ctx)
    services = cli_ctx.services
    with (
        lib_log_rich.runtime.bind(job_id="cli-connect", extra={"command": "connect"}),
        domain_error_handling(),
    ):
        document = load_document(
            cli_ctx,
            ConfigProfile.CONNECT,
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
        credential = services.build_credential(context)
        current = services.apply_context(credential, context.subscription_id)

        if current is None:
            logger.info("Connected without selecting a subscription")
            if OutputFormat(output_format) is OutputFormat.JSON:
                echo_json(None)
            else:
                click.echo(NO_SUBSCRIPTION_MESSAGE)
            return

        logger.info("Subscription context applied", extra={"subscription_id": current.subscription_id})
        if OutputFormat(output_format) is OutputFormat.JSON:
            echo_json(current.as_dict())
        else:
            echo_fields(current.as_dict())


__all__ = ["NO_SUBSCRIPTION_MESSAGE", "cli_connect"]
