"""``prerequisites`` command: report the Azure SDK distributions present."""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from ...azure.prerequisites import format_prerequisites_report
from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


@click.command("prerequisites", context_settings=CLICK_CONTEXT_SETTINGS)
@click.pass_context
def cli_prerequisites(ctx: click.Context) -> None:
    """Check that the Python distributions used for Azure calls are installed.

    Nothing is installed; missing distributions are listed with the pip
    command that installs them and the command exits with code 69.
    """
    cli_ctx = get_cli_context(ctx)
    with lib_log_rich.runtime.bind(job_id="cli-prerequisites", extra={"command": "prerequisites"}):
        results = cli_ctx.services.check_prerequisites()
        click.echo(format_prerequisites_report(results))

        missing = [check.name for check in results if not check.found]
        if missing:
            logger.warning("Missing prerequisites", extra={"missing": missing})
            click.echo(f"\n{len(missing)} prerequisite(s) missing.", err=True)
            raise SystemExit(ExitCode.UNAVAILABLE)
        logger.info("All prerequisites present")


__all__ = ["cli_prerequisites"]
