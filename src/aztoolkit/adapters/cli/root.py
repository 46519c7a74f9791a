"""Root CLI command group and global option handling.

Loads the application settings once per invocation, initialises logging and
stores everything subcommands need in the Click context.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import rich_click as click
from pydantic import ValidationError

from aztoolkit import __init__conf__

from ..config.settings import load_toolkit_settings
from .constants import CLICK_CONTEXT_SETTINGS
from .context import apply_traceback_preferences, store_cli_context
from .exit_codes import ExitCode

if TYPE_CHECKING:
    from aztoolkit.composition import AppServices


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.option(
    "--profile",
    type=str,
    default=None,
    help="Load application settings from a named profile (e.g., 'production', 'test')",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None) -> None:
    """Root command storing global flags and the validated settings.

    Example:
        >>> from click.testing import CliRunner
        >>> from aztoolkit.composition import build_testing
        >>> result = CliRunner().invoke(cli, ["info"], obj=build_testing)
        >>> result.exit_code
        0
    """
    if not callable(ctx.obj):
        raise RuntimeError("Services factory not provided. This is a bug.")
    services: AppServices = ctx.obj()  # type: ignore[assignment]  # Click's obj is typed as Any
    config = services.get_config(profile=profile)
    try:
        settings = load_toolkit_settings(config)
    except ValidationError as exc:
        click.echo(f"\nError: Invalid [aztoolkit] settings - {exc}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc
    services.init_logging(config)
    store_cli_context(
        ctx,
        traceback=traceback,
        config=config,
        services=services,
        settings=settings,
        profile=profile,
    )
    apply_traceback_preferences(traceback)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# Deferred import: command modules import from package ancestors that
# import this module.
def _register_commands() -> None:
    from .commands import (
        cli_connect,
        cli_info,
        cli_prerequisites,
        cli_resolve,
        cli_role_assignments,
        cli_set_host_key,
    )

    for cmd in (
        cli_connect,
        cli_info,
        cli_prerequisites,
        cli_resolve,
        cli_role_assignments,
        cli_set_host_key,
    ):
        cli.add_command(cmd)


_register_commands()


__all__ = ["cli"]
