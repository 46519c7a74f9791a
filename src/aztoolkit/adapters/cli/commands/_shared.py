"""Shared helpers for CLI command modules.

Internal module (underscore prefix) holding the option groups every task
command accepts, config document loading, domain error mapping and output
rendering.

Contents:
    * :func:`config_document_options` - ``--config-path/-name/-dir/-prefix``.
    * :func:`context_options` - Subscription, tenant and device-auth overrides.
    * :func:`format_option` - ``--format human|json``.
    * :func:`load_document` - Locate and read the command's config document.
    * :func:`require_subscription` - Subscription id or MissingRequiredFieldError.
    * :func:`domain_error_handling` - Map domain errors to exit codes.
    * :func:`echo_json` / :func:`echo_fields` - Output rendering.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable, Iterator, Mapping
from contextlib import contextmanager
from pathlib import Path
from typing import Any

import orjson
import rich_click as click

from aztoolkit.domain.document import ConfigDocument
from aztoolkit.domain.enums import ConfigProfile, OutputFormat
from aztoolkit.domain.errors import (
    ConfigNotFoundError,
    ConfigParseError,
    MissingRequiredFieldError,
    ResourceLookupError,
)
from aztoolkit.domain.parameters import SUBSCRIPTION_ID, ContextParameters

from ..context import CLIContext
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


def config_document_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Add the options selecting a task config document."""
    options = [
        click.option(
            "--config-path",
            type=click.Path(dir_okay=False, path_type=Path),
            default=None,
            help="Read this config file; takes precedence over --config-name",
        ),
        click.option(
            "--config-name",
            default=None,
            help="Read <dir>/<prefix>.<NAME>.json",
        ),
        click.option(
            "--config-dir",
            type=click.Path(file_okay=False, path_type=Path),
            default=None,
            help="Directory holding named configs (default: aztoolkit.config_directory, else the current directory)",
        ),
        click.option(
            "--config-prefix",
            default=None,
            help="File prefix for named configs (default: the command's prefix setting)",
        ),
    ]
    return functools.reduce(lambda f, opt: opt(f), reversed(options), func)


def context_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Add explicit overrides for the ``context`` and ``auth`` sections."""
    options = [
        click.option("--subscription-id", default=None, help="Override context.subscriptionId"),
        click.option("--tenant-id", default=None, help="Override context.tenantId"),
        click.option(
            "--device-auth/--no-device-auth",
            "device_auth",
            default=None,
            help="Override auth.useDeviceAuthentication",
        ),
    ]
    return functools.reduce(lambda f, opt: opt(f), reversed(options), func)


def format_option(func: Callable[..., Any]) -> Callable[..., Any]:
    """Add ``--format`` choosing between human and JSON output."""
    return click.option(
        "--format",
        "output_format",
        type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
        default=OutputFormat.HUMAN.value,
        help="Output format (human-readable or JSON)",
    )(func)


def load_document(
    cli_ctx: CLIContext,
    profile: ConfigProfile,
    *,
    config_path: Path | None,
    config_name: str | None,
    config_dir: Path | None,
    config_prefix: str | None,
) -> ConfigDocument | None:
    """Locate and read the config document for ``profile``.

    Unset directory and prefix fall back to the ``[aztoolkit]`` settings.

    Raises:
        ConfigNotFoundError: A named config does not exist.
        ConfigParseError: The document is not a readable JSON object.
    """
    settings = cli_ctx.settings
    services = cli_ctx.services
    path = services.locate_config(
        explicit_path=config_path,
        name=config_name,
        directory=config_dir or settings.config_directory,
        prefix=config_prefix or settings.prefix_for(profile),
    )
    document = services.read_config(path)
    if document is not None:
        logger.info("Loaded config document", extra={"path": str(document.path), "profile": profile.value})
    return document


def require_subscription(context: ContextParameters) -> str:
    """Return the effective subscription id.

    Raises:
        MissingRequiredFieldError: Neither the option nor the document supplies one.
    """
    if not context.subscription_id:
        raise MissingRequiredFieldError(SUBSCRIPTION_ID.dotted, SUBSCRIPTION_ID.option)
    return context.subscription_id


@contextmanager
def domain_error_handling() -> Iterator[None]:
    """Convert domain errors raised in the block into a message and exit code.

    SDK and HTTP errors are not caught here; they reach ``lib_cli_exit_tools``
    at the CLI boundary unchanged.

    Raises:
        SystemExit: For any domain error, with its mapped :class:`ExitCode`.
    """
    try:
        yield
    except ConfigNotFoundError as exc:
        _handle_command_error(exc, "Config document not found", exit_code=ExitCode.FILE_NOT_FOUND)
    except ConfigParseError as exc:
        _handle_command_error(exc, "Config document unreadable", exit_code=ExitCode.CONFIG_ERROR)
    except MissingRequiredFieldError as exc:
        _handle_command_error(exc, "Missing required value", exit_code=ExitCode.INVALID_ARGUMENT)
    except ResourceLookupError as exc:
        _handle_command_error(exc, "Lookup failed", exit_code=ExitCode.FILE_NOT_FOUND)


def _handle_command_error(exc: Exception, log_message: str, *, exit_code: ExitCode) -> None:
    """Log ``exc``, print it to stderr and exit with ``exit_code``.

    Raises:
        SystemExit: Always.
    """
    logger.error(log_message, extra={"error": str(exc), "error_type": type(exc).__name__})
    click.echo(f"\nError: {exc}", err=True)
    raise SystemExit(exit_code)


def echo_json(payload: Any) -> None:
    """Print ``payload`` as indented JSON."""
    click.echo(orjson.dumps(payload, option=orjson.OPT_INDENT_2).decode("utf-8"))


def _display(value: Any) -> str:
    if value is None:
        return "-"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def echo_fields(fields: Mapping[str, Any]) -> None:
    """Print ``key : value`` lines with keys padded to a common width.

    Example:
        >>> echo_fields({"a": 1, "long.key": None})
        a        : 1
        long.key : -
    """
    if not fields:
        return
    width = max(len(key) for key in fields)
    for key, value in fields.items():
        click.echo(f"{key:<{width}} : {_display(value)}")


__all__ = [
    "config_document_options",
    "context_options",
    "domain_error_handling",
    "echo_fields",
    "echo_json",
    "format_option",
    "load_document",
    "require_subscription",
]
