"""Process-level wrapper around the root command group.

Both ``python -m aztoolkit`` and the ``aztoolkit`` console script end up in
:func:`main`, which turns every outcome into an integer exit code.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from aztoolkit import __init__conf__

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import (
    apply_traceback_preferences,
    restore_traceback_state,
    snapshot_traceback_state,
)

if TYPE_CHECKING:
    from aztoolkit.composition import AppServices

ServicesFactory = Callable[[], "AppServices"]


def _report_unhandled(exc: BaseException) -> int:
    """Print ``exc`` through ``lib_cli_exit_tools`` and return its exit code.

    Azure SDK and Graph errors arrive here unwrapped, as do the
    ``SystemExit`` raised for domain errors.
    """
    verbose = bool(getattr(lib_cli_exit_tools.config, "traceback", False))
    apply_traceback_preferences(verbose)
    lib_cli_exit_tools.print_exception_message(
        trace_back=verbose,
        length_limit=TRACEBACK_VERBOSE_LIMIT if verbose else TRACEBACK_SUMMARY_LIMIT,
    )
    return lib_cli_exit_tools.get_system_exit_code(exc)


def _invoke(args: list[str], services_factory: ServicesFactory) -> int:
    from .root import cli

    try:
        cli.main(
            args=args,
            prog_name=__init__conf__.shell_command,
            obj=services_factory,
            standalone_mode=False,
        )
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except BaseException as exc:  # noqa: BLE001
        return _report_unhandled(exc)
    return 0


def _shutdown_logging() -> None:
    # Worker threads may still be logging; only the main thread tears down.
    if threading.current_thread() is not threading.main_thread():
        return
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: ServicesFactory | None = None,
) -> int:
    """Run the CLI and return its exit code.

    Args:
        argv: Arguments without the program name; ``sys.argv[1:]`` when None.
        restore_traceback: Put the traceback flags back as they were before the run.
        services_factory: Builds the :class:`~aztoolkit.composition.AppServices`
            for this run. Entry points pass ``build_production``.

    Raises:
        ValueError: No services factory was given.

    Example:
        >>> from aztoolkit.composition import build_testing
        >>> main(["info"], services_factory=build_testing)  # doctest: +SKIP
        0
    """
    if services_factory is None:
        raise ValueError("services_factory is required. Pass build_production from composition layer.")

    args = list(argv) if argv is not None else sys.argv[1:]
    before = snapshot_traceback_state()
    try:
        return _invoke(args, services_factory)
    finally:
        if restore_traceback:
            restore_traceback_state(before)
        _shutdown_logging()


__all__ = ["main"]
