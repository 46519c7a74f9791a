"""Per-invocation CLI state and the shared traceback switches.

The root group builds one :class:`CLIContext` and parks it on ``ctx.obj``;
subcommands read it back through :func:`get_cli_context`. The traceback
helpers keep ``lib_cli_exit_tools.config`` in step with ``--traceback`` and
let :func:`aztoolkit.adapters.cli.main.main` put the flags back afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

from ..config.settings import ToolkitSettings

if TYPE_CHECKING:
    from aztoolkit.composition import AppServices


class TracebackState(NamedTuple):
    """Snapshot of the two ``lib_cli_exit_tools`` traceback flags."""

    enabled: bool
    force_color: bool


@dataclass(slots=True)
class CLIContext:
    """State shared by every subcommand of one invocation.

    Attributes:
        traceback: ``--traceback`` was given.
        config: Layered application settings for the selected profile.
        services: Port implementations from the composition root.
        settings: Validated ``[aztoolkit]`` section of ``config``.
        profile: Settings profile from ``--profile``, if any.
    """

    traceback: bool
    config: Config
    services: AppServices
    settings: ToolkitSettings
    profile: str | None = None


def store_cli_context(
    ctx: click.Context,
    *,
    traceback: bool,
    config: Config,
    services: AppServices,
    settings: ToolkitSettings,
    profile: str | None = None,
) -> None:
    """Replace ``ctx.obj`` (the services factory) with the built :class:`CLIContext`.

    Example:
        >>> from unittest.mock import MagicMock
        >>> ctx = MagicMock()
        >>> store_cli_context(ctx, traceback=True, config=MagicMock(), services=MagicMock(), settings=ToolkitSettings())
        >>> ctx.obj.traceback
        True
    """
    ctx.obj = CLIContext(
        traceback=traceback,
        config=config,
        services=services,
        settings=settings,
        profile=profile,
    )


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Return the :class:`CLIContext` stored by the root group.

    Raises:
        RuntimeError: The root group did not run, so ``ctx.obj`` holds something else.
    """
    state = ctx.obj
    if isinstance(state, CLIContext):
        return state
    raise RuntimeError("CLI context not initialized. Call store_cli_context first.")


def apply_traceback_preferences(enabled: bool) -> None:
    """Turn full, coloured tracebacks on or off for ``lib_cli_exit_tools``.

    Example:
        >>> apply_traceback_preferences(True)
        >>> bool(lib_cli_exit_tools.config.traceback)
        True
    """
    flag = bool(enabled)
    lib_cli_exit_tools.config.traceback = flag
    lib_cli_exit_tools.config.traceback_force_color = flag


def snapshot_traceback_state() -> TracebackState:
    """Read both traceback flags; missing attributes count as off."""
    exit_config = lib_cli_exit_tools.config
    return TracebackState(
        enabled=bool(getattr(exit_config, "traceback", False)),
        force_color=bool(getattr(exit_config, "traceback_force_color", False)),
    )


def restore_traceback_state(state: TracebackState) -> None:
    """Write back flags captured by :func:`snapshot_traceback_state`.

    Example:
        >>> before = snapshot_traceback_state()
        >>> apply_traceback_preferences(True)
        >>> restore_traceback_state(before)
        >>> snapshot_traceback_state() == before
        True
    """
    enabled, force_color = state
    lib_cli_exit_tools.config.traceback = enabled
    lib_cli_exit_tools.config.traceback_force_color = force_color


__all__ = [
    "CLIContext",
    "TracebackState",
    "apply_traceback_preferences",
    "get_cli_context",
    "restore_traceback_state",
    "snapshot_traceback_state",
    "store_cli_context",
]
