"""CLI core stories: traceback flags, main entry, help, info and settings."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import lib_log_rich.runtime
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

from aztoolkit import __init__conf__
from aztoolkit.adapters import cli as cli_mod
from aztoolkit.adapters.cli.context import CLIContext, get_cli_context
from aztoolkit.adapters.cli.exit_codes import ExitCode
from aztoolkit.adapters.config.settings import ToolkitSettings
from aztoolkit.composition import build_testing

if TYPE_CHECKING:
    from conftest import AzureCliContext

    from aztoolkit.composition import AppServices


@pytest.mark.os_agnostic
def test_snapshot_traceback_state_returns_disabled_by_default(managed_traceback_state: None) -> None:
    assert cli_mod.snapshot_traceback_state() == (False, False)


@pytest.mark.os_agnostic
def test_restore_traceback_state_resets_flags_to_previous(managed_traceback_state: None) -> None:
    previous = cli_mod.snapshot_traceback_state()
    cli_mod.apply_traceback_preferences(True)

    cli_mod.restore_traceback_state(previous)

    assert lib_cli_exit_tools.config.traceback is False
    assert lib_cli_exit_tools.config.traceback_force_color is False


@pytest.mark.os_agnostic
def test_traceback_flag_is_active_during_a_command_and_restored_after(
    monkeypatch: pytest.MonkeyPatch,
    managed_traceback_state: None,
    testing_factory: Callable[[], AppServices],
) -> None:
    notes: list[tuple[bool, bool]] = []

    def record() -> None:
        notes.append((lib_cli_exit_tools.config.traceback, lib_cli_exit_tools.config.traceback_force_color))

    monkeypatch.setattr(__init__conf__, "print_info", record)

    exit_code = cli_mod.main(["--traceback", "info"], services_factory=testing_factory)

    assert exit_code == 0
    assert notes == [(True, True)]
    assert lib_cli_exit_tools.config.traceback is False


@pytest.mark.os_agnostic
def test_main_requires_a_services_factory() -> None:
    with pytest.raises(ValueError, match="services_factory is required"):
        cli_mod.main(["info"])


@pytest.mark.os_agnostic
def test_main_returns_click_usage_errors_as_exit_codes(
    managed_traceback_state: None,
    testing_factory: Callable[[], AppServices],
) -> None:
    assert cli_mod.main(["no-such-command"], services_factory=testing_factory) == 2


@pytest.mark.os_agnostic
def test_main_formats_unexpected_errors_via_exit_tools(
    azure_cli_context: Callable[..., AzureCliContext],
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
) -> None:
    ctx = azure_cli_context()
    ctx.spy.raise_exception = RuntimeError("SubscriptionNotFound")

    exit_code = cli_mod.main(["connect", "--subscription-id", "s-1"], services_factory=ctx.factory)

    assert exit_code != 0
    err = capsys.readouterr().err
    assert "RuntimeError" in err or "SubscriptionNotFound" in err


@pytest.mark.os_agnostic
def test_root_without_subcommand_prints_help(
    cli_runner: CliRunner,
    strip_ansi: Callable[[str], str],
    testing_factory: Callable[[], AppServices],
) -> None:
    result = cli_runner.invoke(cli_mod.cli, [], obj=testing_factory)

    assert result.exit_code == 0
    plain = strip_ansi(result.output)
    for command in ("connect", "set-host-key", "role-assignments", "resolve", "prerequisites", "info"):
        assert command in plain


@pytest.mark.os_agnostic
def test_root_rejects_a_missing_services_factory(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli_mod.cli, ["info"], obj=None)

    assert result.exit_code != 0
    assert isinstance(result.exception, RuntimeError)


@pytest.mark.os_agnostic
def test_version_option_prints_the_package_version(
    cli_runner: CliRunner,
    testing_factory: Callable[[], AppServices],
) -> None:
    result = cli_runner.invoke(cli_mod.cli, ["--version"], obj=testing_factory)

    assert result.exit_code == 0
    assert __init__conf__.version in result.output


@pytest.mark.os_agnostic
def test_info_prints_package_metadata(
    cli_runner: CliRunner,
    strip_ansi: Callable[[str], str],
    testing_factory: Callable[[], AppServices],
) -> None:
    result = cli_runner.invoke(cli_mod.cli, ["info"], obj=testing_factory)

    assert result.exit_code == 0
    assert __init__conf__.name in strip_ansi(result.output)
    assert __init__conf__.version in strip_ansi(result.output)


@pytest.mark.os_agnostic
def test_profile_is_passed_to_the_settings_loader(
    cli_runner: CliRunner,
    clear_config_cache: None,
    testing_factory: Callable[[], AppServices],
) -> None:
    captured: list[str | None] = []

    def _capturing_get_config(*, profile: str | None = None, **_kwargs: Any) -> Config:
        captured.append(profile)
        return Config({}, {})

    services = dataclasses.replace(testing_factory(), get_config=_capturing_get_config)

    result = cli_runner.invoke(cli_mod.cli, ["--profile", "staging", "info"], obj=lambda: services)

    assert result.exit_code == 0
    assert captured == ["staging"]


@pytest.mark.os_agnostic
def test_invalid_toolkit_settings_exit_with_config_error(
    cli_runner: CliRunner,
    azure_cli_context: Callable[..., AzureCliContext],
) -> None:
    ctx = azure_cli_context(settings={"http_timeout": -1})

    result = cli_runner.invoke(cli_mod.cli, ["info"], obj=ctx.factory)

    assert result.exit_code == ExitCode.CONFIG_ERROR
    assert "Invalid [aztoolkit] settings" in result.stderr


@pytest.mark.os_agnostic
def test_get_cli_context_raises_when_not_initialised() -> None:
    class _Ctx:
        obj = None

    with pytest.raises(RuntimeError, match="CLI context not initialized"):
        get_cli_context(_Ctx())  # type: ignore[arg-type]


@pytest.mark.os_agnostic
def test_store_and_get_cli_context_round_trip() -> None:
    class _Ctx:
        obj: Any = None

    ctx = _Ctx()
    services = build_testing()
    settings = ToolkitSettings()

    cli_mod.store_cli_context(
        ctx,  # type: ignore[arg-type]
        traceback=True,
        config=Config({}, {}),
        services=services,
        settings=settings,
        profile="dev",
    )

    stored = get_cli_context(ctx)  # type: ignore[arg-type]
    assert isinstance(stored, CLIContext)
    assert stored.services is services
    assert stored.settings is settings
    assert stored.profile == "dev"


@pytest.mark.os_agnostic
def test_exit_codes_follow_posix_conventions() -> None:
    assert int(ExitCode.FILE_NOT_FOUND) == 2
    assert int(ExitCode.INVALID_ARGUMENT) == 22
    assert int(ExitCode.UNAVAILABLE) == 69
    assert int(ExitCode.CONFIG_ERROR) == 78


@pytest.mark.os_agnostic
def test_exit_codes_cover_only_codes_the_toolkit_raises() -> None:
    assert sorted(int(code) for code in ExitCode) == [0, 1, 2, 22, 69, 78]


@pytest.mark.os_agnostic
def test_root_group_starts_logging_before_commands_bind_their_job(
    cli_runner: CliRunner,
    azure_cli_context: Callable[..., AzureCliContext],
) -> None:
    ctx = azure_cli_context()

    result = cli_runner.invoke(cli_mod.cli, ["connect"], obj=ctx.factory)

    assert result.exception is None
    assert result.exit_code == 0
    assert lib_log_rich.runtime.is_initialised()


@pytest.mark.os_agnostic
def test_in_memory_logging_leaves_the_runtime_to_the_caller(cli_runner: CliRunner) -> None:
    """Bare ``build_testing`` services cannot run commands on an uninitialised runtime."""
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()

    result = cli_runner.invoke(cli_mod.cli, ["connect"], obj=build_testing)

    assert result.exit_code != 0
    assert isinstance(result.exception, RuntimeError)
