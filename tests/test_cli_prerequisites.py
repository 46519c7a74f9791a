"""``prerequisites`` command and the distribution check behind it."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

import pytest
from click.testing import CliRunner

from aztoolkit.adapters.azure.prerequisites import (
    REQUIRED_DISTRIBUTIONS,
    check_prerequisites,
    format_prerequisites_report,
)
from aztoolkit.adapters.cli import cli
from aztoolkit.adapters.cli.exit_codes import ExitCode
from aztoolkit.adapters.memory.azure import AzureSpy
from aztoolkit.domain.models import PrerequisiteCheck

if TYPE_CHECKING:
    from conftest import AzureCliContext


@pytest.mark.os_agnostic
def test_all_prerequisites_present_exits_successfully(
    cli_runner: CliRunner,
    azure_cli_context: Callable[..., AzureCliContext],
) -> None:
    spy = AzureSpy(prerequisites=[PrerequisiteCheck("azure-identity", True, "1.19.0")])
    ctx = azure_cli_context(spy=spy)

    result = cli_runner.invoke(cli, ["prerequisites"], obj=ctx.factory)

    assert result.exit_code == 0
    assert "✓ azure-identity 1.19.0" in result.stdout


@pytest.mark.os_agnostic
def test_missing_prerequisite_exits_unavailable_with_an_install_hint(
    cli_runner: CliRunner,
    azure_cli_context: Callable[..., AzureCliContext],
) -> None:
    spy = AzureSpy(
        prerequisites=[
            PrerequisiteCheck("azure-identity", True, "1.19.0"),
            PrerequisiteCheck("azure-mgmt-web", False, install_hint="pip install --upgrade azure-mgmt-web"),
        ]
    )
    ctx = azure_cli_context(spy=spy)

    result = cli_runner.invoke(cli, ["prerequisites"], obj=ctx.factory)

    assert result.exit_code == ExitCode.UNAVAILABLE
    assert "✗ azure-mgmt-web not installed" in result.stdout
    assert "pip install --upgrade azure-mgmt-web" in result.stdout
    assert "1 prerequisite(s) missing" in result.stderr


@pytest.mark.os_agnostic
def test_check_prerequisites_reports_every_required_distribution() -> None:
    results = check_prerequisites()

    assert [check.name for check in results] == list(REQUIRED_DISTRIBUTIONS)
    assert all(check.found and check.version for check in results)


@pytest.mark.os_agnostic
def test_check_prerequisites_marks_uninstalled_distributions(monkeypatch: pytest.MonkeyPatch) -> None:
    from aztoolkit.adapters.azure import prerequisites as prerequisites_mod

    monkeypatch.setattr(prerequisites_mod, "REQUIRED_DISTRIBUTIONS", ("definitely-not-installed-aztoolkit-dist",))

    (check,) = prerequisites_mod.check_prerequisites()

    assert check.found is False
    assert check.version is None
    assert check.install_hint == "pip install --upgrade definitely-not-installed-aztoolkit-dist"


@pytest.mark.os_agnostic
def test_report_lists_found_and_missing_distributions() -> None:
    report = format_prerequisites_report(
        [
            PrerequisiteCheck("httpx", True, "0.27.0"),
            PrerequisiteCheck("azure-mgmt-web", False, install_hint="pip install --upgrade azure-mgmt-web"),
        ]
    )

    assert report.splitlines() == [
        "Prerequisites:",
        "  ✓ httpx 0.27.0",
        "  ✗ azure-mgmt-web not installed",
        "      Install: pip install --upgrade azure-mgmt-web",
    ]
