"""``set-host-key`` command stories."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING, Any

import orjson
import pytest
from click.testing import CliRunner

from aztoolkit.adapters.cli import cli
from aztoolkit.adapters.cli.exit_codes import ExitCode
from aztoolkit.adapters.memory.azure import GENERATED_KEY_VALUE, AzureSpy

if TYPE_CHECKING:
    from conftest import AzureCliContext

DOCUMENT: dict[str, Any] = {
    "context": {"subscriptionId": "sub-1"},
    "functionApp": {"resourceGroupName": "rg-func", "name": "func-app"},
    "hostKey": {"name": "deploy", "value": "s3cret-value"},
}


def _invoke(cli_runner: CliRunner, ctx: AzureCliContext, path: Path, *extra: str) -> Any:
    return cli_runner.invoke(cli, ["set-host-key", "--config-path", str(path), *extra], obj=ctx.factory)


@pytest.mark.os_agnostic
def test_host_key_is_set_without_printing_the_value(
    cli_runner: CliRunner,
    azure_cli_context: Callable[..., AzureCliContext],
    write_config: Callable[..., Path],
) -> None:
    ctx = azure_cli_context()

    result = _invoke(cli_runner, ctx, write_config(DOCUMENT))

    assert result.exit_code == 0
    assert "Host key 'deploy' set on function app 'func-app'" in result.stdout
    assert "s3cret-value" not in result.output
    call = ctx.spy.calls_to("set_host_key")[0]
    assert call["subscription_id"] == "sub-1"
    assert call["parameters"].key_value == "s3cret-value"
    assert ctx.spy.calls_to("apply_context") == [{"subscription_id": "sub-1"}]


@pytest.mark.os_agnostic
def test_show_value_prints_the_stored_value(
    cli_runner: CliRunner,
    azure_cli_context: Callable[..., AzureCliContext],
    write_config: Callable[..., Path],
) -> None:
    ctx = azure_cli_context()

    result = _invoke(cli_runner, ctx, write_config(DOCUMENT), "--show-value")

    assert result.exit_code == 0
    assert "Value: s3cret-value" in result.stdout


@pytest.mark.os_agnostic
def test_absent_value_lets_the_platform_generate_one(
    cli_runner: CliRunner,
    azure_cli_context: Callable[..., AzureCliContext],
    write_config: Callable[..., Path],
) -> None:
    document = {**DOCUMENT, "hostKey": {"name": "deploy"}}
    ctx = azure_cli_context()

    result = _invoke(cli_runner, ctx, write_config(document), "--show-value")

    assert result.exit_code == 0
    assert ctx.spy.calls_to("set_host_key")[0]["parameters"].key_value is None
    assert GENERATED_KEY_VALUE in result.stdout


@pytest.mark.os_agnostic
def test_cli_options_override_document_fields(
    cli_runner: CliRunner,
    azure_cli_context: Callable[..., AzureCliContext],
    write_config: Callable[..., Path],
) -> None:
    ctx = azure_cli_context()

    result = _invoke(
        cli_runner,
        ctx,
        write_config(DOCUMENT),
        "--function-app",
        "other-app",
        "--key-name",
        "ci",
        "--subscription-id",
        "sub-2",
    )

    assert result.exit_code == 0
    call = ctx.spy.calls_to("set_host_key")[0]
    assert call["subscription_id"] == "sub-2"
    assert call["parameters"].function_app_name == "other-app"
    assert call["parameters"].key_name == "ci"
    assert call["parameters"].resource_group_name == "rg-func"


@pytest.mark.os_agnostic
def test_json_output_masks_the_value(
    cli_runner: CliRunner,
    azure_cli_context: Callable[..., AzureCliContext],
    write_config: Callable[..., Path],
) -> None:
    ctx = azure_cli_context()

    result = _invoke(cli_runner, ctx, write_config(DOCUMENT), "--format", "json")

    assert result.exit_code == 0
    assert orjson.loads(result.stdout) == {
        "functionApp": "func-app",
        "resourceGroup": "rg-func",
        "keyName": "deploy",
        "keyValue": "***",
    }


@pytest.mark.os_agnostic
def test_missing_subscription_exits_with_invalid_argument(
    cli_runner: CliRunner,
    azure_cli_context: Callable[..., AzureCliContext],
    write_config: Callable[..., Path],
) -> None:
    document = {key: value for key, value in DOCUMENT.items() if key != "context"}
    ctx = azure_cli_context()

    result = _invoke(cli_runner, ctx, write_config(document))

    assert result.exit_code == ExitCode.INVALID_ARGUMENT
    assert "context.subscriptionId" in result.stderr
    assert "--subscription-id" in result.stderr
    assert ctx.spy.calls_to("set_host_key") == []


@pytest.mark.os_agnostic
def test_missing_function_app_exits_with_invalid_argument(
    cli_runner: CliRunner,
    azure_cli_context: Callable[..., AzureCliContext],
    write_config: Callable[..., Path],
) -> None:
    document = {**DOCUMENT, "functionApp": {"resourceGroupName": "rg-func"}}
    ctx = azure_cli_context()

    result = _invoke(cli_runner, ctx, write_config(document))

    assert result.exit_code == ExitCode.INVALID_ARGUMENT
    assert "functionApp.name" in result.stderr
    assert ctx.spy.calls == []


@pytest.mark.os_agnostic
def test_named_config_uses_the_host_key_prefix(
    cli_runner: CliRunner,
    azure_cli_context: Callable[..., AzureCliContext],
    write_config: Callable[..., Path],
    tmp_path: Path,
) -> None:
    write_config(DOCUMENT, name="Set-FunctionHostKey.prod.json")
    ctx = azure_cli_context()

    result = cli_runner.invoke(
        cli,
        ["set-host-key", "--config-name", "prod", "--config-dir", str(tmp_path)],
        obj=ctx.factory,
    )

    assert result.exit_code == 0
    assert len(ctx.spy.calls_to("set_host_key")) == 1


@pytest.mark.os_agnostic
def test_sdk_failure_propagates_unchanged(
    cli_runner: CliRunner,
    azure_cli_context: Callable[..., AzureCliContext],
    write_config: Callable[..., Path],
) -> None:
    ctx = azure_cli_context(spy=AzureSpy(raise_exception=RuntimeError("ResourceNotFound: func-app")))

    result = _invoke(cli_runner, ctx, write_config(DOCUMENT))

    assert result.exit_code == ExitCode.GENERAL_ERROR
    assert isinstance(result.exception, RuntimeError)
