"""Shared pytest fixtures for CLI, adapter and module-entry tests.

All shared fixtures live here; tests pick them up through conftest
discovery. Azure is never contacted: CLI tests run on ``build_testing`` ports
with an :class:`AzureSpy`, and config documents are written to ``tmp_path``.
"""

from __future__ import annotations

import dataclasses
import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass, fields
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import orjson
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

if TYPE_CHECKING:
    from aztoolkit.adapters.memory.azure import AzureSpy
    from aztoolkit.composition import AppServices


def _load_dotenv() -> None:
    """Load ``.env`` when present so ``AZURE_*`` variables reach credential tests."""
    from dotenv import load_dotenv

    env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)


_load_dotenv()

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _remove_ansi_codes(text: str) -> str:
    """Return *text* stripped of ANSI escape sequences."""
    return ANSI_ESCAPE_PATTERN.sub("", text)


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a configuration snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use ``result.stdout`` for command output (e.g. JSON parsing) and
    ``result.stderr`` for error messages.
    """
    return CliRunner()


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return _remove_ansi_codes(value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore them after the test."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config lru_cache before the test.

    Only clears before, because a test may monkeypatch ``get_config`` away.
    """
    from aztoolkit.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real ``lib_layered_config.Config`` instances from dicts.

    Example:
        def test_settings(config_factory) -> None:
            config = config_factory({"aztoolkit": {"http_timeout": 5}})
            assert config.get("aztoolkit.http_timeout") == 5
    """

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper writing a JSON config document under ``tmp_path``.

    Args of the helper:
        data: Document content, serialized with orjson.
        name: File name inside the directory.
        directory: Target directory; ``tmp_path`` when omitted.

    Example:
        def test_read(write_config) -> None:
            path = write_config({"context": {"subscriptionId": "s-1"}})
            assert path.is_file()
    """

    def _write(data: Any, *, name: str = "config.json", directory: Path | None = None) -> Path:
        target_dir = directory if directory is not None else tmp_path
        target_dir.mkdir(parents=True, exist_ok=True)
        path = target_dir / name
        path.write_bytes(orjson.dumps(data))
        return path

    return _write


def testing_services(*, spy: AzureSpy | None = None) -> AppServices:
    """Return ``build_testing`` services with the production logging initializer.

    Every command runs inside ``lib_log_rich.runtime.bind``, which needs an
    initialised runtime; the in-memory initializer does not start one.
    """
    from aztoolkit.composition import build_production, build_testing

    return dataclasses.replace(build_testing(spy=spy), init_logging=build_production().init_logging)


@pytest.fixture
def testing_factory() -> Callable[[], AppServices]:
    """Provide a services factory with in-memory Azure ports and real logging."""
    services = testing_services()
    return lambda: services


@dataclass
class AzureCliContext:
    """Services factory and the spy behind it.

    Attributes:
        factory: Callable returning wired AppServices for ``cli_runner.invoke(obj=...)``.
        spy: AzureSpy answering every Azure port, for seeding and assertions.
    """

    factory: Callable[[], Any]
    spy: AzureSpy


@pytest.fixture
def azure_cli_context(clear_config_cache: None) -> Callable[..., AzureCliContext]:
    """Create a CLI test context backed by :func:`testing_services`.

    The helper accepts an optional seeded ``spy`` and an optional
    ``settings`` dict used as the ``[aztoolkit]`` section.

    Example:
        def test_connect(cli_runner, azure_cli_context) -> None:
            ctx = azure_cli_context()
            result = cli_runner.invoke(cli, ["connect", "--subscription-id", "s-1"], obj=ctx.factory)
            assert ctx.spy.calls_to("apply_context")
    """
    from aztoolkit.adapters.memory.azure import AzureSpy

    def _create(*, spy: AzureSpy | None = None, settings: dict[str, Any] | None = None) -> AzureCliContext:
        azure = spy if spy is not None else AzureSpy()
        services = testing_services(spy=azure)
        if settings is not None:
            config = Config({"aztoolkit": settings}, {})

            def _fake_get_config(**_kwargs: Any) -> Config:
                return config

            services = dataclasses.replace(services, get_config=_fake_get_config)
        return AzureCliContext(factory=lambda: services, spy=azure)

    return _create
