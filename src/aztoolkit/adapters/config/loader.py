"""Application settings loader with caching and profile support.

These are the toolkit's own settings (default config directory, per-command
file prefixes, logging). Task documents are handled by :mod:`.locator` and
:mod:`.reader`.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Protocol

from lib_layered_config import (
    DEFAULT_MAX_PROFILE_LENGTH,
    Config,
    read_config,
    validate_profile_name,
)

from aztoolkit import __init__conf__

#: Settings layers kept per process; one per (profile, start_dir) in practice.
_CACHE_SIZE = 4


class ConfigLoaderProtocol(Protocol):
    """Settings loader that can drop its cached layers."""

    def __call__(self, *, profile: str | None = None, start_dir: str | None = None) -> Config: ...
    def cache_clear(self) -> None: ...


def validate_profile(profile: str, max_length: int | None = None) -> str:
    """Return ``profile`` unchanged when it is safe to use as a settings directory name.

    Raises:
        lib_layered_config.ValidationError: Empty, too long, non-ASCII, a
            reserved device name, or containing path separators. It is a
            ``ValueError`` subclass.

    Examples:
        >>> validate_profile("staging-v2")
        'staging-v2'
        >>> validate_profile("../etc")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ValidationError: profile contains invalid characters: ../etc
    """
    limit = DEFAULT_MAX_PROFILE_LENGTH if max_length is None else max_length
    return validate_profile_name(profile, max_length=limit)


@lru_cache(maxsize=1)
def get_default_config_path() -> Path:
    """Return the bundled ``defaultconfig.toml`` next to this module.

    Example:
        >>> get_default_config_path().name
        'defaultconfig.toml'
    """
    return Path(__file__).parent / "defaultconfig.toml"


class _CachedSettingsLoader:
    """Read the settings layers once per ``(profile, start_dir)``.

    Precedence: defaults → app → host → user → dotenv → env. A profile
    inserts a ``profile/<name>/`` directory into every settings path.
    """

    def __init__(self) -> None:
        self._read = lru_cache(maxsize=_CACHE_SIZE)(self._read_layers)

    @staticmethod
    def _read_layers(profile: str | None, start_dir: str | None) -> Config:
        return read_config(
            vendor=__init__conf__.LAYEREDCONF_VENDOR,
            app=__init__conf__.LAYEREDCONF_APP,
            slug=__init__conf__.LAYEREDCONF_SLUG,
            profile=profile,
            default_file=get_default_config_path(),
            start_dir=start_dir,
        )

    def __call__(self, *, profile: str | None = None, start_dir: str | None = None) -> Config:
        """Load layered application settings.

        Args:
            profile: Optional settings profile (``production``, ``test``).
            start_dir: Directory that seeds ``.env`` discovery; current directory when None.

        Example:
            >>> get_config().get("aztoolkit.connect_prefix")
            'Connect-AzToolkit'
        """
        checked = validate_profile(profile) if profile is not None else None
        return self._read(checked, start_dir)

    def cache_clear(self) -> None:
        """Drop cached settings so the next call re-reads every layer."""
        self._read.cache_clear()


get_config: ConfigLoaderProtocol = _CachedSettingsLoader()


__all__ = [
    "get_config",
    "get_default_config_path",
    "validate_profile",
]
