"""Locate a task config document by explicit path or naming convention."""

from __future__ import annotations

import logging
from pathlib import Path

from aztoolkit.domain.errors import ConfigNotFoundError

logger = logging.getLogger(__name__)


def config_file_name(prefix: str, name: str) -> str:
    """Return the conventional file name ``<prefix>.<name>.json``.

    Example:
        >>> config_file_name("Connect-AzToolkit", "prod")
        'Connect-AzToolkit.prod.json'
    """
    return f"{prefix}.{name}.json"


def locate_config(
    *,
    explicit_path: str | Path | None = None,
    name: str | None = None,
    directory: str | Path | None = None,
    prefix: str,
) -> Path | None:
    """Resolve which config document to read.

    An explicit path wins and is returned unchanged without touching the
    filesystem. Otherwise a name selects ``<directory>/<prefix>.<name>.json``,
    which must exist. With neither, no document is used.

    Args:
        explicit_path: Path given with ``--config-path``.
        name: Config name given with ``--config-name``.
        directory: Directory holding named configs; current directory when None.
        prefix: File prefix of the calling command.

    Returns:
        Path to read, or None when no config was requested.

    Raises:
        ConfigNotFoundError: The named file does not exist.

    Example:
        >>> locate_config(explicit_path="/tmp/x.json", name="ignored", prefix="P")
        PosixPath('/tmp/x.json')
        >>> locate_config(prefix="P") is None
        True
    """
    if explicit_path:
        return Path(explicit_path)
    if not name:
        logger.debug("No config path or name given; continuing without a config document")
        return None

    base = Path(directory) if directory else Path.cwd()
    candidate = base / config_file_name(prefix, name)
    if not candidate.is_file():
        raise ConfigNotFoundError(candidate)
    logger.debug("Resolved config document", extra={"path": str(candidate)})
    return candidate


__all__ = [
    "config_file_name",
    "locate_config",
]
