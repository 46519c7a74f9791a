"""Read and parse a task config document with orjson."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

import orjson

from aztoolkit.domain.document import ConfigDocument
from aztoolkit.domain.errors import ConfigParseError

logger = logging.getLogger(__name__)


def read_config(path: Path | None) -> ConfigDocument | None:
    """Parse the JSON document at ``path``.

    The file is decoded as UTF-8; a leading byte-order mark, which editors
    on Windows commonly write, is dropped. orjson accepts nesting up to
    1024 levels.

    Args:
        path: File to read, or None when no config was requested.

    Returns:
        Parsed document, or None when ``path`` is None.

    Raises:
        ConfigParseError: The bytes are not UTF-8, the text is not JSON, or
            the top-level value is not an object.
        OSError: The file cannot be opened.
    """
    if path is None:
        return None

    try:
        text = path.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as exc:
        raise ConfigParseError(path, str(exc)) from exc

    try:
        data = orjson.loads(text)
    except orjson.JSONDecodeError as exc:
        raise ConfigParseError(path, str(exc)) from exc

    if not isinstance(data, Mapping):
        raise ConfigParseError(path, f"top-level value must be an object, got {type(data).__name__}")

    logger.debug("Loaded config document", extra={"path": str(path), "sections": sorted(data)})
    return ConfigDocument(data=data, path=path)


__all__ = ["read_config"]
