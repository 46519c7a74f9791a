"""In-memory settings adapter for testing.

Returns empty settings so every ``[aztoolkit]`` value falls back to the
model defaults, without reading any settings layer from disk.
"""

from __future__ import annotations

from lib_layered_config import Config


def get_config_in_memory(
    *,
    profile: str | None = None,
    start_dir: str | None = None,
) -> Config:
    """Return an empty in-memory Config."""
    return Config({}, {})


__all__ = ["get_config_in_memory"]
