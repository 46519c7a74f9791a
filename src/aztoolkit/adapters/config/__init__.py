"""Configuration adapter - settings loading and task document resolution.

Contents:
    * :mod:`.loader` - Layered application settings with caching
    * :mod:`.settings` - Typed ``[aztoolkit]`` settings model
    * :mod:`.locator` - ``<Prefix>.<Name>.json`` path resolution
    * :mod:`.reader` - JSON document parsing
"""

from __future__ import annotations

from .loader import get_config, get_default_config_path
from .locator import locate_config
from .reader import read_config
from .settings import ToolkitSettings, load_toolkit_settings

__all__ = [
    "ToolkitSettings",
    "get_config",
    "get_default_config_path",
    "load_toolkit_settings",
    "locate_config",
    "read_config",
]
