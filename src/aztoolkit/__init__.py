"""Public package surface exposing config resolution, classification and metadata.

Imports are routed through the architectural layers:
- Domain exports: config documents, parameter merging, scope classification
- Adapter exports: config document location and reading
- Metadata: package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Adapter exports (filesystem)
from .adapters.config import get_config, locate_config, read_config

# Domain exports
from .domain import (
    ConfigDocument,
    ConfigurationError,
    classify_assignments,
    merge_value,
)

__all__ = [
    "ConfigDocument",
    "ConfigurationError",
    "classify_assignments",
    "get_config",
    "locate_config",
    "merge_value",
    "print_info",
    "read_config",
]
