"""Adapters layer - infrastructure and framework integrations.

Contents:
    * :mod:`.config` - Settings loading and config document resolution
    * :mod:`.azure` - Azure SDK and Microsoft Graph calls
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.memory` - In-memory fakes for tests
    * :mod:`.cli` - Click CLI framework integration
"""

from __future__ import annotations

__all__: list[str] = []
