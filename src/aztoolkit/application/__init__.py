"""Application layer - port definitions.

Contents:
    * :mod:`.ports` - Callable Protocol definitions for adapter functions
"""

from __future__ import annotations

from .ports import (
    ApplyContext,
    BuildCredential,
    CheckPrerequisites,
    FindResource,
    GetConfig,
    InitLogging,
    ListRoleAssignments,
    LocateConfig,
    ReadConfig,
    ResolvePrincipal,
    SetHostKey,
)

__all__ = [
    "ApplyContext",
    "BuildCredential",
    "CheckPrerequisites",
    "FindResource",
    "GetConfig",
    "InitLogging",
    "ListRoleAssignments",
    "LocateConfig",
    "ReadConfig",
    "ResolvePrincipal",
    "SetHostKey",
]
