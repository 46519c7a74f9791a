"""Azure adapter - SDK and Microsoft Graph calls.

Every function takes the credential explicitly and translates SDK models
into domain records.

Contents:
    * :mod:`.credentials` - Credential construction
    * :mod:`.context` - Subscription context selection
    * :mod:`.host_keys` - Function-app host keys
    * :mod:`.resources` - Resource lookup by name
    * :mod:`.principals` - UPN to object id via Microsoft Graph
    * :mod:`.role_assignments` - Role assignments for a scope
    * :mod:`.prerequisites` - Installed distribution checks
    * :mod:`._sdk` - SDK enum and model conversions
"""

from __future__ import annotations

from .context import apply_context
from .credentials import build_credential
from .host_keys import set_host_key
from .prerequisites import check_prerequisites, format_prerequisites_report
from .principals import resolve_principal
from .resources import find_resource
from .role_assignments import list_role_assignments

__all__ = [
    "apply_context",
    "build_credential",
    "check_prerequisites",
    "find_resource",
    "format_prerequisites_report",
    "list_role_assignments",
    "resolve_principal",
    "set_host_key",
]
