"""CLI command implementations.

Contents:
    * :mod:`.connect_cmd` - ``connect``
    * :mod:`.host_key_cmd` - ``set-host-key``
    * :mod:`.role_assignments_cmd` - ``role-assignments``
    * :mod:`.resolve_cmd` - ``resolve``
    * :mod:`.prerequisites_cmd` - ``prerequisites``
    * :mod:`.info` - ``info``
"""

from __future__ import annotations

from .connect_cmd import cli_connect
from .host_key_cmd import cli_set_host_key
from .info import cli_info
from .prerequisites_cmd import cli_prerequisites
from .resolve_cmd import cli_resolve
from .role_assignments_cmd import cli_role_assignments

__all__ = [
    "cli_connect",
    "cli_info",
    "cli_prerequisites",
    "cli_resolve",
    "cli_role_assignments",
    "cli_set_host_key",
]
