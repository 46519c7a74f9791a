"""Type-safe domain enums for output formats and assignment classification."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Output format options for command results.

    Inherits from str to allow direct string comparison and Click integration.

    Attributes:
        HUMAN: Aligned, human-readable text.
        JSON: Machine-readable JSON.

    Example:
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


class AssignmentKind(str, Enum):
    """How a role assignment relates to the resource it was listed for.

    ``DIRECT`` means the assignment scope is the resource itself; anything
    else (subscription, resource group, management group) is ``INHERITED``.
    The classification compares scopes only and does not evaluate deny
    assignments or group membership.

    Example:
        >>> AssignmentKind.INHERITED.value
        'inherited'
    """

    DIRECT = "direct"
    INHERITED = "inherited"


class ConfigProfile(str, Enum):
    """Parameter sets a config document can be resolved for.

    Each value names the command whose fields are merged and selects that
    command's default file prefix.

    Example:
        >>> ConfigProfile("role-assignments") is ConfigProfile.ROLE_ASSIGNMENTS
        True
    """

    CONNECT = "connect"
    HOST_KEY = "set-host-key"
    ROLE_ASSIGNMENTS = "role-assignments"


__all__ = [
    "AssignmentKind",
    "ConfigProfile",
    "OutputFormat",
]
