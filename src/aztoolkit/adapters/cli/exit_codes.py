"""POSIX-conventional exit codes for CLI error paths.

Signals are left to ``lib_cli_exit_tools``, which maps them itself.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes used by the toolkit.

    Values follow sysexits.h and errno conventions where applicable:

    * 0-1: generic success / failure
    * 2: ENOENT, for missing config files and unmatched resource lookups
    * 22: EINVAL, for missing required values
    * 69: EX_UNAVAILABLE, for missing prerequisites
    * 78: EX_CONFIG, for unreadable config documents and invalid settings

    Example:
        >>> ExitCode.SUCCESS
        <ExitCode.SUCCESS: 0>
        >>> int(ExitCode.UNAVAILABLE)
        69
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    FILE_NOT_FOUND = 2
    INVALID_ARGUMENT = 22
    UNAVAILABLE = 69
    CONFIG_ERROR = 78


__all__ = ["ExitCode"]
