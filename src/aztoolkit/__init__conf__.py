"""Static package metadata surfaced to CLI commands and documentation.

Values here are the single source for the console name, version banner and
the identifiers ``lib_layered_config`` uses to locate settings files.

Contents:
    * Metadata constants (``name``, ``title``, ``version`` ...).
    * :func:`print_info` - Render the metadata block for ``aztoolkit info``.
"""

from __future__ import annotations

from typing import Final

name: Final[str] = "aztoolkit"
title: Final[str] = "Administrative helpers for Azure and Entra ID"
version: Final[str] = "1.0.0"
homepage: Final[str] = "https://github.com/aztoolkit/aztoolkit"
author: Final[str] = "aztoolkit maintainers"
shell_command: Final[str] = "aztoolkit"

#: Identifiers for layered application settings discovery.
LAYEREDCONF_VENDOR: Final[str] = "aztoolkit"
LAYEREDCONF_APP: Final[str] = "aztoolkit"
LAYEREDCONF_SLUG: Final[str] = "aztoolkit"


def print_info() -> None:
    """Print the summarised metadata block.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for aztoolkit:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "author",
    "homepage",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]
