"""Conversions shared by the SDK model translations."""

from __future__ import annotations

from typing import Any


def enum_text(value: Any) -> str | None:
    """Return the wire text of an SDK enum member, or ``value`` as text.

    Azure SDK enums are ``str`` subclasses, but older models hand back plain
    strings, so both shapes are accepted.

    Example:
        >>> from enum import Enum
        >>> class State(str, Enum):
        ...     ENABLED = "Enabled"
        >>> enum_text(State.ENABLED), enum_text("Warned"), enum_text(None)
        ('Enabled', 'Warned', None)
    """
    if value is None:
        return None
    return str(getattr(value, "value", value))


__all__ = ["enum_text"]
