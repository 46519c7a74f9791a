"""Parsed configuration document and the precedence merge over it.

A document is the JSON tree read from ``<Prefix>.<Name>.json``. It is never
mutated after parsing. Values are looked up by section path and key, and
every lookup degrades to ``None`` instead of raising when a section is
missing or is not an object.

Contents:
    * :class:`ConfigDocument` - Immutable parsed document with optional lookups.
    * :func:`is_present` - Emptiness rule shared by every merge.
    * :func:`merge_value` - Explicit value, then primary key, then alias key.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

SectionPath = str | Sequence[str]
"""Dotted string (``"context"``, ``"a.b"``) or sequence of section names."""


def _split_section_path(section_path: SectionPath) -> tuple[str, ...]:
    if isinstance(section_path, str):
        return tuple(part for part in section_path.split(".") if part)
    return tuple(section_path)


def _empty_mapping() -> Mapping[str, Any]:
    return {}


@dataclass(frozen=True, slots=True)
class ConfigDocument:
    """Immutable parsed configuration document.

    Attributes:
        data: Top-level JSON object.
        path: File the document was read from, when there was one.

    Example:
        >>> doc = ConfigDocument({"context": {"subscriptionId": "S1"}})
        >>> doc.lookup("context", "subscriptionId")
        'S1'
        >>> doc.lookup("missing.section", "subscriptionId") is None
        True
    """

    data: Mapping[str, Any] = field(default_factory=_empty_mapping)
    path: Path | None = field(default=None, compare=False)

    def section(self, section_path: SectionPath) -> Mapping[str, Any] | None:
        """Return the object at ``section_path`` or ``None`` when absent or not an object.

        An empty section path returns the top-level object.
        """
        node: Any = self.data
        for part in _split_section_path(section_path):
            if not isinstance(node, Mapping):
                return None
            node = node.get(part)
        return node if isinstance(node, Mapping) else None

    def lookup(self, section_path: SectionPath, key: str) -> Any | None:
        """Return the value stored under ``section_path.key`` or ``None``."""
        section = self.section(section_path)
        if section is None:
            return None
        return section.get(key)


def is_present(value: Any) -> bool:
    """Return True when ``value`` counts as supplied.

    ``None``, blank strings and empty JSON objects or arrays are empty;
    ``False`` and ``0`` are values.

    Example:
        >>> [is_present(v) for v in (None, "", "  ", {}, [], "x", False, 0, ["a"])]
        [False, False, False, False, False, True, True, True, True]
    """
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    if isinstance(value, (Mapping, Sequence)):
        return len(value) > 0
    return True


def merge_value(
    explicit: Any,
    document: ConfigDocument | None,
    section_path: SectionPath,
    primary_key: str,
    alias_key: str | None = None,
) -> Any | None:
    """Resolve one logical field by precedence.

    Order: explicit value, ``section_path.primary_key`` in the document,
    ``section_path.alias_key`` in the document, then ``None``. Empty values
    at any level fall through to the next one.

    Args:
        explicit: Value supplied by the caller (CLI flag), possibly None.
        document: Parsed configuration, or None when no file was used.
        section_path: Section holding the field (``"context"``).
        primary_key: Current key name (``"subscriptionId"``).
        alias_key: Legacy key name accepted when the primary key is empty.

    Returns:
        The effective value or None.

    Example:
        >>> doc = ConfigDocument({"context": {"defaultSubscriptionId": "B"}})
        >>> merge_value(None, doc, "context", "subscriptionId", "defaultSubscriptionId")
        'B'
        >>> merge_value("explicit", doc, "context", "subscriptionId", "defaultSubscriptionId")
        'explicit'
    """
    if is_present(explicit):
        return explicit
    if document is None:
        return None
    primary = document.lookup(section_path, primary_key)
    if is_present(primary):
        return primary
    if alias_key is not None:
        alias = document.lookup(section_path, alias_key)
        if is_present(alias):
            return alias
    return None


__all__ = [
    "ConfigDocument",
    "SectionPath",
    "is_present",
    "merge_value",
]
