"""Prerequisite checks for the Azure SDK distributions the toolkit calls.

Installation is left to pip; this only reports what is present so the
operator can fix the environment explicitly. Nothing here touches
environment variables or ``sys.path``.
"""

from __future__ import annotations

from importlib import metadata
from typing import Final

from aztoolkit.domain.models import PrerequisiteCheck

#: Distributions needed for the remote operations.
REQUIRED_DISTRIBUTIONS: Final[tuple[str, ...]] = (
    "azure-identity",
    "azure-mgmt-resource",
    "azure-mgmt-authorization",
    "azure-mgmt-web",
    "httpx",
)


def _installed_version(name: str) -> str | None:
    try:
        return metadata.version(name)
    except metadata.PackageNotFoundError:
        return None


def check_prerequisites() -> list[PrerequisiteCheck]:
    """Check every required distribution, in declaration order."""
    results: list[PrerequisiteCheck] = []
    for name in REQUIRED_DISTRIBUTIONS:
        version = _installed_version(name)
        results.append(
            PrerequisiteCheck(
                name=name,
                found=version is not None,
                version=version,
                install_hint=f"pip install --upgrade {name}",
            )
        )
    return results


def format_prerequisites_report(results: list[PrerequisiteCheck]) -> str:
    """Format check results as a human-readable summary.

    Example:
        >>> print(format_prerequisites_report([PrerequisiteCheck("httpx", True, "0.27.0")]))
        Prerequisites:
          ✓ httpx 0.27.0
    """
    lines = ["Prerequisites:"]
    for check in results:
        if check.found:
            lines.append(f"  ✓ {check.name} {check.version}")
        else:
            lines.append(f"  ✗ {check.name} not installed")
            lines.append(f"      Install: {check.install_hint}")
    return "\n".join(lines)


__all__ = [
    "REQUIRED_DISTRIBUTIONS",
    "check_prerequisites",
    "format_prerequisites_report",
]
