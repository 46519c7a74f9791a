"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations

from pathlib import Path


class ConfigurationError(Exception):
    """Base class for configuration document failures.

    Caught at the CLI boundary and translated into an exit code; the message
    is shown to the operator unchanged.

    Example:
        >>> err = ConfigurationError("bad config")
        >>> str(err)
        'bad config'
    """


class ConfigNotFoundError(ConfigurationError):
    """A named configuration file does not exist at its conventional path.

    Attributes:
        path: The path that was attempted.

    Example:
        >>> err = ConfigNotFoundError(Path("/scripts/Connect-AzToolkit.prod.json"))
        >>> str(err)
        'Configuration file not found: /scripts/Connect-AzToolkit.prod.json'
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Configuration file not found: {path}")


class ConfigParseError(ConfigurationError):
    """A configuration file could not be decoded.

    Attributes:
        path: The offending file.
        reason: The underlying decoder message.

    Example:
        >>> err = ConfigParseError(Path("x.json"), "unexpected character")
        >>> str(err)
        'Failed to parse configuration file x.json: unexpected character'
    """

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to parse configuration file {path}: {reason}")


class MissingRequiredFieldError(ConfigurationError):
    """A required value is absent after merging explicit input and config.

    Attributes:
        field: Dotted config key of the missing value (e.g. ``lookup.resourceName``).
        option: CLI flag that would supply it, when one exists.

    Example:
        >>> str(MissingRequiredFieldError("lookup.resourceName", "--resource-name"))
        'Missing required value lookup.resourceName (pass --resource-name or set it in the config file)'
    """

    def __init__(self, field: str, option: str | None = None) -> None:
        self.field = field
        self.option = option
        hint = f"pass {option} or set it in the config file" if option else "set it in the config file"
        super().__init__(f"Missing required value {field} ({hint})")


class ResourceLookupError(LookupError):
    """A resource lookup matched no resource or more than one.

    Example:
        >>> str(ResourceLookupError("No resource named 'kv1' found"))
        "No resource named 'kv1' found"
    """


__all__ = [
    "ConfigNotFoundError",
    "ConfigParseError",
    "ConfigurationError",
    "MissingRequiredFieldError",
    "ResourceLookupError",
]
