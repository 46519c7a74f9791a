"""Domain layer - pure logic with no I/O or framework dependencies.

Contents:
    * :mod:`.document` - Parsed config document and precedence merge
    * :mod:`.parameters` - Field declarations and resolved parameter sets
    * :mod:`.models` - Records exchanged with the Azure adapters
    * :mod:`.enums` - Domain enumerations
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .document import ConfigDocument, is_present, merge_value
from .enums import AssignmentKind, ConfigProfile, OutputFormat
from .errors import (
    ConfigNotFoundError,
    ConfigParseError,
    ConfigurationError,
    MissingRequiredFieldError,
    ResourceLookupError,
)
from .models import (
    AzureContext,
    ClassifiedAssignment,
    HostKeyResult,
    PrerequisiteCheck,
    PrincipalRef,
    ResourceRef,
    RoleAssignment,
    classify_assignments,
    classify_scope,
)
from .parameters import (
    ContextParameters,
    HostKeyParameters,
    RoleLookupParameters,
    resolve_context_parameters,
    resolve_host_key_parameters,
    resolve_role_lookup_parameters,
)

__all__ = [
    # Document
    "ConfigDocument",
    "is_present",
    "merge_value",
    # Parameters
    "ContextParameters",
    "HostKeyParameters",
    "RoleLookupParameters",
    "resolve_context_parameters",
    "resolve_host_key_parameters",
    "resolve_role_lookup_parameters",
    # Models
    "AzureContext",
    "ClassifiedAssignment",
    "HostKeyResult",
    "PrerequisiteCheck",
    "PrincipalRef",
    "ResourceRef",
    "RoleAssignment",
    "classify_assignments",
    "classify_scope",
    # Enums
    "AssignmentKind",
    "ConfigProfile",
    "OutputFormat",
    # Errors
    "ConfigNotFoundError",
    "ConfigParseError",
    "ConfigurationError",
    "MissingRequiredFieldError",
    "ResourceLookupError",
]
