"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

# Azure services
from ..adapters.azure import (
    apply_context,
    build_credential,
    check_prerequisites,
    find_resource,
    list_role_assignments,
    resolve_principal,
    set_host_key,
)

# Configuration services
from ..adapters.config import get_config, locate_config, read_config

# Logging services
from ..adapters.logging import init_logging

# Static conformance assertions - pyright verifies that each adapter function
# structurally satisfies its corresponding Protocol at type-check time.
if TYPE_CHECKING:
    from ..adapters.memory.azure import AzureSpy
    from ..application.ports import (
        ApplyContext,
        BuildCredential,
        CheckPrerequisites,
        FindResource,
        GetConfig,
        InitLogging,
        ListRoleAssignments,
        LocateConfig,
        ReadConfig,
        ResolvePrincipal,
        SetHostKey,
    )

    _assert_get_config: GetConfig = get_config
    _assert_init_logging: InitLogging = init_logging
    _assert_locate_config: LocateConfig = locate_config
    _assert_read_config: ReadConfig = read_config
    _assert_build_credential: BuildCredential = build_credential
    _assert_apply_context: ApplyContext = apply_context
    _assert_set_host_key: SetHostKey = set_host_key
    _assert_find_resource: FindResource = find_resource
    _assert_resolve_principal: ResolvePrincipal = resolve_principal
    _assert_list_role_assignments: ListRoleAssignments = list_role_assignments
    _assert_check_prerequisites: CheckPrerequisites = check_prerequisites


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    init_logging: InitLogging
    locate_config: LocateConfig
    read_config: ReadConfig
    build_credential: BuildCredential
    apply_context: ApplyContext
    set_host_key: SetHostKey
    find_resource: FindResource
    resolve_principal: ResolvePrincipal
    list_role_assignments: ListRoleAssignments
    check_prerequisites: CheckPrerequisites


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        get_config=get_config,
        init_logging=init_logging,
        locate_config=locate_config,
        read_config=read_config,
        build_credential=build_credential,
        apply_context=apply_context,
        set_host_key=set_host_key,
        find_resource=find_resource,
        resolve_principal=resolve_principal,
        list_role_assignments=list_role_assignments,
        check_prerequisites=check_prerequisites,
    )


def build_testing(*, spy: AzureSpy | None = None) -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Config documents are still located and read from the real filesystem,
    so tests drive them through ``tmp_path``; every Azure call goes to the spy.

    Args:
        spy: Optional seeded AzureSpy. A fresh one is created when None.

    Returns:
        AppServices container with in-memory adapters.
    """
    from ..adapters.memory import AzureSpy, get_config_in_memory, init_logging_in_memory

    azure = spy if spy is not None else AzureSpy()

    return AppServices(
        get_config=get_config_in_memory,
        init_logging=init_logging_in_memory,
        locate_config=locate_config,
        read_config=read_config,
        build_credential=azure.build_credential,
        apply_context=azure.apply_context,
        set_host_key=azure.set_host_key,
        find_resource=azure.find_resource,
        resolve_principal=azure.resolve_principal,
        list_role_assignments=azure.list_role_assignments,
        check_prerequisites=azure.check_prerequisites,
    )


__all__ = [
    "AppServices",
    "build_production",
    "build_testing",
]
