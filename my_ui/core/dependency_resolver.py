"""Dependency resolution over the registry's item graph"""

import logging
from typing import Iterable, List, Optional, Set

from ..models.registry import Registry, RegistryItem
from ..models.result import InstallEntry

logger = logging.getLogger(__name__)


def resolve_dependencies(registry: Registry,
                         item: RegistryItem,
                         resolved: Optional[Set[str]] = None) -> List[RegistryItem]:
    """
    Resolve the transitive dependencies of an item

    Dependencies come in post-order: every dependency precedes the items
    that need it. Names already in ``resolved`` are skipped, and each newly
    visited name is added to it before descending, so the same set can be
    shared across several calls of one batch and cyclic graphs terminate.

    Args:
        registry: Validated registry
        item: Item whose dependencies to resolve (not part of the result)
        resolved: Names already handled; updated in place

    Returns:
        Ordered list of dependency items, each at most once
    """
    if resolved is None:
        resolved = set()

    dependencies: List[RegistryItem] = []

    for dependency_name in item.dependencies:
        if dependency_name in resolved:
            continue
        resolved.add(dependency_name)

        dependency = registry.find_item(dependency_name)
        if dependency is None:
            # Unreachable for a validated registry
            logger.debug(f"Dependency {dependency_name} of {item.name} not in registry")
            continue

        dependencies.extend(resolve_dependencies(registry, dependency, resolved))
        dependencies.append(dependency)

    return dependencies


def build_install_plan(registry: Registry,
                       items: Iterable[RegistryItem]) -> List[InstallEntry]:
    """
    Order a batch of requested items together with their dependencies

    Args:
        registry: Validated registry
        items: Items requested by the user, in request order

    Returns:
        Install entries, dependencies before dependents, each name once
    """
    items = list(items)
    requested = {item.name for item in items}
    resolved: Set[str] = set()
    plan: List[InstallEntry] = []
    planned: Set[str] = set()

    def schedule(entry_item: RegistryItem) -> None:
        if entry_item.name in planned:
            return
        planned.add(entry_item.name)
        plan.append(InstallEntry(
            item=entry_item,
            is_dependency=entry_item.name not in requested
        ))

    for item in items:
        for dependency in resolve_dependencies(registry, item, resolved):
            schedule(dependency)
        schedule(item)

    logger.debug(
        f"Install plan: {', '.join(entry.name for entry in plan) or '(empty)'}"
    )
    return plan
