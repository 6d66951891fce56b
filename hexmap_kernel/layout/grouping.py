"""
Domain Grouping — Partition + Population Ordering

Pure functions over an ordered entity list.
Deterministic: dict insertion order = first-seen order,
and the population sort is stable.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Tuple

from ..constants import OTHER_DOMAIN
from ..domain_types import Entity


def resolve_group_domain(entity: Entity) -> str:
    """Domain used for grouping. Missing or blank → OTHER_DOMAIN."""
    domain = entity.domain
    if not domain or not domain.strip():
        return OTHER_DOMAIN
    return domain


def group_by_domain(entities: Iterable[Entity]) -> Dict[str, List[Entity]]:
    """
    domain → entities, in first-seen domain order.
    Entities keep their input order inside each group.
    """
    groups: Dict[str, List[Entity]] = {}
    for entity in entities:
        groups.setdefault(resolve_group_domain(entity), []).append(entity)
    return groups


def order_domains(
    groups: Dict[str, List[Entity]],
) -> List[Tuple[str, List[Entity]]]:
    """
    Largest group first. Ties keep first-seen order (sorted() is stable).
    """
    return sorted(groups.items(), key=lambda item: -len(item[1]))
