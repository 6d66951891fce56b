"""
Catalog Boundary — Entity Validation + Domain Resolution

Everything here runs BEFORE build_layout:
  - validate_entities rejects malformed input (missing id/name,
    duplicate ids). The layout engine assumes both were checked.
  - resolve_domain is the caller-side policy that derives a domain
    for catalog rows that carry none. The engine itself only
    defaults an empty domain to OTHER_DOMAIN.

Resolution priority:
  explicit domain > metadata["category"] > capitalised tag
  > node type > OTHER_DOMAIN
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Sequence, Set

from .constants import OTHER_DOMAIN
from .domain_types import Entity


class EntityValidationError(ValueError):
    """Raised when an entity is unusable as layout input."""

    def __init__(self, entity_id: str, detail: str) -> None:
        self.entity_id = entity_id
        self.detail = detail
        super().__init__(f"[ENTITY:{entity_id}] {detail}")


TYPE_TO_DOMAIN: Dict[str, str] = {
    "database_server": "Data Layer",
    "database": "Data Layer",
    "table": "Data Layer",
    "cache_server": "Data Layer",
    "web_service": "Web / API",
    "api_endpoint": "Web / API",
    "message_broker": "Messaging",
    "queue": "Messaging",
    "topic": "Messaging",
    "host": "Infrastructure",
    "container": "Infrastructure",
    "pod": "Infrastructure",
    "k8s_cluster": "Infrastructure",
    "config_file": "Infrastructure",
    "saas_tool": "SaaS Tools",
}


# ── Validation ────────────────────────────────────────────────

def validate_entities(entities: Sequence[Entity]) -> None:
    """Hard fail on the first entity without id/name or with a repeated id."""
    seen: Set[str] = set()
    for idx, entity in enumerate(entities):
        if not entity.id:
            raise EntityValidationError(f"#{idx}", "missing id")
        if not entity.name:
            raise EntityValidationError(entity.id, "missing name")
        if entity.id in seen:
            raise EntityValidationError(entity.id, "duplicate id")
        if entity.quality_score is not None and not 0 <= entity.quality_score <= 100:
            raise EntityValidationError(
                entity.id,
                f"quality_score {entity.quality_score!r} outside 0..100",
            )
        seen.add(entity.id)


# ── Domain Resolution ─────────────────────────────────────────

def resolve_domain(record: Mapping[str, Any]) -> str:
    """Derive a domain for one catalog row."""
    domain = record.get("domain")
    if domain:
        return domain

    metadata = record.get("metadata") or {}
    category = metadata.get("category")
    if isinstance(category, str) and category:
        return category

    for tag in record.get("tags") or []:
        if len(tag) > 2 and tag[0] == tag[0].upper():
            return tag

    return TYPE_TO_DOMAIN.get(record.get("type", ""), OTHER_DOMAIN)


def entity_from_record(record: Mapping[str, Any]) -> Entity:
    """
    Build an Entity from a catalog row.

    quality_score falls back to round(confidence * 100) when the row
    has a confidence but no explicit score.
    """
    quality = record.get("quality_score")
    if quality is None and record.get("confidence") is not None:
        quality = round(record["confidence"] * 100)

    return Entity(
        id=record.get("id", ""),
        name=record.get("name", ""),
        domain=resolve_domain(record),
        sub_domain=record.get("sub_domain") or None,
        quality_score=quality,
        metadata=dict(record.get("metadata") or {}),
    )


def entities_from_records(records: Iterable[Mapping[str, Any]]) -> List[Entity]:
    return [entity_from_record(r) for r in records]
