"""
Hex Map Kernel — Layout Invariant Checks v1.0

Hard-fail validation of a produced Layout. Every check raises
LayoutInvariantError on failure.

Checks:
  INV-1 every entity placed exactly once
  INV-2 grid positions pairwise distinct
  INV-3 cross-cluster gap (fallback clusters exempt)
  INV-4 sub-cluster members belong to their parent cluster
  INV-5 bounds are the tight box around every hex footprint
"""

from __future__ import annotations

from collections import Counter
from typing import Dict, List, Optional, Sequence, Set

from .domain_types import AxialCoord, Entity, Layout
from .hex_geometry import hex_bounding_box, hex_disk

# Pixel slack allowed between stored and recomputed bounds edges.
BOUNDS_TOLERANCE = 1e-6


class LayoutInvariantError(Exception):
    """Raised when a produced Layout breaks a layout invariant."""

    def __init__(self, rule: str, detail: str) -> None:
        self.rule = rule
        self.detail = detail
        super().__init__(f"[INVARIANT:{rule}] {detail}")


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def validate_layout(
    layout: Layout,
    entities: Optional[Sequence[Entity]] = None,
) -> None:
    """
    Run all layout checks. Raises LayoutInvariantError on the first
    failure. INV-1 is skipped when `entities` is not given.
    """
    if entities is not None:
        _check_every_entity_placed(layout, entities)
    _check_unique_positions(layout)
    _check_cluster_gap(layout)
    _check_sub_cluster_membership(layout)
    _check_bounds(layout)


# ---------------------------------------------------------------------------
# Individual checks (private)
# ---------------------------------------------------------------------------

def _check_every_entity_placed(layout: Layout, entities: Sequence[Entity]) -> None:
    placed = Counter(a.id for a in layout.assets)
    expected = Counter(e.id for e in entities)
    if placed != expected:
        missing = sorted((expected - placed).keys())
        extra = sorted((placed - expected).keys())
        raise LayoutInvariantError(
            "INV-1",
            f"Placed assets do not match input entities "
            f"(missing={missing}, unexpected={extra})",
        )


def _check_unique_positions(layout: Layout) -> None:
    seen: Dict[AxialCoord, str] = {}
    for asset in layout.assets:
        other = seen.get(asset.position)
        if other is not None:
            raise LayoutInvariantError(
                "INV-2",
                f"Assets {other!r} and {asset.id!r} share hex "
                f"({asset.position.q}, {asset.position.r})",
            )
        seen[asset.position] = asset.id


def _check_cluster_gap(layout: Layout) -> None:
    owner: Dict[AxialCoord, str] = {}
    for cluster in layout.clusters:
        for pos in cluster.positions:
            owner[pos] = cluster.id

    fallback_ids = {c.id for c in layout.clusters if c.fallback}
    offsets = hex_disk(AxialCoord(0, 0), layout.min_gap - 1)

    for cluster in layout.clusters:
        if cluster.id in fallback_ids:
            continue
        for pos in cluster.positions:
            for off in offsets:
                near = owner.get(AxialCoord(pos.q + off.q, pos.r + off.r))
                if near is None or near == cluster.id or near in fallback_ids:
                    continue
                raise LayoutInvariantError(
                    "INV-3",
                    f"Clusters {cluster.id!r} and {near!r} are closer than "
                    f"min_gap={layout.min_gap} near ({pos.q}, {pos.r})",
                )


def _check_sub_cluster_membership(layout: Layout) -> None:
    members: Dict[str, Set[str]] = {c.id: set(c.asset_ids) for c in layout.clusters}
    for cluster_id, subs in layout.sub_clusters.items():
        if cluster_id not in members:
            raise LayoutInvariantError(
                "INV-4", f"Sub-clusters reference unknown cluster {cluster_id!r}",
            )
        for sub in subs:
            stray: List[str] = [a for a in sub.asset_ids if a not in members[cluster_id]]
            if stray:
                raise LayoutInvariantError(
                    "INV-4",
                    f"Sub-cluster {sub.sub_domain!r} of {cluster_id!r} "
                    f"lists foreign assets {stray}",
                )


def _check_bounds(layout: Layout) -> None:
    expected = hex_bounding_box((a.position for a in layout.assets), layout.hex_size)
    b = layout.bounds
    edges = (
        (b.min_x, expected.min_x),
        (b.min_y, expected.min_y),
        (b.max_x, expected.max_x),
        (b.max_y, expected.max_y),
    )
    if any(abs(actual - want) > BOUNDS_TOLERANCE for actual, want in edges):
        raise LayoutInvariantError(
            "INV-5",
            f"Bounds {b.to_dict()} are not the tight hex footprint box "
            f"{expected.to_dict()}",
        )
