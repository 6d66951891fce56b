"""
Cluster Assembly — Centroids, Sub-Clusters, Bounds

Turns placements into output records. Pixel math only;
no grid search happens here.
"""

from __future__ import annotations

from typing import Dict, List, Sequence

from ..constants import CLUSTER_ID_PREFIX
from ..domain_types import (
    AxialCoord,
    BoundingBox,
    Cluster,
    Entity,
    PixelCoord,
    PositionedAsset,
    SubCluster,
)
from ..hex_geometry import hex_bounding_box, hex_to_pixel
from .placement import Placement


def make_cluster_id(domain: str) -> str:
    return f"{CLUSTER_ID_PREFIX}{domain}"


def compute_centroid(positions: Sequence[AxialCoord], hex_size: float) -> PixelCoord:
    """Mean pixel center of the given hexes. (0, 0) for no hexes."""
    if not positions:
        return PixelCoord(0.0, 0.0)
    sx = 0.0
    sy = 0.0
    for pos in positions:
        p = hex_to_pixel(pos.q, pos.r, hex_size)
        sx += p.x
        sy += p.y
    n = len(positions)
    return PixelCoord(sx / n, sy / n)


def build_cluster(
    placement: Placement,
    members: Sequence[Entity],
    color: str,
    hex_size: float,
) -> Cluster:
    """Zip a group's entities with its placement, in entity order."""
    assets = tuple(
        PositionedAsset.from_entity(entity, placement.domain, position)
        for entity, position in zip(members, placement.positions)
    )
    return Cluster(
        id=make_cluster_id(placement.domain),
        label=placement.domain,
        domain=placement.domain,
        color=color,
        assets=assets,
        centroid=compute_centroid(placement.positions, hex_size),
        origin=placement.origin,
        fallback=placement.fallback,
    )


def build_sub_clusters(cluster: Cluster, hex_size: float) -> List[SubCluster]:
    """
    Group a cluster's assets by non-blank sub_domain, first-seen order.
    Assets without a sub_domain are left out. [] when none carry one.
    """
    by_sub: Dict[str, List[PositionedAsset]] = {}
    for asset in cluster.assets:
        if asset.sub_domain and asset.sub_domain.strip():
            by_sub.setdefault(asset.sub_domain, []).append(asset)

    return [
        SubCluster(
            sub_domain=sub_domain,
            asset_ids=tuple(a.id for a in assets),
            centroid=compute_centroid([a.position for a in assets], hex_size),
        )
        for sub_domain, assets in by_sub.items()
    ]


def compute_layout_bounds(clusters: Sequence[Cluster], hex_size: float) -> BoundingBox:
    """Footprint box over every placed hex. Zero box when nothing is placed."""
    return hex_bounding_box(
        (a.position for c in clusters for a in c.assets), hex_size,
    )
