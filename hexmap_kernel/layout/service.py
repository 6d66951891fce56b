"""
Cluster Layout Service v1.0

Orchestrates the layout pipeline:
  grouping → population ordering → placement → cluster assembly
  → sub-clustering → global bounds

Pure function of (entities, config). Nothing is cached and no
state survives the call, so concurrent callers need no locking.
The input list is never mutated.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from ..colors import assign_colors
from ..domain_types import Cluster, Entity, Layout, LayoutConfig, SubCluster
from .assembly import build_cluster, build_sub_clusters, compute_layout_bounds
from .grouping import group_by_domain, order_domains
from .placement import place_clusters


def build_layout(
    entities: Sequence[Entity],
    config: Optional[LayoutConfig] = None,
) -> Layout:
    """
    Place every entity on the hex grid, grouped by domain.

    Never raises for a valid (possibly empty) entity list.
    Identical input order → identical Layout.
    """
    if config is None:
        config = LayoutConfig()

    groups = group_by_domain(entities)
    # Colors follow first-seen domain order, not placement order.
    colors = assign_colors(list(groups))
    ordered = order_domains(groups)

    placements = place_clusters(
        ordered,
        min_gap=config.min_gap,
        max_search_radius=config.max_search_radius,
    )

    clusters: List[Cluster] = []
    sub_clusters: Dict[str, List[SubCluster]] = {}
    for placement, (domain, members) in zip(placements, ordered):
        cluster = build_cluster(placement, members, colors[domain], config.hex_size)
        clusters.append(cluster)

        subs = build_sub_clusters(cluster, config.hex_size)
        if subs:
            sub_clusters[cluster.id] = subs

    return Layout(
        clusters=clusters,
        sub_clusters=sub_clusters,
        hex_size=config.hex_size,
        bounds=compute_layout_bounds(clusters, config.hex_size),
        min_gap=config.min_gap,
    )
