"""
Cluster Layout Layer v1.0

Pipeline:
  Grouping   — partition by domain, order by population
  Placement  — expanding-ring search on a shared hex grid
  Assembly   — clusters, centroids, sub-clusters, bounds
"""

from .assembly import (
    build_cluster,
    build_sub_clusters,
    compute_centroid,
    compute_layout_bounds,
    make_cluster_id,
)
from .grouping import group_by_domain, order_domains, resolve_group_domain
from .placement import (
    OccupancyGrid,
    Placement,
    fallback_origin,
    find_free_origin,
    place_clusters,
)
from .service import build_layout

__all__ = [
    # Types
    "OccupancyGrid",
    "Placement",
    # Pipeline
    "build_layout",
    "group_by_domain",
    "order_domains",
    "resolve_group_domain",
    "place_clusters",
    "find_free_origin",
    "fallback_origin",
    "build_cluster",
    "build_sub_clusters",
    "compute_centroid",
    "compute_layout_bounds",
    "make_cluster_id",
]
