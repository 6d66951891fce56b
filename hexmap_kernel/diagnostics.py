"""
Hex Map Kernel — Layout Diagnostics v1.0

Compute a diagnostic snapshot of a produced Layout.
"""

from __future__ import annotations

from .colors import DOMAIN_PALETTE
from .constants import OTHER_DOMAIN
from .domain_types import Layout


def compute_layout_diagnostics(layout: Layout) -> dict:
    """Return a diagnostic dict summarising layout health."""
    asset_count = sum(len(c.assets) for c in layout.clusters)
    sub_cluster_count = sum(len(s) for s in layout.sub_clusters.values())
    fallback = [c.id for c in layout.clusters if c.fallback]
    with_sub = sum(1 for a in layout.assets if a.sub_domain and a.sub_domain.strip())

    largest = None
    if layout.clusters:
        top = max(layout.clusters, key=lambda c: len(c.assets))
        largest = {"id": top.id, "asset_count": len(top.assets)}

    warnings: list[str] = []

    if fallback:
        warnings.append(
            f"{len(fallback)} cluster(s) placed at fallback origin: "
            f"{', '.join(fallback)}"
        )
    if len(layout.clusters) > len(DOMAIN_PALETTE):
        warnings.append(
            f"{len(layout.clusters)} domains exceed the "
            f"{len(DOMAIN_PALETTE)}-color palette, colors repeat"
        )
    other = [c for c in layout.clusters if c.domain == OTHER_DOMAIN]
    if other:
        warnings.append(
            f"{len(other[0].assets)} asset(s) without a domain grouped as {OTHER_DOMAIN!r}"
        )

    return {
        "cluster_count": len(layout.clusters),
        "asset_count": asset_count,
        "sub_cluster_count": sub_cluster_count,
        "sub_domain_coverage": with_sub,
        "largest_cluster": largest,
        "fallback_clusters": fallback,
        "bounds": {
            "width": layout.bounds.width,
            "height": layout.bounds.height,
        },
        "warnings": warnings,
    }
