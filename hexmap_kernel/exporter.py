"""
JSON Layout Exporter.

Exports a Layout as the document the rendering layer reads.
Keys are camelCase; every asset carries its grid position and
every cluster its color and pixel centroid.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Optional

from .domain_types import Cluster, Layout, PositionedAsset
from .hashing import canonical_layout_hash


def layout_to_document(layout: Layout, layout_hash: Optional[str] = None) -> Dict[str, Any]:
    """
    layout_hash, when given, is used instead of recomputing the canonical hash.

    Output format:
    {
        "hexSize": float,
        "minGap": int,
        "bounds": {"minX", "minY", "maxX", "maxY", "width", "height"},
        "clusters": [{"id", "label", "domain", "color", "centroid",
                      "origin", "fallback", "assetIds", "assets"}, ...],
        "subClusters": {cluster_id: [{"subDomain", "assetIds", "centroid"}]},
        "layoutHash": str
    }
    """
    return {
        "hexSize": layout.hex_size,
        "minGap": layout.min_gap,
        "bounds": layout.bounds.to_dict(),
        "clusters": [_cluster_to_dict(c) for c in layout.clusters],
        "subClusters": {
            cluster_id: [
                {
                    "subDomain": s.sub_domain,
                    "assetIds": list(s.asset_ids),
                    "centroid": s.centroid.to_dict(),
                }
                for s in subs
            ]
            for cluster_id, subs in layout.sub_clusters.items()
        },
        "layoutHash": layout_hash or canonical_layout_hash(layout),
    }


def export_layout(layout: Layout, path: str) -> None:
    """Write layout_to_document(layout) to a JSON file."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump(layout_to_document(layout), f, ensure_ascii=True, indent=2)


def _cluster_to_dict(cluster: Cluster) -> Dict[str, Any]:
    return {
        "id": cluster.id,
        "label": cluster.label,
        "domain": cluster.domain,
        "color": cluster.color,
        "centroid": cluster.centroid.to_dict(),
        "origin": cluster.origin.to_dict(),
        "fallback": cluster.fallback,
        "assetIds": cluster.asset_ids,
        "assets": [_asset_to_dict(a) for a in cluster.assets],
    }


def _asset_to_dict(asset: PositionedAsset) -> Dict[str, Any]:
    doc: Dict[str, Any] = {
        "id": asset.id,
        "name": asset.name,
        "domain": asset.domain,
        "position": asset.position.to_dict(),
        "metadata": asset.metadata,
    }
    if asset.sub_domain:
        doc["subDomain"] = asset.sub_domain
    if asset.quality_score is not None:
        doc["qualityScore"] = asset.quality_score
    return doc
