"""
Hex Map Kernel — Canonical Layout Hashing v1.0

Deterministic canonical serialization + SHA-256 hashing of a Layout.
Two runs over the same ordered input must hash identically.

Rules:
  - Clusters in placement order
  - Assets in cluster order; sub-clusters in first-seen order
  - Integer grid positions only; pixel floats are derived and left out
  - UTF-8 JSON, no whitespace, no float
"""

from __future__ import annotations

import hashlib
import json
from typing import Any, Dict, List

from .domain_types import Layout


def canonical_layout_serialize(layout: Layout) -> bytes:
    obj = _build_canonical_dict(layout)
    return json.dumps(obj, ensure_ascii=True, separators=(",", ":"), sort_keys=False).encode("utf-8")


def canonical_layout_hash(layout: Layout) -> str:
    """SHA-256 of canonical serialization. Lowercase hex string."""
    return hashlib.sha256(canonical_layout_serialize(layout)).hexdigest()


def _build_canonical_dict(layout: Layout) -> Dict[str, Any]:
    clusters: List[Dict[str, Any]] = []
    for c in layout.clusters:
        clusters.append({
            "id": c.id,
            "domain": c.domain,
            "color": c.color,
            "origin": [c.origin.q, c.origin.r],
            "fallback": c.fallback,
            "assets": [[a.id, a.position.q, a.position.r] for a in c.assets],
            "sub_clusters": [
                {"sub_domain": s.sub_domain, "asset_ids": list(s.asset_ids)}
                for s in layout.sub_clusters.get(c.id, [])
            ],
        })

    return {
        "layout_version": 1,
        # hex_size is a float; repr keeps it exact without a JSON float.
        "hex_size": repr(float(layout.hex_size)),
        "min_gap": layout.min_gap,
        "clusters": clusters,
    }
