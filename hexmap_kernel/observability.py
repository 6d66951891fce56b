"""
Observability — In-process layout timing.

No external dependencies. Uses compute_layout_diagnostics + timing.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from .diagnostics import compute_layout_diagnostics
from .domain_types import Entity, Layout, LayoutConfig
from .hashing import canonical_layout_hash
from .layout import build_layout


@dataclass(frozen=True)
class LayoutMetrics:
    """Snapshot of one timed layout run."""

    layout_latency_ms: float
    entity_count: int
    cluster_count: int
    fallback_count: int
    layout_hash: str
    warnings: list
    diagnostics: dict


def timed_build_layout(
    entities: Sequence[Entity],
    config: Optional[LayoutConfig] = None,
) -> Tuple[Layout, LayoutMetrics]:
    """Run build_layout and measure it."""
    start = time.perf_counter()
    layout = build_layout(entities, config)
    elapsed_ms = (time.perf_counter() - start) * 1000.0

    diagnostics = compute_layout_diagnostics(layout)
    metrics = LayoutMetrics(
        layout_latency_ms=round(elapsed_ms, 2),
        entity_count=diagnostics["asset_count"],
        cluster_count=diagnostics["cluster_count"],
        fallback_count=len(diagnostics["fallback_clusters"]),
        layout_hash=canonical_layout_hash(layout),
        warnings=diagnostics["warnings"],
        diagnostics=diagnostics,
    )
    return layout, metrics
