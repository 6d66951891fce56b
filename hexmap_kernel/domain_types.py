"""
Hex Map Kernel — Core Domain Types v1.0

Pure data. No placement logic.
Axial coordinates are integers; pixel values are floats.

────────────────────────────────────────────────
DOMAIN GLOSSARY
────────────────────────────────────────────────

Axial coordinate:
    (q, r) address of a hex cell. Implicit cube s = -q - r.

Spiral packing:
    The first k cells visited by an outward ring-by-ring walk
    from a center cell.

Gap:
    Minimum hex distance allowed between cells of two clusters.

────────────────────────────────────────────────
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .constants import HEX_SIZE, MAX_SEARCH_RADIUS, MIN_CLUSTER_GAP


# ── Coordinates ───────────────────────────────────────────────

@dataclass(frozen=True)
class AxialCoord:
    """Integer axial hex coordinate. Hashable, usable as a set member."""

    q: int
    r: int

    @property
    def s(self) -> int:
        return -self.q - self.r

    def to_dict(self) -> dict:
        return {"q": self.q, "r": self.r}


@dataclass(frozen=True)
class PixelCoord:
    """Cartesian position in pixel space."""

    x: float
    y: float

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y}


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned pixel rectangle. Zero box when nothing is placed."""

    min_x: float = 0.0
    min_y: float = 0.0
    max_x: float = 0.0
    max_y: float = 0.0

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    def contains(self, x: float, y: float, tolerance: float = 1e-9) -> bool:
        return (
            self.min_x - tolerance <= x <= self.max_x + tolerance
            and self.min_y - tolerance <= y <= self.max_y + tolerance
        )

    def to_dict(self) -> dict:
        return {
            "minX": self.min_x,
            "minY": self.min_y,
            "maxX": self.max_x,
            "maxY": self.max_y,
            "width": self.width,
            "height": self.height,
        }


# ── Input ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class Entity:
    """
    A discovered entity as supplied by the catalog.

    domain: empty string means "unassigned" and is grouped under OTHER_DOMAIN.
    quality_score: optional 0..100.
    """

    id: str
    name: str
    domain: str = ""
    sub_domain: Optional[str] = None
    quality_score: Optional[float] = None
    metadata: Dict[str, Any] = field(default_factory=dict)


# ── Output ────────────────────────────────────────────────────

@dataclass(frozen=True)
class PositionedAsset:
    """An Entity with its resolved domain and assigned grid cell."""

    id: str
    name: str
    domain: str
    position: AxialCoord
    sub_domain: Optional[str] = None
    quality_score: Optional[float] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_entity(
        cls, entity: Entity, domain: str, position: AxialCoord,
    ) -> "PositionedAsset":
        return cls(
            id=entity.id,
            name=entity.name,
            domain=domain,
            position=position,
            sub_domain=entity.sub_domain,
            quality_score=entity.quality_score,
            metadata=dict(entity.metadata),
        )


@dataclass(frozen=True)
class Cluster:
    """
    One placed domain.

    id: CLUSTER_ID_PREFIX + domain (deterministic, no counter).
    origin: spiral center the assets were packed around.
    fallback: True when the ring search was exhausted and the
        cluster was parked at the fallback origin. The gap
        guarantee does not apply to such clusters.
    """

    id: str
    label: str
    domain: str
    color: str
    assets: tuple[PositionedAsset, ...]
    centroid: PixelCoord
    origin: AxialCoord = AxialCoord(0, 0)
    fallback: bool = False

    @property
    def asset_ids(self) -> List[str]:
        return [a.id for a in self.assets]

    @property
    def positions(self) -> List[AxialCoord]:
        return [a.position for a in self.assets]


@dataclass(frozen=True)
class SubCluster:
    sub_domain: str
    asset_ids: tuple[str, ...]
    centroid: PixelCoord


@dataclass(frozen=True)
class Layout:
    clusters: list[Cluster]
    sub_clusters: dict[str, list[SubCluster]]  # cluster id → sub-clusters
    hex_size: float
    bounds: BoundingBox
    min_gap: int = MIN_CLUSTER_GAP

    @property
    def assets(self) -> List[PositionedAsset]:
        return [a for c in self.clusters for a in c.assets]


# ── Configuration ─────────────────────────────────────────────

@dataclass(frozen=True)
class LayoutConfig:
    """
    Per-run layout parameters. Defaults reproduce the fixed
    constants; override only when a caller needs a different grid.
    """

    hex_size: float = HEX_SIZE
    min_gap: int = MIN_CLUSTER_GAP
    max_search_radius: int = MAX_SEARCH_RADIUS

    def __post_init__(self) -> None:
        if not self.hex_size > 0:
            raise ValueError(f"hex_size must be positive, got {self.hex_size!r}")
        if self.min_gap < 1:
            raise ValueError(f"min_gap must be >= 1, got {self.min_gap!r}")
        if self.max_search_radius < 0:
            raise ValueError(
                f"max_search_radius must be >= 0, got {self.max_search_radius!r}"
            )
