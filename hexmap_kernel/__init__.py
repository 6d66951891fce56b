"""
Hex Map Kernel v1.0
Deterministic, in-memory hex-grid layout of domain clusters.
Axial coordinates are integers; pixel values are floats.
"""

from .domain_types import (
    AxialCoord, PixelCoord, BoundingBox, Entity, PositionedAsset,
    Cluster, SubCluster, Layout, LayoutConfig,
)
from .hex_geometry import (
    hex_to_pixel,
    pixel_to_hex,
    hex_round,
    hex_corners,
    hex_neighbors,
    hex_distance,
    hex_ring,
    hex_disk,
    hex_spiral,
    spiral_radius,
    hex_bounding_box,
    point_in_hex,
)
from .colors import DOMAIN_PALETTE, domain_color, assign_colors, shade_variant
from .layout import build_layout
from .catalog import (
    EntityValidationError,
    validate_entities,
    resolve_domain,
    entity_from_record,
    entities_from_records,
)
from .invariants import LayoutInvariantError, validate_layout
from .hashing import canonical_layout_serialize, canonical_layout_hash
from .diagnostics import compute_layout_diagnostics
from .exporter import layout_to_document, export_layout
from .constants import (
    HEX_SIZE,
    MIN_CLUSTER_GAP,
    MAX_SEARCH_RADIUS,
    OTHER_DOMAIN,
    CLUSTER_ID_PREFIX,
)

__all__ = [
    "AxialCoord",
    "PixelCoord",
    "BoundingBox",
    "Entity",
    "PositionedAsset",
    "Cluster",
    "SubCluster",
    "Layout",
    "LayoutConfig",
    "hex_to_pixel",
    "pixel_to_hex",
    "hex_round",
    "hex_corners",
    "hex_neighbors",
    "hex_distance",
    "hex_ring",
    "hex_disk",
    "hex_spiral",
    "spiral_radius",
    "hex_bounding_box",
    "point_in_hex",
    "DOMAIN_PALETTE",
    "domain_color",
    "assign_colors",
    "shade_variant",
    "build_layout",
    "EntityValidationError",
    "validate_entities",
    "resolve_domain",
    "entity_from_record",
    "entities_from_records",
    "LayoutInvariantError",
    "validate_layout",
    "canonical_layout_serialize",
    "canonical_layout_hash",
    "compute_layout_diagnostics",
    "layout_to_document",
    "export_layout",
    "HEX_SIZE",
    "MIN_CLUSTER_GAP",
    "MAX_SEARCH_RADIUS",
    "OTHER_DOMAIN",
    "CLUSTER_ID_PREFIX",
]
