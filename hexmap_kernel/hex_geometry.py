"""
Hex Geometry — Flat-Top Axial Coordinate System

Pure coordinate math. No state, no logging, no errors raised.
Degenerate inputs (radius 0, count 0, empty lists) return
trivial results.

Conventions:
  - Flat-top orientation: corners start at 0°, neighbours in
    DIRECTIONS order.
  - size = circumradius (center → corner) in pixels.
  - Footprint of one hex: ±size horizontally, ±(√3/2)·size vertically.
"""

from __future__ import annotations

import math
from itertools import islice
from typing import Iterable, Iterator, List

from .domain_types import AxialCoord, BoundingBox, PixelCoord


SQRT3: float = math.sqrt(3.0)

DIRECTIONS: tuple[AxialCoord, ...] = (
    AxialCoord(1, 0),
    AxialCoord(1, -1),
    AxialCoord(0, -1),
    AxialCoord(-1, 0),
    AxialCoord(-1, 1),
    AxialCoord(0, 1),
)

# Rings start at center + DIRECTIONS[RING_START] * radius, then walk
# DIRECTIONS[0..5] for `radius` steps each.
RING_START: int = 4


# ── Pixel Conversion ──────────────────────────────────────────

def hex_to_pixel(q: int, r: int, size: float) -> PixelCoord:
    """Center of hex (q, r) in pixel space. (0, 0) maps to (0, 0)."""
    x = size * (1.5 * q)
    y = size * (SQRT3 / 2.0 * q + SQRT3 * r)
    return PixelCoord(x, y)


def pixel_to_hex(x: float, y: float, size: float) -> AxialCoord:
    """Hex containing pixel (x, y)."""
    q = (2.0 / 3.0 * x) / size
    r = (-1.0 / 3.0 * x + SQRT3 / 3.0 * y) / size
    return hex_round(q, r)


def hex_round(q: float, r: float) -> AxialCoord:
    """
    Cube rounding of fractional axial coordinates.

    Round q, r, s independently, then rebuild whichever component
    drifted furthest from the other two so q + r + s == 0 holds.
    """
    s = -q - r
    rq = round(q)
    rr = round(r)
    rs = round(s)

    dq = abs(rq - q)
    dr = abs(rr - r)
    ds = abs(rs - s)

    if dq > dr and dq > ds:
        rq = -rr - rs
    elif dr > ds:
        rr = -rq - rs
    return AxialCoord(int(rq), int(rr))


def hex_corners(cx: float, cy: float, size: float) -> List[PixelCoord]:
    """Six corner points of a flat-top hex centered at (cx, cy)."""
    corners: List[PixelCoord] = []
    for i in range(6):
        angle = math.radians(60 * i)
        corners.append(PixelCoord(
            cx + size * math.cos(angle),
            cy + size * math.sin(angle),
        ))
    return corners


# ── Neighbours & Distance ─────────────────────────────────────

def hex_neighbors(q: int, r: int) -> List[AxialCoord]:
    return [AxialCoord(q + d.q, r + d.r) for d in DIRECTIONS]


def hex_distance(a: AxialCoord, b: AxialCoord) -> int:
    dq = a.q - b.q
    dr = a.r - b.r
    return (abs(dq) + abs(dq + dr) + abs(dr)) // 2


# ── Rings, Disks, Spirals ─────────────────────────────────────

def hex_ring(center: AxialCoord, radius: int) -> List[AxialCoord]:
    """
    All hexes at exactly `radius` from center.
    6 * radius entries; [center] for radius 0; [] for negative radius.
    """
    if radius < 0:
        return []
    if radius == 0:
        return [center]

    start = DIRECTIONS[RING_START]
    q = center.q + start.q * radius
    r = center.r + start.r * radius

    results: List[AxialCoord] = []
    for side in range(6):
        step = DIRECTIONS[side]
        for _ in range(radius):
            results.append(AxialCoord(q, r))
            q += step.q
            r += step.r
    return results


def hex_disk(center: AxialCoord, radius: int) -> List[AxialCoord]:
    """Rings 0..radius concatenated. 3 * radius * (radius + 1) + 1 entries."""
    results: List[AxialCoord] = []
    for k in range(radius + 1):
        results.extend(hex_ring(center, k))
    return results


def iter_spiral(center: AxialCoord) -> Iterator[AxialCoord]:
    """Unbounded ring-by-ring walk outward from center."""
    ring = 0
    while True:
        yield from hex_ring(center, ring)
        ring += 1


def hex_spiral(center: AxialCoord, count: int) -> List[AxialCoord]:
    """Exactly `count` hexes, ring 0 first. First entry is center."""
    if count <= 0:
        return []
    return list(islice(iter_spiral(center), count))


def spiral_radius(count: int) -> int:
    """Outermost ring touched by hex_spiral(center, count). 0 for count <= 1."""
    radius = 0
    while 3 * radius * (radius + 1) + 1 < count:
        radius += 1
    return radius


# ── Bounds & Hit Testing ──────────────────────────────────────

def hex_bounding_box(coords: Iterable[AxialCoord], size: float) -> BoundingBox:
    """
    Minimal box around the full footprint of every hex.
    Zero box for an empty input.
    """
    half_w = size
    half_h = SQRT3 / 2.0 * size

    min_x = min_y = math.inf
    max_x = max_y = -math.inf
    seen = False
    for c in coords:
        seen = True
        p = hex_to_pixel(c.q, c.r, size)
        min_x = min(min_x, p.x - half_w)
        max_x = max(max_x, p.x + half_w)
        min_y = min(min_y, p.y - half_h)
        max_y = max(max_y, p.y + half_h)

    if not seen:
        return BoundingBox()
    return BoundingBox(min_x=min_x, min_y=min_y, max_x=max_x, max_y=max_y)


def point_in_hex(px: float, py: float, cx: float, cy: float, size: float) -> bool:
    """
    Half-plane test against a flat-top hex centered at (cx, cy).
    Points on the boundary count as inside.
    """
    dx = abs(px - cx)
    dy = abs(py - cy)
    half_h = SQRT3 / 2.0 * size
    if dx > size or dy > half_h:
        return False
    # Slanted edge from (size, 0) to (size / 2, half_h).
    return 2.0 * half_h * dx + size * dy <= 2.0 * half_h * size + 1e-9
