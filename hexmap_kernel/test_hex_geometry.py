"""
Hex Geometry — Tests

Covers:
  - hex_to_pixel / pixel_to_hex round trip
  - Cube rounding
  - Corners on the circumradius
  - Neighbours, distance symmetry
  - Ring / disk / spiral cardinality and ordering
  - Bounding box footprint
  - Point-in-hex containment

Run:  py -3 -m hexmap_kernel.test_hex_geometry
"""

from __future__ import annotations

import math
import sys

from hexmap_kernel.domain_types import AxialCoord
from hexmap_kernel.hex_geometry import (
    DIRECTIONS,
    SQRT3,
    hex_bounding_box,
    hex_corners,
    hex_disk,
    hex_distance,
    hex_neighbors,
    hex_ring,
    hex_round,
    hex_spiral,
    hex_to_pixel,
    pixel_to_hex,
    point_in_hex,
    spiral_radius,
)


_pass = 0
_fail = 0


def _test(name, fn):
    global _pass, _fail
    try:
        fn()
        print(f"  [PASS] {name}")
        _pass += 1
    except Exception as exc:
        print(f"  [FAIL] {name}: {exc}")
        _fail += 1


ORIGIN = AxialCoord(0, 0)


# ---------------------------------------------------------------------------
# Pixel conversion
# ---------------------------------------------------------------------------

def test_origin_maps_to_zero():
    for size in (1.0, 20.0, 24.0, 37.5):
        p = hex_to_pixel(0, 0, size)
        assert p.x == 0.0 and p.y == 0.0


def test_known_pixel_positions():
    p = hex_to_pixel(1, 0, 20)
    assert math.isclose(p.x, 30.0)
    assert math.isclose(p.y, SQRT3 * 10.0)
    p = hex_to_pixel(0, 1, 20)
    assert math.isclose(p.x, 0.0, abs_tol=1e-12)
    assert math.isclose(p.y, SQRT3 * 20.0)


def test_round_trip_is_identity():
    for size in (1.0, 7.0, 20.0, 24.0, 113.25):
        for q in range(-12, 13):
            for r in range(-12, 13):
                p = hex_to_pixel(q, r, size)
                assert pixel_to_hex(p.x, p.y, size) == AxialCoord(q, r), (q, r, size)


def test_pixel_near_center_rounds_to_hex():
    p = hex_to_pixel(3, -2, 24)
    assert pixel_to_hex(p.x + 5.0, p.y - 4.0, 24) == AxialCoord(3, -2)


def test_hex_round():
    assert hex_round(0.1, 0.1) == AxialCoord(0, 0)
    assert hex_round(0.9, 0.1) == AxialCoord(1, 0)
    assert hex_round(-0.1, -0.1) == AxialCoord(0, 0)
    c = hex_round(1.4, -0.45)
    assert c.q + c.r + c.s == 0


def test_corners_on_circumradius():
    size = 20.0
    corners = hex_corners(0, 0, size)
    assert len(corners) == 6
    for c in corners:
        assert math.isclose(math.hypot(c.x, c.y), size, rel_tol=1e-9)
    # Flat-top: first corner at 0°
    assert math.isclose(corners[0].x, size) and math.isclose(corners[0].y, 0.0, abs_tol=1e-12)


def test_corners_follow_center():
    corners = hex_corners(100.0, -50.0, 10.0)
    assert math.isclose(corners[0].x, 110.0)
    assert math.isclose(corners[0].y, -50.0)


# ---------------------------------------------------------------------------
# Neighbours & distance
# ---------------------------------------------------------------------------

def test_six_neighbors_at_distance_one():
    center = AxialCoord(2, -1)
    neighbors = hex_neighbors(center.q, center.r)
    assert len(neighbors) == 6
    assert len(set(neighbors)) == 6
    for n in neighbors:
        assert hex_distance(center, n) == 1


def test_distance_basics():
    a = AxialCoord(1, 2)
    b = AxialCoord(-2, 3)
    assert hex_distance(a, a) == 0
    assert hex_distance(a, b) == hex_distance(b, a)
    assert hex_distance(ORIGIN, AxialCoord(3, -3)) == 3
    assert hex_distance(ORIGIN, AxialCoord(2, 2)) == 4
    assert isinstance(hex_distance(a, b), int)


def test_distance_zero_only_for_same_hex():
    for q in range(-3, 4):
        for r in range(-3, 4):
            c = AxialCoord(q, r)
            assert (hex_distance(ORIGIN, c) == 0) == (c == ORIGIN)


# ---------------------------------------------------------------------------
# Rings, disks, spirals
# ---------------------------------------------------------------------------

def test_ring_zero_is_center():
    c = AxialCoord(4, -7)
    assert hex_ring(c, 0) == [c]


def test_ring_cardinality_and_distance():
    center = AxialCoord(1, -1)
    for n in range(1, 8):
        ring = hex_ring(center, n)
        assert len(ring) == 6 * n
        assert len(set(ring)) == 6 * n
        for h in ring:
            assert hex_distance(center, h) == n


def test_ring_walks_sides_consecutively():
    ring = hex_ring(ORIGIN, 3)
    for a, b in zip(ring, ring[1:]):
        assert hex_distance(a, b) == 1
    assert hex_distance(ring[-1], ring[0]) == 1
    start = DIRECTIONS[4]
    assert ring[0] == AxialCoord(start.q * 3, start.r * 3)


def test_negative_ring_is_empty():
    assert hex_ring(ORIGIN, -1) == []


def test_disk_cardinality():
    for n in range(0, 7):
        disk = hex_disk(ORIGIN, n)
        assert len(disk) == 3 * n * (n + 1) + 1
        assert len(set(disk)) == len(disk)
        assert all(hex_distance(ORIGIN, h) <= n for h in disk)


def test_spiral_exact_count():
    center = AxialCoord(2, -1)
    for k in (0, 1, 2, 6, 7, 8, 15, 19, 20, 100):
        spiral = hex_spiral(center, k)
        assert len(spiral) == k
        assert len(set(spiral)) == k
        if k:
            assert spiral[0] == center


def test_spiral_is_disk_prefix():
    disk = hex_disk(ORIGIN, 3)
    assert hex_spiral(ORIGIN, 30) == disk[:30]


def test_spiral_negative_count_is_empty():
    assert hex_spiral(ORIGIN, -4) == []


def test_spiral_radius():
    assert spiral_radius(0) == 0
    assert spiral_radius(1) == 0
    assert spiral_radius(2) == 1
    assert spiral_radius(7) == 1
    assert spiral_radius(8) == 2
    assert spiral_radius(19) == 2
    assert spiral_radius(20) == 3
    for k in (1, 5, 12, 40, 61, 62):
        outer = max(hex_distance(ORIGIN, h) for h in hex_spiral(ORIGIN, k))
        assert outer == spiral_radius(k)


# ---------------------------------------------------------------------------
# Bounds & hit testing
# ---------------------------------------------------------------------------

def test_bounding_box_empty():
    bb = hex_bounding_box([], 20)
    assert bb.width == 0 and bb.height == 0
    assert (bb.min_x, bb.min_y, bb.max_x, bb.max_y) == (0, 0, 0, 0)


def test_bounding_box_single_hex_is_footprint():
    bb = hex_bounding_box([ORIGIN], 20)
    assert math.isclose(bb.width, 40.0)
    assert math.isclose(bb.height, SQRT3 * 20.0)
    assert math.isclose(bb.min_x, -20.0)


def test_bounding_box_contains_all_corners():
    coords = hex_disk(AxialCoord(-2, 5), 2)
    bb = hex_bounding_box(coords, 24)
    for c in coords:
        p = hex_to_pixel(c.q, c.r, 24)
        for corner in hex_corners(p.x, p.y, 24):
            assert bb.contains(corner.x, corner.y, tolerance=1e-6)


def test_point_in_hex():
    assert point_in_hex(0, 0, 0, 0, 20)
    assert not point_in_hex(100, 100, 0, 0, 20)
    # Corner vertex is on the boundary.
    assert point_in_hex(20, 0, 0, 0, 20)
    # Inside the footprint box but outside the slanted edge.
    assert not point_in_hex(19, 16, 0, 0, 20)
    assert not point_in_hex(0, 18, 0, 0, 20)


def test_point_in_hex_agrees_with_pixel_to_hex():
    size = 24.0
    center = hex_to_pixel(2, -1, size)
    for dx in range(-30, 31, 3):
        for dy in range(-30, 31, 3):
            px, py = center.x + dx + 0.37, center.y + dy + 0.21
            inside = point_in_hex(px, py, center.x, center.y, size)
            assert inside == (pixel_to_hex(px, py, size) == AxialCoord(2, -1))


# ---------------------------------------------------------------------------
# Runner
# ---------------------------------------------------------------------------

def main():
    tests = [
        ("Pixel: origin", test_origin_maps_to_zero),
        ("Pixel: known positions", test_known_pixel_positions),
        ("Pixel: round trip", test_round_trip_is_identity),
        ("Pixel: near center", test_pixel_near_center_rounds_to_hex),
        ("Cube rounding", test_hex_round),
        ("Corners: circumradius", test_corners_on_circumradius),
        ("Corners: offset center", test_corners_follow_center),
        ("Neighbours", test_six_neighbors_at_distance_one),
        ("Distance: basics", test_distance_basics),
        ("Distance: zero iff equal", test_distance_zero_only_for_same_hex),
        ("Ring: radius 0", test_ring_zero_is_center),
        ("Ring: cardinality", test_ring_cardinality_and_distance),
        ("Ring: side walk", test_ring_walks_sides_consecutively),
        ("Ring: negative radius", test_negative_ring_is_empty),
        ("Disk: cardinality", test_disk_cardinality),
        ("Spiral: exact count", test_spiral_exact_count),
        ("Spiral: disk prefix", test_spiral_is_disk_prefix),
        ("Spiral: negative count", test_spiral_negative_count_is_empty),
        ("Spiral: radius", test_spiral_radius),
        ("Bounds: empty", test_bounding_box_empty),
        ("Bounds: single hex", test_bounding_box_single_hex_is_footprint),
        ("Bounds: corners", test_bounding_box_contains_all_corners),
        ("Point in hex", test_point_in_hex),
        ("Point in hex vs pixel_to_hex", test_point_in_hex_agrees_with_pixel_to_hex),
    ]

    print(f"\nRunning {len(tests)} tests...\n")
    for name, fn in tests:
        _test(name, fn)

    print(f"\n{'='*60}")
    print(f"  {_pass} passed, {_fail} failed out of {_pass + _fail}")
    print(f"{'='*60}")

    if _fail > 0:
        sys.exit(1)


if __name__ == "__main__":
    main()
