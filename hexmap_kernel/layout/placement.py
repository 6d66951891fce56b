"""
Cluster Placement — Expanding-Ring Collision Search

Greedy packing of domain groups onto one shared hex grid.

Algorithm:
  1. First group: spiral around the grid origin (0, 0).
  2. Every later group: scan candidate origins ring by ring around
     (0, 0), radius 0..max_search_radius. A candidate fits when every
     hex of hex_spiral(candidate, count) is at distance >= min_gap
     from every occupied hex. First fit wins.
  3. Search exhausted: park the group at a fallback origin on the
     +q axis beyond the occupied extent. Flagged, logged, never dropped.

The occupancy grid is created per call and never shared.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Set, Tuple

from loguru import logger

from ..domain_types import AxialCoord, Entity
from ..hex_geometry import hex_disk, hex_distance, hex_ring, hex_spiral, iter_spiral, spiral_radius


GRID_ORIGIN = AxialCoord(0, 0)


@dataclass(frozen=True)
class Placement:
    """Where one domain group landed."""

    domain: str
    origin: AxialCoord
    positions: tuple[AxialCoord, ...]
    fallback: bool = False


class OccupancyGrid:
    """
    Set of occupied hexes plus the gap-neighbourhood test.

    A hex is blocked when any occupied hex lies within the
    (min_gap - 1) disk around it.
    """

    def __init__(self, min_gap: int) -> None:
        self._cells: Set[AxialCoord] = set()
        self._gap_offsets = hex_disk(GRID_ORIGIN, min_gap - 1)
        self._extent = 0

    def __len__(self) -> int:
        return len(self._cells)

    def __contains__(self, coord: AxialCoord) -> bool:
        return coord in self._cells

    @property
    def extent(self) -> int:
        """Largest hex distance from the grid origin to an occupied hex."""
        return self._extent

    def occupy(self, coords: Iterable[AxialCoord]) -> None:
        for c in coords:
            self._cells.add(c)
            self._extent = max(self._extent, hex_distance(GRID_ORIGIN, c))

    def is_clear(self, coord: AxialCoord) -> bool:
        cells = self._cells
        for off in self._gap_offsets:
            if AxialCoord(coord.q + off.q, coord.r + off.r) in cells:
                return False
        return True

    def fits(self, center: AxialCoord, count: int) -> bool:
        """True if a spiral of `count` hexes around center keeps the gap."""
        if not self._cells:
            return True
        for i, coord in enumerate(iter_spiral(center)):
            if i >= count:
                break
            if not self.is_clear(coord):
                return False
        return True


def find_free_origin(
    grid: OccupancyGrid,
    count: int,
    max_search_radius: int,
) -> Optional[AxialCoord]:
    """
    First candidate origin (ring order around the grid origin) whose
    spiral keeps the gap. None when every ring up to the cap is blocked.
    """
    for radius in range(max_search_radius + 1):
        for candidate in hex_ring(GRID_ORIGIN, radius):
            if grid.fits(candidate, count):
                return candidate
    return None


def fallback_origin(grid: OccupancyGrid, count: int, min_gap: int) -> AxialCoord:
    """
    Deterministic origin outside everything placed so far.

    Every hex of the new spiral is at least extent + min_gap from the
    grid origin, every occupied hex at most extent, so positions stay
    unique and the gap holds.
    """
    return AxialCoord(grid.extent + min_gap + spiral_radius(count), 0)


def place_clusters(
    ordered_groups: Sequence[Tuple[str, List[Entity]]],
    min_gap: int,
    max_search_radius: int,
) -> List[Placement]:
    """
    Place every group in order. Returns one Placement per group,
    positions in the group's entity order.
    """
    grid = OccupancyGrid(min_gap)
    placements: List[Placement] = []

    for idx, (domain, members) in enumerate(ordered_groups):
        count = len(members)
        fallback = False

        if idx == 0:
            origin = GRID_ORIGIN
        else:
            found = find_free_origin(grid, count, max_search_radius)
            if found is None:
                origin = fallback_origin(grid, count, min_gap)
                fallback = True
                logger.warning(
                    f"Ring search exhausted for domain {domain!r} "
                    f"({count} assets, cap={max_search_radius}); "
                    f"using fallback origin ({origin.q}, {origin.r})"
                )
            else:
                origin = found

        positions = hex_spiral(origin, count)
        grid.occupy(positions)
        placements.append(Placement(
            domain=domain,
            origin=origin,
            positions=tuple(positions),
            fallback=fallback,
        ))
        logger.debug(
            f"Placed {domain!r}: {count} assets at origin ({origin.q}, {origin.r})"
        )

    return placements
