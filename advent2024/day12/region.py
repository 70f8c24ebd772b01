"""Connected regions of one plant type and the fencing they need."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from advent2024.day12.edge import Edge, adjacent_edges, make_edge
from advent2024.day12.point import Point, adjacent_points

if TYPE_CHECKING:
    from advent2024.day12.garden_map import GardenMap


@dataclass
class Region:
    number: int
    plant: str
    area: int = 0
    perimeter: int = 0
    sides: int = 0
    points: frozenset[Point] = field(default_factory=frozenset, compare=False, repr=False)

    def fencing_price(self) -> int:
        return self.area * self.perimeter

    def fencing_price_bulk_discount(self) -> int:
        return self.area * self.sides


def build_regions(garden_map: GardenMap) -> list[Region]:
    """Find every region, numbered in the order their first point is met row by row."""
    assigned: dict[Point, int] = {}
    regions: list[Region] = []
    for point in garden_map.points():
        if point not in assigned:
            regions.append(_map_region_from(point, len(regions), garden_map, assigned))
    return regions


def _map_region_from(
    start: Point, number: int, garden_map: GardenMap, assigned: dict[Point, int]
) -> Region:
    plant = garden_map.plant_at(start)
    points: set[Point] = set()
    edges: set[Edge] = set()
    assigned[start] = number
    stack = [start]
    while stack:
        point = stack.pop()
        points.add(point)
        for adjacent in adjacent_points(point):
            if not garden_map.is_on_map(adjacent):
                edges.add(make_edge(point, adjacent))
            elif garden_map.plant_at(adjacent) == plant:
                if adjacent not in assigned:
                    assigned[adjacent] = number
                    stack.append(adjacent)
            else:
                edges.add(make_edge(point, adjacent))
    return Region(
        number=number,
        plant=plant,
        area=len(points),
        perimeter=len(edges),
        sides=_count_sides(edges, garden_map),
        points=frozenset(points),
    )


def _count_sides(edges: set[Edge], garden_map: GardenMap) -> int:
    remaining = set(edges)
    count = 0
    for edge in edges:
        if edge not in remaining:
            continue
        count += 1
        stack = [edge]
        while stack:
            current = stack.pop()
            if current not in remaining:
                continue
            remaining.discard(current)
            stack.extend(adjacent_edges(current, edges, garden_map))
    return count