"""Edges between two orthogonally adjacent points, used as fence segments."""

from __future__ import annotations

from typing import TYPE_CHECKING

from advent2024.day12.point import Point

if TYPE_CHECKING:
    from advent2024.day12.garden_map import GardenMap

Edge = tuple[Point, Point]


def along_dim_index(edge: Edge) -> int:
    """The dimension the fence segment runs along: 0 for x, 1 for y."""
    (x1, _), (x2, _) = edge
    return 0 if x1 == x2 else 1


def make_edge(a: Point, b: Point) -> Edge:
    """The edge between two points, independent of their order."""
    first, second = sorted((a, b))
    return first, second


def adjacent_edges(from_edge: Edge, region_edges: set[Edge], garden_map: GardenMap) -> list[Edge]:
    """Edges continuing the same straight side on either end, unless a corner stops it."""
    edges: list[Edge] = []
    for direction in (-1, 1):
        if any(
            obstruction in region_edges
            for obstruction in garden_map.obstructing_edges(from_edge, direction)
        ):
            continue
        adjacent = garden_map.adjacent_edge(from_edge, direction)
        if adjacent is not None:
            edges.append(adjacent)
    return edges