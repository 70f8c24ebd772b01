"""Day 12: fencing prices for the regions of a garden."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from advent2024.day12.edge import Edge, along_dim_index, make_edge
from advent2024.day12.point import Point
from advent2024.day12.region import build_regions


def _with_coord(point: Point, dim: int, value: int) -> Point:
    return (value, point[1]) if dim == 0 else (point[0], value)


@dataclass
class GardenMap:
    """A grid of plots, each labelled with a plant type."""

    plots: list[list[str]] = field(default_factory=list)
    width: int = 0
    height: int = 0

    @classmethod
    def parse(cls, string: str) -> GardenMap:
        plots = [list(line) for line in string.splitlines()]
        width = len(plots[0]) if plots else 0
        return cls(plots, width, len(plots))

    def sum_fencing_price(self) -> int:
        return sum(region.fencing_price() for region in build_regions(self))

    def sum_fencing_price_bulk_discount(self) -> int:
        return sum(region.fencing_price_bulk_discount() for region in build_regions(self))

    def plant_at(self, point: Point) -> str:
        x, y = point
        return self.plots[y][x]

    def is_on_map(self, point: Point) -> bool:
        x, y = point
        return 0 <= x < self.width and 0 <= y < self.height

    def points(self) -> Iterator[Point]:
        """Every point on the map, row by row."""
        for y in range(self.height):
            for x in range(self.width):
                yield (x, y)

    def adjacent_edge(self, from_edge: Edge, direction: int) -> Edge | None:
        """The edge one step along the side, or None past the map's fence limits."""
        along = along_dim_index(from_edge)
        new_value = from_edge[0][along] + direction
        if self._is_outside_limits(along, new_value):
            return None
        return (
            _with_coord(from_edge[0], along, new_value),
            _with_coord(from_edge[1], along, new_value),
        )

    def obstructing_edges(self, from_edge: Edge, direction: int) -> list[Edge]:
        """The edges that would turn a corner at the end of ``from_edge`` in ``direction``."""
        along = along_dim_index(from_edge)
        first, second = from_edge
        end_0 = _with_coord(first, along, first[along] + direction)
        end_1 = _with_coord(second, along, second[along] + direction)
        return [make_edge(first, end_0), make_edge(second, end_1)]

    def _is_outside_limits(self, dim: int, value: int) -> bool:
        limit = self.width if dim == 0 else self.height
        return value > limit or value < -1

    def __str__(self) -> str:
        return "".join("".join(line) + "\n" for line in self.plots)