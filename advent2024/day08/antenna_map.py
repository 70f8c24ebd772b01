"""Day 8: antinodes created by pairs of antennas on the same frequency."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from itertools import chain, combinations

Point = tuple[int, int]


@dataclass
class AntennaMap:
    width: int = 0
    height: int = 0
    positions_by_frequency: dict[str, list[Point]] = field(default_factory=dict)

    @classmethod
    def parse(cls, string: str) -> AntennaMap:
        width = 0
        height = 0
        positions: dict[str, list[Point]] = {}
        for y, line in enumerate(string.splitlines()):
            width = len(line)
            height += 1
            for x, tile in enumerate(line):
                if tile != ".":
                    positions.setdefault(tile, []).append((x, y))
        return cls(width, height, positions)

    def count_unique_antinode_locations(self) -> int:
        return len(set(self.iter_antinodes()))

    def count_unique_extended_antinode_locations(self) -> int:
        return len(set(self.iter_extended_antinodes()))

    def iter_antinodes(self) -> Iterator[Point]:
        """Yield the antinode on each side of every pair, where on the map."""
        for left, right in self.all_antenna_combinations():
            for point in _antinodes_of_points(left, right):
                if self._is_in_grid(point):
                    yield point

    def iter_extended_antinodes(self) -> Iterator[Point]:
        """Yield every map point in line with a pair at multiples of their spacing."""
        return chain.from_iterable(
            self._extended_antinodes_of_points(left, right)
            for left, right in self.all_antenna_combinations()
        )

    def all_antenna_combinations(self) -> Iterator[tuple[Point, Point]]:
        return chain.from_iterable(
            combinations(positions, 2) for positions in self.positions_by_frequency.values()
        )

    def _is_in_grid(self, point: Point) -> bool:
        x, y = point
        return 0 <= x < self.width and 0 <= y < self.height

    def _extended_antinodes_of_points(self, left: Point, right: Point) -> list[Point]:
        dx = right[0] - left[0]
        dy = right[1] - left[1]
        return [
            left,
            right,
            *self._walk(left, (-dx, -dy)),
            *self._walk(right, (dx, dy)),
        ]

    def _walk(self, origin: Point, step: Point) -> Iterator[Point]:
        x, y = origin
        while True:
            x += step[0]
            y += step[1]
            if not self._is_in_grid((x, y)):
                return
            yield (x, y)


def _antinodes_of_points(left: Point, right: Point) -> list[Point]:
    dx = right[0] - left[0]
    dy = right[1] - left[1]
    return [(left[0] - dx, left[1] - dy), (right[0] + dx, right[1] + dy)]