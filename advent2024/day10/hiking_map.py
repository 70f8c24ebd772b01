"""Day 10: scoring and rating trailheads on a topographic map."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field

Point = tuple[int, int]

_PEAK = 9
_IMPASSABLE = 10


@dataclass
class HikingMap:
    """A grid of heights from 0 to 9; anything else is impassable."""

    tiles: list[list[int]] = field(default_factory=list)
    trailheads: list[Point] = field(default_factory=list)
    width: int = 0
    height: int = 0

    @classmethod
    def parse(cls, string: str) -> HikingMap:
        tiles: list[list[int]] = []
        trailheads: list[Point] = []
        for y, line in enumerate(string.splitlines()):
            row = [int(c) if c in "0123456789" else _IMPASSABLE for c in line]
            trailheads.extend((x, y) for x, tile in enumerate(row) if tile == 0)
            tiles.append(row)
        width = len(tiles[0]) if tiles else 0
        return cls(tiles, trailheads, width, len(tiles))

    def sum_trailhead_scores(self) -> int:
        return sum(score for _, score in self.trailhead_scores())

    def sum_trailhead_ratings(self) -> int:
        return sum(rating for _, rating in self.trailhead_ratings())

    def trailhead_scores(self) -> Iterator[tuple[Point, int]]:
        """Yield each trailhead with the number of distinct peaks it reaches."""
        for trailhead in self.trailheads:
            peaks: set[Point] = set()
            self._for_each_reached_peak(trailhead, peaks.add)
            yield trailhead, len(peaks)

    def trailhead_ratings(self) -> Iterator[tuple[Point, int]]:
        """Yield each trailhead with the number of distinct trails to any peak."""
        for trailhead in self.trailheads:
            reached: list[Point] = []
            self._for_each_reached_peak(trailhead, reached.append)
            yield trailhead, len(reached)

    def _for_each_reached_peak(self, point: Point, operation: Callable[[Point], object]) -> None:
        height = self._height_at(point)
        if height == _PEAK:
            operation(point)
            return
        for adjacent in self._adjacent_points(point):
            if self._height_at(adjacent) == height + 1:
                self._for_each_reached_peak(adjacent, operation)

    def _height_at(self, point: Point) -> int:
        x, y = point
        return self.tiles[y][x]

    def _adjacent_points(self, point: Point) -> list[Point]:
        x, y = point
        candidates = [(x + 1, y), (x, y + 1), (x - 1, y), (x, y - 1)]
        return [
            (ax, ay) for ax, ay in candidates if 0 <= ax < self.width and 0 <= ay < self.height
        ]