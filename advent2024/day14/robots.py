"""Day 14: robots guarding the bathroom floor."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from advent2024.day14.robot import FloorSize, Robot, move_for_seconds, print_robots
from advent2024.day14.safety_factor import safety_factor


@dataclass
class Robots:
    robots: list[Robot] = field(default_factory=list)

    @classmethod
    def parse(cls, string: str) -> Robots:
        return cls(Robot.parse_all(string))

    def safety_factor_after_seconds(self, seconds: int, floor: FloorSize) -> int:
        return safety_factor(move_for_seconds(self.robots, floor, seconds), floor)

    def print_at_times(
        self, times: Iterable[int], floor: FloorSize
    ) -> Iterator[tuple[int, str]]:
        """Yield each time with a drawing of the floor at that time."""
        for time in times:
            yield time, print_robots(move_for_seconds(self.robots, floor, time), floor)