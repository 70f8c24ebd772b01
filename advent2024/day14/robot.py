"""Robots moving in straight lines across a wrapping floor."""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass

Position = tuple[int, int]
Velocity = tuple[int, int]
FloorSize = tuple[int, int]

_ROBOT = re.compile(r"p=([0-9]+),([0-9]+) v=([\-0-9]+),([\-0-9]+)")


@dataclass(frozen=True)
class Robot:
    position: Position
    velocity: Velocity

    @classmethod
    def parse_all(cls, string: str) -> list[Robot]:
        return [cls._parse(line) for line in string.splitlines()]

    @classmethod
    def _parse(cls, line: str) -> Robot:
        match = _ROBOT.search(line)
        if match is None:
            raise ValueError(f"not a robot: {line!r}")
        x, y, vx, vy = (int(group) for group in match.groups())
        return cls((x, y), (vx, vy))

    def before_mid(self, floor: FloorSize, dimension: int) -> bool:
        return self.position[dimension] < floor[dimension] // 2

    def after_mid(self, floor: FloorSize, dimension: int) -> bool:
        return self.position[dimension] > floor[dimension] // 2


def move_for_seconds(robots: Iterable[Robot], floor: FloorSize, seconds: int) -> list[Robot]:
    """Where each robot is after ``seconds``, wrapping round the floor's edges."""
    return [
        Robot(
            tuple(
                (position + seconds * velocity) % length
                for position, velocity, length in zip(robot.position, robot.velocity, floor)
            ),
            robot.velocity,
        )
        for robot in robots
    ]


def print_robots(robots: Iterable[Robot], floor: FloorSize) -> str:
    """Draw the floor with the number of robots on each tile, X for more than 9."""
    counts = Counter(robot.position for robot in robots)
    width, height = floor
    rows = []
    for y in range(height):
        row = []
        for x in range(width):
            count = counts.get((x, y))
            if count is None:
                row.append(".")
            elif count > 9:
                row.append("X")
            else:
                row.append(str(count))
        rows.append("".join(row) + "\n")
    return "".join(rows)