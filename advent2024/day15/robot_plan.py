"""Day 15: following the robot's planned moves around the warehouse."""

from __future__ import annotations

from dataclasses import dataclass, field

from advent2024.day15.move_robot import Direction
from advent2024.day15.warehouse import Warehouse

_DIRECTIONS = {
    "^": Direction.UP,
    ">": Direction.RIGHT,
    "v": Direction.DOWN,
    "<": Direction.LEFT,
}


@dataclass
class RobotPlan:
    warehouse: Warehouse
    directions: list[Direction] = field(default_factory=list)

    @classmethod
    def parse(cls, string: str) -> RobotPlan:
        parts = string.split("\n\n")
        if len(parts) < 2:
            raise ValueError("expected a map and moves separated by a blank line")
        directions = [_DIRECTIONS[c] for c in parts[1] if c in _DIRECTIONS]
        return cls(Warehouse.parse(parts[0]), directions)

    def sum_gps_coordinates_at_end(self) -> int:
        return self.follow().sum_gps_coordinates()

    def scale_up(self) -> RobotPlan:
        return RobotPlan(self.warehouse.scale_up(), list(self.directions))

    def follow(self) -> Warehouse:
        """The warehouse after every planned move."""
        warehouse = self.warehouse
        for direction in self.directions:
            warehouse = warehouse.move_robot(direction)
        return warehouse