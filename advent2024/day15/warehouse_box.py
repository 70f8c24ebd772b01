"""Boxes in the warehouse, one or two tiles wide."""

from __future__ import annotations

from dataclasses import dataclass

from advent2024.day15.move_robot import Direction

BOX = "O"
BOX_LEFT = "["
BOX_RIGHT = "]"

Point = tuple[int, int]


@dataclass(frozen=True)
class WarehouseBox:
    number: int
    position: Point
    width: int = 1

    @classmethod
    def from_tile_at_point(cls, number: int, tile: str, point: Point) -> WarehouseBox:
        x, y = point
        if tile == BOX_LEFT:
            return cls(number, point, 2)
        if tile == BOX_RIGHT:
            return cls(number, (x - 1, y), 2)
        return cls(number, point, 1)

    def points_in_dir(self, direction: Direction) -> list[Point]:
        """The box's points that face ``direction``."""
        x, y = self.position
        if direction is Direction.LEFT:
            return [(x, y)]
        if direction is Direction.RIGHT:
            return [(x + self.width - 1, y)]
        return self.points()

    def points(self) -> list[Point]:
        x, y = self.position
        return [(x + i, y) for i in range(self.width)]

    def scale_up(self) -> WarehouseBox:
        x, y = self.position
        return WarehouseBox(self.number, (x * 2, y), self.width * 2)

    def move_dir(self, direction: Direction) -> WarehouseBox:
        dx, dy = direction.value
        x, y = self.position
        return WarehouseBox(self.number, (x + dx, y + dy), self.width)

    def char_at(self, point: Point) -> str:
        """The character drawn for this box at ``point``."""
        if self.width == 1:
            return BOX
        return BOX_LEFT if point[0] == self.position[0] else BOX_RIGHT