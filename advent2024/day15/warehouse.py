"""The warehouse: walls, boxes and the robot."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from advent2024.day15.move_robot import Direction, move_robot
from advent2024.day15.warehouse_box import BOX, BOX_LEFT, Point, WarehouseBox

WALL = "#"
ROBOT = "@"
EMPTY = "."


def gps_coordinate(point: Point) -> int:
    return point[1] * 100 + point[0]


def _index_boxes(boxes: Iterable[WarehouseBox]) -> dict[Point, int]:
    return {point: box.number for box in boxes for point in box.points()}


@dataclass
class Warehouse:
    width: int
    height: int
    robot_position: Point
    boxes: list[WarehouseBox] = field(default_factory=list)
    position_to_box_num: dict[Point, int] = field(default_factory=dict)
    walls: frozenset[Point] = frozenset()

    @classmethod
    def parse(cls, string: str) -> Warehouse:
        tiles = [list(line) for line in string.splitlines()]
        width = len(tiles[0]) if tiles else 0
        height = len(tiles)

        def positioned() -> Iterator[tuple[Point, str]]:
            for y in range(height):
                for x in range(width):
                    yield (x, y), tiles[y][x]

        robot = next(
            (point for point, tile in positioned() if tile == ROBOT), (width, height)
        )
        box_tiles = [(point, tile) for point, tile in positioned() if tile in (BOX, BOX_LEFT)]
        boxes = [
            WarehouseBox.from_tile_at_point(number, tile, point)
            for number, (point, tile) in enumerate(box_tiles)
        ]
        walls = frozenset(point for point, tile in positioned() if tile == WALL)
        return cls(width, height, robot, boxes, _index_boxes(boxes), walls)

    def copy(self) -> Warehouse:
        return Warehouse(
            self.width,
            self.height,
            self.robot_position,
            list(self.boxes),
            dict(self.position_to_box_num),
            self.walls,
        )

    def move_robot(self, direction: Direction) -> Warehouse:
        return move_robot(self, direction)

    def sum_gps_coordinates(self) -> int:
        return sum(gps_coordinate(box.position) for box in self.boxes)

    def scale_up(self) -> Warehouse:
        """The same warehouse with everything twice as wide."""
        boxes = [box.scale_up() for box in self.boxes]
        walls = frozenset(point for x, y in self.walls for point in ((x * 2, y), (x * 2 + 1, y)))
        x, y = self.robot_position
        return Warehouse(self.width * 2, self.height, (x * 2, y), boxes, _index_boxes(boxes), walls)

    def box_at(self, point: Point) -> WarehouseBox | None:
        number = self.position_to_box_num.get(point)
        return None if number is None else self.boxes[number]

    def is_wall(self, point: Point) -> bool:
        return point in self.walls

    def is_on_map(self, point: Point) -> bool:
        x, y = point
        return 0 <= x < self.width and 0 <= y < self.height

    def move_boxes(self, numbers: Iterable[int], direction: Direction) -> None:
        """Move the numbered boxes one step in place."""
        numbers = list(numbers)
        for number in numbers:
            for point in self.boxes[number].points():
                self.position_to_box_num.pop(point, None)
        for number in numbers:
            moved = self.boxes[number].move_dir(direction)
            self.boxes[number] = moved
            for point in moved.points():
                self.position_to_box_num[point] = number

    def _contents(self, point: Point) -> str:
        if point == self.robot_position:
            return ROBOT
        if self.is_wall(point):
            return WALL
        box = self.box_at(point)
        return EMPTY if box is None else box.char_at(point)

    def __str__(self) -> str:
        return "".join(
            "".join(self._contents((x, y)) for x in range(self.width)) + "\n"
            for y in range(self.height)
        )