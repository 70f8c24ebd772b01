"""Moving the warehouse robot, pushing any boxes in its way."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from advent2024.day15.warehouse import Point, Warehouse
    from advent2024.day15.warehouse_box import WarehouseBox


class Direction(Enum):
    """A move of the robot, valued by its step on the grid."""

    UP = (0, -1)
    RIGHT = (1, 0)
    LEFT = (-1, 0)
    DOWN = (0, 1)


def next_point(point: Point, direction: Direction) -> Point:
    """The point one step from ``point`` in ``direction``; it may lie off the map."""
    dx, dy = direction.value
    x, y = point
    return (x + dx, y + dy)


def move_robot(warehouse: Warehouse, direction: Direction) -> Warehouse:
    """Return the warehouse after the robot tries to move one step."""
    new_position = next_point(warehouse.robot_position, direction)
    new_warehouse = warehouse.copy()
    if not warehouse.is_on_map(new_position) or warehouse.is_wall(new_position):
        return new_warehouse
    first_box = warehouse.box_at(new_position)
    if first_box is None or _move_boxes(warehouse, new_warehouse, first_box, direction):
        new_warehouse.robot_position = new_position
    return new_warehouse


def _move_boxes(
    warehouse: Warehouse,
    new_warehouse: Warehouse,
    first_box: WarehouseBox,
    direction: Direction,
) -> bool:
    """Push the boxes touching ``first_box`` in ``new_warehouse``, if none is blocked."""
    boxes = [first_box]
    to_move = {first_box.number}
    while True:
        points = [
            next_point(point, direction)
            for box in boxes
            for point in box.points_in_dir(direction)
        ]
        boxes = []
        for point in points:
            found = warehouse.box_at(point)
            if found is not None:
                boxes.append(found)
            elif not warehouse.is_on_map(point) or warehouse.is_wall(point):
                return False
        if not boxes:
            new_warehouse.move_boxes(to_move, direction)
            return True
        to_move.update(box.number for box in boxes)