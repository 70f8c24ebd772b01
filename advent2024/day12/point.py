"""Grid points of the garden map."""

from __future__ import annotations

Point = tuple[int, int]


def adjacent_points(point: Point) -> list[Point]:
    """The four orthogonal neighbours of a point, which may lie off the map."""
    x, y = point
    return [(x + 1, y), (x, y + 1), (x - 1, y), (x, y - 1)]