"""Whole-number intersection of two lines given as point pairs."""

from __future__ import annotations

Point = tuple[int, int]
Line = tuple[Point, Point]


def find_units_along_each_line(line_1: Line, line_2: Line) -> tuple[int, int] | None:
    """Return how many whole line lengths along each line they meet, if they do.

    Each line runs from its first point through its second. The result is None
    when the lines are parallel, meet between whole units, or meet behind
    either starting point.
    """
    (x1, y1), (x2, y2) = line_1
    (x3, y3), (x4, y4) = line_2
    denominator = (x1 - x2) * (y3 - y4) - (y1 - y2) * (x3 - x4)
    if denominator == 0:
        return None
    t_numerator = (x1 - x3) * (y3 - y4) - (y1 - y3) * (x3 - x4)
    u_numerator = -((x1 - x2) * (y1 - y3) - (y1 - y2) * (x1 - x3))
    if t_numerator % denominator or u_numerator % denominator:
        return None
    t = t_numerator // denominator
    u = u_numerator // denominator
    if t < 0 or u < 0:
        return None
    return t, u