"""Lines of grid points to read words along."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from itertools import chain

Point = tuple[int, int]
Line = list[Point]


def generate_lines(width: int, height: int) -> Iterator[Line]:
    """Yield horizontal, vertical and both diagonal lines across the grid."""
    return chain(
        _horizontals(width, height),
        _verticals(width, height),
        _diagonals_down_right(width, height),
        _diagonals_up_right(width, height),
    )


def _horizontals(width: int, height: int) -> Iterator[Line]:
    for y in range(height):
        yield [(x, y) for x in range(width)]


def _verticals(width: int, height: int) -> Iterator[Line]:
    for x in range(width):
        yield [(x, y) for y in range(height)]


def _diagonals_down_right(width: int, height: int) -> Iterator[Line]:
    for y in reversed(range(1, height - 1)):
        yield [(d, y + d) for d in range(min(width, height - y))]
    for x in range(width - 1):
        yield [(x + d, d) for d in range(min(height, width - x))]


def _diagonals_up_right(width: int, height: int) -> Iterator[Line]:
    for y in range(1, height - 1):
        yield [(d, y - d) for d in range(min(width, y + 1))]
    for x in range(width - 1):
        yield [(x + d, height - d - 1) for d in range(min(height, width - x))]


def generate_x_lines(width: int, height: int) -> Iterator[Line]:
    """Yield the two crossing diagonals of every 3x3 square, in four orientations."""
    return chain.from_iterable(
        _at_x_positions(width, height, generator)
        for generator in (_right_x, _left_x, _up_x, _down_x)
    )


def _at_x_positions(width: int, height: int, generator: Callable[[int, int], Line]) -> Iterator[Line]:
    for x in range(width - 2):
        for y in range(height - 2):
            yield generator(x, y)


def _right_x(x: int, y: int) -> Line:
    return [(n + x, n + y) for n in range(3)] + [(n + x, 2 - n + y) for n in range(3)]


def _left_x(x: int, y: int) -> Line:
    return [(2 - n + x, n + y) for n in range(3)] + [(2 - n + x, 2 - n + y) for n in range(3)]


def _up_x(x: int, y: int) -> Line:
    return [(n + x, 2 - n + y) for n in range(3)] + [(2 - n + x, 2 - n + y) for n in range(3)]


def _down_x(x: int, y: int) -> Line:
    return [(n + x, n + y) for n in range(3)] + [(2 - n + x, n + y) for n in range(3)]