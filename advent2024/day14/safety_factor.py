"""Safety factor: the product of the robot counts in the four quadrants."""

from __future__ import annotations

from collections.abc import Sequence

from advent2024.day14.robot import FloorSize, Robot


def safety_factor(robots: Sequence[Robot], floor: FloorSize) -> int:
    """Multiply the robot counts in each quadrant, ignoring the middle lines."""
    top_left = sum(1 for r in robots if r.before_mid(floor, 0) and r.before_mid(floor, 1))
    top_right = sum(1 for r in robots if r.after_mid(floor, 0) and r.before_mid(floor, 1))
    bottom_left = sum(1 for r in robots if r.before_mid(floor, 0) and r.after_mid(floor, 1))
    bottom_right = sum(1 for r in robots if r.after_mid(floor, 0) and r.after_mid(floor, 1))
    return top_left * top_right * bottom_left * bottom_right