from advent2024.day14.robot import Robot, move_for_seconds
from advent2024.day14.safety_factor import safety_factor

EXAMPLE = """\
p=0,4 v=3,-3
p=6,3 v=-1,-3
p=10,3 v=-1,2
p=2,0 v=2,-1
p=0,0 v=1,3
p=3,0 v=-2,-2
p=7,6 v=-1,-3
p=3,0 v=-1,-2
p=9,3 v=2,3
p=7,3 v=-1,2
p=2,4 v=2,-3
p=9,5 v=-3,-3
"""
FLOOR = (11, 7)


def test_safety_factor():
    robots = move_for_seconds(Robot.parse_all(EXAMPLE), FLOOR, 100)
    assert safety_factor(robots, FLOOR) == 12


def test_empty_quadrant_gives_zero():
    robots = [Robot((0, 0), (0, 0)), Robot((10, 0), (0, 0)), Robot((0, 6), (0, 0))]
    assert safety_factor(robots, FLOOR) == 0


def test_one_robot_per_corner_gives_one():
    corners = [
        Robot((0, 0), (0, 0)),
        Robot((10, 0), (0, 0)),
        Robot((0, 6), (0, 0)),
        Robot((10, 6), (0, 0)),
    ]
    assert safety_factor(corners, FLOOR) == 1


def test_robots_on_middle_lines_are_ignored():
    corners = [
        Robot((0, 0), (0, 0)),
        Robot((10, 0), (0, 0)),
        Robot((0, 6), (0, 0)),
        Robot((10, 6), (0, 0)),
    ]
    middle = [Robot((5, 1), (0, 0)), Robot((1, 3), (0, 0))]
    assert safety_factor(corners + middle, FLOOR) == 1