import pytest

from advent2024.day14.robot import Robot, move_for_seconds, print_robots

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


def test_parse_robots():
    robots = Robot.parse_all(EXAMPLE)
    assert print_robots(robots, FLOOR) == (
        "1.12.......\n"
        "...........\n"
        "...........\n"
        "......11.11\n"
        "1.1........\n"
        ".........1.\n"
        ".......1...\n"
    )


def test_move_for_100_seconds():
    robots = move_for_seconds(Robot.parse_all(EXAMPLE), FLOOR, 100)
    assert print_robots(robots, FLOOR) == (
        "......2..1.\n"
        "...........\n"
        "1..........\n"
        ".11........\n"
        ".....1.....\n"
        "...12......\n"
        ".1....1....\n"
    )


def test_move_single_robot_wraps():
    (robot,) = move_for_seconds(Robot.parse_all("p=2,4 v=2,-3"), FLOOR, 5)
    assert robot.position == (1, 3)
    assert robot.velocity == (2, -3)


def test_parse_rejects_bad_line():
    with pytest.raises(ValueError):
        Robot.parse_all("q=1,2 w=3,4")


def test_many_robots_on_one_tile_print_as_x():
    robots = Robot.parse_all("\n".join(["p=0,0 v=0,0"] * 10))
    assert print_robots(robots, (2, 1)) == "X.\n"


def test_mid_checks():
    robot = Robot((2, 5), (0, 0))
    assert robot.before_mid(FLOOR, 0)
    assert not robot.after_mid(FLOOR, 0)
    assert robot.after_mid(FLOOR, 1)
    middle = Robot((5, 3), (0, 0))
    assert not middle.before_mid(FLOOR, 0)
    assert not middle.after_mid(FLOOR, 0)