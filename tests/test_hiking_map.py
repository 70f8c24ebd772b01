from advent2024.day10.hiking_map import HikingMap


def test_score_0_trailhead():
    assert HikingMap.parse("012").sum_trailhead_scores() == 0


def test_score_1_trailhead():
    assert HikingMap.parse("0123456789").sum_trailhead_scores() == 1


def test_score_2_trailhead():
    assert HikingMap.parse("9876543210123456789").sum_trailhead_scores() == 2


def test_trailhead_scores_list_points():
    hiking_map = HikingMap.parse("9876543210123456789")
    assert list(hiking_map.trailhead_scores()) == [((9, 0), 2)]


def test_trailhead_ratings_list_points():
    hiking_map = HikingMap.parse("9876543210123456789")
    assert list(hiking_map.trailhead_ratings()) == [((9, 0), 2)]


def test_non_digit_is_impassable():
    hiking_map = HikingMap.parse("9876543210.23456789")
    assert hiking_map.sum_trailhead_scores() == 1


def test_rating_counts_paths_not_peaks():
    hiking_map = HikingMap.parse("012345678\n123456789")
    assert hiking_map.sum_trailhead_scores() == 1
    assert hiking_map.sum_trailhead_ratings() > 1


def test_parse_finds_trailheads_in_row_order():
    hiking_map = HikingMap.parse("0.0\n.0.")
    assert hiking_map.trailheads == [(0, 0), (2, 0), (1, 1)]
    assert (hiking_map.width, hiking_map.height) == (3, 2)