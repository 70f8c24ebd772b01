from advent2024.day12.edge import adjacent_edges, along_dim_index, make_edge
from advent2024.day12.garden_map import GardenMap


def test_make_edge_ignores_order():
    assert make_edge((1, 2), (1, 3)) == make_edge((1, 3), (1, 2))


def test_make_edge_keeps_both_points():
    edge = make_edge((4, 1), (3, 1))
    assert set(edge) == {(4, 1), (3, 1)}


def test_edge_between_vertical_neighbours_runs_along_x():
    assert along_dim_index(make_edge((1, 1), (1, 2))) == 0


def test_edge_between_horizontal_neighbours_runs_along_y():
    assert along_dim_index(make_edge((1, 1), (2, 1))) == 1


def test_adjacent_edges_without_obstructions_extend_both_ways():
    garden_map = GardenMap.parse("AAA\nAAA\nAAA\n")
    start = make_edge((1, 0), (1, 1))
    result = adjacent_edges(start, set(), garden_map)
    assert len(result) == 2
    for edge in result:
        assert along_dim_index(edge) == along_dim_index(start)
        assert abs(edge[0][0] - start[0][0]) == 1
        assert edge[0][1] == start[0][1]


def test_adjacent_edges_stop_at_corner():
    garden_map = GardenMap.parse("AA\nAA\n")
    top_left = make_edge((0, -1), (0, 0))
    left_side = make_edge((-1, 0), (0, 0))
    region_edges = {top_left, left_side}
    assert adjacent_edges(top_left, region_edges, garden_map) == [((1, -1), (1, 0))]


def test_adjacent_edges_are_mutual():
    garden_map = GardenMap.parse("AAA\nAAA\n")
    start = make_edge((1, 0), (1, 1))
    for neighbour in adjacent_edges(start, set(), garden_map):
        assert start in adjacent_edges(neighbour, set(), garden_map)