from advent2024.day12.garden_map import GardenMap
from advent2024.day12.region import Region, build_regions

FIRST_EXAMPLE = "AAAA\nBBCD\nBBCC\nEEEC\n"
E_SHAPE = "EEEEE\nEXXXX\nEEEEE\nEXXXX\nEEEEE\n"
DIAGONAL = "AAAAAA\nAAABBA\nAAABBA\nABBAAA\nABBAAA\nAAAAAA\n"


def _regions(text):
    return build_regions(GardenMap.parse(text))


def _print_region_numbers(regions):
    number_at = {point: region.number for region in regions for point in region.points}
    width = max(x for x, _ in number_at) + 1
    height = max(y for _, y in number_at) + 1
    return "".join(
        "".join(str(number_at[(x, y)]) for x in range(width)) + "\n" for y in range(height)
    )


def test_number_regions_for_first_example():
    assert _print_region_numbers(_regions(FIRST_EXAMPLE)) == "0000\n1123\n1122\n4442\n"


def test_region_areas_for_first_example():
    assert [(r.plant, r.area) for r in _regions(FIRST_EXAMPLE)] == [
        ("A", 4),
        ("B", 4),
        ("C", 4),
        ("D", 1),
        ("E", 3),
    ]


def test_region_perimeters_for_first_example():
    assert [(r.plant, r.perimeter) for r in _regions(FIRST_EXAMPLE)] == [
        ("A", 10),
        ("B", 8),
        ("C", 10),
        ("D", 4),
        ("E", 8),
    ]


def test_region_sides_for_first_example():
    assert [(r.plant, r.sides) for r in _regions(FIRST_EXAMPLE)] == [
        ("A", 4),
        ("B", 4),
        ("C", 8),
        ("D", 4),
        ("E", 4),
    ]


def test_sides_for_square():
    assert [(r.plant, r.sides) for r in _regions("AA\nAA\n")] == [("A", 4)]


def test_regions_for_e():
    assert [(r.plant, r.area, r.perimeter, r.sides) for r in _regions(E_SHAPE)] == [
        ("E", 17, 36, 12),
        ("X", 4, 10, 4),
        ("X", 4, 10, 4),
    ]


def test_regions_when_touching_diagonally():
    assert [(r.plant, r.area, r.perimeter, r.sides) for r in _regions(DIAGONAL)] == [
        ("A", 28, 40, 12),
        ("B", 4, 8, 4),
        ("B", 4, 8, 4),
    ]


def test_region_prices():
    region = Region(number=0, plant="A", area=4, perimeter=10, sides=4)
    assert region.fencing_price() == 40
    assert region.fencing_price_bulk_discount() == 16


def test_regions_cover_every_point_once():
    regions = _regions(DIAGONAL)
    assert sum(r.area for r in regions) == 36
    all_points = [p for r in regions for p in r.points]
    assert len(all_points) == len(set(all_points))