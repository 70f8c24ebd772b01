# advent2024

Solvers for Advent of Code 2024 puzzles, days 1 to 15. Each day lives in its own
module or subpackage, parses the puzzle text and answers the puzzle's parts. The
package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install .[test]
```

## Library use

```python
from advent2024.day01 import Vectors
from advent2024.day09.disk_map import DiskMap

vectors = Vectors.parse("3   4\n4   3\n2   5\n1   3\n3   9\n3   3")
print(vectors.total_distance())   # 11
print(vectors.similarity())       # 31

disk = DiskMap.parse("2333133121414131402")
print(disk.build_file_system().compact_splitting_files().checksum())  # 1928
```

Puzzle inputs can be read with `advent2024.input.input_to_string(path)`, which
reads `src/<path>` under the directory named by the `ADVENT2024_ROOT` environment
variable, or under the current working directory when it is not set.
`Vectors.read_input` and `Reports.read_input` use it directly.

## Solvers by day

| Day | Entry point | Part 1 | Part 2 |
| --- | --- | --- | --- |
| 1 | `advent2024.day01.Vectors` | `total_distance()` | `similarity()` |
| 2 | `advent2024.day02.Reports` | `count_safe()` | `count_safe_with_tolerance()` |
| 3 | `advent2024.day03.Multiplications`, `Operations` | `Multiplications.sum()` | `Operations.run()` |
| 4 | `advent2024.day04.word_search.WordSearch` | `count_xmas()` | `count_x_mas()` |
| 5 | `advent2024.day05.page_ordering.PageOrdering` | `sum_correct_middle_pages()` | `sum_corrected_middle_pages()` |
| 7 | `advent2024.day07.equations.Equations` | `sum_possible_answers()` | `sum_possible_answers_with_concat()` |
| 8 | `advent2024.day08.antenna_map.AntennaMap` | `count_unique_antinode_locations()` | `count_unique_extended_antinode_locations()` |
| 9 | `advent2024.day09.disk_map.DiskMap` | `build_file_system().compact_splitting_files().checksum()` | `compact_fitting_into_spaces().build_file_system().checksum()` |
| 10 | `advent2024.day10.hiking_map.HikingMap` | `sum_trailhead_scores()` | `sum_trailhead_ratings()` |
| 12 | `advent2024.day12.garden_map.GardenMap` | `sum_fencing_price()` | `sum_fencing_price_bulk_discount()` |
| 13 | `advent2024.day13.claw_machines.ClawMachines` | `sum_min_tokens()` | `sum_min_tokens_with_unit_conversion()` |
| 14 | `advent2024.day14.robots.Robots` | `safety_factor_after_seconds(seconds, floor)` | `print_at_times(times, floor)` draws the floor at each time |
| 15 | `advent2024.day15.robot_plan.RobotPlan` | `sum_gps_coordinates_at_end()` | `scale_up().sum_gps_coordinates_at_end()` |

Every entry point is built with its class method `parse(text)`.

## What the package does not do

- There is no command-line program; the solvers are called from Python.
- Day 6 has no solver; `advent2024.day06` is empty.
- Day 11 has only the digit helpers `count_digits` and `split_even_digits` in
  `advent2024.day11.digits`; there is no solver that counts stones after blinks.

## Tests

```
pytest
```