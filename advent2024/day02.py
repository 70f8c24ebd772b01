"""Day 2: safety of reactor level reports."""

from __future__ import annotations

import os
from collections.abc import Callable
from dataclasses import dataclass, field
from itertools import pairwise

from advent2024.input import input_to_string


def _is_diff_safe(diff: int, found_diff: int) -> bool:
    return 1 <= abs(diff) <= 3 and (found_diff == 0 or (found_diff > 0) == (diff > 0))


@dataclass
class Report:
    """One line of levels."""

    levels: list[int] = field(default_factory=list)

    @classmethod
    def parse(cls, string: str) -> Report:
        return cls([int(level) for level in string.split()])

    def is_safe(self) -> bool:
        found_diff = 0
        for left, right in pairwise(self.levels):
            diff = right - left
            if not _is_diff_safe(diff, found_diff):
                return False
            if diff != 0:
                found_diff = diff
        return True

    def is_safe_with_tolerance(self) -> bool:
        return self.is_safe() or any(
            self.without_index(index).is_safe() for index in range(len(self.levels))
        )

    def without_index(self, index: int) -> Report:
        if not 0 <= index < len(self.levels):
            raise IndexError(f"level index {index} out of range")
        return Report(self.levels[:index] + self.levels[index + 1 :])


@dataclass
class Reports:
    """All the reports from the input."""

    reports: list[Report] = field(default_factory=list)

    @classmethod
    def read_input(cls, path: str | os.PathLike[str]) -> Reports:
        return cls.parse(input_to_string(path))

    @classmethod
    def parse(cls, string: str) -> Reports:
        return cls([Report.parse(line) for line in string.splitlines()])

    def count_safe(self) -> int:
        return self._count(Report.is_safe)

    def count_safe_with_tolerance(self) -> int:
        return self._count(Report.is_safe_with_tolerance)

    def _count(self, predicate: Callable[[Report], bool]) -> int:
        return sum(1 for report in self.reports if predicate(report))