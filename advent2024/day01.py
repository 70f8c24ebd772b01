"""Day 1: distances and similarity between two lists of location ids."""

from __future__ import annotations

import os
from collections import Counter
from dataclasses import dataclass, field

from advent2024.input import input_to_string


@dataclass
class Vectors:
    """Two sorted columns of numbers."""

    left: list[int] = field(default_factory=list)
    right: list[int] = field(default_factory=list)

    @classmethod
    def read_input(cls, path: str | os.PathLike[str]) -> Vectors:
        return cls.parse(input_to_string(path))

    @classmethod
    def parse(cls, string: str) -> Vectors:
        left: list[int] = []
        right: list[int] = []
        for line in string.splitlines():
            parts = line.split()
            if len(parts) < 2:
                raise ValueError(f"expected two numbers on line: {line!r}")
            left.append(int(parts[0]))
            right.append(int(parts[1]))
        return cls(sorted(left), sorted(right))

    def total_distance(self) -> int:
        return sum(abs(right - left) for left, right in zip(self.left, self.right, strict=True))

    def similarity(self) -> int:
        frequencies = Counter(self.right)
        return sum(left * frequencies[left] for left in self.left)