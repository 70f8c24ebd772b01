"""Day 7: totals of the calibration equations that can be made true."""

from __future__ import annotations

from dataclasses import dataclass, field

from advent2024.day07.equation import Equation


@dataclass
class Equations:
    equations: list[Equation] = field(default_factory=list)

    @classmethod
    def parse(cls, string: str) -> Equations:
        return cls(Equation.parse_all(string))

    def sum_possible_answers(self) -> int:
        return sum(e.equals for e in self.equations if e.is_possible_add_multiply())

    def sum_possible_answers_with_concat(self) -> int:
        return sum(e.equals for e in self.equations if e.is_possible_add_multiply_concatenate())