"""Calibration equations whose operators have gone missing."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from enum import Enum
from functools import reduce
from itertools import product


class Operator(Enum):
    """An operator placed between two numbers, evaluated left to right."""

    ADD = "+"
    MULTIPLY = "*"
    CONCATENATE = "|"

    def apply(self, left: int, right: int) -> int:
        if self is Operator.ADD:
            return left + right
        if self is Operator.MULTIPLY:
            return left * right
        return int(f"{left}{right}")


@dataclass
class Equation:
    """A list of numbers and the value they should combine to."""

    numbers: list[int] = field(default_factory=list)
    equals: int = 0

    @classmethod
    def parse_all(cls, string: str) -> list[Equation]:
        return [cls.parse(line) for line in string.splitlines()]

    @classmethod
    def parse(cls, string: str) -> Equation:
        parts = string.split()
        if not parts:
            raise ValueError("empty equation")
        numbers = [int(part) for part in parts[1:] if part.isascii() and part.isdigit()]
        return cls(numbers, int(parts[0].rstrip(":")))

    def is_possible_add_multiply(self) -> bool:
        return any(
            True for _ in self.possible_operator_combinations([Operator.ADD, Operator.MULTIPLY])
        )

    def is_possible_add_multiply_concatenate(self) -> bool:
        operators = [Operator.ADD, Operator.MULTIPLY, Operator.CONCATENATE]
        return any(True for _ in self.possible_operator_combinations(operators))

    def possible_operator_combinations(
        self, operators: Sequence[Operator]
    ) -> Iterator[list[Operator]]:
        """Yield the operator combinations that make the equation true."""
        return (
            combination
            for combination in self.all_operator_combinations(operators)
            if self._is_combination_possible(combination)
        )

    def all_operator_combinations(self, operators: Sequence[Operator]) -> Iterator[list[Operator]]:
        """Yield every combination of operators, varying the first operator fastest."""
        if not self.numbers:
            raise ValueError("equation has no numbers")
        slots = len(self.numbers) - 1
        for combination in product(operators, repeat=slots):
            yield list(reversed(combination))

    def _is_combination_possible(self, operators: Sequence[Operator]) -> bool:
        result = reduce(
            lambda acc, step: step[0].apply(acc, step[1]),
            zip(operators, self.numbers[1:]),
            self.numbers[0],
        )
        return result == self.equals