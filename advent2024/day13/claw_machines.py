"""Day 13: tokens needed to win every claw machine prize."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from advent2024.day13.claw_machine import ClawMachine

_A = re.compile(r"Button A: X\+(.+), Y\+(.+)")
_B = re.compile(r"Button B: X\+(.+), Y\+(.+)")
_PRIZE = re.compile(r"Prize: X=(.+), Y=(.+)")

UNIT_CONVERSION = 10_000_000_000_000


def _parse_pairs(pattern: re.Pattern[str], string: str) -> list[tuple[int, int]]:
    return [(int(m.group(1)), int(m.group(2))) for m in pattern.finditer(string)]


@dataclass
class ClawMachines:
    machines: list[ClawMachine] = field(default_factory=list)

    @classmethod
    def parse(cls, string: str) -> ClawMachines:
        machines = [
            ClawMachine(a, b, prize)
            for a, b, prize in zip(
                _parse_pairs(_A, string),
                _parse_pairs(_B, string),
                _parse_pairs(_PRIZE, string),
                strict=True,
            )
        ]
        return cls(machines)

    def sum_min_tokens(self) -> int:
        return sum(machine.min_tokens_to_win() for machine in self.machines)

    def sum_min_tokens_with_unit_conversion(self) -> int:
        return sum(
            machine.min_tokens_to_win_with_inc(UNIT_CONVERSION) for machine in self.machines
        )