"""A claw machine with two buttons and a prize."""

from __future__ import annotations

from dataclasses import dataclass

from advent2024.day13.line_intersection import Point, find_units_along_each_line

ButtonVector = tuple[int, int]

_A_COST = 3
_B_COST = 1


@dataclass(frozen=True)
class ClawMachine:
    button_a_vector: ButtonVector
    button_b_vector: ButtonVector
    prize_location: Point

    def min_tokens_to_win(self) -> int:
        return self.min_tokens_to_win_with_inc(0)

    def min_tokens_to_win_with_inc(self, prize_inc: int) -> int:
        """Fewest tokens to reach the prize moved by ``prize_inc`` on both axes, or 0."""
        prize = (self.prize_location[0] + prize_inc, self.prize_location[1] + prize_inc)
        costs = []
        a_first = self._find_presses(prize, self.button_a_vector, self.button_b_vector)
        if a_first is not None:
            a, b = a_first
            costs.append(a * _A_COST + b * _B_COST)
        b_first = self._find_presses(prize, self.button_b_vector, self.button_a_vector)
        if b_first is not None:
            b, a = b_first
            costs.append(a * _A_COST + b * _B_COST)
        return min(costs, default=0)

    @staticmethod
    def _find_presses(
        prize: Point, from_origin: ButtonVector, to_prize: ButtonVector
    ) -> tuple[int, int] | None:
        line_1 = ((0, 0), from_origin)
        line_2 = (prize, (prize[0] - to_prize[0], prize[1] - to_prize[1]))
        return find_units_along_each_line(line_1, line_2)