"""Day 4: counting XMAS and X-MAS in a word search grid."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from advent2024.day04.find_cursor import FindCursor
from advent2024.day04.lines import Point, generate_lines, generate_x_lines


@dataclass
class WordSearch:
    """A rectangular grid of letters."""

    tiles: list[list[str]] = field(default_factory=list)
    width: int = 0

    @classmethod
    def parse(cls, text: str) -> WordSearch:
        tiles = [list(line) for line in text.splitlines()]
        width = len(tiles[0]) if tiles else 0
        return cls(tiles, width)

    def count_xmas(self) -> int:
        """Count XMAS written in any direction, including backwards and diagonally."""
        return self._find_xmas().matches

    def count_x_mas(self) -> int:
        """Count pairs of MAS crossing in the shape of an X."""
        return self._find_x_mas().matches

    def _find_xmas(self) -> _Search:
        search = _Search(self, "XMAS")
        for line in generate_lines(self.width, len(self.tiles)):
            search.check_line(line)
            search.check_line(reversed(line))
        return search

    def _find_x_mas(self) -> _Search:
        search = _Search(self, "MASMAS")
        for line in generate_x_lines(self.width, len(self.tiles)):
            search.check_line(line)
        return search

    def _char(self, point: Point) -> str:
        x, y = point
        return self.tiles[y][x]


class _Search:
    """Running state of a search for one word along many lines."""

    def __init__(self, word_search: WordSearch, word: str) -> None:
        self.word_search = word_search
        self.find_cursor = FindCursor.start(word)
        self.matches = 0
        self.relevant_points: set[Point] = set()
        self.current_points: set[Point] = set()

    def check_line(self, line: Iterable[Point]) -> None:
        self.find_cursor.reset()
        self.current_points.clear()
        for point in line:
            if self.find_cursor.check_match_advance(self.word_search._char(point)):
                self.current_points.add(point)
                if self.find_cursor.reset_if_finished():
                    self.matches += 1
                    self.relevant_points.update(self.current_points)
                    self.current_points.clear()
            else:
                self.current_points.clear()