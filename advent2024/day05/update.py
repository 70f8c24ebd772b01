"""A list of pages to be printed in an update."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cmp_to_key
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from advent2024.day05.rules_index import RulesIndex


@dataclass
class Update:
    pages: list[int] = field(default_factory=list)

    @classmethod
    def parse_all(cls, string: str) -> list[Update]:
        return [cls.parse(line) for line in string.splitlines()]

    @classmethod
    def parse(cls, string: str) -> Update:
        return cls([int(part) for part in string.split(",")])

    def middle(self) -> int:
        return self.pages[len(self.pages) // 2]

    def sort(self, rules_index: RulesIndex) -> Update:
        """Return a copy with the pages ordered by the rules."""
        return Update(sorted(self.pages, key=cmp_to_key(rules_index.compare)))