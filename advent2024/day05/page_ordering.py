"""Day 5: checking and fixing the order of pages in updates."""

from __future__ import annotations

from dataclasses import dataclass, field

from advent2024.day05.rules_index import RulesIndex
from advent2024.day05.update import Update


@dataclass
class PageOrdering:
    rules_index: RulesIndex
    updates: list[Update] = field(default_factory=list)

    @classmethod
    def parse(cls, string: str) -> PageOrdering:
        rules, separator, updates = string.partition("\n\n")
        if not separator:
            raise ValueError("expected rules and updates separated by a blank line")
        return cls(RulesIndex.parse_rules(rules), Update.parse_all(updates))

    def sum_correct_middle_pages(self) -> int:
        return sum(update.middle() for update in self.updates if self.rules_index.matches(update))

    def sum_corrected_middle_pages(self) -> int:
        return sum(
            update.sort(self.rules_index).middle()
            for update in self.updates
            if not self.rules_index.matches(update)
        )