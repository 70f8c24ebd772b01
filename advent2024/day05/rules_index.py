"""Index of page ordering rules by the page that must come later."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from advent2024.day05.page_ordering_rule import PageOrderingRule

if TYPE_CHECKING:
    from advent2024.day05.update import Update


@dataclass
class RulesIndex:
    """For each page, the pages that must be printed before it."""

    lower_pages: dict[int, set[int]] = field(default_factory=dict)

    @classmethod
    def parse_rules(cls, string: str) -> RulesIndex:
        return cls.from_rules(PageOrderingRule.parse_all(string))

    @classmethod
    def from_rules(cls, rules: Iterable[PageOrderingRule]) -> RulesIndex:
        lower_pages: dict[int, set[int]] = {}
        for rule in rules:
            lower_pages.setdefault(rule.higher_page, set()).add(rule.lower_page)
        return cls(lower_pages)

    def matches(self, update: Update) -> bool:
        """Whether no page is followed by a page that must come before it."""
        pages = update.pages
        for index, page in enumerate(pages):
            lower = self.lower_pages.get(page)
            if lower and any(after in lower for after in pages[index:]):
                return False
        return True

    def compare(self, left: int, right: int) -> int:
        """Order two pages: negative if left comes first, positive if right does."""
        if left in self.lower_pages.get(right, ()):
            return -1
        if right in self.lower_pages.get(left, ()):
            return 1
        return 0