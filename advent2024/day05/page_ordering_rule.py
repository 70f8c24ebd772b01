"""A rule saying one page must come before another."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PageOrderingRule:
    lower_page: int
    higher_page: int

    @classmethod
    def parse_all(cls, string: str) -> list[PageOrderingRule]:
        return [cls.parse(line) for line in string.splitlines()]

    @classmethod
    def parse(cls, string: str) -> PageOrderingRule:
        left, separator, right = string.partition("|")
        if not separator:
            raise ValueError(f"expected a rule of the form a|b: {string!r}")
        return cls(int(left), int(right))