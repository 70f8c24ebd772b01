"""A cursor that tracks progress through a word being searched for."""

from __future__ import annotations


class FindCursor:
    """Position within a word, advanced one matching character at a time."""

    def __init__(self, find: list[str]) -> None:
        self.find = find
        self.find_index = 0

    @classmethod
    def start(cls, string: str) -> FindCursor:
        return cls(list(string))

    def char(self) -> str | None:
        if self.find_index < len(self.find):
            return self.find[self.find_index]
        return None

    def check_match_advance(self, check: str) -> bool:
        current = self.char()
        if current is None:
            return False
        if current == check:
            self.advance()
            return True
        self.reset()
        if check == self.find[0]:
            self.advance()
            return True
        return False

    def reset_if_finished(self) -> bool:
        if self.is_finished():
            self.reset()
            return True
        return False

    def advance(self) -> None:
        self.find_index += 1

    def reset(self) -> None:
        self.find_index = 0

    def is_finished(self) -> bool:
        return self.find_index == len(self.find)

    def __iter__(self) -> FindCursor:
        return self

    def __next__(self) -> str:
        current = self.char()
        if current is None:
            raise StopIteration
        self.advance()
        return current