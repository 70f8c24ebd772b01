"""Day 3: multiplications hidden in corrupted memory."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Protocol

_MULTIPLICATION = re.compile(r"mul\(([0-9]+),([0-9]+)\)")
_OPERATION = re.compile(r"(do\(\))|(don't\(\))|mul\(([0-9]+),([0-9]+)\)")


@dataclass
class Context:
    """State carried while running operations."""

    multiplication_enabled: bool = True
    total: int = 0


class Operation(Protocol):
    def apply(self, context: Context) -> None: ...


@dataclass(frozen=True)
class Multiplication:
    a: int
    b: int

    def result(self) -> int:
        return self.a * self.b

    def apply(self, context: Context) -> None:
        if context.multiplication_enabled:
            context.total += self.result()


@dataclass(frozen=True)
class Configure:
    multiplication_enabled: bool

    def apply(self, context: Context) -> None:
        context.multiplication_enabled = self.multiplication_enabled


@dataclass
class Multiplications:
    """Every multiplication in the memory, without conditionals."""

    operations: list[Multiplication] = field(default_factory=list)

    @classmethod
    def parse(cls, string: str) -> Multiplications:
        return cls(
            [Multiplication(int(m.group(1)), int(m.group(2))) for m in _MULTIPLICATION.finditer(string)]
        )

    def sum(self) -> int:
        return sum(operation.result() for operation in self.operations)


def _parse_operation(match: re.Match[str]) -> Operation:
    if match.group(1) is not None:
        return Configure(multiplication_enabled=True)
    if match.group(2) is not None:
        return Configure(multiplication_enabled=False)
    return Multiplication(int(match.group(3)), int(match.group(4)))


@dataclass
class Operations:
    """Multiplications together with do() and don't() switches."""

    operations: list[Operation] = field(default_factory=list)

    @classmethod
    def parse(cls, string: str) -> Operations:
        return cls([_parse_operation(match) for match in _OPERATION.finditer(string)])

    def run(self) -> int:
        context = Context()
        for operation in self.operations:
            operation.apply(context)
        return context.total