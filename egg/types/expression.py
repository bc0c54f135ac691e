"""Syntax tree for Egg programs.

Three node kinds make up every tree the parser produces:

    Value  - a number or string literal       "hello", 42
    Word   - a symbolic variable name         x, +, print
    Apply  - an operator applied to arguments >(x, 5)

The tree is closed over these three; the evaluator matches on them exhaustively.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class Value:
    value: int | str


@dataclass(frozen=True)
class Word:
    name: str


@dataclass(frozen=True)
class Apply:
    operator: Expression
    args: tuple[Expression, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Accept any sequence of arguments but store an immutable tuple
        if not isinstance(self.args, tuple):
            object.__setattr__(self, "args", tuple(self.args))


Expression = Union[Value, Word, Apply]
