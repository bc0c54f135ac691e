"""
  Egg Reader: scanner and recursive-descent parser

Grammar, tried in this order at the start of every expression:

    string  ::= '"' [^"]* '"'            -> Value(str), no escape sequences
    number  ::= [0-9]+ <word boundary>   -> Value(int)
    symbol  ::= [^\\s(),"]+               -> Word(name)

Any expression may be followed by one or more argument lists:

    apply   ::= expr '(' [ expr { ',' expr } ] ')'   -> Apply(expr, args)

so `f(x)(y)` is the application of `f(x)` to `y`. Whitespace and
`#`-to-end-of-line comments may appear before any token.
"""

from __future__ import annotations

import logging
import re

from egg.errors import EggSyntaxError
from egg.types.expression import Apply, Expression, Value, Word

logger = logging.getLogger(__name__)

SKIP_RE = re.compile(r"(?:\s|#.*)*")
STRING_RE = re.compile(r'"([^"]*)"')
NUMBER_RE = re.compile(r"\d+\b", re.ASCII)
SYMBOL_RE = re.compile(r'[^\s(),"]+')

# Characters of source shown in "Unexpected syntax" messages
_SNIPPET_LEN = 20


class Parser:
    """Cursor over a source string producing one Expression tree."""

    def __init__(self, source: str):
        self.source = source
        self.pos = 0

    def error(self, message: str) -> EggSyntaxError:
        return EggSyntaxError(message, self.pos, self.source)

    def skip_space(self) -> None:
        self.pos = SKIP_RE.match(self.source, self.pos).end()

    def peek(self) -> str:
        """Next character, or '' at end of input."""
        return self.source[self.pos:self.pos + 1]

    def at_end(self) -> bool:
        return self.pos >= len(self.source)

    def parse_expression(self) -> Expression:
        self.skip_space()
        if m := STRING_RE.match(self.source, self.pos):
            expr: Expression = Value(m.group(1))
        elif m := NUMBER_RE.match(self.source, self.pos):
            try:
                expr = Value(int(m.group(0)))
            except ValueError:
                # Python caps the digits of an int parsed from a string
                raise self.error(f"Number literal too long ({len(m.group(0))} digits)")
        elif m := SYMBOL_RE.match(self.source, self.pos):
            expr = Word(m.group(0))
        else:
            snippet = self.source[self.pos:self.pos + _SNIPPET_LEN]
            raise self.error(f"Unexpected syntax: {snippet!r}")
        self.pos = m.end()
        return self.parse_apply(expr)

    def parse_apply(self, expr: Expression) -> Expression:
        """Wrap `expr` in Apply nodes for every argument list that follows it."""
        self.skip_space()
        while self.peek() == "(":
            self.pos += 1
            self.skip_space()
            args: list[Expression] = []
            while self.peek() != ")":
                if self.at_end():
                    raise self.error("Expected ',' or ')'")
                args.append(self.parse_expression())
                self.skip_space()
                if self.peek() == ",":
                    self.pos += 1
                    self.skip_space()
                elif self.peek() != ")":
                    raise self.error("Expected ',' or ')'")
            self.pos += 1
            expr = Apply(expr, tuple(args))
            self.skip_space()
        return expr

    def parse_program(self) -> Expression:
        expr = self.parse_expression()
        self.skip_space()
        if not self.at_end():
            raise self.error("Unexpected text after program")
        return expr


def parse(source: str) -> Expression:
    """Parse a complete program: exactly one top-level expression."""
    logger.debug("Parsing %d characters of source", len(source))
    return Parser(source).parse_program()
