"""User-defined function values created by the `fun` special form."""

from __future__ import annotations

from io import StringIO

from egg import EggValue
from egg.types.environment import Environment
from egg.types.expression import Expression


class Function:
    """A first-class closure: parameter names, body and defining environment."""

    __slots__ = ("params", "body", "env")

    def __init__(self, params: list[str], body: Expression, env: Environment):
        self.params: tuple[str, ...] = tuple(params)
        self.body: Expression = body
        # The environment active at definition time, not at the call site
        self.env: Environment = env

    @property
    def arity(self) -> int:
        return len(self.params)

    def extend_env(self, args: list[EggValue]) -> Environment:
        """Return a fresh frame, child of the closure env, binding params to args."""
        frame = Environment(outer=self.env)
        for name, value in zip(self.params, args):
            frame.define(name, value)
        return frame

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<function(")
            buffer.write(", ".join(self.params))
            buffer.write(")>")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)
