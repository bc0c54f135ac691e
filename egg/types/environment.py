"""Runtime environment for Egg.

An Environment is one frame of a lexical scope chain: a mapping of variable
names to evaluated values plus a link to the enclosing (`outer`) frame. The
global frame is the only one without an outer frame.
"""

from __future__ import annotations

from io import StringIO
from typing import Mapping, Optional

from egg import EggValue
from egg.errors import EggReferenceError


class Environment:
    """Singly linked chain of frames mapping names to Egg values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[str, EggValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: str, value: EggValue) -> None:
        """Bind `name` to `value` in this frame, shadowing any outer binding."""
        self.vars[name] = value

    def owns(self, name: str) -> bool:
        """True if this frame itself binds `name`; ancestors are not consulted."""
        return name in self.vars

    def find(self, name: str) -> Optional[Environment]:
        """Find the nearest environment in the chain that owns `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if env.owns(name):
                return env
            env = env.outer
        return None

    def set(self, name: str, value: EggValue) -> None:
        """Update an existing binding for `name` in the nearest owning frame.

        Raises EggReferenceError if no frame in the chain binds the name.
        """
        env = self.find(name)
        if env is None:
            raise EggReferenceError(f"Cannot set undefined variable: {name}")
        env.vars[name] = value

    def lookup(self, name: str) -> EggValue:
        """Look up the value bound to `name`, walking outward from this frame."""
        env = self.find(name)
        if env is None:
            raise EggReferenceError(f"Undefined variable: {name}")
        return env.vars[name]

    def update(self, mapping: Mapping[str, EggValue]) -> None:
        """Bulk-define a mapping of name -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def depth(self) -> int:
        """Number of frames between this one and the global frame."""
        n = 0
        env = self.outer
        while env is not None:
            n += 1
            env = env.outer
        return n

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Chain representation, innermost frame first."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as frame_buf:
                env._write_vars(frame_buf)
                chain.append(frame_buf.getvalue())
            env = env.outer
        return f"<Environment chain: {' -> '.join(chain)}>"
