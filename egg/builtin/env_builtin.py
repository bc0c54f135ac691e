"""Built-in bindings for the Egg global environment.

This module defines the booleans, the binary arithmetic and comparison
operators, printing and the array helpers exposed to Egg code. Each operator
checks the kinds of its operands itself and raises EggTypeError on a mismatch;
there are no implicit coercions.
"""
from __future__ import annotations

import operator
import sys
from types import MappingProxyType
from typing import Callable, Mapping, TextIO

from egg import EggValue
from egg.debug_utils.pprint import format_value
from egg.errors import EggRangeError, EggTypeError
from egg.types.environment import Environment
from egg.types.function import Function


def builtin(name: str, arity: int | None = None):
    """Tag a host function with its Egg name and, if fixed, its arity."""
    def wrap(fn: Callable[..., EggValue]) -> Callable[..., EggValue]:
        fn.egg_name = name
        fn.egg_arity = arity
        return fn
    return wrap


def is_number(value: EggValue) -> bool:
    # bool is an int subclass in Python but a separate kind in Egg
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _kind(value: EggValue) -> str:
    if isinstance(value, bool):
        return "boolean"
    if is_number(value):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    return "function" if isinstance(value, Function) or callable(value) else type(value).__name__


def _require_numbers(op: str, a: EggValue, b: EggValue) -> None:
    if not (is_number(a) and is_number(b)):
        raise EggTypeError(f"Arguments to {op} must be numbers, got {_kind(a)} and {_kind(b)}")


# -------------------------------
# Arithmetic
# -------------------------------
def _checked(op: str, fn: Callable[[EggValue, EggValue], EggValue], a: EggValue, b: EggValue) -> EggValue:
    # Mixing a huge int with a float overflows the float conversion
    try:
        return fn(a, b)
    except OverflowError:
        raise EggRangeError(f"Result of {op} is out of range")


@builtin("+", 2)
def add(a: EggValue, b: EggValue) -> EggValue:
    """Sum of two numbers, or concatenation of two strings."""
    if isinstance(a, str) and isinstance(b, str):
        return a + b
    _require_numbers("+", a, b)
    return _checked("+", operator.add, a, b)


@builtin("-", 2)
def sub(a: EggValue, b: EggValue) -> EggValue:
    _require_numbers("-", a, b)
    return _checked("-", operator.sub, a, b)


@builtin("*", 2)
def mul(a: EggValue, b: EggValue) -> EggValue:
    _require_numbers("*", a, b)
    return _checked("*", operator.mul, a, b)


@builtin("/", 2)
def div(a: EggValue, b: EggValue) -> EggValue:
    """True division; an exact quotient of two integers stays an integer."""
    _require_numbers("/", a, b)
    if b == 0:
        raise EggRangeError("Division by zero")
    if isinstance(a, int) and isinstance(b, int) and a % b == 0:
        return a // b
    return _checked("/", operator.truediv, a, b)


# -------------------------------
# Comparison
# -------------------------------
@builtin("==", 2)
def equals(a: EggValue, b: EggValue) -> bool:
    """Values are equal only if they are of the same kind and equal value.

    Unlike the other operators, == never raises on mismatched kinds: comparing
    values of different kinds (true and 1, "1" and 1) is simply false.
    """
    if _kind(a) != _kind(b):
        return False
    if isinstance(a, list) or _kind(a) == "function":
        return a is b
    return a == b


def _require_ordered(op: str, a: EggValue, b: EggValue) -> None:
    if isinstance(a, str) and isinstance(b, str):
        return
    if not (is_number(a) and is_number(b)):
        raise EggTypeError(
            f"Arguments to {op} must be two numbers or two strings, got {_kind(a)} and {_kind(b)}"
        )


@builtin("<", 2)
def less_than(a: EggValue, b: EggValue) -> bool:
    _require_ordered("<", a, b)
    return a < b


@builtin(">", 2)
def greater_than(a: EggValue, b: EggValue) -> bool:
    _require_ordered(">", a, b)
    return a > b


# -------------------------------
# Arrays
# -------------------------------
@builtin("array")
def array(*items: EggValue) -> list:
    return list(items)


@builtin("length", 1)
def length(seq: EggValue) -> int:
    if not isinstance(seq, list):
        raise EggTypeError("Argument to length function not an array.")
    return len(seq)


@builtin("element", 2)
def element(seq: EggValue, n: EggValue) -> EggValue:
    """Element `n` of `seq`; indices start at 0 and must lie inside the array."""
    if not isinstance(seq, list):
        raise EggTypeError("Array argument to element function not an array.")
    if not is_number(n):
        raise EggTypeError("Index argument to element function not a number.")
    if isinstance(n, float):
        if not n.is_integer():
            raise EggRangeError(f"Index {format_value(n)} is not an integer")
        n = int(n)
    if not 0 <= n < len(seq):
        raise EggRangeError(f"Index {n} out of range for array of length {len(seq)}")
    return seq[n]


# -------------------------------
# Output
# -------------------------------
def make_print(output: TextIO | None = None) -> Callable[[EggValue], EggValue]:
    """Build a print builtin writing to `output` (sys.stdout at call time if None)."""

    @builtin("print", 1)
    def print_(value: EggValue) -> EggValue:
        sink = output if output is not None else sys.stdout
        sink.write(format_value(value) + "\n")
        return value

    return print_


# -------------------------------
# Registration
# -------------------------------
_OPERATORS = (add, sub, mul, div, equals, less_than, greater_than, array, length, element)


def global_bindings(output: TextIO | None = None) -> Mapping[str, EggValue]:
    """A fresh read-only mapping of every global name to its value."""
    bindings: dict[str, EggValue] = {
        "true": True,
        "false": False,
    }
    for fn in _OPERATORS:
        bindings[fn.egg_name] = fn
    print_ = make_print(output)
    bindings[print_.egg_name] = print_
    return MappingProxyType(bindings)


def register(env: Environment, output: TextIO | None = None) -> Environment:
    """Install the global bindings into `env` and return it."""
    env.update(global_bindings(output))
    return env
