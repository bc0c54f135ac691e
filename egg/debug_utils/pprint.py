"""Textual forms of syntax trees and runtime values.

`to_source` writes a tree back out in canonical Egg syntax; `format_value` is
the representation `print` emits for a runtime value.
"""

from __future__ import annotations

from io import StringIO

from egg import EggValue
from egg.errors import EggRangeError
from egg.types.expression import Apply, Expression, Value, Word
from egg.types.function import Function


def to_source(expr: Expression) -> str:
    """Canonical source text for `expr`; reparses to an equal tree."""
    with StringIO() as buffer:
        _write_source(expr, buffer)
        return buffer.getvalue()


def _write_source(expr: Expression, buffer: StringIO) -> None:
    match expr:
        case Value(value=str() as text):
            buffer.write(f'"{text}"')
        case Value(value=number):
            buffer.write(_number_text(number))
        case Word(name=name):
            buffer.write(name)
        case Apply(operator=operator, args=args):
            _write_source(operator, buffer)
            buffer.write("(")
            for i, arg in enumerate(args):
                if i:
                    buffer.write(", ")
                _write_source(arg, buffer)
            buffer.write(")")
        case _:
            raise TypeError(f"Not an Egg expression: {expr!r}")


def format_value(value: EggValue, nested: bool = False) -> str:
    """Render a runtime value the way `print` shows it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return _number_text(value)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, str):
        return f'"{value}"' if nested else value
    if isinstance(value, list):
        return "[" + ", ".join(format_value(v, nested=True) for v in value) + "]"
    if isinstance(value, Function):
        return str(value)
    if callable(value):
        return f"<builtin {getattr(value, 'egg_name', getattr(value, '__name__', '?'))}>"
    return str(value)


def _number_text(number: int | float) -> str:
    try:
        return str(number)
    except ValueError:
        # int -> str conversion is capped at sys.get_int_max_str_digits()
        raise EggRangeError(f"Number too large to write ({number.bit_length()} bits)")
