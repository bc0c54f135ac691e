"""Application engine for Egg.

Centralizes how a callable value is invoked once its arguments have been
evaluated: user-defined Functions get a fresh frame chained onto the frame
they were defined in; host builtins are called directly.
"""

from __future__ import annotations

from typing import Callable, Mapping

from egg import EggValue, EvaluatorFn
from egg.errors import EggTypeError
from egg.types.function import Function


def is_callable(value: EggValue) -> bool:
    return isinstance(value, Function) or callable(value)


def apply_function(
    fn: Function,
    args: list[EggValue],
    special_forms: Mapping,
    evaluate_fn: EvaluatorFn,
) -> EggValue:
    """Call a user-defined Function.

    The call frame is a child of `fn.env` (lexical scoping) and lives only as
    long as this call, unless a closure created in the body captures it.
    """
    if len(args) != fn.arity:
        raise EggTypeError(
            f"Wrong number of arguments: expected {fn.arity}, got {len(args)}"
        )
    frame = fn.extend_env(args)
    return evaluate_fn(fn.body, frame, special_forms)


def apply(
    head: Function | Callable[..., EggValue] | object,
    args: list[EggValue],
    special_forms: Mapping,
    evaluate_fn: EvaluatorFn,
) -> EggValue:
    """Apply either a Function or a host builtin to evaluated arguments."""
    if isinstance(head, Function):
        return apply_function(head, args, special_forms, evaluate_fn)
    elif callable(head):
        arity = getattr(head, "egg_arity", None)
        if arity is not None and len(args) != arity:
            name = getattr(head, "egg_name", getattr(head, "__name__", "builtin"))
            raise EggTypeError(
                f"Wrong number of arguments to {name}: expected {arity}, got {len(args)}"
            )
        return head(*args)
    else:
        raise EggTypeError(f"Applying a non-function: {head!r}")
