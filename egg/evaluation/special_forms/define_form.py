from typing import Mapping

from egg import EvaluatorFn
from egg import EggValue
from egg.errors import EggSyntaxError
from egg.types.environment import Environment
from egg.types.expression import Expression, Word


def define_form(
    args: list[Expression],
    env: Environment,
    special_forms: Mapping,
    evaluate_fn: EvaluatorFn,
) -> EggValue:
    """
    define(name, value)
    Binds name in the innermost frame, shadowing any binding further out.
    """
    if len(args) != 2 or not isinstance(args[0], Word):
        raise EggSyntaxError("Bad use of define")

    target, val_expr = args
    value = evaluate_fn(val_expr, env, special_forms)
    env.define(target.name, value)
    return value
