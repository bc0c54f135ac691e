from typing import Mapping

from egg import EvaluatorFn
from egg import EggValue
from egg.errors import EggSyntaxError
from egg.types.environment import Environment
from egg.types.expression import Expression, Word


def set_form(
    args: list[Expression],
    env: Environment,
    special_forms: Mapping,
    evaluate_fn: EvaluatorFn,
) -> EggValue:
    if len(args) != 2 or not isinstance(args[0], Word):
        raise EggSyntaxError("Bad use of set")
    target, val_expr = args
    value = evaluate_fn(val_expr, env, special_forms)
    env.set(target.name, value)

    return value
