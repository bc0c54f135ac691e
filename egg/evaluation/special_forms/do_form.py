from typing import Mapping

from egg import EvaluatorFn
from egg import EggValue
from egg.types.environment import Environment
from egg.types.expression import Expression


def do_form(
    args: list[Expression],
    env: Environment,
    special_forms: Mapping,
    evaluate_fn: EvaluatorFn,
) -> EggValue:
    result: EggValue = False
    for e in args:
        result = evaluate_fn(e, env, special_forms)
    return result
