from typing import Mapping

from egg import EvaluatorFn
from egg import EggValue
from egg.errors import EggSyntaxError
from egg.types.environment import Environment
from egg.types.expression import Expression


def while_form(
    args: list[Expression],
    env: Environment,
    special_forms: Mapping,
    evaluate_fn: EvaluatorFn,
) -> EggValue:
    if len(args) != 2:
        raise EggSyntaxError("Bad number of args to while")

    test, body = args
    while evaluate_fn(test, env, special_forms) is not False:
        evaluate_fn(body, env, special_forms)

    # The loop has no meaningful result
    return False
