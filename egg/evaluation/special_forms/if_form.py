from typing import Mapping

from egg import EvaluatorFn
from egg import EggValue
from egg.errors import EggSyntaxError
from egg.types.environment import Environment
from egg.types.expression import Expression


def if_form(
    args: list[Expression],
    env: Environment,
    special_forms: Mapping,
    evaluate_fn: EvaluatorFn,
) -> EggValue:
    """
    if(test, then, else)
    Only the value false selects the else branch; 0, "" and empty arrays are true.
    """
    if len(args) != 3:
        raise EggSyntaxError("Bad number of args to if")

    test, then_expr, else_expr = args
    if evaluate_fn(test, env, special_forms) is not False:
        return evaluate_fn(then_expr, env, special_forms)
    return evaluate_fn(else_expr, env, special_forms)
