from typing import Mapping

from egg import EvaluatorFn
from egg import EggValue
from egg.errors import EggSyntaxError
from egg.types.environment import Environment
from egg.types.expression import Expression, Word
from egg.types.function import Function


def _param_name(expr: Expression) -> str:
    if not isinstance(expr, Word):
        raise EggSyntaxError("Arg names must be words")
    return expr.name


def fun_form(
    args: list[Expression],
    env: Environment,
    special_forms: Mapping,
    evaluate_fn: EvaluatorFn,
) -> EggValue:
    """
    fun(param1, ..., paramN, body)
    The last argument is the body; the rest name the parameters. The current
    environment is captured, so the body sees bindings from where fun was
    written rather than from where the function is later called.
    """
    if not args:
        raise EggSyntaxError("Functions need a body")

    params = [_param_name(p) for p in args[:-1]]
    if len(set(params)) != len(params):
        raise EggSyntaxError(f"Duplicate parameter names in fun: {', '.join(params)}")

    return Function(params, args[-1], env)
