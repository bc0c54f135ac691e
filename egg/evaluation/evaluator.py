"""Core tree-walking evaluator for the Egg interpreter.

Dispatches on the three node kinds: literals evaluate to themselves, words
are looked up in the environment chain, and applications are either handed
to a special form (with their arguments unevaluated) or evaluated as an
ordinary call.
"""

from __future__ import annotations

from typing import Mapping

from egg import EggValue
from egg.errors import EggTypeError
from egg.evaluation.apply import apply, is_callable
from egg.evaluation.special_forms import SPECIAL_FORMS
from egg.types.environment import Environment
from egg.types.expression import Apply, Expression, Value, Word


def evaluate(
    expr: Expression, env: Environment, special_forms: Mapping | None = None
) -> EggValue:
    """Evaluate `expr` in `env`, consulting `special_forms` for keyword dispatch."""
    if special_forms is None:
        special_forms = SPECIAL_FORMS

    match expr:
        case Value(value=value):
            return value

        case Word(name=name):
            return env.lookup(name)

        case Apply(operator=Word(name=name), args=args) if name in special_forms:
            return special_forms[name](list(args), env, special_forms, evaluate)

        case Apply(operator=operator, args=args):
            op = evaluate(operator, env, special_forms)
            if not is_callable(op):
                raise EggTypeError(f"Applying a non-function: {op!r}")
            values = [evaluate(arg, env, special_forms) for arg in args]
            return apply(op, values, special_forms, evaluate)

    raise EggTypeError(f"Not an Egg expression: {expr!r}")
