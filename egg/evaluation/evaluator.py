"""Core evaluator for the Egg interpreter.

A structural recursion over the three Expression variants. Applications whose
operator is a Word naming a special form are handed to that form with their
arguments unevaluated; every other application evaluates its operator, then
its arguments left to right, then applies.
"""

from __future__ import annotations

from egg import EggValue
from egg.errors import EggTypeError
from egg.evaluation.apply import apply, is_callable
from egg.evaluation.special_forms import SPECIAL_FORMS
from egg.types.environment import Environment
from egg.types.expression import Apply, Expression, Value, Word


def evaluate(expr: Expression, env: Environment) -> EggValue:
    match expr:
        case Value(payload=payload):
            return payload

        case Word(name=name):
            return env.lookup(name)

        case Apply(operator=Word(name=name), args=args) if name in SPECIAL_FORMS:
            return SPECIAL_FORMS[name](args, env, evaluate)

        case Apply(operator=operator, args=args):
            head = evaluate(operator, env)
            if not is_callable(head):
                raise EggTypeError(f"Applying a non-function: {operator}")
            values = [evaluate(arg, env) for arg in args]
            return apply(head, values, env, evaluate)

    raise EggTypeError(f"Cannot evaluate {expr!r}: not an Expression")
