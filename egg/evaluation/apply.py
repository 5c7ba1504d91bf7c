"""Application engine for Egg.

Centralizes function application so the evaluator and the builtins share one
set of rules:
- Function closures get a fresh frame over their captured environment; the
  argument count must match the parameter count exactly.
- Builtins check their declared arity, then receive the caller's env and the
  evaluated argument list.
- Anything else is not callable.
"""

from __future__ import annotations

from egg import EggValue, EvaluatorFn
from egg.errors import EggTypeError
from egg.types.environment import Environment
from egg.types.function import Builtin, Function


def is_callable(value: EggValue) -> bool:
    return isinstance(value, (Function, Builtin))


def apply_function(
    fn: Function,
    args: list[EggValue],
    evaluate_fn: EvaluatorFn,
) -> EggValue:
    """Apply an Egg closure to already-evaluated argument values.

    Each call builds its own frame, so recursive and nested calls never see
    each other's parameters.
    """
    new_env = fn.extend_env(args)
    return evaluate_fn(fn.body, new_env)


def apply(
    head: EggValue,
    args: list[EggValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> EggValue:
    """Apply either a Function or a Builtin; raise EggTypeError otherwise."""
    if isinstance(head, Function):
        return apply_function(head, args, evaluate_fn)
    elif isinstance(head, Builtin):
        return head(env, args)
    else:
        raise EggTypeError(f"Applying a non-function: {head!r}")
