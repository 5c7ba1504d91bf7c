from egg import EggValue, EvaluatorFn
from egg.errors import EggSyntaxError
from egg.types.environment import Environment
from egg.types.expression import Expression, Word


def set_form(
    args: tuple[Expression, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> EggValue:
    if len(args) != 2:
        raise EggSyntaxError(f"set requires exactly 2 arguments: set(name, value), got {len(args)}")
    var, val_expr = args
    if not isinstance(var, Word):
        raise EggSyntaxError(f"set first argument must be a word, got {var}")
    value = evaluate_fn(val_expr, env)
    env.set(var.name, value)

    return value
