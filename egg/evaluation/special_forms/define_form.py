from egg import EggValue, EvaluatorFn
from egg.errors import EggSyntaxError
from egg.types.environment import Environment
from egg.types.expression import Expression, Word


def define_form(
    args: tuple[Expression, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> EggValue:
    """
    define(name, value)
    Binds in the current frame only; a same-named binding in an outer frame is
    shadowed, not changed.
    """
    if len(args) != 2 or not isinstance(args[0], Word):
        raise EggSyntaxError("Incorrect use of define: expected define(name, value)")

    name, val_expr = args
    value = evaluate_fn(val_expr, env)
    env.define(name.name, value)
    return value
