from egg import EggValue, EvaluatorFn
from egg.types.environment import Environment
from egg.types.expression import Expression


def do_form(
    args: tuple[Expression, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> EggValue:
    result: EggValue = False
    for e in args:
        result = evaluate_fn(e, env)
    return result
