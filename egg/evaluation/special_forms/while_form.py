from egg import EggValue, EvaluatorFn
from egg.errors import EggSyntaxError
from egg.types.environment import Environment
from egg.types.expression import Expression


def while_form(
    args: tuple[Expression, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> EggValue:
    """
    while(cond, body)
    Loops until cond evaluates to false. The loop itself has no useful value,
    so it always yields false.
    """
    if len(args) != 2:
        raise EggSyntaxError(f"Wrong number of args to while: expected 2, got {len(args)}")

    cond, body = args
    while evaluate_fn(cond, env) is not False:
        evaluate_fn(body, env)
    return False
