from egg import EggValue, EvaluatorFn
from egg.errors import EggSyntaxError
from egg.types.environment import Environment
from egg.types.expression import Expression


def if_form(
    args: tuple[Expression, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> EggValue:
    if len(args) != 3:
        raise EggSyntaxError(f"Wrong number of args to if: expected 3, got {len(args)}")

    cond = evaluate_fn(args[0], env)
    # Egg truthiness: only the boolean false is false; 0, "" and array() are true
    if cond is not False:
        return evaluate_fn(args[1], env)
    return evaluate_fn(args[2], env)
