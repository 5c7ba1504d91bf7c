from egg import EggValue, EvaluatorFn
from egg.errors import EggSyntaxError
from egg.types.environment import Environment
from egg.types.expression import Expression, Word
from egg.types.function import Function


def fun_form(
    args: tuple[Expression, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> EggValue:
    # fun(p1, p2, ..., body): every argument but the last names a parameter.
    # The closure captures `env`, the frame active where fun is evaluated.
    if not args:
        raise EggSyntaxError("Functions need a body")

    *params, body = args
    for p in params:
        if not isinstance(p, Word):
            raise EggSyntaxError(f"Parameter names must be words, got {p}")

    return Function(tuple(p.name for p in params), body, env)
