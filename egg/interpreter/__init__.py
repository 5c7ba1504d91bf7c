from __future__ import annotations

import logging
import sys

from egg import EggValue, config
from egg.builtin.env_builtin import register
from egg.evaluation.evaluator import evaluate
from egg.reader.parser import parse
from egg.types.environment import Environment

logger = logging.getLogger(__name__)


def global_environment() -> Environment:
    """Return a new root Environment holding the constants and builtins."""
    env = Environment()
    register(env)
    logger.debug("global environment ready with %d bindings", len(env.vars))
    return env


def apply_recursion_limit() -> None:
    """Raise the host recursion limit to EGG_RECURSION_LIMIT if it is set higher."""
    limit = config.get_recursion_limit()
    if limit is not None and limit > sys.getrecursionlimit():
        logger.debug("raising recursion limit to %d", limit)
        sys.setrecursionlimit(limit)


class Interpreter:
    """
    Parses and evaluates Egg programs against a persistent session frame.
    The session frame is a child of the global environment, so definitions
    made by one `eval` call are visible to the next while the builtins stay
    untouched in the root.
    """

    def __init__(self):
        apply_recursion_limit()
        self.globals: Environment = global_environment()
        self.env: Environment = self.globals.child()

    def reset(self) -> None:
        """Drop every definition made in this session."""
        self.env = self.globals.child()

    def eval(self, code: str) -> EggValue:
        expr = parse(code)
        logger.debug("evaluating %s", expr)
        result = evaluate(expr, self.env)
        logger.debug("result: %r", result)
        return result


def run(*lines: str) -> EggValue:
    """Evaluate `lines`, joined with newlines, as one program in a fresh scope."""
    program = "\n".join(lines)
    return Interpreter().eval(program)
