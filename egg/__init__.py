# Core type aliases for Egg's data model.
# Runtime values are plain Python objects: float for numbers, str for text,
# bool for booleans and list for arrays, plus the Function and Builtin wrappers
# in egg.types.function. Code is represented by the frozen Expression nodes in
# egg.types.expression.
#
# Naming guidance:
# - Expression: use in reader/evaluator code for parsed syntax.
# - EggValue:   use in evaluator/runtime code for evaluated values.

from typing import Any, Callable

# Runtime value alias
EggValue = Any

# Evaluator function type, handed to special forms so they can evaluate sub-expressions
EvaluatorFn = Callable[..., EggValue]

__version__ = "0.3.0"


def run(*lines: str) -> EggValue:
    """Join `lines` with newlines, parse them as one program and evaluate it
    against a fresh child of a new global environment."""
    from egg.interpreter import run as _run
    return _run(*lines)


def parse(source: str):
    """Parse Egg source text into an Expression tree."""
    from egg.reader.parser import parse as _parse
    return _parse(source)


def __getattr__(name: str):
    # Lazy so that `import egg` stays cheap and free of import cycles
    if name == "Interpreter":
        from egg.interpreter import Interpreter
        return Interpreter
    raise AttributeError(f"module 'egg' has no attribute {name!r}")
